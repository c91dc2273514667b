import pytest

from goverter.errors import ConversionError, Path, format_error


def test_single_path_diagram():
    err = ConversionError("boom").lift(
        Path(prefix=".", source_id="A", source_type="int", target_id="B", target_type="string")
    )
    assert format_error(err) == "| int\n|\n.A\n.B\n|\n| string\n\nboom"


def test_str_uses_format():
    err = ConversionError("boom").lift(Path(prefix=".", source_id="A", source_type="int"))
    assert str(err) == format_error(err)
    assert str(err).endswith("\n\nboom")


def test_str_without_path_is_cause():
    assert str(ConversionError("plain cause")) == "plain cause"


def test_format_without_path_raises():
    with pytest.raises(ValueError):
        format_error(ConversionError("x"))


def test_lift_prepends_in_order():
    first = Path(source_id="first")
    second = Path(source_id="second")
    third = Path(source_id="third")
    err = ConversionError("c").lift(third).lift(first, second)
    assert [p.source_id for p in err.path] == ["first", "second", "third"]


def test_lift_returns_same_error():
    err = ConversionError("c")
    assert err.lift(Path()) is err


def test_line_count_matches_paths():
    err = ConversionError("cause").lift(
        Path(prefix=".", source_id="A", source_type="x", target_id="A", target_type="y"),
        Path(prefix=".", source_id="B", source_type="z"),
    )
    body, cause = format_error(err).split("\n\n")
    assert cause == "cause"
    # two header lines plus two lines per typed path entry
    assert len(body.split("\n")) == 2 + 3 * 2


def test_ids_appear_in_source_and_target_lines():
    err = ConversionError("c").lift(
        Path(prefix=".", source_id="Name", source_type="string", target_id="Title", target_type="string"),
    )
    lines = format_error(err).split("\n")
    assert ".Name" in lines
    assert ".Title" in lines