import re

import pytest

from goverter.enums import (
    ENUM_ACTION_ERROR,
    ENUM_ACTION_IGNORE,
    ENUM_ACTION_PANIC,
    ConfiguredTransformer,
    Enum,
    EnumConfig,
    IDPattern,
    TransformContext,
    TransformError,
    find_transformer,
    is_enum_action,
    transform_regex,
    validate_enum_action,
)
from goverter.settings import SettingError

SOURCE = Enum("a.Color", {"ColorRed": 0, "ColorBlue": 1, "ColorGreen": 2})
TARGET = Enum("b.Color", {"Red": 0, "Blue": 1})


def _ctx(config):
    return TransformContext(source=SOURCE, target=TARGET, config=config)


def test_regex_numbered_group():
    assert transform_regex(_ctx("Color(.*) $1")) == {"ColorRed": "Red", "ColorBlue": "Blue"}


def test_regex_braced_group():
    assert transform_regex(_ctx("Color(.*) ${1}")) == {"ColorRed": "Red", "ColorBlue": "Blue"}


def test_regex_named_group():
    assert transform_regex(_ctx("Color(?P<rest>.*) ${rest}")) == {
        "ColorRed": "Red",
        "ColorBlue": "Blue",
    }


def test_regex_results_exist_in_both_enums():
    result = transform_regex(_ctx("^Color ")) 
    assert set(result) <= set(SOURCE.members)
    assert set(result.values()) <= set(TARGET.members)


def test_regex_dollar_escape():
    source = Enum("a.X", {"A": 1})
    target = Enum("b.X", {"$A": 1})
    ctx = TransformContext(source=source, target=target, config="^ $$")
    assert transform_regex(ctx) == {"A": "$A"}


def test_regex_invalid_config():
    with pytest.raises(TransformError, match="expected two strings"):
        transform_regex(_ctx("onlyone"))


def test_regex_invalid_pattern():
    with pytest.raises(TransformError, match="invalid pattern"):
        transform_regex(_ctx("( x"))


def test_is_enum_action():
    assert is_enum_action("@panic")
    assert not is_enum_action("Red")


@pytest.mark.parametrize("action", [ENUM_ACTION_PANIC, ENUM_ACTION_ERROR, ENUM_ACTION_IGNORE])
def test_validate_enum_action_known(action):
    assert validate_enum_action(action) is None


def test_validate_enum_action_unknown():
    with pytest.raises(SettingError, match="invalid enum action"):
        validate_enum_action("@nope")


def test_find_transformer_default():
    assert find_transformer("regex", None) is transform_regex


def test_find_transformer_custom_wins():
    def custom(context):
        return {"ColorRed": "Red"}

    assert find_transformer("regex", {"regex": custom}) is custom
    configured = ConfiguredTransformer("regex", find_transformer("regex", {"regex": custom}), "")
    assert configured.transformer(_ctx("")) == {"ColorRed": "Red"}


def test_find_transformer_missing():
    with pytest.raises(SettingError, match="does not exist"):
        find_transformer("missing", {})


def test_id_pattern_matches():
    pattern = IDPattern(re.compile("^example/pkg$"), re.compile("Color"))
    assert pattern.matches("example/pkg", "MyColor")
    assert not pattern.matches("example/other", "MyColor")
    assert not pattern.matches("example/pkg", "Size")


def test_enum_config_excluded():
    config = EnumConfig(excludes=[IDPattern(re.compile("time"), re.compile("^Duration$"))])
    assert config.excluded("time", "Duration")
    assert not config.excluded("time", "Month")
    assert not EnumConfig().excluded("time", "Duration")