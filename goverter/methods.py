"""Method and converter level setting values and output path helpers."""

from __future__ import annotations

import enum
import json
import os
from dataclasses import dataclass
from typing import Any

from goverter.settings import RawLines, SettingError, command

_DOTS_ERROR = 'the mapping target {} must be a field name but was a path.\nDots "." are not allowed.'
_DIGITS = frozenset("0123456789")


class OutputFormat(str, enum.Enum):
    """The shape of the generated converter."""

    STRUCT = "struct"
    VARIABLE = "assign-variable"
    FUNCTION = "function"


@dataclass
class FieldMapping:
    """How one target field is filled."""

    source: str = ""
    function: Any = None
    ignore: bool = False
    arg_index: int = 0


def parse_method_map(remaining: str) -> tuple[str, str, str]:
    """Parse ``[source] target [| custom]`` into (source, target, custom)."""
    head, sep, tail = remaining.partition("|")
    custom = tail.strip() if sep else ""

    fields = head.split()
    if len(fields) == 0:
        raise SettingError("missing target field")
    if len(fields) == 1:
        source, target = "", fields[0]
    elif len(fields) == 2:
        source, target = fields
    else:
        raise SettingError(
            f"too many fields expected at most 2 fields got {len(fields)}: {remaining}"
        )
    if "." in target:
        raise SettingError(_DOTS_ERROR.format(json.dumps(target)))
    return source, target, custom


def parse_method_arg_map(remaining: str) -> tuple[int, str]:
    """Parse ``$<index> <target>`` into (index, target)."""
    fields = remaining.split()
    if len(fields) != 2:
        raise SettingError(
            "argmap requires exactly 2 fields: $<index> <target_field>, "
            f"got {len(fields)}: {remaining}"
        )
    arg, target = fields
    if not arg.startswith("$"):
        raise SettingError(f"argument index must start with '$', got: {arg}")
    digits = arg[1:]
    if not digits:
        raise SettingError("missing argument index after '$'")
    if not set(digits) <= _DIGITS:
        raise SettingError(f"invalid argument index: {digits}, must be a number")
    index = int(digits)
    if index < 1:
        raise SettingError(f"argument index must be >= 1, got: {index}")
    if "." in target:
        raise SettingError(_DOTS_ERROR.format(json.dumps(target)))
    return index, target


def _dirname(path: str) -> str:
    return os.path.dirname(os.path.normpath(path)) or "."


def resolve_package(source_file_name: str, source_package: str, target_file: str) -> str:
    """Return the package path of ``target_file`` relative to ``source_package``.

    Raises ValueError when an absolute target cannot be made relative to the
    directory of the source file.
    """
    relative = target_file
    if os.path.isabs(target_file):
        base = os.path.dirname(source_file_name)
        if not os.path.isabs(base):
            raise ValueError(f"can't make {target_file} relative to {base}")
        relative = os.path.relpath(target_file, base)
    joined = os.path.join(source_package, relative) if source_package else relative
    return _dirname(joined).replace(os.sep, "/")


def default_output_file(name: str) -> str:
    """Return ``<stem>.gen<ext>`` for the base name of ``name``."""
    base = os.path.basename(name.rstrip("/" + os.sep)) or "."
    dot = base.rfind(".")
    if dot < 0:
        return base + ".gen"
    return base[:dot] + ".gen" + base[dot:]


def package_id(output_package_path: str, output_package_name: str) -> str:
    """Identify an output package by path and, if set, its name."""
    if not output_package_name:
        return output_package_path
    return f"{output_package_path}:{output_package_name}"


def format_line_error(lines: RawLines, target: str, value: str, error: Exception) -> SettingError:
    """Build the error reported for a setting line that failed to parse."""
    cmd, _ = command(value)
    return SettingError(
        f"error parsing 'goverter:{cmd}' at\n    {lines.location}\n    {target}\n\n{error}"
    )