"""Parsing of single ``goverter:`` setting lines and their values."""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass, field

PREFIX = "goverter"
DELIMITER = ":"


class SettingError(ValueError):
    """Raised when a setting value cannot be parsed."""


@dataclass
class RawLines:
    """Setting lines together with the location they were read from."""

    location: str = ""
    lines: list[str] = field(default_factory=list)


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def command(value: str) -> tuple[str, str]:
    """Split a setting line into its command and the remaining text."""
    cmd, _, rest = value.partition(" ")
    return cmd, rest


def parse_enum(empty: bool, remaining: str, *values: str) -> str:
    """Return the single value in ``remaining`` if it is one of ``values``.

    With ``empty`` set, an empty input yields the empty string.
    """
    fields = remaining.split()
    if not fields and empty:
        return ""
    if len(fields) == 1:
        if fields[0] in values:
            return fields[0]
        raise SettingError(
            f"invalid value: '{fields[0]}' must be one of: {', '.join(values)}"
        )
    raise SettingError(
        f"invalid value: expected one value but got {len(fields)}: [{' '.join(fields)}]"
    )


def parse_bool(remaining: str) -> bool:
    """Parse ``yes``/``no``; an empty value means yes."""
    return parse_enum(True, remaining, "yes", "no") in ("", "yes")


def parse_string(remaining: str) -> str:
    """Return the one whitespace separated value in ``remaining``."""
    fields = remaining.split()
    if len(fields) != 1:
        raise SettingError(
            f"must have one value but got {len(fields)}: {_quote(remaining)}"
        )
    return fields[0]


def parse_regex(remaining: str) -> re.Pattern[str]:
    """Compile the single value in ``remaining`` as a regular expression."""
    value = parse_string(remaining)
    try:
        return re.compile(value)
    except re.error as exc:
        raise SettingError(f"error parsing regexp: {exc}") from exc


def setting_lines(comment: str) -> list[str]:
    """Extract the settings of every ``goverter:`` line in a comment."""
    marker = PREFIX + DELIMITER
    result = []
    for raw in comment.split("\n"):
        line = raw.strip()
        if line.startswith(marker):
            result.append(line[len(marker):])
    return result


def parse_file(cwd: str, rest: str) -> str:
    """Parse a file setting, resolving an ``@cwd/`` prefix against ``cwd``."""
    value = parse_string(rest)
    if value.startswith("@cwd/"):
        return os.path.abspath(os.path.join(cwd, value[len("@cwd/"):]))
    return value