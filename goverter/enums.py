"""Enum configuration, enum transformers and enum actions."""

from __future__ import annotations

import json
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from goverter.settings import SettingError

ENUM_ACTION_PANIC = "@panic"
ENUM_ACTION_ERROR = "@error"
ENUM_ACTION_IGNORE = "@ignore"


@dataclass
class IDPattern:
    """A pair of patterns matched against a package path and a name."""

    path: re.Pattern[str]
    name: re.Pattern[str]

    def matches(self, path: str, name: str) -> bool:
        return bool(self.path.search(path) and self.name.search(name))


@dataclass
class EnumConfig:
    """Enum related settings."""

    unknown: str = ""
    enabled: bool = False
    excludes: list[IDPattern] = field(default_factory=list)

    def excluded(self, path: str, name: str) -> bool:
        """Return True when any exclude pattern matches."""
        return any(pattern.matches(path, name) for pattern in self.excludes)


@dataclass
class Enum:
    """A named type with its constant members."""

    type_name: str
    members: dict[str, Any] = field(default_factory=dict)


@dataclass
class TransformContext:
    """Input handed to an enum transformer."""

    source: Enum
    target: Enum
    config: str = ""


class TransformError(ValueError):
    """Raised by a transformer when its configuration is invalid."""


Transformer = Callable[[TransformContext], Mapping[str, str]]


@dataclass
class ConfiguredTransformer:
    """A transformer together with the config it was set up with."""

    name: str
    transformer: Transformer
    config: str = ""


_WORD = re.compile(r"[A-Za-z0-9_]+")


def _expand(template: str, match: re.Match[str]) -> str:
    """Expand ``$1``, ``${name}`` and ``$$`` references in ``template``."""
    out: list[str] = []
    pos = 0
    while pos < len(template):
        dollar = template.find("$", pos)
        if dollar < 0:
            out.append(template[pos:])
            break
        out.append(template[pos:dollar])
        pos = dollar + 1
        if template.startswith("$", pos):
            out.append("$")
            pos += 1
            continue
        name = ""
        if template.startswith("{", pos):
            word = _WORD.match(template, pos + 1)
            if word and template.startswith("}", word.end()):
                name = word.group()
                pos = word.end() + 1
        else:
            word = _WORD.match(template, pos)
            if word:
                name = word.group()
                pos = word.end()
        if not name:
            out.append("$")
            continue
        out.append(_group(match, name))
    return "".join(out)


def _group(match: re.Match[str], name: str) -> str:
    if name.isdigit():
        index = int(name)
        if index > match.re.groups:
            return ""
        return match.group(index) or ""
    if name in match.re.groupindex:
        return match.group(name) or ""
    return ""


def transform_regex(context: TransformContext) -> dict[str, str]:
    """Map source members by regex replacement onto existing target members.

    The config is ``<pattern> <replacement>``.
    """
    parts = context.config.split(" ")
    if len(parts) != 2:
        raise TransformError("invalid config, expected two strings separated by space")
    raw_pattern, template = parts
    try:
        pattern = re.compile(raw_pattern)
    except re.error as exc:
        raise TransformError(f"invalid pattern {json.dumps(raw_pattern)}: {exc}") from exc

    mapping = {}
    for key in context.source.members:
        target_key = pattern.sub(lambda m: _expand(template, m), key)
        if target_key in context.target.members:
            mapping[key] = target_key
    return mapping


DEFAULT_TRANSFORMERS: dict[str, Transformer] = {"regex": transform_regex}


def is_enum_action(value: str) -> bool:
    """Return True when ``value`` names an action such as ``@panic``."""
    return value.startswith("@")


def validate_enum_action(value: str) -> None:
    """Raise SettingError unless ``value`` is a known enum action."""
    if value not in (ENUM_ACTION_PANIC, ENUM_ACTION_ERROR, ENUM_ACTION_IGNORE):
        raise SettingError(
            f"invalid enum action {json.dumps(value)}, must be one of "
            f'"{ENUM_ACTION_PANIC}", "{ENUM_ACTION_IGNORE}", or "{ENUM_ACTION_ERROR}"'
        )


def find_transformer(name: str, custom: Mapping[str, Transformer] | None) -> Transformer:
    """Look up a transformer, preferring ``custom`` over the built-in ones."""
    if custom and name in custom:
        return custom[name]
    if name in DEFAULT_TRANSFORMERS:
        return DEFAULT_TRANSFORMERS[name]
    raise SettingError(f"transformer {json.dumps(name)} does not exist")