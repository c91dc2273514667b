"""Settings shared by converters and their methods."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from goverter.enums import EnumConfig, is_enum_action, validate_enum_action
from goverter.settings import SettingError, parse_bool, parse_regex, parse_string


@dataclass
class Common:
    """Settings that can be defined globally, per converter and per method."""

    field_settings: list[str] = field(default_factory=list)
    wrap_errors: bool = False
    wrap_errors_using: str = ""
    ignore_unexported: bool = False
    ignore_basic_zero_value_field: bool = False
    ignore_struct_zero_value_field: bool = False
    ignore_nillable_zero_value_field: bool = False
    match_ignore_case: bool = False
    ignore_missing: bool = False
    skip_copy_same_type: bool = False
    use_zero_value_on_pointer_inconsistency: bool = False
    use_underlying_type_methods: bool = False
    default_update: bool = False
    arg_context_regex: re.Pattern[str] | None = None
    enum: EnumConfig = field(default_factory=EnumConfig)


_BOOL_SETTINGS = {
    "ignoreUnexported": ("ignore_unexported", True),
    "update:ignoreZeroValueField:basic": ("ignore_basic_zero_value_field", False),
    "update:ignoreZeroValueField:struct": ("ignore_struct_zero_value_field", False),
    "update:ignoreZeroValueField:nillable": ("ignore_nillable_zero_value_field", False),
    "default:update": ("default_update", False),
    "matchIgnoreCase": ("match_ignore_case", True),
    "ignoreMissing": ("ignore_missing", True),
    "skipCopySameType": ("skip_copy_same_type", False),
    "useZeroValueOnPointerInconsistency": ("use_zero_value_on_pointer_inconsistency", False),
    "useUnderlyingTypeMethods": ("use_underlying_type_methods", False),
}


def parse_common(common: Common, cmd: str, rest: str) -> bool:
    """Apply one common setting to ``common``.

    Returns True when the setting is a field setting. Raises SettingError
    for unknown or invalid settings.
    """
    if cmd in _BOOL_SETTINGS:
        attribute, field_setting = _BOOL_SETTINGS[cmd]
        setattr(common, attribute, parse_bool(rest))
        return field_setting

    if cmd == "wrapErrors":
        if common.wrap_errors_using:
            raise SettingError("cannot be used in combination with wrapErrorsUsing")
        common.wrap_errors = parse_bool(rest)
    elif cmd == "wrapErrorsUsing":
        if common.wrap_errors:
            raise SettingError("cannot be used in combination with wrapErrors")
        common.wrap_errors_using = parse_string(rest)
    elif cmd == "update:ignoreZeroValueField":
        value = parse_bool(rest)
        common.ignore_basic_zero_value_field = value
        common.ignore_struct_zero_value_field = value
        common.ignore_nillable_zero_value_field = value
        return True
    elif cmd == "enum":
        common.enum.enabled = parse_bool(rest)
    elif cmd == "arg:context:regex":
        common.arg_context_regex = parse_regex(rest)
    elif cmd == "enum:unknown":
        value = parse_string(rest)
        if is_enum_action(value):
            validate_enum_action(value)
        common.enum.unknown = value
    elif cmd == "":
        raise SettingError("missing setting key")
    else:
        raise SettingError(f"unknown setting: {cmd}")
    return False