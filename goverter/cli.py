"""Command line parsing for the converter generator."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from goverter.enums import Transformer
from goverter.settings import RawLines

GLOBAL_LOCATION = "command line (-g, -global)"


class UsageError(ValueError):
    """Raised when the command line is invalid; the message holds the usage."""


class _HelpRequested(Exception):
    """Raised by the flag parser when -h or -help was given and is not defined."""


class _FlagError(Exception):
    """Raised by the flag parser for malformed or unknown flags."""


@dataclass
class GenerateConfig:
    """Everything needed to run a generation."""

    package_patterns: list[str] = field(default_factory=list)
    working_dir: str = ""
    build_tags: str = "goverter"
    output_build_constraint: str = "!goverter"
    enum_transformers: dict[str, Transformer] = field(default_factory=dict)
    global_settings: RawLines = field(default_factory=RawLines)


class Command:
    """A parsed command line command."""


@dataclass
class Generate(Command):
    """Generate converters with the given configuration."""

    config: GenerateConfig


@dataclass
class Help(Command):
    """Print the usage text."""

    usage: str


@dataclass
class Version(Command):
    """Print version information."""


def _parse_flags(
    args: Sequence[str],
    defined: set[str],
) -> tuple[list[tuple[str, str]], list[str]]:
    """Parse single-dash or double-dash flags that all take a value.

    Parsing stops at the first non-flag argument or after ``--``. Returns the
    (name, value) pairs in order and the remaining arguments.
    """
    remaining = list(args)
    values: list[tuple[str, str]] = []
    while remaining:
        arg = remaining[0]
        if len(arg) < 2 or not arg.startswith("-"):
            break
        minuses = 1
        if arg[1] == "-":
            minuses = 2
            if len(arg) == 2:
                remaining.pop(0)
                break
        name = arg[minuses:]
        if not name or name[0] in "-=":
            raise _FlagError(f"bad flag syntax: {arg}")
        remaining.pop(0)

        has_value = False
        value = ""
        eq = name.find("=", 1)
        if eq > 0:
            name, value = name[:eq], name[eq + 1:]
            has_value = True

        if name not in defined:
            if name in ("help", "h"):
                raise _HelpRequested()
            raise _FlagError(f"flag provided but not defined: -{name}")

        if not has_value and remaining:
            value = remaining.pop(0)
            has_value = True
        if not has_value:
            raise _FlagError(f"flag needs an argument: -{name}")
        values.append((name, value))
    return values, remaining


def parse(args: Sequence[str]) -> Command:
    """Parse the full argument list, program name first.

    Raises UsageError when the arguments are invalid.
    """
    if not args:
        raise _usage_error("invalid args", "unknown")
    cmd = args[0]

    try:
        _, sub_args = _parse_flags(args[1:], set())
    except _HelpRequested:
        return Help(usage=usage(cmd))
    except _FlagError as exc:
        raise _usage_error(str(exc), cmd) from None

    if not sub_args:
        raise _usage_error("missing command", cmd)

    name, rest = sub_args[0], sub_args[1:]
    if name == "gen":
        return _parse_gen(cmd, rest)
    if name == "version":
        return Version()
    if name == "help":
        return Help(usage=usage(cmd))
    raise _usage_error(f"unknown command {name}", cmd)


def _parse_gen(cmd: str, args: Sequence[str]) -> Command:
    defined = {"global", "g", "build-tags", "output-constraint", "cwd"}
    try:
        flags, patterns = _parse_flags(args, defined)
    except _HelpRequested:
        return Help(usage=usage(cmd))
    except _FlagError as exc:
        raise _usage_error(str(exc), cmd) from None

    if not patterns:
        raise _usage_error("missing PATTERN", cmd)

    config = GenerateConfig(
        package_patterns=patterns,
        global_settings=RawLines(location=GLOBAL_LOCATION),
    )
    for name, value in flags:
        if name in ("global", "g"):
            config.global_settings.lines.append(value)
        elif name == "build-tags":
            config.build_tags = value
        elif name == "output-constraint":
            config.output_build_constraint = value
        elif name == "cwd":
            config.working_dir = value
    return Generate(config=config)


def _usage_error(message: str, cmd: str) -> UsageError:
    return UsageError(f"Error: {message}\n{usage(cmd)}")


def usage(cmd: str) -> str:
    """Return the usage text for the program named ``cmd``."""
    return f"""Usage:
  {cmd} gen [OPTIONS] PACKAGE...
  {cmd} help
  {cmd} version

PACKAGE(s):
  Define the import paths goverter will use to search for converter interfaces.
  You can define multiple packages and use the special ... wildcard pattern to
  select multiple packages.

OPTIONS:
  -build-tags [tags]: (default: goverter)
      a comma-separated list of additional build tags to consider satisfied
      during the loading of conversion interfaces.
      Can be disabled by supplying an empty string.

  -cwd [value]:
      set the working directory

  -g [value], -global [value]:
      apply settings to all defined converters. For a list of available
      settings see the settings reference of the documentation.

  -output-constraint [constraint]: (default: !goverter)
      A build constraint added to all files generated by goverter.
      Can be disabled by supplying an empty string.

Examples:
  {cmd} gen ./example/simple ./example/complex
  {cmd} gen ./example/...
  {cmd} gen example.com/project/example/simple
  {cmd} gen -g 'ignoreMissing no' -g 'skipCopySameType' ./simple

Documentation:
  Full documentation is available in the project reference."""