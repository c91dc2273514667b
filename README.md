# goverter

The configuration layer of a converter generator. It reads `goverter:`
settings out of doc comments, validates setting values, resolves enum
mappings with transformers, renders readable conversion error paths and
parses the generator's command line.

The package has no dependencies beyond the standard library.

## Modules

- `goverter.settings` – `command` splits a setting line into its command
  and the rest; `parse_bool`, `parse_string`, `parse_enum`, `parse_regex`
  and `parse_file` parse setting values (`parse_file` resolves an `@cwd/`
  prefix against a working directory); `setting_lines` picks the
  `goverter:` lines out of a comment. `RawLines` holds setting lines with
  the location they came from. Invalid values raise `SettingError`.
- `goverter.comment` – `comment_to_string` turns a list of raw `//` and
  `/* */` comments into plain text. Directive lines are kept, leading
  blank lines are dropped and runs of blank lines collapse to one.
- `goverter.enums` – `EnumConfig` (with `excluded`) and `IDPattern` for
  enum settings and exclusions; `Enum` and `TransformContext` describe the
  input to a transformer; `transform_regex` is the built-in `regex`
  transformer, configured as `<pattern> <replacement>` and supporting
  `$1`, `${name}` and `$$` in the replacement; `find_transformer` looks a
  transformer up, preferring custom ones over the built-in ones;
  `is_enum_action` and `validate_enum_action` handle the actions
  `@panic`, `@error` and `@ignore`.
- `goverter.errors` – `ConversionError` carries a cause and a list of
  `Path` steps; `lift` prepends steps, and `format_error` renders them as
  aligned source and target lines followed by the cause.
- `goverter.common` – `Common` holds the settings shared by converters and
  methods; `parse_common` applies one setting such as `ignoreMissing`,
  `wrapErrors`, `enum:unknown` or `arg:context:regex` and returns whether
  it is a field setting.
- `goverter.methods` – `OutputFormat` and `FieldMapping`;
  `parse_method_map` parses `[source] target [| custom]`;
  `parse_method_arg_map` parses `$<index> <target>`; `resolve_package`,
  `default_output_file` and `package_id` work out output locations;
  `format_line_error` builds the error reported for a bad setting line.
- `goverter.cli` – `parse` turns an argument list (program name first)
  into a `Generate`, `Help` or `Version` command and raises `UsageError`
  on bad input; `usage` returns the help text. `Generate.config` is a
  `GenerateConfig` with the package patterns, working directory, build
  tags, output build constraint and the global settings given with
  `-g`/`-global`.

## Examples

```python
from goverter.settings import command, parse_bool, setting_lines

setting_lines("goverter:converter\nsome text\ngoverter:map A B\n")
# ['converter', 'map A B']

command("map A B")
# ('map', 'A B')

parse_bool("")     # True
parse_bool("no")   # False
```

```python
from goverter.cli import Generate, Help, UsageError, parse

isinstance(parse(["goverter", "help"]), Help)                 # True
cmd = parse(["goverter", "gen", "-g", "ignoreMissing", "./models"])
isinstance(cmd, Generate)                                     # True
cmd.config.package_patterns                                   # ['./models']
cmd.config.global_settings.lines                              # ['ignoreMissing']

try:
    parse(["goverter", "gen"])
except UsageError as err:
    print(err)   # starts with "Error: missing PATTERN"
```

```python
from goverter.enums import is_enum_action, validate_enum_action

is_enum_action("@panic")        # True
validate_enum_action("@panic")  # accepted
validate_enum_action("@oops")   # raises SettingError
```

## What it does not do

This package parses and validates configuration only. It does not load
source packages or their type information, does not build converter
implementations and does not write generated files. `cli.parse` returns
a `Generate` command describing a run, but nothing in the package
carries it out, and no console command is installed.