"""Conversion errors with a source/target path rendered as a diagram."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Path:
    """One step of the path inside an error message."""

    prefix: str = ""
    source_id: str = ""
    target_id: str = ""
    source_type: str = ""
    target_type: str = ""


class ConversionError(Exception):
    """An error raised while building a conversion."""

    def __init__(self, cause: str) -> None:
        super().__init__(cause)
        self.cause = cause
        self.path: list[Path] = []

    def lift(self, *paths: Path) -> ConversionError:
        """Prepend ``paths`` to the error path and return the error."""
        self.path = list(paths) + self.path
        return self

    def __str__(self) -> str:
        return format_error(self) if self.path else self.cause


def format_error(error: ConversionError) -> str:
    """Render the error path as aligned source and target lines plus the cause."""
    if not error.path:
        raise ValueError("cannot format an error without a path")

    source_paths = sum(1 for p in error.path if p.source_type)
    target_paths = sum(1 for p in error.path if p.target_type)

    end = 2 + (source_paths + target_paths) * 2 - 1
    source_line = source_paths * 2
    target_line = source_line + 1
    lines = [""] * (end + 1)

    source_type_line = 0
    target_type_line = end
    for path in error.path:
        padding = max(len(path.source_id), len(path.target_id))
        indent = " " * len(path.prefix)
        bar = indent + "|" + " " * (padding - 1)

        if path.source_type:
            lines[source_type_line] += indent + "| " + path.source_type
            for j in range(source_type_line + 1, source_line):
                lines[j] += bar
            source_type_line += 2
        else:
            for j in range(source_type_line, source_line):
                lines[j] += " " * (len(path.prefix) + padding)

        lines[source_line] += path.prefix + path.source_id + " " * (padding - len(path.source_id))

        if path.target_type:
            lines[target_line] += path.prefix + path.target_id + " " * (padding - len(path.target_id))
            for j in range(target_type_line - 1, target_line, -1):
                lines[j] += bar
            lines[target_type_line] += indent + "| " + path.target_type
            target_type_line -= 2
        else:
            for j in range(target_type_line, target_line - 1, -1):
                lines[j] += " " * (len(path.prefix) + padding)

    return "".join(line.strip() + "\n" for line in lines) + "\n" + error.cause