"""Conversion of raw comment texts into plain documentation text."""

from __future__ import annotations

from collections.abc import Iterable

_WHITESPACE = " \t\n\r"


def _strip_markers(text: str) -> str:
    if text[1] == "/":
        text = text[2:]
        if text.startswith(" "):
            text = text[1:]
        return text
    if text[1] == "*":
        return text[2:-2]
    return text


def comment_to_string(comments: Iterable[str] | None) -> str:
    """Join raw ``//`` and ``/* */`` comments into text, keeping directives.

    Leading blank lines are dropped and runs of blank lines collapse to one.
    """
    if comments is None:
        return ""

    lines = [
        line.rstrip(_WHITESPACE)
        for text in comments
        for line in _strip_markers(text).split("\n")
    ]

    kept: list[str] = []
    for line in lines:
        if line or (kept and kept[-1]):
            kept.append(line)

    if kept and kept[-1]:
        kept.append("")
    return "\n".join(kept)