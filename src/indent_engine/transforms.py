"""Block indent and dedent transforms applied line by line."""

from __future__ import annotations

import re

INDENT_UNIT = "  "

_DEDENT_PATTERN = re.compile(r"^\s\s")


def indent_text(text: str) -> str:
    """Prefix every line, empty ones included, with one indent unit."""

    return "\n".join(f"{INDENT_UNIT}{line}" for line in text.split("\n"))


def dedent_text(text: str) -> str:
    """Strip exactly two leading whitespace characters from each line.

    A line needs two whitespace characters at its start to be touched; a
    single leading space or tab is left alone.
    """

    return "\n".join(_DEDENT_PATTERN.sub("", line, count=1) for line in text.split("\n"))


__all__ = ["INDENT_UNIT", "indent_text", "dedent_text"]
