"""Line classification for C# model files.

The structural parser never builds a syntax tree. Every raw line is
sorted into one :class:`LineKind` by :func:`classify_line`, and the
parser reacts to the kind. Keywords match as whole words only, bounded by
whitespace or the line edges, so an identifier like ``classroom`` is never
mistaken for the ``class`` keyword.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

COMMENT_MARKER = "//"

# Access and storage modifiers dropped before reading type and name
MODIFIERS = frozenset({"public", "static", "const", "readonly", "virtual"})

_DIRECTIVE = re.compile(r"^#\w+")
_COMMA = re.compile(r"\s*,\s*")
_ENUMERATOR_FORBIDDEN = set("{}[]")


class LineKind(Enum):
    """What a single source line declares."""

    BLANK = "blank"
    COMMENT = "comment"
    DIRECTIVE = "directive"
    MALFORMED_DECLARATION = "malformed_declaration"
    ENUM_HEADER = "enum_header"
    CLASS_HEADER = "class_header"
    PROPERTY = "property"
    ENUMERATOR = "enumerator"
    OTHER = "other"


@dataclass(frozen=True)
class ClassifiedLine:
    """A line with its kind, comment-free text and modifier-free tokens."""

    kind: LineKind
    text: str
    tokens: tuple[str, ...] = ()


def strip_comment(line: str) -> str:
    """Truncate a line at its first line comment marker."""
    index = line.find(COMMENT_MARKER)
    if index == -1:
        return line
    return line[:index]


def is_directive(line: str) -> bool:
    """True for preprocessor lines such as ``#region`` or ``#if DEBUG``."""
    return _DIRECTIVE.match(line.lstrip()) is not None


def strict_contains(line: str, word: str) -> bool:
    """True when ``word`` occurs bounded by whitespace or the line edges."""
    return re.search(rf"(^|\s){re.escape(word)}(\s|$)", line) is not None


def explode_line(line: str) -> list[str]:
    """Split a line into tokens with modifiers removed.

    Whitespace around commas is collapsed first so that generic argument
    lists like ``Dictionary<string, int>`` stay a single token.
    """
    collapsed = _COMMA.sub(",", line)
    return [token for token in collapsed.split() if token not in MODIFIERS]


def is_constructor(line: str) -> bool:
    """True for parenthesised lines that are not object constructions."""
    return not strict_contains(line, "new") and "(" in line and ")" in line


def is_enumerator(line: str) -> bool:
    """True for lines that can only be an enum member inside an enum body."""
    return (
        bool(line.strip())
        and not strict_contains(line, "enum")
        and not strict_contains(line, "namespace")
        and not strict_contains(line, "using")
        and not is_constructor(line)
        and not any(char in _ENUMERATOR_FORBIDDEN for char in line)
    )


def classify_line(raw: str, enum_body: bool = False) -> ClassifiedLine:
    """Classify one raw source line.

    Args:
        raw: Line as read from the file.
        enum_body: Classify for the enum member scan, where any line that
            is not a keyword, constructor or brace line is an enumerator.

    Returns:
        The classified line. ``tokens`` is only filled for kinds the
        parser reads further.
    """
    text = strip_comment(raw)

    if not text.strip():
        kind = LineKind.COMMENT if text != raw else LineKind.BLANK
        return ClassifiedLine(kind, text)

    if is_directive(text):
        return ClassifiedLine(LineKind.DIRECTIVE, text)

    has_enum = strict_contains(text, "enum")
    has_class = strict_contains(text, "class")

    if (has_enum or has_class) and "{" in text:
        return ClassifiedLine(LineKind.MALFORMED_DECLARATION, text)

    if enum_body:
        if is_enumerator(text):
            return ClassifiedLine(LineKind.ENUMERATOR, text, tuple(explode_line(text)))
        return ClassifiedLine(LineKind.OTHER, text)

    if has_enum:
        return ClassifiedLine(LineKind.ENUM_HEADER, text, tuple(explode_line(text)))

    if has_class and ":" in text:
        return ClassifiedLine(LineKind.CLASS_HEADER, text, tuple(explode_line(text)))

    if strict_contains(text, "public") and not has_class and not is_constructor(text):
        return ClassifiedLine(LineKind.PROPERTY, text, tuple(explode_line(text)))

    return ClassifiedLine(LineKind.OTHER, text)


__all__ = [
    "ClassifiedLine",
    "LineKind",
    "MODIFIERS",
    "classify_line",
    "explode_line",
    "is_constructor",
    "is_directive",
    "is_enumerator",
    "strict_contains",
    "strip_comment",
]
