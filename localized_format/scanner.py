"""Split a template string into literal text and placeholder tokens.

Four placeholder syntaxes are recognized, left to right and non-overlapping:

* ``%d``, ``%.2f``, ``%- 04d`` ... -- sprintf conversions
* ``%<key>`` with an optional sprintf tail, e.g. ``%<num>.2f``
* ``%<{ "count": {"one": "...", "other": "..."} }>`` -- inline pluralization
* ``%{key}`` and ``%{count_key:rules_key}``

``%%`` is unescaped to a single ``%``. Any other ``%`` is plain text.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Iterator
from dataclasses import dataclass


SPRINTF_TAIL = (
    r"(?P<flags>[-+ 0#]*)(?P<width>\d+)?(?:\.(?P<precision>\d*))?"
    r"(?P<conversion>[diouxXeEfFgGcs])"
)

_POSITIONAL_RE = re.compile("%" + SPRINTF_TAIL)
_NAMED_FORMAT_RE = re.compile(r"%<(?P<key>\w+)>(?:" + SPRINTF_TAIL + ")?")
_NAMED_VALUE_RE = re.compile(r"%\{(?P<key>\w+)(?::(?P<rules>\w+))?\}")


class TokenKind(enum.Enum):
    POSITIONAL = "positional"
    NAMED_FORMAT = "named_format"
    NAMED_VALUE = "named_value"
    INLINE_PLURAL = "inline_plural"


@dataclass(frozen=True, slots=True)
class Literal:
    """Verbatim text between placeholders."""

    text: str


@dataclass(frozen=True, slots=True)
class Token:
    """A recognized placeholder span, not yet interpreted."""

    kind: TokenKind
    source: str
    groups: tuple[tuple[str, str | None], ...] = ()

    def group(self, name: str) -> str | None:
        for key, value in self.groups:
            if key == name:
                return value
        return None


def _find_closing_brace(text: str, start: int) -> int | None:
    """Return the index just past the brace closing ``text[start]``.

    Braces inside JSON string literals are ignored, so templates embedded in
    the object may contain ``{`` and ``}`` freely.
    """
    depth = 0
    in_string = False
    escaped = False

    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index + 1

    return None


def _match_at(text: str, pos: int) -> Token | None:
    """Try every placeholder form at ``text[pos]``, which is a ``%``."""
    if text.startswith("%<{", pos):
        end = _find_closing_brace(text, pos + 2)
        if end is not None and text.startswith(">", end):
            return Token(
                TokenKind.INLINE_PLURAL,
                text[pos:end + 1],
                (("body", text[pos + 2:end]),),
            )

    for kind, pattern in (
        (TokenKind.NAMED_FORMAT, _NAMED_FORMAT_RE),
        (TokenKind.NAMED_VALUE, _NAMED_VALUE_RE),
        (TokenKind.POSITIONAL, _POSITIONAL_RE),
    ):
        match = pattern.match(text, pos)
        if match:
            return Token(kind, match.group(0), tuple(match.groupdict().items()))

    return None


def scan(text: str) -> Iterator[Literal | Token]:
    """Lazily yield the segments of ``text``.

    Adjacent literal text, including unescaped ``%%`` and unrecognized ``%``
    sequences, is merged into a single :class:`Literal`.

    Args:
        text: Template source

    Returns:
        Iterator over :class:`Literal` and :class:`Token` segments
    """
    pending: list[str] = []
    pos = 0
    length = len(text)

    while pos < length:
        percent = text.find("%", pos)
        if percent < 0:
            pending.append(text[pos:])
            break

        pending.append(text[pos:percent])

        if text.startswith("%%", percent):
            pending.append("%")
            pos = percent + 2
            continue

        token = _match_at(text, percent)
        if token is None:
            pending.append("%")
            pos = percent + 1
            continue

        if any(pending):
            yield Literal("".join(pending))
        pending = []
        yield token
        pos = percent + len(token.source)

    if any(pending):
        yield Literal("".join(pending))
