"""Typed placeholder directives and the parser that builds them from tokens."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

from localized_format.category_map import parse_inline_plural
from localized_format.scanner import Literal, Token, TokenKind, scan
from localized_format.types import CategoryMap


@dataclass(frozen=True, slots=True)
class ConversionSpec:
    """A sprintf conversion kept verbatim: flags, width, precision, conversion."""

    flags: str = ""
    width: str = ""
    precision: str | None = None
    conversion: str = "s"

    @classmethod
    def from_token(cls, token: Token) -> "ConversionSpec":
        conversion = token.group("conversion")
        if conversion is None:
            return cls()
        return cls(
            flags=token.group("flags") or "",
            width=token.group("width") or "",
            precision=token.group("precision"),
            conversion=conversion,
        )

    def __str__(self) -> str:
        precision = f".{self.precision}" if self.precision is not None else ""
        return f"%{self.flags}{self.width}{precision}{self.conversion}"


@dataclass(frozen=True, slots=True)
class PositionalFormat:
    spec: ConversionSpec
    source: str


@dataclass(frozen=True, slots=True)
class NamedFormat:
    key: str
    spec: ConversionSpec
    source: str


@dataclass(frozen=True, slots=True)
class NamedValue:
    key: str
    source: str


@dataclass(frozen=True, slots=True)
class PluralReference:
    count_key: str
    rules_key: str
    source: str


@dataclass(frozen=True, slots=True, eq=False)
class InlinePlural:
    count_key: str
    categories: CategoryMap
    source: str


Directive: TypeAlias = PositionalFormat | NamedFormat | NamedValue | PluralReference | InlinePlural
Segment: TypeAlias = Literal | Directive


def parse_token(token: Token) -> Directive:
    """Convert a scanned placeholder into its directive.

    Args:
        token: Placeholder token produced by :func:`scan`

    Returns:
        The typed directive

    Raises:
        MalformedInlinePluralError: If an inline pluralization body is invalid
    """
    if token.kind is TokenKind.POSITIONAL:
        return PositionalFormat(ConversionSpec.from_token(token), token.source)

    if token.kind is TokenKind.NAMED_FORMAT:
        return NamedFormat(token.group("key") or "", ConversionSpec.from_token(token), token.source)

    if token.kind is TokenKind.NAMED_VALUE:
        key = token.group("key") or ""
        rules_key = token.group("rules")
        if rules_key is None:
            return NamedValue(key, token.source)
        return PluralReference(key, rules_key, token.source)

    if token.kind is TokenKind.INLINE_PLURAL:
        count_key, categories = parse_inline_plural(token.group("body") or "")
        return InlinePlural(count_key, categories, token.source)

    raise ValueError(f"unknown token kind: {token.kind}")


def parse_segments(text: str) -> Iterator[Segment]:
    """Scan ``text`` and yield literals and parsed directives in order."""
    for item in scan(text):
        if isinstance(item, Literal):
            yield item
        else:
            yield parse_token(item)


class Template:
    """An immutable, parsed template.

    Parsing happens once in :meth:`parse`; iterating a template any number of
    times yields the same segments.
    """

    __slots__ = ("_source", "_segments")

    def __init__(self, source: str, segments: tuple[Segment, ...]):
        self._source = source
        self._segments = segments

    @classmethod
    def parse(cls, source: str) -> "Template":
        return cls(source, tuple(parse_segments(source)))

    @property
    def source(self) -> str:
        return self._source

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    @property
    def is_literal(self) -> bool:
        """True when the template contains no placeholders."""
        return all(isinstance(segment, Literal) for segment in self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __repr__(self) -> str:
        return f"Template({self._source!r})"
