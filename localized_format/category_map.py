"""Recursive-descent parser for inline pluralization bodies.

The body of ``%<{ "count_key": { "one": "...", "other": "..." } }>`` is a JSON
object with exactly one member whose value maps category tags to templates.
Only that shape is accepted; anything else is reported as malformed.
"""

from __future__ import annotations

from types import MappingProxyType

from localized_format.errors import MalformedInlinePluralError
from localized_format.types import CategoryMap


_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_WHITESPACE = " \t\n\r"


class CategoryMapParser:
    """Parser for the JSON body of an inline pluralization placeholder."""

    __slots__ = ("_text", "_pos")

    def __init__(self, text: str):
        self._text = text
        self._pos = 0

    @classmethod
    def parse(cls, body: str) -> tuple[str, CategoryMap]:
        """Parse an inline pluralization body.

        Args:
            body: The balanced ``{...}`` span between ``%<`` and ``>``

        Returns:
            Tuple of the count key and a read-only category -> template mapping

        Raises:
            MalformedInlinePluralError: If the body is not a single-member
                object whose value is an object of strings
        """
        parser = cls(body)
        parser._skip_whitespace()
        result = parser._parse_root()
        parser._skip_whitespace()
        if parser._pos != len(body):
            parser._fail("unexpected trailing content")
        return result

    def _fail(self, reason: str):
        raise MalformedInlinePluralError(self._text, reason, self._pos)

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _skip_whitespace(self):
        while self._peek() and self._peek() in _WHITESPACE:
            self._pos += 1

    def _expect(self, char: str):
        self._skip_whitespace()
        if self._peek() != char:
            self._fail(f"expected {char!r}")
        self._pos += 1

    def _parse_root(self) -> tuple[str, CategoryMap]:
        self._expect("{")
        self._skip_whitespace()
        if self._peek() == "}":
            self._fail("missing count key")

        count_key = self._parse_string()
        self._expect(":")
        categories = self._parse_categories()

        self._skip_whitespace()
        if self._peek() == ",":
            self._fail("more than one count key")
        self._expect("}")
        return count_key, categories

    def _parse_categories(self) -> CategoryMap:
        self._expect("{")
        categories: dict[str, str] = {}

        self._skip_whitespace()
        if self._peek() == "}":
            self._pos += 1
            return MappingProxyType(categories)

        while True:
            self._skip_whitespace()
            tag = self._parse_string()
            self._expect(":")
            self._skip_whitespace()
            if self._peek() != '"':
                self._fail(f"template for category {tag!r} must be a string")
            categories[tag] = self._parse_string()

            self._skip_whitespace()
            if self._peek() == ",":
                self._pos += 1
                continue
            self._expect("}")
            return MappingProxyType(categories)

    def _parse_string(self) -> str:
        """Parse a JSON string literal starting at the cursor."""
        self._skip_whitespace()
        if self._peek() != '"':
            self._fail("expected a string")
        self._pos += 1

        chars: list[str] = []
        while True:
            char = self._peek()
            if not char:
                self._fail("unterminated string")
            self._pos += 1

            if char == '"':
                return "".join(chars)
            if char != "\\":
                chars.append(char)
                continue

            escape = self._peek()
            self._pos += 1
            if escape in _ESCAPES:
                chars.append(_ESCAPES[escape])
            elif escape == "u":
                chars.append(self._parse_unicode_escape())
            else:
                self._fail(f"invalid escape \\{escape}")

    def _parse_unicode_escape(self) -> str:
        digits = self._text[self._pos:self._pos + 4]
        if len(digits) != 4 or any(c not in "0123456789abcdefABCDEF" for c in digits):
            self._fail("invalid \\u escape")
        self._pos += 4
        code = int(digits, 16)

        # Surrogate pair
        if 0xD800 <= code <= 0xDBFF and self._text.startswith("\\u", self._pos):
            low_digits = self._text[self._pos + 2:self._pos + 6]
            if len(low_digits) == 4 and all(c in "0123456789abcdefABCDEF" for c in low_digits):
                low = int(low_digits, 16)
                if 0xDC00 <= low <= 0xDFFF:
                    self._pos += 6
                    return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00))
        return chr(code)


def parse_inline_plural(body: str) -> tuple[str, CategoryMap]:
    """Shortcut for :meth:`CategoryMapParser.parse`."""
    return CategoryMapParser.parse(body)
