"""
Strings bound to a locale, with pluralization-aware ``%`` substitution.

    >>> LocalizedString("%{count:items}", "en") % {"count": 2, "items": {"one": "1 item", "other": "%{count} items"}}
    '2 items'
"""
from collections.abc import Iterator

from localized_format.directives import Template
from localized_format.engine import SubstitutionEngine, get_engine
from localized_format.helpers import casefold_text, is_turkic, normalize_text, parse_leading_number
from localized_format.types import FormatParam


class LocalizedString:
    """
    A string together with the locale used to interpret it.

    Args:
        base: The underlying string, also the substitution template
        locale: Locale identifier, the engine's default locale when omitted
        engine: Optional engine, the process-wide default otherwise
    """

    __slots__ = (
        "_base",
        "_locale",
        "_engine",
        "_template",
    )

    def __init__(
            self,
            base: str,
            locale: str | None = None,
            *,
            engine: SubstitutionEngine | None = None
    ):
        self._engine: SubstitutionEngine = engine or get_engine()
        self._base: str = base
        self._locale: str = locale or self._engine.locale
        self._template: Template | None = None

    @property
    def locale(self) -> str:
        """Get the locale."""
        return self._locale

    @property
    def template(self) -> Template:
        """The parsed template, built on first use and reused afterwards."""
        if self._template is None:
            self._template = self._engine.template(self._base)
        return self._template

    def format(self, argument: FormatParam) -> str:
        """
        Substitute ``argument`` into this string.

        Args:
            argument: A scalar, a list/tuple of values, or a mapping

        Returns:
            The substituted string
        """
        return self._engine.format(self.template, argument, self._locale)

    def __mod__(self, argument: FormatParam) -> str:
        return self.format(argument)

    def _derive(self, base: str) -> "LocalizedString":
        return LocalizedString(base, self._locale, engine=self._engine)

    def to_str(self) -> str:
        """Return the base string."""
        return self._base

    def to_float(self) -> float:
        """Parse the leading number using this locale's group and decimal symbols."""
        return parse_leading_number(self._base, self._locale)

    def to_int(self) -> int:
        return int(self.to_float())

    def normalize(self, using: str = "NFD") -> "LocalizedString":
        """
        Return a Unicode-normalized copy.

        Args:
            using: One of NFC, NFD, NFKC or NFKD (case-insensitive)
        """
        return self._derive(normalize_text(self._base, using))

    def casefold(self, t: bool | None = None) -> "LocalizedString":
        """
        Return a casefolded copy.

        Args:
            t: Apply Turkic dotted/dotless i mapping. Defaults to on for tr and az.
        """
        turkic = is_turkic(self._locale) if t is None else t
        return self._derive(casefold_text(self._base, turkic))

    def code_points(self) -> list[int]:
        return [ord(char) for char in self._base]

    def __iter__(self) -> Iterator[str]:
        return iter(self._base)

    def __len__(self) -> int:
        return len(self._base)

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        return f"LocalizedString({self._base!r}, {self._locale!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LocalizedString):
            return self._base == other._base and self._locale == other._locale
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._base, self._locale))


def localize(base: str, locale: str | None = None) -> LocalizedString:
    """Wrap ``base`` in a :class:`LocalizedString` for ``locale``."""
    return LocalizedString(base, locale)
