"""Substitute an argument into a parsed template.

The engine walks the segments of a :class:`Template`, resolves each directive
against the bound argument and concatenates the results. Pluralization
placeholders that cannot be resolved are left exactly as written; every other
failure aborts the call.
"""

from __future__ import annotations

import logging
import threading

from localized_format.arguments import MISSING, Argument, Keyed, Positional, bind
from localized_format.config import FormatterConfig
from localized_format.directives import (
    InlinePlural,
    NamedFormat,
    NamedValue,
    PluralReference,
    PositionalFormat,
    Segment,
    Template,
)
from localized_format.errors import (
    ArgumentShapeMismatchError,
    MissingRequiredKeyError,
    PositionalExhaustedError,
    RecursionLimitExceededError,
)
from localized_format.plurals import NO_MATCH, PluralResolver, cldr_plural_category
from localized_format.scanner import Literal
from localized_format.sprintf import sprintf
from localized_format.types import FormatParam, PluralClassifier, TemplateCache


class SubstitutionEngine:
    """
    Formats localized templates.

    Args:
        locale: Default locale handed to the plural classifier
        classifier: Callable returning the plural category of a count
        max_depth: Deepest allowed nesting of pluralization sub-templates
        cache_max_size: Number of parsed templates kept in memory
    """

    __slots__ = (
        "_locale",
        "_resolver",
        "_max_depth",
        "_templates",
        "_cache_max_size",
        "_cache_lock",
    )

    def __init__(
            self,
            locale: str = "en",
            classifier: PluralClassifier = cldr_plural_category,
            *,
            max_depth: int = 16,
            cache_max_size: int = 2048
    ):
        if max_depth <= 0:
            raise ValueError("max_depth must be a positive integer")
        if cache_max_size <= 0:
            raise ValueError("cache_max_size must be a positive integer")

        self._locale: str = locale
        self._resolver = PluralResolver(classifier)
        self._max_depth: int = max_depth
        self._templates: TemplateCache = {}
        self._cache_max_size: int = cache_max_size
        self._cache_lock = threading.Lock()

    @classmethod
    def from_config(cls, config: FormatterConfig, classifier: PluralClassifier = cldr_plural_category):
        return cls(
            config.default_locale,
            classifier,
            max_depth=config.max_depth,
            cache_max_size=config.cache_max_size,
        )

    @property
    def locale(self) -> str:
        """Get the locale."""
        return self._locale

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def template(self, source: str) -> Template:
        """
        Get the parsed template for ``source``, parsing it at most once.

        Args:
            source: Template text

        Returns:
            Parsed template
        """
        cached = self._templates.get(source)
        if cached is not None:
            return cached

        parsed = Template.parse(source)

        with self._cache_lock:
            # Bounded cache - FIFO eviction of the oldest quarter
            if len(self._templates) >= self._cache_max_size:
                limit = self._cache_max_size // 4 if self._cache_max_size > 4 else 1
                for key in list(self._templates.keys())[:limit]:
                    self._templates.pop(key, None)
            self._templates[source] = parsed

        return parsed

    def format(self, template: str | Template, argument: FormatParam, locale: str | None = None) -> str:
        """
        Substitute ``argument`` into ``template``.

        Args:
            template: Template text or an already parsed template
            argument: A scalar, a list/tuple of values, or a mapping
            locale: Optional locale override for plural selection

        Returns:
            The substituted string

        Raises:
            LocalizedFormatError: Any subclass, see :mod:`localized_format.errors`
        """
        if not isinstance(template, Template):
            template = self.template(template)
        return self._substitute(template, bind(argument), locale or self._locale, 0)

    def _substitute(self, template: Template, argument: Argument, locale: str, depth: int) -> str:
        return "".join(self._render(segment, argument, locale, depth) for segment in template)

    def _render(self, segment: Segment, argument: Argument, locale: str, depth: int) -> str:
        if isinstance(segment, Literal):
            return segment.text

        if isinstance(segment, PositionalFormat):
            return self._render_positional(segment, argument)

        if isinstance(segment, NamedFormat):
            value = self._require_key(segment.key, segment.source, argument)
            return sprintf(segment.spec, value)

        if isinstance(segment, NamedValue):
            return str(self._require_key(segment.key, segment.source, argument))

        if isinstance(segment, PluralReference):
            return self._render_plural(
                segment.source, segment.count_key, argument, locale, depth, rules_key=segment.rules_key
            )

        if isinstance(segment, InlinePlural):
            return self._render_plural(
                segment.source, segment.count_key, argument, locale, depth, categories=segment.categories
            )

        raise TypeError(f"Unsupported segment type: {type(segment)}")

    @staticmethod
    def _render_positional(directive: PositionalFormat, argument: Argument) -> str:
        if not isinstance(argument, Positional):
            raise ArgumentShapeMismatchError(
                f"positional placeholder {directive.source!r} cannot be filled from a mapping"
            )

        value = argument.next()
        if value is MISSING:
            raise PositionalExhaustedError(
                f"too few arguments: placeholder {directive.source!r} needs value "
                f"#{argument.consumed + 1} but only {len(argument)} given"
            )
        return sprintf(directive.spec, value)

    @staticmethod
    def _require_key(key: str, source: str, argument: Argument):
        if not isinstance(argument, Keyed):
            raise ArgumentShapeMismatchError(f"named placeholder {source!r} requires a mapping argument")

        value = argument.get(key)
        if value is MISSING:
            raise MissingRequiredKeyError(key)
        return value

    def _render_plural(
            self,
            source: str,
            count_key: str,
            argument: Argument,
            locale: str,
            depth: int,
            *,
            rules_key: str | None = None,
            categories=None
    ) -> str:
        """Resolve a pluralization placeholder, or return its source unchanged."""
        if not isinstance(argument, Keyed):
            logging.debug("Pluralization placeholder '%s' left unchanged: no mapping given", source)
            return source

        count = argument.get(count_key)
        if rules_key is not None:
            categories = argument.get(rules_key)
        if count is MISSING or categories is MISSING:
            logging.debug("Pluralization placeholder '%s' left unchanged: missing data", source)
            return source

        selected = self._resolver.resolve(count, locale, categories)
        if selected is NO_MATCH:
            logging.debug("Pluralization placeholder '%s' left unchanged: no category for %r", source, count)
            return source

        if depth + 1 > self._max_depth:
            raise RecursionLimitExceededError(
                f"pluralization nested deeper than {self._max_depth} levels at {source!r}"
            )
        return self._substitute(self.template(selected), argument, locale, depth + 1)


_lock = threading.Lock()
_default_engine: SubstitutionEngine | None = None


def configure(config: FormatterConfig, classifier: PluralClassifier = cldr_plural_category) -> SubstitutionEngine:
    """Install the process-wide default engine built from ``config``."""
    global _default_engine
    engine = SubstitutionEngine.from_config(config, classifier)
    with _lock:
        _default_engine = engine
    return engine


def get_engine() -> SubstitutionEngine:
    """Get the process-wide default engine."""
    global _default_engine
    with _lock:
        if _default_engine is None:
            _default_engine = SubstitutionEngine.from_config(FormatterConfig())
        engine = _default_engine
    return engine


def format(template: str, argument: FormatParam, locale: str | None = None) -> str:  # noqa: A001
    """
    Substitute ``argument`` into ``template`` for ``locale``.

    Args:
        template: Template text
        argument: A scalar, a list/tuple of values, or a mapping
        locale: Optional locale override, the configured default otherwise

    Returns:
        The substituted string
    """
    return get_engine().format(template, argument, locale)
