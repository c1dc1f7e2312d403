"""Plural category selection and sub-template resolution."""

from __future__ import annotations

import functools
import logging
import math
from collections.abc import Mapping
from decimal import Decimal

from babel import Locale
from babel.core import UnknownLocaleError

from localized_format.types import FormatNumber, FormatValue, PluralClassifier


NO_MATCH = None


@functools.lru_cache(maxsize=256)
def get_babel_locale(locale: str) -> Locale:
    """Parse a locale id once, accepting both ``en_US`` and ``en-US``.

    Raises:
        babel.core.UnknownLocaleError: If the locale has no CLDR data
        ValueError: If the locale id is malformed
    """
    return Locale.parse(locale.replace("-", "_"))


def cldr_plural_category(count: FormatNumber, locale: str) -> str:
    """Return the CLDR plural category of ``count`` in ``locale``.

    Unknown locales fall back to the ``one``/``other`` rule.

    Args:
        count: The number being pluralized
        locale: Locale identifier

    Returns:
        Category tag such as ``"one"``, ``"few"`` or ``"other"``. NaN and
        infinities are always ``"other"``.
    """
    if not is_count(count):
        return "other"

    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError) as error:
        logging.warning("Unknown locale '%s' for plural rules, using one/other - %s", locale, error)
        return "one" if abs(count) == 1 else "other"

    return locale_obj.plural_form(count)


def is_count(value: object) -> bool:
    """Finite numbers (but not booleans) can drive pluralization."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    return isinstance(value, float) and math.isfinite(value)


class PluralResolver:
    """Select a sub-template from a category mapping for a given count."""

    __slots__ = ("_classifier",)

    def __init__(self, classifier: PluralClassifier = cldr_plural_category):
        self._classifier = classifier

    def resolve(self, count: FormatValue, locale: str, categories: FormatValue) -> str | None:
        """Pick the template for ``count`` from ``categories``.

        Args:
            count: Value bound to the count key
            locale: Locale identifier handed to the classifier
            categories: Category tag -> template mapping

        Returns:
            The selected template, or ``NO_MATCH`` when the count is not a
            number, ``categories`` is not a mapping, or the category is absent
        """
        if not is_count(count) or not isinstance(categories, Mapping):
            return NO_MATCH

        category = self._classifier(count, locale)
        template = categories.get(category, NO_MATCH)
        if template is NO_MATCH:
            return NO_MATCH
        return str(template)
