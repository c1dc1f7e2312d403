"""Text helpers used by :class:`~localized_format.localized.LocalizedString`."""

import functools
import re
import unicodedata

from babel.numbers import get_decimal_symbol, get_group_symbol

from localized_format.plurals import get_babel_locale


NORMALIZATION_FORMS = ("NFC", "NFD", "NFKC", "NFKD")

# Languages whose casefolding maps I/İ to ı/i
TURKIC_LANGUAGES = frozenset({"tr", "az"})

_TURKIC_MAP = str.maketrans({"I": "ı", "İ": "i"})


@functools.lru_cache(maxsize=128)
def _number_pattern(locale: str) -> tuple[re.Pattern[str], str, str]:
    group = get_group_symbol(locale)
    decimal = get_decimal_symbol(locale)
    pattern = re.compile(
        rf"\s*(?P<number>[-+]?\d[\d{re.escape(group)}]*(?:{re.escape(decimal)}\d+)?)"
    )
    return pattern, group, decimal


def parse_leading_number(text: str, locale: str) -> float:
    """
    Parse the number at the start of ``text`` using the locale's symbols.

    Args:
        text: Text starting with a localized number
        locale: Locale identifier

    Returns:
        The parsed number, or 0.0 when the text does not start with one
    """
    pattern, group, decimal = _number_pattern(str(get_babel_locale(locale)))
    match = pattern.match(text)
    if not match:
        return 0.0

    number = match.group("number").replace(group, "").replace(decimal, ".")
    return float(number)


def normalize_text(text: str, using: str = "NFD") -> str:
    form = using.upper()
    if form not in NORMALIZATION_FORMS:
        raise ValueError(f"Unsupported normalization form: {using}. Supported forms: {', '.join(NORMALIZATION_FORMS)}")
    return unicodedata.normalize(form, text)


def casefold_text(text: str, turkic: bool = False) -> str:
    if turkic:
        text = text.translate(_TURKIC_MAP)
    return text.casefold()


def is_turkic(locale: str) -> bool:
    return locale.replace("-", "_").split("_")[0].lower() in TURKIC_LANGUAGES
