"""Locale-aware sprintf, named and pluralized string interpolation."""

from localized_format.config import FormatterConfig, load_config
from localized_format.directives import Template
from localized_format.engine import SubstitutionEngine, configure, format, get_engine
from localized_format.errors import (
    ArgumentShapeMismatchError,
    FormatConversionError,
    LocalizedFormatError,
    MalformedInlinePluralError,
    MissingRequiredKeyError,
    PositionalExhaustedError,
    RecursionLimitExceededError,
)
from localized_format.localized import LocalizedString, localize
from localized_format.plurals import PluralResolver, cldr_plural_category

__all__ = [
    "ArgumentShapeMismatchError",
    "FormatConversionError",
    "FormatterConfig",
    "LocalizedFormatError",
    "LocalizedString",
    "MalformedInlinePluralError",
    "MissingRequiredKeyError",
    "PluralResolver",
    "PositionalExhaustedError",
    "RecursionLimitExceededError",
    "SubstitutionEngine",
    "Template",
    "cldr_plural_category",
    "configure",
    "format",
    "get_engine",
    "load_config",
    "localize",
]
