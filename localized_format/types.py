"""Type definitions for :mod:`localized_format`."""

from collections.abc import Callable, Mapping, Sequence
from decimal import Decimal
from typing import TypeAlias

FormatNumber: TypeAlias = int | float | Decimal
FormatValue: TypeAlias = "bool | FormatNumber | str | CategoryMap"
CategoryMap: TypeAlias = Mapping[str, str]

KeyedParam: TypeAlias = Mapping[str, FormatValue]
PositionalParam: TypeAlias = Sequence[FormatValue]
FormatParam: TypeAlias = "FormatValue | PositionalParam | KeyedParam"

PluralClassifier: TypeAlias = Callable[[FormatNumber, str], str]

TemplateCache: TypeAlias = "dict[str, Template]"

__all__ = [
    "CategoryMap",
    "FormatNumber",
    "FormatParam",
    "FormatValue",
    "KeyedParam",
    "PluralClassifier",
    "PositionalParam",
    "TemplateCache",
]
