"""Classify the substitution argument as positional or keyed."""

from __future__ import annotations

from collections.abc import Mapping

from localized_format.types import FormatParam, FormatValue, KeyedParam


MISSING = object()
"""Returned by the accessors below when no value is available."""


class Positional:
    """Values consumed left to right by positional placeholders.

    Each substitution call binds its own instance, so the cursor is never
    shared between calls.
    """

    __slots__ = ("_values", "_index")

    def __init__(self, values: tuple[FormatValue, ...]):
        self._values = values
        self._index = 0

    @property
    def consumed(self) -> int:
        return self._index

    def __len__(self) -> int:
        return len(self._values)

    def next(self) -> FormatValue | object:
        """Return the next unconsumed value, or :data:`MISSING` when exhausted."""
        if self._index >= len(self._values):
            return MISSING
        value = self._values[self._index]
        self._index += 1
        return value


class Keyed:
    """Values looked up by placeholder key."""

    __slots__ = ("_values",)

    def __init__(self, values: KeyedParam):
        self._values = values

    def get(self, key: str) -> FormatValue | object:
        """Return the value bound to ``key``, or :data:`MISSING`."""
        return self._values.get(key, MISSING)


Argument = Positional | Keyed


def bind(argument: FormatParam) -> Argument:
    """Decide once how ``argument`` backs the placeholders of a template.

    Mappings are keyed; lists and tuples supply positional values in order;
    anything else is a single positional value.
    """
    if isinstance(argument, Mapping):
        return Keyed(argument)
    if isinstance(argument, (list, tuple)):
        return Positional(tuple(argument))
    return Positional((argument,))
