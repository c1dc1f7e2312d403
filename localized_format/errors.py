"""Exceptions raised while substituting a localized template.

Every error aborts the whole substitution call. Each class also derives from
the built-in exception a plain ``%`` operation would raise in the same
situation, so ``except KeyError`` and friends keep working.
"""


class LocalizedFormatError(Exception):
    """Base class for all substitution failures."""


class MalformedInlinePluralError(LocalizedFormatError, ValueError):
    """The body of a ``%<{...}>`` placeholder is not a valid category mapping."""

    def __init__(self, source: str, reason: str, position: int | None = None):
        self.source = source
        self.reason = reason
        self.position = position
        where = f" at offset {position}" if position is not None else ""
        super().__init__(f"Malformed inline pluralization {source!r}{where}: {reason}")


class ArgumentShapeMismatchError(LocalizedFormatError, TypeError):
    """A placeholder needs a mapping but got a positional value, or vice versa."""


class MissingRequiredKeyError(LocalizedFormatError, KeyError):
    """A named placeholder's key is absent from the supplied mapping."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"key<{self.key}> not found"


class PositionalExhaustedError(LocalizedFormatError, TypeError):
    """More positional placeholders than supplied values."""


class FormatConversionError(LocalizedFormatError, TypeError):
    """A sprintf conversion was applied to a value of an incompatible kind."""


class RecursionLimitExceededError(LocalizedFormatError, RecursionError):
    """Nested pluralization went deeper than the configured ceiling."""


__all__ = [
    "ArgumentShapeMismatchError",
    "FormatConversionError",
    "LocalizedFormatError",
    "MalformedInlinePluralError",
    "MissingRequiredKeyError",
    "PositionalExhaustedError",
    "RecursionLimitExceededError",
]
