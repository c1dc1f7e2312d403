"""Apply a single sprintf conversion to a single value."""

from __future__ import annotations

from localized_format.directives import ConversionSpec
from localized_format.errors import FormatConversionError
from localized_format.types import FormatValue


def sprintf(spec: ConversionSpec, value: FormatValue) -> str:
    """Format ``value`` according to ``spec``.

    ``%d`` truncates floats toward zero, ``%.2f`` rounds to two places and
    ``%s`` stringifies, the same way Python's ``%`` operator does.

    Args:
        spec: Conversion flags, width, precision and conversion character
        value: The value to format

    Returns:
        Formatted text

    Raises:
        FormatConversionError: If the value is not compatible with the conversion
    """
    pattern = str(spec)
    try:
        return pattern % (value,)
    except (TypeError, ValueError, OverflowError) as error:
        raise FormatConversionError(
            f"cannot format {type(value).__name__} value {value!r} with {pattern!r}: {error}"
        ) from error
