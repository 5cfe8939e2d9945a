"""Pure element-level arithmetic shared by the geometry types.

These functions operate on single numbers, never on vectors, so that every
componentwise operation resolves the element type's division rules the same
way.
"""

from __future__ import annotations

import math

from vertexflow.core.types import Scalar


def truncating_divide(value: int, divisor: int) -> int:
    """Integer division rounding toward zero.

    Python's ``//`` floors, so ``7 // -2 == -4``. Geometry code expects the
    quotient to be truncated instead: ``truncating_divide(7, -2) == -3``.

    Args:
        value: Integer numerator.
        divisor: Integer denominator.

    Returns:
        The quotient truncated toward zero.

    Raises:
        ZeroDivisionError: If divisor is zero.
    """
    quotient = abs(value) // abs(divisor)
    return quotient if (value < 0) == (divisor < 0) else -quotient


def ieee_divide(value: Scalar, divisor: Scalar) -> float:
    """Real division with IEEE 754 results for a zero divisor.

    Args:
        value: Numerator.
        divisor: Denominator.

    Returns:
        ``value / divisor``, or ``±inf``/``nan`` when divisor is zero.
    """
    if divisor == 0:
        if value == 0 or (isinstance(value, float) and math.isnan(value)):
            return math.nan
        # Integers may be too large to convert to float, so take their sign directly.
        if isinstance(value, float):
            sign = math.copysign(1.0, value)
        else:
            sign = 1.0 if value > 0 else -1.0
        return sign * math.copysign(math.inf, divisor)
    return value / divisor


def divide_scalar(value: Scalar, divisor: Scalar) -> Scalar:
    """Divide one component, picking the rule from the operand types.

    Two integers truncate; anything involving a float divides per IEEE 754.
    """
    if isinstance(value, int) and isinstance(divisor, int):
        return truncating_divide(value, divisor)
    return ieee_divide(value, divisor)
