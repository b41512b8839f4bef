"""
Numeric helpers for dimension math.

Normalizes numeric inputs from the stdlib and third-party libraries (Decimal, Fraction, NumPy
scalars) into plain Python numbers, and provides the small set of clamping and
interpolation primitives shared by the scaling and spec modules.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import operator
from collections.abc import Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value


# Methods --------------------------------------------------------------------------------------------------------------

def std_numeric(value, *, name: str = "value") -> int | float:
    """
    Convert a numeric value to a standard Python int or float.

    Detection priority:
        1. int / float pass through unchanged
        2. __index__() → int (NumPy integers)
        3. .item() → int or float (array scalars)
        4. __float__() → float (Decimal, Fraction, NumPy floats)

    Args:
        value: Numeric value to convert.
        name: Argument name used in error messages.

    Returns:
        int or float. Special IEEE 754 values (inf, nan) are preserved, range checks
        belong to the validators.

    Raises:
        TypeError: For None, bool and non-numeric types.

    Examples:
        >>> std_numeric(3)
        3
        >>> from decimal import Decimal
        >>> std_numeric(Decimal("2.5"))
        2.5
        >>> std_numeric(True)
        Traceback (most recent call last):
            ...
        TypeError: value must be int | float, boolean values not supported, got <bool: True>
    """
    if isinstance(value, bool):
        raise TypeError(f"{name} must be int | float, boolean values not supported, got {fmt_value(value)}")

    if isinstance(value, (int, float)):
        return value

    if value is None:
        raise TypeError(f"{name} must be int | float, got {fmt_type(value)}")

    if hasattr(value, "__index__"):
        try:
            return operator.index(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {name} {fmt_type(value)} to int via __index__: {e}") from e

    if hasattr(value, "item") and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, (int, float)) and not isinstance(result, bool):
            return result

    if hasattr(value, "__float__"):
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {name} {fmt_type(value)} to float: {e}") from e

    raise TypeError(
        f"unsupported numeric type for {name}: {fmt_type(value)}. "
        f"Expected int, float, or types implementing __index__, __float__ or .item()"
    )


def clamp(value: float, min_value: float, max_value: float) -> float:
    """
    Clamp value into the closed interval [min_value, max_value].

    Raises:
        ValueError: If min_value > max_value.
    """
    if min_value > max_value:
        raise ValueError(f"min_value must be <= max_value, got {fmt_value(min_value)} > {fmt_value(max_value)}")
    return min(max(value, min_value), max_value)


def interpolate(value: float, input_range: Sequence[float], output_range: Sequence[float]) -> float:
    """
    Piecewise-linear mapping of value from input_range onto output_range.

    Values outside the input range are clamped to the first or last output.

    Raises:
        ValueError: If ranges differ in length, have fewer than 2 points, or input_range
            is not strictly increasing.

    Examples:
        >>> interpolate(5, [0, 10], [100, 200])
        150.0
        >>> interpolate(-1, [0, 10], [100, 200])
        100
    """
    if len(input_range) != len(output_range):
        raise ValueError("input_range and output_range must have the same length")
    if len(input_range) < 2:
        raise ValueError("input_range must contain at least 2 points")
    if any(b <= a for a, b in zip(input_range, input_range[1:])):
        raise ValueError(f"input_range must be strictly increasing, got {fmt_value(list(input_range))}")

    if value <= input_range[0]:
        return output_range[0]
    if value >= input_range[-1]:
        return output_range[-1]

    for i in range(len(input_range) - 1):
        x0, x1 = input_range[i], input_range[i + 1]
        if x0 <= value <= x1:
            progress = (value - x0) / (x1 - x0)
            return output_range[i] + (output_range[i + 1] - output_range[i]) * progress

    # Unreachable for a strictly increasing finite range
    return output_range[-1]
