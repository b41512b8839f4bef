"""
Dimscale Value Validators

Validation functions for the numeric inputs of dimension resolution: metrics, sizes,
fractions and clamp bands.

These validators check the **content** of values. Type normalization is delegated to
std_numeric(), so Decimal, Fraction and NumPy scalars are accepted and returned as plain
Python numbers.

Every validator accepts an ``exc`` class, letting callers raise InvalidMetrics or InvalidSpec
instead of a bare ValueError.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import std_numeric
from .tools import fmt_value


# Methods --------------------------------------------------------------------------------------------------------------

def validate_finite(value, *, name: str = "value", exc: type[ValueError] = ValueError) -> int | float:
    """
    Validate value is a finite number (not inf, not nan).

    Returns:
        The value normalized by std_numeric().

    Raises:
        TypeError: If value is not numeric.
        ValueError: Or the given ``exc`` subclass, if value is nan or infinite.
    """
    value = std_numeric(value, name=name)
    if not math.isfinite(value):
        raise exc(f"{name} must be a finite number, got {fmt_value(value)}")
    return value


def validate_positive(
        value,
        strict: bool = True,
        *,
        name: str = "value",
        exc: type[ValueError] = ValueError,
) -> int | float:
    """
    Validate value is positive (optionally allowing zero).

    Use strict=False when zero is a valid value, e.g. a 0 dp margin.

    Args:
        value: The numeric value to validate.
        strict: If True, value must be > 0; if False, value must be >= 0.
        name: Argument name used in error messages.
        exc: ValueError subclass raised on violation.

    Returns:
        The value normalized by std_numeric().

    Raises:
        TypeError: If value is not numeric.
        ValueError: Or the given ``exc`` subclass, if value violates the constraint or is
            not finite.

    Examples:
        >>> validate_positive(420, name="density_dpi")
        420
        >>> validate_positive(0, strict=False)
        0
        >>> validate_positive(0, name="density_dpi")
        Traceback (most recent call last):
            ...
        ValueError: density_dpi must be > 0, got <int: 0>
    """
    value = validate_finite(value, name=name, exc=exc)
    if strict and value <= 0:
        raise exc(f"{name} must be > 0, got {fmt_value(value)}")
    if not strict and value < 0:
        raise exc(f"{name} must be >= 0, got {fmt_value(value)}")
    return value


def validate_fraction(value, *, name: str = "fraction", exc: type[ValueError] = ValueError) -> int | float:
    """
    Validate value lies in the half-open interval (0, 1].

    Zero is rejected because a zero share of the screen is never a meaningful size.

    Examples:
        >>> validate_fraction(0.8)
        0.8
        >>> validate_fraction(1)
        1
    """
    value = validate_finite(value, name=name, exc=exc)
    if not 0 < value <= 1:
        raise exc(f"{name} must be in (0, 1], got {fmt_value(value)}")
    return value


def validate_range(
        value,
        min_value: float | None = None,
        max_value: float | None = None,
        *,
        name: str = "value",
        exc: type[ValueError] = ValueError,
) -> int | float:
    """
    Validate numeric value falls within the specified bounds (inclusive).

    Args:
        value: The numeric value to validate.
        min_value: Minimum allowed value (inclusive), or None for no lower bound.
        max_value: Maximum allowed value (inclusive), or None for no upper bound.
        name: Argument name used in error messages.
        exc: ValueError subclass raised on violation.

    Returns:
        The value normalized by std_numeric().

    Raises:
        ValueError: If min_value > max_value, or (as ``exc``) if value is out of range.
    """
    if min_value is not None and max_value is not None and min_value > max_value:
        raise ValueError(f"min_value must be <= max_value, got {fmt_value(min_value)} > {fmt_value(max_value)}")

    value = validate_finite(value, name=name, exc=exc)
    if min_value is not None and value < min_value:
        raise exc(f"{name} must be >= {min_value}, got {fmt_value(value)}")
    if max_value is not None and value > max_value:
        raise exc(f"{name} must be <= {max_value}, got {fmt_value(value)}")
    return value
