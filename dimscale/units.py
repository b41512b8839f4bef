#
# Dimscale Units of Measurement Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
from enum import StrEnum, unique

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidMetrics
from .validators import validate_positive


# @formatter:off

class UnitsConf:
    DP_BASELINE_DPI = 160.0
    MM_PER_INCH = 25.4
    CM_PER_INCH = 2.54
    MM_PER_CM = 10.0

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class PhysicalUnit(StrEnum):
    """
    Physical length units accepted by the physical conversions.

    Attributes:
        MM (str)   : millimeter
        CM (str)   : centimeter
        INCH (str) : inch, 25.4 mm
    """
    MM = "mm"
    CM = "cm"
    INCH = "inch"


# Methods --------------------------------------------------------------------------------------------------------------

def dp_to_px(value_dp: float, density_dpi: float) -> float:
    """
    Convert density-independent pixels to raw pixels.

    px = dp * dpi / 160

    Examples:
        >>> dp_to_px(64, 440)
        176.0
    """
    density_dpi = _dpi(density_dpi)
    return value_dp * (density_dpi / UnitsConf.DP_BASELINE_DPI)


def px_to_dp(px: float, density_dpi: float) -> float:
    """Convert raw pixels to density-independent pixels, inverse of dp_to_px()."""
    density_dpi = _dpi(density_dpi)
    return px / (density_dpi / UnitsConf.DP_BASELINE_DPI)


def mm_to_px(value_mm: float, density_dpi: float) -> float:
    """
    Convert millimeters to raw pixels.

    px = mm * dpi / 25.4
    """
    density_dpi = _dpi(density_dpi)
    return value_mm * (density_dpi / UnitsConf.MM_PER_INCH)


def px_to_mm(px: float, density_dpi: float) -> float:
    """Convert raw pixels to millimeters, inverse of mm_to_px()."""
    density_dpi = _dpi(density_dpi)
    return px / (density_dpi / UnitsConf.MM_PER_INCH)


def cm_to_px(value_cm: float, density_dpi: float) -> float:
    return mm_to_px(cm_to_mm(value_cm), density_dpi)


def px_to_cm(px: float, density_dpi: float) -> float:
    return mm_to_cm(px_to_mm(px, density_dpi))


def inch_to_px(value_inch: float, density_dpi: float) -> float:
    # One inch is exactly density_dpi pixels
    return value_inch * _dpi(density_dpi)


def px_to_inch(px: float, density_dpi: float) -> float:
    return px / _dpi(density_dpi)


def mm_to_dp(value_mm: float) -> float:
    """
    Convert millimeters to dp. Density cancels out: 1 inch is always 160 dp.
    """
    return value_mm / UnitsConf.MM_PER_INCH * UnitsConf.DP_BASELINE_DPI


def dp_to_mm(value_dp: float) -> float:
    return value_dp / UnitsConf.DP_BASELINE_DPI * UnitsConf.MM_PER_INCH


def sp_to_px(px: float, font_scale: float) -> float:
    """
    Apply the user font scale to a density-converted size.

    Produces the raw pixel size expected by a text-size setter working in pixels:
    the input is a dp value already converted to pixels, the output is px * font_scale.
    """
    font_scale = validate_positive(font_scale, name="font_scale", exc=InvalidMetrics)
    return px * font_scale


def px_to_sp(px: float, font_scale: float) -> float:
    """Remove the user font scale from a raw pixel text size, inverse of sp_to_px()."""
    font_scale = validate_positive(font_scale, name="font_scale", exc=InvalidMetrics)
    return px / font_scale


# Physical-only conversions --------------------------------------------------------------------------------------------

def mm_to_cm(mm: float) -> float:
    return mm / UnitsConf.MM_PER_CM


def mm_to_inch(mm: float) -> float:
    return mm / UnitsConf.MM_PER_INCH


def cm_to_mm(cm: float) -> float:
    return cm * UnitsConf.MM_PER_CM


def cm_to_inch(cm: float) -> float:
    return cm / UnitsConf.CM_PER_INCH


def inch_to_mm(inch: float) -> float:
    return inch * UnitsConf.MM_PER_INCH


def inch_to_cm(inch: float) -> float:
    return inch * UnitsConf.CM_PER_INCH


def physical_to_mm(value: float, unit: PhysicalUnit | str) -> float:
    """
    Convert a physical length in the given unit to millimeters.

    Raises:
        ValueError: If unit is not a PhysicalUnit value.

    Examples:
        >>> physical_to_mm(1, "inch")
        25.4
        >>> physical_to_mm(2, PhysicalUnit.CM)
        20.0
    """
    unit = PhysicalUnit(unit)
    if unit is PhysicalUnit.MM:
        return value
    if unit is PhysicalUnit.CM:
        return cm_to_mm(value)
    return inch_to_mm(value)


def radius_from_diameter(diameter: float, unit: PhysicalUnit | str = PhysicalUnit.MM) -> float:
    """Radius in dp of a circle given its physical diameter."""
    return mm_to_dp(physical_to_mm(diameter, unit)) / 2.0


def radius_from_circumference(circumference: float, unit: PhysicalUnit | str = PhysicalUnit.MM) -> float:
    """Radius in dp of a circle given its physical circumference."""
    return mm_to_dp(physical_to_mm(circumference, unit)) / (2.0 * math.pi)


# Private Methods ------------------------------------------------------------------------------------------------------

def _dpi(density_dpi: float) -> float:
    return validate_positive(density_dpi, name="density_dpi", exc=InvalidMetrics)
