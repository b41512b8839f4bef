"""
Dimension specs: value objects describing *what* size is requested.

Each variant is a frozen dataclass validated on construction:

- Fixed       : dp value, density conversion only
- Dynamic     : dp value adjusted by the reference-device scale factor, optionally as text (sp)
- Percentage  : fraction of a screen axis
- Physical    : millimeters, converted through the display dpi
- Fluid       : dp value interpolated between a min and a max across a screen-width band

The resolver dispatches on the variant type, see dimscale.resolver.resolve().
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidSpec
from .numeric import interpolate, std_numeric
from .scaling import BaseOrientation, ScalingStrategy, ScreenBase
from .tools import fmt_value
from .units import PhysicalUnit, physical_to_mm
from .validators import validate_fraction, validate_positive


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class DimensionSpec:
    """Base of all dimension spec variants, not resolvable on its own."""

    def _set_size(self, name: str) -> None:
        """Validate a non-negative finite size field in place."""
        value = validate_positive(getattr(self, name), strict=False, name=name, exc=InvalidSpec)
        object.__setattr__(self, name, value)


@dataclass(frozen=True)
class Fixed(DimensionSpec):
    """A dp value with no scale adjustment: px = dp * dpi / 160."""

    value_dp: float

    def __post_init__(self):
        self._set_size("value_dp")


@dataclass(frozen=True)
class Dynamic(DimensionSpec):
    """
    A dp value adapted to the actual device against the reference profile.

    Attributes:
        value_dp: Size in dp on the reference device.
        is_scaled_pixel: Text size mode, the result is further multiplied by the user font scale.
        base: Screen axis the scale ratio is measured on.
        orientation: Design orientation, swaps LOWEST/HIGHEST on a rotated device.
        strategy: Curve turning the screen ratio into a scale factor, plain ratio by default.
    """

    value_dp: float
    is_scaled_pixel: bool = False
    base: ScreenBase = ScreenBase.LOWEST
    orientation: BaseOrientation = BaseOrientation.AUTO
    strategy: ScalingStrategy = ScalingStrategy.RATIO

    def __post_init__(self):
        self._set_size("value_dp")
        if not isinstance(self.is_scaled_pixel, bool):
            raise TypeError(f"is_scaled_pixel must be bool, got {fmt_value(self.is_scaled_pixel)}")
        object.__setattr__(self, "base", _screen_base(self.base))
        object.__setattr__(self, "orientation", _base_orientation(self.orientation))
        object.__setattr__(self, "strategy", _scaling_strategy(self.strategy))


@dataclass(frozen=True)
class Percentage(DimensionSpec):
    """
    A fraction in (0, 1] of a screen axis, already in pixels.

    No density conversion and no scale factor: the axis is the actual device's.
    """

    fraction: float
    base: ScreenBase = ScreenBase.LOWEST
    orientation: BaseOrientation = BaseOrientation.AUTO

    def __post_init__(self):
        object.__setattr__(self, "fraction", validate_fraction(self.fraction, exc=InvalidSpec))
        object.__setattr__(self, "base", _screen_base(self.base))
        object.__setattr__(self, "orientation", _base_orientation(self.orientation))

    @classmethod
    def from_percent(
            cls,
            percent: float,
            base: ScreenBase = ScreenBase.LOWEST,
            orientation: BaseOrientation = BaseOrientation.AUTO,
    ) -> Self:
        """
        Create from a percentage in (0, 100].

        Examples:
            >>> Percentage.from_percent(80).fraction
            0.8
        """
        percent = std_numeric(percent, name="percent")
        return cls(fraction=percent / 100, base=base, orientation=orientation)


@dataclass(frozen=True)
class Physical(DimensionSpec):
    """A physical length in millimeters, device-independent by definition."""

    value_mm: float

    def __post_init__(self):
        self._set_size("value_mm")

    @classmethod
    def from_unit(cls, value: float, unit: PhysicalUnit | str = PhysicalUnit.MM) -> Self:
        """
        Create from a length in mm, cm or inches.

        Examples:
            >>> Physical.from_unit(1, PhysicalUnit.INCH).value_mm
            25.4
        """
        try:
            unit = PhysicalUnit(unit)
        except ValueError as e:
            raise InvalidSpec(f"unit must be one of {[u.value for u in PhysicalUnit]}, got {fmt_value(unit)}") from e
        return cls(value_mm=physical_to_mm(value, unit))


@dataclass(frozen=True)
class FluidBreakpoint:
    """
    Alternative fluid range used from a minimum screen width (in dp) upwards.

    Attributes:
        min_screen_dp: Breakpoint applies when the screen width in dp is >= this value.
        min_dp, max_dp: Size range in dp.
        min_width_dp, max_width_dp: Screen-width band over which the size grows.
    """

    min_screen_dp: float
    min_dp: float
    max_dp: float
    min_width_dp: float
    max_width_dp: float

    def __post_init__(self):
        object.__setattr__(
            self, "min_screen_dp",
            validate_positive(self.min_screen_dp, strict=False, name="min_screen_dp", exc=InvalidSpec)
        )
        _validate_fluid_range(self)


@dataclass(frozen=True)
class Fluid(DimensionSpec):
    """
    A dp value growing linearly from min_dp to max_dp as the screen width goes from
    min_width_dp to max_width_dp, constant outside that band.

    Breakpoints override the range on wider screens: the one with the largest
    min_screen_dp not exceeding the current width wins.

    Examples:
        >>> Fluid(16, 24).value_dp_at(544)
        20.0
    """

    min_dp: float
    max_dp: float
    min_width_dp: float = 320
    max_width_dp: float = 768
    breakpoints: tuple[FluidBreakpoint, ...] = field(default=())

    def __post_init__(self):
        _validate_fluid_range(self)
        breakpoints = tuple(self.breakpoints)
        for bp in breakpoints:
            if not isinstance(bp, FluidBreakpoint):
                raise TypeError(f"breakpoints must contain FluidBreakpoint items, got {fmt_value(bp)}")
        object.__setattr__(self, "breakpoints", tuple(sorted(breakpoints, key=lambda bp: bp.min_screen_dp)))

    def range_for(self, width_dp: float) -> "Fluid | FluidBreakpoint":
        """The range definition in effect at the given screen width."""
        active = self
        for bp in self.breakpoints:
            if width_dp >= bp.min_screen_dp:
                active = bp
        return active

    def value_dp_at(self, width_dp: float) -> float:
        """Interpolated size in dp at the given screen width in dp."""
        r = self.range_for(width_dp)
        return interpolate(width_dp, [r.min_width_dp, r.max_width_dp], [r.min_dp, r.max_dp])


# Private Methods ------------------------------------------------------------------------------------------------------

def _screen_base(base) -> ScreenBase:
    try:
        return ScreenBase(base)
    except ValueError as e:
        raise InvalidSpec(f"base must be one of {[b.value for b in ScreenBase]}, got {fmt_value(base)}") from e


def _base_orientation(orientation) -> BaseOrientation:
    try:
        return BaseOrientation(orientation)
    except ValueError as e:
        raise InvalidSpec(
            f"orientation must be one of {[o.value for o in BaseOrientation]}, got {fmt_value(orientation)}"
        ) from e


def _scaling_strategy(strategy) -> ScalingStrategy:
    try:
        return ScalingStrategy(strategy)
    except ValueError as e:
        raise InvalidSpec(
            f"strategy must be one of {[s.value for s in ScalingStrategy]}, got {fmt_value(strategy)}"
        ) from e


def _validate_fluid_range(obj) -> None:
    """Validate min/max size and width band of a Fluid or FluidBreakpoint in place."""
    for name in ("min_dp", "max_dp", "min_width_dp", "max_width_dp"):
        value = validate_positive(getattr(obj, name), strict=False, name=name, exc=InvalidSpec)
        object.__setattr__(obj, name, value)

    if obj.min_width_dp >= obj.max_width_dp:
        raise InvalidSpec(
            f"min_width_dp must be < max_width_dp, got {fmt_value(obj.min_width_dp)} >= {fmt_value(obj.max_width_dp)}"
        )
