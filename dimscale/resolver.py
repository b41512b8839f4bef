"""
Dimension resolution: turns a DimensionSpec plus display metrics into a pixel value.

The module-level resolve() is the pure core. DimensionResolver binds it to an explicit
ReferenceProfile and ScaleConf and adds the call-site conveniences (fixed_px, dynamic_sp,
percentage_px, ...). There is no process-wide instance: construct one at startup and pass it
to whoever needs it.

Example:
    >>> resolver = DimensionResolver(ReferenceProfile(411, 731, 420))
    >>> metrics = DisplayMetrics(width_px=1080, height_px=2400, density_dpi=440)
    >>> resolver.resolve(Fixed(64), metrics)
    176.0
    >>> resolver.resolve(Percentage(0.8), metrics)
    864.0
"""

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import Iterable

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidSpec
from .metrics import DisplayMetrics, MetricsProvider, ReferenceProfile
from .scaling import (
    BaseOrientation,
    ScaleConf,
    ScaleFactorCalculator,
    ScalingStrategy,
    ScreenBase,
    resolve_screen_base,
    select_axis,
)
from .specs import DimensionSpec, Dynamic, Fixed, Fluid, FluidBreakpoint, Percentage, Physical
from .tools import fmt_type, fmt_value
from .units import PhysicalUnit, dp_to_px, mm_to_px, sp_to_px


# Main API functions ---------------------------------------------------------------------------------------------------

def resolve(
        spec: DimensionSpec,
        metrics: DisplayMetrics,
        reference: ReferenceProfile,
        conf: ScaleConf | None = None,
) -> float:
    """
    Resolve a dimension spec to raw pixels.

    Pure function of its arguments: identical inputs always give bit-identical results.

    Per variant:
        Fixed       -> dp_to_px(value_dp, dpi)
        Dynamic     -> dp_to_px(value_dp, dpi) * factor(metrics, reference, base, strategy)
                       further * font_scale when is_scaled_pixel
        Percentage  -> axis_px(metrics, base) * fraction
        Physical    -> mm_to_px(value_mm, dpi)
        Fluid       -> dp_to_px(fluid value at the screen width in dp, dpi)

    Args:
        spec: Dimension spec variant.
        metrics: Current display snapshot.
        reference: Reference device profile, only used by Dynamic specs.
        conf: Clamp band for the scale factor; defaults to ScaleConf().

    Returns:
        float: Size in raw pixels.

    Raises:
        InvalidSpec: If the spec violates its domain.
        TypeError: If spec is not a known DimensionSpec variant, metrics/reference are not
            DisplayMetrics/ReferenceProfile instances, or conf is not a ScaleConf.
    """
    _check_metrics(metrics, reference)
    _check_conf(conf)

    if isinstance(spec, Fixed):
        return float(dp_to_px(_size(spec.value_dp, "value_dp"), metrics.density_dpi))

    if isinstance(spec, Dynamic):
        base = resolve_screen_base(spec.base, spec.orientation, metrics)
        factor = ScaleFactorCalculator(conf).factor(metrics, reference, base, spec.strategy)
        px = dp_to_px(_size(spec.value_dp, "value_dp"), metrics.density_dpi) * factor
        if spec.is_scaled_pixel:
            px = sp_to_px(px, metrics.font_scale)
        return float(px)

    if isinstance(spec, Percentage):
        if not 0 < spec.fraction <= 1:
            raise InvalidSpec(f"fraction must be in (0, 1], got {fmt_value(spec.fraction)}")
        base = resolve_screen_base(spec.base, spec.orientation, metrics)
        return float(select_axis(metrics, base) * spec.fraction)

    if isinstance(spec, Physical):
        return float(mm_to_px(_size(spec.value_mm, "value_mm"), metrics.density_dpi))

    if isinstance(spec, Fluid):
        return float(dp_to_px(spec.value_dp_at(metrics.width_dp), metrics.density_dpi))

    raise TypeError(f"spec must be a DimensionSpec variant, got {fmt_type(spec)}")


# Classes --------------------------------------------------------------------------------------------------------------

class DimensionResolver:
    """
    Resolves dimension specs against an explicit reference profile.

    Instances are immutable after construction and safe to share between threads.

    Args:
        reference: Design baseline device.
        conf: Scale factor clamp band and clamp diagnostics policy.
    """

    def __init__(self, reference: ReferenceProfile, conf: ScaleConf | None = None) -> None:
        if not isinstance(reference, ReferenceProfile):
            raise TypeError(f"reference must be ReferenceProfile, got {fmt_type(reference)}")
        _check_conf(conf)
        self._reference = reference
        self._conf = conf if conf is not None else ScaleConf()
        self._calculator = ScaleFactorCalculator(self._conf)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(reference={self._reference!r}, conf={self._conf!r})"

    @property
    def reference(self) -> ReferenceProfile:
        return self._reference

    @property
    def conf(self) -> ScaleConf:
        return self._conf

    def factor(
            self,
            metrics: DisplayMetrics,
            base: ScreenBase | str = ScreenBase.LOWEST,
            strategy: ScalingStrategy | str = ScalingStrategy.RATIO,
    ) -> float:
        """Clamped scale factor of the given display against the reference."""
        _check_metrics(metrics, self._reference)
        return self._calculator.factor(metrics, self._reference, base, strategy)

    def resolve(self, spec: DimensionSpec, metrics: DisplayMetrics) -> float:
        """Resolve spec to raw pixels, see dimscale.resolver.resolve()."""
        return resolve(spec, metrics, self._reference, self._conf)

    def resolve_current(self, spec: DimensionSpec, provider: MetricsProvider) -> float:
        """Resolve spec against the latest metrics of a provider."""
        if not isinstance(provider, MetricsProvider):
            raise TypeError(f"provider must implement current() -> DisplayMetrics, got {fmt_type(provider)}")
        return self.resolve(spec, provider.current())

    def resolve_many(self, specs: Iterable[DimensionSpec], metrics: DisplayMetrics) -> list[float]:
        """Resolve several specs against one metrics snapshot, preserving order."""
        return [self.resolve(spec, metrics) for spec in specs]

    # Call-site conveniences ---------------------------------------------------------------------------------------

    def fixed_px(self, value_dp: float, metrics: DisplayMetrics) -> float:
        return self.resolve(Fixed(value_dp), metrics)

    def dynamic_px(
            self,
            value_dp: float,
            metrics: DisplayMetrics,
            base: ScreenBase | str = ScreenBase.LOWEST,
            orientation: BaseOrientation | str = BaseOrientation.AUTO,
            strategy: ScalingStrategy | str = ScalingStrategy.RATIO,
    ) -> float:
        return self.resolve(Dynamic(value_dp, base=base, orientation=orientation, strategy=strategy), metrics)

    def dynamic_sp(
            self,
            value_dp: float,
            metrics: DisplayMetrics,
            base: ScreenBase | str = ScreenBase.LOWEST,
            orientation: BaseOrientation | str = BaseOrientation.AUTO,
            strategy: ScalingStrategy | str = ScalingStrategy.RATIO,
    ) -> float:
        """Dynamic text size in raw pixels, font scale applied."""
        spec = Dynamic(value_dp, is_scaled_pixel=True, base=base, orientation=orientation, strategy=strategy)
        return self.resolve(spec, metrics)

    def percentage_px(
            self,
            fraction: float,
            metrics: DisplayMetrics,
            base: ScreenBase | str = ScreenBase.LOWEST,
            orientation: BaseOrientation | str = BaseOrientation.AUTO,
    ) -> float:
        return self.resolve(Percentage(fraction, base=base, orientation=orientation), metrics)

    def physical_px(
            self,
            value: float,
            metrics: DisplayMetrics,
            unit: PhysicalUnit | str = PhysicalUnit.MM,
    ) -> float:
        return self.resolve(Physical.from_unit(value, unit), metrics)

    def fluid_px(
            self,
            min_dp: float,
            max_dp: float,
            metrics: DisplayMetrics,
            min_width_dp: float = 320,
            max_width_dp: float = 768,
            breakpoints: tuple[FluidBreakpoint, ...] = (),
    ) -> float:
        spec = Fluid(min_dp, max_dp, min_width_dp=min_width_dp, max_width_dp=max_width_dp, breakpoints=breakpoints)
        return self.resolve(spec, metrics)


# Private Methods ------------------------------------------------------------------------------------------------------

def _check_metrics(metrics, reference) -> None:
    if not isinstance(metrics, DisplayMetrics):
        raise TypeError(f"metrics must be DisplayMetrics, got {fmt_type(metrics)}")
    if not isinstance(reference, ReferenceProfile):
        raise TypeError(f"reference must be ReferenceProfile, got {fmt_type(reference)}")


def _check_conf(conf) -> None:
    if conf is not None and not isinstance(conf, ScaleConf):
        raise TypeError(f"conf must be ScaleConf | None, got {fmt_type(conf)}")


def _size(value: float, name: str) -> float:
    """Spec sizes are re-checked at resolution time."""
    if value < 0:
        raise InvalidSpec(f"{name} must be >= 0, got {fmt_value(value)}")
    return value
