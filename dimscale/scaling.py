#
# Dimscale Scale Factor Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
import os
import warnings
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidMetrics, ScaleClampWarning
from .metrics import DisplayMetrics, Orientation, ReferenceProfile
from .numeric import clamp
from .tools import fmt_value
from .validators import validate_positive, validate_range

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__)) + os.sep


# Enums ----------------------------------------------------------------------------------------------------------------

# @formatter:off
@unique
class ScreenBase(StrEnum):
    """
    Screen axis a scale ratio or percentage is measured on.

    Attributes:
        LOWEST (str)  : Shorter side, min(width, height)
        HIGHEST (str) : Longer side, max(width, height)
        WIDTH (str)   : Width as reported, whatever the orientation
        HEIGHT (str)  : Height as reported, whatever the orientation
    """
    LOWEST = "lowest"
    HIGHEST = "highest"
    WIDTH = "width"
    HEIGHT = "height"


@unique
class BaseOrientation(StrEnum):
    """
    Orientation a design was drawn for.

    Attributes:
        AUTO (str)      : Never swap LOWEST and HIGHEST
        PORTRAIT (str)  : Swap LOWEST and HIGHEST when the device is in landscape
        LANDSCAPE (str) : Swap LOWEST and HIGHEST when the device is in portrait
    """
    AUTO = "auto"
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


@unique
class ScalingStrategy(StrEnum):
    """
    Curve that turns the current-vs-reference screen ratio into a scale factor.

    r is axis(current) / axis(reference) on the selected base; W, H are the screen sides.
    Every strategy gives exactly 1.0 on the reference device itself.

    Attributes:
        RATIO (str)        : r
        ASPECT (str)       : 1 + (r - 1) * (1 + ar_sensitivity * ln(AR / AR_ref))
        BALANCED (str)     : r up to transition_ratio, logarithmic growth above it
        LOGARITHMIC (str)  : 1 + sensitivity * ln(r)
        POWER (str)        : r ** power_exponent
        INTERPOLATED (str) : halfway between 1 and r
        DIAGONAL (str)     : hypot(W, H) / hypot(W_ref, H_ref)
        PERIMETER (str)    : (W + H) / (W_ref + H_ref)
        FIT (str)          : min of the shorter-side and longer-side ratios
        FILL (str)         : max of the shorter-side and longer-side ratios
        NONE (str)         : 1.0
    """
    RATIO = "ratio"
    ASPECT = "aspect"
    BALANCED = "balanced"
    LOGARITHMIC = "logarithmic"
    POWER = "power"
    INTERPOLATED = "interpolated"
    DIAGONAL = "diagonal"
    PERIMETER = "perimeter"
    FIT = "fit"
    FILL = "fill"
    NONE = "none"
# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class ScaleConf:
    """
    Clamp band, strategy parameters and diagnostics policy for dynamic scaling.

    The band keeps very small or very large screens from scaling a reference size out of
    proportion. It must contain 1.0, the factor of the reference device itself. Defaults are
    illustrative; tune them to the reference profile in use.

    Attributes:
        min_scale: Lower bound of the scale factor, in (0, 1].
        max_scale: Upper bound of the scale factor, >= 1.
        on_clamp: "ignore" clamps silently, "warn" also emits a ScaleClampWarning.
        sensitivity: Logarithmic gain of BALANCED and LOGARITHMIC, in [0, 1].
        power_exponent: Exponent of POWER, in [0, 1].
        transition_ratio: Ratio above which BALANCED turns logarithmic, > 0.
        ar_sensitivity: Aspect-ratio gain of ASPECT, in [0, 1].

    Raises:
        ValueError: On an invalid band or parameter, or an unknown on_clamp value.
    """

    min_scale: float = 0.85
    max_scale: float = 1.30
    on_clamp: Literal["ignore", "warn"] = "ignore"
    sensitivity: float = 0.40
    power_exponent: float = 0.75
    transition_ratio: float = 1.6
    ar_sensitivity: float = 0.8

    def __post_init__(self):
        min_scale = validate_positive(self.min_scale, name="min_scale")
        max_scale = validate_positive(self.max_scale, name="max_scale")
        if min_scale > max_scale:
            raise ValueError(
                f"min_scale must be <= max_scale, got {fmt_value(min_scale)} > {fmt_value(max_scale)}"
            )
        if not min_scale <= 1.0 <= max_scale:
            raise ValueError(
                f"scale band must contain 1.0, got [{fmt_value(min_scale)}, {fmt_value(max_scale)}]"
            )
        if self.on_clamp not in ("ignore", "warn"):
            raise ValueError(f"on_clamp must be 'ignore' or 'warn', got {fmt_value(self.on_clamp)}")

        object.__setattr__(self, "min_scale", min_scale)
        object.__setattr__(self, "max_scale", max_scale)
        for name in ("sensitivity", "power_exponent", "ar_sensitivity"):
            object.__setattr__(self, name, validate_range(getattr(self, name), 0, 1, name=name))
        object.__setattr__(
            self, "transition_ratio", validate_positive(self.transition_ratio, name="transition_ratio")
        )


class ScaleFactorCalculator:
    """
    Derives the dimensionless scale factor between the current display and the reference.

    factor = strategy(current, reference), clamped to [conf.min_scale, conf.max_scale].
    The default RATIO strategy is axis(current) / axis(reference).

    Stateless apart from its immutable ScaleConf, so one instance can be shared between threads.
    """

    def __init__(self, conf: ScaleConf | None = None) -> None:
        self.conf = conf if conf is not None else ScaleConf()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(conf={self.conf!r})"

    def factor(
            self,
            current: DisplayMetrics,
            reference: ReferenceProfile,
            base: ScreenBase | str = ScreenBase.LOWEST,
            strategy: ScalingStrategy | str = ScalingStrategy.RATIO,
    ) -> float:
        """
        Clamped scale factor of current vs. reference.

        Returns exactly 1.0 when current has the reference's screen size.

        Raises:
            InvalidMetrics: If either axis is non-positive.
            ValueError: On an unknown base or strategy.
        """
        base = ScreenBase(base)
        strategy = ScalingStrategy(strategy)
        current_axis = validate_positive(select_axis(current, base), name=f"current {base} axis", exc=InvalidMetrics)
        reference_axis = validate_positive(
            select_axis(reference, base), name=f"reference {base} axis", exc=InvalidMetrics
        )

        raw = self._raw_factor(current, reference, current_axis / reference_axis, strategy)
        min_scale, max_scale = self.conf.min_scale, self.conf.max_scale
        clamped = clamp(raw, min_scale, max_scale)
        if clamped != raw and self.conf.on_clamp == "warn":
            warnings.warn(
                f"Scale factor {raw:.4g} ({strategy} on {base} axis) clamped to {clamped:.4g}, "
                f"band is [{min_scale:.4g}, {max_scale:.4g}]",
                ScaleClampWarning,
                skip_file_prefixes=(_PACKAGE_DIR,),
            )
        return clamped

    def _raw_factor(self, current, reference, ratio: float, strategy: ScalingStrategy) -> float:
        conf = self.conf

        if strategy is ScalingStrategy.RATIO:
            return ratio
        if strategy is ScalingStrategy.ASPECT:
            ar_shift = math.log(_aspect_ratio(current) / _aspect_ratio(reference))
            return 1.0 + (ratio - 1.0) * (1.0 + conf.ar_sensitivity * ar_shift)
        if strategy is ScalingStrategy.BALANCED:
            if ratio <= conf.transition_ratio:
                return ratio
            return conf.transition_ratio + conf.sensitivity * math.log(1.0 + ratio - conf.transition_ratio)
        if strategy is ScalingStrategy.LOGARITHMIC:
            return 1.0 + conf.sensitivity * math.log(ratio)
        if strategy is ScalingStrategy.POWER:
            return ratio ** conf.power_exponent
        if strategy is ScalingStrategy.INTERPOLATED:
            return 1.0 + (ratio - 1.0) * 0.5
        if strategy is ScalingStrategy.DIAGONAL:
            return math.hypot(current.width_px, current.height_px) / math.hypot(reference.width_px, reference.height_px)
        if strategy is ScalingStrategy.PERIMETER:
            return (current.width_px + current.height_px) / (reference.width_px + reference.height_px)
        if strategy in (ScalingStrategy.FIT, ScalingStrategy.FILL):
            lowest = select_axis(current, ScreenBase.LOWEST) / select_axis(reference, ScreenBase.LOWEST)
            highest = select_axis(current, ScreenBase.HIGHEST) / select_axis(reference, ScreenBase.HIGHEST)
            return min(lowest, highest) if strategy is ScalingStrategy.FIT else max(lowest, highest)
        return 1.0


# Methods --------------------------------------------------------------------------------------------------------------

def select_axis(screen: DisplayMetrics | ReferenceProfile, base: ScreenBase | str) -> float:
    """
    Pick the pixel length of a screen axis.

    Examples:
        >>> select_axis(DisplayMetrics(1080, 2400, 440), ScreenBase.LOWEST)
        1080
    """
    base = ScreenBase(base)
    if base is ScreenBase.LOWEST:
        return min(screen.width_px, screen.height_px)
    if base is ScreenBase.HIGHEST:
        return max(screen.width_px, screen.height_px)
    if base is ScreenBase.WIDTH:
        return screen.width_px
    return screen.height_px


def would_invert(orientation: BaseOrientation | str, metrics: DisplayMetrics) -> bool:
    """True when the device orientation differs from the design orientation."""
    orientation = BaseOrientation(orientation)
    if orientation is BaseOrientation.AUTO:
        return False
    is_portrait = metrics.orientation is Orientation.PORTRAIT
    return (orientation is BaseOrientation.PORTRAIT) != is_portrait


def resolve_screen_base(
        base: ScreenBase | str,
        orientation: BaseOrientation | str,
        metrics: DisplayMetrics,
) -> ScreenBase:
    """
    Swap LOWEST and HIGHEST when the device is rotated away from the design orientation.

    WIDTH and HEIGHT name a concrete axis and are returned unchanged.

    Examples:
        >>> landscape = DisplayMetrics(2400, 1080, 440)
        >>> resolve_screen_base(ScreenBase.LOWEST, BaseOrientation.PORTRAIT, landscape)
        <ScreenBase.HIGHEST: 'highest'>
    """
    base = ScreenBase(base)
    if base not in (ScreenBase.LOWEST, ScreenBase.HIGHEST) or not would_invert(orientation, metrics):
        return base
    return ScreenBase.HIGHEST if base is ScreenBase.LOWEST else ScreenBase.LOWEST


# Private Methods ------------------------------------------------------------------------------------------------------

def _aspect_ratio(screen) -> float:
    return select_axis(screen, ScreenBase.HIGHEST) / select_axis(screen, ScreenBase.LOWEST)
