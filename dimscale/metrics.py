"""
Display metrics snapshots, reference device profiles and metrics providers.

DisplayMetrics is the immutable snapshot of the current display the UI layer hands over on
every resolution; ReferenceProfile describes the design baseline device that dynamic scaling
is measured against. Both validate themselves on construction, so a resolver never sees a
non-positive dimension or density.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Protocol, Self, runtime_checkable

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidMetrics
from .units import UnitsConf
from .validators import validate_positive


# Enums ----------------------------------------------------------------------------------------------------------------

@unique
class Orientation(StrEnum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


# Classes --------------------------------------------------------------------------------------------------------------

class _ScreenAxes:
    """Axis helpers shared by DisplayMetrics and ReferenceProfile."""

    width_px: float
    height_px: float
    density_dpi: float

    @property
    def lowest_px(self) -> float:
        """The shorter screen side in pixels."""
        return min(self.width_px, self.height_px)

    @property
    def highest_px(self) -> float:
        """The longer screen side in pixels."""
        return max(self.width_px, self.height_px)

    @property
    def aspect_ratio(self) -> float:
        """Longer side over shorter side, always >= 1."""
        return self.highest_px / self.lowest_px

    @property
    def orientation(self) -> Orientation:
        """PORTRAIT when height exceeds width, LANDSCAPE otherwise (square counts as landscape)."""
        return Orientation.PORTRAIT if self.height_px > self.width_px else Orientation.LANDSCAPE

    @property
    def density(self) -> float:
        """Logical density, the number of pixels per dp."""
        return self.density_dpi / UnitsConf.DP_BASELINE_DPI

    @property
    def width_dp(self) -> float:
        return self.width_px / self.density

    @property
    def height_dp(self) -> float:
        return self.height_px / self.density

    def _validate_axes(self, *names: str):
        """Validate and normalize fields in place. Uses object.__setattr__ for frozen dataclass."""
        for name in names:
            value = validate_positive(getattr(self, name), name=name, exc=InvalidMetrics)
            object.__setattr__(self, name, value)


@dataclass(frozen=True)
class DisplayMetrics(_ScreenAxes):
    """
    Immutable snapshot of the current display.

    Attributes:
        width_px: Screen width in raw pixels.
        height_px: Screen height in raw pixels.
        density_dpi: Pixel density in dots per inch, 160 dpi is 1 px per dp.
        font_scale: User font-size preference multiplier, 1.0 is the system default.

    Raises:
        InvalidMetrics: If any field is non-positive or not finite.
        TypeError: If any field is not numeric.
    """

    width_px: float
    height_px: float
    density_dpi: float
    font_scale: float = 1.0

    def __post_init__(self):
        self._validate_axes("width_px", "height_px", "density_dpi", "font_scale")

    @classmethod
    def from_reference(cls, reference: "ReferenceProfile", font_scale: float = 1.0) -> Self:
        """Metrics of a device identical to the reference profile."""
        return cls(
            width_px=reference.width_px,
            height_px=reference.height_px,
            density_dpi=reference.density_dpi,
            font_scale=font_scale,
        )


@dataclass(frozen=True)
class ReferenceProfile(_ScreenAxes):
    """
    Screen of the design baseline device that dynamic scaling ratios are computed against.

    Configured once at startup and passed explicitly to the resolver.

    Raises:
        InvalidMetrics: If any field is non-positive or not finite.
    """

    width_px: float
    height_px: float
    density_dpi: float

    def __post_init__(self):
        self._validate_axes("width_px", "height_px", "density_dpi")

    @classmethod
    def from_metrics(cls, metrics: DisplayMetrics) -> Self:
        """Use a measured device as the reference baseline, font scale is dropped."""
        return cls(width_px=metrics.width_px, height_px=metrics.height_px, density_dpi=metrics.density_dpi)


@runtime_checkable
class MetricsProvider(Protocol):
    """Source of the latest known display metrics, implemented by the UI layer."""

    def current(self) -> DisplayMetrics: ...


class StaticMetricsProvider:
    """
    MetricsProvider holding a single snapshot.

    The UI layer calls update() on rotation or configuration change; readers always get a
    whole snapshot since the swap is a single reference assignment.
    """

    def __init__(self, metrics: DisplayMetrics) -> None:
        self._metrics = _ensure_metrics(metrics)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._metrics!r})"

    def current(self) -> DisplayMetrics:
        return self._metrics

    def update(self, metrics: DisplayMetrics) -> None:
        self._metrics = _ensure_metrics(metrics)


# Constants ------------------------------------------------------------------------------------------------------------

# Illustrative baselines only, callers pick the profile their design was drawn for
REFERENCE_PROFILES: Mapping[str, ReferenceProfile] = frozendict({
    "phone": ReferenceProfile(width_px=411, height_px=731, density_dpi=420),
    "phone_compact": ReferenceProfile(width_px=360, height_px=640, density_dpi=320),
    "tablet": ReferenceProfile(width_px=800, height_px=1280, density_dpi=240),
})


# Private Methods ------------------------------------------------------------------------------------------------------

def _ensure_metrics(metrics) -> DisplayMetrics:
    if not isinstance(metrics, DisplayMetrics):
        raise TypeError(f"metrics must be DisplayMetrics, got {type(metrics).__name__}")
    return metrics
