#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from dimscale.metrics import DisplayMetrics, ReferenceProfile
from dimscale.resolver import DimensionResolver


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def reference() -> ReferenceProfile:
    """Design baseline: 411×731 px at 420 dpi."""
    return ReferenceProfile(width_px=411, height_px=731, density_dpi=420)


@pytest.fixture
def device() -> DisplayMetrics:
    """Large portrait phone: 1080×2400 px at 440 dpi, default font scale."""
    return DisplayMetrics(width_px=1080, height_px=2400, density_dpi=440, font_scale=1.0)


@pytest.fixture
def landscape_device() -> DisplayMetrics:
    """The same phone rotated to landscape."""
    return DisplayMetrics(width_px=2400, height_px=1080, density_dpi=440, font_scale=1.0)


@pytest.fixture
def resolver(reference) -> DimensionResolver:
    return DimensionResolver(reference)
