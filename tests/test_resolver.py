#
# Dimscale - Resolver Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from dimscale.errors import InvalidSpec, ScaleClampWarning
from dimscale.metrics import REFERENCE_PROFILES, DisplayMetrics, ReferenceProfile, StaticMetricsProvider
from dimscale.resolver import DimensionResolver, resolve
from dimscale.scaling import BaseOrientation, ScaleConf, ScalingStrategy, ScreenBase
from dimscale.specs import DimensionSpec, Dynamic, Fixed, Fluid, FluidBreakpoint, Percentage, Physical
from dimscale.units import PhysicalUnit


# Main Functionality Tests ---------------------------------------------------------------------------------------------

class TestReferenceScenario:
    """Reference 411×731 @ 420 dpi, device 1080×2400 @ 440 dpi, font scale 1.0."""

    def test_fixed(self, reference, device):
        assert resolve(Fixed(64), device, reference) == pytest.approx(176.0)

    def test_physical(self, reference, device):
        assert resolve(Physical(5.0), device, reference) == pytest.approx(86.61, abs=0.01)

    def test_percentage_lowest(self, reference, device):
        assert resolve(Percentage(0.80, ScreenBase.LOWEST), device, reference) == pytest.approx(864.0)

    def test_dynamic_clamped(self, reference, device):
        # 1080 / 411 exceeds the band, factor clamps to 1.30
        assert resolve(Dynamic(64), device, reference) == pytest.approx(176.0 * 1.30)

    def test_returns_float(self, reference, device):
        for spec in (Fixed(64), Dynamic(64), Percentage(1.0), Physical(5), Fluid(16, 24)):
            assert isinstance(resolve(spec, device, reference), float)


class TestFixed:

    @pytest.mark.parametrize("value_dp", [0, 1, 16, 64.5, 1000])
    def test_independent_of_reference(self, device, value_dp):
        results = {
            resolve(Fixed(value_dp), device, profile)
            for profile in REFERENCE_PROFILES.values()
        }
        assert len(results) == 1

    def test_font_scale_ignored(self, reference):
        small = DisplayMetrics(1080, 2400, 440, font_scale=0.85)
        large = DisplayMetrics(1080, 2400, 440, font_scale=1.3)
        assert resolve(Fixed(16), small, reference) == resolve(Fixed(16), large, reference)


class TestDynamic:

    @pytest.mark.parametrize("value_dp", [0, 8, 16, 48.5])
    @pytest.mark.parametrize("base", list(ScreenBase))
    def test_equals_fixed_on_reference_device(self, reference, value_dp, base):
        metrics = DisplayMetrics.from_reference(reference)
        assert resolve(Dynamic(value_dp, base=base), metrics, reference) == resolve(Fixed(value_dp), metrics, reference)

    def test_within_band(self):
        reference = ReferenceProfile(1000, 2000, 160)
        metrics = DisplayMetrics(1100, 2200, 160)
        assert resolve(Dynamic(100), metrics, reference) == pytest.approx(110)

    def test_scaled_pixel_applies_font_scale(self, reference):
        metrics = DisplayMetrics(1080, 2400, 440, font_scale=1.5)
        layout_px = resolve(Dynamic(16), metrics, reference)
        text_px = resolve(Dynamic(16, is_scaled_pixel=True), metrics, reference)
        assert text_px == pytest.approx(layout_px * 1.5)
        assert text_px == pytest.approx(16 * 2.75 * 1.30 * 1.5)

    def test_layout_ignores_font_scale(self, reference):
        small = DisplayMetrics(1080, 2400, 440, font_scale=0.85)
        large = DisplayMetrics(1080, 2400, 440, font_scale=1.3)
        assert resolve(Dynamic(16), small, reference) == resolve(Dynamic(16), large, reference)

    def test_custom_clamp_band(self, reference, device):
        conf = ScaleConf(min_scale=0.5, max_scale=4.0)
        expected = 16 * 2.75 * (1080 / 411)
        assert resolve(Dynamic(16), device, reference, conf) == pytest.approx(expected)

    def test_portrait_design_on_landscape_device(self, reference, device, landscape_device):
        spec = Dynamic(16, orientation=BaseOrientation.PORTRAIT)
        conf = ScaleConf(min_scale=0.1, max_scale=10)
        portrait_px = resolve(spec, device, reference, conf)
        landscape_px = resolve(spec, landscape_device, reference, conf)
        # LOWEST swaps to HIGHEST when rotated
        assert portrait_px == pytest.approx(16 * 2.75 * (1080 / 411))
        assert landscape_px == pytest.approx(16 * 2.75 * (2400 / 731))

    @pytest.mark.parametrize("strategy", list(ScalingStrategy))
    def test_every_strategy_equals_fixed_on_reference_device(self, reference, strategy):
        metrics = DisplayMetrics.from_reference(reference)
        assert resolve(Dynamic(16, strategy=strategy), metrics, reference) == resolve(Fixed(16), metrics, reference)

    def test_strategy_applied_then_clamped(self, reference, device):
        spec = Dynamic(16, strategy=ScalingStrategy.FIT)
        wide = ScaleConf(min_scale=0.1, max_scale=10)
        assert resolve(spec, device, reference, wide) == pytest.approx(16 * 2.75 * min(1080 / 411, 2400 / 731))
        assert resolve(spec, device, reference) == pytest.approx(16 * 2.75 * 1.30)


class TestPercentage:

    def test_full_width(self, reference, device):
        assert resolve(Percentage(1.0, ScreenBase.WIDTH), device, reference) == device.width_px

    @pytest.mark.parametrize(
        "base, expected",
        [
            pytest.param(ScreenBase.LOWEST, 540, id="lowest"),
            pytest.param(ScreenBase.HIGHEST, 1200, id="highest"),
            pytest.param(ScreenBase.WIDTH, 540, id="width"),
            pytest.param(ScreenBase.HEIGHT, 1200, id="height"),
        ],
    )
    def test_half(self, reference, device, base, expected):
        assert resolve(Percentage(0.5, base), device, reference) == pytest.approx(expected)

    def test_no_density_or_scale(self, reference):
        low_dpi = DisplayMetrics(1080, 2400, 120)
        high_dpi = DisplayMetrics(1080, 2400, 640)
        spec = Percentage(0.25)
        assert resolve(spec, low_dpi, reference) == resolve(spec, high_dpi, reference) == 270

    def test_orientation_inversion(self, reference, landscape_device):
        spec = Percentage(0.5, ScreenBase.LOWEST, BaseOrientation.PORTRAIT)
        assert resolve(spec, landscape_device, reference) == pytest.approx(1200)


class TestPhysicalAndFluid:

    def test_physical_ignores_reference(self, device):
        results = {resolve(Physical(5), device, profile) for profile in REFERENCE_PROFILES.values()}
        assert len(results) == 1

    def test_physical_inch(self, reference, device):
        assert resolve(Physical.from_unit(1, PhysicalUnit.INCH), device, reference) == pytest.approx(440)

    def test_fluid(self, reference, device):
        width_dp = 1080 / 2.75
        expected_dp = 16 + 8 * (width_dp - 320) / 448
        assert resolve(Fluid(16, 24), device, reference) == pytest.approx(expected_dp * 2.75)

    def test_fluid_clamped_on_tablet(self, reference):
        tablet = DisplayMetrics(1600, 2560, 320)
        assert resolve(Fluid(16, 24), tablet, reference) == pytest.approx(24 * 2)


class TestResolveErrors:

    def test_unknown_spec(self, reference, device):
        with pytest.raises(TypeError, match="DimensionSpec"):
            resolve(64, device, reference)

    def test_base_spec_not_resolvable(self, reference, device):
        with pytest.raises(TypeError):
            resolve(DimensionSpec(), device, reference)

    def test_bad_metrics_type(self, reference):
        with pytest.raises(TypeError, match="metrics"):
            resolve(Fixed(16), {"width_px": 1080}, reference)

    def test_bad_reference_type(self, device):
        with pytest.raises(TypeError, match="reference"):
            resolve(Fixed(16), device, (411, 731, 420))

    @pytest.mark.parametrize("spec", [Fixed(16), Dynamic(16)], ids=["fixed", "dynamic"])
    def test_bad_conf_type(self, reference, device, spec):
        with pytest.raises(TypeError, match="conf"):
            resolve(spec, device, reference, conf={"min_scale": 0.5})

    def test_spec_bypassing_validation(self, reference, device):
        spec = object.__new__(Percentage)
        object.__setattr__(spec, "fraction", 1.5)
        object.__setattr__(spec, "base", ScreenBase.WIDTH)
        object.__setattr__(spec, "orientation", BaseOrientation.AUTO)
        with pytest.raises(InvalidSpec, match="fraction"):
            resolve(spec, device, reference)


# Helper Classes Tests -------------------------------------------------------------------------------------------------

class TestDimensionResolver:

    def test_idempotent(self, resolver, device):
        for spec in (Fixed(13.7), Dynamic(13.7, True), Percentage(0.33), Physical(3.3), Fluid(10, 30)):
            assert resolver.resolve(spec, device) == resolver.resolve(spec, device)

    def test_matches_module_resolve(self, resolver, reference, device):
        spec = Dynamic(24, is_scaled_pixel=True)
        assert resolver.resolve(spec, device) == resolve(spec, device, reference)

    def test_requires_reference(self):
        with pytest.raises(TypeError, match="reference"):
            DimensionResolver(None)
        with pytest.raises(TypeError, match="conf"):
            DimensionResolver(REFERENCE_PROFILES["phone"], conf={"min_scale": 1})

    def test_properties(self, resolver, reference):
        assert resolver.reference == reference
        assert resolver.conf == ScaleConf()
        assert "DimensionResolver" in repr(resolver)

    def test_factor(self, resolver, reference, device):
        assert resolver.factor(DisplayMetrics.from_reference(reference)) == 1.0
        assert resolver.factor(device) == 1.30

    def test_resolve_many(self, resolver, device):
        specs = [Fixed(64), Physical(5.0), Percentage(0.8)]
        assert resolver.resolve_many(specs, device) == pytest.approx([176.0, 86.614, 864.0], abs=1e-3)
        assert resolver.resolve_many(iter([]), device) == []

    def test_resolve_current_follows_updates(self, resolver, device, landscape_device):
        provider = StaticMetricsProvider(device)
        spec = Percentage(1.0, ScreenBase.WIDTH)
        assert resolver.resolve_current(spec, provider) == 1080
        provider.update(landscape_device)
        assert resolver.resolve_current(spec, provider) == 2400

    def test_resolve_current_requires_provider(self, resolver, device):
        with pytest.raises(TypeError, match="provider"):
            resolver.resolve_current(Fixed(1), device)

    def test_conveniences(self, resolver, device):
        metrics = DisplayMetrics(1080, 2400, 440, font_scale=1.2)
        assert resolver.fixed_px(64, device) == pytest.approx(176.0)
        assert resolver.dynamic_px(64, device) == pytest.approx(176.0 * 1.30)
        assert resolver.dynamic_sp(16, metrics) == pytest.approx(16 * 2.75 * 1.30 * 1.2)
        assert resolver.percentage_px(0.8, device) == pytest.approx(864.0)
        assert resolver.percentage_px(0.5, device, base="height") == pytest.approx(1200)
        assert resolver.physical_px(5.0, device) == pytest.approx(86.614, abs=1e-3)
        assert resolver.physical_px(1, device, unit="inch") == pytest.approx(440)
        assert resolver.fluid_px(16, 24, device, min_width_dp=300, max_width_dp=400) == pytest.approx(
            (16 + 8 * (1080 / 2.75 - 300) / 100) * 2.75
        )

    def test_fluid_px_with_breakpoints(self, resolver):
        tablet = DisplayMetrics(1600, 2560, 320)
        bp = FluidBreakpoint(min_screen_dp=600, min_dp=20, max_dp=32, min_width_dp=600, max_width_dp=1200)
        assert resolver.fluid_px(16, 24, tablet, breakpoints=(bp,)) == pytest.approx((20 + 12 * 200 / 600) * 2)

    def test_clamp_warning_through_resolver(self, reference, device):
        resolver = DimensionResolver(reference, ScaleConf(on_clamp="warn"))
        with pytest.warns(ScaleClampWarning) as record:
            resolver.dynamic_px(16, device)
        assert record[0].filename.endswith("test_resolver.py")

    def test_strategy_conveniences(self, resolver, reference):
        metrics = DisplayMetrics(411 * 1.2, 731 * 1.2, 420, font_scale=1.5)
        dp_px = 16 * 420 / 160
        assert resolver.factor(metrics, strategy="interpolated") == pytest.approx(1.1)
        assert resolver.dynamic_px(16, metrics, strategy=ScalingStrategy.NONE) == pytest.approx(dp_px)
        assert resolver.dynamic_sp(16, metrics, strategy="interpolated") == pytest.approx(dp_px * 1.1 * 1.5)
