"""Tests for width resolution."""

import dataclasses

import pytest
from earth_pixel.errors import (
    ConstructionError,
    InvalidUnit,
    InvalidWidth,
    WidthTooLarge,
    WidthTooSmall,
)
from earth_pixel.fixedpoint import PRECISION, round_fixed
from earth_pixel.resolution import (
    EARTH_PERIMETER,
    MAX_DIVISIONS,
    MAX_WIDTH,
    Resolution,
    meters_to_degrees,
    resolve_resolution,
)


class TestMetersToDegrees:
    """Tests for meters -> degrees conversion."""

    def test_full_perimeter(self):
        assert meters_to_degrees(EARTH_PERIMETER) == pytest.approx(360)

    def test_560_meters(self):
        assert meters_to_degrees(560) == pytest.approx(0.005036201, rel=1e-6)


class TestResolveResolution:
    """Tests for resolve_resolution."""

    def test_half_degree(self):
        resolution = resolve_resolution(0.5, "degrees")
        assert resolution == Resolution(360, 0.5)

    def test_snaps_to_integer_divisions(self):
        """Test that the width is recomputed from the division count."""
        resolution = resolve_resolution(0.8047, "degrees")
        assert resolution.divisions == 224
        assert resolution.width == round_fixed(180 / 224)

    def test_meters(self):
        """Test meters are converted through the Earth's perimeter."""
        resolution = resolve_resolution(560, "meters")
        assert resolution.divisions == 35742
        assert resolution.width == round_fixed(180 / 35742)

    def test_meters_is_default(self):
        assert resolve_resolution(560) == resolve_resolution(560, "meters")

    def test_numeric_string(self):
        assert resolve_resolution("0.5", "degrees").divisions == 360

    def test_max_width(self):
        resolution = resolve_resolution(MAX_WIDTH, "degrees")
        assert resolution.divisions == 4
        assert resolution.width == 45.0

    def test_tiles_pole_to_pole(self):
        """Test that divisions * width covers 180 degrees within the precision."""
        for width in (0.05, 0.3, 1.7, 7, 33):
            resolution = resolve_resolution(width, "degrees")
            assert resolution.divisions * resolution.width == pytest.approx(
                180, abs=resolution.divisions * 1e-10
            )

    def test_monotonic_divisions(self):
        """Test that a smaller width never yields fewer divisions."""
        widths = [45, 30, 10, 5, 1, 0.8047, 0.5, 0.1, 0.05, 0.001]
        divisions = [resolve_resolution(w, "degrees").divisions for w in widths]
        assert divisions == sorted(divisions)

        meters = [5_000_000, 100_000, 45_000, 1000, 560, 500, 50, 25]
        divisions = [resolve_resolution(m, "meters").divisions for m in meters]
        assert divisions == sorted(divisions)


class TestResolveResolutionErrors:
    """Tests for rejected widths and units."""

    @pytest.mark.parametrize("width", [None, "NaN", "abc", "", [1], float("nan")])
    def test_not_a_number(self, width):
        with pytest.raises(InvalidWidth):
            resolve_resolution(width, "degrees")

    @pytest.mark.parametrize("width", [0, -1, -0.5, "-3"])
    def test_not_positive(self, width):
        with pytest.raises(InvalidWidth):
            resolve_resolution(width, "degrees")

    def test_infinite(self):
        with pytest.raises(InvalidWidth):
            resolve_resolution(float("inf"), "degrees")

    def test_unknown_unit(self):
        with pytest.raises(InvalidUnit):
            resolve_resolution(200, "wrong")

    def test_too_large_degrees(self):
        with pytest.raises(WidthTooLarge):
            resolve_resolution(220, "degrees")

    def test_too_large_meters(self):
        with pytest.raises(WidthTooLarge):
            resolve_resolution(EARTH_PERIMETER / 2, "meters")

    @pytest.mark.parametrize("width", [1e-300, 5e-324])
    def test_too_small(self, width):
        """Test widths finer than the fixed-point precision."""
        with pytest.raises(WidthTooSmall):
            resolve_resolution(width, "degrees")

    def test_all_are_construction_errors(self):
        for args in [(0, "degrees"), (1, "feet"), (90, "degrees")]:
            with pytest.raises(ConstructionError):
                resolve_resolution(*args)

    def test_are_value_errors(self):
        with pytest.raises(ValueError):
            resolve_resolution("abc")


class TestResolution:
    """Tests for the Resolution dataclass."""

    def test_from_divisions(self):
        assert Resolution.from_divisions(360) == resolve_resolution(0.5, "degrees")

    def test_fixed_width(self):
        assert Resolution.from_divisions(360).fixed_width == 5_000_000_000

    def test_frozen(self):
        resolution = Resolution.from_divisions(360)
        with pytest.raises(dataclasses.FrozenInstanceError):
            resolution.divisions = 10

    def test_too_few_divisions(self):
        with pytest.raises(WidthTooLarge):
            Resolution.from_divisions(3)

    def test_zero_divisions(self):
        with pytest.raises(ConstructionError):
            Resolution.from_divisions(0)

    def test_width_mismatch(self):
        with pytest.raises(ConstructionError):
            Resolution(360, 0.4)

    def test_non_integer_divisions(self):
        with pytest.raises(ConstructionError):
            Resolution(360.0, 0.5)

    def test_below_precision(self):
        with pytest.raises(WidthTooSmall):
            Resolution.from_divisions(10 ** 13)

    def test_non_integer_from_divisions(self):
        with pytest.raises(ConstructionError):
            Resolution.from_divisions("360")


class TestFinestGrid:
    """Tests for the finest accepted division count."""

    def test_max_divisions_accepted(self):
        resolution = Resolution.from_divisions(MAX_DIVISIONS)
        assert resolution.fixed_width > 0

    def test_beyond_max_divisions(self):
        with pytest.raises(WidthTooSmall):
            Resolution.from_divisions(MAX_DIVISIONS + 1)

    def test_direct_construction_checked(self):
        divisions = MAX_DIVISIONS + 1
        with pytest.raises(WidthTooSmall):
            Resolution(divisions, round_fixed(180 / divisions))

    def test_uncovered_strip_below_one_cell(self):
        """Test that MAX_DIVISIONS is the largest count whose floored widths lose less than a cell."""
        cells = 2 * MAX_DIVISIONS + 2
        assert cells * (cells + 1) < 360 * PRECISION
        cells += 2
        assert cells * (cells + 1) >= 360 * PRECISION

    def test_meters_limit(self):
        """Test that cells of about 21 m are the finest accepted."""
        assert resolve_resolution(25, "meters").divisions <= MAX_DIVISIONS
        for width in (20, 1):
            with pytest.raises(WidthTooSmall):
                resolve_resolution(width, "meters")

    @pytest.mark.parametrize("width", [0.00018, 1.5e-10])
    def test_degrees_limit(self, width):
        with pytest.raises(WidthTooSmall):
            resolve_resolution(width, "degrees")
