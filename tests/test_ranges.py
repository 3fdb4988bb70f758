"""
Tests for the numeric range helpers.

Tests clamping, deadband, range membership, sign and decimal rounding in the
ranges module.
"""

import pytest
from velocity_ramp.ranges import (
    clamp_symmetric,
    deadband,
    in_range,
    is_within_range,
    round_half_even,
    sign,
)


class TestInRange:
    """Test clamping into [lower, upper]."""

    def test_value_inside_range_unchanged(self):
        """A value inside the range should pass through unchanged."""
        assert in_range(0.3, -1.0, 1.0) == 0.3

    def test_value_above_upper_clamped(self):
        assert in_range(2.5, -1.0, 1.0) == 1.0

    def test_value_below_lower_clamped(self):
        assert in_range(-7.0, -1.0, 1.0) == -1.0

    def test_degenerate_range(self):
        """lower == upper collapses every value onto that bound."""
        assert in_range(5.0, 2.0, 2.0) == 2.0
        assert in_range(-5.0, 2.0, 2.0) == 2.0

    def test_inverted_bounds_raise(self):
        with pytest.raises(ValueError):
            in_range(0.0, 1.0, -1.0)

    def test_clamp_is_idempotent(self):
        """Clamping an already clamped value gives the same value."""
        bounds = [(-1.0, 1.0), (0.0, 0.5), (-3.0, -2.0), (4.0, 4.0)]
        values = [-10.0, -2.5, -1.0, -0.2, 0.0, 0.25, 1.0, 3.9, 100.0]
        for lo, hi in bounds:
            for x in values:
                once = in_range(x, lo, hi)
                assert in_range(once, lo, hi) == once

    def test_clamp_symmetric(self):
        assert clamp_symmetric(1.5, 1.0) == 1.0
        assert clamp_symmetric(-1.5, 1.0) == -1.0
        assert clamp_symmetric(0.5, 1.0) == 0.5

    def test_clamp_symmetric_negative_limit_raises(self):
        with pytest.raises(ValueError):
            clamp_symmetric(0.0, -1.0)


class TestDeadband:
    """Test deadband zeroing."""

    def test_inside_band_zeroed(self):
        assert deadband(0.05, 0.1) == 0.0
        assert deadband(-0.05, 0.1) == 0.0

    def test_outside_band_unchanged(self):
        assert deadband(0.5, 0.1) == 0.5
        assert deadband(-0.5, 0.1) == -0.5

    def test_edge_inclusive(self):
        """By default a value exactly on the band edge is zeroed."""
        assert deadband(0.1, 0.1) == 0.0

    def test_edge_exclusive(self):
        assert deadband(0.1, 0.1, inclusive=False) == 0.1

    def test_negative_band_raises(self):
        with pytest.raises(ValueError):
            deadband(0.0, -0.1)


class TestIsWithinRange:
    """Test range membership."""

    def test_inclusive_bounds(self):
        assert is_within_range(1.0, 0.0, 1.0)
        assert is_within_range(0.0, 0.0, 1.0)

    def test_exclusive_bounds(self):
        assert not is_within_range(1.0, 0.0, 1.0, inclusive=False)
        assert is_within_range(0.5, 0.0, 1.0, inclusive=False)

    def test_outside(self):
        assert not is_within_range(1.5, 0.0, 1.0)

    def test_inverted_bounds_raise(self):
        with pytest.raises(ValueError):
            is_within_range(0.0, 2.0, 1.0)


class TestSign:
    def test_signs(self):
        assert sign(3.2) == 1
        assert sign(-0.001) == -1
        assert sign(0.0) == 0
        assert sign(-0.0) == 0


class TestRoundHalfEven:
    """Test decimal rounding with half-to-even ties."""

    def test_halves_go_to_even(self):
        assert round_half_even(2.5, 0) == 2.0
        assert round_half_even(3.5, 0) == 4.0
        assert round_half_even(0.125, 2) == 0.12

    def test_uses_decimal_representation(self):
        """2.675 is rounded as written, not as its binary approximation."""
        assert round_half_even(2.675, 2) == 2.68
        assert round_half_even(1.005, 2) == 1.0

    def test_non_tie_rounding(self):
        assert round_half_even(0.123456, 3) == 0.123
        assert round_half_even(-1.987, 1) == -2.0

    def test_negative_places_raise(self):
        with pytest.raises(ValueError):
            round_half_even(1.0, -1)
