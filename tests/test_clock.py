"""
Tests for time sources and the process-wide default clock.
"""

import pytest
from velocity_ramp import clock as clock_module
from velocity_ramp.clock import ManualClock, MonotonicClock, default_clock, install_default_clock


@pytest.fixture
def fresh_default(monkeypatch):
    """Run a test against an unused default clock slot."""
    monkeypatch.setattr(clock_module, "_default_clock", None)
    monkeypatch.setattr(clock_module, "_default_clock_frozen", False)


class TestManualClock:

    def test_starts_at_given_time(self):
        assert ManualClock()() == 0.0
        assert ManualClock(1500)() == 1500.0

    def test_advance(self):
        clock = ManualClock()
        assert clock.advance(20) == 20.0
        clock.advance(5.5)
        assert clock() == 25.5
        assert clock.now == 25.5

    def test_set(self):
        clock = ManualClock(10)
        clock.set(40)
        assert clock() == 40.0

    def test_cannot_go_backwards(self):
        clock = ManualClock(100)
        with pytest.raises(ValueError):
            clock.advance(-1)
        with pytest.raises(ValueError):
            clock.set(99)
        assert clock() == 100.0


class TestMonotonicClock:

    def test_whole_milliseconds_non_decreasing(self):
        clock = MonotonicClock()
        first = clock()
        second = clock()
        assert first == int(first)
        assert second >= first


class TestDefaultClock:

    def test_monotonic_when_nothing_installed(self, fresh_default):
        assert isinstance(default_clock(), MonotonicClock)
        assert default_clock() is default_clock()

    def test_installed_clock_is_used(self, fresh_default):
        manual = ManualClock(42)
        install_default_clock(manual)
        assert default_clock() is manual

    def test_install_before_read_can_replace(self, fresh_default):
        install_default_clock(ManualClock())
        second = ManualClock(7)
        install_default_clock(second)
        assert default_clock() is second

    def test_install_after_read_raises(self, fresh_default):
        default_clock()
        with pytest.raises(RuntimeError):
            install_default_clock(ManualClock())

    def test_limiter_uses_default_clock(self, fresh_default):
        from velocity_ramp import RampLimiter

        manual = ManualClock()
        install_default_clock(manual)
        ramp = RampLimiter(1.0)
        ramp.get_output(1.0)
        manual.advance(500)
        assert ramp.get_output(1.0) == pytest.approx(0.5)
