"""
Tests for the start-up ramp wrapper around an external controller.
"""

import pytest
from velocity_ramp import AccelWrappedController, ManualClock


class FixedController:
    """Controller stub returning a settable output and recording its inputs."""

    def __init__(self, output):
        self.output = output
        self.calls = []

    def compute(self, position, target):
        self.calls.append((position, target))
        return self.output


@pytest.fixture
def clock():
    return ManualClock()


class TestAccelWrappedController:

    def test_returns_raw_controller_output(self, clock):
        controller = FixedController(0.5)
        wrapped = AccelWrappedController(controller, accel_time=1.0, clock=clock)

        for _ in range(4):
            assert wrapped.get_output(1.0, 2.0) == 0.5
            clock.advance(300)
        assert controller.calls == [(1.0, 2.0)] * 4

    def test_ramp_period_ends_once(self, clock):
        controller = FixedController(0.5)
        wrapped = AccelWrappedController(controller, accel_time=1.0, clock=clock)

        wrapped.get_output(0.0, 1.0)
        assert wrapped.is_ramping
        assert wrapped.ramp_value == 0.0

        clock.advance(250)
        wrapped.get_output(0.0, 1.0)
        assert wrapped.is_ramping
        assert wrapped.ramp_value == pytest.approx(0.25)

        clock.advance(350)
        wrapped.get_output(0.0, 1.0)
        assert not wrapped.is_ramping

        # A larger output later does not restart the ramp
        controller.output = 10.0
        wrapped.get_output(0.0, 1.0)
        assert not wrapped.is_ramping

    def test_negative_output_ramp_value(self, clock):
        wrapped = AccelWrappedController(FixedController(-0.8), accel_time=2.0, clock=clock)
        clock.advance(500)
        wrapped.get_output(0.0, -1.0)
        assert wrapped.ramp_value == pytest.approx(-0.25)
        assert wrapped.is_ramping

    def test_zero_output_ends_ramp_with_zero_value(self, clock):
        """A zero controller output has no direction, so the ramp value is 0."""
        wrapped = AccelWrappedController(FixedController(0.0), accel_time=1.0, clock=clock)
        clock.advance(400)
        assert wrapped.get_output(0.0, 0.0) == 0.0
        assert wrapped.ramp_value == 0.0
        assert not wrapped.is_ramping

    def test_initialize_rearms(self, clock):
        wrapped = AccelWrappedController(FixedController(0.1), accel_time=1.0, clock=clock)
        clock.advance(500)
        wrapped.get_output(0.0, 1.0)
        assert not wrapped.is_ramping

        wrapped.initialize()
        assert wrapped.is_ramping
        assert wrapped.ramp_value == 0.0
        clock.advance(50)
        wrapped.get_output(0.0, 1.0)
        assert wrapped.is_ramping

    def test_controller_property(self, clock):
        controller = FixedController(0.0)
        wrapped = AccelWrappedController(controller, accel_time=1.0, clock=clock)
        assert wrapped.controller is controller
        assert wrapped.accel_time == 1.0

    def test_non_positive_accel_time_raises(self, clock):
        with pytest.raises(ValueError):
            AccelWrappedController(FixedController(0.0), accel_time=0.0, clock=clock)
