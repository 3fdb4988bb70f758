"""Elapsed-time ramp limiter for speed commands.

The limiter sits between a control loop and an actuator. Each loop iteration
passes the desired speed to ``RampLimiter.get_output`` and sends the returned
value to the motor. The output approaches the target at a bounded, constant
rate:

    rate = max_speed / (1000 * ramp_time)      [units per ms]
    out  = phase_start_output ± rate * elapsed_ms

Direction changes always go through a deceleration phase to 0 before the
limiter accelerates in the new direction.
"""

from __future__ import annotations

import copy
import enum
import logging
from typing import Optional

from .clock import TimeSource, default_clock
from .config import RampConfiguration
from .ranges import in_range, sign


class Phase(enum.Enum):
    """Rate-of-change regime of a RampLimiter."""

    STEADY = "steady"
    ACCELERATING = "accelerating"
    DECELERATING = "decelerating"


class RampLimiter:
    """Limits the rate of change of a speed command.

    One instance per controlled axis/motor. Not thread-safe: an instance must
    be owned by a single control loop.
    """

    def __init__(
        self,
        accel_time: float = 0.0,
        decel_time: float = 0.0,
        max_speed: float = 1.0,
        clock: Optional[TimeSource] = None,
    ):
        self._logger = logging.getLogger(__name__)
        self._clock: TimeSource = clock if clock is not None else default_clock()

        self._accel_time = 0.0
        self._decel_time = 0.0
        self._max_speed = 1.0
        self.set_accel_times(accel_time, decel_time)
        self.set_max_speed(max_speed)

        self._phase = Phase.STEADY
        self._start_time = 0.0
        self._last_output = 0.0
        self._last_speed = 0.0
        self._pending_sync = True

        self.initialize()

    @classmethod
    def from_config(cls, config: RampConfiguration, clock: Optional[TimeSource] = None) -> RampLimiter:
        config.validate()
        return cls(config.accel_time, config.decel_time, config.max_speed, clock=clock)

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def accel_time(self) -> float:
        return self._accel_time

    @property
    def decel_time(self) -> float:
        return self._decel_time

    @property
    def max_speed(self) -> float:
        return self._max_speed

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def is_accelerating(self) -> bool:
        return self._phase is Phase.ACCELERATING

    @property
    def is_decelerating(self) -> bool:
        return self._phase is Phase.DECELERATING

    @property
    def last_output(self) -> float:
        return self._last_output

    @property
    def last_speed(self) -> float:
        return self._last_speed

    @property
    def pending_sync(self) -> bool:
        return self._pending_sync

    # ------------------------------------------------------------------
    # Control
    # ------------------------------------------------------------------

    def get_output(self, target_speed: float) -> float:
        """Return the ramp-limited output for the requested target speed.

        Args:
            target_speed: Desired speed. Clamped to [-max_speed, max_speed].

        Returns:
            The speed to send to the actuator on this iteration.
        """
        speed = in_range(float(target_speed), -self._max_speed, self._max_speed)
        speed_sign = sign(speed)
        last_out_sign = sign(self._last_output)
        last_sign = sign(self._last_speed)

        if speed == self._last_speed:
            # Nothing changed since last call, no ramp needed
            phase = Phase.STEADY
            self._last_output = speed
        elif speed_sign == last_sign:
            # Same direction: accelerate only when moving away from 0
            phase = Phase.ACCELERATING if abs(speed) > abs(self._last_speed) else Phase.DECELERATING
        else:
            # Direction change: must reach 0 first unless starting from rest
            phase = Phase.ACCELERATING if last_sign == 0 else Phase.DECELERATING

        now = self._clock()

        if phase is not self._phase:
            self._logger.debug(
                "Ramp phase %s -> %s (target=%s, last_speed=%s)",
                self._phase.value,
                phase.value,
                speed,
                self._last_speed,
            )
            self._start_time = now
            self._phase = phase

            # The previous phase was cut short before reaching its target
            if self._pending_sync:
                self._last_output = self._last_speed
            self._pending_sync = True

            return self._last_output

        elapsed_ms = now - self._start_time

        if self._accel_time == 0:
            accel_output = speed
        else:
            accel_rate = self._max_speed / (1000.0 * self._accel_time)
            accel_output = self._last_output + speed_sign * accel_rate * elapsed_ms

        if self._decel_time == 0:
            decel_output = speed
        else:
            decel_rate = self._max_speed / (1000.0 * self._decel_time)
            decel_output = self._last_output - last_out_sign * decel_rate * elapsed_ms

        if phase is Phase.ACCELERATING:
            if speed_sign == 1:
                short_of_target = accel_output < speed
            elif speed_sign == -1:
                short_of_target = accel_output > speed
            else:
                short_of_target = False

            if short_of_target:
                speed = accel_output
            else:
                self._last_output = speed
                self._pending_sync = False

        elif phase is Phase.DECELERATING:
            if last_out_sign == 1:
                short_of_target = decel_output > speed and decel_output > 0
            elif last_out_sign == -1:
                short_of_target = decel_output < speed and decel_output < 0
            else:
                short_of_target = False

            if short_of_target:
                speed = decel_output
            else:
                crossed_zero = (last_out_sign == 1 and decel_output <= 0) or (
                    last_out_sign == -1 and decel_output >= 0
                )
                if crossed_zero:
                    # Direction neutralized; the next call accelerates toward the target
                    speed = 0.0
                self._last_output = speed
                self._pending_sync = False

        self._last_speed = speed
        return speed

    def initialize(self) -> None:
        """(Re)arm the limiter at zero output and restart the phase timer.

        The latched phase is kept, so a ramp that was in progress continues
        from zero, timed from this call.
        """
        self._start_time = self._clock()
        self._last_output = 0.0
        self._last_speed = 0.0

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_accel_time(self, accel_time: float) -> RampLimiter:
        """Set the time (s) to accelerate from 0 to max_speed. 0 disables the ramp."""
        if accel_time < 0:
            raise ValueError(f"accel_time must be >= 0 (got {accel_time})")
        self._accel_time = float(accel_time)
        return self

    def set_decel_time(self, decel_time: float) -> RampLimiter:
        """Set the time (s) to decelerate from max_speed to 0. 0 disables the ramp."""
        if decel_time < 0:
            raise ValueError(f"decel_time must be >= 0 (got {decel_time})")
        self._decel_time = float(decel_time)
        return self

    def set_accel_times(self, accel_time: float, decel_time: float) -> RampLimiter:
        self.set_accel_time(accel_time)
        self.set_decel_time(decel_time)
        return self

    def set_max_speed(self, max_speed: float) -> RampLimiter:
        if max_speed <= 0:
            raise ValueError(f"max_speed must be > 0 (got {max_speed})")
        self._max_speed = float(max_speed)
        return self

    def clone(self) -> RampLimiter:
        """Return an independent copy (configuration and ramp state).

        The copy shares the time source with the original.
        """
        return copy.copy(self)

    def __repr__(self) -> str:
        return (
            f"RampLimiter(accel_time={self._accel_time}, decel_time={self._decel_time}, "
            f"max_speed={self._max_speed}, phase={self._phase.value})"
        )
