"""Fixed-period acceleration cap for velocity commands.

Unlike ``RampLimiter`` this filter has no notion of phases or wall-clock time:
it assumes a nominal period between calls and bounds the per-call velocity
change directly.

    a   = (v_req - v_last) / period
    v  += sign(a) * period * (target_accel - |a|)

Expanding the correction, the output always lands at
``v_last + sign(a) * target_accel * period``: one full acceleration step
toward the request per call, or no change when the request equals the last
output.
"""

import logging

from .config import AccelControlConfiguration
from .ranges import clamp_symmetric, sign


class DeltaAccelLimiter:
    """Acceleration controller driven by a fixed update period.

    Setters fail soft: invalid values are rejected with a ``False`` return
    value and the previous configuration is kept.
    """

    def __init__(self, target_accel: float, max_vel: float = 1.0):
        self._logger = logging.getLogger(__name__)
        self._target_accel = 0.0
        self._max_vel = 1.0
        self._period = 0.02
        self._last_vel = 0.0

        if not self.set(target_accel, max_vel):
            raise ValueError(
                f"target_accel and max_vel must be > 0 (got target_accel={target_accel}, max_vel={max_vel})"
            )

    @classmethod
    def from_config(cls, config: AccelControlConfiguration) -> "DeltaAccelLimiter":
        config.validate()
        limiter = cls(config.target_accel, config.max_vel)
        limiter.set_period(config.period)
        return limiter

    @property
    def target_accel(self) -> float:
        """Acceleration cap, in units/s²."""
        return self._target_accel

    @property
    def max_vel(self) -> float:
        """Output magnitude ceiling, in units/s."""
        return self._max_vel

    @property
    def period(self) -> float:
        """Nominal seconds between calls."""
        return self._period

    @property
    def last_vel(self) -> float:
        return self._last_vel

    def set(self, target_accel: float, max_vel: float) -> bool:
        """Set both target acceleration and max velocity.

        Each value is applied independently; returns ``False`` if either was
        rejected.
        """
        accel_ok = self.set_target_accel(target_accel)
        vel_ok = self.set_max_vel(max_vel)
        return accel_ok and vel_ok

    def set_target_accel(self, target_accel: float) -> bool:
        if target_accel <= 0:
            self._logger.warning("Rejected target_accel=%s (must be > 0)", target_accel)
            return False
        self._target_accel = float(target_accel)
        return True

    def set_max_vel(self, max_vel: float) -> bool:
        if max_vel <= 0:
            self._logger.warning("Rejected max_vel=%s (must be > 0)", max_vel)
            return False
        self._max_vel = float(max_vel)
        return True

    def set_period(self, period: float) -> bool:
        if period <= 0:
            self._logger.warning("Rejected period=%s (must be > 0)", period)
            return False
        self._period = float(period)
        return True

    def get_output(self, velocity: float) -> float:
        """Return the acceleration-capped velocity for this period.

        Args:
            velocity: Requested velocity, in units/s.
        """
        velocity = clamp_symmetric(float(velocity), self._max_vel)
        accel = (velocity - self._last_vel) / self._period
        velocity += sign(accel) * self._period * (self._target_accel - abs(accel))

        # Keep |last_vel| <= max_vel even when the step overshoots the ceiling.
        velocity = clamp_symmetric(velocity, self._max_vel)

        self._last_vel = velocity
        return velocity

    def reset(self) -> None:
        """Reset the controller state to zero velocity."""
        self._last_vel = 0.0
