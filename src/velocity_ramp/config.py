"""
Configuration dataclasses for the ramp limiters.
"""

from dataclasses import dataclass


@dataclass
class RampConfiguration:
    """
    Configuration parameters for the RampLimiter.

    Attributes:
        accel_time: Time (in seconds) to ramp from 0 to ±max_speed.
            0 disables the acceleration ramp (the target is applied directly).
            Typical for drivetrain motors: 0.2–1.0 s.
        decel_time: Time (in seconds) to ramp from ±max_speed back to 0.
            0 disables the deceleration ramp (snap directly).
            Typical: 0.0–0.5 s.
        max_speed: Output magnitude ceiling. Targets are clamped to
            [-max_speed, max_speed] and ramp rates are scaled by it.
            Typical: 1.0 for normalized motor outputs.
    """
    accel_time: float
    decel_time: float = 0.0
    max_speed: float = 1.0

    def validate(self) -> None:
        if self.accel_time < 0:
            raise ValueError(f"accel_time must be >= 0 (got {self.accel_time})")
        if self.decel_time < 0:
            raise ValueError(f"decel_time must be >= 0 (got {self.decel_time})")
        if self.max_speed <= 0:
            raise ValueError(f"max_speed must be > 0 (got {self.max_speed})")


@dataclass
class AccelControlConfiguration:
    """
    Configuration parameters for the DeltaAccelLimiter.

    Attributes:
        target_accel: Acceleration cap, in units/s². Must be > 0.
        max_vel: Output magnitude ceiling, in units/s. Must be > 0.
        period: Nominal time (in seconds) between calls, used as the fixed Δt.
            The default 0.02 s matches a 50 Hz control loop.
    """
    target_accel: float
    max_vel: float = 1.0
    period: float = 0.02

    def validate(self) -> None:
        if self.target_accel <= 0:
            raise ValueError(f"target_accel must be > 0 (got {self.target_accel})")
        if self.max_vel <= 0:
            raise ValueError(f"max_vel must be > 0 (got {self.max_vel})")
        if self.period <= 0:
            raise ValueError(f"period must be > 0 (got {self.period})")
