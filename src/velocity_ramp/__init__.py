"""Velocity-ramp building blocks.

This package contains rate-of-change limiters for speed/velocity commands
issued by a control loop, and the pure numeric helpers they rely on. It is
intended to be imported by a larger project.
"""

from .accel_control import DeltaAccelLimiter
from .clock import ManualClock, MonotonicClock, TimeSource, default_clock, install_default_clock
from .config import AccelControlConfiguration, RampConfiguration
from .ramp import Phase, RampLimiter
from .ranges import (
    clamp_symmetric,
    deadband,
    in_range,
    is_within_range,
    round_half_even,
    sign,
)
from .wrapped import AccelWrappedController, Controller

__version__ = "0.1.0"

__all__ = [
    "AccelControlConfiguration",
    "AccelWrappedController",
    "Controller",
    "DeltaAccelLimiter",
    "ManualClock",
    "MonotonicClock",
    "Phase",
    "RampConfiguration",
    "RampLimiter",
    "TimeSource",
    "clamp_symmetric",
    "deadband",
    "default_clock",
    "in_range",
    "install_default_clock",
    "is_within_range",
    "round_half_even",
    "sign",
]
