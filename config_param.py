"""Centralized parameter/config constants for the demo scripts.

This module is intended to be the single source of truth for shared
configuration parameters used by main.py, plot_telemetry.py and the examples.
"""

# --------------------------------------------------------------------------------------
# 1) Simulated control loop (timing)
# --------------------------------------------------------------------------------------

# Base control loop period (seconds). 0.02 s = 50 Hz.
CONTROL_PERIOD: float = 0.02

# Simulation duration (seconds)
SIM_DURATION: float = 6.0

# Random jitter added to each loop period (fraction of CONTROL_PERIOD, uniform).
# The ramp limiter measures elapsed time, so jitter should not change its rate.
LOOP_JITTER: float = 0.2
LOOP_JITTER_SEED: int = 217

# --------------------------------------------------------------------------------------
# 2) Ramp limiter (RampLimiter)
# --------------------------------------------------------------------------------------

RAMP_ACCEL_TIME: float = 1.0        # 0 -> max speed in 1 s
RAMP_DECEL_TIME: float = 0.5        # max speed -> 0 in 0.5 s
RAMP_MAX_SPEED: float = 1.0         # Normalized motor output

# --------------------------------------------------------------------------------------
# 3) Fixed-period acceleration cap (DeltaAccelLimiter)
# --------------------------------------------------------------------------------------

ACCEL_TARGET: float = 2.0           # units/s²
ACCEL_MAX_VEL: float = 1.0          # units/s
ACCEL_PERIOD: float = CONTROL_PERIOD

# --------------------------------------------------------------------------------------
# 4) Command script: (start time in seconds, target speed)
# --------------------------------------------------------------------------------------

COMMAND_SCHEDULE: tuple = (
    (0.0, 0.0),
    (0.5, 1.0),     # full forward
    (2.5, 0.4),     # ease off in the same direction
    (3.5, -0.8),    # reverse: decelerate through 0 first
    (5.5, 0.0),     # stop
)

# --------------------------------------------------------------------------------------
# 5) Telemetry output
# --------------------------------------------------------------------------------------

TELEMETRY_CSV: str = "ramp_telemetry.csv"
