"""Scripted ramp-limiter simulation with CSV telemetry.

This script drives a RampLimiter and a DeltaAccelLimiter with the command
schedule from config_param.py, on a jittered loop time grid. Time is simulated
with a ManualClock, so the run is fast and reproducible.

Telemetry (one row per loop iteration) is written to ramp_telemetry.csv next
to this script. Plot it with:
    python plot_telemetry.py
"""

import logging
import os

import numpy as np
import pandas as pd

from config_param import (
    ACCEL_MAX_VEL,
    ACCEL_PERIOD,
    ACCEL_TARGET,
    COMMAND_SCHEDULE,
    CONTROL_PERIOD,
    LOOP_JITTER,
    LOOP_JITTER_SEED,
    RAMP_ACCEL_TIME,
    RAMP_DECEL_TIME,
    RAMP_MAX_SPEED,
    SIM_DURATION,
    TELEMETRY_CSV,
)
from velocity_ramp import (
    AccelControlConfiguration,
    DeltaAccelLimiter,
    ManualClock,
    RampConfiguration,
    RampLimiter,
)


# ============================================================
# Ramp presets (choose by editing ONE variable)
#
# Profiles: Gentle, Drivetrain, Snappy, NoDecel, Custom
# - Custom uses the explicit values from config_param.py.
# ============================================================

RAMP_PROFILE: str = "Custom"  # Choose ramp profile here


CUSTOM_RAMP_CONFIG = RampConfiguration(
    accel_time=RAMP_ACCEL_TIME,
    decel_time=RAMP_DECEL_TIME,
    max_speed=RAMP_MAX_SPEED,
)


RAMP_PRESETS: dict = {
    "Gentle": RampConfiguration(accel_time=2.0, decel_time=1.0, max_speed=1.0),
    "Drivetrain": RampConfiguration(accel_time=0.75, decel_time=0.3, max_speed=1.0),
    "Snappy": RampConfiguration(accel_time=0.25, decel_time=0.1, max_speed=1.0),
    "NoDecel": RampConfiguration(accel_time=1.0, decel_time=0.0, max_speed=1.0),
    "Custom": CUSTOM_RAMP_CONFIG,
}


def command_at(t: float) -> float:
    """Return the scheduled target speed at time t (seconds)."""
    target = 0.0
    for start, value in COMMAND_SCHEDULE:
        if t >= start:
            target = value
    return target


def loop_times(duration: float, period: float, jitter: float, seed: int) -> np.ndarray:
    """Build a jittered loop time grid (seconds), starting at 0."""
    rng = np.random.default_rng(seed)
    n = int(duration / period)
    periods = period * (1.0 + rng.uniform(-jitter, jitter, size=n))
    return np.concatenate(([0.0], np.cumsum(periods)))


def run_simulation(config: RampConfiguration) -> pd.DataFrame:
    clock = ManualClock()
    ramp = RampLimiter.from_config(config, clock=clock)
    accel = DeltaAccelLimiter.from_config(
        AccelControlConfiguration(target_accel=ACCEL_TARGET, max_vel=ACCEL_MAX_VEL, period=ACCEL_PERIOD)
    )

    rows = []
    for t in loop_times(SIM_DURATION, CONTROL_PERIOD, LOOP_JITTER, LOOP_JITTER_SEED):
        clock.set(t * 1000.0)
        target = command_at(t)
        rows.append(
            {
                "timestamp": t,
                "target": target,
                "ramp_output": ramp.get_output(target),
                "ramp_phase": ramp.phase.value,
                "accel_output": accel.get_output(target),
            }
        )

    return pd.DataFrame(rows)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    profile = (RAMP_PROFILE or "").strip()
    ramp_config = RAMP_PRESETS.get(profile)
    if ramp_config is None:
        valid = ", ".join(sorted(RAMP_PRESETS.keys()))
        raise ValueError(f"Unknown RAMP_PROFILE={RAMP_PROFILE!r}. Valid options: {valid}")

    print(
        "Ramp preset: "
        f"{profile} "
        f"(accel_time={ramp_config.accel_time}, decel_time={ramp_config.decel_time}, "
        f"max_speed={ramp_config.max_speed})"
    )

    df = run_simulation(ramp_config)

    script_dir = os.path.dirname(os.path.abspath(__file__))
    csv_path = os.path.join(script_dir, TELEMETRY_CSV)
    df.to_csv(csv_path, index=False)

    print("=" * 60)
    print(f"Simulated {len(df)} loop iterations over {SIM_DURATION} s")
    print(f"Max |ramp step| per iteration: {df['ramp_output'].diff().abs().max():.4f}")
    print(f"Telemetry written to {csv_path}")
    print("=" * 60)


if __name__ == "__main__":
    main()
