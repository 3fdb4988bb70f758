"""Core-only example (no plotting libraries required).

This script demonstrates the limiters exposed by `velocity_ramp`:

- RampLimiter ramping up to full speed
- a direction reversal, which decelerates through 0 before reversing
- DeltaAccelLimiter stepping toward the same commands

Time is simulated with a ManualClock so the output is reproducible.

Usage:
    python .\\examples\\ex_ramp_reversal.py
"""

from velocity_ramp import (
    DeltaAccelLimiter,
    ManualClock,
    RampConfiguration,
    RampLimiter,
)


def simulate_reversal():
    """
    Command full forward, then full reverse, and print both limiter outputs.
    """
    print("Core-only demo: ramp-up, reversal through 0, fixed-period accel cap")

    # Configuration
    config = RampConfiguration(
        accel_time=1.0,     # 0 -> 1.0 in 1 s
        decel_time=0.5,     # 1.0 -> 0 in 0.5 s
        max_speed=1.0,
    )
    period = 0.05           # Loop period (s)

    clock = ManualClock()
    ramp = RampLimiter.from_config(config, clock=clock)
    accel = DeltaAccelLimiter(target_accel=2.0, max_vel=1.0)
    accel.set_period(period)

    print(f"accel_time: {config.accel_time} s, decel_time: {config.decel_time} s")
    print(f"dt: {period} s")
    print("-" * 60)
    print(f"{'t (s)':>6} | {'target':>7} | {'ramp':>7} | {'phase':^12} | {'accel':>7}")
    print("-" * 60)

    duration = 4.0
    num_steps = int(duration / period)

    for step in range(num_steps + 1):
        t = step * period
        target = 1.0 if t < 2.0 else -1.0

        out = ramp.get_output(target)
        acc = accel.get_output(target)

        # Print every ~0.25 second
        if step % max(1, int(round(0.25 / period))) == 0:
            print(f"{t:>6.2f} | {target:>7.2f} | {out:>7.3f} | {ramp.phase.value:^12} | {acc:>7.3f}")

        clock.advance(period * 1000.0)

    print("-" * 60)
    print(f"Final ramp output: {ramp.last_speed:.3f}")
    print(f"Final accel output: {accel.last_vel:.3f}")


if __name__ == "__main__":
    simulate_reversal()
