"""Plot ramp telemetry from ramp_telemetry.csv.

Creates one figure with:
- target vs ramp_output vs accel_output over timestamp
- per-iteration output rate (d output / dt) for both limiters
- ramp phase over timestamp

Run:
    python main.py
    python plot_telemetry.py

By default, reads ./ramp_telemetry.csv (same directory as this script).
"""

from __future__ import annotations

import os

import pandas as pd
import matplotlib.pyplot as plt

from config_param import TELEMETRY_CSV

PHASE_LEVELS = {"decelerating": -1, "steady": 0, "accelerating": 1}


def main() -> int:
    script_dir = os.path.dirname(os.path.abspath(__file__))
    csv_path = os.path.join(script_dir, TELEMETRY_CSV)

    if not os.path.exists(csv_path):
        print(f"CSV not found: {csv_path}")
        return 1

    df = pd.read_csv(csv_path)

    required_cols = {"timestamp", "target", "ramp_output", "ramp_phase"}
    missing = required_cols - set(df.columns)
    if missing:
        print(f"Missing columns in CSV: {sorted(missing)}")
        return 1

    has_accel = "accel_output" in df.columns

    if df.empty:
        print("CSV is empty.")
        return 0

    # Ensure numeric types and sort by time.
    df = df.copy()
    for col in ("timestamp", "target", "ramp_output"):
        df[col] = pd.to_numeric(df[col], errors="coerce")
    if has_accel:
        df["accel_output"] = pd.to_numeric(df["accel_output"], errors="coerce")
    df = df.dropna(subset=["timestamp", "target", "ramp_output"]).sort_values("timestamp")

    dt = df["timestamp"].diff()
    df["ramp_rate"] = df["ramp_output"].diff() / dt
    if has_accel:
        df["accel_rate"] = df["accel_output"].diff() / dt

    fig, (ax_out, ax_rate, ax_phase) = plt.subplots(3, 1, sharex=True, figsize=(10, 8))
    fig.suptitle("Ramp limiter telemetry")

    ax_out.step(df["timestamp"], df["target"], where="post", color="0.35", linestyle="--", linewidth=1.2, label="target")
    ax_out.plot(df["timestamp"], df["ramp_output"], linewidth=1.5, label="RampLimiter")
    if has_accel:
        ax_out.plot(df["timestamp"], df["accel_output"], linewidth=1.0, label="DeltaAccelLimiter")
    ax_out.set_ylabel("output")
    ax_out.grid(True, alpha=0.3)
    ax_out.legend(loc="best")

    ax_rate.plot(df["timestamp"], df["ramp_rate"], linewidth=1.2, label="RampLimiter")
    if has_accel:
        ax_rate.plot(df["timestamp"], df["accel_rate"], linewidth=1.0, label="DeltaAccelLimiter")
    ax_rate.axhline(0.0, color="k", linewidth=0.8, alpha=0.4)
    ax_rate.set_ylabel("d output / dt (1/s)")
    ax_rate.grid(True, alpha=0.3)
    ax_rate.legend(loc="best")

    ax_phase.step(df["timestamp"], df["ramp_phase"].map(PHASE_LEVELS), where="post", linewidth=1.0)
    ax_phase.set_yticks(list(PHASE_LEVELS.values()))
    ax_phase.set_yticklabels(list(PHASE_LEVELS.keys()))
    ax_phase.set_xlabel("timestamp (s)")
    ax_phase.grid(True, alpha=0.3)

    fig.tight_layout()
    plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
