#!/usr/bin/env python
from __future__ import annotations

import sys
import argparse
import time
from pathlib import Path
import numpy as np

# Add parent directory to path to allow imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pilotwave.config import ConfigurationError, load_config, validate_config
from pilotwave.diagnostics import displacement, mean_speed, probability_density
from pilotwave.guidance import velocity
from pilotwave.integrator import integrate
from pilotwave.types import PacketParams, SimulationConfig, Trajectory


def build_config(args: argparse.Namespace) -> SimulationConfig:
    if args.config is not None:
        return load_config(args.config)
    cfg = SimulationConfig(
        initial_position=(args.x0, args.y0),
        slit1=PacketParams(args.cx, args.separation / 2.0, args.width, args.px, args.py),
        slit2=PacketParams(args.cx, -args.separation / 2.0, args.width, args.px, args.py),
        dt=args.dt,
        steps=args.steps,
    )
    validate_config(cfg)
    return cfg


def main() -> None:
    ap = argparse.ArgumentParser(description="Bohmian trajectory through two Gaussian slits")
    ap.add_argument("--config", type=Path, default=None, help="JSON config (overrides the options below)")
    ap.add_argument("--x0", type=float, default=-0.5, help="initial x position")
    ap.add_argument("--y0", type=float, default=-5.0, help="initial y position")
    ap.add_argument("--cx", type=float, default=0.0, help="x center of both slits")
    ap.add_argument("--separation", type=float, default=3.0, help="distance between slit centers along y")
    ap.add_argument("--width", type=float, default=1.0, help="packet width sigma")
    ap.add_argument("--px", type=float, default=0.0)
    ap.add_argument("--py", type=float, default=5.0)
    ap.add_argument("--dt", type=float, default=0.02)
    ap.add_argument("--steps", type=int, default=500)
    ap.add_argument("--every", type=int, default=0, help="print every n-th trajectory sample (0 = none)")
    args = ap.parse_args()

    try:
        cfg = build_config(args)
    except ConfigurationError as e:
        print(f"⚠ Invalid configuration: {e}")
        sys.exit(2)

    x0, y0 = cfg.initial_position
    print("=" * 70)
    print("Bohmian Two-Slit Trajectory - Starting")
    print("=" * 70)
    print(f"Simulation parameters:")
    print(f"  Initial position: ({x0}, {y0})")
    for name, slit in (("Slit 1", cfg.slit1), ("Slit 2", cfg.slit2)):
        print(f"  {name}: center=({slit.center_x}, {slit.center_y}) sigma={slit.width} "
              f"p=({slit.momentum_x}, {slit.momentum_y})")
    print(f"  Time step (dt): {cfg.dt}")
    print(f"  Total steps: {cfg.steps}")
    print("=" * 70)

    vx, vy = velocity(x0, y0, cfg.slit1, cfg.slit2)
    rho = probability_density(x0, y0, cfg.slit1, cfg.slit2)
    print(f"✓ Initial velocity: ({vx:.6f}, {vy:.6f}) | |psi|^2: {rho:.6g}")
    if rho == 0.0:
        print("⚠ Particle starts at a node of psi; velocity is clamped to zero there")

    print("\n" + "=" * 70)
    print("Starting simulation loop...")
    print("=" * 70 + "\n")

    samples = np.empty((cfg.steps + 1, 3), dtype=np.float64)
    samples[0] = (0.0, x0, y0)
    # Progress reporting every 10%: integrate in chunks, each continuing from
    # the last sample of the previous one
    report_interval = max(1, cfg.steps // 10)
    t_start = time.perf_counter()
    done = 0
    while done < cfg.steps:
        n = min(report_interval, cfg.steps - done)
        t, x, y = samples[done]
        chunk = integrate(x, y, cfg.slit1, cfg.slit2, cfg.dt, n, t0=t)
        samples[done + 1: done + n + 1] = chunk[1:]
        done += n
        percentage = 100.0 * done / cfg.steps
        t, x, y = samples[done]
        print(f"[{percentage:5.1f}%] Step {done}/{cfg.steps} | t: {t:.4f} | Position: ({x:.4f}, {y:.4f})")
    elapsed = time.perf_counter() - t_start

    traj = Trajectory(samples)

    print("\n" + "=" * 70)
    print("Simulation completed!")
    print("=" * 70)

    if args.every > 0:
        print(f"\n{'t':>10} {'x':>12} {'y':>12}")
        for i in range(0, len(traj), args.every):
            p = traj[i]
            print(f"{p.t:10.4f} {p.x:12.6f} {p.y:12.6f}")

    dx, dy = displacement(traj)
    end = traj.final
    print(f"\nResults:")
    print(f"  Samples: {len(traj)}")
    print(f"  Start: (t={traj[0].t:.4f}, x={traj[0].x:.6f}, y={traj[0].y:.6f})")
    print(f"  End:   (t={end.t:.4f}, x={end.x:.6f}, y={end.y:.6f})")
    print(f"  Displacement: ({dx:.6f}, {dy:.6f})")
    print(f"  Mean speed: {mean_speed(traj):.6f}")
    print(f"  Wall time: {elapsed:.3f} s")

    print("\n" + "=" * 70)
    print("Simulation finished successfully!")
    print("=" * 70)


if __name__ == "__main__":
    main()
