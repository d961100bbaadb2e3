from __future__ import annotations

from typing import Tuple

import numpy as np

from .complex_arith import abs2
from .guidance import total_value
from .types import PacketParams, Trajectory


def speeds(traj: Trajectory) -> np.ndarray:
    """Per-step speed |dr| / dt between consecutive samples (length N - 1)."""

    dr = np.diff(traj.positions, axis=0)
    dt = np.diff(traj.times)
    return np.sqrt(np.sum(dr * dr, axis=1)) / dt


def mean_speed(traj: Trajectory) -> float:
    if len(traj) < 2:
        return 0.0
    return float(np.mean(speeds(traj)))


def displacement(traj: Trajectory) -> Tuple[float, float]:
    d = traj.positions[-1] - traj.positions[0]
    return float(d[0]), float(d[1])


def probability_density(x: float, y: float, slit1: PacketParams, slit2: PacketParams) -> float:
    """Unnormalized |psi|^2 of the two-slit superposition at (x, y)."""

    return float(abs2(total_value(x, y, slit1, slit2)))
