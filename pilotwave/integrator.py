from __future__ import annotations

from typing import Any, Mapping, Union

import numpy as np
from numba import njit

from .guidance import _velocity
from .types import PacketParams, ParticleState, SimulationConfig, Trajectory


@njit(cache=True)
def _euler_into(out: np.ndarray, t0: float, x0: float, y0: float, slit1, slit2, dt: float) -> None:
    """Explicit Euler integration of the guiding equation (in-place).

    out has shape (steps + 1, 3); row 0 receives (t0, x0, y0) and each
    following row one step of size dt. Time is accumulated, not recomputed
    from the step index.
    """

    t = t0
    x = x0
    y = y0
    out[0, 0] = t
    out[0, 1] = x
    out[0, 2] = y
    for i in range(1, out.shape[0]):
        vx, vy = _velocity(x, y, slit1, slit2)
        x += vx * dt
        y += vy * dt
        t += dt
        out[i, 0] = t
        out[i, 1] = x
        out[i, 2] = y


def integrate(
    x0: float,
    y0: float,
    slit1: PacketParams,
    slit2: PacketParams,
    dt: float,
    steps: int,
    t0: float = 0.0,
) -> np.ndarray:
    """Run the Euler kernel and return the raw (steps + 1, 3) sample array.

    No validation is done here; see run_simulation.
    """

    out = np.empty((steps + 1, 3), dtype=np.float64)
    _euler_into(out, float(t0), float(x0), float(y0), slit1.as_tuple(), slit2.as_tuple(), float(dt))
    return out


def run_simulation(config: Union[SimulationConfig, Mapping[str, Any]]) -> Trajectory:
    """Integrate one particle trajectory from a validated configuration.

    Accepts either a SimulationConfig or the camelCase mapping accepted by
    SimulationConfig.from_dict. Raises ConfigurationError before any step is
    taken if the configuration is invalid. The returned trajectory always has
    config.steps + 1 samples and starts at (0, x0, y0).
    """

    if not isinstance(config, SimulationConfig):
        config = SimulationConfig.from_dict(config)
    config.validate()
    x0, y0 = config.initial_position
    samples = integrate(x0, y0, config.slit1, config.slit2, config.dt, config.steps)
    return Trajectory(samples)


def euler_step(state: ParticleState, slit1: PacketParams, slit2: PacketParams, dt: float) -> ParticleState:
    """Advance state by one Euler step in place and return it."""

    vx, vy = _velocity(float(state.x), float(state.y), slit1.as_tuple(), slit2.as_tuple())
    state.x += vx * dt
    state.y += vy * dt
    state.t += dt
    return state
