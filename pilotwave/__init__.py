"""Bohmian (pilot-wave) trajectories for a two-slit interference setup.

This package provides a Numba-accelerated guiding-equation integrator for a
single particle steered by the superposition of two Gaussian wave packets.
The velocity field v = (hbar/m) Im(grad psi / psi) is evaluated analytically
and the position is advanced with fixed-step explicit Euler.
"""

from .config import ConfigurationError
from .integrator import euler_step, run_simulation
from .types import PacketParams, ParticleState, SimulationConfig, Trajectory, TrajectoryPoint

__all__ = [
    "__version__",
    "ConfigurationError",
    "PacketParams",
    "ParticleState",
    "SimulationConfig",
    "Trajectory",
    "TrajectoryPoint",
    "euler_step",
    "run_simulation",
]

__version__ = "0.1.0"
