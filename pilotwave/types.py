from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, NamedTuple, Tuple, Union

import numpy as np


@dataclass(frozen=True)
class PacketParams:
    center_x: float
    center_y: float
    width: float  # sigma, must be > 0
    momentum_x: float
    momentum_y: float

    def as_tuple(self) -> Tuple[float, float, float, float, float]:
        """Float tuple in the argument order of the jitted kernels."""

        return (
            float(self.center_x),
            float(self.center_y),
            float(self.width),
            float(self.momentum_x),
            float(self.momentum_y),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PacketParams":
        from .config import parse_packet

        return parse_packet(data)


@dataclass
class ParticleState:
    t: float
    x: float
    y: float


@dataclass(frozen=True)
class SimulationConfig:
    initial_position: Tuple[float, float]
    slit1: PacketParams
    slit2: PacketParams
    dt: float
    steps: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SimulationConfig":
        """Build a config from the camelCase mapping used by external callers.

        Expected shape::

            {"initialPosition": {"x": ..., "y": ...},
             "slit1": {"centerX": ..., "centerY": ..., "width": ...,
                       "momentumX": ..., "momentumY": ...},
             "slit2": {...}, "dt": ..., "steps": ...}
        """

        from .config import parse_config

        return parse_config(data)

    def validate(self) -> None:
        from .config import validate_config

        validate_config(self)


class TrajectoryPoint(NamedTuple):
    t: float
    x: float
    y: float


class Trajectory:
    """Read-only sequence of (t, x, y) samples produced by one run.

    Backed by an (N, 3) float64 array whose columns are t, x, y.
    """

    __slots__ = ("_samples",)

    def __init__(self, samples: np.ndarray) -> None:
        samples = np.array(samples, dtype=np.float64)
        if samples.ndim != 2 or samples.shape[1] != 3:
            raise ValueError(f"expected an (N, 3) sample array, got shape {samples.shape}")
        samples.setflags(write=False)
        self._samples = samples

    @property
    def samples(self) -> np.ndarray:
        return self._samples

    @property
    def times(self) -> np.ndarray:
        return self._samples[:, 0]

    @property
    def positions(self) -> np.ndarray:
        return self._samples[:, 1:]

    @property
    def final(self) -> TrajectoryPoint:
        return self[-1]

    def __len__(self) -> int:
        return self._samples.shape[0]

    def __getitem__(self, i: Union[int, slice]) -> Union[TrajectoryPoint, "Trajectory"]:
        if isinstance(i, slice):
            return Trajectory(self._samples[i])
        t, x, y = self._samples[i]
        return TrajectoryPoint(float(t), float(x), float(y))

    def __iter__(self) -> Iterator[TrajectoryPoint]:
        for i in range(len(self)):
            yield self[i]

    def __repr__(self) -> str:
        return f"Trajectory(n={len(self)}, start={self[0]}, end={self[-1]})"

    def to_records(self) -> List[Dict[str, float]]:
        return [{"t": p.t, "x": p.x, "y": p.y} for p in self]
