from __future__ import annotations

import json
import math
import numbers
from pathlib import Path
from typing import Any, Mapping, Sequence, Union

from .types import PacketParams, SimulationConfig


class ConfigurationError(ValueError):
    """Raised before any integration step when a run is misconfigured."""


_PACKET_KEYS = {
    "centerX": "center_x",
    "centerY": "center_y",
    "width": "width",
    "momentumX": "momentum_x",
    "momentumY": "momentum_y",
}


def _require(data: Mapping[str, Any], key: str, where: str) -> Any:
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"{where} must be a mapping, got {type(data).__name__}")
    if key not in data:
        raise ConfigurationError(f"missing key '{key}' in {where}")
    return data[key]


def _number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(f"{name} must be a real number, got {value!r}")
    return float(value)


def parse_packet(data: Mapping[str, Any], where: str = "packet") -> PacketParams:
    kwargs = {
        attr: _number(_require(data, key, where), f"{where}.{key}")
        for key, attr in _PACKET_KEYS.items()
    }
    return PacketParams(**kwargs)


def parse_config(data: Mapping[str, Any]) -> SimulationConfig:
    """Convert the external camelCase mapping into a validated SimulationConfig."""

    pos = _require(data, "initialPosition", "config")
    x0 = _number(_require(pos, "x", "initialPosition"), "initialPosition.x")
    y0 = _number(_require(pos, "y", "initialPosition"), "initialPosition.y")
    steps = _require(data, "steps", "config")
    if isinstance(steps, bool) or not isinstance(steps, numbers.Integral):
        raise ConfigurationError(f"steps must be an integer, got {steps!r}")
    cfg = SimulationConfig(
        initial_position=(x0, y0),
        slit1=parse_packet(_require(data, "slit1", "config"), "slit1"),
        slit2=parse_packet(_require(data, "slit2", "config"), "slit2"),
        dt=_number(_require(data, "dt", "config"), "dt"),
        steps=int(steps),
    )
    validate_config(cfg)
    return cfg


def load_config(path: Union[str, Path]) -> SimulationConfig:
    """Read a JSON file holding the camelCase config mapping."""

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"{path}: invalid JSON ({e})") from e
    return parse_config(data)


def validate_config(cfg: SimulationConfig) -> None:
    """Fail fast on settings the integrator cannot run with.

    Every numeric field must be a finite real number; on top of that sigma > 0
    on both slits, dt > 0 and steps is an integer >= 0.
    """

    for name, slit in (("slit1", cfg.slit1), ("slit2", cfg.slit2)):
        for attr in _PACKET_KEYS.values():
            _finite(getattr(slit, attr), f"{name}.{attr}")
        if not slit.width > 0.0:
            raise ConfigurationError(f"{name}.width must be > 0, got {slit.width!r}")
    dt = _finite(cfg.dt, "dt")
    if not dt > 0.0:
        raise ConfigurationError(f"dt must be > 0, got {cfg.dt!r}")
    if isinstance(cfg.steps, bool) or not isinstance(cfg.steps, numbers.Integral):
        raise ConfigurationError(f"steps must be an integer, got {cfg.steps!r}")
    if cfg.steps < 0:
        raise ConfigurationError(f"steps must be >= 0, got {cfg.steps}")
    pos = cfg.initial_position
    if isinstance(pos, (str, bytes)) or not isinstance(pos, Sequence) or len(pos) != 2:
        raise ConfigurationError(f"initial_position must be two finite numbers, got {pos!r}")
    for c, axis in zip(pos, "xy"):
        _finite(c, f"initial_position.{axis}")


def _finite(value: Any, name: str) -> float:
    x = _number(value, name)
    if not math.isfinite(x):
        raise ConfigurationError(f"{name} must be finite, got {value!r}")
    return x
