from __future__ import annotations

from typing import Tuple

from numba import njit

from .complex_arith import Complex, add, divide, imag
from .constants import HBAR, MASS
from .types import PacketParams
from .wavepacket import _packet_gradient, _packet_value


@njit(cache=True)
def _total_value(x: float, y: float, slit1, slit2):
    return add(_packet_value(x, y, slit1), _packet_value(x, y, slit2))


@njit(cache=True)
def _total_gradient(x: float, y: float, slit1, slit2):
    g1x, g1y = _packet_gradient(x, y, slit1)
    g2x, g2y = _packet_gradient(x, y, slit2)
    return add(g1x, g2x), add(g1y, g2y)


@njit(cache=True)
def _velocity(x: float, y: float, slit1, slit2):
    """Guiding equation v = (hbar/m) Im(grad psi / psi), per axis.

    At an exact node (psi == 0) divide() yields zero, so the affected
    component is 0.
    """

    psi = _total_value(x, y, slit1, slit2)
    grad_x, grad_y = _total_gradient(x, y, slit1, slit2)
    vx = (HBAR / MASS) * imag(divide(grad_x, psi))
    vy = (HBAR / MASS) * imag(divide(grad_y, psi))
    return vx, vy


def total_value(x: float, y: float, slit1: PacketParams, slit2: PacketParams) -> Complex:
    """Superposed wave function psi1 + psi2 at (x, y)."""

    return _total_value(float(x), float(y), slit1.as_tuple(), slit2.as_tuple())


def total_gradient(x: float, y: float, slit1: PacketParams, slit2: PacketParams) -> Tuple[Complex, Complex]:
    return _total_gradient(float(x), float(y), slit1.as_tuple(), slit2.as_tuple())


def velocity(x: float, y: float, slit1: PacketParams, slit2: PacketParams) -> Tuple[float, float]:
    """Bohmian velocity (vx, vy) of a particle at (x, y)."""

    vx, vy = _velocity(float(x), float(y), slit1.as_tuple(), slit2.as_tuple())
    return float(vx), float(vy)
