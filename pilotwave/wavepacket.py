from __future__ import annotations

from typing import Tuple

import numpy as np
from numba import njit

from .complex_arith import Complex, multiply
from .constants import HBAR
from .types import PacketParams


@njit(cache=True)
def _packet_value(x: float, y: float, packet):
    # packet = (cx, cy, sigma, px, py)
    cx, cy, sigma, px, py = packet
    dx = x - cx
    dy = y - cy
    magnitude = np.exp(-(dx * dx + dy * dy) / (4.0 * sigma * sigma))
    theta = (px * dx + py * dy) / HBAR
    return multiply((magnitude, 0.0), (np.cos(theta), np.sin(theta)))


@njit(cache=True)
def _packet_gradient(x: float, y: float, packet):
    # d psi/dx = psi * (-(x - cx) / (2 sigma^2) + i px / hbar), likewise for y
    cx, cy, sigma, px, py = packet
    two_sigma2 = 2.0 * sigma * sigma
    psi = _packet_value(x, y, packet)
    dpsi_dx = multiply(psi, (-(x - cx) / two_sigma2, px / HBAR))
    dpsi_dy = multiply(psi, (-(y - cy) / two_sigma2, py / HBAR))
    return dpsi_dx, dpsi_dy


def packet_value(x: float, y: float, params: PacketParams) -> Complex:
    """Value of a single Gaussian packet at (x, y).

    psi = exp(-|r - c|^2 / (4 sigma^2)) * exp(i p.(r - c) / hbar). The packet is
    not normalized.
    """

    return _packet_value(float(x), float(y), params.as_tuple())


def packet_gradient(x: float, y: float, params: PacketParams) -> Tuple[Complex, Complex]:
    """Analytic gradient (d psi/dx, d psi/dy) of a single packet at (x, y)."""

    return _packet_gradient(float(x), float(y), params.as_tuple())
