from __future__ import annotations

from typing import Tuple

from numba import njit

# (re, im) pair; kept as a plain tuple so it passes through njit kernels unboxed
Complex = Tuple[float, float]

# Value returned by divide() when the denominator is exactly zero. The guiding
# velocity at an exact wave-function node therefore evaluates to zero instead
# of propagating inf/nan into the integrator.
ZERO_DENOMINATOR_RESULT: Complex = (0.0, 0.0)


def make(re: float = 0.0, im: float = 0.0) -> Complex:
    return float(re), float(im)


@njit(cache=True)
def real(a):
    return a[0]


@njit(cache=True)
def imag(a):
    return a[1]


@njit(cache=True)
def add(a, b):
    return a[0] + b[0], a[1] + b[1]


@njit(cache=True)
def multiply(a, b):
    return a[0] * b[0] - a[1] * b[1], a[0] * b[1] + a[1] * b[0]


@njit(cache=True)
def conjugate(a):
    return a[0], -a[1]


@njit(cache=True)
def abs2(a):
    """Squared modulus |a|^2."""

    return a[0] * a[0] + a[1] * a[1]


@njit(cache=True)
def divide(a, b):
    """Complex quotient a / b = a * conj(b) / |b|^2.

    If |b|^2 is exactly zero the result is (0, 0) rather than an error or a
    non-finite value; see ZERO_DENOMINATOR_RESULT.
    """

    denominator = b[0] * b[0] + b[1] * b[1]
    if denominator == 0.0:
        return 0.0, 0.0
    return (
        (a[0] * b[0] + a[1] * b[1]) / denominator,
        (a[1] * b[0] - a[0] * b[1]) / denominator,
    )
