"""Physical constants in natural units."""

HBAR = 1.0  # reduced Planck constant
MASS = 1.0  # particle mass
