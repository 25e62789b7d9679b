"""Newtonian-family pressure coefficients.

The inclination angle is measured between the local surface and the
freestream velocity vector; impact surfaces have a positive angle.
Reference: Anderson, Hypersonic and High-Temperature Gas Dynamics, Ch. 3.
"""

from __future__ import annotations

import math

from .errors import DomainError, require_gamma


def newtonian_pressure_coefficient(inclination_angle: float) -> float:
    return 2.0 * math.sin(inclination_angle) ** 2


def modified_newtonian_pressure_coefficient(
    inclination_angle: float, stagnation_pressure_coefficient: float
) -> float:
    """Lees' modified Newtonian theory.

    stagnation_pressure_coefficient comes from
    ``isentropic.stagnation_pressure_coefficient`` at the freestream Mach number.
    """
    return stagnation_pressure_coefficient * math.sin(inclination_angle) ** 2


def vacuum_pressure_coefficient(M: float, gamma: float) -> float:
    """Lower bound of Cp: the local pressure drops to zero."""
    g = require_gamma(gamma)
    if not (M > 0.0):
        raise DomainError(f"vacuum pressure coefficient requires M > 0, got {M}")
    return -2.0 / (g * M * M)


def high_mach_base_pressure(M: float) -> float:
    """Base pressure coefficient, -1/M^2.

    Hypersonic-limit approximation; overestimates the base suction at low
    supersonic Mach numbers.
    """
    if not (M > 0.0):
        raise DomainError(f"base pressure requires M > 0, got {M}")
    return -1.0 / (M * M)
