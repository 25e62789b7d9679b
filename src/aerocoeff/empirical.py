"""Empirical local-inclination pressure correlations for air (gamma = 1.4).

These are regression fits, not derived relations. They are evaluated without
input checks so a panel code can call them for every panel; use
``validity.check_correlation_inputs`` to screen the flow regime first.
Outside a correlation's window the result is whatever the fit gives.

References:
    Gentry, Smyth, Oliver, The Mark IV Supersonic-Hypersonic Arbitrary Body
    Program, Vol. II, Douglas Aircraft Company, 1973.
    Anderson, Hypersonic and High-Temperature Gas Dynamics, 2nd ed., 2006.
"""

from __future__ import annotations

import math

from .constants import DEG

# Cp = 2/(gamma M^2) (p2/p1 - 1) = 1.66667 (Mn^2 - 1) / M^2 for gamma = 1.4
_WEDGE_CP_FACTOR = 1.66667

_DAHLEM_BUCK_NEWTONIAN_ANGLE = 22.5 * DEG
_DAHLEM_BUCK_MACH_LIMIT = 20.0
_HANKEY_TRANSITION_ANGLE = 10.0 * DEG
_SMYTH_MIN_ANGLE = 1.0 * DEG


def tangent_wedge_pressure_coefficient(inclination_angle: float, M: float) -> float:
    mach_sine = M * math.sin(inclination_angle)
    mn = 1.2 * mach_sine + math.exp(-0.6 * mach_sine)
    return _WEDGE_CP_FACTOR * (mn * mn - 1.0) / (M * M)


def tangent_cone_pressure_coefficient(inclination_angle: float, M: float) -> float:
    mach_sine = M * math.sin(inclination_angle)
    mn = 1.090909 * mach_sine + math.exp(-0.5454545 * mach_sine)
    mn2 = mn * mn
    return 48.0 * mn2 * math.sin(inclination_angle) ** 2 / (23.0 * mn2 - 5.0)


def dahlem_buck_pressure_coefficient(inclination_angle: float, M: float) -> float:
    """Modified Dahlem-Buck impact method.

    Newtonian above 22.5 deg, Dahlem-Buck fit below, with a Mach correction
    factor 1 + a * delta_deg**n applied below Mach 20. Surfaces at zero or
    negative inclination are shadowed and get Cp = 0.
    """
    delta = float(inclination_angle)
    if delta <= 0.0:
        return 0.0

    if delta > _DAHLEM_BUCK_NEWTONIAN_ANGLE:
        cp = 2.0 * math.sin(delta) ** 2
    else:
        cp = (1.0 / math.sin(4.0 * delta) ** 0.75 + 1.0) * math.sin(delta) ** 1.25

    if M < _DAHLEM_BUCK_MACH_LIMIT:
        log_m = math.log(M)
        a = (6.0 - 0.3 * M) + math.sin((log_m - 0.588) / 1.2 * math.pi)
        n = -1.15 - 0.5 * math.sin((log_m - 0.916) / 3.29 * math.pi)
        cp *= 1.0 + a * (delta / DEG) ** n
    return cp


def hankey_flat_surface_pressure_coefficient(
    inclination_angle: float, M: float
) -> float:
    delta = float(inclination_angle)
    if delta < _HANKEY_TRANSITION_ANGLE:
        cp_stag = (0.195 + 0.222594 / M**0.3 - 0.4) * (delta / DEG) + 4.0
    else:
        cp_stag = 1.95 + 0.3925 / (M**0.3 * math.tan(delta))
    return cp_stag * math.sin(delta) ** 2


def smyth_delta_wing_pressure_coefficient(
    inclination_angle: float, M: float
) -> float:
    delta = max(float(inclination_angle), _SMYTH_MIN_ANGLE)
    mn = (0.87 * M - 0.554) * math.sin(delta) + 0.53
    return _WEDGE_CP_FACTOR * (mn * mn - 1.0) / (M * M)


def acm_empirical_pressure_coefficient(inclination_angle: float, M: float) -> float:
    """ACM expansion-surface fit, Cp = delta_deg / (16 M^2), floored at -1/M^2."""
    m2 = M * M
    cp = (inclination_angle / DEG) / (16.0 * m2)
    return max(cp, -1.0 / m2)
