"""Jump conditions across oblique and normal shocks.

Thermally and calorically perfect gas. The ratio functions take the Mach
number normal to the shock and are not validated: below Mn = 1 they return
the algebraic value, which is not a physical shock.
Reference: Anderson, Fundamentals of Aerodynamics, 3rd ed., Ch. 8-9.
"""

from __future__ import annotations

import math

from .errors import DomainError, IndeterminateResultError, require_gamma

# |M^2 sin^2(beta) - 1| below this is treated as a Mach wave.
_MACH_WAVE_TOL = 1e-12


def shock_pressure_ratio(Mn: float, gamma: float) -> float:
    return 1.0 + 2.0 * gamma / (gamma + 1.0) * (Mn * Mn - 1.0)


def shock_density_ratio(Mn: float, gamma: float) -> float:
    mn2 = Mn * Mn
    return (gamma + 1.0) * mn2 / ((gamma - 1.0) * mn2 + 2.0)


def shock_temperature_ratio(Mn: float, gamma: float) -> float:
    """T2/T1 from the ideal-gas law, T ~ p/rho."""
    rho_ratio = shock_density_ratio(Mn, gamma)
    if rho_ratio == 0.0:
        raise IndeterminateResultError(
            f"density ratio vanishes at normal Mach number {Mn}"
        )
    return shock_pressure_ratio(Mn, gamma) / rho_ratio


def shock_entropy_jump(Mn: float, gamma: float, r_gas: float) -> float:
    """Specific entropy rise s2 - s1 [J/(kg K)] across the shock."""
    g = require_gamma(gamma)
    if not (r_gas > 0.0):
        raise DomainError(f"specific gas constant must be > 0, got {r_gas}")
    p_ratio = shock_pressure_ratio(Mn, g)
    rho_ratio = shock_density_ratio(Mn, g)
    if p_ratio <= 0.0 or rho_ratio <= 0.0:
        raise DomainError(
            f"shock ratios must be positive (p2/p1={p_ratio}, rho2/rho1={rho_ratio}) "
            f"for normal Mach number {Mn}"
        )
    c_v = r_gas / (g - 1.0)
    return c_v * math.log(p_ratio * rho_ratio ** (-g))


def shock_total_pressure_ratio(Mn: float, gamma: float, r_gas: float) -> float:
    return math.exp(-shock_entropy_jump(Mn, gamma, r_gas) / r_gas)


def mach_angle(M: float) -> float:
    if M < 1.0:
        raise DomainError(f"Mach angle requires M >= 1, got {M}")
    return math.asin(1.0 / M)


def shock_deflection_angle(shock_angle: float, M: float, gamma: float) -> float:
    """Flow deflection across an oblique shock (theta-beta-M relation).

    Returns 0.0 for a Mach wave (shock angle equal to the Mach angle) and for
    a normal shock. Shock angles below the Mach angle have no shock solution.
    """
    g = require_gamma(gamma)
    beta = float(shock_angle)
    if not (0.0 < beta <= 0.5 * math.pi):
        raise DomainError(f"shock angle must lie in (0, pi/2], got {beta}")

    m2 = M * M
    compression = m2 * math.sin(beta) ** 2 - 1.0
    if abs(compression) <= _MACH_WAVE_TOL:
        return 0.0
    if compression < 0.0:
        raise DomainError(
            f"shock angle {beta} is below the Mach angle for M={M}; no shock exists"
        )
    if beta == 0.5 * math.pi:
        return 0.0

    return math.atan(
        2.0 / math.tan(beta) * compression / (m2 * (g + math.cos(2.0 * beta)) + 2.0)
    )
