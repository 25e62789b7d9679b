"""Isentropic and stagnation pressure primitives for a perfect gas."""

from __future__ import annotations

from .errors import DomainError, require_gamma


def local_to_static_pressure_ratio(M: float, gamma: float) -> float:
    """Static over total pressure, p/p0, at the given Mach number."""
    g = require_gamma(gamma)
    if M < 0.0:
        raise DomainError(f"Mach number must be >= 0, got {M}")
    return (2.0 / (2.0 + (g - 1.0) * M * M)) ** (g / (g - 1.0))


def stagnation_pressure_coefficient(M: float, gamma: float) -> float:
    """Pressure coefficient at the stagnation point.

    Supersonic: Rayleigh pitot formula (normal shock, then isentropic
    compression). Subsonic: isentropic compression only. Both branches give
    ((gamma + 1)/2)**(gamma/(gamma - 1)) total-to-static ratio at M = 1.
    """
    g = require_gamma(gamma)
    M = float(M)
    if M < 0.0:
        raise DomainError(f"Mach number must be >= 0, got {M}")
    if M == 0.0:
        return 1.0

    m2 = M * M
    exponent = g / (g - 1.0)
    if M >= 1.0:
        pitot_ratio = (
            ((g + 1.0) * M) ** 2 / (4.0 * g * m2 - 2.0 * (g - 1.0))
        ) ** exponent * ((1.0 - g + 2.0 * g * m2) / (g + 1.0))
    else:
        pitot_ratio = (1.0 + 0.5 * (g - 1.0) * m2) ** exponent
    return 2.0 / (g * m2) * (pitot_ratio - 1.0)


def stagnation_pressure(M: float, gamma: float) -> float:
    return stagnation_pressure_coefficient(M, gamma)
