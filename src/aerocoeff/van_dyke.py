"""Van Dyke unified method.

Hypersonic similarity with K = sqrt(M^2 - 1) * |theta|, which recovers the
linear (Ackeret) result for small K and the hypersonic small-disturbance
result for large M.
Reference: Anderson, Hypersonic and High-Temperature Gas Dynamics, 2nd ed.,
Sec. 4.
"""

from __future__ import annotations

import math
from enum import IntEnum

from .errors import DomainError, InvalidArgumentError, require_gamma
from .newtonian import vacuum_pressure_coefficient


class SurfaceType(IntEnum):
    EXPANSION = 1
    COMPRESSION = -1


def _surface_type(surface_type) -> SurfaceType:
    msg = (
        "surface type must be EXPANSION (+1) or COMPRESSION (-1), "
        f"got {surface_type!r}"
    )
    if isinstance(surface_type, bool):
        raise InvalidArgumentError(msg)
    try:
        return SurfaceType(surface_type)
    except ValueError:
        raise InvalidArgumentError(msg) from None


def van_dyke_unified_pressure_coefficient(
    inclination_angle: float,
    M: float,
    gamma: float,
    surface_type: SurfaceType | int,
) -> float:
    """Pressure coefficient from the Van Dyke unified method.

    inclination_angle is the turning magnitude; the sign of the result comes
    from surface_type (positive on compression, negative on expansion).
    """
    kind = _surface_type(surface_type)
    g = require_gamma(gamma)
    if not (M > 1.0):
        raise DomainError(f"Van Dyke unified method requires M > 1, got {M}")

    theta = abs(float(inclination_angle))
    if theta == 0.0:
        return 0.0
    beta = math.sqrt(M * M - 1.0)
    K = beta * theta

    if kind is SurfaceType.COMPRESSION:
        half = 0.5 * (g + 1.0)
        # theta^2 * sqrt(half^2 + 4/K^2) written to stay finite for small K
        return theta * theta * half + theta * math.sqrt(
            theta * theta * half * half + 4.0 / (beta * beta)
        )

    base = max(1.0 - 0.5 * (g - 1.0) * K, 0.0)
    cp = 2.0 / (g * beta * beta) * (base ** (2.0 * g / (g - 1.0)) - 1.0)
    return max(cp, vacuum_pressure_coefficient(M, g))
