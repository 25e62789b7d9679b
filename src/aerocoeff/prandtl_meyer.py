"""Prandtl-Meyer expansion relations."""

from __future__ import annotations

import math
import warnings

from .constants import (
    GAMMA_AIR,
    MAX_PRANDTL_MEYER_VALUE,
    PRANDTL_MEYER_PARAMETER_1,
    PRANDTL_MEYER_PARAMETER_2,
    PRANDTL_MEYER_PARAMETER_3,
    PRANDTL_MEYER_PARAMETER_4,
    PRANDTL_MEYER_PARAMETER_5,
)
from .errors import DomainError, IndeterminateResultError, require_gamma
from .isentropic import local_to_static_pressure_ratio
from .newtonian import vacuum_pressure_coefficient


def prandtl_meyer_function(M: float, gamma: float) -> float:
    """Return Prandtl-Meyer angle ``nu`` [rad] for ``M >= 1``."""
    g = require_gamma(gamma)
    if not (M >= 1.0):
        raise DomainError(f"Prandtl-Meyer function requires M >= 1, got {M}")
    beta = math.sqrt(M * M - 1.0)
    a = math.sqrt((g + 1.0) / (g - 1.0))
    return a * math.atan(beta / a) - math.atan(beta)


def inverse_prandtl_meyer_function(nu: float) -> float:
    """Mach number from the Prandtl-Meyer angle, gamma = 1.4 only.

    Direct evaluation of Hall's rational fit in y = (nu / nu_max)**(2/3), no
    iteration. M = 1 at nu = 0 and M -> inf as nu -> nu_max.
    """
    nu = float(nu)
    if not (0.0 <= nu <= MAX_PRANDTL_MEYER_VALUE):
        raise DomainError(
            f"Prandtl-Meyer value must lie in [0, {MAX_PRANDTL_MEYER_VALUE:.6f}], "
            f"got {nu}"
        )
    if nu == MAX_PRANDTL_MEYER_VALUE:
        raise IndeterminateResultError(
            "Prandtl-Meyer value equals its maximum; Mach number is unbounded"
        )

    y = (nu / MAX_PRANDTL_MEYER_VALUE) ** (2.0 / 3.0)
    numerator = 1.0 + y * (
        PRANDTL_MEYER_PARAMETER_1
        + y * (PRANDTL_MEYER_PARAMETER_2 + y * PRANDTL_MEYER_PARAMETER_3)
    )
    denominator = 1.0 + y * (PRANDTL_MEYER_PARAMETER_4 + y * PRANDTL_MEYER_PARAMETER_5)
    return numerator / denominator


def prandtl_meyer_freestream_pressure_coefficient(
    inclination_angle: float,
    M: float,
    gamma: float,
    freestream_prandtl_meyer_value: float,
) -> float:
    """Expansion pressure coefficient for a surface turned away from the flow.

    The flow expands isentropically from freestream through
    ``-inclination_angle``; past nu_max the vacuum coefficient is returned.
    A compression turn larger than the freestream nu has no Prandtl-Meyer
    state; it is evaluated at sonic conditions (nu = 0, M = 1), which caps
    the positive Cp.
    The inverse Prandtl-Meyer fit restricts this to air.

    Args:
        inclination_angle: Local surface inclination [rad], negative for expansion.
        M: Freestream Mach number.
        gamma: Ratio of specific heats.
        freestream_prandtl_meyer_value: nu(M) [rad], precomputed by the caller.
    """
    g = require_gamma(gamma)
    if g != GAMMA_AIR:
        warnings.warn(
            f"inverse Prandtl-Meyer fit is valid for gamma=1.4 only, got {g}",
            stacklevel=2,
        )
    if not (M >= 1.0):
        raise DomainError(f"Prandtl-Meyer expansion requires M >= 1, got {M}")

    nu = freestream_prandtl_meyer_value - inclination_angle
    if nu >= MAX_PRANDTL_MEYER_VALUE:
        return vacuum_pressure_coefficient(M, g)

    local_mach = inverse_prandtl_meyer_function(max(nu, 0.0))
    p_local = local_to_static_pressure_ratio(local_mach, g)
    p_ratio = p_local / local_to_static_pressure_ratio(M, g)
    return 2.0 / (g * M * M) * (p_ratio - 1.0)
