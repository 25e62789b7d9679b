"""Fit windows of the empirical pressure correlations.

The correlations in ``empirical`` never check their inputs. This module is
the explicit boundary for callers that want one: ``check_correlation_inputs``
returns a status flag, ``require_correlation_inputs`` raises ``DomainError``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .constants import DEG, GAMMA_AIR
from .errors import DomainError, InvalidArgumentError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidityWindow:
    mach_min: float
    mach_max: float
    angle_min: float
    angle_max: float
    gamma: float = GAMMA_AIR
    note: str = ""

    def contains(self, angle: float, mach: float) -> bool:
        return (
            self.mach_min <= mach <= self.mach_max
            and self.angle_min <= angle <= self.angle_max
        )


CORRELATION_WINDOWS: dict[str, ValidityWindow] = {
    "tangent_wedge": ValidityWindow(
        2.0, math.inf, 0.0, 45.0 * DEG, note="attached 2D shock, compression"
    ),
    "tangent_cone": ValidityWindow(
        2.0, math.inf, 0.0, 50.0 * DEG, note="attached conical shock, compression"
    ),
    "dahlem_buck": ValidityWindow(
        3.0, math.inf, 0.0, 90.0 * DEG, note="impact surfaces, hypersonic"
    ),
    "hankey": ValidityWindow(
        3.0, math.inf, 0.0, 90.0 * DEG, note="flat lifting surfaces, hypersonic"
    ),
    "smyth": ValidityWindow(
        2.0, math.inf, 0.0, 90.0 * DEG, note="delta wing lower surface"
    ),
    "acm": ValidityWindow(
        1.5, math.inf, -90.0 * DEG, 0.0, note="expansion surfaces"
    ),
}


def _window(method: str) -> ValidityWindow:
    try:
        return CORRELATION_WINDOWS[method]
    except KeyError:
        known = ", ".join(sorted(CORRELATION_WINDOWS))
        raise InvalidArgumentError(
            f"unknown correlation '{method}'; expected one of: {known}"
        ) from None


def check_correlation_inputs(method: str, angle: float, mach: float) -> dict:
    win = _window(method)
    if win.contains(angle, mach):
        return {"status": "ok", "method": method, "angle_rad": angle, "mach": mach}

    log.debug(
        "%s outside fit window: angle=%.4f rad, M=%.3f (%s)", method, angle, mach, win
    )
    return {
        "status": "warning",
        "method": method,
        "angle_rad": angle,
        "mach": mach,
        "mach_range": (win.mach_min, win.mach_max),
        "angle_range_rad": (win.angle_min, win.angle_max),
        "message": f"Inputs outside the {method} fit window ({win.note}); "
        "result is an extrapolation",
    }


def require_correlation_inputs(method: str, angle: float, mach: float) -> None:
    flag = check_correlation_inputs(method, angle, mach)
    if flag["status"] != "ok":
        raise DomainError(flag["message"])
