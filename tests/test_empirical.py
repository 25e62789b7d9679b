import math

import numpy as np
from scipy.optimize import brentq

from aerocoeff.constants import DEG
from aerocoeff.empirical import (
    acm_empirical_pressure_coefficient,
    dahlem_buck_pressure_coefficient,
    hankey_flat_surface_pressure_coefficient,
    smyth_delta_wing_pressure_coefficient,
    tangent_cone_pressure_coefficient,
    tangent_wedge_pressure_coefficient,
)
from aerocoeff.newtonian import newtonian_pressure_coefficient
from aerocoeff.shocks import mach_angle, shock_deflection_angle, shock_pressure_ratio


def _exact_wedge_cp(theta: float, M: float, gamma: float = 1.4) -> float:
    lo = mach_angle(M) + 1e-9
    beta = brentq(
        lambda b: shock_deflection_angle(b, M, gamma) - theta, lo, math.radians(60.0)
    )
    p_ratio = shock_pressure_ratio(M * math.sin(beta), gamma)
    return 2.0 / (gamma * M * M) * (p_ratio - 1.0)


def test_tangent_wedge_zero_at_zero_inclination():
    assert tangent_wedge_pressure_coefficient(0.0, 5.0) == 0.0


def test_tangent_wedge_close_to_oblique_shock():
    for M, deg in ((5.0, 10.0), (8.0, 15.0), (10.0, 5.0)):
        exact = _exact_wedge_cp(deg * DEG, M)
        approx = tangent_wedge_pressure_coefficient(deg * DEG, M)
        assert abs(approx - exact) / exact < 0.1


def test_tangent_wedge_hypersonic_limit():
    delta = 10.0 * DEG
    cp = tangent_wedge_pressure_coefficient(delta, 1000.0)
    assert abs(cp / (2.4 * math.sin(delta) ** 2) - 1.0) < 1e-3


def test_tangent_cone_hypersonic_limit_and_below_wedge():
    delta = 10.0 * DEG
    cp = tangent_cone_pressure_coefficient(delta, 1000.0)
    assert abs(cp / (48.0 / 23.0 * math.sin(delta) ** 2) - 1.0) < 1e-3
    assert tangent_cone_pressure_coefficient(15.0 * DEG, 10.0) < (
        tangent_wedge_pressure_coefficient(15.0 * DEG, 10.0)
    )
    assert tangent_cone_pressure_coefficient(0.0, 6.0) == 0.0


def test_dahlem_buck_shadowed_surface():
    assert dahlem_buck_pressure_coefficient(0.0, 10.0) == 0.0
    assert dahlem_buck_pressure_coefficient(-0.3, 10.0) == 0.0


def test_dahlem_buck_newtonian_above_22_5_deg_at_high_mach():
    delta = 30.0 * DEG
    assert dahlem_buck_pressure_coefficient(delta, 25.0) == newtonian_pressure_coefficient(
        delta
    )


def test_dahlem_buck_mach_correction_raises_cp():
    delta = 30.0 * DEG
    assert dahlem_buck_pressure_coefficient(delta, 10.0) > dahlem_buck_pressure_coefficient(
        delta, 25.0
    )


def test_dahlem_buck_small_angle_fit():
    delta = 10.0 * DEG
    expected = (1.0 / math.sin(4.0 * delta) ** 0.75 + 1.0) * math.sin(delta) ** 1.25
    assert abs(dahlem_buck_pressure_coefficient(delta, 30.0) - expected) < 1e-12


def test_hankey_continuous_at_ten_degrees():
    for M in (4.0, 10.0, 20.0):
        below = hankey_flat_surface_pressure_coefficient(10.0 * DEG - 1e-9, M)
        at = hankey_flat_surface_pressure_coefficient(10.0 * DEG, M)
        assert abs(below - at) < 1e-4


def test_hankey_increases_with_inclination():
    cps = [
        hankey_flat_surface_pressure_coefficient(float(d), 8.0)
        for d in np.linspace(1.0 * DEG, 60.0 * DEG, 40)
    ]
    assert np.all(np.diff(cps) > 0.0)


def test_smyth_floors_inclination_at_one_degree():
    ref = smyth_delta_wing_pressure_coefficient(1.0 * DEG, 6.0)
    assert smyth_delta_wing_pressure_coefficient(0.0, 6.0) == ref
    assert smyth_delta_wing_pressure_coefficient(-5.0 * DEG, 6.0) == ref
    assert smyth_delta_wing_pressure_coefficient(20.0 * DEG, 6.0) > ref


def test_acm_linear_then_floored():
    M = 4.0
    assert acm_empirical_pressure_coefficient(0.0, M) == 0.0
    assert abs(acm_empirical_pressure_coefficient(-8.0 * DEG, M) + 8.0 / 256.0) < 1e-12
    assert abs(acm_empirical_pressure_coefficient(-30.0 * DEG, M) + 1.0 / 16.0) < 1e-15


def test_correlations_are_deterministic():
    for fn in (
        tangent_wedge_pressure_coefficient,
        tangent_cone_pressure_coefficient,
        dahlem_buck_pressure_coefficient,
        hankey_flat_surface_pressure_coefficient,
        smyth_delta_wing_pressure_coefficient,
        acm_empirical_pressure_coefficient,
    ):
        assert fn(12.0 * DEG, 7.0) == fn(12.0 * DEG, 7.0)
        assert math.isfinite(fn(12.0 * DEG, 7.0))
