import math

import pytest

from upright.en15512.constants import buckling_curve
from upright.en15512.slenderness import (
    effective_length,
    euler_critical_load,
    non_dimensional_slenderness,
    reduction_factor,
)

CURVE_B = buckling_curve("b")


def test_curve_b_constants():
    assert CURVE_B.alpha == pytest.approx(0.34)
    assert CURVE_B.lambda_0 == pytest.approx(0.2)


def test_unknown_curve_rejected():
    with pytest.raises(ValueError, match="Unknown buckling curve"):
        buckling_curve("e")


def test_effective_length():
    assert effective_length(0.7, 3000.0) == pytest.approx(2100.0)


def test_euler_critical_load():
    # pi^2 * 210000 * 1e6 / 1000^2
    assert euler_critical_load(210000.0, 1e6, 1000.0) == pytest.approx(math.pi ** 2 * 210000.0)


def test_euler_critical_load_zero_length_is_infinite():
    assert math.isinf(euler_critical_load(210000.0, 1e6, 0.0))


def test_slenderness_of_infinite_critical_load_is_zero():
    assert non_dimensional_slenderness(379050.0, math.inf) == 0.0


def test_chi_is_one_at_zero_slenderness():
    _, chi = reduction_factor(0.0, CURVE_B)
    assert chi == 1.0


def test_chi_is_one_on_plateau():
    _, chi = reduction_factor(0.2, CURVE_B)
    assert chi == pytest.approx(1.0)


def test_chi_at_unit_slenderness_curve_b():
    # EN 1993-1-1 Table 6.1 / Figure 6.4, curve b at lambda_bar = 1.0
    Phi, chi = reduction_factor(1.0, CURVE_B)
    assert Phi == pytest.approx(1.136)
    assert chi == pytest.approx(0.5970, abs=1e-4)


def test_chi_bounded_and_decreasing():
    previous = 1.0
    for lam in (0.1, 0.3, 0.5, 0.8, 1.2, 2.0, 3.0):
        _, chi = reduction_factor(lam, CURVE_B)
        assert 0.0 < chi <= 1.0
        assert chi <= previous
        previous = chi
