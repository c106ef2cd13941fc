import pytest

from upright.en15512.torsional import flexural_torsional_critical_load


def test_uncoupled_roots_give_smaller_mode(trace):
    Ncr_ft, fallback = flexural_torsional_critical_load(300.0, 200.0, 0.0, trace)
    assert Ncr_ft == pytest.approx(200.0)
    assert not fallback


def test_coupled_root_satisfies_equation(trace):
    Ncr_y, Ncr_t, coupling = 1424.79, 893.05, 0.6919
    N, fallback = flexural_torsional_critical_load(Ncr_y, Ncr_t, coupling, trace)
    residual = (Ncr_y - N) * (Ncr_t - N) - N ** 2 * coupling
    assert not fallback
    assert residual == pytest.approx(0.0, abs=1e-6 * Ncr_y * Ncr_t)
    assert 0 < N < Ncr_t


def test_vanishing_quadratic_term_uses_linear_root(trace):
    N, fallback = flexural_torsional_critical_load(100.0, 100.0, 1.0, trace)
    assert N == pytest.approx(50.0)
    assert not fallback


def test_negative_discriminant_falls_back(trace):
    # beta = 1.5: 200^2 - 4 * 1.5 * 100 * 100 < 0
    N, fallback = flexural_torsional_critical_load(100.0, 100.0, -0.5, trace)
    assert fallback
    assert N == 100.0
    assert any(line.startswith("NOTE:") and "FALLBACK" in line for line in trace.lines)
    assert any("negative discriminant" in line for line in trace.lines)


def test_discriminant_is_traced(trace):
    flexural_torsional_critical_load(300.0, 200.0, 0.3, trace)
    assert any("discriminant" in line for line in trace.lines)
