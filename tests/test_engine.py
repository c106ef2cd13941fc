import pytest

from upright import DEFAULT_CONSTANTS, FAIL, PASS, DesignConstants, InputValidationError, calculate
from upright.en15512.constants import CONSTANTS_VERSION, buckling_curve
from conftest import with_group

RESULT_KEYS = {
    "yieldingCapacity",
    "flexuralBuckling",
    "torsionalBuckling",
    "momentCapacityX",
    "momentCapacityY",
    "designAxialCapacity",
    "interactionCheck",
    "swayCheck",
    "finalStatus",
    "calculationSteps",
}


def test_example_passes(example):
    r = calculate(example)

    assert r.yielding_capacity == pytest.approx(344.59, abs=0.01)
    assert r.design_axial_capacity == pytest.approx(244.19, rel=5e-3)
    assert r.governing_mode == "flexural buckling"
    assert r.moment_capacity_x == pytest.approx(11.161, abs=1e-3)
    assert r.moment_capacity_y == pytest.approx(8.925, abs=1e-3)
    assert r.interaction_check.total_ratio == pytest.approx(0.702, abs=5e-3)
    assert r.interaction_check.status == PASS
    assert r.sway_check.permissible_sway == 46.0
    assert r.sway_check.status == PASS
    assert r.final_status == PASS


def test_design_capacity_is_governing(example):
    r = calculate(example)
    assert r.design_axial_capacity <= r.yielding_capacity
    assert r.design_axial_capacity <= r.flexural_buckling.capacity
    assert r.design_axial_capacity <= r.torsional_buckling.capacity
    assert r.design_axial_capacity in (
        r.yielding_capacity,
        r.flexural_buckling.capacity,
        r.torsional_buckling.capacity,
    )


def test_calculation_is_repeatable(example):
    assert calculate(example) == calculate(example)


def test_validation_runs_before_calculation(example):
    with pytest.raises(InputValidationError) as exc:
        calculate(with_group(example, "section_properties", gross_area=0.0))
    assert exc.value.field == "grossArea"


def test_overloaded_upright_fails_interaction(example):
    r = calculate(with_group(example, "applied_loads", axial_force=300.0))
    assert r.interaction_check.status == FAIL
    assert r.sway_check.status == PASS
    assert r.final_status == FAIL


def test_excessive_sway_fails_overall(example):
    r = calculate(with_group(example, "serviceability", max_induced_sway=50.0))
    assert r.interaction_check.status == PASS
    assert r.sway_check.status == FAIL
    assert r.final_status == FAIL


def test_sway_at_limit_passes(example):
    r = calculate(with_group(example, "serviceability", total_upright_height=9200.0, max_induced_sway=46.0))
    assert r.sway_check.status == PASS


def test_trace_is_ordered(example):
    steps = calculate(example).calculation_steps

    def first(prefix):
        return next(i for i, line in enumerate(steps) if line.startswith(prefix))

    order = [
        first("Yielding:"),
        first("Flexural buckling (x)"),
        first("Flexural buckling (y)"),
        first("Flexural-torsional:"),
        first("Moment capacity:"),
        first("Axial capacity:"),
        first("Interaction:"),
        first("Sway:"),
        first("Final status:"),
    ]
    assert order == sorted(order)


def test_trace_records_constants_version(example):
    r = calculate(example)
    assert r.constants_version == CONSTANTS_VERSION
    assert any(CONSTANTS_VERSION in line for line in r.calculation_steps)


def test_load_eccentricity_adds_moment_about_y(example):
    base = calculate(example)
    r = calculate(with_group(example, "applied_loads", load_eccentricity_x=500.0))

    # 144.24 kN * 500 mm = 72.12 kNm about y
    M_ecc = 144.24 * 500.0 / 1e3
    expected_uMy = (0.963 + M_ecc) / r.moment_capacity_y
    assert r.interaction_check.moment_y_term == pytest.approx(expected_uMy)
    assert r.interaction_check.moment_x_term == base.interaction_check.moment_x_term
    assert r.interaction_check.total_ratio > base.interaction_check.total_ratio
    assert r.final_status == FAIL
    assert any("M,ecc = N*ex" in line for line in r.calculation_steps)


def test_eccentricity_sign_does_not_matter(example):
    pos = calculate(with_group(example, "applied_loads", load_eccentricity_x=5.0))
    neg = calculate(with_group(example, "applied_loads", load_eccentricity_x=-5.0))
    assert pos.interaction_check.total_ratio == neg.interaction_check.total_ratio


def test_alternative_buckling_curve(example):
    curve_c = DesignConstants(flexural_curve=buckling_curve("c"), torsional_curve=buckling_curve("c"))
    r_b = calculate(example, DEFAULT_CONSTANTS)
    r_c = calculate(example, curve_c)
    assert r_c.flexural_buckling.capacity < r_b.flexural_buckling.capacity


def test_to_dict_matches_response_contract(example):
    out = calculate(example).to_dict()
    assert set(out) == RESULT_KEYS
    assert set(out["flexuralBuckling"]) == {"capacity"}
    assert set(out["torsionalBuckling"]) == {"capacity"}
    assert set(out["interactionCheck"]) == {"axialTerm", "momentXTerm", "momentYTerm", "totalRatio", "status"}
    assert set(out["swayCheck"]) == {"permissibleSway", "inducedSway", "status"}
    assert isinstance(out["calculationSteps"], list)
