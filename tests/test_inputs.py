import math

import pytest

from upright import InputValidationError, UprightDesignInput, validate_input
from conftest import with_group


def test_from_dict_maps_wire_names(payload):
    design_input = UprightDesignInput.from_dict(payload)
    assert design_input.section_properties.gross_area == 1083.0
    assert design_input.section_properties.i_xx == 2104581.6
    assert design_input.effective_lengths.unsupported_len_torsion == 1200.0
    assert design_input.applied_loads.moment_my == 0.963
    assert design_input.project_info == {"project_name": "IKEA PUNE B200", "client": "IKEA"}


def test_to_dict_restores_payload(payload):
    assert UprightDesignInput.from_dict(payload).to_dict() == payload


def test_missing_value_names_field(payload):
    del payload["sectionProperties"]["iYy"]
    with pytest.raises(InputValidationError) as exc:
        UprightDesignInput.from_dict(payload)
    assert exc.value.field == "iYy"
    assert exc.value.section == "sectionProperties"


def test_missing_group(payload):
    del payload["serviceability"]
    with pytest.raises(InputValidationError, match="serviceability"):
        UprightDesignInput.from_dict(payload)


def test_non_numeric_value(payload):
    payload["material"]["yieldStrength"] = "S350"
    with pytest.raises(InputValidationError, match="must be a number"):
        UprightDesignInput.from_dict(payload)


def test_example_is_valid(example):
    validate_input(example)


def test_zero_gross_area_rejected(example):
    bad = with_group(example, "section_properties", gross_area=0.0)
    with pytest.raises(InputValidationError) as exc:
        validate_input(bad)
    assert exc.value.field == "grossArea"
    assert isinstance(exc.value, ValueError)


def test_negative_gross_area_rejected(example):
    with pytest.raises(InputValidationError) as exc:
        validate_input(with_group(example, "section_properties", gross_area=-5.0))
    assert exc.value.field == "grossArea"
    assert exc.value.section == "sectionProperties"


def test_boolean_value_rejected(payload):
    payload["material"]["materialFactor"] = True
    with pytest.raises(InputValidationError) as exc:
        UprightDesignInput.from_dict(payload)
    assert exc.value.field == "materialFactor"


@pytest.mark.parametrize(
    "group, changes, wire",
    [
        ("material", {"material_factor": 0.9}, "materialFactor"),
        ("material", {"elastic_modulus": -210000.0}, "elasticModulus"),
        ("section_properties", {"i_xx": 0.0}, "iXx"),
        ("effective_lengths", {"eff_len_factor_y": 0.0}, "effLenFactorY"),
        ("applied_loads", {"axial_force": -10.0}, "axialForce"),
        ("serviceability", {"max_induced_sway": math.nan}, "maxInducedSway"),
        ("geometry", {"depth": -1.0}, "depth"),
    ],
)
def test_out_of_range_values_rejected(example, group, changes, wire):
    with pytest.raises(InputValidationError) as exc:
        validate_input(with_group(example, group, **changes))
    assert exc.value.field == wire


def test_negative_moments_allowed(example):
    validate_input(with_group(example, "applied_loads", moment_mx=-2.0, moment_my=-1.0))
