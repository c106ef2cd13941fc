"""Input records for the upright design check.

Units follow the calculator form:
- Lengths, coordinates: mm
- Stresses and moduli of elasticity: N/mm²
- Areas: mm², second moments / torsion constant: mm⁴
- Section moduli: mm³, warping constant: mm⁶
- Forces: kN, moments: kNm

Each field records its wire name (the camelCase key used by callers) and a
range rule in the dataclass field metadata.  ``validate_input`` walks those
rules, so the record definitions are the single source of truth.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from .errors import InputValidationError

# Range rules
ANY = "any"
POSITIVE = "positive"          # > 0
NON_NEGATIVE = "non_negative"  # >= 0
FACTOR = "factor"              # >= 1.0


def _wire(name: str, rule: str = ANY) -> Any:
    return field(metadata={"wire": name, "rule": rule})


@dataclass(frozen=True)
class MaterialProperties:
    yield_strength: float = _wire("yieldStrength", POSITIVE)        # fy
    ultimate_strength: float = _wire("ultimateStrength", POSITIVE)  # fu
    elastic_modulus: float = _wire("elasticModulus", POSITIVE)      # E
    shear_modulus: float = _wire("shearModulus", POSITIVE)          # G
    material_factor: float = _wire("materialFactor", FACTOR)        # gamma_M


@dataclass(frozen=True)
class SectionGeometry:
    """Nominal dimensions, carried for traceability only."""

    depth: float = _wire("depth", NON_NEGATIVE)
    breadth: float = _wire("breadth", NON_NEGATIVE)
    lip_width: float = _wire("lipWidth", NON_NEGATIVE)
    web_thickness: float = _wire("webThickness", NON_NEGATIVE)
    flange_thickness: float = _wire("flangeThickness", NON_NEGATIVE)
    lip_height_1: float = _wire("lipHeight1", NON_NEGATIVE)
    lip_height_2: float = _wire("lipHeight2", NON_NEGATIVE)
    web_stiffener_depth: float = _wire("webStiffenerDepth", NON_NEGATIVE)
    web_stiffener_length: float = _wire("webStiffenerLength", NON_NEGATIVE)
    overall_flange_dimension: float = _wire("overallFlangeDimension", NON_NEGATIVE)


@dataclass(frozen=True)
class SectionProperties:
    """Pre-computed (gross or effective) cross-section properties."""

    gross_area: float = _wire("grossArea", POSITIVE)             # Ag
    perimeter: float = _wire("perimeter", NON_NEGATIVE)
    i_xx: float = _wire("iXx", POSITIVE)
    i_yy: float = _wire("iYy", POSITIVE)
    z_xx: float = _wire("zXx", POSITIVE)
    z_yy: float = _wire("zYy", POSITIVE)
    warping_constant: float = _wire("warpingConstant", POSITIVE)  # Cw
    torsion_constant: float = _wire("torsionConstant", POSITIVE)  # J
    centroid_x: float = _wire("centroidX")
    centroid_y: float = _wire("centroidY")
    shear_center_x: float = _wire("shearCenterX")
    shear_center_y: float = _wire("shearCenterY")
    ex: float = _wire("ex")  # shear centre from centroid, x-direction (x0)
    radius_gyration_x: float = _wire("radiusGyrationX", POSITIVE)
    radius_gyration_y: float = _wire("radiusGyrationY", POSITIVE)


@dataclass(frozen=True)
class EffectiveLengths:
    unsupported_len_x: float = _wire("unsupportedLenX", POSITIVE)
    unsupported_len_y: float = _wire("unsupportedLenY", POSITIVE)
    unsupported_len_torsion: float = _wire("unsupportedLenTorsion", POSITIVE)
    eff_len_factor_x: float = _wire("effLenFactorX", POSITIVE)
    eff_len_factor_y: float = _wire("effLenFactorY", POSITIVE)
    eff_len_factor_torsion: float = _wire("effLenFactorTorsion", POSITIVE)


@dataclass(frozen=True)
class AppliedLoads:
    """Factored actions. Axial force is compression positive."""

    axial_force: float = _wire("axialForce", NON_NEGATIVE)  # kN
    moment_mx: float = _wire("momentMx")                    # kNm
    moment_my: float = _wire("momentMy")                    # kNm
    load_eccentricity_x: float = _wire("loadEccentricityX")  # mm


@dataclass(frozen=True)
class ServiceabilityInputs:
    total_upright_height: float = _wire("totalUprightHeight", POSITIVE)  # H
    max_induced_sway: float = _wire("maxInducedSway", NON_NEGATIVE)      # from frame analysis


# (attribute, wire key, record type)
_GROUPS: tuple[tuple[str, str, type], ...] = (
    ("material", "material", MaterialProperties),
    ("geometry", "geometry", SectionGeometry),
    ("section_properties", "sectionProperties", SectionProperties),
    ("effective_lengths", "effectiveLengths", EffectiveLengths),
    ("applied_loads", "appliedLoads", AppliedLoads),
    ("serviceability", "serviceability", ServiceabilityInputs),
)


@dataclass(frozen=True)
class UprightDesignInput:
    material: MaterialProperties
    geometry: SectionGeometry
    section_properties: SectionProperties
    effective_lengths: EffectiveLengths
    applied_loads: AppliedLoads
    serviceability: ServiceabilityInputs
    project_info: Mapping[str, Any] | None = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "UprightDesignInput":
        """Build an input record from the camelCase request payload.

        Unknown keys are ignored. A missing group or value raises
        :class:`InputValidationError` naming it.
        """
        groups: dict[str, Any] = {}
        for attr, wire, record_type in _GROUPS:
            raw = payload.get(wire)
            if not isinstance(raw, Mapping):
                raise InputValidationError(wire, "*", "is required")
            groups[attr] = _record_from_wire(record_type, wire, raw)
        project_info = payload.get("project_info")
        return cls(**groups, project_info=dict(project_info) if project_info else None)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            wire: _record_to_wire(getattr(self, attr)) for attr, wire, _ in _GROUPS
        }
        if self.project_info is not None:
            out["project_info"] = dict(self.project_info)
        return out


def _record_from_wire(record_type: type, section: str, raw: Mapping[str, Any]) -> Any:
    values: dict[str, float] = {}
    for f in fields(record_type):
        wire = f.metadata["wire"]
        if wire not in raw or raw[wire] is None:
            raise InputValidationError(section, wire, "is required")
        if isinstance(raw[wire], bool):
            raise InputValidationError(section, wire, f"must be a number (got {raw[wire]!r})")
        try:
            values[f.name] = float(raw[wire])
        except (TypeError, ValueError):
            raise InputValidationError(section, wire, f"must be a number (got {raw[wire]!r})") from None
    return record_type(**values)


def _record_to_wire(record: Any) -> dict[str, float]:
    return {f.metadata["wire"]: getattr(record, f.name) for f in fields(record)}


def _check_value(section: str, wire: str, rule: str, value: float) -> None:
    if not math.isfinite(value):
        raise InputValidationError(section, wire, f"must be a finite number (got {value!r})")
    if rule == POSITIVE and value <= 0.0:
        raise InputValidationError(section, wire, f"must be > 0 (got {value:g})")
    if rule == NON_NEGATIVE and value < 0.0:
        raise InputValidationError(section, wire, f"must be >= 0 (got {value:g})")
    if rule == FACTOR and value < 1.0:
        raise InputValidationError(section, wire, f"must be >= 1.0 (got {value:g})")


def validate_input(design_input: UprightDesignInput) -> None:
    """Check every value against its range rule, in declaration order.

    Raises :class:`InputValidationError` on the first offending value.
    """
    for attr, wire, _ in _GROUPS:
        record = getattr(design_input, attr)
        for f in fields(record):
            _check_value(wire, f.metadata["wire"], f.metadata["rule"], float(getattr(record, f.name)))
