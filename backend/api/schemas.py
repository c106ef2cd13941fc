"""Pydantic request/response models for the API.

Field names match the calculator form's JSON contract (camelCase) so the
front end can post its state unchanged.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel


# ── Request Models ────────────────────────────────────────────


class MaterialPropertiesInput(BaseModel):
    yieldStrength: float  # N/mm²
    ultimateStrength: float  # N/mm²
    elasticModulus: float  # N/mm²
    shearModulus: float  # N/mm²
    materialFactor: float  # gamma_M


class SectionGeometryInput(BaseModel):
    depth: float  # mm
    breadth: float
    lipWidth: float
    webThickness: float
    flangeThickness: float
    lipHeight1: float
    lipHeight2: float
    webStiffenerDepth: float
    webStiffenerLength: float
    overallFlangeDimension: float


class SectionPropertiesInput(BaseModel):
    grossArea: float  # mm²
    perimeter: float  # mm
    iXx: float  # mm⁴
    iYy: float  # mm⁴
    zXx: float  # mm³
    zYy: float  # mm³
    warpingConstant: float  # mm⁶
    torsionConstant: float  # mm⁴
    centroidX: float  # mm
    centroidY: float
    shearCenterX: float
    shearCenterY: float
    ex: float
    radiusGyrationX: float
    radiusGyrationY: float


class EffectiveLengthsInput(BaseModel):
    unsupportedLenX: float  # mm
    unsupportedLenY: float
    unsupportedLenTorsion: float
    effLenFactorX: float
    effLenFactorY: float
    effLenFactorTorsion: float


class AppliedLoadsInput(BaseModel):
    axialForce: float  # kN, compression positive
    momentMx: float  # kNm
    momentMy: float  # kNm
    loadEccentricityX: float = 0.0  # mm


class ServiceabilityInput(BaseModel):
    totalUprightHeight: float  # mm
    maxInducedSway: float  # mm


class UprightDesignInputModel(BaseModel):
    material: MaterialPropertiesInput
    geometry: SectionGeometryInput
    sectionProperties: SectionPropertiesInput
    effectiveLengths: EffectiveLengthsInput
    appliedLoads: AppliedLoadsInput
    serviceability: ServiceabilityInput
    project_info: dict[str, Any] | None = None


# ── Response Models ───────────────────────────────────────────


class CapacityOutput(BaseModel):
    capacity: float  # kN


class InteractionCheckOutput(BaseModel):
    axialTerm: float
    momentXTerm: float
    momentYTerm: float
    totalRatio: float
    status: Literal["PASS", "FAIL"]


class SwayCheckOutput(BaseModel):
    permissibleSway: float  # mm
    inducedSway: float  # mm
    status: Literal["PASS", "FAIL"]


class UprightDesignResultsOutput(BaseModel):
    yieldingCapacity: float  # kN
    flexuralBuckling: CapacityOutput
    torsionalBuckling: CapacityOutput
    momentCapacityX: float  # kNm
    momentCapacityY: float  # kNm
    designAxialCapacity: float  # kN
    interactionCheck: InteractionCheckOutput
    swayCheck: SwayCheckOutput
    finalStatus: Literal["PASS", "FAIL"]
    calculationSteps: list[str]
