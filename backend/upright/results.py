"""Result records produced by the upright design calculators.

Capacities are in kN (axial) and kNm (bending), sway in mm. A capacity of 0
means the mode is degenerate or not applicable, not that the calculation
failed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

Status = Literal["PASS", "FAIL"]

PASS: Status = "PASS"
FAIL: Status = "FAIL"


def status_of(ok: bool) -> Status:
    return PASS if ok else FAIL


@dataclass(frozen=True)
class AxisBuckling:
    """Flexural buckling intermediates about one principal axis."""

    axis: str
    Le_mm: float
    Ncr_kN: float
    lambda_bar: float
    Phi: float
    chi: float
    Nb_Rd_kN: float


@dataclass(frozen=True)
class FlexuralBucklingResult:
    capacity: float
    x: AxisBuckling
    y: AxisBuckling

    @property
    def governing_axis(self) -> str:
        return self.x.axis if self.x.Nb_Rd_kN <= self.y.Nb_Rd_kN else self.y.axis

    def to_dict(self) -> dict[str, float]:
        return {"capacity": self.capacity}


@dataclass(frozen=True)
class FlexuralTorsionalBucklingResult:
    capacity: float
    Le_t_mm: float
    i0_sq_mm2: float
    beta: float          # 1 - (x0/i0)^2
    Ncr_y_kN: float
    Ncr_t_kN: float
    Ncr_ft_kN: float
    lambda_bar: float
    Phi: float
    chi: float
    fallback: bool = False

    def to_dict(self) -> dict[str, float]:
        return {"capacity": self.capacity}


@dataclass(frozen=True)
class MomentCapacityResult:
    Mx_Rd_kNm: float
    My_Rd_kNm: float


@dataclass(frozen=True)
class AxialCapacityResult:
    capacity: float
    governing_mode: str


@dataclass(frozen=True)
class InteractionResult:
    axial_term: float
    moment_x_term: float
    moment_y_term: float
    total_ratio: float
    status: Status
    errors: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "axialTerm": self.axial_term,
            "momentXTerm": self.moment_x_term,
            "momentYTerm": self.moment_y_term,
            "totalRatio": self.total_ratio,
            "status": self.status,
        }


@dataclass(frozen=True)
class SwayResult:
    permissible_sway: float
    induced_sway: float
    status: Status

    def to_dict(self) -> dict[str, Any]:
        return {
            "permissibleSway": self.permissible_sway,
            "inducedSway": self.induced_sway,
            "status": self.status,
        }


@dataclass(frozen=True)
class UprightDesignResults:
    yielding_capacity: float
    flexural_buckling: FlexuralBucklingResult
    torsional_buckling: FlexuralTorsionalBucklingResult
    moment_capacity_x: float
    moment_capacity_y: float
    design_axial_capacity: float
    governing_mode: str
    interaction_check: InteractionResult
    sway_check: SwayResult
    final_status: Status
    calculation_steps: tuple[str, ...]
    constants_version: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the response contract (camelCase keys)."""
        return {
            "yieldingCapacity": self.yielding_capacity,
            "flexuralBuckling": self.flexural_buckling.to_dict(),
            "torsionalBuckling": self.torsional_buckling.to_dict(),
            "momentCapacityX": self.moment_capacity_x,
            "momentCapacityY": self.moment_capacity_y,
            "designAxialCapacity": self.design_axial_capacity,
            "interactionCheck": self.interaction_check.to_dict(),
            "swayCheck": self.sway_check.to_dict(),
            "finalStatus": self.final_status,
            "calculationSteps": list(self.calculation_steps),
        }
