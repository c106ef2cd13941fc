"""Governing axial resistance."""

from __future__ import annotations

from ..results import AxialCapacityResult
from ..trace import CalcTrace

YIELDING = "yielding"
FLEXURAL_BUCKLING = "flexural buckling"
FLEXURAL_TORSIONAL_BUCKLING = "flexural-torsional buckling"


def design_axial_capacity(
    Nc_Rd: float, Nb_flexural: float, Nb_ft: float, trace: CalcTrace
) -> AxialCapacityResult:
    """N_design = min(Nc,Rd, Nb,flexural, Nb,ft).

    Ties resolve in the order listed, so yielding wins when nothing buckles.
    """
    candidates = (
        (YIELDING, Nc_Rd),
        (FLEXURAL_BUCKLING, Nb_flexural),
        (FLEXURAL_TORSIONAL_BUCKLING, Nb_ft),
    )
    mode, capacity = min(candidates, key=lambda c: c[1])
    trace.add(
        f"Axial capacity: N_design = min({Nc_Rd:.3f}, {Nb_flexural:.3f}, {Nb_ft:.3f}) "
        f"= {capacity:.3f} kN (governed by {mode})"
    )
    return AxialCapacityResult(capacity=capacity, governing_mode=mode)
