"""Combined axial + bi-axial bending check (ULS).

    N/N_design + |Mx|/Mx,Rd + (|My| + |N*ex|)/My,Rd <= 1.0

An axial load applied at an eccentricity ex along the x direction adds a
moment N*ex about the y axis, carried in the My term.

A ratio against a zero or negative capacity is a domain error. The check
does not stop there: the offending term is reported as 0, the error is
written to the trace and the verdict is forced to FAIL.
"""

from __future__ import annotations

import math

from loguru import logger

from ..errors import DomainError
from ..inputs import AppliedLoads
from ..results import FAIL, InteractionResult, status_of
from ..trace import CalcTrace
from .constants import CHECK_TOLERANCE


def demand_ratio(term: str, demand: float, capacity: float) -> float:
    if not math.isfinite(capacity) or capacity <= 0.0:
        raise DomainError(term, capacity)
    return demand / capacity


def eccentricity_moment(loads: AppliedLoads) -> float:
    """Moment from the eccentric axial load, N*ex in kNm."""
    return abs(loads.axial_force * loads.load_eccentricity_x) / 1e3


def interaction_check(
    loads: AppliedLoads,
    N_design: float,
    Mx_Rd: float,
    My_Rd: float,
    trace: CalcTrace,
    tolerance: float = CHECK_TOLERANCE,
) -> InteractionResult:
    errors: list[str] = []

    def _term(term: str, symbol: str, demand: float, capacity: float, units: str) -> float:
        try:
            ratio = demand_ratio(term, demand, capacity)
        except DomainError as e:
            errors.append(str(e))
            trace.note(f"DOMAIN ERROR in {symbol}: {e}; term set to 0 and check marked FAIL")
            logger.error("Interaction check domain error: {}", e)
            return 0.0
        trace.add(f"Interaction: {symbol} = {demand:.3f}/{capacity:.3f} {units} = {ratio:.4f}")
        return ratio

    M_ecc = eccentricity_moment(loads)
    My_Ed = abs(loads.moment_my) + M_ecc
    if M_ecc > 0.0:
        trace.add(
            f"Interaction: M,ecc = N*ex = {loads.axial_force:.3f}*{abs(loads.load_eccentricity_x):.1f}/1000 "
            f"= {M_ecc:.3f} kNm; My,Ed = |My| + M,ecc = {My_Ed:.3f} kNm"
        )

    uN = _term("axial term", "uN = N/N_design", loads.axial_force, N_design, "kN")
    uMx = _term("moment X term", "uMx = Mx/Mx,Rd", abs(loads.moment_mx), Mx_Rd, "kNm")
    uMy = _term("moment Y term", "uMy = My,Ed/My,Rd", My_Ed, My_Rd, "kNm")

    total = uN + uMx + uMy
    status = FAIL if errors else status_of(total <= 1.0 + tolerance)
    trace.add(f"Interaction: total = uN + uMx + uMy = {total:.4f} <= 1.0 -> {status}")

    return InteractionResult(
        axial_term=uN,
        moment_x_term=uMx,
        moment_y_term=uMy,
        total_ratio=total,
        status=status,
        errors=tuple(errors),
    )
