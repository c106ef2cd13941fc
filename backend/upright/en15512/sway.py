"""Serviceability sway check (SLS)."""

from __future__ import annotations

from ..inputs import ServiceabilityInputs
from ..results import SwayResult, status_of
from ..trace import CalcTrace
from .constants import CHECK_TOLERANCE, SWAY_DIVISOR


def sway_check(
    serviceability: ServiceabilityInputs,
    trace: CalcTrace,
    divisor: float = SWAY_DIVISOR,
    tolerance: float = CHECK_TOLERANCE,
) -> SwayResult:
    H = serviceability.total_upright_height
    induced = serviceability.max_induced_sway

    permissible = H / divisor
    trace.add(f"Sway: permissible = H/{divisor:g} = {H:.1f}/{divisor:g} = {permissible:.3f} mm")

    status = status_of(induced <= permissible + tolerance)
    trace.add(f"Sway: induced = {induced:.3f} mm <= {permissible:.3f} mm -> {status}")
    return SwayResult(permissible_sway=permissible, induced_sway=induced, status=status)
