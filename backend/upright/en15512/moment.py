"""Bending resistance about both axes from the elastic section moduli."""

from __future__ import annotations

from ..inputs import MaterialProperties, SectionProperties
from ..results import MomentCapacityResult
from ..trace import CalcTrace


def moment_capacity(material: MaterialProperties, section: SectionProperties, trace: CalcTrace) -> MomentCapacityResult:
    # Section moduli are taken as given; any effective-width reduction is
    # expected to be in zXx / zYy already.
    fy = material.yield_strength
    gamma_M = material.material_factor

    Mx_Rd = section.z_xx * fy / gamma_M / 1e6  # kNm
    trace.add(
        f"Moment capacity: Mx,Rd = Zxx*fy/gM = {section.z_xx:.1f}*{fy:.1f}/{gamma_M:.2f}/1e6 = {Mx_Rd:.3f} kNm"
    )
    My_Rd = section.z_yy * fy / gamma_M / 1e6  # kNm
    trace.add(
        f"Moment capacity: My,Rd = Zyy*fy/gM = {section.z_yy:.1f}*{fy:.1f}/{gamma_M:.2f}/1e6 = {My_Rd:.3f} kNm"
    )
    return MomentCapacityResult(Mx_Rd_kNm=Mx_Rd, My_Rd_kNm=My_Rd)
