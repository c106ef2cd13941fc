"""Cross-section (squash load) resistance."""

from __future__ import annotations

from ..inputs import MaterialProperties, SectionProperties
from ..trace import CalcTrace


def squash_load_N(material: MaterialProperties, section: SectionProperties) -> float:
    """Characteristic squash load Ag * fy in N."""
    return section.gross_area * material.yield_strength


def yielding_capacity(material: MaterialProperties, section: SectionProperties, trace: CalcTrace) -> float:
    """Nc,Rd = Ag * fy / gamma_M, in kN."""
    Ag = section.gross_area
    fy = material.yield_strength
    gamma_M = material.material_factor

    Nc_Rd = Ag * fy / gamma_M / 1e3  # kN
    trace.add(
        f"Yielding: Nc,Rd = Ag*fy/gM = {Ag:.1f}*{fy:.1f}/{gamma_M:.2f}/1000 = {Nc_Rd:.3f} kN"
    )
    return Nc_Rd
