"""Flexural buckling about the two principal axes."""

from __future__ import annotations

from ..inputs import EffectiveLengths, MaterialProperties, SectionProperties
from ..results import AxisBuckling, FlexuralBucklingResult
from ..trace import CalcTrace
from .constants import BucklingCurve
from .slenderness import (
    effective_length,
    euler_critical_load,
    non_dimensional_slenderness,
    reduction_factor,
)
from .yielding import squash_load_N


def axis_buckling(
    axis: str,
    k: float,
    L_mm: float,
    I_mm4: float,
    material: MaterialProperties,
    section: SectionProperties,
    curve: BucklingCurve,
    trace: CalcTrace,
) -> AxisBuckling:
    """Buckling resistance about a single axis, every intermediate traced."""
    E = material.elastic_modulus
    gamma_M = material.material_factor
    NRk = squash_load_N(material, section)  # N

    Le = effective_length(k, L_mm)
    trace.add(f"Flexural buckling ({axis}): Le,{axis} = k*L = {k:.3f}*{L_mm:.1f} = {Le:.1f} mm")

    Ncr = euler_critical_load(E, I_mm4, Le)  # N
    trace.value(f"Flexural buckling ({axis})", f"Ncr,{axis} = pi^2*E*I/Le^2", Ncr / 1e3, "kN")

    lambda_bar = non_dimensional_slenderness(NRk, Ncr)
    trace.value(f"Flexural buckling ({axis})", f"lambda_bar,{axis} = sqrt(Ag*fy/Ncr)", lambda_bar, fmt=".4f")

    Phi, chi = reduction_factor(lambda_bar, curve)
    trace.value(
        f"Flexural buckling ({axis})",
        f"phi,{axis} = 0.5*(1 + {curve.alpha:.2f}*(lambda_bar - {curve.lambda_0:.1f}) + lambda_bar^2)",
        Phi,
        fmt=".4f",
    )
    trace.value(f"Flexural buckling ({axis})", f"chi,{axis}", chi, fmt=".4f")

    Nb = chi * NRk / gamma_M / 1e3  # kN
    trace.value(f"Flexural buckling ({axis})", f"Nb,{axis} = chi*Ag*fy/gM", Nb, "kN")

    return AxisBuckling(
        axis=axis,
        Le_mm=Le,
        Ncr_kN=Ncr / 1e3,
        lambda_bar=lambda_bar,
        Phi=Phi,
        chi=chi,
        Nb_Rd_kN=Nb,
    )


def flexural_buckling(
    material: MaterialProperties,
    section: SectionProperties,
    lengths: EffectiveLengths,
    curve: BucklingCurve,
    trace: CalcTrace,
) -> FlexuralBucklingResult:
    """Design flexural buckling resistance: the lesser of the X and Y axes."""
    trace.note(f"Buckling curve '{curve.name}': alpha = {curve.alpha:.2f}, lambda_bar_0 = {curve.lambda_0:.1f}")

    x = axis_buckling(
        "x", lengths.eff_len_factor_x, lengths.unsupported_len_x, section.i_xx,
        material, section, curve, trace,
    )
    y = axis_buckling(
        "y", lengths.eff_len_factor_y, lengths.unsupported_len_y, section.i_yy,
        material, section, curve, trace,
    )

    result = FlexuralBucklingResult(capacity=min(x.Nb_Rd_kN, y.Nb_Rd_kN), x=x, y=y)
    trace.add(
        f"Flexural buckling: Nb,Rd = min(Nb,x, Nb,y) = {result.capacity:.3f} kN "
        f"(governs about {result.governing_axis})"
    )
    return result
