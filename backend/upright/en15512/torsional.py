"""Torsional and flexural-torsional buckling of mono-symmetric uprights.

Open sections whose shear centre is offset from the centroid buckle in a
coupled flexural-torsional mode. For a section with shear-centre offset x0
the elastic critical load is the smaller positive root of

    (Ncr,y - N)(Ncr,t - N) - N^2 (x0/i0)^2 = 0

i.e. beta*N^2 - (Ncr,y + Ncr,t)*N + Ncr,y*Ncr,t = 0 with beta = 1 - (x0/i0)^2.
"""

from __future__ import annotations

import math

from loguru import logger

from ..inputs import EffectiveLengths, MaterialProperties, SectionProperties
from ..results import FlexuralTorsionalBucklingResult
from ..trace import CalcTrace
from .constants import BucklingCurve
from .slenderness import (
    effective_length,
    euler_critical_load,
    non_dimensional_slenderness,
    reduction_factor,
)
from .yielding import squash_load_N


def polar_radius_of_gyration_sq(section: SectionProperties) -> float:
    """i0^2 = rx^2 + ry^2 + x0^2 about the shear centre, mm²."""
    return section.radius_gyration_x ** 2 + section.radius_gyration_y ** 2 + section.ex ** 2


def torsional_critical_load(
    material: MaterialProperties, section: SectionProperties, Le_t_mm: float, i0_sq: float
) -> float:
    """Ncr,t = (G*J + pi^2*E*Cw/Le,t^2) / i0^2 in N."""
    G = material.shear_modulus
    E = material.elastic_modulus
    J = section.torsion_constant
    Cw = section.warping_constant
    if Le_t_mm <= 0.0:
        return math.inf
    return (G * J + math.pi ** 2 * E * Cw / Le_t_mm ** 2) / i0_sq


def flexural_torsional_critical_load(
    Ncr_y: float, Ncr_t: float, coupling: float, trace: CalcTrace
) -> tuple[float, bool]:
    """Solve the coupling equation for Ncr,ft.

    ``coupling`` is (x0/i0)^2. Returns (Ncr_ft, fallback) where ``fallback``
    is True when no valid root exists and min(Ncr,y, Ncr,t) was used instead.
    Forces are in whatever unit the inputs use.
    """
    a = 1.0 - coupling
    b = -(Ncr_y + Ncr_t)
    c = Ncr_y * Ncr_t

    if abs(a) < 1e-12:
        # x0 = i0: the quadratic term vanishes
        root = c / -b if b < 0 else 0.0
        if root > 0:
            trace.add("Flexural-torsional: beta = 0, linear root Ncr,ft = Ncr,y*Ncr,t/(Ncr,y + Ncr,t)")
            return root, False
        return _fallback(Ncr_y, Ncr_t, "linear root is not positive", trace), True

    disc = b ** 2 - 4 * a * c
    trace.value("Flexural-torsional", "discriminant = (Ncr,y + Ncr,t)^2 - 4*beta*Ncr,y*Ncr,t", disc, fmt=".6g")
    if disc < 0:
        return _fallback(Ncr_y, Ncr_t, f"negative discriminant ({disc:.6g})", trace), True

    # Cancellation-free form of the quadratic formula
    q = -0.5 * (b + math.copysign(math.sqrt(disc), b))
    if q == 0.0:
        return _fallback(Ncr_y, Ncr_t, "both roots are zero", trace), True
    roots = sorted((q / a, c / q))
    trace.add(f"Flexural-torsional: roots N1 = {roots[0]:.6g}, N2 = {roots[1]:.6g}")

    positive = [r for r in roots if r > 0]
    if not positive:
        return _fallback(Ncr_y, Ncr_t, "no positive root", trace), True
    return positive[0], False


def _fallback(Ncr_y: float, Ncr_t: float, reason: str, trace: CalcTrace) -> float:
    Ncr_ft = min(Ncr_y, Ncr_t)
    trace.note(
        f"Flexural-torsional coupling solve failed ({reason}); "
        f"FALLBACK Ncr,ft = min(Ncr,y, Ncr,t) = {Ncr_ft:.6g}"
    )
    logger.warning("Flexural-torsional coupling fallback: {}", reason)
    return Ncr_ft


def flexural_torsional_buckling(
    material: MaterialProperties,
    section: SectionProperties,
    lengths: EffectiveLengths,
    curve: BucklingCurve,
    trace: CalcTrace,
) -> FlexuralTorsionalBucklingResult:
    E = material.elastic_modulus
    gamma_M = material.material_factor
    NRk = squash_load_N(material, section)  # N
    x0 = section.ex

    Le_t = effective_length(lengths.eff_len_factor_torsion, lengths.unsupported_len_torsion)
    trace.add(
        f"Flexural-torsional: Le,t = kt*Lt = {lengths.eff_len_factor_torsion:.3f}"
        f"*{lengths.unsupported_len_torsion:.1f} = {Le_t:.1f} mm"
    )

    i0_sq = polar_radius_of_gyration_sq(section)
    trace.add(
        f"Flexural-torsional: i0^2 = rx^2 + ry^2 + x0^2 = {section.radius_gyration_x:.2f}^2 + "
        f"{section.radius_gyration_y:.2f}^2 + ({x0:.2f})^2 = {i0_sq:.2f} mm^2"
    )

    Ncr_t = torsional_critical_load(material, section, Le_t, i0_sq)  # N
    trace.value("Flexural-torsional", "Ncr,t = (G*J + pi^2*E*Cw/Le,t^2)/i0^2", Ncr_t / 1e3, "kN")

    Le_y = effective_length(lengths.eff_len_factor_y, lengths.unsupported_len_y)
    Ncr_y = euler_critical_load(E, section.i_yy, Le_y)  # N
    trace.value("Flexural-torsional", "Ncr,y = pi^2*E*Iyy/Le,y^2", Ncr_y / 1e3, "kN")

    coupling = x0 ** 2 / i0_sq
    beta = 1.0 - coupling
    trace.value("Flexural-torsional", "beta = 1 - (x0/i0)^2", beta, fmt=".4f")

    if math.isinf(Ncr_y) or math.isinf(Ncr_t):
        Ncr_ft = min(Ncr_y, Ncr_t)
        fallback = False
        trace.note("Infinite critical load in coupling; Ncr,ft = min(Ncr,y, Ncr,t)")
    else:
        Ncr_ft, fallback = flexural_torsional_critical_load(Ncr_y / 1e3, Ncr_t / 1e3, coupling, trace)
        Ncr_ft *= 1e3  # back to N
    trace.value("Flexural-torsional", "Ncr,ft", Ncr_ft / 1e3, "kN")

    lambda_bar = non_dimensional_slenderness(NRk, Ncr_ft)
    trace.value("Flexural-torsional", "lambda_bar,ft = sqrt(Ag*fy/Ncr,ft)", lambda_bar, fmt=".4f")

    Phi, chi = reduction_factor(lambda_bar, curve)
    trace.value("Flexural-torsional", "phi,ft", Phi, fmt=".4f")
    trace.value("Flexural-torsional", "chi,ft", chi, fmt=".4f")

    Nb_ft = chi * NRk / gamma_M / 1e3  # kN
    trace.value("Flexural-torsional", "Nb,ft = chi,ft*Ag*fy/gM", Nb_ft, "kN")

    return FlexuralTorsionalBucklingResult(
        capacity=Nb_ft,
        Le_t_mm=Le_t,
        i0_sq_mm2=i0_sq,
        beta=beta,
        Ncr_y_kN=Ncr_y / 1e3,
        Ncr_t_kN=Ncr_t / 1e3,
        Ncr_ft_kN=Ncr_ft / 1e3,
        lambda_bar=lambda_bar,
        Phi=Phi,
        chi=chi,
        fallback=fallback,
    )
