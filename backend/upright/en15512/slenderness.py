"""Shared slenderness and buckling-curve math (Ayrton-Perry form)."""

from __future__ import annotations

import math

from .constants import BucklingCurve


def effective_length(k: float, length_mm: float) -> float:
    return k * length_mm


def euler_critical_load(E: float, I_mm4: float, Le_mm: float) -> float:
    """Elastic critical load pi^2 E I / Le^2 in N. Infinite for Le = 0."""
    if Le_mm <= 0.0:
        return math.inf
    return math.pi ** 2 * E * I_mm4 / Le_mm ** 2


def non_dimensional_slenderness(squash_load_N: float, Ncr_N: float) -> float:
    """lambda_bar = sqrt(Ag fy / Ncr).

    An infinite Ncr gives 0 (no buckling); a non-positive Ncr gives infinity
    (no buckling resistance).
    """
    if math.isinf(Ncr_N):
        return 0.0
    if Ncr_N <= 0.0:
        return math.inf
    return math.sqrt(squash_load_N / Ncr_N)


def reduction_factor(lambda_bar: float, curve: BucklingCurve) -> tuple[float, float]:
    """Return (Phi, chi) for the given slenderness on the given curve.

    chi is clamped to 1.0 and is exactly 1.0 at zero slenderness.
    """
    if lambda_bar == 0.0:
        return 0.5 * (1 + curve.alpha * (0.0 - curve.lambda_0)), 1.0
    if math.isinf(lambda_bar):
        return math.inf, 0.0

    Phi = 0.5 * (1 + curve.alpha * (lambda_bar - curve.lambda_0) + lambda_bar ** 2)
    disc = Phi ** 2 - lambda_bar ** 2
    if disc > 0:
        chi = 1.0 / (Phi + math.sqrt(disc))
    else:
        chi = 1.0
    return Phi, min(chi, 1.0)
