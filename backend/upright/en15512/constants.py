"""Engine constants for EN 15512 upright checks.

These are not part of the input contract. They are fixed for the lifetime of
the process and the version string is written into every calculation trace.
"""

from __future__ import annotations

from dataclasses import dataclass

CONSTANTS_VERSION = "EN15512-upright/1.0"

# Flexural buckling imperfection factors (EN 1993-1-1 Table 6.1)
_ALPHA_FLEX = {"a0": 0.13, "a": 0.21, "b": 0.34, "c": 0.49, "d": 0.76}

# Plateau slenderness of the buckling curves
LAMBDA_BAR_0 = 0.2

SWAY_DIVISOR = 200.0     # permissible sway = H / 200
CHECK_TOLERANCE = 1e-9   # utilisation of exactly 1.0 passes


@dataclass(frozen=True)
class BucklingCurve:
    name: str
    alpha: float
    lambda_0: float = LAMBDA_BAR_0


def buckling_curve(name: str) -> BucklingCurve:
    if name not in _ALPHA_FLEX:
        raise ValueError(f"Unknown buckling curve '{name}'. Use a0/a/b/c/d.")
    return BucklingCurve(name=name, alpha=_ALPHA_FLEX[name])


@dataclass(frozen=True)
class DesignConstants:
    # Cold-formed open upright sections are checked on curve b (EN 15512 §9.7.4)
    flexural_curve: BucklingCurve = buckling_curve("b")
    torsional_curve: BucklingCurve = buckling_curve("b")
    sway_divisor: float = SWAY_DIVISOR
    tolerance: float = CHECK_TOLERANCE
    version: str = CONSTANTS_VERSION


DEFAULT_CONSTANTS = DesignConstants()
