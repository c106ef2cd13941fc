"""EN 15512 upright member checks and reporting."""

from .axial import design_axial_capacity
from .constants import CONSTANTS_VERSION, DEFAULT_CONSTANTS, BucklingCurve, DesignConstants, buckling_curve
from .flexural import axis_buckling, flexural_buckling
from .interaction import demand_ratio, interaction_check
from .moment import moment_capacity
from .report import generate_upright_report, render_report_source
from .sway import sway_check
from .torsional import flexural_torsional_buckling, flexural_torsional_critical_load
from .yielding import yielding_capacity

__all__ = [
    "BucklingCurve",
    "CONSTANTS_VERSION",
    "DEFAULT_CONSTANTS",
    "DesignConstants",
    "axis_buckling",
    "buckling_curve",
    "demand_ratio",
    "design_axial_capacity",
    "flexural_buckling",
    "flexural_torsional_buckling",
    "flexural_torsional_critical_load",
    "generate_upright_report",
    "interaction_check",
    "moment_capacity",
    "render_report_source",
    "sway_check",
    "yielding_capacity",
]
