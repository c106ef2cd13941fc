"""upright — EN 15512 design checks for cold-formed rack uprights."""

from .en15512 import DEFAULT_CONSTANTS, DesignConstants, generate_upright_report, render_report_source
from .engine import calculate
from .errors import DomainError, InputValidationError
from .examples import example_input
from .inputs import (
    AppliedLoads,
    EffectiveLengths,
    MaterialProperties,
    SectionGeometry,
    SectionProperties,
    ServiceabilityInputs,
    UprightDesignInput,
    validate_input,
)
from .log import configure_logging
from .results import (
    FAIL,
    PASS,
    FlexuralBucklingResult,
    FlexuralTorsionalBucklingResult,
    InteractionResult,
    SwayResult,
    UprightDesignResults,
)
from .trace import CalcTrace

__all__ = [
    "AppliedLoads",
    "CalcTrace",
    "DEFAULT_CONSTANTS",
    "DesignConstants",
    "DomainError",
    "EffectiveLengths",
    "FAIL",
    "FlexuralBucklingResult",
    "FlexuralTorsionalBucklingResult",
    "InputValidationError",
    "InteractionResult",
    "MaterialProperties",
    "PASS",
    "SectionGeometry",
    "SectionProperties",
    "ServiceabilityInputs",
    "SwayResult",
    "UprightDesignInput",
    "UprightDesignResults",
    "calculate",
    "configure_logging",
    "example_input",
    "generate_upright_report",
    "render_report_source",
    "validate_input",
]
