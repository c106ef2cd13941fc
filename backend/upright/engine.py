"""Upright design check: runs every EN 15512 calculator in order.

Usage::

    from upright import calculate, example_input

    results = calculate(example_input())
    print(results.final_status)
    for line in results.calculation_steps:
        print(line)
"""

from __future__ import annotations

from loguru import logger

from .en15512.axial import design_axial_capacity
from .en15512.constants import DEFAULT_CONSTANTS, DesignConstants
from .en15512.flexural import flexural_buckling
from .en15512.interaction import interaction_check
from .en15512.moment import moment_capacity
from .en15512.sway import sway_check
from .en15512.torsional import flexural_torsional_buckling
from .en15512.yielding import yielding_capacity
from .inputs import UprightDesignInput, validate_input
from .results import PASS, UprightDesignResults, status_of
from .trace import CalcTrace


def calculate(
    design_input: UprightDesignInput,
    constants: DesignConstants = DEFAULT_CONSTANTS,
) -> UprightDesignResults:
    """Run the full upright design check and return the results.

    Inputs are validated first; an :class:`~upright.errors.InputValidationError`
    is raised before anything is computed. The function is pure: the same
    input always gives the same result, trace included.
    """
    validate_input(design_input)

    m = design_input.material
    sp = design_input.section_properties
    lengths = design_input.effective_lengths
    loads = design_input.applied_loads
    trace = CalcTrace()

    trace.note(f"Design constants {constants.version}")
    trace.add(
        f"Material: fy = {m.yield_strength:.1f} N/mm^2, E = {m.elastic_modulus:.0f} N/mm^2, "
        f"G = {m.shear_modulus:.0f} N/mm^2, gM = {m.material_factor:.2f}"
    )
    trace.add(
        f"Applied loads: N = {loads.axial_force:.3f} kN, Mx = {loads.moment_mx:.3f} kNm, "
        f"My = {loads.moment_my:.3f} kNm"
    )
    if loads.load_eccentricity_x != 0.0:
        trace.add(f"Applied loads: load eccentricity ex = {loads.load_eccentricity_x:.1f} mm")

    trace.section("Yielding")
    Nc_Rd = yielding_capacity(m, sp, trace)

    trace.section("Flexural buckling")
    flexural = flexural_buckling(m, sp, lengths, constants.flexural_curve, trace)

    trace.section("Flexural-torsional buckling")
    torsional = flexural_torsional_buckling(m, sp, lengths, constants.torsional_curve, trace)

    trace.section("Moment capacity")
    moments = moment_capacity(m, sp, trace)

    trace.section("Axial capacity")
    axial = design_axial_capacity(Nc_Rd, flexural.capacity, torsional.capacity, trace)

    trace.section("Interaction check (ULS)")
    interaction = interaction_check(
        loads, axial.capacity, moments.Mx_Rd_kNm, moments.My_Rd_kNm, trace, constants.tolerance
    )

    trace.section("Sway check (SLS)")
    sway = sway_check(design_input.serviceability, trace, constants.sway_divisor, constants.tolerance)

    final_status = status_of(interaction.status == PASS and sway.status == PASS)
    trace.add(
        f"Final status: interaction {interaction.status}, sway {sway.status} -> {final_status}"
    )

    logger.info(
        "Upright check {}: N_design = {:.3f} kN ({}), interaction = {:.3f}, sway {}",
        final_status,
        axial.capacity,
        axial.governing_mode,
        interaction.total_ratio,
        sway.status,
    )

    return UprightDesignResults(
        yielding_capacity=Nc_Rd,
        flexural_buckling=flexural,
        torsional_buckling=torsional,
        moment_capacity_x=moments.Mx_Rd_kNm,
        moment_capacity_y=moments.My_Rd_kNm,
        design_axial_capacity=axial.capacity,
        governing_mode=axial.governing_mode,
        interaction_check=interaction,
        sway_check=sway,
        final_status=final_status,
        calculation_steps=trace.snapshot(),
        constants_version=constants.version,
    )
