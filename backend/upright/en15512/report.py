"""Generate a PDF calculation report for an upright design check."""

from __future__ import annotations

import re
import subprocess
import tempfile
from pathlib import Path
from typing import Any, Mapping

import jinja2
from loguru import logger

from ..inputs import UprightDesignInput
from ..results import UprightDesignResults

_TEMPLATE_DIR = Path(__file__).parent / "templates"
_TEMPLATE_NAME = "upright_report.tex.j2"

_LATEX_SPECIAL = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
    "<": r"\textless{}",
    ">": r"\textgreater{}",
}
_LATEX_RE = re.compile("|".join(re.escape(k) for k in _LATEX_SPECIAL))


def latex_escape(value: Any) -> str:
    """Escape a value for use as LaTeX body text."""
    return _LATEX_RE.sub(lambda m: _LATEX_SPECIAL[m.group()], str(value))


def _make_env() -> jinja2.Environment:
    """Jinja2 environment with LaTeX-safe delimiters."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
        block_start_string=r"\BLOCK{",
        block_end_string="}",
        variable_start_string=r"\VAR{",
        variable_end_string="}",
        comment_start_string=r"\#{",
        comment_end_string="}",
        line_statement_prefix="%%",
        line_comment_prefix="%#",
        trim_blocks=True,
        lstrip_blocks=True,
        autoescape=False,
    )
    env.filters["tex"] = latex_escape
    return env


def _template_vars(design_input: UprightDesignInput, r: UprightDesignResults) -> dict:
    """Build the flat dict of template variables from the input and results."""
    m = design_input.material
    sp = design_input.section_properties
    el = design_input.effective_lengths
    loads = design_input.applied_loads
    sls = design_input.serviceability
    fb = r.flexural_buckling
    ft = r.torsional_buckling
    ic = r.interaction_check
    sw = r.sway_check

    fmt1 = lambda v: f"{v:.1f}"
    fmt2 = lambda v: f"{v:.2f}"
    fmt3 = lambda v: f"{v:.3f}"
    fmt4 = lambda v: f"{v:.4f}"

    return dict(
        # Material
        fy=f"{m.yield_strength:.0f}",
        fu=f"{m.ultimate_strength:.0f}",
        E=f"{m.elastic_modulus:.0f}",
        G=f"{m.shear_modulus:.0f}",
        gamma_M=fmt2(m.material_factor),

        # Section properties
        Ag=fmt1(sp.gross_area),
        Ixx=f"{sp.i_xx:.4g}",
        Iyy=f"{sp.i_yy:.4g}",
        Zxx=fmt1(sp.z_xx),
        Zyy=fmt1(sp.z_yy),
        Cw=f"{sp.warping_constant:.4g}",
        J=fmt1(sp.torsion_constant),
        x0=fmt1(sp.ex),
        rx=fmt2(sp.radius_gyration_x),
        ry=fmt2(sp.radius_gyration_y),

        # Lengths
        Lx=fmt1(el.unsupported_len_x),
        Ly=fmt1(el.unsupported_len_y),
        Lt=fmt1(el.unsupported_len_torsion),
        kx=fmt2(el.eff_len_factor_x),
        ky=fmt2(el.eff_len_factor_y),
        kt=fmt2(el.eff_len_factor_torsion),

        # Loads
        NEd=fmt3(loads.axial_force),
        Mx=fmt3(loads.moment_mx),
        My=fmt3(loads.moment_my),

        # Yielding
        Nc_Rd=fmt2(r.yielding_capacity),

        # Flexural buckling
        Ncr_x=fmt2(fb.x.Ncr_kN),
        Ncr_y=fmt2(fb.y.Ncr_kN),
        lambda_x=fmt4(fb.x.lambda_bar),
        lambda_y=fmt4(fb.y.lambda_bar),
        Phi_x=fmt4(fb.x.Phi),
        Phi_y=fmt4(fb.y.Phi),
        chi_x=fmt4(fb.x.chi),
        chi_y=fmt4(fb.y.chi),
        Nb_x=fmt2(fb.x.Nb_Rd_kN),
        Nb_y=fmt2(fb.y.Nb_Rd_kN),
        Nb_flex=fmt2(fb.capacity),

        # Flexural-torsional buckling
        i0_sq=fmt1(ft.i0_sq_mm2),
        beta=fmt4(ft.beta),
        Ncr_t=fmt2(ft.Ncr_t_kN),
        Ncr_ft=fmt2(ft.Ncr_ft_kN),
        lambda_ft=fmt4(ft.lambda_bar),
        chi_ft=fmt4(ft.chi),
        Nb_ft=fmt2(ft.capacity),
        ft_fallback=ft.fallback,

        # Moments and axial
        Mx_Rd=fmt3(r.moment_capacity_x),
        My_Rd=fmt3(r.moment_capacity_y),
        N_design=fmt2(r.design_axial_capacity),
        governing_mode=r.governing_mode,

        # Interaction
        uN=fmt4(ic.axial_term),
        uMx=fmt4(ic.moment_x_term),
        uMy=fmt4(ic.moment_y_term),
        total_ratio=fmt4(ic.total_ratio),
        interaction_ok=ic.status == "PASS",
        interaction_errors=list(ic.errors),

        # Sway
        H=fmt1(sls.total_upright_height),
        sway_allow=fmt3(sw.permissible_sway),
        sway_induced=fmt3(sw.induced_sway),
        sway_ok=sw.status == "PASS",

        # Overall
        overall_ok=r.final_status == "PASS",
        constants_version=r.constants_version,
        steps=list(r.calculation_steps),
    )


def render_report_source(
    design_input: UprightDesignInput,
    results: UprightDesignResults,
    project_info: Mapping[str, Any] | None = None,
) -> str:
    """Render the LaTeX source of the report.

    ``project_info`` defaults to ``design_input.project_info``; only
    ``project_name``, ``client``, ``job_no`` and ``calcs_by`` are shown.
    """
    info = dict(project_info if project_info is not None else (design_input.project_info or {}))
    tvars = _template_vars(design_input, results)
    tvars.update(
        project_name=str(info.get("project_name", "")),
        client=str(info.get("client", "")),
        job_no=str(info.get("job_no", "")),
        calcs_by=str(info.get("calcs_by", "")),
    )
    return _make_env().get_template(_TEMPLATE_NAME).render(**tvars)


def generate_upright_report(
    design_input: UprightDesignInput,
    results: UprightDesignResults,
    output_path: str | Path,
    *,
    project_info: Mapping[str, Any] | None = None,
) -> Path:
    """Render the LaTeX template and compile to PDF.

    Parameters
    ----------
    design_input : UprightDesignInput
        The input record the results were calculated from.
    results : UprightDesignResults
        Output of :func:`upright.calculate` for ``design_input``.
    output_path : str or Path
        Destination for the PDF.
    project_info : mapping, optional
        Header fields; defaults to ``design_input.project_info``.

    Returns
    -------
    Path
        Absolute path to the generated PDF.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    tex_source = render_report_source(design_input, results, project_info)

    with tempfile.TemporaryDirectory() as tmp:
        tex_file = Path(tmp) / "report.tex"
        tex_file.write_text(tex_source, encoding="utf-8")

        # Run pdflatex twice for cross-references
        for _ in range(2):
            result = subprocess.run(
                ["pdflatex", "-interaction=nonstopmode", "-halt-on-error", "report.tex"],
                cwd=tmp,
                capture_output=True,
                text=True,
                timeout=60,
            )
            if result.returncode != 0:
                # Write the .tex for debugging
                debug_tex = output_path.with_suffix(".tex")
                debug_tex.write_text(tex_source, encoding="utf-8")
                raise RuntimeError(
                    f"pdflatex failed (see {debug_tex} for source).\n"
                    f"stderr: {result.stderr[-500:]}\n"
                    f"stdout: {result.stdout[-500:]}"
                )

        pdf_src = Path(tmp) / "report.pdf"
        output_path.write_bytes(pdf_src.read_bytes())

    logger.info("Saved upright report: {}", output_path)
    return output_path.resolve()
