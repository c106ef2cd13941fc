"""Demo: IKEA Pune B200 upright — EN 15512 design check + PDF report."""

from upright import calculate, configure_logging, example_input, generate_upright_report


def main():
    configure_logging()

    # ── Design check ──────────────────────────────────────────────
    design_input = example_input()
    results = calculate(design_input)

    for line in results.calculation_steps:
        print(line)

    ic = results.interaction_check
    sw = results.sway_check
    print()
    print(f"  N_design      = {results.design_axial_capacity:.2f} kN ({results.governing_mode})")
    print(f"  Interaction   = {ic.total_ratio:.3f}  {ic.status}")
    print(f"  Sway          = {sw.induced_sway:.2f} / {sw.permissible_sway:.2f} mm  {sw.status}")
    print(f"  Upright       : {results.final_status}")

    # ── Report ────────────────────────────────────────────────────
    path = generate_upright_report(design_input, results, "output/upright_report.pdf")
    print(f"  Saved: {path}")


if __name__ == "__main__":
    main()
