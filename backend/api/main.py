"""FastAPI application — EN 15512 upright design API."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from loguru import logger
from starlette.background import BackgroundTask

from upright import (
    InputValidationError,
    UprightDesignInput,
    calculate,
    configure_logging,
    example_input,
    generate_upright_report,
)

from .schemas import UprightDesignInputModel, UprightDesignResultsOutput

configure_logging()

app = FastAPI(title="Upright Design API", version="0.1.0")


def _cors_origins() -> list[str]:
    raw_origins = os.getenv("CORS_ORIGINS", "")
    parsed = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]

    if parsed == ["*"]:
        return ["*"]

    defaults = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    return [*defaults, *parsed]


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _to_design_input(data: UprightDesignInputModel) -> UprightDesignInput:
    try:
        return UprightDesignInput.from_dict(data.model_dump())
    except InputValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))


# ── Calculation ───────────────────────────────────────────────


@app.post("/api/calculate-upright", response_model=UprightDesignResultsOutput)
def calculate_upright(data: UprightDesignInputModel) -> UprightDesignResultsOutput:
    """Run the EN 15512 upright design check."""
    design_input = _to_design_input(data)
    try:
        results = calculate(design_input)
    except InputValidationError as e:
        logger.info("Rejected upright input: {}", e)
        raise HTTPException(status_code=422, detail=str(e))

    return UprightDesignResultsOutput(**results.to_dict())


@app.get("/api/load-upright-example", response_model=UprightDesignInputModel)
def load_upright_example() -> UprightDesignInputModel:
    """Return the worked example used to pre-fill the form."""
    return UprightDesignInputModel(**example_input().to_dict())


@app.get("/health")
def health() -> dict[str, str]:
    """Lightweight healthcheck for deployment platforms."""
    return {"status": "ok"}


# ── PDF report ────────────────────────────────────────────────


@app.post("/api/generate-report")
def generate_report(data: UprightDesignInputModel):
    """Run the design check and return the calculation report as a PDF."""
    design_input = _to_design_input(data)
    try:
        results = calculate(design_input)
    except InputValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    with tempfile.TemporaryDirectory() as tmp_dir:
        output_path = Path(tmp_dir) / "report.pdf"
        try:
            generate_upright_report(design_input, results, output_path)
        except Exception as e:
            logger.exception("Upright report generation failed")
            raise HTTPException(
                status_code=500,
                detail=f"Report generation failed: {e}",
            )

        if not output_path.exists():
            raise HTTPException(
                status_code=500,
                detail="Report generation failed: output file was not created",
            )

        named_tmp = tempfile.NamedTemporaryFile(suffix=".pdf", delete=False)
        final_path = Path(named_tmp.name)
        named_tmp.close()
        final_path.write_bytes(output_path.read_bytes())

    return FileResponse(
        path=str(final_path),
        media_type="application/pdf",
        filename="Upright_Design_Report.pdf",
        background=BackgroundTask(lambda: final_path.unlink(missing_ok=True)),
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "8000")))
