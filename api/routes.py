"""
api/routes.py — FastAPI route definitions
==========================================
All HTTP endpoints are defined here and wired into the app via
`app.include_router(router)` in `api/app.py`.

Endpoint summary
----------------
    GET  /health              — Liveness probe
    GET  /biomarkers          — Input ranges, units & defaults for the form
    POST /analyze             — Submit biomarkers, return the stress assessment
    GET  /docs                — Auto-generated Swagger UI (FastAPI built-in)
"""

from fastapi import APIRouter, Depends, HTTPException

from api.schemas import BiomarkerInfo, BiomarkerRequest, StressAssessmentResponse
from config import AGE_RANGE, AMYLASE_RANGE, CORTISOL_RANGE, IGA_RANGE, SLEEP_RANGE
from errors import InferenceError, ParseError
from inference.client import StressDetectorClient, analyze_stress
from utils.logger import get_logger

logger = get_logger("api.routes")

router = APIRouter()

_BIOMARKERS = (
    ("age", "Age", "years", AGE_RANGE, "Age of the person being assessed"),
    ("cortisol", "Cortisol", "μg/dL", CORTISOL_RANGE, "Primary stress hormone"),
    ("amylase", "Alpha Amylase", "U/L", AMYLASE_RANGE, "Enzyme activity indicator"),
    ("iga", "IgA", "mg/dL", IGA_RANGE, "Immune system marker"),
    ("sleep_hours", "Sleep Hours", "hours", SLEEP_RANGE, "Nightly sleep duration"),
)


def get_detector_client() -> StressDetectorClient:
    """One client per request; overridden in tests."""
    return StressDetectorClient()


# ── Health ────────────────────────────────────────────────────────────────────

@router.get("/health")
async def health():
    """Simple liveness check."""
    return {"status": "ok", "service": "Biomarker Stress Analyzer"}


# ── Form reference ────────────────────────────────────────────────────────────

@router.get("/biomarkers")
async def biomarkers() -> list[BiomarkerInfo]:
    """Ranges, units and defaults the presentation layer uses to build its form."""
    return [
        BiomarkerInfo(
            field=field,
            label=label,
            unit=unit,
            min=low,
            max=high,
            step=step,
            default=default,
            description=description,
        )
        for field, label, unit, (low, high, step, default), description in _BIOMARKERS
    ]


# ── Analysis ──────────────────────────────────────────────────────────────────

@router.post("/analyze")
async def analyze(
    request: BiomarkerRequest,
    client: StressDetectorClient = Depends(get_detector_client),
) -> StressAssessmentResponse:
    """
    Send the biomarkers to the remote stress model and return its assessment.

    Returns 502 if the model cannot be reached or its answer cannot be read,
    or 422 if the body fails validation.
    """
    logger.info("Analysis requested for %s.", request.name)
    try:
        assessment = await analyze_stress(request.to_input(), client)
    except ParseError as exc:
        logger.error("Unreadable model response: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except InferenceError as exc:
        logger.error("Stress model call failed: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return StressAssessmentResponse.from_assessment(assessment)
