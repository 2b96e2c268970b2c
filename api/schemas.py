"""
api/schemas.py — Pydantic request & response models
=====================================================
Centralises all data-transfer objects so that FastAPI can auto-generate
OpenAPI docs and perform input validation for free.  Range checks for the
biomarker form live here; the domain records in model/types.py carry no
validation of their own.
"""

from pydantic import BaseModel, Field

from config import (
    AGE_RANGE,
    AMYLASE_RANGE,
    CORTISOL_RANGE,
    IGA_RANGE,
    NAME_MAX_LENGTH,
    SLEEP_RANGE,
)
from model.types import BiomarkerInput, StressAssessment


# ── Request Models ───────────────────────────────────────────────────────────


class BiomarkerRequest(BaseModel):
    """Form submission for one stress analysis."""
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Display name.")
    age: float = Field(AGE_RANGE[3], ge=AGE_RANGE[0], le=AGE_RANGE[1], description="Age in years.")
    cortisol: float = Field(
        CORTISOL_RANGE[3], ge=CORTISOL_RANGE[0], le=CORTISOL_RANGE[1],
        description="Salivary cortisol (μg/dL).",
    )
    amylase: float = Field(
        AMYLASE_RANGE[3], ge=AMYLASE_RANGE[0], le=AMYLASE_RANGE[1],
        description="Alpha-amylase activity (U/L).",
    )
    iga: float = Field(IGA_RANGE[3], ge=IGA_RANGE[0], le=IGA_RANGE[1], description="IgA (mg/dL).")
    sleep_hours: float = Field(
        SLEEP_RANGE[3], ge=SLEEP_RANGE[0], le=SLEEP_RANGE[1],
        description="Hours slept last night.",
    )

    def to_input(self) -> BiomarkerInput:
        return BiomarkerInput(
            name=self.name,
            age=self.age,
            cortisol=self.cortisol,
            amylase=self.amylase,
            iga=self.iga,
            sleep_hours=self.sleep_hours,
        )


# ── Response Models ──────────────────────────────────────────────────────────


class MetricsData(BaseModel):
    cortisol: float
    amylase: float
    iga: float
    sleep: float


class StressAssessmentResponse(BaseModel):
    """Full assessment, with the submitted values echoed back."""
    score: int
    level: str                       # "Low" | "Moderate" | "High"
    summary: str
    recommendations: list[str]
    metrics: MetricsData
    name: str
    age: float
    cortisol: float
    amylase: float
    iga: float
    sleep_hours: float

    @classmethod
    def from_assessment(cls, assessment: StressAssessment) -> "StressAssessmentResponse":
        return cls(**assessment.to_dict())


class BiomarkerInfo(BaseModel):
    field: str
    label: str
    unit: str
    min: float
    max: float
    step: float
    default: float
    description: str
