"""
model/stress.py — Stress Assessment from the Remote Model's Output
===================================================================

⚠️  DISCLAIMER: The score is produced by an externally hosted model and is a
    WELLNESS INDICATOR, not a validated clinical stress measure.

────────────────────────────────────────────────────────────────────────
What happens here
────────────────────────────────────────────────────────────────────────
The remote model returns either a sequence

    [prediction_text, gauge_chart, biomarker_chart]

or, occasionally, a bare string.  `interpret()` turns either into a
StressAssessment:

    score            integer 0–100 (text matchers, gauge override, default 50)
    level            Low (< 30) | Moderate (30–70) | High (> 70)
    recommendations  exactly three strings
    metrics          biomarker values normalised against their ranges

The two shapes normalise biomarkers differently:

    sequence   cortisol/20        amylase/200          iga/80
               sleep/12           (no clamping)
    text       min(cortisol/25,1) min(amylase/200,1)   clamp((50-iga)/30)
               clamp((8-sleep)/8)

Both formulas are kept as-is; changing either alters the reported
metrics for that response shape.
────────────────────────────────────────────────────────────────────────
"""

from typing import Any

from config import (
    DEFAULT_SCORE,
    RECOMMEND_HIGH,
    RECOMMEND_LOW,
    RECOMMEND_MODERATE,
    RECOMMEND_MONITORING,
    SEQUENCE_NORM_AMYLASE,
    SEQUENCE_NORM_CORTISOL,
    SEQUENCE_NORM_IGA,
    SEQUENCE_NORM_SLEEP,
    STRESS_HIGH_ABOVE,
    STRESS_LOW_BELOW,
    TEXT_NORM_AMYLASE,
    TEXT_NORM_CORTISOL,
    TEXT_NORM_IGA_PIVOT,
    TEXT_NORM_IGA_SPAN,
    TEXT_NORM_SLEEP_TARGET,
    TEXT_RECOMMEND_GENERIC,
    TEXT_RECOMMEND_MONITORING,
)
from model.payload import SequencePayload, TextPayload, classify_payload
from model.score import extract_score, finalize_score, first_number
from model.types import BiomarkerInput, NormalizedMetrics, StressAssessment, StressLevel
from utils.logger import get_logger

logger = get_logger("model.stress")


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


# ── Normalisation ─────────────────────────────────────────────────────────────

def sequence_metrics(data: BiomarkerInput) -> NormalizedMetrics:
    """Direct ratios; values outside the form ranges are passed through."""
    return NormalizedMetrics(
        cortisol=data.cortisol / SEQUENCE_NORM_CORTISOL,
        amylase=data.amylase / SEQUENCE_NORM_AMYLASE,
        iga=data.iga / SEQUENCE_NORM_IGA,
        sleep=data.sleep_hours / SEQUENCE_NORM_SLEEP,
    )


def text_metrics(data: BiomarkerInput) -> NormalizedMetrics:
    """Capped ratios; IgA and sleep are inverted (less of either → higher)."""
    return NormalizedMetrics(
        cortisol=min(data.cortisol / TEXT_NORM_CORTISOL, 1.0),
        amylase=min(data.amylase / TEXT_NORM_AMYLASE, 1.0),
        iga=_clamp01((TEXT_NORM_IGA_PIVOT - data.iga) / TEXT_NORM_IGA_SPAN),
        sleep=_clamp01((TEXT_NORM_SLEEP_TARGET - data.sleep_hours) / TEXT_NORM_SLEEP_TARGET),
    )


# ── Recommendations ───────────────────────────────────────────────────────────

def tier_recommendation(raw_score: float) -> str:
    """Advice for the unrounded score."""
    if raw_score > STRESS_HIGH_ABOVE:
        return RECOMMEND_HIGH
    if raw_score < STRESS_LOW_BELOW:
        return RECOMMEND_LOW
    return RECOMMEND_MODERATE


# ── Interpretation ────────────────────────────────────────────────────────────

def _from_sequence(payload: SequencePayload, data: BiomarkerInput) -> StressAssessment:
    raw_score = extract_score(payload.prediction_text, payload.gauge_chart)
    score = finalize_score(raw_score)

    if isinstance(payload.prediction_text, str):
        headline = payload.prediction_text
    else:
        headline = f"Stress probability: {raw_score:.1f}%"

    return StressAssessment(
        score=score,
        level=StressLevel.from_score(score),
        recommendations=(headline, tier_recommendation(raw_score), RECOMMEND_MONITORING),
        metrics=sequence_metrics(data),
        data=data,
    )


def _from_text(payload: TextPayload, data: BiomarkerInput) -> StressAssessment:
    raw_score = first_number(payload.text)
    score = finalize_score(DEFAULT_SCORE if raw_score is None else raw_score)

    return StressAssessment(
        score=score,
        level=StressLevel.from_score(score),
        recommendations=(payload.text, TEXT_RECOMMEND_GENERIC, TEXT_RECOMMEND_MONITORING),
        metrics=text_metrics(data),
        data=data,
    )


def interpret(payload: Any, data: BiomarkerInput) -> StressAssessment:
    """
    Convert the remote model's raw payload into a StressAssessment.

    Parameters
    ----------
    payload : Any             Whatever the model returned.
    data    : BiomarkerInput  The submission that produced it (echoed back).

    Raises
    ------
    ParseError  when the payload is neither a non-empty sequence nor a string.
    """
    shape = classify_payload(payload)

    if isinstance(shape, SequencePayload):
        result = _from_sequence(shape, data)
    else:
        logger.warning("Model returned a bare string; using text-response normalisation.")
        result = _from_text(shape, data)

    logger.info("Stress assessment: level=%s, score=%d", result.level.value, result.score)
    return result
