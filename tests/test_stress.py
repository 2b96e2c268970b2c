from __future__ import annotations

import pytest

from config import RECOMMEND_HIGH, RECOMMEND_LOW, RECOMMEND_MODERATE, RECOMMEND_MONITORING
from errors import InferenceError, ParseError
from model.payload import SequencePayload, TextPayload, classify_payload
from model.stress import interpret, sequence_metrics, text_metrics, tier_recommendation
from model.types import BiomarkerInput, StressLevel

pytestmark = pytest.mark.unit


# ── Level thresholds ──────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "score, level",
    [
        (0, StressLevel.LOW),
        (29, StressLevel.LOW),
        (30, StressLevel.MODERATE),
        (50, StressLevel.MODERATE),
        (70, StressLevel.MODERATE),
        (71, StressLevel.HIGH),
        (100, StressLevel.HIGH),
    ],
)
def test_level_is_a_function_of_score(score, level) -> None:
    assert StressLevel.from_score(score) is level


def test_level_summaries_exist_for_every_level() -> None:
    assert "optimal wellness" in StressLevel.LOW.summary
    assert "stress reduction" in StressLevel.MODERATE.summary
    assert "Professional consultation" in StressLevel.HIGH.summary


# ── Shape detection ───────────────────────────────────────────────────────────

def test_classify_pads_short_sequences_and_ignores_extras() -> None:
    assert classify_payload(["text"]) == SequencePayload("text", None, None)
    assert classify_payload(("a", {"value": 1}, {}, "extra")) == SequencePayload("a", {"value": 1}, {})
    assert classify_payload("plain") == TextPayload("plain")


@pytest.mark.parametrize("payload", [{}, [], (), None, 42, b"bytes"])
def test_unrecognised_shapes_raise_parse_error(payload, sample_input) -> None:
    with pytest.raises(ParseError) as excinfo:
        interpret(payload, sample_input)
    assert excinfo.value.payload == payload


def test_parse_error_message_embeds_payload_dump(sample_input) -> None:
    with pytest.raises(ParseError, match=r'"unexpected": "shape"'):
        interpret({"unexpected": "shape"}, sample_input)


def test_parse_error_is_an_inference_error() -> None:
    assert issubclass(ParseError, InferenceError)


# ── Sequence payloads ─────────────────────────────────────────────────────────

def test_probability_text_gives_high_stress(sample_input) -> None:
    result = interpret(["stress probability: 82%", None, None], sample_input)
    assert result.score == 82
    assert result.level is StressLevel.HIGH


def test_text_without_numbers_defaults_to_fifty(sample_input) -> None:
    result = interpret(["no numbers here"], sample_input)
    assert result.score == 50
    assert result.level is StressLevel.MODERATE


def test_gauge_top_level_value_overrides_text_score(sample_input) -> None:
    result = interpret(["Stress probability: 64%", {"value": 15}, {}], sample_input)
    assert result.score == 15
    assert result.level is StressLevel.LOW
    assert result.recommendations[1] == RECOMMEND_LOW


def test_gauge_top_level_value_overrides_gauge_data(sample_input) -> None:
    gauge = {"data": [{"value": 90}], "value": 20}
    assert interpret(["x", gauge], sample_input).score == 20


def test_fractional_score_is_rounded(sample_input) -> None:
    result = interpret(["stress score 55.5"], sample_input)
    assert result.score == 56
    assert isinstance(result.score, int)


def test_recommendations_for_text_prediction(sample_input) -> None:
    text = "Stress probability: 75.2%"
    result = interpret([text, None, None], sample_input)
    assert result.recommendations == (text, RECOMMEND_HIGH, RECOMMEND_MONITORING)


def test_recommendations_synthesised_when_prediction_is_not_text(sample_input) -> None:
    result = interpret([{"label": "stressed"}, {"value": 42.7}], sample_input)
    assert result.score == 43
    assert result.recommendations == (
        "Stress probability: 42.7%",
        RECOMMEND_MODERATE,
        RECOMMEND_MONITORING,
    )


def test_tier_recommendation_uses_unrounded_score() -> None:
    # 70.4 rounds to 70 (Moderate level) but the advice already reads as high.
    assert tier_recommendation(70.4) == RECOMMEND_HIGH
    assert tier_recommendation(29.9) == RECOMMEND_LOW
    assert tier_recommendation(30) == RECOMMEND_MODERATE


def test_sequence_metrics_are_direct_unclamped_ratios() -> None:
    data = BiomarkerInput("Out of range", 40, cortisol=30.0, amylase=100.0, iga=40.0, sleep_hours=-3.0)
    metrics = sequence_metrics(data)
    assert metrics.cortisol == pytest.approx(1.5)
    assert metrics.amylase == pytest.approx(0.5)
    assert metrics.iga == pytest.approx(0.5)
    assert metrics.sleep == pytest.approx(-0.25)


# ── Text payloads ─────────────────────────────────────────────────────────────

def test_plain_string_payload(sample_input) -> None:
    result = interpret("45% stress detected", sample_input)
    assert result.score == 45
    assert result.level is StressLevel.MODERATE
    assert result.recommendations == (
        "45% stress detected",
        "Analysis based on your biomarker levels",
        "Continue monitoring your stress indicators",
    )


def test_plain_string_without_number_defaults_to_fifty(sample_input) -> None:
    result = interpret("model unavailable", sample_input)
    assert result.score == 50
    assert result.level is StressLevel.MODERATE


def test_plain_string_score_is_clamped(sample_input) -> None:
    result = interpret("150", sample_input)
    assert result.score == 100
    assert result.level is StressLevel.HIGH


def test_plain_string_uses_only_the_first_number(sample_input) -> None:
    # A sequence payload reads the same text through the full matcher chain.
    text = "Run 7: probability 55%"
    assert interpret(text, sample_input).score == 7
    assert interpret(text, sample_input).level is StressLevel.LOW
    assert interpret([text], sample_input).score == 55


def test_plain_string_ignores_keyword_patterns(sample_input) -> None:
    result = interpret("12 samples, stress score 80", sample_input)
    assert result.score == 12
    assert result.level is StressLevel.LOW


def test_text_metrics_cap_and_invert() -> None:
    data = BiomarkerInput("T", 30, cortisol=30.0, amylase=250.0, iga=35.0, sleep_hours=4.0)
    metrics = text_metrics(data)
    assert metrics.cortisol == pytest.approx(1.0)
    assert metrics.amylase == pytest.approx(1.0)
    assert metrics.iga == pytest.approx(0.5)
    assert metrics.sleep == pytest.approx(0.5)

    rested = BiomarkerInput("T", 30, cortisol=5.0, amylase=100.0, iga=80.0, sleep_hours=10.0)
    assert text_metrics(rested).iga == 0.0
    assert text_metrics(rested).sleep == 0.0


def test_shapes_normalise_iga_and_sleep_differently(sample_input) -> None:
    from_sequence = interpret(["45% stress detected"], sample_input).metrics
    from_text = interpret("45% stress detected", sample_input).metrics

    # iga=40, sleep=6
    assert from_sequence.iga == pytest.approx(0.5)
    assert from_sequence.sleep == pytest.approx(0.5)
    assert from_text.iga == pytest.approx(1 / 3)
    assert from_text.sleep == pytest.approx(0.25)


# ── Echoed input ──────────────────────────────────────────────────────────────

@pytest.mark.parametrize("payload", [["stress score 61"], "61"])
def test_input_is_echoed_unchanged(payload, sample_input) -> None:
    result = interpret(payload, sample_input)
    assert result.data == sample_input

    flat = result.to_dict()
    for field in ("name", "age", "cortisol", "amylase", "iga", "sleep_hours"):
        assert flat[field] == getattr(sample_input, field)
    assert flat["level"] == result.level.value
    assert flat["summary"] == result.level.summary
