"""
model/score.py — Stress score extraction
=========================================

Text extraction
---------------
The model's prediction text is free-form ("Stress probability: 82.4%",
"Score 61", "45% stress detected", …).  We run an ordered chain of
matchers over it; the first matcher whose *first* hit parses to a finite
number in [0, 100] wins.  A matcher whose hit is out of range does not
look for a later hit: the chain simply moves on to the next matcher.

    1. stress … probability … N
    2. stress … level … N
    3. stress … score … N
    4. probability … N
    5. score … N
    6. N stress
    7. any number

Gauge override
--------------
The gauge chart, when it is a mapping, may carry an authoritative score.
`data[*].value` is checked first, then a top-level `value`; the top-level
value always wins when both are present.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from config import DEFAULT_SCORE, SCORE_MAX, SCORE_MIN
from utils.logger import get_logger

logger = get_logger("model.score")

_NUMBER = r"([0-9]+\.?[0-9]*)%?"
_LEADING_NUMBER = re.compile(r"\s*([-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?)")


@dataclass(frozen=True)
class ScoreMatcher:
    name: str
    pattern: re.Pattern

    def __call__(self, text: str) -> float | None:
        match = self.pattern.search(text)
        if match is None:
            return None
        return to_score(match.group(1))


def _matcher(name: str, expression: str) -> ScoreMatcher:
    return ScoreMatcher(name, re.compile(expression, re.IGNORECASE))


STRESS_PROBABILITY = _matcher("stress-probability", r"stress.*?probability.*?" + _NUMBER)
STRESS_LEVEL = _matcher("stress-level", r"stress.*?level.*?" + _NUMBER)
STRESS_SCORE = _matcher("stress-score", r"stress.*?score.*?" + _NUMBER)
PROBABILITY = _matcher("probability", r"probability.*?" + _NUMBER)
SCORE = _matcher("score", r"score.*?" + _NUMBER)
NUMBER_BEFORE_STRESS = _matcher("number-stress", _NUMBER + r"\s*stress")
ANY_NUMBER = _matcher("any-number", _NUMBER)

SCORE_MATCHERS: tuple[Callable[[str], float | None], ...] = (
    STRESS_PROBABILITY,
    STRESS_LEVEL,
    STRESS_SCORE,
    PROBABILITY,
    SCORE,
    NUMBER_BEFORE_STRESS,
    ANY_NUMBER,
)


def parse_number(value: Any) -> float | None:
    """
    Leniently read a number: ints/floats as-is (bools rejected), strings by
    their leading numeric prefix ("82.5%" → 82.5).  Returns None for
    anything unreadable or non-finite.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if match is None:
            return None
        number = float(match.group(1))
    else:
        return None
    return number if math.isfinite(number) else None


def to_score(value: Any) -> float | None:
    """`parse_number` restricted to the valid score range [0, 100]."""
    number = parse_number(value)
    if number is None or not SCORE_MIN <= number <= SCORE_MAX:
        return None
    return number


def score_from_text(text: Any, matchers=SCORE_MATCHERS) -> float | None:
    """Run the matcher chain over `text`; None if nothing usable is found."""
    if not isinstance(text, str):
        return None
    for matcher in matchers:
        score = matcher(text)
        if score is not None:
            logger.debug("Score %.1f found in text via %s.", score, getattr(matcher, "name", matcher))
            return score
    return None


def score_from_gauge(gauge: Any) -> float | None:
    """Authoritative score carried by the gauge chart, if any."""
    if not isinstance(gauge, Mapping):
        return None

    score = None
    entries = gauge.get("data")
    if isinstance(entries, (list, tuple)):
        for entry in entries:
            if not isinstance(entry, Mapping) or "value" not in entry:
                continue
            candidate = to_score(entry["value"])
            if candidate is not None:
                score = candidate
                logger.debug("Score %.1f found in gauge chart data.", score)
                break

    # Top-level value overrides anything found in `data`.
    if "value" in gauge:
        candidate = to_score(gauge["value"])
        if candidate is not None:
            score = candidate
            logger.debug("Score %.1f found as direct gauge value.", score)

    return score


def extract_score(prediction_text: Any, gauge: Any = None) -> float:
    """Raw (unclamped, unrounded) score for a sequence payload."""
    score = score_from_text(prediction_text)
    gauge_score = score_from_gauge(gauge)
    if gauge_score is not None:
        score = gauge_score
    return DEFAULT_SCORE if score is None else score


def finalize_score(score: float) -> int:
    """Clamp to [0, 100] and round half up."""
    clamped = max(SCORE_MIN, min(SCORE_MAX, score))
    return int(math.floor(clamped + 0.5))


def first_number(text: str) -> float | None:
    """First number anywhere in `text`, with no range check."""
    match = ANY_NUMBER.pattern.search(text)
    return None if match is None else parse_number(match.group(1))
