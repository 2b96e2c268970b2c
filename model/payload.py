"""
model/payload.py — Shape detection for raw prediction payloads
===============================================================
The remote model returns loosely-typed data.  This module is the only
place that probes it: `classify_payload()` turns whatever arrived into
one of two tagged shapes, or raises ParseError.

    SequencePayload  — list/tuple with ≥ 1 element:
                       [prediction_text, gauge_chart, biomarker_chart, ...]
    TextPayload      — a bare string
    anything else    — ParseError (empty sequence, mapping, None, number, …)
"""

import json
from dataclasses import dataclass
from typing import Any

from errors import ParseError


@dataclass(frozen=True)
class SequencePayload:
    prediction_text: Any
    gauge_chart: Any = None
    biomarker_chart: Any = None


@dataclass(frozen=True)
class TextPayload:
    text: str


def dump_payload(payload: Any) -> str:
    """Serialise a payload for diagnostics; values JSON cannot encode are stringified."""
    try:
        return json.dumps(payload, default=str, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(payload)


def classify_payload(payload: Any) -> SequencePayload | TextPayload:
    if isinstance(payload, (list, tuple)) and len(payload) >= 1:
        # Extra elements are ignored; missing ones are treated as absent.
        padded = list(payload[:3]) + [None] * (3 - min(len(payload), 3))
        return SequencePayload(*padded)

    if isinstance(payload, str):
        return TextPayload(payload)

    raise ParseError(
        f"Unable to parse stress model response: {dump_payload(payload)}",
        payload=payload,
    )
