"""
model/types.py — Domain records
================================
Plain, immutable records passed between the request submitter, the
response interpreter and the API layer.  No validation happens here:
range checks belong to the HTTP request schema (api/schemas.py), and the
interpreter must cope with whatever values reach it.
"""

from dataclasses import dataclass, asdict
from enum import Enum

from config import REMOTE_PARAMETER_NAMES, STRESS_HIGH_ABOVE, STRESS_LOW_BELOW


@dataclass(frozen=True)
class BiomarkerInput:
    """One submission's worth of user-supplied biomarker values."""
    name: str
    age: float
    cortisol: float       # μg/dL
    amylase: float        # U/L
    iga: float            # mg/dL
    sleep_hours: float    # hours

    def as_positional_arguments(self) -> tuple:
        """Values in the remote operation's fixed argument order."""
        return (self.name, self.age, self.cortisol, self.amylase, self.iga, self.sleep_hours)

    def as_named_arguments(self) -> dict:
        """Values keyed by the remote operation's parameter names."""
        return dict(zip(REMOTE_PARAMETER_NAMES, self.as_positional_arguments()))


class StressLevel(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"

    @classmethod
    def from_score(cls, score: float) -> "StressLevel":
        """Both boundaries (30 and 70) fall into Moderate."""
        if score < STRESS_LOW_BELOW:
            return cls.LOW
        if score > STRESS_HIGH_ABOVE:
            return cls.HIGH
        return cls.MODERATE

    @property
    def summary(self) -> str:
        return _LEVEL_SUMMARIES[self]


_LEVEL_SUMMARIES = {
    StressLevel.LOW: (
        "Excellent stress management detected. "
        "Your biomarkers indicate optimal wellness levels."
    ),
    StressLevel.MODERATE: (
        "Elevated stress patterns identified. "
        "Consider implementing targeted stress reduction strategies."
    ),
    StressLevel.HIGH: (
        "Significant stress indicators present. "
        "Professional consultation recommended for comprehensive wellness assessment."
    ),
}


@dataclass(frozen=True)
class NormalizedMetrics:
    cortisol: float
    amylase: float
    iga: float
    sleep: float


@dataclass(frozen=True)
class StressAssessment:
    """
    Fully-populated result of one successful interpretation.

    `level` is always `StressLevel.from_score(score)`.
    """
    score: int
    level: StressLevel
    recommendations: tuple[str, ...]
    metrics: NormalizedMetrics
    data: BiomarkerInput

    def to_dict(self) -> dict:
        """JSON-ready view with the echoed input flattened alongside the result."""
        return {
            "score": self.score,
            "level": self.level.value,
            "summary": self.level.summary,
            "recommendations": list(self.recommendations),
            "metrics": asdict(self.metrics),
            **asdict(self.data),
        }
