"""
config.py — Centralised configuration & constants
=================================================
Every tunable constant in the project lives here so that the rest of the
codebase can import from a single source of truth.  Values that differ
between deployments are read from the environment, with defaults that
work out of the box.
"""

import os

# ─── Remote Inference Endpoint ───────────────────────────────────────────────
# Hugging Face Space hosting the stress-detection model.  The Space exposes a
# single Gradio operation which accepts the six form fields and returns
# [prediction_text, gauge_chart, biomarker_chart].
SPACE_ID: str = os.environ.get("STRESS_SPACE_ID", "mekashishsingh/STRESS-DETECTOR")
API_NAME: str = "/predict"
HF_TOKEN: str | None = os.environ.get("HF_TOKEN") or None   # Only needed for private Spaces

# Parameter names the remote operation expects for the named calling convention
REMOTE_PARAMETER_NAMES = (
    "user_name",
    "user_age",
    "cortisol_val",
    "amylase_val",
    "iga_val",
    "sleep_val",
)

# ─── Stress Level Thresholds ─────────────────────────────────────────────────
#   score < 30          →  "Low"
#   30 ≤ score ≤ 70     →  "Moderate"
#   score > 70          →  "High"
STRESS_LOW_BELOW: float = 30.0
STRESS_HIGH_ABOVE: float = 70.0
DEFAULT_SCORE: float = 50.0      # Used when no score can be recovered from the payload
SCORE_MIN: float = 0.0
SCORE_MAX: float = 100.0

# ─── Normalisation ───────────────────────────────────────────────────────────
# Sequence payloads: direct linear ratio against the top of each input range.
SEQUENCE_NORM_CORTISOL: float = 20.0
SEQUENCE_NORM_AMYLASE: float = 200.0
SEQUENCE_NORM_IGA: float = 80.0
SEQUENCE_NORM_SLEEP: float = 12.0

# Text payloads: capped ratios, with IgA and sleep inverted
# (lower IgA / less sleep → higher value).
TEXT_NORM_CORTISOL: float = 25.0
TEXT_NORM_AMYLASE: float = 200.0
TEXT_NORM_IGA_PIVOT: float = 50.0
TEXT_NORM_IGA_SPAN: float = 30.0
TEXT_NORM_SLEEP_TARGET: float = 8.0

# ─── Recommendation Texts ────────────────────────────────────────────────────
RECOMMEND_HIGH = "Consider stress management techniques and professional consultation"
RECOMMEND_LOW = "Excellent stress management! Continue your healthy lifestyle"
RECOMMEND_MODERATE = "Monitor stress levels and consider lifestyle adjustments"
RECOMMEND_MONITORING = "Regular biomarker monitoring recommended for optimal health"

TEXT_RECOMMEND_GENERIC = "Analysis based on your biomarker levels"
TEXT_RECOMMEND_MONITORING = "Continue monitoring your stress indicators"

# ─── Input Ranges (form reference) ───────────────────────────────────────────
# (min, max, step, default)
AGE_RANGE = (1, 120, 1, 25)
CORTISOL_RANGE = (0.0, 20.0, 0.1, 10.0)     # μg/dL
AMYLASE_RANGE = (50.0, 200.0, 1.0, 50.0)    # U/L
IGA_RANGE = (20.0, 80.0, 1.0, 50.0)         # mg/dL
SLEEP_RANGE = (0.0, 12.0, 1.0, 7.0)         # hours
NAME_MAX_LENGTH: int = 100

# ─── Logging ─────────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.environ.get("STRESS_LOG_LEVEL", "INFO").upper()

# ─── API ─────────────────────────────────────────────────────────────────────
API_TITLE = "Biomarker Stress Analysis API"
API_VERSION = "0.1.0"
API_HOST = "0.0.0.0"
API_PORT = 8000
