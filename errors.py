"""
errors.py — Exception hierarchy
================================

- StressAnalyzerError : base class for everything raised by this project
- InferenceError      : the remote stress model could not be reached or called
- ParseError          : the model answered, but with a payload we cannot read
"""

from typing import Any


class StressAnalyzerError(RuntimeError):
    """Base class for project errors."""


class InferenceError(StressAnalyzerError):
    """Connection or remote-call failure, carrying a human-readable message."""


class ParseError(InferenceError):
    """Prediction payload matched none of the recognised shapes."""

    def __init__(self, message: str, payload: Any = None):
        super().__init__(message)
        self.payload = payload
