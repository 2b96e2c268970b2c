from __future__ import annotations

from typing import Any

import pytest

from inference.client import StressDetectorClient
from model.types import BiomarkerInput


class FakeSpace:
    """Stands in for gradio_client.Client: records calls, replays scripted outcomes."""

    def __init__(self, named: Any = None, positional: Any = None):
        self.named = named
        self.positional = positional
        self.calls: list[tuple[str, tuple, dict]] = []

    def predict(self, *args, api_name: str | None = None, **kwargs):
        style = "positional" if args else "named"
        self.calls.append((style, args, dict(kwargs, api_name=api_name)))
        outcome = self.positional if args else self.named
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def sample_input() -> BiomarkerInput:
    return BiomarkerInput(
        name="Sam",
        age=34,
        cortisol=12.0,
        amylase=120.0,
        iga=40.0,
        sleep_hours=6.0,
    )


@pytest.fixture
def make_detector():
    """Build a StressDetectorClient wired to a FakeSpace; returns (client, space)."""

    def _make(named: Any = None, positional: Any = None, connect_error: Exception | None = None):
        space = FakeSpace(named=named, positional=positional)
        connections: list[tuple[str, dict]] = []

        def factory(space_id: str, **options):
            connections.append((space_id, options))
            if connect_error is not None:
                raise connect_error
            return space

        client = StressDetectorClient(
            space_id="someone/stress-space",
            api_name="/predict",
            hf_token=None,
            client_factory=factory,
        )
        client.connections = connections
        return client, space

    return _make
