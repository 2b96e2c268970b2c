"""
inference/client.py — Remote Stress Model Client
=================================================
Submits one BiomarkerInput to the Hugging Face Space hosting the stress
model and hands the answer to the response interpreter.

Call sequence
-------------
    1. Connect to the Space (gradio_client.Client).
    2. predict(**named_arguments, api_name="/predict")
    3. If (2) raises for any reason:
       predict(*positional_arguments, api_name="/predict")
    4. No payload → InferenceError.  Otherwise → model.stress.interpret().

There is no retry beyond the single named → positional fallback, and no
timeout other than the transport's own.  Each submission opens its own
connection; nothing is shared between calls.
"""

from typing import Any, Callable, Mapping

from fastapi.concurrency import run_in_threadpool
from gradio_client import Client

from config import API_NAME, HF_TOKEN, SPACE_ID
from errors import InferenceError
from model.payload import dump_payload
from model.stress import interpret
from model.types import BiomarkerInput, StressAssessment
from utils.logger import get_logger

logger = get_logger("inference.client")

ERROR_PREFIX = "Stress model error"


def _field(error: Any, key: str) -> Any:
    if isinstance(error, Mapping):
        return error.get(key)
    return getattr(error, key, None)


def describe_error(error: Any) -> str:
    """
    Best human-readable message for an error value.

    Order: an explicit `detail` / `message` / `error` field, then
    "Gradio <type> error on <endpoint>" for status-style errors, then the
    exception text, and finally a dump of the whole value.
    """
    if isinstance(error, str):
        return error

    for key in ("detail", "message", "error"):
        value = _field(error, key)
        if value is not None:
            return str(value)

    kind, endpoint = _field(error, "type"), _field(error, "endpoint")
    if kind is not None and endpoint is not None:
        return f"Gradio {kind} error on {endpoint}"

    if isinstance(error, BaseException):
        return str(error) or type(error).__name__

    return dump_payload(error)


class StressDetectorClient:
    """
    Thin wrapper around the remote stress model.

    `client_factory` is called as `client_factory(space_id, **options)` and
    must return an object with a gradio-style `predict(*args, api_name=..., **kwargs)`.
    """

    def __init__(
        self,
        space_id: str = SPACE_ID,
        api_name: str = API_NAME,
        hf_token: str | None = HF_TOKEN,
        client_factory: Callable[..., Any] = Client,
    ):
        self.space_id = space_id
        self.api_name = api_name
        self.hf_token = hf_token
        self._client_factory = client_factory

    # ── Public API ─────────────────────────────────────────────────────────

    def connect(self) -> Any:
        """Open a connection handle to the Space."""
        options: dict[str, Any] = {"verbose": False}
        if self.hf_token:
            options["hf_token"] = self.hf_token

        logger.info("Connecting to %s…", self.space_id)
        try:
            client = self._client_factory(self.space_id, **options)
        except Exception as exc:
            logger.error("Connection to %s failed: %s", self.space_id, exc)
            raise InferenceError(
                f"{ERROR_PREFIX}: could not connect to {self.space_id}: {describe_error(exc)}"
            ) from exc

        logger.info("Connected to %s.", self.space_id)
        return client

    def submit(self, data: BiomarkerInput) -> StressAssessment:
        """
        Run one prediction and interpret it.

        Raises
        ------
        InferenceError  connection or remote-call failure, or an empty response.
        ParseError      the response shape is unrecognised (an InferenceError).
        """
        client = self.connect()
        payload = self._predict(client, data)

        if payload is None:
            logger.error("Stress model returned no payload.")
            raise InferenceError(f"{ERROR_PREFIX}: Invalid response format from the stress model")

        logger.debug("Raw model response: %s", dump_payload(payload))
        return interpret(payload, data)

    # ── Private ────────────────────────────────────────────────────────────

    def _predict(self, client: Any, data: BiomarkerInput) -> Any:
        try:
            payload = client.predict(**data.as_named_arguments(), api_name=self.api_name)
            logger.info("Prediction succeeded with named arguments.")
            return payload
        except Exception as named_error:
            logger.warning(
                "Named-argument call failed (%s); retrying with positional arguments.",
                describe_error(named_error),
            )

        try:
            payload = client.predict(*data.as_positional_arguments(), api_name=self.api_name)
        except Exception as exc:
            message = describe_error(exc)
            logger.error("Positional-argument call failed: %s", message)
            raise InferenceError(f"{ERROR_PREFIX}: {message}") from exc

        logger.info("Prediction succeeded with positional arguments.")
        return payload


def submit(data: BiomarkerInput, client: StressDetectorClient | None = None) -> StressAssessment:
    """Submit with the configured Space (or the given client)."""
    return (client or StressDetectorClient()).submit(data)


async def analyze_stress(
    data: BiomarkerInput,
    client: StressDetectorClient | None = None,
) -> StressAssessment:
    """`submit` without blocking the event loop: the blocking calls run in a worker thread."""
    return await run_in_threadpool(submit, data, client)
