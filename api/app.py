"""
api/app.py — FastAPI application factory
==========================================
Creates and configures the FastAPI instance so that `main.py` stays
minimal.

CORS
----
The browser front-end is served from a different origin than this API,
so all origins are allowed by default.  In a production deployment
restrict `allow_origins` to the front-end's domain.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import router
from config import API_TITLE, API_VERSION


def create_app() -> FastAPI:
    """
    Construct and return the configured FastAPI application.

    A factory rather than a module-level singleton, so tests can build
    isolated app instances with their own dependency overrides.
    """
    app = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        description=(
            "Submits salivary biomarkers and sleep duration to a hosted "
            "stress-detection model and returns a normalised assessment. "
            "⚠️ WELLNESS TOOL ONLY — not a medical device."
        ),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    return app
