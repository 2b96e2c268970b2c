#!/usr/bin/env python3
"""
Biomarker Stress Analyzer — Main Entry Point
=============================================
Launches the FastAPI backend with Uvicorn.
Run with:  python main.py

⚠️  DISCLAIMER: This is a WELLNESS tool, NOT a medical device.  Stress
    scores come from an externally hosted model and have not been
    validated for clinical use.  Consult a qualified healthcare
    professional for medical advice.
"""

import uvicorn

from api.app import create_app
from config import API_HOST, API_PORT, LOG_LEVEL

if __name__ == "__main__":
    app = create_app()
    uvicorn.run(
        app,
        host=API_HOST,
        port=API_PORT,
        reload=False,
        log_level=LOG_LEVEL.lower(),
    )
