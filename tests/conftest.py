"""
tests/conftest.py — Shared pytest configuration and fixtures.

Pins environment variables BEFORE any app module is imported, so that
a developer's local .env or shell cannot change the settings under test.
"""

import os
import pytest

# ── Set env vars before any app module is imported ───────────────────────────
# This runs at collection time, before tests execute.
os.environ["PORT"] = "3000"
os.environ["SERVICE_NAME"] = "lead-classifier"
os.environ["CORS_ALLOW_ORIGINS"] = '["*"]'


@pytest.fixture
def client():
    """FastAPI TestClient; the context manager runs the app lifespan."""
    from fastapi.testclient import TestClient
    from api.main import app

    with TestClient(app) as c:
        yield c
