"""
api/schemas.py — Pydantic response models for all API endpoints.

These are the API contract — separate from the domain dataclasses so we can
control exactly how verdicts are spelled over HTTP.
"""

from typing import Any
from pydantic import BaseModel, Field


# ── Shared ────────────────────────────────────────────────────────────────────

class HealthOut(BaseModel):
    """Liveness probe body."""
    status: str = "ok"
    service: str


class ErrorOut(BaseModel):
    """Opaque failure body; never carries exception detail."""
    error: str = "Internal server error"


# ── Classification ────────────────────────────────────────────────────────────

class ClassificationOut(BaseModel):
    is_junk: bool = Field(..., alias="isJunk", description="True if any junk rule fired")
    reason: str = Field(..., description="'; '-joined fired rules, or 'Looks valid'")
    score: float = Field(..., ge=0.0, le=1.0, description="1.0 minus 0.2 per fired rule")
    received: Any = Field(default=None, description="The request body, echoed verbatim")

    model_config = {"populate_by_name": True}
