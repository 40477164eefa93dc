"""
api/endpoints/classify_routes.py — Lead classification route.

POST /classify  — Score one lead and return the junk/valid verdict
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.services.lead_service import classification_record
from api.schemas import ClassificationOut, ErrorOut

logger = logging.getLogger(__name__)
router = APIRouter()


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


async def _read_lead(request: Request) -> Any:
    """Parsed JSON body, or {} when the body is absent, null or unparseable."""
    try:
        body = json.loads(await request.body(), parse_constant=_reject_constant)
    except ValueError:
        logger.debug("Request body missing or not valid JSON; using empty lead.")
        return {}
    return {} if body is None else body


@router.post(
    "/classify",
    response_model=ClassificationOut,
    responses={500: {"model": ErrorOut}},
    summary="Classify a lead",
)
async def classify(request: Request):
    """
    Run the junk heuristics against the posted lead.
    All lead fields are optional; malformed input is scored, never rejected.
    """
    lead = await _read_lead(request)
    try:
        record = classification_record(lead)
    except Exception:
        logger.exception("Classification error")
        return JSONResponse(status_code=500, content=ErrorOut().model_dump())

    logger.debug("Classified lead: isJunk=%s score=%.1f", record["isJunk"], record["score"])
    return record
