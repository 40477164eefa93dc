"""
app/classifier/normalizer.py — Cleans and standardizes raw lead dicts.

Every inbound field goes through the same coercion before any rule looks
at it, so missing, null and non-string values behave the same everywhere.
"""

import logging
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)


# ── Output schema ────────────────────────────────────────────────────────────

class NormalizedLead(BaseModel):
    """Trimmed lead fields ready for rule evaluation."""

    model_config = {"frozen": True}

    email: str = ""             # lowercased
    first_name: str = ""        # lowercased
    last_name: str = ""         # lowercased
    job_title: str = ""         # lowercased
    company: str = ""
    country: str = ""           # case preserved, compared exactly
    ip_country: str = ""        # case preserved, compared exactly


# ── Helpers ──────────────────────────────────────────────────────────────────

def safe_str(value: Any, default: str = "") -> str:
    """Coerce any value to a trimmed string. None becomes `default`."""
    if value is None:
        value = default
    if isinstance(value, bool):
        # JSON spelling, so "true" and true normalize alike
        value = "true" if value else "false"
    return str(value).strip()


def lower_str(value: Any) -> str:
    """safe_str() followed by lowercasing, for case-insensitive fields."""
    return safe_str(value).lower()


# ── Main function ────────────────────────────────────────────────────────────

def normalize_lead(raw: Any) -> NormalizedLead:
    """
    Normalize a raw lead payload into a NormalizedLead.

    Anything that is not a mapping (None, a list, a bare string) is
    treated as an empty lead. Never raises on field content.
    """
    if not isinstance(raw, dict):
        if raw is not None:
            logger.debug("Lead payload is %s, not an object; treating as empty.", type(raw).__name__)
        raw = {}

    return NormalizedLead(
        email=lower_str(raw.get("email")),
        first_name=lower_str(raw.get("firstName")),
        last_name=lower_str(raw.get("lastName")),
        job_title=lower_str(raw.get("jobTitle")),
        company=safe_str(raw.get("company")),
        country=safe_str(raw.get("country")),
        ip_country=safe_str(raw.get("ipCountry")),
    )
