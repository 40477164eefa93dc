"""
app/services/lead_service.py — Business logic tying the classification
pipeline together:

  - Normalizing the raw lead payload
  - Running the junk heuristics
  - Scoring and assembling the verdict
  - Batch classification with summary counts
"""

import logging
from collections.abc import Iterable
from typing import Any

from app.classifier.normalizer import normalize_lead
from app.classifier.rules import evaluate_rules
from app.services.scoring import LeadVerdict, build_verdict

logger = logging.getLogger(__name__)


def classify_lead(raw: Any) -> LeadVerdict:
    """
    Classify a single raw lead as junk or valid.

    Args:
        raw: The lead payload as received, normally a dict with optional
             email/firstName/lastName/jobTitle/company/country/ipCountry.

    Returns:
        A LeadVerdict. Pure function: identical input gives an identical verdict.
    """
    lead = normalize_lead(raw)
    reasons = evaluate_rules(lead)
    return build_verdict(reasons)


def classification_record(raw: Any) -> dict:
    """Verdict fields plus the raw payload under 'received'."""
    record = classify_lead(raw).to_dict()
    record["received"] = raw
    return record


def classify_leads(leads: Iterable[Any]) -> list[dict]:
    """
    Classify a batch of raw leads, preserving input order.

    Returns:
        One {isJunk, reason, score, received} dict per input lead.
    """
    results = [classification_record(raw) for raw in leads]
    logger.info("Classified %d leads.", len(results))
    return results


def summarize(results: list[dict]) -> dict:
    """
    Aggregate counts for a batch of classification records.

    Returns:
        A summary dict: {"total": int, "junk": int, "valid": int, "junk_rate": float}
    """
    total = len(results)
    junk = sum(1 for r in results if r["isJunk"])
    stats = {
        "total": total,
        "junk": junk,
        "valid": total - junk,
        "junk_rate": junk / total if total else 0.0,
    }
    logger.info("Batch summary: %s", stats)
    return stats
