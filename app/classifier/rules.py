"""
app/classifier/rules.py — Junk-lead heuristics.

Rule tables are module-level frozensets built once at import time.
evaluate_rules() runs every check in a fixed order and returns the
reasons that fired, in that order.
"""

import logging

from app.classifier.normalizer import NormalizedLead

logger = logging.getLogger(__name__)


# ── Rule tables ──────────────────────────────────────────────────────────────

FREE_DOMAINS = frozenset({
    "gmail.com", "yahoo.com", "hotmail.com", "outlook.com", "icloud.com",
})

DISPOSABLE_DOMAINS = frozenset({
    "mailinator.com", "10minutemail.com", "guerrillamail.com",
})

NON_BUSINESS_TITLES = frozenset({
    "student", "teacher", "personal", "self", "none", "n/a",
})

ROLE_BASED_LOCAL_PARTS = frozenset({
    "info", "support", "admin", "sales", "contact", "hello", "hi",
})


# ── Reason messages ──────────────────────────────────────────────────────────

INVALID_EMAIL = "Missing or invalid email"
DISPOSABLE_DOMAIN = "Disposable email domain"
FREE_EMAIL_NO_COMPANY = "Free email with no company"
ROLE_BASED_EMAIL = "Role-based email address"
NON_BUSINESS_TITLE = "Non-business title: {title}"
TEST_DATA = "Test data"
COUNTRY_MISMATCH = "Country does not match IP country"


# ── Helpers ──────────────────────────────────────────────────────────────────

def split_email(email: str) -> tuple[str, str] | None:
    """
    Split an address on its first '@' into (local_part, domain).

    Returns None for an empty address or one without '@'. Any further
    '@' characters stay in the domain.
    """
    if not email or "@" not in email:
        return None
    local_part, _, domain = email.partition("@")
    return local_part, domain


def _email_reasons(lead: NormalizedLead) -> list[str]:
    """Validity check, then the domain and local-part checks when valid."""
    parts = split_email(lead.email)
    if parts is None:
        return [INVALID_EMAIL]

    local_part, domain = parts
    reasons = []

    if domain in DISPOSABLE_DOMAINS:
        reasons.append(DISPOSABLE_DOMAIN)

    if domain in FREE_DOMAINS and not lead.company:
        reasons.append(FREE_EMAIL_NO_COMPANY)

    if local_part in ROLE_BASED_LOCAL_PARTS:
        reasons.append(ROLE_BASED_EMAIL)

    return reasons


def _is_test_data(lead: NormalizedLead) -> bool:
    # Substring match on email, also for addresses that failed validation
    return lead.first_name == "test" or lead.last_name == "test" or "test" in lead.email


# ── Main function ────────────────────────────────────────────────────────────

def evaluate_rules(lead: NormalizedLead) -> list[str]:
    """
    Run every junk heuristic against a normalized lead.

    Args:
        lead: Output of normalize_lead().

    Returns:
        Reason messages for the rules that fired, in evaluation order.
        An empty list means the lead looks valid.
    """
    reasons = _email_reasons(lead)

    if lead.job_title and lead.job_title in NON_BUSINESS_TITLES:
        reasons.append(NON_BUSINESS_TITLE.format(title=lead.job_title))

    if _is_test_data(lead):
        reasons.append(TEST_DATA)

    if lead.country and lead.ip_country and lead.country != lead.ip_country:
        reasons.append(COUNTRY_MISMATCH)

    logger.debug("Rules fired: %s", reasons)
    return reasons
