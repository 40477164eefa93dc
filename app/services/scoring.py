"""
app/services/scoring.py — Lead junk scoring.

Turns the list of fired rule reasons into a numeric score and the final
verdict returned to callers.
"""

import logging
from dataclasses import dataclass, asdict

logger = logging.getLogger(__name__)

BASE_SCORE = 1.0
PENALTY_PER_REASON = 0.2
VALID_REASON = "Looks valid"
REASON_SEPARATOR = "; "


@dataclass(frozen=True)
class LeadVerdict:
    is_junk: bool
    reason: str
    score: float                    # 0.0 – 1.0

    def to_dict(self) -> dict:
        """Wire representation with the camelCase keys clients expect."""
        data = asdict(self)
        data["isJunk"] = data.pop("is_junk")
        return data


def compute_score(reason_count: int) -> float:
    """
    Linear penalty: 1.0 minus 0.2 per fired rule, floored at 0.0.

    Args:
        reason_count: Number of rules that fired.

    Returns:
        Score in [0.0, 1.0]. Five or more reasons give exactly 0.0.
    """
    return max(0.0, BASE_SCORE - PENALTY_PER_REASON * reason_count)


def build_verdict(reasons: list[str]) -> LeadVerdict:
    """Join fired reasons in order and attach the score."""
    verdict = LeadVerdict(
        is_junk=bool(reasons),
        reason=REASON_SEPARATOR.join(reasons) if reasons else VALID_REASON,
        score=compute_score(len(reasons)),
    )

    if verdict.is_junk:
        logger.debug(
            "Lead flagged as junk — score=%.1f, %d reason(s).",
            verdict.score, len(reasons),
        )
    else:
        logger.debug("Lead looks valid — score=%.1f.", verdict.score)

    return verdict
