"""Keyword match scoring with required/preferred split and placement weighting.

Required keywords form the base score. Each missing required keyword
lowers a penalty multiplier (floored), and matched preferred keywords add
a capped bonus on top.
"""

from models.schemas.scoring import KeywordMatch, KeywordScoreResult
from services.scoring.constants import (
    IMPORTANCE_WEIGHTS,
    MATCH_TYPE_WEIGHTS,
    MIN_PENALTY_MULTIPLIER,
    MISSING_REQUIRED_PENALTY,
    PLACEMENT_WEIGHTS,
    PREFERRED_BONUS_CAP,
)


def _match_value(kw: KeywordMatch) -> float:
    placement = PLACEMENT_WEIGHTS[kw.placement or "other"]
    return IMPORTANCE_WEIGHTS[kw.importance] * MATCH_TYPE_WEIGHTS[kw.match_type] * placement


def _is_matched(kw: KeywordMatch) -> bool:
    return kw.found and kw.match_type is not None


def calculate_keyword_score(keywords: list[KeywordMatch]) -> KeywordScoreResult:
    required = [k for k in keywords if k.requirement == "required"]
    preferred = [k for k in keywords if k.requirement == "preferred"]

    matched_required = [k for k in required if _is_matched(k)]
    missing_required = [k.keyword for k in required if not _is_matched(k)]
    required_possible = sum(IMPORTANCE_WEIGHTS[k.importance] for k in required)
    required_achieved = sum(_match_value(k) for k in matched_required)
    required_score = required_achieved / required_possible if required_possible else 1.0

    penalty = max(MIN_PENALTY_MULTIPLIER, 1 - len(missing_required) * MISSING_REQUIRED_PENALTY)

    matched_preferred = [k for k in preferred if _is_matched(k)]
    missing_preferred = [k.keyword for k in preferred if not _is_matched(k)]
    preferred_possible = sum(IMPORTANCE_WEIGHTS[k.importance] for k in preferred)
    preferred_achieved = sum(_match_value(k) for k in matched_preferred)
    preferred_ratio = preferred_achieved / preferred_possible if preferred_possible else 0.0
    preferred_bonus = preferred_ratio * PREFERRED_BONUS_CAP

    final = min(1.0, required_score * penalty + preferred_bonus)

    return KeywordScoreResult(
        score=round(final * 100),
        required_score=round(required_score, 2),
        preferred_bonus=round(preferred_bonus, 2),
        penalty_multiplier=round(penalty, 2),
        matched_required=matched_required,
        matched_preferred=matched_preferred,
        missing_required=missing_required,
        missing_preferred=missing_preferred,
    )


def generate_keyword_action_items(result: KeywordScoreResult) -> list[tuple[str, str]]:
    items = []
    if result.missing_required:
        items.append((
            "critical",
            f"Add missing REQUIRED keywords: {', '.join(result.missing_required[:4])}",
        ))
    semantic = [k.keyword for k in result.matched_required if k.match_type == "semantic"]
    if semantic:
        items.append((
            "high",
            f"Use exact terminology for required skills: {', '.join(semantic[:2])}",
        ))
    if len(result.missing_preferred) > 3:
        items.append((
            "medium",
            f"Consider adding preferred keywords: {', '.join(result.missing_preferred[:3])}",
        ))
    return items
