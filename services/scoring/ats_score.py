"""Composite ATS score.

Pipeline:
1. Resolve the weight profile for the candidate type (fulltime profiles
   also follow JD seniority and role)
2. Score keywords, qualification fit, content quality, sections, format
3. Weighted sum, rounded and clamped to 0-100, then tiered
4. Merge per-component action items, most urgent and impactful first
"""

import logging
import time

from config import settings
from models.schemas.candidate import CandidateType
from models.schemas.scoring import (
    ActionItem,
    ATSScoreInput,
    ComponentScore,
    CompositeScore,
    ScoreMetadata,
    Tier,
)
from services.scoring.constants import (
    ALGORITHM_VERSION,
    COMPONENTS,
    PRIORITY_ORDER,
    ROLE_PATTERNS,
    ROLE_WEIGHT_SHIFTS,
    SENIORITY_PATTERNS,
    SENIORITY_PROFILES,
    TIER_THRESHOLDS,
    WEIGHT_PROFILES,
)
from services.scoring.content_quality import calculate_content_quality, generate_content_action_items
from services.scoring.format_score import calculate_format_score, generate_format_action_items
from services.scoring.keyword_score import calculate_keyword_score, generate_keyword_action_items
from services.scoring.qualification_fit import (
    calculate_qualification_fit,
    generate_qualification_action_items,
)
from services.scoring.section_score import calculate_section_score_v21, generate_section_action_items

logger = logging.getLogger(__name__)

# Potential score impact of an action item, by component and priority
_IMPACT = {
    "Keywords": {"critical": 15, "high": 10, "medium": 5, "low": 5},
    "Qualifications": {"high": 8},
    "Content": {"high": 10, "medium": 5, "low": 5},
    "Sections": {"high": 8, "medium": 4},
    "Format": {"high": 5, "low": 2},
}


def get_score_tier(score: float) -> Tier:
    for threshold, tier in TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return "Needs Work"


def detect_job_role(jd_text: str) -> str:
    for role, pattern in ROLE_PATTERNS:
        if pattern.search(jd_text):
            return role
    return "general"


def detect_seniority(jd_text: str, candidate_type: CandidateType) -> str:
    """Seniority from JD wording; co-op and career changers are always 'mid'."""
    if candidate_type != "fulltime":
        return "mid"
    for level, pattern in SENIORITY_PATTERNS:
        if pattern.search(jd_text):
            return level
    return "mid"


def get_weight_profile(
    candidate_type: CandidateType,
    role: str = "general",
    seniority: str = "mid",
) -> dict[str, float]:
    """Component weights for a candidate type, summing to 1.0.

    With ``role="general"`` and ``seniority="mid"`` this is the plain
    per-type profile.
    """
    try:
        weights = dict(WEIGHT_PROFILES[candidate_type])
    except KeyError:
        raise ValueError(f"Unknown candidate type: {candidate_type!r}") from None

    if candidate_type == "fulltime":
        level = "senior" if seniority in ("senior", "lead", "executive") else seniority
        if level in SENIORITY_PROFILES:
            weights = dict(SENIORITY_PROFILES[level])

    if role in ROLE_WEIGHT_SHIFTS:
        gain, lose, delta = ROLE_WEIGHT_SHIFTS[role]
        weights[gain] += delta
        weights[lose] -= delta

    total = sum(weights.values())
    return {k: round(weights[k] / total, 2) for k in COMPONENTS}


def _action_items(components: dict[str, list[tuple[str, str]]]) -> list[ActionItem]:
    items = [
        ActionItem(
            priority=priority,
            category=category,
            message=message,
            potential_impact=_IMPACT[category].get(priority, 2),
        )
        for category, pairs in components.items()
        for priority, message in pairs
    ]
    items.sort(key=lambda i: (PRIORITY_ORDER[i.priority], -i.potential_impact))
    return items[: settings.max_action_items]


def calculate_ats_score_v21(data: ATSScoreInput) -> CompositeScore:
    """Score one resume/JD pair for ``data.candidate_type``."""
    start = time.perf_counter()
    candidate_type = data.candidate_type
    sections = data.sections

    if settings.apply_seniority_adjustment:
        role = detect_job_role(data.jd_text)
        seniority = detect_seniority(data.jd_text, candidate_type)
    else:
        role, seniority = "general", "mid"
    weights = get_weight_profile(candidate_type, role, seniority)

    jd_keywords = data.jd_keywords if data.jd_keywords is not None else [k.keyword for k in data.keywords]
    bullets = data.all_bullets or [*sections.experience, *sections.projects]

    keyword_result = calculate_keyword_score(data.keywords)
    qualification_result = calculate_qualification_fit(data.jd_qualifications, data.resume_qualifications)
    content_result = calculate_content_quality(bullets, jd_keywords, candidate_type)
    section_result = calculate_section_score_v21(sections, candidate_type, jd_keywords)
    format_result = calculate_format_score(
        data.resume_text,
        has_experience=bool(sections.experience),
        has_summary=sections.has("summary"),
    )

    results = {
        "keywords": keyword_result,
        "qualification_fit": qualification_result,
        "content_quality": content_result,
        "sections": section_result,
        "format": format_result,
    }

    raw = sum(results[c].score * weights[c] for c in COMPONENTS)
    overall = min(100, max(0, round(raw)))

    breakdown = {
        c: ComponentScore(
            score=results[c].score,
            weight=weights[c],
            weighted=round(results[c].score * weights[c]),
            details=results[c],
        )
        for c in COMPONENTS
    }

    action_items = _action_items({
        "Keywords": generate_keyword_action_items(keyword_result),
        "Qualifications": [("high", m) for m in generate_qualification_action_items(qualification_result)],
        "Content": generate_content_action_items(content_result),
        "Sections": generate_section_action_items(section_result),
        "Format": generate_format_action_items(format_result),
    })

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.debug(
        "ATS score %d for %s (role=%s, seniority=%s) in %.1fms",
        overall, candidate_type, role, seniority, elapsed_ms,
    )

    return CompositeScore(
        overall=overall,
        tier=get_score_tier(overall),
        candidate_type=candidate_type,
        breakdown=breakdown,
        action_items=action_items,
        metadata=ScoreMetadata(
            algorithm_version=ALGORITHM_VERSION,
            processing_time_ms=round(elapsed_ms, 2),
            detected_role=role,
            detected_seniority=seniority,
            weights_used=weights,
        ),
    )
