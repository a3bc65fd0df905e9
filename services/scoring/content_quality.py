"""Content quality of achievement bullets: metrics, action verbs, keyword coverage."""

import re
from typing import Literal

from models.schemas.candidate import CandidateType
from models.schemas.scoring import ContentQualityResult, QuantificationMatch
from services.scoring.constants import (
    CONTENT_QUALITY_WEIGHTS,
    MODERATE_ACTION_VERBS,
    QUANTIFICATION_TIERS,
    STRONG_ACTION_VERBS,
    TIER_POINTS,
    WEAK_ACTION_VERBS,
    WEAK_VERB_PHRASES,
)

VerbStrength = Literal["strong", "moderate", "weak", "unknown"]

_TIER_RANK = {"high": 3, "medium": 2, "low": 1}

# Full keyword credit at this share of JD keywords found in bullets
KEYWORD_COVERAGE_TARGET = 0.5


def extract_quantifications(text: str) -> list[QuantificationMatch]:
    """First match of each tiered pattern, high tier first."""
    matches = []
    for pattern, tier, kind in QUANTIFICATION_TIERS:
        m = pattern.search(text)
        if m:
            matches.append(QuantificationMatch(text=m.group(), tier=tier, kind=kind))
    return matches


def classify_action_verb(bullet: str) -> VerbStrength:
    text = bullet.strip().lower()
    if any(text.startswith(phrase) for phrase in WEAK_VERB_PHRASES):
        return "weak"
    words = text.split()
    first = re.sub(r"[^a-z]", "", words[0]) if words else ""
    if not first:
        return "unknown"
    if first in STRONG_ACTION_VERBS:
        return "strong"
    if first in MODERATE_ACTION_VERBS:
        return "moderate"
    if first in WEAK_ACTION_VERBS:
        return "weak"
    return "unknown"


def _quantification_score(bullets: list[str]) -> tuple[int, dict[str, int]]:
    tiers = {"high": 0, "medium": 0, "low": 0}
    points = 0.0
    for bullet in bullets:
        found = extract_quantifications(bullet)
        if not found:
            continue
        best = max(found, key=lambda q: _TIER_RANK[q.tier]).tier
        tiers[best] += 1
        points += TIER_POINTS[best]

    with_metrics = sum(tiers.values())
    coverage = with_metrics / len(bullets)
    quality = points / with_metrics if with_metrics else 0.0
    return round((coverage * 0.6 + quality * 0.4) * 100), tiers


def _action_verb_score(bullets: list[str], candidate_type: CandidateType) -> tuple[int, dict[str, int]]:
    counts = {"strong": 0, "moderate": 0, "weak": 0, "unknown": 0}
    for bullet in bullets:
        counts[classify_action_verb(bullet)] += 1

    n = len(bullets)
    if candidate_type == "coop":
        # Collaborative verbs are fine for co-op; weak verbs cost a little
        raw = (counts["strong"] + counts["moderate"]) / n - counts["weak"] * 0.05
    else:
        raw = (counts["strong"] + counts["moderate"] * 0.6 - counts["weak"] * 0.2) / n
    return round(max(0.0, min(1.0, raw)) * 100), counts


def _keyword_density_score(bullets: list[str], jd_keywords: list[str]) -> tuple[int, list[str], list[str]]:
    if not jd_keywords:
        return 50, [], []
    text = " ".join(bullets).lower()
    found = [kw for kw in jd_keywords if kw.lower() in text]
    missing = [kw for kw in jd_keywords if kw.lower() not in text]
    score = min(1.0, len(found) / len(jd_keywords) / KEYWORD_COVERAGE_TARGET)
    return round(score * 100), found, missing


def calculate_content_quality(
    bullets: list[str],
    jd_keywords: list[str] | None = None,
    candidate_type: CandidateType = "fulltime",
) -> ContentQualityResult:
    jd_keywords = jd_keywords or []
    if not bullets:
        return ContentQualityResult(keywords_missing=list(jd_keywords))

    quant_score, tiers = _quantification_score(bullets)
    verb_score, verbs = _action_verb_score(bullets, candidate_type)
    density_score, found, missing = _keyword_density_score(bullets, jd_keywords)

    score = round(
        quant_score * CONTENT_QUALITY_WEIGHTS["quantification"]
        + verb_score * CONTENT_QUALITY_WEIGHTS["action_verbs"]
        + density_score * CONTENT_QUALITY_WEIGHTS["keyword_density"]
    )

    return ContentQualityResult(
        score=score,
        quantification_score=quant_score,
        action_verb_score=verb_score,
        keyword_density_score=density_score,
        total_bullets=len(bullets),
        bullets_with_metrics=sum(tiers.values()),
        high_tier_metrics=tiers["high"],
        medium_tier_metrics=tiers["medium"],
        low_tier_metrics=tiers["low"],
        strong_verb_count=verbs["strong"],
        moderate_verb_count=verbs["moderate"],
        weak_verb_count=verbs["weak"],
        keywords_found=found,
        keywords_missing=missing,
    )


def generate_content_action_items(result: ContentQualityResult) -> list[tuple[str, str]]:
    items = []
    if result.quantification_score < 40:
        items.append((
            "high",
            f"Add metrics to bullets (only {result.bullets_with_metrics}/"
            f"{result.total_bullets} have quantification)",
        ))
    if result.weak_verb_count > result.strong_verb_count:
        items.append((
            "high",
            'Replace weak verbs ("Helped", "Worked on") with strong verbs ("Led", "Developed", "Built")',
        ))
    if result.bullets_with_metrics and result.low_tier_metrics > result.high_tier_metrics:
        items.append(("medium", "Upgrade metrics to higher-impact numbers ($, %, large scale)"))
    if result.keyword_density_score < 50:
        items.append(("low", "Incorporate more JD keywords into your experience bullets"))
    return items
