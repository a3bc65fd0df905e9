"""Candidate type detection from stated preferences and resume signals.

Resolution is a fixed priority list: the first rule whose predicate holds
decides the type. Explicit preferences are checked before inferred
signals, and a low-confidence ``fulltime`` default closes the list.
"""

import logging
import re
from collections.abc import Callable
from typing import NamedTuple

from models.schemas.candidate import (
    CandidateSignals,
    CandidateType,
    DetectionResult,
    DetectionSource,
    UserPreferences,
)

logger = logging.getLogger(__name__)

SWITCHING_CAREERS = "switching-careers"

# Career-goal phrases that point at a career change without an explicit choice
_CAREER_SWITCH_RE = re.compile(
    r"bootcamp|career[\s_-]*(?:change|changer|switch)|switching[\s_-]*careers",
    re.IGNORECASE,
)


class _DetectionRule(NamedTuple):
    name: str
    applies: Callable[[CandidateSignals], bool]
    candidate_type: CandidateType
    confidence: float
    source: DetectionSource


DETECTION_RULES: tuple[_DetectionRule, ...] = (
    _DetectionRule(
        "explicit coop",
        lambda s: s.user_job_type == "coop",
        "coop", 1.0, "explicit",
    ),
    _DetectionRule(
        "explicit career switch",
        lambda s: s.user_job_type == "fulltime" and s.career_goal == SWITCHING_CAREERS,
        "career_changer", 0.95, "explicit",
    ),
    _DetectionRule(
        "fulltime while still studying",
        lambda s: (
            s.user_job_type == "fulltime"
            and s.has_active_education
            and s.resume_role_count < 3
        ),
        "career_changer", 0.7, "signals",
    ),
    _DetectionRule(
        "explicit fulltime",
        lambda s: s.user_job_type == "fulltime",
        "fulltime", 0.9, "explicit",
    ),
    _DetectionRule(
        "student signals",
        lambda s: s.resume_role_count < 2 and s.has_active_education,
        "coop", 0.8, "signals",
    ),
    _DetectionRule(
        "established career",
        lambda s: s.resume_role_count >= 3 and s.total_experience_years >= 3,
        "fulltime", 0.85, "signals",
    ),
    _DetectionRule(
        "bootcamp or switch marker",
        lambda s: (
            bool(s.career_goal and _CAREER_SWITCH_RE.search(s.career_goal))
            and s.total_experience_years < 3
        ),
        "career_changer", 0.6, "signals",
    ),
)

DEFAULT_DETECTION = DetectionResult(
    candidate_type="fulltime", confidence=0.5, detected_from="default"
)


def detect_candidate_type(signals: CandidateSignals | None = None) -> DetectionResult:
    """Classify the candidate as coop, fulltime, or career_changer."""
    if signals is None:
        signals = CandidateSignals()

    for rule in DETECTION_RULES:
        if rule.applies(signals):
            logger.debug(
                "Candidate type %s via %r (confidence %.2f)",
                rule.candidate_type, rule.name, rule.confidence,
            )
            return DetectionResult(
                candidate_type=rule.candidate_type,
                confidence=rule.confidence,
                detected_from=rule.source,
            )

    logger.debug("No detection rule matched; defaulting to fulltime")
    return DEFAULT_DETECTION


def derive_effective_candidate_type(
    explicit_type: CandidateType | None = None,
    preferences: UserPreferences | None = None,
) -> CandidateType:
    """Explicit type wins, then the preferred job type, then fulltime."""
    if explicit_type:
        return explicit_type
    if preferences is not None and preferences.job_type:
        return "coop" if preferences.job_type == "coop" else "fulltime"
    return "fulltime"
