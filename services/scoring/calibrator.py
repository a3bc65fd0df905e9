"""Suggestion calibration: map score and gap signals to a rewriting policy.

The directive tells the downstream suggestion generator how many
suggestions to request (``target_suggestion_count``), how aggressive they
should be (``mode``) and where to focus. It is a pure lookup; nothing here
calls a model.
"""

import logging
import math

from models.schemas.suggestions import (
    CalibrationDirective,
    CalibrationSignals,
    PriorityBoosts,
    SuggestionMode,
)
from services.scoring.constants import (
    ESCALATION_MAX_DENSITY,
    ESCALATION_MIN_MISSING,
    EXPERIENCE_LEVELS,
    FOCUS_AREA_DESCRIPTIONS,
    FOCUS_AREAS_BY_EXPERIENCE,
    MODE_THRESHOLDS,
    SUGGESTION_MODE_DESCRIPTIONS,
    SUGGESTION_MODES,
    TARGET_COUNT_RANGES,
    VALIDATION_MAX_MISSING,
    VALIDATION_MIN_DENSITY,
    VALIDATION_MIN_SCORE,
)

logger = logging.getLogger(__name__)


def get_suggestion_mode(ats_score: float) -> SuggestionMode:
    """Base mode from the ATS score alone."""
    for upper, mode in MODE_THRESHOLDS:
        if ats_score < upper:
            return mode
    return "Validation"


def get_target_suggestion_count(mode: SuggestionMode) -> int:
    low, high = TARGET_COUNT_RANGES[mode]
    return math.floor((low + high) / 2)


def get_keyword_urgency_boost(missing_keywords_count: int) -> int:
    if missing_keywords_count >= 5:
        return 2
    if missing_keywords_count >= 2:
        return 1
    return 0


def get_quantification_urgency_boost(density: float) -> int:
    if density < 30:
        return 2
    if density < 50:
        return 1
    if density < 80:
        return 0
    return -1


def _resolve_mode(signals: CalibrationSignals) -> SuggestionMode:
    mode = get_suggestion_mode(signals.ats_score)

    if (
        signals.quantification_density < ESCALATION_MAX_DENSITY
        and signals.missing_keywords_count >= ESCALATION_MIN_MISSING
        and mode != "Transformation"
    ):
        escalated = SUGGESTION_MODES[SUGGESTION_MODES.index(mode) - 1]
        logger.debug("Escalating %s -> %s on weak density and keyword gaps", mode, escalated)
        mode = escalated

    if mode == "Validation" and not (
        signals.ats_score >= VALIDATION_MIN_SCORE
        and signals.quantification_density >= VALIDATION_MIN_DENSITY
        and signals.missing_keywords_count <= VALIDATION_MAX_MISSING
    ):
        logger.debug("Validation signals not all healthy; using Optimization")
        mode = "Optimization"

    return mode


def _focus_areas(signals: CalibrationSignals, mode: SuggestionMode) -> list[str]:
    if mode == "Validation":
        return ["validation"]

    areas = []
    if signals.missing_keywords_count >= 2:
        areas.append("keywords")
    if signals.quantification_density < 50:
        areas.append("quantification")
    if mode in ("Transformation", "Improvement"):
        areas.append("structure")
    areas.extend(FOCUS_AREAS_BY_EXPERIENCE.get(signals.experience_level, ()))
    return areas


def calibrate(signals: CalibrationSignals) -> CalibrationDirective:
    mode = _resolve_mode(signals)
    keyword_boost = get_keyword_urgency_boost(signals.missing_keywords_count)
    quant_boost = get_quantification_urgency_boost(signals.quantification_density)
    experience_boost = {"Transformation": 1, "Improvement": 0}.get(mode, -1)

    if keyword_boost > 0:
        keyword_note = f"(+{keyword_boost} urgency)"
    else:
        keyword_note = "(focus shift)"
    if quant_boost > 0:
        quant_note = f"(+{quant_boost} urgency)"
    elif quant_boost < 0:
        quant_note = "(deprioritize)"
    else:
        quant_note = "(balanced)"

    reasoning = " | ".join([
        f"ATS Score {signals.ats_score:g} → {mode} mode",
        f"{signals.missing_keywords_count} missing keywords {keyword_note}",
        f"{signals.quantification_density:g}% quantification {quant_note}",
    ])

    return CalibrationDirective(
        mode=mode,
        target_suggestion_count=get_target_suggestion_count(mode),
        focus_areas=_focus_areas(signals, mode),
        priority_boosts=PriorityBoosts(
            keyword=keyword_boost,
            quantification=quant_boost,
            experience=experience_boost,
        ),
        reasoning=reasoning,
    )


def get_suggestion_mode_description(mode: SuggestionMode) -> str:
    return SUGGESTION_MODE_DESCRIPTIONS[mode]


def get_focus_areas_description(areas: list[str]) -> str:
    """Comma-joined readable focus areas; unknown areas pass through as-is."""
    return ", ".join(FOCUS_AREA_DESCRIPTIONS.get(area, area) for area in areas)


def validate_calibration_signals(signals: CalibrationSignals) -> list[str]:
    """Human-readable problems with ``signals``; empty when they are usable."""
    errors = []
    if not 0 <= signals.ats_score <= 100:
        errors.append("ATS score must be between 0-100")
    if signals.experience_level not in EXPERIENCE_LEVELS:
        errors.append(
            f"Invalid experience level: {signals.experience_level}. "
            "Must be student, career_changer, or experienced"
        )
    if signals.missing_keywords_count < 0:
        errors.append("Missing keywords count cannot be negative")
    if not 0 <= signals.quantification_density <= 100:
        errors.append("Quantification density must be between 0-100")
    if signals.total_bullets is not None and signals.total_bullets <= 0:
        errors.append("Total bullets must be greater than 0")
    return errors
