"""Structural suggestions, calibration signals/directives, and content suggestion records."""

from typing import Annotated, Literal, Union

from pydantic import Field

from models.schemas.base import ValueModel

SuggestionPriority = Literal["critical", "high", "moderate"]
SuggestionCategory = Literal["section_order", "section_heading", "section_presence"]
SuggestionMode = Literal["Transformation", "Improvement", "Optimization", "Validation"]


class StructuralSuggestion(ValueModel):
    """Rule-derived recommendation about section presence, order, or heading."""
    id: str  # "<candidate_type>-rule-<n>"
    priority: SuggestionPriority
    category: SuggestionCategory
    message: str
    current_state: str
    recommended_action: str


class CalibrationSignals(ValueModel):
    """Calibrator input. Unconstrained so that validate_calibration_signals
    can report bad values instead of failing at construction."""
    ats_score: float
    experience_level: str  # student | career_changer | experienced
    missing_keywords_count: int = 0
    quantification_density: float = 0.0  # 0-100
    total_bullets: int | None = None


class PriorityBoosts(ValueModel):
    keyword: int = 0
    quantification: int = 0
    experience: int = 0


class CalibrationDirective(ValueModel):
    mode: SuggestionMode
    target_suggestion_count: int
    focus_areas: list[str] = []
    priority_boosts: PriorityBoosts = PriorityBoosts()
    reasoning: str = ""


# ---------------------------------------------------------------------------
# Content suggestion records
# ---------------------------------------------------------------------------

SuggestionType = Literal[
    "bullet_rewrite",
    "skill_mapping",
    "action_verb",
    "quantification",
    "skill_expansion",
    "format",
    "removal",
]
SuggestionUrgency = Literal["low", "medium", "high", "critical"]
SuggestionSection = Literal["experience", "education", "projects", "skills", "format"]


class InferenceSignals(ValueModel):
    """Snapshot of the signals a calibrated suggestion was generated under."""
    ats_score: float
    experience_level: Literal["student", "career_changer", "experienced"]
    missing_keywords_count: int
    quantification_density: float


class _SuggestionBase(ValueModel):
    id: str | None = None
    type: SuggestionType
    section: SuggestionSection
    original_text: str
    suggested_text: str | None = None  # None for removals
    reasoning: str = ""
    urgency: SuggestionUrgency = "medium"


class LegacySuggestion(_SuggestionBase):
    kind: Literal["legacy"] = "legacy"


class CalibratedSuggestion(_SuggestionBase):
    kind: Literal["calibrated"] = "calibrated"
    suggestion_mode: SuggestionMode
    inference_signals: InferenceSignals


ContentSuggestion = Annotated[
    Union[LegacySuggestion, CalibratedSuggestion],
    Field(discriminator="kind"),
]
