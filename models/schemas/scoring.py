"""Composite ATS score: inputs, per-component results, and final score."""

from typing import Literal

from pydantic import Field

from models.schemas.base import ValueModel
from models.schemas.candidate import CandidateType
from models.schemas.sections import ResumeSections, SectionScoreResult

Importance = Literal["high", "medium", "low"]
Requirement = Literal["required", "preferred"]
MatchType = Literal["exact", "fuzzy", "semantic"]
Placement = Literal[
    "skills_section",
    "summary",
    "experience_bullet",
    "experience_paragraph",
    "education",
    "projects",
    "other",
]
DegreeLevel = Literal["high_school", "associate", "bachelor", "master", "phd"]
Priority = Literal["critical", "high", "medium", "low"]
Tier = Literal["Excellent", "Strong", "Competitive", "Needs Work"]


# ---------------------------------------------------------------------------
# Keywords
# ---------------------------------------------------------------------------

class KeywordMatch(ValueModel):
    """One job-description keyword and where (if anywhere) the resume has it."""
    keyword: str
    category: str = "technical"
    importance: Importance = "medium"
    requirement: Requirement = "required"
    found: bool = False
    match_type: MatchType | None = None
    placement: Placement | None = None
    context: str = ""


class KeywordScoreResult(ValueModel):
    score: int = 0  # 0-100
    required_score: float = 0.0  # 0.0-1.0
    preferred_bonus: float = 0.0
    penalty_multiplier: float = 1.0
    matched_required: list[KeywordMatch] = []
    matched_preferred: list[KeywordMatch] = []
    missing_required: list[str] = []
    missing_preferred: list[str] = []


# ---------------------------------------------------------------------------
# Qualifications
# ---------------------------------------------------------------------------

class DegreeRequirement(ValueModel):
    level: DegreeLevel
    fields: list[str] = []  # e.g. ["Computer Science", "related field"]
    required: bool = True


class ExperienceRequirement(ValueModel):
    min_years: float
    required: bool = True


class CertificationRequirement(ValueModel):
    certifications: list[str] = []
    required: bool = False


class JDQualifications(ValueModel):
    degree_required: DegreeRequirement | None = None
    experience_required: ExperienceRequirement | None = None
    certifications_required: CertificationRequirement | None = None


class ResumeDegree(ValueModel):
    level: DegreeLevel
    field: str = ""


class ResumeQualifications(ValueModel):
    degree: ResumeDegree | None = None
    total_experience_years: float = 0.0
    certifications: list[str] = []


class QualificationFitResult(ValueModel):
    score: int = 0  # 0-100
    degree_score: int = 100
    experience_score: int = 100
    certification_score: int = 100
    degree_met: bool = True
    degree_note: str | None = None
    experience_met: bool = True
    experience_note: str | None = None
    certifications_met: list[str] = []
    certifications_missing: list[str] = []


# ---------------------------------------------------------------------------
# Content quality and format
# ---------------------------------------------------------------------------

class QuantificationMatch(ValueModel):
    text: str
    tier: Literal["high", "medium", "low"]
    kind: str  # currency, percentage, multiplier, count, scale


class ContentQualityResult(ValueModel):
    score: int = 0  # 0-100
    quantification_score: int = 0
    action_verb_score: int = 0
    keyword_density_score: int = 0
    total_bullets: int = 0
    bullets_with_metrics: int = 0
    high_tier_metrics: int = 0
    medium_tier_metrics: int = 0
    low_tier_metrics: int = 0
    strong_verb_count: int = 0
    moderate_verb_count: int = 0
    weak_verb_count: int = 0
    keywords_found: list[str] = []
    keywords_missing: list[str] = []


class FormatScoreResult(ValueModel):
    score: int = 0  # 0-100
    has_email: bool = False
    has_phone: bool = False
    has_linkedin: bool = False
    has_github: bool = False
    has_parseable_dates: bool = False
    has_section_headers: bool = False
    has_bullet_structure: bool = False
    appropriate_length: bool = True
    no_outdated_formats: bool = True
    issues: list[str] = []  # surfaced as high priority
    warnings: list[str] = []  # surfaced as low priority


# ---------------------------------------------------------------------------
# Composite
# ---------------------------------------------------------------------------

ComponentDetails = (
    KeywordScoreResult
    | QualificationFitResult
    | ContentQualityResult
    | SectionScoreResult
    | FormatScoreResult
)


class ActionItem(ValueModel):
    priority: Priority
    category: str  # Keywords, Qualifications, Content, Sections, Format
    message: str
    potential_impact: int = 0


class ComponentScore(ValueModel):
    score: int
    weight: float
    weighted: int
    details: ComponentDetails | None = None


class ScoreMetadata(ValueModel):
    algorithm_version: str
    processing_time_ms: float = 0.0
    detected_role: str = "general"
    detected_seniority: str = "mid"
    weights_used: dict[str, float] = {}

    # Timing varies between identical runs; equality ignores it
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScoreMetadata):
            return NotImplemented
        ignore = {"processing_time_ms"}
        return self.model_dump(exclude=ignore) == other.model_dump(exclude=ignore)

    def __hash__(self) -> int:
        return hash((self.algorithm_version, self.detected_role, self.detected_seniority))


class CompositeScore(ValueModel):
    overall: int = Field(ge=0, le=100)
    tier: Tier
    candidate_type: CandidateType
    breakdown: dict[str, ComponentScore] = {}
    action_items: list[ActionItem] = []
    metadata: ScoreMetadata


class ATSScoreInput(ValueModel):
    """Everything the composite calculator needs for one resume/JD pair.

    ``all_bullets`` falls back to experience plus project bullets and
    ``jd_keywords`` to the keyword list when left empty.
    """
    keywords: list[KeywordMatch] = []
    jd_qualifications: JDQualifications = JDQualifications()
    resume_qualifications: ResumeQualifications = ResumeQualifications()
    all_bullets: list[str] = []
    sections: ResumeSections = ResumeSections()
    resume_text: str = ""
    jd_text: str = ""
    candidate_type: CandidateType = "fulltime"
    jd_keywords: list[str] | None = None
