"""Resume sections, per-section scoring, and section order validation."""

from models.schemas.base import ValueModel


class ResumeSections(ValueModel):
    """Structured resume content. Empty string or empty list means absent."""
    summary: str | None = None
    skills: list[str] = []
    experience: list[str] = []  # bullets
    education: str | None = None
    projects: list[str] = []  # bullets
    certifications: list[str] = []

    def has(self, section: str) -> bool:
        value = getattr(self, section)
        if isinstance(value, str):
            return bool(value.strip())
        return bool(value)


class EducationQualityBreakdown(ValueModel):
    has_relevant_coursework: bool = False
    coursework_match_score: float = 0.0  # 0.0-1.0
    has_gpa: bool = False
    gpa_strong: bool = False  # 3.5+
    has_projects: bool = False
    has_honors: bool = False
    has_location: bool = False
    has_proper_date_format: bool = False


class EducationQuality(ValueModel):
    score: int = 0  # 0-100
    breakdown: EducationQualityBreakdown = EducationQualityBreakdown()
    suggestions: list[str] = []


class SectionScoreEntry(ValueModel):
    present: bool
    score: float = 0.0  # points awarded
    max_points: int = 0
    meets_threshold: bool = False
    issues: list[str] = []
    quality_score: int | None = None  # education only


class SectionScoreResult(ValueModel):
    score: int = 0  # 0-100
    breakdown: dict[str, SectionScoreEntry] = {}
    education_quality: EducationQuality | None = None


class OrderViolation(ValueModel):
    """Two sections observed in the reverse of their expected order."""
    earlier: str  # expected first, observed second
    later: str
    description: str = ""


class SectionOrderValidation(ValueModel):
    is_correct_order: bool = True
    violations: list[OrderViolation] = []
    recommended_order: list[str] = []
