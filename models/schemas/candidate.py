"""Candidate classification: detection signals and results."""

from typing import Literal

from pydantic import Field

from models.schemas.base import ValueModel

CandidateType = Literal["coop", "fulltime", "career_changer"]
JobType = Literal["coop", "fulltime"]
DetectionSource = Literal["explicit", "signals", "default"]


class CandidateSignals(ValueModel):
    """Inputs to candidate type detection.

    The three numeric/boolean signals come from the resume feature
    extractor; the optional fields come from the user's stated preferences.
    """
    user_job_type: JobType | None = None
    career_goal: str | None = None  # e.g. "switching-careers", "bootcamp-grad"
    resume_role_count: int = 0
    has_active_education: bool = False
    total_experience_years: float = 0.0


class UserPreferences(ValueModel):
    """Stored optimization preferences relevant to type resolution."""
    job_type: JobType | None = None


class DetectionResult(ValueModel):
    candidate_type: CandidateType
    confidence: float = Field(ge=0.0, le=1.0)
    detected_from: DetectionSource
