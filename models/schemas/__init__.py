"""Pydantic value objects exchanged by the scoring and calibration engine."""

from models.schemas.candidate import (
    CandidateSignals,
    CandidateType,
    DetectionResult,
    UserPreferences,
)
from models.schemas.evaluation import ResumeEvaluation
from models.schemas.gaps import GapProcessingResult, ProcessedGap, SectionGaps
from models.schemas.quantification import DensityResult, MetricsFound
from models.schemas.scoring import (
    ATSScoreInput,
    CompositeScore,
    JDQualifications,
    KeywordMatch,
    ResumeQualifications,
)
from models.schemas.sections import (
    OrderViolation,
    ResumeSections,
    SectionOrderValidation,
    SectionScoreResult,
)
from models.schemas.suggestions import (
    CalibratedSuggestion,
    CalibrationDirective,
    CalibrationSignals,
    ContentSuggestion,
    LegacySuggestion,
    StructuralSuggestion,
)

__all__ = [
    "ATSScoreInput",
    "CalibratedSuggestion",
    "CalibrationDirective",
    "CalibrationSignals",
    "CandidateSignals",
    "CandidateType",
    "CompositeScore",
    "ContentSuggestion",
    "DensityResult",
    "DetectionResult",
    "GapProcessingResult",
    "JDQualifications",
    "KeywordMatch",
    "LegacySuggestion",
    "MetricsFound",
    "OrderViolation",
    "ProcessedGap",
    "ResumeEvaluation",
    "ResumeQualifications",
    "ResumeSections",
    "SectionGaps",
    "SectionOrderValidation",
    "SectionScoreResult",
    "StructuralSuggestion",
    "UserPreferences",
]
