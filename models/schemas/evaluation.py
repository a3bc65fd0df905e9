"""Full evaluation of one resume against one job description."""

from models.schemas.base import ValueModel
from models.schemas.candidate import CandidateSignals, DetectionResult
from models.schemas.gaps import GapProcessingResult
from models.schemas.quantification import DensityResult
from models.schemas.scoring import CompositeScore
from models.schemas.sections import ResumeSections, SectionOrderValidation
from models.schemas.suggestions import CalibrationDirective, StructuralSuggestion


class ResumeEvaluation(ValueModel):
    """Everything the UI and suggestion generator need for one resume/JD pair."""
    signals: CandidateSignals
    detection: DetectionResult
    sections: ResumeSections
    section_order: list[str] = []
    order_validation: SectionOrderValidation
    score: CompositeScore
    quantification: DensityResult
    structural_suggestions: list[StructuralSuggestion] = []
    calibration: CalibrationDirective
    gaps: GapProcessingResult = GapProcessingResult()
