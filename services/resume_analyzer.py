"""Orchestrator: one-call resume evaluation.

Pipeline:
1. Section parsing (structure and heading order)
2. Feature extraction and candidate type detection
3. Keyword and qualification extraction (unless supplied by the caller)
4. Composite ATS score
5. Section order validation and structural suggestions
6. Quantification density and suggestion calibration
7. Missing-keyword gap addressability
"""

import logging

from models.schemas.candidate import CandidateType, JobType, UserPreferences
from models.schemas.evaluation import ResumeEvaluation
from models.schemas.scoring import (
    ATSScoreInput,
    DegreeRequirement,
    ExperienceRequirement,
    JDQualifications,
    KeywordMatch,
    ResumeDegree,
    ResumeQualifications,
)
from models.schemas.sections import ResumeSections
from models.schemas.suggestions import CalibrationSignals
from services import keyword_matcher
from services.scoring.ats_score import calculate_ats_score_v21
from services.scoring.calibrator import calibrate
from services.scoring.candidate_type import detect_candidate_type
from services.scoring.gap_addressability import process_gap_addressability
from services.scoring.quantification import calculate_density
from services.scoring.resume_features import extract_candidate_signals
from services.scoring.section_order import validate_section_order
from services.scoring.structural_suggestions import generate_structural_suggestions
from services.section_parser import (
    build_resume_sections,
    detect_section_order,
    extract_degree_field,
    extract_education_level,
    extract_experience_years,
    extract_required_years,
)

logger = logging.getLogger(__name__)

EXPERIENCE_LEVEL_BY_TYPE: dict[str, str] = {
    "coop": "student",
    "career_changer": "career_changer",
    "fulltime": "experienced",
}


def extract_jd_qualifications(job_description: str) -> JDQualifications:
    """Degree and years-of-experience requirements stated in a JD."""
    level = extract_education_level(job_description)
    years = extract_required_years(job_description)
    field = extract_degree_field(job_description)
    return JDQualifications(
        degree_required=DegreeRequirement(level=level, fields=[field] if field else [])
        if level else None,
        experience_required=ExperienceRequirement(min_years=years) if years else None,
    )


def extract_resume_qualifications(resume_text: str, sections: ResumeSections) -> ResumeQualifications:
    education = sections.education or ""
    level = extract_education_level(education)
    return ResumeQualifications(
        degree=ResumeDegree(level=level, field=extract_degree_field(education)) if level else None,
        total_experience_years=extract_experience_years(resume_text),
        certifications=sections.certifications,
    )


def evaluate_resume(
    resume_text: str,
    job_description: str = "",
    *,
    keywords: list[KeywordMatch] | None = None,
    jd_qualifications: JDQualifications | None = None,
    candidate_type: CandidateType | None = None,
    preferences: UserPreferences | None = None,
    career_goal: str | None = None,
) -> ResumeEvaluation:
    """Score, structurally review, and calibrate one resume against one JD.

    An explicit ``candidate_type`` overrides detection; otherwise the
    preferred job type and the resume's own signals decide it.
    """
    sections = build_resume_sections(resume_text)
    section_order = detect_section_order(resume_text)

    job_type: JobType | None = preferences.job_type if preferences else None
    signals = extract_candidate_signals(resume_text, user_job_type=job_type, career_goal=career_goal)
    detection = detect_candidate_type(signals)
    effective_type = candidate_type or detection.candidate_type

    if keywords is None:
        pairs = keyword_matcher.extract_jd_keywords(job_description)
        keywords = keyword_matcher.match_keywords(pairs, sections, resume_text, job_description)
    if jd_qualifications is None:
        jd_qualifications = extract_jd_qualifications(job_description)

    bullets = [*sections.experience, *sections.projects]
    score = calculate_ats_score_v21(
        ATSScoreInput(
            keywords=keywords,
            jd_qualifications=jd_qualifications,
            resume_qualifications=extract_resume_qualifications(resume_text, sections),
            all_bullets=bullets,
            sections=sections,
            resume_text=resume_text,
            jd_text=job_description,
            candidate_type=effective_type,
        )
    )

    order_validation = validate_section_order(section_order, effective_type)
    structural = generate_structural_suggestions(
        effective_type, sections, section_order, raw_resume_text=resume_text
    )

    density = calculate_density(bullets)
    missing_count = sum(1 for k in keywords if not k.found)
    calibration = calibrate(
        CalibrationSignals(
            ats_score=score.overall,
            experience_level=EXPERIENCE_LEVEL_BY_TYPE[effective_type],
            missing_keywords_count=missing_count,
            quantification_density=density.density,
            total_bullets=density.total_bullets,
        )
    )
    gaps = process_gap_addressability(keywords, resume_text, sections)

    if not bullets:
        logger.warning("No experience or project bullets found; content scores will be zero")
    logger.info(
        "Evaluated resume as %s (%s): overall=%d tier=%s mode=%s",
        effective_type, detection.detected_from, score.overall, score.tier, calibration.mode,
    )

    return ResumeEvaluation(
        signals=signals,
        detection=detection,
        sections=sections,
        section_order=section_order,
        order_validation=order_validation,
        score=score,
        quantification=density,
        structural_suggestions=structural,
        calibration=calibration,
        gaps=gaps,
    )
