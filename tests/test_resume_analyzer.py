"""End-to-end tests for the evaluate_resume facade."""

import logging

from models.schemas.candidate import UserPreferences
from models.schemas.evaluation import ResumeEvaluation
from models.schemas.scoring import JDQualifications, KeywordMatch
from services.resume_analyzer import (
    evaluate_resume,
    extract_jd_qualifications,
    extract_resume_qualifications,
)
from services.scoring.calibrator import get_target_suggestion_count
from services.scoring.constants import COMPONENTS
from services.section_parser import build_resume_sections


STUDENT_RESUME = """Jane Park
jane.park@uni.edu | (555) 201-3344 | github.com/janepark

Skills
Python, Java, SQL, React, Git, Linux, Docker, Flask

Education
B.S. Computer Science, Waterloo University, Expected May 2027
GPA: 3.8, Dean's List
Relevant coursework: Data Structures, Algorithms, Databases

Projects
- Built a Flask API for a campus marketplace used by 300 students
- Developed a React dashboard that cut club admin time by 40%

Experience
Teaching Assistant | Sep 2024 - Present
- Ran weekly Python labs for 40 students
"""

JD = """Software Developer Co-op

Requirements:
- Python and SQL
- Familiarity with React

Nice to have:
- Docker
- Kubernetes
"""


def test_evaluate_student_resume():
    result = evaluate_resume(STUDENT_RESUME, JD)
    assert isinstance(result, ResumeEvaluation)
    assert result.detection.candidate_type == "coop"
    assert result.score.candidate_type == "coop"
    assert result.section_order == ["skills", "education", "projects", "experience"]
    assert result.order_validation.is_correct_order is True
    assert set(result.score.breakdown) == set(COMPONENTS)


def test_keywords_extracted_from_jd():
    result = evaluate_resume(STUDENT_RESUME, JD)
    keywords = result.score.breakdown["keywords"].details
    assert keywords.missing_required == []
    assert keywords.missing_preferred == ["kubernetes"]


def test_structural_suggestions_are_heading_only_for_clean_coop_resume():
    result = evaluate_resume(STUDENT_RESUME, JD)
    assert [s.id for s in result.structural_suggestions] == ["coop-rule-4"]


def test_quantification_and_calibration():
    result = evaluate_resume(STUDENT_RESUME, JD)
    assert result.quantification.total_bullets == 3
    assert result.quantification.density == 100
    directive = result.calibration
    assert directive.target_suggestion_count == get_target_suggestion_count(directive.mode)
    assert "quantification" not in directive.focus_areas


def test_explicit_candidate_type_overrides_detection():
    result = evaluate_resume(STUDENT_RESUME, JD, candidate_type="fulltime")
    assert result.detection.candidate_type == "coop"
    assert result.score.candidate_type == "fulltime"
    assert result.order_validation.recommended_order[0] == "summary"


def test_preferences_drive_detection():
    result = evaluate_resume(STUDENT_RESUME, JD, preferences=UserPreferences(job_type="coop"))
    assert result.detection.detected_from == "explicit"
    assert result.detection.confidence == 1.0


def test_supplied_keywords_are_used():
    result = evaluate_resume(
        STUDENT_RESUME, JD,
        keywords=[KeywordMatch(keyword="rust")],
        jd_qualifications=JDQualifications(),
    )
    assert result.score.breakdown["keywords"].details.missing_required == ["rust"]
    assert result.score.breakdown["qualification_fit"].score == 100


def test_empty_resume_degrades_gracefully(caplog):
    with caplog.at_level(logging.WARNING, logger="services.resume_analyzer"):
        result = evaluate_resume("", "")
    assert result.detection.detected_from == "default"
    assert result.quantification.total_bullets == 0
    assert result.structural_suggestions == []
    assert 0 <= result.score.overall <= 100
    assert "No experience or project bullets" in caplog.text


def test_serializes_to_camel_case():
    dumped = evaluate_resume(STUDENT_RESUME, JD).model_dump(by_alias=True)
    assert "orderValidation" in dumped
    assert "targetSuggestionCount" in dumped["calibration"]
    assert dumped["score"]["breakdown"]["keywords"]["weight"] > 0


def test_jd_qualifications():
    quals = extract_jd_qualifications(
        "Bachelor's degree in Computer Science required. 3+ years of experience with Python."
    )
    assert quals.degree_required.level == "bachelor"
    assert quals.degree_required.fields == ["Computer Science"]
    assert quals.experience_required.min_years == 3
    assert extract_jd_qualifications("Friendly team, flexible hours") == JDQualifications()


def test_resume_qualifications():
    sections = build_resume_sections(STUDENT_RESUME)
    quals = extract_resume_qualifications(STUDENT_RESUME, sections)
    assert quals.degree.level == "bachelor"
    assert quals.degree.field == "Computer Science"


def test_missing_keyword_gaps():
    gaps = evaluate_resume(STUDENT_RESUME, JD).gaps
    assert gaps.summary.total_gaps == 1
    gap = gaps.processed_gaps[0]
    assert gap.keyword == "kubernetes"
    assert gap.addressability == "potential"
    assert gap.evidence == "docker"
    assert gap.requirement == "preferred"
