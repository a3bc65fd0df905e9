"""Per-section presence and quality scoring against the candidate type's point table.

Sections are scored independently; the overall score is achieved points
over possible points, where only sections that appear in the breakdown
contribute to ``possible``. An optional section that is absent is left out
of the breakdown entirely, so it costs nothing.
"""

import re

from models.schemas.candidate import CandidateType
from models.schemas.sections import (
    EducationQuality,
    EducationQualityBreakdown,
    ResumeSections,
    SectionScoreEntry,
    SectionScoreResult,
)
from services.scoring.constants import (
    EDUCATION_PRESENCE_SHARE,
    EDUCATION_SPARSE_SHARE,
    SECTION_CONFIG,
)

_COURSEWORK_RE = re.compile(r"(?:relevant\s+)?coursework[:\s]+([^.\n]+)", re.IGNORECASE)
_GPA_RE = re.compile(r"gpa[:\s]*(\d+\.?\d*)", re.IGNORECASE)
_ACADEMIC_PROJECT_RE = re.compile(r"capstone|project|thesis|research", re.IGNORECASE)
_HONORS_RE = re.compile(
    r"dean'?s?\s*list|honou?rs?|cum\s*laude|magna|summa|distinction", re.IGNORECASE
)
_LOCATION_RE = re.compile(r"[A-Z][a-z]+,\s*[A-Z]{2}\b")
_EDU_DATE_RE = re.compile(
    r"(?:(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\.?\s+)?\d{4}|expected|graduated",
    re.IGNORECASE,
)

STRONG_GPA = 3.5
EDUCATION_QUALITY_THRESHOLD = 50


def get_section_config(candidate_type: CandidateType):
    try:
        return SECTION_CONFIG[candidate_type]
    except KeyError:
        raise ValueError(f"Unknown candidate type: {candidate_type!r}") from None


def evaluate_education_quality(
    education_text: str,
    jd_keywords: list[str],
    candidate_type: CandidateType,
) -> EducationQuality:
    """Score education content 0-100.

    Coursework, GPA, academic projects and honors weigh more heavily for
    co-op candidates, for whom education is the main credential.
    """
    if not education_text or not education_text.strip():
        return EducationQuality(score=0, suggestions=["Add education section"])

    coursework = _COURSEWORK_RE.search(education_text)
    coursework_match = 0.0
    if coursework and jd_keywords:
        course_text = coursework.group(1).lower()
        matched = [kw for kw in jd_keywords if kw.lower() in course_text]
        coursework_match = min(1.0, len(matched) / min(len(jd_keywords), 10))

    gpa = _GPA_RE.search(education_text)
    gpa_strong = bool(gpa) and float(gpa.group(1)) >= STRONG_GPA

    breakdown = EducationQualityBreakdown(
        has_relevant_coursework=bool(coursework),
        coursework_match_score=round(coursework_match, 2),
        has_gpa=bool(gpa),
        gpa_strong=gpa_strong,
        has_projects=bool(_ACADEMIC_PROJECT_RE.search(education_text)),
        has_honors=bool(_HONORS_RE.search(education_text)),
        has_location=bool(_LOCATION_RE.search(education_text)),
        has_proper_date_format=bool(_EDU_DATE_RE.search(education_text)),
    )

    suggestions: list[str] = []
    if candidate_type == "coop":
        score = (
            (0.3 if breakdown.has_relevant_coursework else 0)
            + coursework_match * 0.25
            + ((0.15 if gpa_strong else 0.08) if breakdown.has_gpa else 0)
            + (0.15 if breakdown.has_projects else 0)
            + (0.1 if breakdown.has_honors else 0)
            + (0.05 if breakdown.has_proper_date_format else 0)
        )
        if not breakdown.has_relevant_coursework:
            suggestions.append("Add relevant coursework matching JD requirements")
        if not breakdown.has_gpa:
            suggestions.append("Add GPA if 3.0+ (critical for co-op applications)")
        if not breakdown.has_projects:
            suggestions.append("Add capstone project or academic projects")
        if not breakdown.has_honors and gpa_strong:
            suggestions.append("Add Dean's List or honors if applicable")
    else:
        # 0.15 base credit for having an education section at all
        score = (
            (0.2 if breakdown.has_relevant_coursework else 0)
            + coursework_match * 0.15
            + (0.15 if gpa_strong else 0)
            + (0.15 if breakdown.has_projects else 0)
            + (0.1 if breakdown.has_honors else 0)
            + (0.1 if breakdown.has_proper_date_format else 0)
            + 0.15
        )

    return EducationQuality(
        score=round(min(1.0, score) * 100),
        breakdown=breakdown,
        suggestions=suggestions,
    )


def _count_entry(
    count: int,
    minimum: int,
    max_points: int,
    short_issue: str,
) -> SectionScoreEntry:
    """Entry for a present section scored by length/item/bullet count."""
    if count >= minimum:
        return SectionScoreEntry(
            present=True, score=max_points, max_points=max_points, meets_threshold=True
        )
    points = max_points * count / minimum
    return SectionScoreEntry(
        present=True,
        score=round(points, 1),
        max_points=max_points,
        meets_threshold=False,
        issues=[short_issue],
    )


def _absent_entry(max_points: int, issue: str) -> SectionScoreEntry:
    return SectionScoreEntry(present=False, score=0, max_points=max_points, issues=[issue])


def calculate_section_score_v21(
    sections: ResumeSections,
    candidate_type: CandidateType = "fulltime",
    jd_keywords: list[str] | None = None,
) -> SectionScoreResult:
    """Score the six resume sections for ``candidate_type``."""
    config = get_section_config(candidate_type)
    jd_keywords = jd_keywords or []
    breakdown: dict[str, SectionScoreEntry] = {}
    education_quality = None

    # Summary
    cfg = config["summary"]
    summary_len = len(sections.summary.strip()) if sections.summary else 0
    if summary_len:
        breakdown["summary"] = _count_entry(
            summary_len, cfg["min_length"], cfg["max_points"],
            f"Summary too short ({summary_len}/{cfg['min_length']} chars)",
        )
    elif cfg["required"]:
        breakdown["summary"] = _absent_entry(cfg["max_points"], "No professional summary section")

    # Skills
    cfg = config["skills"]
    if sections.skills:
        count = len(sections.skills)
        breakdown["skills"] = _count_entry(
            count, cfg["min_items"], cfg["max_points"],
            f"Only {count} skills listed (recommend {cfg['min_items']}+)",
        )
    elif cfg["required"]:
        breakdown["skills"] = _absent_entry(cfg["max_points"], "No skills section")

    # Experience; co-op candidates may substitute enough project work
    cfg = config["experience"]
    projects_cfg = config["projects"]
    experience_required = cfg["required"] or (
        candidate_type == "coop" and len(sections.projects) < projects_cfg["min_bullets"]
    )
    if sections.experience:
        count = len(sections.experience)
        breakdown["experience"] = _count_entry(
            count, cfg["min_bullets"], cfg["max_points"],
            f"Only {count} experience bullets (recommend {cfg['min_bullets']}+)",
        )
    elif experience_required:
        breakdown["experience"] = _absent_entry(cfg["max_points"], "No experience section")

    # Education, weighted by content quality
    cfg = config["education"]
    education = sections.education.strip() if sections.education else ""
    if len(education) >= cfg["min_length"]:
        education_quality = evaluate_education_quality(education, jd_keywords, candidate_type)
        share = EDUCATION_PRESENCE_SHARE + (1 - EDUCATION_PRESENCE_SHARE) * education_quality.score / 100
        breakdown["education"] = SectionScoreEntry(
            present=True,
            score=round(cfg["max_points"] * share, 1),
            max_points=cfg["max_points"],
            meets_threshold=education_quality.score >= EDUCATION_QUALITY_THRESHOLD,
            issues=education_quality.suggestions,
            quality_score=education_quality.score,
        )
    elif education:
        breakdown["education"] = SectionScoreEntry(
            present=True,
            score=round(cfg["max_points"] * EDUCATION_SPARSE_SHARE, 1),
            max_points=cfg["max_points"],
            issues=["Education section is sparse - add coursework, GPA, or projects"],
        )
    elif cfg["required"]:
        breakdown["education"] = _absent_entry(cfg["max_points"], "No education section")

    # Projects
    cfg = projects_cfg
    if sections.projects:
        count = len(sections.projects)
        breakdown["projects"] = _count_entry(
            count, cfg["min_bullets"], cfg["max_points"],
            f"Only {count} project entries (recommend {cfg['min_bullets']}+)",
        )
    elif cfg["required"]:
        issue = "No projects section (important for co-op)" if candidate_type == "coop" else "No projects section"
        breakdown["projects"] = _absent_entry(cfg["max_points"], issue)

    # Certifications only ever add points
    cfg = config["certifications"]
    if len(sections.certifications) >= cfg["min_items"]:
        breakdown["certifications"] = SectionScoreEntry(
            present=True, score=cfg["max_points"], max_points=cfg["max_points"], meets_threshold=True
        )

    achieved = sum(entry.score for entry in breakdown.values())
    possible = sum(entry.max_points for entry in breakdown.values())
    score = round(achieved / possible * 100) if possible else 0

    return SectionScoreResult(score=score, breakdown=breakdown, education_quality=education_quality)


def generate_section_action_items(result: SectionScoreResult) -> list[tuple[str, str]]:
    """(priority, message) pairs: missing sections are high, thin ones medium."""
    items = []
    for entry in result.breakdown.values():
        if entry.issues and not entry.meets_threshold:
            items.append(("medium" if entry.present else "high", entry.issues[0]))
    return items
