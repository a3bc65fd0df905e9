"""ATS format checks on raw resume text.

Starts from a perfect score and applies fixed deductions for missing
contact details, unparseable dates, missing headers or bullets, length
problems and outdated conventions, with small bonuses for LinkedIn and
GitHub profiles.
"""

import re

from models.schemas.scoring import FormatScoreResult
from services.scoring.constants import MODERN_FORMAT_SIGNALS, OUTDATED_FORMATS
from services.section_parser import BULLET_RE, extract_contact_info

_MONTH_YEAR_RE = re.compile(
    r"\b(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|Jul(?:y)?|"
    r"Aug(?:ust)?|Sep(?:tember)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)\s+\d{4}\b",
    re.IGNORECASE,
)
_NUMERIC_DATE_RE = re.compile(r"\b\d{1,2}/\d{4}\b")
_YEAR_RANGE_RE = re.compile(r"\b\d{4}\s*[-–—]\s*(?:\d{4}|Present|Current|Now)\b", re.IGNORECASE)

_HEADER_RES = (
    re.compile(r"\b(?:experience|work\s*experience|employment|professional\s*experience)\b", re.I),
    re.compile(r"\b(?:education|academic)\b", re.I),
    re.compile(r"\b(?:skills|technical\s*skills|core\s*competencies)\b", re.I),
    re.compile(r"\b(?:summary|profile|professional\s*summary)\b", re.I),
)
_COMPLEX_LAYOUT_RE = re.compile(r"\t{2,}|\|.*\|.*\|")

MIN_WORDS = 200
MAX_WORDS = 1000

DEDUCTIONS = {
    "email": 0.10,
    "phone": 0.05,
    "dates": 0.10,
    "headers": 0.08,
    "bullets": 0.07,
    "too_short": 0.12,
    "too_long": 0.05,
    "objective": 0.10,
    "references": 0.05,
    "complex_layout": 0.05,
}
BONUSES = {"linkedin": 0.03, "github": 0.02}


def calculate_format_score(
    resume_text: str,
    has_experience: bool = False,
    has_summary: bool = False,
) -> FormatScoreResult:
    score = 1.0
    issues: list[str] = []
    warnings: list[str] = []

    contact = extract_contact_info(resume_text)
    has_email = contact["email"] is not None
    has_phone = contact["phone"] is not None
    if not has_email:
        score -= DEDUCTIONS["email"]
        issues.append("No email address detected")
    if not has_phone:
        score -= DEDUCTIONS["phone"]
        warnings.append("No phone number detected")

    has_linkedin = bool(MODERN_FORMAT_SIGNALS["linkedin"].search(resume_text))
    has_github = bool(MODERN_FORMAT_SIGNALS["github"].search(resume_text))
    if has_linkedin:
        score += BONUSES["linkedin"]
    if has_github:
        score += BONUSES["github"]

    date_count = sum(
        len(p.findall(resume_text)) for p in (_MONTH_YEAR_RE, _NUMERIC_DATE_RE, _YEAR_RANGE_RE)
    )
    has_dates = date_count >= 2
    if not has_dates and has_experience:
        score -= DEDUCTIONS["dates"]
        issues.append("Few or no parseable date formats found")

    headers_found = sum(1 for p in _HEADER_RES if p.search(resume_text))
    if headers_found < 3:
        score -= DEDUCTIONS["headers"]
        warnings.append(f"Only {headers_found} standard section headers detected")

    has_bullets = bool(BULLET_RE.search(resume_text))
    if not has_bullets and has_experience:
        score -= DEDUCTIONS["bullets"]
        warnings.append("No clear bullet point structure detected")

    word_count = len(resume_text.split())
    appropriate_length = True
    if word_count < MIN_WORDS:
        score -= DEDUCTIONS["too_short"]
        appropriate_length = False
        issues.append(f"Resume too sparse ({word_count} words, recommend 300+)")
    elif word_count > MAX_WORDS:
        score -= DEDUCTIONS["too_long"]
        appropriate_length = False
        warnings.append(f"Resume may be too long ({word_count} words, recommend under 800)")

    no_outdated = True
    if OUTDATED_FORMATS["objective"].search(resume_text) and not has_summary:
        score -= DEDUCTIONS["objective"]
        no_outdated = False
        issues.append('"Objective" section is outdated - use "Professional Summary" instead')
    if OUTDATED_FORMATS["references"].search(resume_text):
        score -= DEDUCTIONS["references"]
        no_outdated = False
        warnings.append('"References available upon request" is outdated - remove this line')

    if _COMPLEX_LAYOUT_RE.search(resume_text):
        score -= DEDUCTIONS["complex_layout"]
        warnings.append("Complex formatting detected (tables/columns may cause parsing issues)")

    return FormatScoreResult(
        score=round(max(0.0, min(1.0, score)) * 100),
        has_email=has_email,
        has_phone=has_phone,
        has_linkedin=has_linkedin,
        has_github=has_github,
        has_parseable_dates=has_dates,
        has_section_headers=headers_found >= 3,
        has_bullet_structure=has_bullets,
        appropriate_length=appropriate_length,
        no_outdated_formats=no_outdated,
        issues=issues,
        warnings=warnings,
    )


def generate_format_action_items(result: FormatScoreResult) -> list[tuple[str, str]]:
    return [("high", i) for i in result.issues] + [("low", w) for w in result.warnings]
