"""Coarse resume signals used for candidate type detection.

Each extractor works on raw text, tolerates missing patterns, and never
raises: text with nothing recognisable yields zero/False.
"""

import re

from models.schemas.candidate import CandidateSignals, JobType
from services.section_parser import DATE_RANGE_RE, current_year

_SEASONS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|Jul(?:y)?|"
    r"Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?|"
    r"Spring|Summer|Fall|Autumn|Winter)"
)
# "Expected May 2026", "Anticipated graduation: 2025", "Expected Graduation",
# but not "exceeded expected revenue in 2019"
_EXPECTED_GRAD_RE = re.compile(
    r"\b(?:expected|anticipated)\b[ \t:,-]*"
    rf"(?:(graduat\w*|completion)|(?:{_SEASONS}\.?[ \t,]*|\d{{1,2}}/)?((?:19|20)\d{{2}})\b)",
    re.IGNORECASE,
)
_CANDIDATE_FOR_RE = re.compile(
    r"\bcandidate\s+for\b[^\n]{0,20}?\b(?:b\.?s|b\.?a|m\.?s|m\.?a|ph\.?d|"
    r"bachelor|master|doctor|associate|degree|diploma)",
    re.IGNORECASE,
)
# "Graduating in May 2027"; "Graduating class of 2012" is in the past
_GRADUATING_RE = re.compile(r"\bgraduating\b[^\n]{0,30}?\b((?:19|20)\d{2})\b", re.IGNORECASE)

# Bare years; "2018-2022" yields both, "03/2018" yields none
_YEAR_RE = re.compile(r"(?<![\d/.])(19[5-9]\d|20\d{2})(?![\d/.])")


def count_distinct_roles(text: str) -> int:
    """Number of distinct date ranges, e.g. "Jan 2020 - Present"."""
    if not text:
        return 0
    ranges = {
        (re.sub(r"\W+", " ", m.group(1)).strip().lower(),
         re.sub(r"\W+", " ", m.group(2)).strip().lower())
        for m in DATE_RANGE_RE.finditer(text)
    }
    return len(ranges)


def has_active_education(text: str) -> bool:
    """True for an in-progress degree: a graduation still to come."""
    if not text:
        return False
    if _CANDIDATE_FOR_RE.search(text):
        return True
    this_year = current_year()
    for m in _EXPECTED_GRAD_RE.finditer(text):
        if m.group(1) or int(m.group(2)) >= this_year:
            return True
    return any(int(m.group(1)) >= this_year for m in _GRADUATING_RE.finditer(text))


def estimate_experience_span(text: str) -> float:
    """Latest minus earliest bare four-digit year in the text.

    Returns 0 when fewer than two distinct years appear.
    """
    if not text:
        return 0.0
    years = {int(y) for y in _YEAR_RE.findall(text)}
    if len(years) < 2:
        return 0.0
    return float(max(years) - min(years))


def extract_candidate_signals(
    text: str,
    user_job_type: JobType | None = None,
    career_goal: str | None = None,
) -> CandidateSignals:
    """Bundle the text-derived signals with the user's stated preferences."""
    return CandidateSignals(
        user_job_type=user_job_type,
        career_goal=career_goal,
        resume_role_count=count_distinct_roles(text),
        has_active_education=has_active_education(text),
        total_experience_years=estimate_experience_span(text),
    )
