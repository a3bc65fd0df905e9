"""Resume section segmentation, bullet extraction, and contact/date helpers."""

import re
from datetime import datetime

from config import settings
from models.schemas.sections import ResumeSections

# Section header patterns and their canonical names
SECTION_PATTERNS: dict[str, list[str]] = {
    "experience": [
        r"(?:work|professional|employment|relevant)\s*(?:experience|history)",
        r"experience",
        r"employment",
        r"career\s*(?:history|path)",
        r"(?:positions?\s*held|roles)",
        r"track\s+record",
        r"my\s+journey",
        r"what\s+i'?ve\s+done",
    ],
    "education": [
        r"education(?:al)?\s*(?:background|qualifications|history)?",
        r"academic\s*(?:background|qualifications)",
        r"learning",
        r"where\s+i\s+studied",
    ],
    "skills": [
        r"(?:technical|core|key|professional)?\s*skills",
        r"(?:technical|core)?\s*(?:competencies|proficiencies|expertise)",
        r"technologies",
        r"(?:technical\s+|tech\s+)?(?:stack|toolkit|tooling)",
        r"my\s+toolkit",
        r"what\s+i\s+know",
        r"(?:programming\s+)?languages",
    ],
    "summary": [
        r"(?:professional|executive|career)?\s*summary",
        r"(?:career|professional)?\s*objective",
        r"profile",
        r"about\s*me",
        r"who\s+i\s+am",
    ],
    "projects": [
        r"(?:key|notable|selected|personal|academic)?\s*projects?",
        r"project\s+experience",
        r"portfolio",
        r"things\s+i'?ve\s+built",
        r"my\s+work",
    ],
    "certifications": [
        r"certific(?:ations?|ates?)",
        r"licen[sc]es?\s*(?:&|and)?\s*certific(?:ations?|ates?)",
    ],
    "achievements": [
        r"(?:key\s+)?achievements?",
        r"(?:awards?|honors?|accomplishments)",
    ],
}

# Compile all patterns into a single regex per section
_COMPILED: dict[str, re.Pattern] = {}
for section, patterns in SECTION_PATTERNS.items():
    combined = "|".join(patterns)
    _COMPILED[section] = re.compile(
        rf"^\s*(?:{combined})\s*:?\s*$", re.IGNORECASE | re.MULTILINE
    )

# Contact info patterns
EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+")
PHONE_RE = re.compile(
    r"(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}|\+\d{1,3}[-.\s]?\d{6,14}"
)
LINKEDIN_RE = re.compile(r"linkedin\.com/in/[\w-]+", re.IGNORECASE)
GITHUB_RE = re.compile(r"github\.com/[\w-]+", re.IGNORECASE)

# "- item", "• item", "●item", "1. item", "2) item"; markers never span lines
BULLET_RE = re.compile(
    r"^[ \t]*(?:[-*][ \t]+|[•▪▸►○◦◇·‣⁃∙✦✧◆◈■□●―–][ \t]*|\d+[.)][ \t]+)(\S.*?)[ \t\r]*$",
    re.MULTILINE,
)
# Bullets must be longer than this
MIN_BULLET_LENGTH = 10

_SKILL_SPLIT_RE = re.compile(r"[,|;•\n]+|\s+·\s+")


def _match_heading(line: str) -> str | None:
    stripped = line.strip()
    if not stripped:
        return None
    for section_name, pattern in _COMPILED.items():
        if pattern.match(stripped):
            return section_name
    return None


def parse_sections(text: str) -> dict[str, str]:
    """Split resume text into named sections.

    Returns a dict mapping section name -> section text content.
    Unmatched text at the top goes into 'header'. A repeated heading
    appends to the earlier section.
    """
    sections: dict[str, str] = {}
    current_section = "header"
    current_lines: list[str] = []

    def _flush():
        content = "\n".join(current_lines).strip()
        if not content:
            return
        if current_section in sections:
            sections[current_section] += "\n" + content
        else:
            sections[current_section] = content

    for line in text.split("\n"):
        matched_section = _match_heading(line)
        if matched_section:
            _flush()
            current_section = matched_section
            current_lines = []
        else:
            current_lines.append(line)

    _flush()
    return sections


def detect_section_order(text: str) -> list[str]:
    """Canonical section names in the order their headings appear."""
    order: list[str] = []
    for line in text.split("\n"):
        name = _match_heading(line)
        if name and name not in order:
            order.append(name)
    return order


def extract_bullets(text: str, min_length: int = MIN_BULLET_LENGTH) -> list[str]:
    """Bullet-marked lines with their markers stripped.

    Falls back to non-empty lines when the text has no bullet markers,
    so paragraph-style entries still count.
    """
    if not text:
        return []
    bullets = [m.group(1) for m in BULLET_RE.finditer(text)]
    if not bullets:
        bullets = [line.strip() for line in text.split("\n")]
    return [b for b in bullets if len(b) > min_length]


def split_skills(text: str) -> list[str]:
    """Split a skills block into individual items."""
    if not text:
        return []
    items = []
    for raw in _SKILL_SPLIT_RE.split(text):
        item = raw.strip().lstrip("-*▪").strip()
        # "Languages: Python, Go" -> "Python"
        if ":" in item:
            item = item.split(":", 1)[1].strip()
        if item and item.lower() not in (i.lower() for i in items):
            items.append(item)
    return items


def build_resume_sections(text: str) -> ResumeSections:
    """Parse raw resume text into structured sections."""
    parsed = parse_sections(text)
    certifications = parsed.get("certifications", "")
    return ResumeSections(
        summary=parsed.get("summary") or None,
        skills=split_skills(parsed.get("skills", "")),
        experience=extract_bullets(parsed.get("experience", "")),
        education=parsed.get("education") or None,
        projects=extract_bullets(parsed.get("projects", "")),
        certifications=[
            line.strip(" -•*\t") for line in certifications.split("\n") if line.strip(" -•*\t")
        ],
    )


def extract_contact_info(text: str) -> dict[str, str | None]:
    """Extract contact information from resume text."""
    email_match = EMAIL_RE.search(text)
    phone_match = PHONE_RE.search(text)
    linkedin_match = LINKEDIN_RE.search(text)
    github_match = GITHUB_RE.search(text)

    return {
        "email": email_match.group() if email_match else None,
        "phone": phone_match.group().strip() if phone_match else None,
        "linkedin": linkedin_match.group() if linkedin_match else None,
        "github": github_match.group() if github_match else None,
    }


# ---------------------------------------------------------------------------
# Experience duration extraction
# ---------------------------------------------------------------------------

# "5+ years of experience" or "3 years experience in Python"
EXP_YEARS_RE = re.compile(
    r"(\d+)\+?\s*(?:years?|yrs?)\s*(?:of\s+)?(?:\w+\s+){0,3}?(?:experience|exp\b)",
    re.IGNORECASE,
)

# Date ranges: "Jan 2019 - Present", "2020 - 2023", "03/2018 to 11/2022"
_MONTHS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|"
    r"Jul(?:y)?|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
_DATE = rf"(?:{_MONTHS}\.?[ \t]*\d{{4}}|\d{{1,2}}/\d{{4}}|\d{{4}})"
DATE_RANGE_RE = re.compile(
    rf"\b({_DATE})"
    r"[ \t]*(?:-|–|—|to)[ \t]*"
    rf"({_DATE}|[Pp]resent|[Cc]urrent|[Nn]ow)\b",
    re.IGNORECASE,
)

_MONTH_MAP = {
    "jan": 1, "january": 1, "feb": 2, "february": 2, "mar": 3, "march": 3,
    "apr": 4, "april": 4, "may": 5, "jun": 6, "june": 6,
    "jul": 7, "july": 7, "aug": 8, "august": 8, "sep": 9, "sept": 9,
    "september": 9, "oct": 10, "october": 10, "nov": 11, "november": 11,
    "dec": 12, "december": 12,
}


def current_year() -> int:
    """The year "Present" resolves to: ``settings.reference_year`` when set."""
    return settings.reference_year or datetime.now().year


def _parse_date(date_str: str) -> tuple[int, int]:
    """Parse a date string into (year, month). Returns (year, 1) if month not found."""
    date_str = date_str.strip().rstrip(".")
    if date_str.lower() in ("present", "current", "now"):
        if settings.reference_year:
            return settings.reference_year, 12
        now = datetime.now()
        return now.year, now.month

    # "03/2020"
    if "/" in date_str:
        month, _, year = date_str.partition("/")
        if month.isdigit() and year.isdigit() and 1 <= int(month) <= 12:
            return int(year), int(month)
        return 0, 0

    # "Month Year"
    parts = date_str.split()
    if len(parts) == 2:
        month_str = parts[0].lower().rstrip(".")
        if month_str in _MONTH_MAP and parts[1].isdigit():
            return int(parts[1]), _MONTH_MAP[month_str]

    if date_str.isdigit():
        year = int(date_str)
        if 1970 <= year <= 2100:
            return year, 1

    return 0, 0


def extract_experience_years(text: str) -> float:
    """Extract total years of experience from resume text.

    Uses two strategies and returns the higher estimate:
    1. Explicit claims: "5+ years of experience"
    2. Date range calculation: sum of all role date ranges
    """
    explicit_years = 0.0
    for match in EXP_YEARS_RE.finditer(text):
        years = int(match.group(1))
        if years > explicit_years:
            explicit_years = float(years)

    total_months = 0
    for match in DATE_RANGE_RE.finditer(text):
        start_year, start_month = _parse_date(match.group(1))
        end_year, end_month = _parse_date(match.group(2))
        if start_year > 0 and end_year > 0:
            months = (end_year - start_year) * 12 + (end_month - start_month)
            if 0 < months < 600:  # < 50 years
                total_months += months

    date_years = round(total_months / 12, 1) if total_months > 0 else 0.0
    return max(explicit_years, date_years)


def extract_required_years(job_description: str) -> float:
    """Extract required years of experience from a job description."""
    best = 0.0
    for match in EXP_YEARS_RE.finditer(job_description):
        years = float(match.group(1))
        if years > best:
            best = years
    return best


# ---------------------------------------------------------------------------
# Education level detection
# ---------------------------------------------------------------------------

DEGREE_PATTERNS: dict[str, list[str]] = {
    "phd": [
        r"ph\.?d", r"doctorate", r"doctoral", r"doctor of philosophy",
    ],
    "master": [
        r"m\.?s\.?", r"m\.?sc\.?", r"m\.?eng", r"m\.?tech", r"mba",
        r"m\.?a\.?(?:\s|$)", r"master(?:'?s)?",
    ],
    "bachelor": [
        r"b\.?s\.?", r"b\.?sc\.?", r"b\.?tech", r"b\.?a\.?(?:\s|$)",
        r"bachelor(?:'?s)?", r"b\.?eng",
    ],
    "associate": [
        r"a\.s\b", r"a\.a\b", r"associate(?:'?s)?",
    ],
    "high_school": [
        r"high\s+school", r"ged", r"secondary\s+school",
    ],
}

_DEGREE_COMPILED: dict[str, re.Pattern] = {}
for _level, _patterns in DEGREE_PATTERNS.items():
    _combined = "|".join(_patterns)
    _DEGREE_COMPILED[_level] = re.compile(
        rf"\b(?:{_combined})\b", re.IGNORECASE
    )

# Order matters: check highest first
_DEGREE_PRIORITY = ["phd", "master", "bachelor", "associate", "high_school"]

# "in Computer Science", "of Science in Data Science", "B.S. Computer Science"
_DEGREE_FIELD_RE = re.compile(
    r"(?:\b(?:in|of)|\b[BM]\.?(?:S|A|Sc|Eng)\.?,?)"
    r"\s+((?:[A-Z][\w&]*|and|of)(?:\s+(?:[A-Z][\w&]*|and|of))*)"
)


def extract_education_level(text: str) -> str:
    """Detect the highest education level mentioned in text.

    Returns one of: 'phd', 'master', 'bachelor', 'associate',
    'high_school', or '' if none found.
    """
    for level in _DEGREE_PRIORITY:
        if _DEGREE_COMPILED[level].search(text):
            return level
    return ""


def extract_degree_field(text: str) -> str:
    """Best-effort field of study, e.g. 'Computer Science'."""
    fields = [
        m.group(1) for m in _DEGREE_FIELD_RE.finditer(text)
        if m.group(1) not in ("Science", "Arts")
    ]
    return fields[0] if fields else ""
