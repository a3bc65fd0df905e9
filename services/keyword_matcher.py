"""Keyword discovery in job descriptions and placement-aware matching in resumes.

Produces the structured keyword list the composite scorer consumes when
no upstream extraction step supplied one: each JD keyword is tagged
required/preferred, then located in the resume with a match type
(exact, synonym-resolved "semantic", or rapidfuzz "fuzzy") and the
highest-value section it appears in.
"""

import logging
import re

from rapidfuzz import fuzz

from models.schemas.scoring import KeywordMatch, MatchType, Placement
from models.schemas.sections import ResumeSections

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Skill synonym mapping: aliases -> canonical form
# "K8s" and "Kubernetes" both resolve to "kubernetes"
# ---------------------------------------------------------------------------
SKILL_SYNONYMS: dict[str, str] = {
    # JavaScript ecosystem
    "js": "javascript", "es6": "javascript",
    "ts": "typescript",
    "react.js": "react", "reactjs": "react",
    "vue.js": "vue", "vuejs": "vue",
    "angularjs": "angular",
    "node": "node.js", "nodejs": "node.js",
    "nextjs": "next.js",
    "expressjs": "express",
    # Python ecosystem
    "python3": "python",
    "sklearn": "scikit-learn",
    "torch": "pytorch",
    # Cloud & DevOps
    "k8s": "kubernetes",
    "amazon web services": "aws",
    "google cloud": "gcp", "google cloud platform": "gcp",
    "microsoft azure": "azure",
    "cicd": "ci/cd",
    "gh actions": "github actions",
    # Databases
    "postgres": "postgresql",
    "mongo": "mongodb",
    "mssql": "sql server",
    # Languages
    "csharp": "c#",
    "cpp": "c++",
    "golang": "go",
    # AI/ML
    "ml": "machine learning",
    "nlp": "natural language processing",
    "genai": "generative ai",
    "large language models": "llm",
    # Methodologies
    "restful": "rest", "rest api": "rest", "rest apis": "rest",
    "agile/scrum": "agile",
}

# Dictionary of recognised technical and professional keywords
COMMON_KEYWORDS = frozenset({
    # Programming languages
    "python", "javascript", "typescript", "java", "c++", "c#", "go", "rust",
    "ruby", "php", "swift", "kotlin", "scala", "matlab", "sql",
    # Frontend
    "react", "react native", "angular", "vue", "svelte", "next.js",
    "html", "css", "tailwind", "webpack",
    # Backend
    "node.js", "express", "fastapi", "django", "flask", "spring", "rails",
    ".net", "graphql", "rest", "grpc",
    # Cloud & DevOps
    "aws", "azure", "gcp", "docker", "kubernetes", "terraform", "ansible",
    "jenkins", "github actions", "ci/cd", "linux",
    # Data
    "postgresql", "mysql", "mongodb", "redis", "elasticsearch", "kafka",
    "spark", "hadoop", "snowflake", "bigquery", "pandas", "numpy",
    # ML/AI
    "machine learning", "deep learning", "tensorflow", "pytorch",
    "natural language processing", "computer vision", "scikit-learn",
    "llm", "generative ai",
    # Methodologies and professional skills
    "agile", "scrum", "kanban", "leadership", "communication",
    "project management", "data structures", "algorithms",
})

# Levenshtein similarity (0-100); 80+ catches "Postgres" -> "PostgreSQL"
FUZZY_THRESHOLD = 80

# Headings that switch the JD into its "nice to have" part, and back
_PREFERRED_HEADING_RE = re.compile(
    r"^\s*(?:preferred|nice[\s-]to[\s-]haves?|bonus(?:\s+points)?|pluses|desired)"
    r"(?:\s+(?:qualifications|skills|requirements|experience))?\s*:?\s*$",
    re.IGNORECASE,
)
_REQUIRED_HEADING_RE = re.compile(
    r"^\s*(?:(?:minimum\s+|basic\s+)?(?:requirements|required(?:\s+(?:qualifications|skills))?|"
    r"qualifications)|must[\s-]haves?|responsibilities|what\s+you(?:'ll)?\s+(?:need|bring|do))"
    r"\s*:?\s*$",
    re.IGNORECASE,
)
_PREFERRED_INLINE_RE = re.compile(r"\b(?:preferred|a plus|nice to have|bonus)\b", re.IGNORECASE)


def _normalize(text: str) -> str:
    # Strip sentence-ending periods but keep dots in tech terms like "node.js"
    text = re.sub(r"\.(\s|$)", " ", text.lower())
    return re.sub(r"[^a-z0-9.#+/ -]", " ", text)


def _canonicalize(term: str) -> str:
    lower = term.lower().strip()
    return SKILL_SYNONYMS.get(lower, lower)


def _extract_terms(text: str) -> set[str]:
    """Single words plus two- and three-word phrases."""
    words = _normalize(text).split()
    terms = set(words)
    for i in range(len(words) - 1):
        terms.add(f"{words[i]} {words[i + 1]}")
    for i in range(len(words) - 2):
        terms.add(f"{words[i]} {words[i + 1]} {words[i + 2]}")
    return terms


def extract_jd_keywords(job_description: str) -> list[tuple[str, str]]:
    """Dictionary keywords in a JD as (keyword, requirement) pairs.

    A keyword is "preferred" when every mention sits under a
    preferred-style heading or on a line marked "preferred"/"a plus".
    """
    required: set[str] = set()
    preferred: set[str] = set()
    in_preferred = False

    for line in job_description.split("\n"):
        if _PREFERRED_HEADING_RE.match(line):
            in_preferred = True
            continue
        if _REQUIRED_HEADING_RE.match(line):
            in_preferred = False
            continue
        canonical = {_canonicalize(t) for t in _extract_terms(line)}
        found = {kw for kw in COMMON_KEYWORDS if kw in canonical}
        if in_preferred or _PREFERRED_INLINE_RE.search(line):
            preferred |= found
        else:
            required |= found

    keywords = [(kw, "required") for kw in sorted(required)]
    keywords += [(kw, "preferred") for kw in sorted(preferred - required)]
    return keywords


def _mention_count(keyword: str, text: str) -> int:
    """Whole-term occurrences; "go" is not counted inside "google"."""
    return len(re.findall(rf"(?<![\w+#.]){re.escape(keyword.lower())}(?![\w+#])", text))


def _match_in(keyword: str, text: str) -> MatchType | None:
    if not text:
        return None
    terms = _extract_terms(text)
    lower = keyword.lower()
    if lower in terms:
        return "exact"
    canonical = _canonicalize(keyword)
    if canonical in {_canonicalize(t) for t in terms}:
        return "semantic"
    if len(canonical) >= 3:
        for term in terms:
            if len(term) >= 3 and fuzz.ratio(canonical, term) >= FUZZY_THRESHOLD:
                return "fuzzy"
    return None


def _placements(sections: ResumeSections, resume_text: str) -> list[tuple[Placement, str]]:
    """Resume regions in descending placement value."""
    return [
        ("skills_section", "\n".join(sections.skills)),
        ("summary", sections.summary or ""),
        ("experience_bullet", "\n".join(sections.experience)),
        ("projects", "\n".join(sections.projects)),
        ("education", sections.education or ""),
        ("other", resume_text),
    ]


def match_keywords(
    keywords: list[tuple[str, str]],
    sections: ResumeSections,
    resume_text: str = "",
    job_description: str = "",
) -> list[KeywordMatch]:
    """Locate each (keyword, requirement) pair in the resume."""
    regions = _placements(sections, resume_text)
    jd_lower = job_description.lower()
    matches = []
    for keyword, requirement in keywords:
        importance = "high" if _mention_count(keyword, jd_lower) >= 2 else "medium"
        if requirement == "preferred":
            importance = "low" if importance == "medium" else "medium"

        match_type, placement, context = None, None, ""
        for region, text in regions:
            match_type = _match_in(keyword, text)
            if match_type:
                placement = region
                context = text[:120]
                break

        matches.append(
            KeywordMatch(
                keyword=keyword,
                importance=importance,
                requirement=requirement,
                found=match_type is not None,
                match_type=match_type,
                placement=placement,
                context=context,
            )
        )

    logger.debug(
        "Matched %d/%d JD keywords", sum(1 for m in matches if m.found), len(matches)
    )
    return matches
