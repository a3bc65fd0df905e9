"""Scoring tables keyed by candidate type, plus shared pattern lists.

Every table here is read-only after import. Numeric values are tuned
defaults; adjust them here rather than inside the scorers.
"""

import re
from types import MappingProxyType

ALGORITHM_VERSION = "v2.1.0-2026.01"

CANDIDATE_TYPES = ("coop", "fulltime", "career_changer")

SECTION_NAMES = (
    "summary",
    "skills",
    "experience",
    "education",
    "projects",
    "certifications",
)


def _frozen(table: dict) -> MappingProxyType:
    return MappingProxyType(
        {k: MappingProxyType(v) if isinstance(v, dict) else v for k, v in table.items()}
    )


# ---------------------------------------------------------------------------
# Section configuration
# ---------------------------------------------------------------------------

# Per type: {section: {required, min_length|min_items|min_bullets, max_points}}
SECTION_CONFIG: MappingProxyType = MappingProxyType({
    "coop": _frozen({
        "summary": {"required": False, "min_length": 50, "max_points": 15},
        "skills": {"required": True, "min_items": 8, "max_points": 25},
        "experience": {"required": False, "min_bullets": 3, "max_points": 20},
        "education": {"required": True, "min_length": 30, "max_points": 25},
        "projects": {"required": True, "min_bullets": 2, "max_points": 20},
        "certifications": {"required": False, "min_items": 1, "max_points": 10},
    }),
    "fulltime": _frozen({
        "summary": {"required": True, "min_length": 50, "max_points": 15},
        "skills": {"required": True, "min_items": 8, "max_points": 25},
        "experience": {"required": True, "min_bullets": 6, "max_points": 30},
        "education": {"required": True, "min_length": 30, "max_points": 15},
        "projects": {"required": False, "min_bullets": 2, "max_points": 10},
        "certifications": {"required": False, "min_items": 1, "max_points": 10},
    }),
    "career_changer": _frozen({
        "summary": {"required": True, "min_length": 80, "max_points": 20},
        "skills": {"required": True, "min_items": 8, "max_points": 25},
        "experience": {"required": True, "min_bullets": 4, "max_points": 20},
        "education": {"required": True, "min_length": 30, "max_points": 20},
        "projects": {"required": True, "min_bullets": 2, "max_points": 15},
        "certifications": {"required": False, "min_items": 1, "max_points": 10},
    }),
})

# Education: presence earns 40% of the points, quality the remaining 60%
EDUCATION_PRESENCE_SHARE = 0.4
EDUCATION_SPARSE_SHARE = 0.3


# ---------------------------------------------------------------------------
# Composite weights
# ---------------------------------------------------------------------------

COMPONENTS = ("keywords", "qualification_fit", "content_quality", "sections", "format")

WEIGHT_PROFILES: MappingProxyType = MappingProxyType({
    "coop": MappingProxyType({
        "keywords": 0.42, "qualification_fit": 0.10, "content_quality": 0.18,
        "sections": 0.20, "format": 0.10,
    }),
    "fulltime": MappingProxyType({
        "keywords": 0.40, "qualification_fit": 0.15, "content_quality": 0.20,
        "sections": 0.15, "format": 0.10,
    }),
    "career_changer": MappingProxyType({
        "keywords": 0.40, "qualification_fit": 0.14, "content_quality": 0.18,
        "sections": 0.18, "format": 0.10,
    }),
})

# Fulltime profile overrides selected by job-description seniority
SENIORITY_PROFILES: MappingProxyType = MappingProxyType({
    "entry": WEIGHT_PROFILES["coop"],
    "senior": MappingProxyType({
        "keywords": 0.35, "qualification_fit": 0.20, "content_quality": 0.25,
        "sections": 0.10, "format": 0.10,
    }),
})

# (component gaining weight, component losing weight, delta)
ROLE_WEIGHT_SHIFTS: MappingProxyType = MappingProxyType({
    "designer": ("format", "keywords", 0.05),
    "software_engineer": ("keywords", "sections", 0.03),
    "data_scientist": ("keywords", "sections", 0.03),
})

ROLE_PATTERNS: tuple[tuple[str, re.Pattern], ...] = (
    ("software_engineer", re.compile(
        r"software\s+engineer|developer|frontend|backend|full\s*stack|\bswe\b", re.I)),
    ("data_scientist", re.compile(
        r"data\s+scientist|machine\s+learning|ml\s+engineer|ai\s+engineer", re.I)),
    ("data_analyst", re.compile(
        r"data\s+analyst|business\s+analyst|\banalytics\b|bi\s+analyst", re.I)),
    ("product_manager", re.compile(
        r"product\s+manager|program\s+manager|project\s+manager|\bpm\b", re.I)),
    ("designer", re.compile(r"designer|\bux\b|\bui\b|user\s+experience", re.I)),
    ("marketing", re.compile(r"marketing|growth|content\s+(?:manager|strategist)", re.I)),
    ("finance", re.compile(r"finance|accounting|financial\s+analyst", re.I)),
    ("operations", re.compile(r"operations|supply\s+chain|logistics", re.I)),
)

# Checked top to bottom; first hit wins
SENIORITY_PATTERNS: tuple[tuple[str, re.Pattern], ...] = (
    ("executive", re.compile(r"\b(?:director|vp|vice\s+president|head\s+of|chief|principal)\b", re.I)),
    ("senior", re.compile(r"\b(?:senior|sr\.?|lead|staff)\b", re.I)),
    ("entry", re.compile(r"\b(?:junior|jr\.?|entry|associate|intern|co-?op)\b", re.I)),
    ("senior", re.compile(r"\b(?:7\+?\s*years?|10\+?\s*years?)", re.I)),
    ("mid", re.compile(r"\b(?:3-?5\s*years?|5\+?\s*years?)", re.I)),
    ("entry", re.compile(r"\b(?:0-?2\s*years?|1-?3\s*years?|entry\s*level)", re.I)),
)

TIER_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (85, "Excellent"),
    (70, "Strong"),
    (55, "Competitive"),
)

PRIORITY_ORDER = MappingProxyType({"critical": 0, "high": 1, "medium": 2, "low": 3})


# ---------------------------------------------------------------------------
# Keyword scoring
# ---------------------------------------------------------------------------

IMPORTANCE_WEIGHTS = MappingProxyType({"high": 1.0, "medium": 0.6, "low": 0.3})
MATCH_TYPE_WEIGHTS = MappingProxyType({"exact": 1.0, "fuzzy": 0.85, "semantic": 0.65})
PLACEMENT_WEIGHTS = MappingProxyType({
    "skills_section": 1.0,
    "summary": 0.90,
    "experience_bullet": 0.85,
    "experience_paragraph": 0.70,
    "education": 0.80,
    "projects": 0.85,
    "other": 0.65,
})
MISSING_REQUIRED_PENALTY = 0.12
MIN_PENALTY_MULTIPLIER = 0.30
PREFERRED_BONUS_CAP = 0.25


# ---------------------------------------------------------------------------
# Qualification fit
# ---------------------------------------------------------------------------

DEGREE_LEVELS = MappingProxyType({
    "high_school": 1,
    "associate": 2,
    "bachelor": 3,
    "master": 4,
    "phd": 5,
})

DEGREE_FIELD_MATCHES = MappingProxyType({
    "computer_science": ("computer science", "cs", "computing", "computational"),
    "software_engineering": ("software engineering", "software development"),
    "information_technology": ("information technology", "it", "information systems", "mis"),
    "engineering": ("engineering", "electrical engineering", "computer engineering"),
    "related": ("mathematics", "math", "physics", "data science", "statistics"),
})

QUALIFICATION_WEIGHTS = MappingProxyType({"degree": 0.4, "experience": 0.4, "certifications": 0.2})
CERTIFICATION_FUZZY_THRESHOLD = 90


# ---------------------------------------------------------------------------
# Content quality
# ---------------------------------------------------------------------------

CONTENT_QUALITY_WEIGHTS = MappingProxyType({
    "quantification": 0.35,
    "action_verbs": 0.30,
    "keyword_density": 0.35,
})

STRONG_ACTION_VERBS = frozenset({
    "led", "directed", "managed", "supervised", "headed", "oversaw",
    "coordinated", "orchestrated", "spearheaded", "championed",
    "achieved", "accomplished", "delivered", "exceeded", "surpassed",
    "attained", "earned", "won", "secured",
    "grew", "increased", "expanded", "scaled", "accelerated",
    "boosted", "elevated", "enhanced", "maximized", "optimized",
    "built", "created", "developed", "designed", "established",
    "founded", "launched", "initiated", "pioneered", "introduced",
    "improved", "streamlined", "transformed", "revamped", "modernized",
    "upgraded", "refined", "restructured", "reengineered",
    "solved", "resolved", "fixed", "addressed", "eliminated",
    "reduced", "minimized", "prevented", "mitigated",
    "drove", "generated", "produced", "saved", "cut",
    "recovered", "captured", "negotiated", "influenced",
    "implemented", "architected", "engineered", "automated",
    "integrated", "deployed", "migrated", "configured",
})

MODERATE_ACTION_VERBS = frozenset({
    "contributed", "collaborated", "partnered", "coordinated", "facilitated",
    "supported", "assisted", "participated", "engaged",
    "managed", "maintained", "handled", "processed", "performed",
    "conducted", "completed", "prepared", "organized", "documented",
    "wrote", "tested", "reviewed", "updated", "modified",
})

WEAK_ACTION_VERBS = frozenset({
    "helped", "assisted", "supported", "participated", "contributed",
    "worked", "was", "had", "did", "made",
    "handled", "dealt", "used", "involved", "responsible",
    "tried", "attempted", "learned", "studied", "observed",
    "watched", "saw", "knew", "understood", "familiarized",
})

WEAK_VERB_PHRASES = (
    "was responsible for",
    "was involved in",
    "dealt with",
    "tasked with",
    "in charge of",
    "looked after",
)

# (pattern, tier, kind), high tier first
QUANTIFICATION_TIERS: tuple[tuple[re.Pattern, str, str], ...] = (
    (re.compile(r"\$[\d,]+(?:\.\d+)?[MBT]", re.I), "high", "currency"),
    (re.compile(r"\b9\d(?:\.\d+)?%"), "high", "percentage"),
    (re.compile(r"\b\d{2,}x\b", re.I), "high", "multiplier"),
    (re.compile(r"\b\d{1,3}(?:,\d{3}){2,}\+?"), "high", "count"),
    (re.compile(r"team\s+of\s+\d{2,}", re.I), "high", "scale"),
    (re.compile(r"\b\d+\s*(?:countries|regions|markets)\b", re.I), "high", "scale"),
    (re.compile(r"\$[\d,]+(?:\.\d+)?K", re.I), "medium", "currency"),
    (re.compile(r"\b[5-8]\d%"), "medium", "percentage"),
    (re.compile(r"\b[2-9]x\b", re.I), "medium", "multiplier"),
    (re.compile(r"\b\d{1,3},\d{3}\+?\s*(?:users?|customers?|requests?)", re.I), "medium", "count"),
    (re.compile(r"team\s+of\s+\d", re.I), "medium", "scale"),
    (re.compile(r"\$[\d,]+(?:\.\d+)?(?!\d)"), "low", "currency"),
    (re.compile(r"\b[1-4]?\d%"), "low", "percentage"),
    (re.compile(r"\b\d+\+?\s*(?:users?|customers?|clients?)", re.I), "low", "count"),
)

TIER_POINTS = MappingProxyType({"high": 1.0, "medium": 0.7, "low": 0.4})


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

OUTDATED_FORMATS = MappingProxyType({
    "objective": re.compile(r"\b(?:objective|career\s+objective)\s*[:|\n]", re.I),
    "references": re.compile(r"\breferences\s+(?:available\s+)?(?:upon|on)\s+request\b", re.I),
})

MODERN_FORMAT_SIGNALS = MappingProxyType({
    "linkedin": re.compile(r"linkedin\.com/in/", re.I),
    "github": re.compile(r"github\.com/", re.I),
})


# ---------------------------------------------------------------------------
# Section order and headings
# ---------------------------------------------------------------------------

RECOMMENDED_ORDER: MappingProxyType = MappingProxyType({
    "coop": ("skills", "education", "projects", "experience", "certifications"),
    "fulltime": ("summary", "skills", "experience", "projects", "education", "certifications"),
    "career_changer": ("summary", "skills", "education", "projects", "experience", "certifications"),
})

UNSAFE_HEADINGS = MappingProxyType({
    "my journey": "Professional Experience",
    "track record": "Professional Experience",
    "career path": "Professional Experience",
    "what i've done": "Professional Experience",
    "what i know": "Technical Skills",
    "my toolkit": "Technical Skills",
    "tech stack": "Technical Skills",
    "learning": "Education",
    "where i studied": "Education",
    "things i've built": "Projects",
    "my work": "Projects",
    "about me": "Professional Summary",
    "who i am": "Professional Summary",
})
HEADING_FUZZY_THRESHOLD = 90


# ---------------------------------------------------------------------------
# Calibration
# ---------------------------------------------------------------------------

SUGGESTION_MODES = ("Transformation", "Improvement", "Optimization", "Validation")

# (upper bound exclusive, mode)
MODE_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (30, "Transformation"),
    (50, "Improvement"),
    (70, "Optimization"),
)

TARGET_COUNT_RANGES = MappingProxyType({
    "Transformation": (8, 12),
    "Improvement": (5, 8),
    "Optimization": (3, 5),
    "Validation": (1, 2),
})

EXPERIENCE_LEVELS = ("student", "career_changer", "experienced")

FOCUS_AREAS_BY_EXPERIENCE = MappingProxyType({
    "student": ("quantification_projects", "academic_framing", "gpa_guidance", "skill_expansion"),
    "career_changer": ("skill_mapping", "transferable_language", "bridge_statements", "section_reordering"),
    "experienced": ("leadership_language", "scope_amplification", "metric_enhancement", "format_polish"),
})

VALIDATION_MIN_SCORE = 85
VALIDATION_MIN_DENSITY = 80
VALIDATION_MAX_MISSING = 1
ESCALATION_MAX_DENSITY = 30
ESCALATION_MIN_MISSING = 5

SUGGESTION_MODE_DESCRIPTIONS = MappingProxyType({
    "Transformation": "Your resume needs significant improvements to be competitive. Focus on major changes.",
    "Improvement": "Your resume has a solid foundation. Let's address the key gaps.",
    "Optimization": "Your resume is strong. Let's refine it for maximum impact.",
    "Validation": "Your resume is excellent. Here are a few refinements to consider.",
})

FOCUS_AREA_DESCRIPTIONS = MappingProxyType({
    "keywords": "Closing job description keyword gaps",
    "quantification": "Adding measurable results",
    "structure": "Restructuring sections",
    "validation": "Confirming the resume is ready to send",
    "quantification_projects": "Adding metrics to project work",
    "academic_framing": "Framing academic work professionally",
    "gpa_guidance": "Strategically using GPA",
    "skill_expansion": "Expanding technical skills",
    "skill_mapping": "Mapping skills to target role",
    "transferable_language": "Using transferable skill language",
    "bridge_statements": "Creating career transition bridges",
    "section_reordering": "Reorganizing resume sections",
    "leadership_language": "Emphasizing leadership and scope",
    "scope_amplification": "Highlighting impact and scope",
    "metric_enhancement": "Strengthening metrics and numbers",
    "format_polish": "Refining presentation and conciseness",
})

# ---------------------------------------------------------------------------
# Gap addressability
# ---------------------------------------------------------------------------

# JD keyword -> resume wordings that mean the same thing
TERMINOLOGY_MAPPINGS = MappingProxyType({
    "rest": ("rest api", "rest apis", "restful api", "restful apis", "rest services", "api development"),
    "sql": ("mysql", "postgresql", "database", "databases", "rdbms"),
    "nosql": ("mongodb", "dynamodb", "cassandra", "document database"),
    "agile": ("scrum", "sprint", "sprints", "kanban", "agile methodologies"),
    "problem-solving": ("problem solving", "troubleshooting", "debugging", "analytical"),
    "communication": ("communicate", "collaboration", "collaborative", "team", "teamwork"),
    "leadership": ("led", "leading", "managed", "mentored", "mentor"),
    "bachelor's degree": ("bachelor", "bs", "b.s.", "ba", "b.a.", "undergraduate"),
    "master's degree": ("master", "ms", "m.s.", "ma", "m.a.", "graduate degree"),
    "ci/cd": (
        "continuous integration", "continuous deployment", "jenkins",
        "github actions", "gitlab ci", "deployment pipeline",
    ),
    "unit testing": ("unit tests", "testing", "test coverage", "jest", "vitest", "pytest"),
    "test-driven development": ("tdd", "test-driven", "tests first"),
})

# JD keyword -> related technologies that suggest the candidate could claim it
TECHNOLOGY_FAMILIES = MappingProxyType({
    "django": ("python", "flask", "fastapi", "web development"),
    "flask": ("python", "django", "fastapi", "web development"),
    "typescript": ("javascript", "react", "angular", "vue", "node.js"),
    "aws": ("cloud", "azure", "gcp", "ec2", "s3", "lambda"),
    "azure": ("cloud", "aws", "gcp", "microsoft"),
    "gcp": ("cloud", "aws", "azure", "google cloud"),
    "docker": ("container", "containerization", "kubernetes", "deployment"),
    "kubernetes": ("docker", "container", "k8s", "orchestration", "deployment"),
    "mongodb": ("nosql", "database", "document database"),
    "postgresql": ("sql", "database", "mysql", "relational"),
    "mysql": ("sql", "database", "postgresql", "relational"),
    "react": ("javascript", "frontend", "ui", "component", "redux"),
    "angular": ("javascript", "typescript", "frontend", "ui"),
    "vue": ("javascript", "frontend", "ui", "component"),
    "node.js": ("javascript", "backend", "express", "api"),
    "graphql": ("api", "rest", "query", "apollo"),
    "microservices": ("distributed", "services", "api", "scalable", "architecture"),
})

# Keywords containing these are credentials, never rewritten in
QUALIFICATION_KEYWORDS = (
    "computer science",
    "software engineering",
    "information technology",
    "bachelor",
    "master",
    "phd",
    "years of experience",
    "certified",
    "certification",
)

GAP_IMPACT = MappingProxyType({"high": 12, "medium": 8, "low": 4})
PREFERRED_GAP_IMPACT_FACTOR = 0.5

# (requirement, importance) -> priority
GAP_PRIORITY = MappingProxyType({
    ("required", "high"): "critical",
    ("required", "medium"): "high",
    ("required", "low"): "medium",
    ("preferred", "high"): "medium",
    ("preferred", "medium"): "low",
    ("preferred", "low"): "low",
})

SKILL_CATEGORIES = ("technical", "skills", "technologies")

GAP_TARGET_SECTIONS = MappingProxyType({
    "technical": ("skills", "experience"),
    "skills": ("skills", "experience"),
    "technologies": ("skills", "experience"),
    "soft_skills": ("summary", "experience"),
    "qualifications": ("education", "summary"),
    "certifications": ("education", "skills"),
    "experience": ("experience", "summary"),
})
DEFAULT_GAP_TARGET_SECTIONS = ("skills", "experience")
