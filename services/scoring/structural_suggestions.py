"""Rule-based structural suggestions (no language model involved).

Rules are plain records evaluated in order over one shared state object.
A rule fires at most once per call and yields one suggestion whose id is
``"<candidate_type>-rule-<number>"``. Output order is rule order; callers
sort or truncate for display.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from rapidfuzz import fuzz

from models.schemas.candidate import CandidateType
from models.schemas.sections import ResumeSections
from models.schemas.suggestions import (
    StructuralSuggestion,
    SuggestionCategory,
    SuggestionPriority,
)
from services.scoring.constants import CANDIDATE_TYPES, HEADING_FUZZY_THRESHOLD, UNSAFE_HEADINGS

_HEADING_LINE_RE = re.compile(r"^\s*([A-Za-z][A-Za-z'’\- ]{2,30}?)\s*:?\s*$", re.MULTILINE)


@dataclass(frozen=True)
class RuleState:
    candidate_type: CandidateType
    sections: ResumeSections
    section_order: tuple[str, ...]
    raw_resume_text: str

    def index(self, section: str) -> int:
        try:
            return self.section_order.index(section)
        except ValueError:
            return -1

    def before(self, first: str, second: str) -> bool:
        """Both present in the order and ``first`` comes earlier."""
        a, b = self.index(first), self.index(second)
        return a != -1 and b != -1 and a < b


@dataclass(frozen=True)
class StructuralRule:
    number: int
    candidate_types: tuple[CandidateType, ...]
    priority: SuggestionPriority
    category: SuggestionCategory
    message: str
    recommended_action: str
    # Returns the "current state" text when the rule fires, else None
    check: Callable[[RuleState], str | None]

    def evaluate(self, state: RuleState) -> StructuralSuggestion | None:
        if state.candidate_type not in self.candidate_types:
            return None
        current_state = self.check(state)
        if current_state is None:
            return None
        return StructuralSuggestion(
            id=f"{state.candidate_type}-rule-{self.number}",
            priority=self.priority,
            category=self.category,
            message=self.message,
            current_state=current_state,
            recommended_action=self.recommended_action,
        )


def find_unsafe_headings(text: str) -> list[tuple[str, str]]:
    """(heading found, standard replacement) for informal heading lines.

    Whole-line matches only; near-misses such as "My Tool-kit" are caught
    by fuzzy comparison.
    """
    if not text:
        return []
    found: list[tuple[str, str]] = []
    for m in _HEADING_LINE_RE.finditer(text):
        line = m.group(1).strip().lower().replace("’", "'")
        for unsafe, standard in UNSAFE_HEADINGS.items():
            if line == unsafe or fuzz.ratio(line, unsafe) >= HEADING_FUZZY_THRESHOLD:
                if (unsafe, standard) not in found:
                    found.append((unsafe, standard))
                break
    return found


def _coop_experience_before_education(s: RuleState) -> str | None:
    if s.before("experience", "education"):
        return "Experience section appears before Education section"
    return None


def _coop_skills_not_leading(s: RuleState) -> str | None:
    if not s.sections.has("skills") and "skills" not in s.section_order:
        return "Skills section is missing"
    if s.section_order and s.section_order[0] != "skills":
        return "Skills section is not positioned first"
    return None


def _coop_has_summary(s: RuleState) -> str | None:
    if s.sections.has("summary"):
        return "Professional Summary section is present"
    return None


def _coop_projects_heading(s: RuleState) -> str | None:
    if s.sections.has("projects"):
        return 'Section is likely titled "Projects"'
    return None


def _fulltime_education_before_experience(s: RuleState) -> str | None:
    if s.before("education", "experience"):
        return "Education section appears before Experience section"
    return None


def _career_changer_missing_summary(s: RuleState) -> str | None:
    if not s.sections.has("summary"):
        return "Professional Summary section is missing"
    return None


def _career_changer_education_after_experience(s: RuleState) -> str | None:
    if s.before("experience", "education"):
        return "Education section appears after Experience section"
    return None


def _non_standard_headings(s: RuleState) -> str | None:
    found = find_unsafe_headings(s.raw_resume_text)
    if not found:
        return None
    return "Detected: " + ", ".join(f'"{u}" â "{std}"' for u, std in found)


STRUCTURAL_RULES: tuple[StructuralRule, ...] = (
    StructuralRule(
        1, ("coop",), "high", "section_order",
        "For co-op/internship resumes, Education should come before Experience",
        "Move Education section above Experience. Co-op candidates benefit from "
        "showcasing their academic credentials before work history.",
        _coop_experience_before_education,
    ),
    StructuralRule(
        2, ("coop",), "critical", "section_presence",
        "Co-op resumes must lead with Skills section",
        "Add or move Skills section to the top of your resume (right after header). "
        "This maximizes keyword density for ATS systems and immediately demonstrates "
        "your technical capabilities.",
        _coop_skills_not_leading,
    ),
    StructuralRule(
        3, ("coop",), "high", "section_presence",
        "Co-op resumes typically should not include a Professional Summary",
        "Consider removing the summary to save space; co-op/internship resumes benefit "
        "from leading with Skills instead. Use the extra space for Projects or relevant "
        "coursework.",
        _coop_has_summary,
    ),
    StructuralRule(
        4, ("coop",), "moderate", "section_heading",
        'Use "Project Experience" heading instead of "Projects"',
        'Rename the section heading to "Project Experience" for better ATS recognition '
        "and professional presentation.",
        _coop_projects_heading,
    ),
    StructuralRule(
        5, ("fulltime",), "high", "section_order",
        "For full-time positions, Experience should come before Education",
        "Move Experience section above Education. Full-time candidates should emphasize "
        "professional experience over academic credentials.",
        _fulltime_education_before_experience,
    ),
    StructuralRule(
        6, ("career_changer",), "critical", "section_presence",
        "Career changers must include a Professional Summary",
        "Add a Professional Summary at the top of your resume to explain your career "
        "transition and highlight transferable skills. This section is essential for "
        "career changers to frame your narrative.",
        _career_changer_missing_summary,
    ),
    StructuralRule(
        7, ("career_changer",), "high", "section_order",
        "For career changers, Education should come before Experience",
        "Move Education section above Experience. Your degree is the pivot credential "
        "for your career change and should be prominently positioned.",
        _career_changer_education_after_experience,
    ),
    StructuralRule(
        8, CANDIDATE_TYPES, "moderate", "section_heading",
        "Non-standard section headings detected",
        "Replace creative or informal section headings with standard ATS-friendly "
        "headers. This ensures proper categorization by applicant tracking systems.",
        _non_standard_headings,
    ),
)


def generate_structural_suggestions(
    candidate_type: CandidateType,
    sections: ResumeSections,
    section_order: list[str],
    raw_resume_text: str | None = None,
) -> list[StructuralSuggestion]:
    if candidate_type not in CANDIDATE_TYPES:
        raise ValueError(f"Unknown candidate type: {candidate_type!r}")

    state = RuleState(
        candidate_type=candidate_type,
        sections=sections,
        section_order=tuple(s.lower() for s in section_order),
        raw_resume_text=raw_resume_text or "",
    )
    suggestions = []
    for rule in STRUCTURAL_RULES:
        suggestion = rule.evaluate(state)
        if suggestion is not None:
            suggestions.append(suggestion)
    return suggestions
