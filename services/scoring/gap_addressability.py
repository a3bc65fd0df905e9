"""Gap addressability: which missing keywords a rewrite can honestly close.

Each missing JD keyword is classified as
- terminology: the resume already has it under another wording,
- potential: related evidence exists, add it only if the candidate has it,
- unfixable: a credential or a gap with no supporting evidence.

Suggestion prompts use this to stay consistent with the ATS analysis
without inventing skills.
"""

import logging
import re

from models.schemas.gaps import (
    GapProcessingResult,
    GapSection,
    GapSummary,
    ProcessedGap,
    SectionGaps,
)
from models.schemas.scoring import KeywordMatch
from models.schemas.sections import ResumeSections
from services.scoring.constants import (
    DEFAULT_GAP_TARGET_SECTIONS,
    GAP_IMPACT,
    GAP_PRIORITY,
    GAP_TARGET_SECTIONS,
    PREFERRED_GAP_IMPACT_FACTOR,
    QUALIFICATION_KEYWORDS,
    SKILL_CATEGORIES,
    TECHNOLOGY_FAMILIES,
    TERMINOLOGY_MAPPINGS,
)

logger = logging.getLogger(__name__)

_PRIORITY_ORDER = {"critical": 0, "high": 1, "medium": 2, "low": 3}


def _contains_term(text: str, term: str) -> bool:
    return re.search(rf"(?<![\w+#]){re.escape(term)}(?![\w+#])", text) is not None


def _first_term_in(text: str, terms: tuple[str, ...]) -> str | None:
    for term in terms:
        if _contains_term(text, term):
            return term
    return None


def _section_text(sections: ResumeSections) -> str:
    parts = [
        sections.summary or "",
        " ".join(sections.skills),
        " ".join(sections.experience),
        " ".join(sections.projects),
        sections.education or "",
    ]
    return " ".join(parts)


def _classify(keyword: str, category: str, section_text: str, full_text: str) -> tuple[str, str | None, str, str]:
    """(addressability, evidence, reason, instruction) for one missing keyword."""
    found = _first_term_in(section_text, TERMINOLOGY_MAPPINGS.get(keyword, ()))
    if found:
        return (
            "terminology", found,
            f'Resume uses "{found}" which is equivalent',
            f'Change "{found}" to "{keyword}" for exact JD match',
        )

    for jd_term, variants in TERMINOLOGY_MAPPINGS.items():
        if keyword in variants and _contains_term(section_text, jd_term):
            return (
                "terminology", jd_term,
                f'Resume uses "{jd_term}", can add "{keyword}" as explicit mention',
                f'Add "{keyword}" alongside existing "{jd_term}"',
            )

    if _contains_term(full_text, keyword):
        return (
            "terminology", keyword,
            f'Keyword "{keyword}" exists in resume but may not be prominent enough',
            f'Make "{keyword}" more prominent or add to skills section',
        )

    related = _first_term_in(section_text, TECHNOLOGY_FAMILIES.get(keyword, ()))
    if related:
        return (
            "potential", related,
            f'Resume has "{related}" which is related to {keyword}',
            f'Only add "{keyword}" if candidate genuinely has this experience',
        )

    if any(q in keyword for q in QUALIFICATION_KEYWORDS) or category in ("qualifications", "certifications"):
        return (
            "unfixable", None,
            "This is a qualification/certification that cannot be fabricated",
            f'Cannot add "{keyword}" - this requires actual qualification',
        )

    if category in SKILL_CATEGORIES:
        return (
            "potential", None,
            "No direct evidence in resume, but could be added if candidate has experience",
            f'Only add "{keyword}" if candidate genuinely has this skill',
        )
    return (
        "unfixable", None,
        "No evidence in resume and not a skill that can be easily added",
        f'Cannot reliably add "{keyword}" without evidence',
    )


def process_gap_addressability(
    keywords: list[KeywordMatch],
    resume_text: str,
    sections: ResumeSections | None = None,
) -> GapProcessingResult:
    """Classify every keyword the resume is missing, most urgent first."""
    full_text = resume_text.lower()
    section_text = _section_text(sections).lower() if sections else full_text

    gaps = []
    for kw in keywords:
        if kw.found:
            continue
        keyword = kw.keyword.lower()
        addressability, evidence, reason, instruction = _classify(
            keyword, kw.category, section_text, full_text
        )
        impact = GAP_IMPACT[kw.importance]
        if kw.requirement == "preferred":
            impact *= PREFERRED_GAP_IMPACT_FACTOR
        gaps.append(
            ProcessedGap(
                keyword=kw.keyword,
                category=kw.category,
                priority=GAP_PRIORITY[(kw.requirement, kw.importance)],
                requirement=kw.requirement,
                potential_impact=round(impact),
                addressability=addressability,
                reason=reason,
                evidence=evidence,
                target_sections=list(GAP_TARGET_SECTIONS.get(kw.category, DEFAULT_GAP_TARGET_SECTIONS)),
                instruction=instruction,
            )
        )

    gaps.sort(key=lambda g: _PRIORITY_ORDER[g.priority])
    summary = GapSummary(
        total_gaps=len(gaps),
        terminology_fixes=sum(1 for g in gaps if g.addressability == "terminology"),
        potential_additions=sum(1 for g in gaps if g.addressability == "potential"),
        unfixable_gaps=sum(1 for g in gaps if g.addressability == "unfixable"),
        total_potential_impact=sum(g.potential_impact for g in gaps if g.addressability != "unfixable"),
    )
    logger.debug(
        "Gaps: %d total, %d terminology, %d potential, %d unfixable",
        summary.total_gaps, summary.terminology_fixes,
        summary.potential_additions, summary.unfixable_gaps,
    )
    return GapProcessingResult(processed_gaps=gaps, summary=summary)


def filter_gaps_for_section(gaps: list[ProcessedGap], section: GapSection) -> SectionGaps:
    section_gaps = [g for g in gaps if section in g.target_sections]
    return SectionGaps(
        terminology_fixes=[
            g for g in section_gaps if g.addressability == "terminology" and g.requirement == "required"
        ],
        potential_additions=[
            g for g in section_gaps if g.addressability == "potential" and g.requirement == "required"
        ],
        opportunities=[
            g for g in section_gaps if g.requirement == "preferred" and g.addressability != "unfixable"
        ],
        cannot_fix=[g for g in section_gaps if g.addressability == "unfixable"],
    )
