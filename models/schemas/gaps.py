"""Missing-keyword gaps classified by how honestly a rewrite can close them."""

from typing import Literal

from models.schemas.base import ValueModel
from models.schemas.scoring import Priority, Requirement

# terminology: the resume has the skill under another name
# potential: related evidence exists, add only if true
# unfixable: a genuine gap such as a degree or certification
GapAddressability = Literal["terminology", "potential", "unfixable"]
GapSection = Literal["summary", "skills", "experience", "education"]


class ProcessedGap(ValueModel):
    keyword: str
    category: str
    priority: Priority
    requirement: Requirement
    potential_impact: int
    addressability: GapAddressability
    reason: str
    evidence: str | None = None
    target_sections: list[GapSection] = []
    instruction: str


class GapSummary(ValueModel):
    total_gaps: int = 0
    terminology_fixes: int = 0
    potential_additions: int = 0
    unfixable_gaps: int = 0
    total_potential_impact: int = 0  # excludes unfixable gaps


class GapProcessingResult(ValueModel):
    processed_gaps: list[ProcessedGap] = []
    summary: GapSummary = GapSummary()


class SectionGaps(ValueModel):
    """Gaps one section's suggestion prompt can act on."""
    terminology_fixes: list[ProcessedGap] = []
    potential_additions: list[ProcessedGap] = []
    opportunities: list[ProcessedGap] = []
    cannot_fix: list[ProcessedGap] = []
