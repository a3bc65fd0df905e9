"""Section order validation against the candidate type's recommended sequence."""

from models.schemas.candidate import CandidateType
from models.schemas.sections import OrderViolation, SectionOrderValidation
from services.scoring.constants import RECOMMENDED_ORDER


def get_recommended_order(candidate_type: CandidateType) -> list[str]:
    try:
        return list(RECOMMENDED_ORDER[candidate_type])
    except KeyError:
        raise ValueError(f"Unknown candidate type: {candidate_type!r}") from None


def validate_section_order(
    observed_order: list[str],
    candidate_type: CandidateType = "fulltime",
) -> SectionOrderValidation:
    """Report every pair of known sections that appears in inverted order.

    Sections absent from the recommended order (e.g. "achievements") and
    repeated headings are ignored. Violations are listed in the order the
    later-observed section was encountered.
    """
    recommended = get_recommended_order(candidate_type)
    rank = {name: i for i, name in enumerate(recommended)}

    seen: list[str] = []
    for name in observed_order:
        name = name.lower()
        if name in rank and name not in seen:
            seen.append(name)

    violations = []
    for i, later_observed in enumerate(seen):
        for earlier_observed in seen[:i]:
            if rank[earlier_observed] > rank[later_observed]:
                violations.append(
                    OrderViolation(
                        earlier=later_observed,
                        later=earlier_observed,
                        description=(
                            f"{later_observed.capitalize()} should come before "
                            f"{earlier_observed.capitalize()}"
                        ),
                    )
                )

    return SectionOrderValidation(
        is_correct_order=not violations,
        violations=violations,
        recommended_order=recommended,
    )
