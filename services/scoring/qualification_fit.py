"""Qualification fit: degree, years of experience, and certifications vs. the JD."""

from typing import Literal

from rapidfuzz import fuzz

from models.schemas.scoring import (
    JDQualifications,
    QualificationFitResult,
    ResumeQualifications,
)
from services.scoring.constants import (
    CERTIFICATION_FUZZY_THRESHOLD,
    DEGREE_FIELD_MATCHES,
    DEGREE_LEVELS,
    QUALIFICATION_WEIGHTS,
)


def _contains_alias(text: str, alias: str) -> bool:
    # Short aliases ("cs", "it") must match whole words
    if len(alias) <= 3:
        return alias in text.replace(",", " ").split()
    return alias in text


def check_field_match(
    resume_field: str,
    required_fields: list[str],
) -> Literal["exact", "related", "none"]:
    """Compare a degree field against the JD's accepted fields via alias groups."""
    if not resume_field or not required_fields:
        return "none"

    field = resume_field.lower()
    required = [r.lower() for r in required_fields]

    for category, aliases in DEGREE_FIELD_MATCHES.items():
        if not any(_contains_alias(field, a) for a in aliases):
            continue
        # "related field" in a JD names no category of its own
        category_name = category.replace("_", " ") if category != "related" else None
        for req in required:
            if (category_name and category_name in req) or any(
                _contains_alias(req, a) for a in aliases
            ):
                return "exact"

    if any("related" in req for req in required):
        for aliases in DEGREE_FIELD_MATCHES.values():
            if any(_contains_alias(field, a) for a in aliases):
                return "related"

    return "none"


def _certification_held(required: str, held: list[str]) -> bool:
    req = required.lower()
    for cert in held:
        cert = cert.lower()
        if req in cert or cert in req:
            return True
        if fuzz.token_set_ratio(req, cert) >= CERTIFICATION_FUZZY_THRESHOLD:
            return True
    return False


def calculate_qualification_fit(
    jd_quals: JDQualifications,
    resume_quals: ResumeQualifications,
) -> QualificationFitResult:
    degree_score, degree_met, degree_note = 100, True, None
    if jd_quals.degree_required:
        req = jd_quals.degree_required
        required_level = DEGREE_LEVELS[req.level]
        has_level = DEGREE_LEVELS[resume_quals.degree.level] if resume_quals.degree else 0

        if has_level >= required_level:
            match = check_field_match(resume_quals.degree.field, req.fields)
            if match == "exact":
                degree_score, degree_note = 100, "Degree fully matches requirements"
            elif match == "related":
                degree_score, degree_note = 85, "Degree in related field"
            else:
                degree_score, degree_note = 70, "Degree level met but field differs"
        elif has_level == required_level - 1:
            degree_score = 50 if req.required else 75
            degree_met, degree_note = False, "Degree level below requirement"
        else:
            degree_score = 20 if req.required else 50
            degree_met = False
            degree_note = (
                "Degree level significantly below requirement"
                if resume_quals.degree else "No degree listed"
            )

    experience_score, experience_met, experience_note = 100, True, None
    if jd_quals.experience_required:
        need = jd_quals.experience_required.min_years
        strict = jd_quals.experience_required.required
        has = resume_quals.total_experience_years
        if has >= need:
            experience_note = f"{has:g} years meets {need:g}+ requirement"
        elif has >= need * 0.75:
            experience_score, experience_met = 75, False
            experience_note = f"{has:g} years slightly below {need:g}+ requirement"
        elif has >= need * 0.5:
            experience_score, experience_met = (40 if strict else 60), False
            experience_note = f"{has:g} years below {need:g}+ requirement"
        else:
            experience_score, experience_met = (15 if strict else 40), False
            experience_note = f"{has:g} years significantly below {need:g}+ requirement"

    certification_score = 100
    certs_met: list[str] = []
    certs_missing: list[str] = []
    certs_required = jd_quals.certifications_required
    if certs_required and certs_required.certifications:
        for cert in certs_required.certifications:
            if _certification_held(cert, resume_quals.certifications):
                certs_met.append(cert)
            else:
                certs_missing.append(cert)
        certification_score = round(len(certs_met) / len(certs_required.certifications) * 100)

    score = round(
        degree_score * QUALIFICATION_WEIGHTS["degree"]
        + experience_score * QUALIFICATION_WEIGHTS["experience"]
        + certification_score * QUALIFICATION_WEIGHTS["certifications"]
    )

    return QualificationFitResult(
        score=score,
        degree_score=degree_score,
        experience_score=experience_score,
        certification_score=certification_score,
        degree_met=degree_met,
        degree_note=degree_note,
        experience_met=experience_met,
        experience_note=experience_note,
        certifications_met=certs_met,
        certifications_missing=certs_missing,
    )


def generate_qualification_action_items(result: QualificationFitResult) -> list[str]:
    items = []
    if not result.experience_met and result.experience_note:
        items.append(result.experience_note)
    if not result.degree_met and result.degree_note:
        items.append(result.degree_note)
    if result.certifications_missing:
        items.append(f"Missing certifications: {', '.join(result.certifications_missing[:2])}")
    return items
