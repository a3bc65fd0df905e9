"""Quantification analysis: which achievement bullets carry measurable metrics."""

import re

from models.schemas.quantification import (
    CategoryCounts,
    DensityCategory,
    DensityResult,
    MetricCategories,
    MetricsFound,
)
from services.section_parser import extract_bullets

_NUM = r"\d+(?:,\d{3})*(?:\.\d+)?"

CURRENCY_RE = re.compile(rf"[$£€]\s?{_NUM}(?:\s?[kKmMbB](?![a-zA-Z]))?")
PERCENTAGE_RE = re.compile(rf"{_NUM}\s?%")
TIME_UNIT_RE = re.compile(
    rf"\b{_NUM}(?:\s?(?:-|–|to)\s?{_NUM})?\+?\s*"
    r"(?:hours?|hrs?|days?|weeks?|months?|years?|yrs?)\b",
    re.IGNORECASE,
)
NUMBER_RE = re.compile(rf"(?<![\w.]){_NUM}(?:[kKmMbB](?![a-zA-Z]))?\+?")

# Bullets of this length or shorter are ignored in raw text
MIN_BULLET_LENGTH = 10


def _analyze(bullet: str) -> MetricsFound:
    claimed: list[tuple[int, int]] = []

    def _collect(pattern: re.Pattern) -> list[str]:
        found = []
        for m in pattern.finditer(bullet):
            if any(m.start() < end and start < m.end() for start, end in claimed):
                continue
            claimed.append(m.span())
            found.append(m.group().strip())
        return found

    # Typed categories first so their digits are not re-counted as numbers
    currency = _collect(CURRENCY_RE)
    percentages = _collect(PERCENTAGE_RE)
    time_units = _collect(TIME_UNIT_RE)
    numbers = _collect(NUMBER_RE)

    metrics = MetricCategories(
        numbers=numbers,
        percentages=percentages,
        currency=currency,
        time_units=time_units,
    )
    found = numbers + percentages + currency + time_units
    return MetricsFound(has_metrics=bool(found), metrics=metrics, metrics_found=found)


def analyze_bullet_quantification(bullets: list[str]) -> list[MetricsFound]:
    """Per-bullet metric matches, in input order."""
    return [_analyze(b) for b in bullets]


def calculate_density(bullets: list[str]) -> DensityResult:
    if not bullets:
        return DensityResult()

    results = analyze_bullet_quantification(bullets)
    with_metrics = sum(1 for r in results if r.has_metrics)
    by_category = CategoryCounts(
        currency=sum(1 for r in results if r.metrics.currency),
        percentages=sum(1 for r in results if r.metrics.percentages),
        numbers=sum(1 for r in results if r.metrics.numbers),
        time_units=sum(1 for r in results if r.metrics.time_units),
    )
    return DensityResult(
        total_bullets=len(bullets),
        bullets_with_metrics=with_metrics,
        density=round(100 * with_metrics / len(bullets)),
        by_category=by_category,
    )


def get_density_category(density: float) -> DensityCategory:
    if density >= 80:
        return "strong"
    if density >= 50:
        return "moderate"
    return "low"


def calculate_quantification_density(text: str) -> DensityResult:
    """Density over the bullet lines of raw resume text."""
    return calculate_density(extract_bullets(text, min_length=MIN_BULLET_LENGTH))
