"""Metric extraction results for achievement bullets."""

from typing import Literal

from models.schemas.base import ValueModel

DensityCategory = Literal["low", "moderate", "strong"]


class MetricCategories(ValueModel):
    numbers: list[str] = []
    percentages: list[str] = []
    currency: list[str] = []
    time_units: list[str] = []


class MetricsFound(ValueModel):
    has_metrics: bool = False
    metrics: MetricCategories = MetricCategories()
    metrics_found: list[str] = []  # all matches, in category order


class CategoryCounts(ValueModel):
    """Number of bullets contributing at least one match per category."""
    currency: int = 0
    percentages: int = 0
    numbers: int = 0
    time_units: int = 0


class DensityResult(ValueModel):
    total_bullets: int = 0
    bullets_with_metrics: int = 0
    density: int = 0  # 0-100
    by_category: CategoryCounts = CategoryCounts()
