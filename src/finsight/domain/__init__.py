"""Domain layer for finsight application."""

from finsight.domain.aggregation import (
    breakdown_by_category,
    compare_budget_to_actual,
    monthly_series,
    summarize,
    summarize_comparisons,
)
from finsight.domain.categories import CategoryTaxonomy, DEFAULT_TAXONOMY
from finsight.domain.insights import derive_insights

__all__ = [
    "summarize",
    "breakdown_by_category",
    "monthly_series",
    "compare_budget_to_actual",
    "summarize_comparisons",
    "derive_insights",
    "CategoryTaxonomy",
    "DEFAULT_TAXONOMY",
]
