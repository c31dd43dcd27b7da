"""Comparison of cost results: labelled entries held by the caller and the markdown report."""

from agentcost.comparison.entries import (
    ComparisonEntry,
    ComparisonList,
    build_comparison_label,
)
from agentcost.comparison.report import generate_comparison_markdown

__all__ = [
    "ComparisonEntry",
    "ComparisonList",
    "build_comparison_label",
    "generate_comparison_markdown",
]
