# analysis/__init__.py

"""
Analysis utilities for inspecting what the cleaning pipeline did to a raw
org chart: per-label outcomes, outcome counts per depth, and labels that
were synthesized by prefix grouping.

This package exposes only the reusable analysis functions.
To run the full standalone report, execute:

    python src/analysis/cleaning_report.py org_structure.json
"""

from .cleaning_report import (
    label_outcomes,
    outcome_counts_by_depth,
    synthesized_labels,
)

__all__ = [
    "label_outcomes",
    "outcome_counts_by_depth",
    "synthesized_labels",
]
