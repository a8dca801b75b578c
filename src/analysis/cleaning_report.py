# analysis/cleaning_report.py

import sys
from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt

from orgtree.label_cleaner import clean_team_name
from orgtree.tree_stats import iter_nodes


OUTCOMES = ["kept", "renamed", "rejected", "dropped_with_parent"]


# ------------------------------------------------------------
# Per-label outcomes of the cleaning step
# ------------------------------------------------------------
def label_outcomes(raw_tree: dict) -> pd.DataFrame:
    """
    Returns one row per raw node with columns:

        depth, raw_label, clean_label, outcome

    outcome is one of:
        kept                 → cleaning left the label unchanged
        renamed              → cleaning changed the label
        rejected             → the label was junk; node dropped
        dropped_with_parent  → an ancestor was rejected
    """
    rows = []
    rejected_paths: set = set()

    for _, _, path, _ in iter_nodes(raw_tree):
        raw_label = path[-1]
        parent_rejected = any(path[:i] in rejected_paths for i in range(1, len(path)))

        if parent_rejected:
            clean_label, outcome = None, "dropped_with_parent"
        else:
            clean_label = clean_team_name(raw_label)
            if clean_label is None:
                outcome = "rejected"
                rejected_paths.add(path)
            elif clean_label == raw_label:
                outcome = "kept"
            else:
                outcome = "renamed"

        rows.append(
            {
                "depth": len(path),
                "raw_label": raw_label,
                "clean_label": clean_label,
                "outcome": outcome,
            }
        )

    return pd.DataFrame(rows, columns=["depth", "raw_label", "clean_label", "outcome"])


def outcome_counts_by_depth(outcomes: pd.DataFrame) -> pd.DataFrame:
    """
    Returns:
        index = depth
        columns = outcomes (kept, renamed, rejected, dropped_with_parent)
        values = number of raw labels
    """
    counts = pd.crosstab(outcomes["depth"], outcomes["outcome"])
    return counts.reindex(columns=OUTCOMES, fill_value=0)


def synthesized_labels(raw_tree: dict, clean_tree: dict) -> list[str]:
    """
    Labels in the cleaned tree that no raw label cleans to: these are the
    parents created by prefix grouping (or prefix-stripped child labels).
    """
    cleaned_raw = {
        clean_team_name(path[-1]) for _, _, path, _ in iter_nodes(raw_tree)
    }
    seen: list[str] = []
    for _, _, path, _ in iter_nodes(clean_tree):
        label = path[-1]
        if label not in cleaned_raw and label not in seen:
            seen.append(label)
    return seen


# ------------------------------------------------------------
# Standalone Analysis Script
# ONLY runs when executed directly:
#     python src/analysis/cleaning_report.py org_structure.json
# ------------------------------------------------------------
if __name__ == "__main__":
    from preprocessing.org_json import load_org_json
    from orgtree.process_org import process_org_data

    source = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("org_structure.json")
    print(f"Loading {source} ...")

    if not source.exists():
        print(f"\n❌ ERROR: '{source}' not found.\n")
        sys.exit(1)

    raw = load_org_json(source)
    clean = process_org_data(raw)

    outcomes = label_outcomes(raw)
    print("✔ Raw labels:", len(outcomes))
    print(outcomes["outcome"].value_counts().to_string())

    new_labels = synthesized_labels(raw, clean)
    print(f"✔ {len(new_labels)} labels created by prefix grouping")

    by_depth = outcome_counts_by_depth(outcomes)

    fig, ax = plt.subplots(figsize=(9, 5))
    by_depth.plot(kind="bar", stacked=True, ax=ax)
    ax.set_xlabel("Tree depth")
    ax.set_ylabel("Raw labels")
    fig.suptitle("Label Cleaning Outcomes by Depth", fontsize=14)
    plt.tight_layout()
    plt.show()

    print("\n✔ Analysis complete.")
