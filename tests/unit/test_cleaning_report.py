from analysis.cleaning_report import (
    OUTCOMES,
    label_outcomes,
    outcome_counts_by_depth,
    synthesized_labels,
)
from orgtree.process_org import process_org_data


RAW = {
    "Engineering Team": {"Web": {}},
    ")": {"Hidden": {}},
    "Design": {},
}


def test_label_outcomes() -> None:
    df = label_outcomes(RAW)

    assert list(df["raw_label"]) == ["Engineering Team", "Web", ")", "Hidden", "Design"]
    assert list(df["outcome"]) == [
        "renamed",
        "kept",
        "rejected",
        "dropped_with_parent",
        "kept",
    ]
    assert df.loc[0, "clean_label"] == "Engineering"
    assert df.loc[3, "depth"] == 2


def test_outcome_counts_by_depth() -> None:
    counts = outcome_counts_by_depth(label_outcomes(RAW))

    assert list(counts.columns) == OUTCOMES
    assert counts.loc[1].tolist() == [1, 1, 1, 0]
    assert counts.loc[2].tolist() == [1, 0, 0, 1]


def test_synthesized_labels_are_grouping_parents_and_stripped_children() -> None:
    raw = {
        "AIML Data Platform": {},
        "AIML Search Infrastructure": {},
        "AIML Engineering Efficiency": {},
        "Design System": {},
    }

    created = synthesized_labels(raw, process_org_data(raw))

    assert created == [
        "AIML",
        "Data Platform",
        "Search Infrastructure",
        "Engineering Efficiency",
    ]


def test_no_synthesized_labels_without_grouping() -> None:
    raw = {"Engineering Team": {}, "Design": {}}
    assert synthesized_labels(raw, process_org_data(raw)) == []
