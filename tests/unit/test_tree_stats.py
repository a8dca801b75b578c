import pytest

from orgtree.tree_stats import (
    assign_node_ids,
    count_leaves,
    count_nodes,
    flatten_tree,
    get_subtree,
    highlight_label,
    search_tree,
    sort_tree,
    subtree_size,
    summarize_tree,
    tree_depth,
)


@pytest.fixture
def tree():
    return {
        "Engineering": {
            "Frontend": {"React": {}, "Vue": {}},
            "Backend": {},
        },
        "Design": {},
        "AIML": {"Data Platform": {}},
    }


# ------------------------------------------------------------
# Counting
# ------------------------------------------------------------

def test_counts(tree) -> None:
    assert count_nodes(tree) == 8
    assert count_leaves(tree) == 5
    assert subtree_size(tree["Engineering"]) == 4
    assert tree_depth(tree) == 3


def test_counts_on_empty_tree() -> None:
    assert count_nodes({}) == 0
    assert count_leaves({}) == 0
    assert tree_depth({}) == 0


# ------------------------------------------------------------
# Ids & paths
# ------------------------------------------------------------

def test_node_ids_follow_insertion_order(tree) -> None:
    ids = assign_node_ids(tree)

    assert ids["root-0"] == ("Engineering",)
    assert ids["root-0-0"] == ("Engineering", "Frontend")
    assert ids["root-0-0-1"] == ("Engineering", "Frontend", "Vue")
    assert ids["root-0-1"] == ("Engineering", "Backend")
    assert ids["root-2-0"] == ("AIML", "Data Platform")
    assert len(ids) == 8


def test_get_subtree(tree) -> None:
    assert get_subtree(tree, ("Engineering", "Frontend")) == {"React": {}, "Vue": {}}
    assert get_subtree(tree, ()) is tree
    with pytest.raises(KeyError):
        get_subtree(tree, ("Engineering", "Mobile"))


# ------------------------------------------------------------
# Sorting
# ------------------------------------------------------------

def test_sort_by_name(tree) -> None:
    result = sort_tree(tree, by="name")
    assert list(result) == ["AIML", "Design", "Engineering"]
    assert list(result["Engineering"]) == ["Backend", "Frontend"]

    result = sort_tree(tree, by="name", descending=True)
    assert list(result) == ["Engineering", "Design", "AIML"]
    assert list(result["Engineering"]["Frontend"]) == ["Vue", "React"]


def test_sort_by_size(tree) -> None:
    result = sort_tree(tree, by="size")
    assert list(result) == ["Design", "AIML", "Engineering"]

    result = sort_tree(tree, by="size", descending=True)
    assert list(result) == ["Engineering", "AIML", "Design"]
    assert list(result["Engineering"]) == ["Frontend", "Backend"]


def test_size_ties_stay_alphabetical(tree) -> None:
    result = sort_tree(tree, by="size", descending=True)
    assert list(result["Engineering"]["Frontend"]) == ["React", "Vue"]


def test_sort_does_not_mutate(tree) -> None:
    before = list(tree)
    sort_tree(tree, by="name")
    assert list(tree) == before


def test_unknown_sort_key_raises(tree) -> None:
    with pytest.raises(ValueError):
        sort_tree(tree, by="depth")


# ------------------------------------------------------------
# Search
# ------------------------------------------------------------

def test_search_returns_matches_and_ancestors(tree) -> None:
    matches, expand = search_tree(tree, "re")

    assert matches == [("Engineering", "Frontend", "React")]
    assert expand == {("Engineering",), ("Engineering", "Frontend")}


def test_search_is_case_insensitive(tree) -> None:
    matches, _ = search_tree(tree, "  DATA ")
    assert matches == [("AIML", "Data Platform")]


def test_blank_search_matches_nothing(tree) -> None:
    assert search_tree(tree, "   ") == ([], set())


def test_highlight_label() -> None:
    assert highlight_label("Data Platform", "data") == "**Data** Platform"
    assert highlight_label("Front-end", "-") == "Front**-**end"
    assert highlight_label("Design", "") == "Design"


# ------------------------------------------------------------
# Tabular views
# ------------------------------------------------------------

def test_flatten_tree(tree) -> None:
    df = flatten_tree(tree, path_sep=" / ")

    assert len(df) == 8
    assert list(df.columns) == [
        "node_id",
        "parent_id",
        "label",
        "depth",
        "path",
        "n_children",
        "subtree_size",
    ]

    vue = df[df["label"] == "Vue"].iloc[0]
    assert vue["node_id"] == "root-0-0-1"
    assert vue["parent_id"] == "root-0-0"
    assert vue["depth"] == 3
    assert vue["path"] == "Engineering / Frontend / Vue"

    eng = df[df["label"] == "Engineering"].iloc[0]
    assert eng["n_children"] == 2
    assert eng["subtree_size"] == 4


def test_flatten_empty_tree_keeps_columns() -> None:
    df = flatten_tree({})
    assert df.empty
    assert "node_id" in df.columns


def test_summarize_tree(tree) -> None:
    stats = summarize_tree(flatten_tree(tree))

    assert stats["n_nodes"] == 8
    assert stats["n_leaves"] == 5
    assert stats["n_top_level"] == 3
    assert stats["max_depth"] == 3
    # Engineering: 2, Frontend: 2, AIML: 1
    assert stats["mean_branching"] == pytest.approx(1.67)


def test_summarize_empty_tree() -> None:
    stats = summarize_tree(flatten_tree({}))
    assert stats["n_nodes"] == 0
    assert stats["mean_branching"] == 0.0
