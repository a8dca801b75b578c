# orgtree/tree_stats.py

"""
Read-only helpers over cleaned org trees.

These back the tree browser (synthetic ids, sorting by label or subtree
size, search with highlighting) and the tabular exports. None of them
modify the tree they are given.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Literal, Set, Tuple

import numpy as np
import pandas as pd
import regex as re

from .tree_types import OrgNode

SortKey = Literal["name", "size"]
Path = Tuple[str, ...]


# ============================================================
#   Counting
# ============================================================

def subtree_size(node: OrgNode) -> int:
    """Number of descendants below `node` (the node itself not counted)."""
    return sum(1 + subtree_size(children) for children in node.values())


def count_nodes(tree: OrgNode) -> int:
    return subtree_size(tree)


def count_leaves(tree: OrgNode) -> int:
    return sum(
        1 if not children else count_leaves(children)
        for children in tree.values()
    )


def tree_depth(tree: OrgNode) -> int:
    """Depth of the deepest label; {} → 0, {"A": {}} → 1."""
    if not tree:
        return 0
    return 1 + max(tree_depth(children) for children in tree.values())


# ============================================================
#   Traversal / ids
# ============================================================

def iter_nodes(
    tree: OrgNode,
    parent_id: str = "root",
    path: Path = (),
) -> Iterator[Tuple[str, str, Path, OrgNode]]:
    """
    Depth-first walk yielding (node_id, parent_id, path, children).

    Node ids are "<parent_id>-<index>" in insertion order, so the first
    top-level node is "root-0" and its second child "root-0-1".
    """
    for index, (label, children) in enumerate(tree.items()):
        node_id = f"{parent_id}-{index}"
        node_path = path + (label,)
        yield node_id, parent_id, node_path, children
        yield from iter_nodes(children, node_id, node_path)


def assign_node_ids(tree: OrgNode, parent_id: str = "root") -> Dict[str, Path]:
    """Map synthetic node id → label path for every node in the tree."""
    return {node_id: path for node_id, _, path, _ in iter_nodes(tree, parent_id)}


def get_subtree(tree: OrgNode, path: Path) -> OrgNode:
    """Children of the node at `path`; raises KeyError for unknown paths."""
    node = tree
    for label in path:
        node = node[label]
    return node


# ============================================================
#   Sorting
# ============================================================

def sort_tree(tree: OrgNode, by: SortKey = "name", descending: bool = False) -> OrgNode:
    """
    Return a copy of `tree` with siblings reordered at every level.

    by="name" sorts case-insensitively by label; by="size" sorts by
    subtree size, ties broken by label.
    """
    if by not in ("name", "size"):
        raise ValueError(f"Unknown sort key: {by!r}")

    if by == "size":
        # Equal sizes stay alphabetical in both directions.
        sign = -1 if descending else 1
        items = sorted(
            tree.items(),
            key=lambda it: (sign * subtree_size(it[1]), it[0].lower(), it[0]),
        )
    else:
        items = sorted(
            tree.items(),
            key=lambda it: (it[0].lower(), it[0]),
            reverse=descending,
        )

    return {label: sort_tree(children, by, descending) for label, children in items}


# ============================================================
#   Search
# ============================================================

def search_tree(tree: OrgNode, query: str) -> Tuple[List[Path], Set[Path]]:
    """
    Case-insensitive substring search over labels.

    Returns
    -------
    matches :
        Paths of matching nodes, in depth-first order.
    expand :
        Ancestor paths that must be expanded to reveal every match.
    """
    needle = query.strip().lower()
    if not needle:
        return [], set()

    matches: List[Path] = []
    expand: Set[Path] = set()

    for _, _, path, _ in iter_nodes(tree):
        if needle in path[-1].lower():
            matches.append(path)
            for i in range(1, len(path)):
                expand.add(path[:i])

    return matches, expand


def highlight_label(label: str, query: str) -> str:
    """Wrap case-insensitive occurrences of `query` in markdown bold."""
    needle = query.strip()
    if not needle:
        return label
    pattern = re.compile(re.escape(needle), flags=re.IGNORECASE)
    return pattern.sub(lambda m: f"**{m.group(0)}**", label)


# ============================================================
#   Tabular views
# ============================================================

_FLAT_COLUMNS = [
    "node_id",
    "parent_id",
    "label",
    "depth",
    "path",
    "n_children",
    "subtree_size",
]


def flatten_tree(tree: OrgNode, path_sep: str = " ▸ ") -> pd.DataFrame:
    """
    One row per node: node_id, parent_id, label, depth (1 = top level),
    path, n_children, subtree_size.
    """
    rows = [
        {
            "node_id": node_id,
            "parent_id": parent_id,
            "label": path[-1],
            "depth": len(path),
            "path": path_sep.join(path),
            "n_children": len(children),
            "subtree_size": subtree_size(children),
        }
        for node_id, parent_id, path, children in iter_nodes(tree)
    ]
    return pd.DataFrame(rows, columns=_FLAT_COLUMNS)


def summarize_tree(df_flat: pd.DataFrame) -> Dict[str, float]:
    """
    Headline numbers for a flattened tree (see `flatten_tree`).

    mean_branching is averaged over internal nodes only; 0.0 when the
    tree has no internal nodes.
    """
    if df_flat.empty:
        return {
            "n_nodes": 0,
            "n_leaves": 0,
            "n_top_level": 0,
            "max_depth": 0,
            "mean_branching": 0.0,
        }

    n_children = df_flat["n_children"].to_numpy()
    internal = n_children[n_children > 0]

    return {
        "n_nodes": int(len(df_flat)),
        "n_leaves": int(np.count_nonzero(n_children == 0)),
        "n_top_level": int((df_flat["depth"] == 1).sum()),
        "max_depth": int(df_flat["depth"].max()),
        "mean_branching": float(np.round(internal.mean(), 2)) if internal.size else 0.0,
    }
