# orgtree/similarity.py

"""
Sibling deduplication.

Cleaned labels under the same parent often still denote one entity:
"3D Visual Merchandising" vs "3D/Visual Merchandising", or "Frontend" vs
"Front-end". This module partitions a sibling set into similarity classes
and collapses each class onto a single canonical label.

The partition is a single greedy left-to-right pass over insertion order.
Similarity is not transitive, so with chains like A~B, B~C (but not A~C)
the resulting classes depend on sibling order.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .config import DEFAULT_CONFIG
from .text_utils import normalize_for_comparison
from .tree_types import OrgNode

logger = logging.getLogger(__name__)


# ============================================================
#   Pairwise similarity
# ============================================================

def are_names_similar(
    name_a: str,
    name_b: str,
    min_ratio: float = DEFAULT_CONFIG.similarity_ratio,
) -> bool:
    """
    True when two labels most likely name the same org unit.

    Labels match if their alphanumeric comparison keys are equal, or if
    one key contains the other and the shorter key is at least
    `min_ratio` of the longer one. The ratio guard stops "GPU" from
    swallowing "GPU Architecture Design Team".
    """
    key_a = normalize_for_comparison(name_a)
    key_b = normalize_for_comparison(name_b)

    if key_a == key_b:
        return True
    if not key_a or not key_b:
        return False

    shorter, longer = sorted((key_a, key_b), key=len)
    if shorter not in longer:
        return False

    return len(shorter) / len(longer) >= min_ratio


def choose_canonical_name(names: Sequence[str]) -> str:
    """
    Pick the representative label of a similarity class.

    Longest label wins (more descriptive); ties go to the lexicographically
    smallest, so the choice does not depend on input order.
    Returns "" for an empty sequence.
    """
    if not names:
        return ""
    return sorted(names, key=lambda n: (-len(n), n))[0]


# ============================================================
#   Partition + merge
# ============================================================

def _partition_similar(labels: List[str], min_ratio: float) -> List[List[str]]:
    classes: List[List[str]] = []
    assigned: set[str] = set()

    for label in labels:
        if label in assigned:
            continue

        members = [label]
        for other in labels:
            if other == label or other in assigned:
                continue
            if are_names_similar(label, other, min_ratio):
                members.append(other)
                assigned.add(other)

        assigned.add(label)
        classes.append(members)

    return classes


def deduplicate_similar_keys(
    node: OrgNode,
    min_ratio: float = DEFAULT_CONFIG.similarity_ratio,
) -> OrgNode:
    """
    Collapse similar sibling labels, recursively at every depth.

    Children of all members of a class are shallow-unioned in class order
    under the canonical label. On a child-key collision the later member
    wins and the earlier grandchild subtree is dropped.

    Returns a new dict; `node` is not modified.
    """
    if not node:
        return {}

    deduplicated: OrgNode = {}

    for members in _partition_similar(list(node.keys()), min_ratio):
        canonical = choose_canonical_name(members)

        merged_children: OrgNode = {}
        for member in members:
            merged_children.update(node[member])

        if len(members) > 1:
            logger.debug("Merged similar labels %s into %r", members, canonical)

        deduplicated[canonical] = deduplicate_similar_keys(merged_children, min_ratio)

    return deduplicated
