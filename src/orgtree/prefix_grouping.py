# orgtree/prefix_grouping.py

"""
Prefix grouping: discover latent hierarchy among sibling labels.

Flat scraped org charts often list many siblings that are really one unit
with sub-teams, e.g.

    AIML Data Platform
    AIML Engineering Efficiency
    AIML Search Infrastructure

`group_by_common_prefix` re-parents such siblings under a synthesized
"AIML" node whose children are the labels with the prefix removed. Groups
can nest: the children of a new group are grouped again.

A prefix only counts when it ends on a word boundary (or looks like an
acronym such as "AI/ML"), so "Frontend Development" and "Frontend Design"
share "Frontend" rather than "Frontend De".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

import regex as re

from .config import DEFAULT_CONFIG
from .tree_types import OrgNode

logger = logging.getLogger(__name__)


_BOUNDARY_CHARS = (" ", "/", "-")
_ACRONYM_PREFIX_RE = re.compile(r"^[A-Z0-9/]+$")

# Shortest remainder kept as a child label after stripping a prefix.
_MIN_REMAINDER_LENGTH = 2


# ============================================================
#   Common-prefix extraction
# ============================================================

def common_prefix(labels: Sequence[str]) -> str:
    """
    Longest shared prefix of `labels` that ends on a meaningful boundary.

    The raw prefix is found by sorting the labels and comparing the first
    and last one character by character. It is accepted (trimmed) if it is
    at least 2 characters long and:

      (a) some label continues with a space right after it, or
      (b) it ends in a space, "/" or "-", or
      (c) it is acronym-like (only A-Z, 0-9 and "/"), or
      (d) failing those, it is cut back to its last space, "/" or "-".

    Returns "" when no usable prefix exists.
    """
    if not labels:
        return ""

    ordered = sorted(labels)
    first, last = ordered[0], ordered[-1]

    i = 0
    limit = min(len(first), len(last))
    while i < limit and first[i] == last[i]:
        i += 1

    raw = first[:i]
    candidate = raw.strip()
    if len(candidate) < 2:
        return ""

    if any(i < len(label) and label[i] == " " for label in ordered):
        return candidate
    if raw[-1] in _BOUNDARY_CHARS:
        return candidate
    if _ACRONYM_PREFIX_RE.match(candidate):
        return candidate

    cut = max(candidate.rfind(ch) for ch in _BOUNDARY_CHARS)
    if cut > 0:
        truncated = candidate[:cut].strip()
        if len(truncated) >= 2:
            return truncated

    return ""


def longest_common_prefix(label_a: str, label_b: str) -> str:
    """Boundary-aware common prefix of two labels (see `common_prefix`)."""
    return common_prefix([label_a, label_b])


# ============================================================
#   Group construction
# ============================================================

@dataclass
class _PrefixGroup:
    prefix: str
    members: List[str]
    children: OrgNode = field(default_factory=dict)


def _union_into(target: OrgNode, label: str, children: OrgNode) -> None:
    if label in target:
        merged = dict(target[label])
        merged.update(children)
        target[label] = merged
    else:
        target[label] = children


def _strip_prefix(prefix: str, members: List[str], node: OrgNode) -> Tuple[OrgNode, int]:
    """
    Build the children of a prefix group.

    Returns (children, accepted) where `accepted` counts the distinct child
    labels that really lost the prefix. Members whose remainder would be
    shorter than 2 characters keep their full label.
    """
    children: OrgNode = {}
    accepted: set[str] = set()

    for member in members:
        remainder = member[len(prefix):].strip()
        if len(remainder) < _MIN_REMAINDER_LENGTH:
            child_label = member
        else:
            child_label = remainder
            accepted.add(remainder)
        _union_into(children, child_label, node[member])

    return children, len(accepted)


def _find_groups(
    node: OrgNode,
    labels: List[str],
    min_group_size: int,
    min_prefix_length: int,
) -> Dict[str, _PrefixGroup]:
    groups: Dict[str, _PrefixGroup] = {}
    assigned: set[str] = set()

    for seed in labels:
        if seed in assigned:
            continue

        candidates = [seed]
        for other in labels:
            if other == seed or other in assigned:
                continue
            if len(longest_common_prefix(seed, other)) >= min_prefix_length:
                candidates.append(other)

        if len(candidates) < min_group_size:
            continue

        prefix = common_prefix(candidates)
        if not prefix or prefix in groups:
            continue

        children, accepted = _strip_prefix(prefix, candidates, node)
        if accepted < min_group_size:
            logger.debug(
                "Dissolved prefix group %r: only %d of %d members keep a distinct label",
                prefix, accepted, len(candidates),
            )
            continue

        logger.debug("Grouped %d labels under prefix %r", len(candidates), prefix)
        groups[prefix] = _PrefixGroup(prefix=prefix, members=candidates, children=children)
        assigned.update(candidates)

    return groups


# ============================================================
#   Public API
# ============================================================

def group_by_common_prefix(
    node: OrgNode,
    min_group_size: int = DEFAULT_CONFIG.min_group_size,
    min_prefix_length: int = DEFAULT_CONFIG.min_prefix_length,
) -> OrgNode:
    """
    Re-parent siblings that share a qualifying prefix under a new node.

    Parameters
    ----------
    node :
        Sibling set (label → children), already deduplicated.
    min_group_size :
        Minimum number of siblings, and of accepted group members, needed
        before a group is formed.
    min_prefix_length :
        Minimum length of the pairwise prefix that makes a sibling a
        candidate for the seed's group.

    Returns
    -------
    OrgNode
        A new mapping, fresh at every depth. Each group appears where its
        earliest member stood; ungrouped labels keep their position.
        Children of groups and of ungrouped labels are grouped recursively,
        also below sibling sets too small to group themselves.
    """
    labels = list(node.keys())
    groups: Dict[str, _PrefixGroup] = {}
    if len(labels) >= min_group_size:
        groups = _find_groups(node, labels, min_group_size, min_prefix_length)

    member_to_prefix = {
        member: group.prefix
        for group in groups.values()
        for member in group.members
    }

    result: OrgNode = {}
    emitted: set[str] = set()

    for label in labels:
        prefix = member_to_prefix.get(label)

        if prefix is None:
            subtree = group_by_common_prefix(node[label], min_group_size, min_prefix_length)
            _union_into(result, label, subtree)
            continue

        if prefix in emitted:
            continue
        emitted.add(prefix)

        subtree = group_by_common_prefix(
            groups[prefix].children, min_group_size, min_prefix_length
        )
        _union_into(result, prefix, subtree)

    return result
