# orgtree/process_org.py

"""
Tree-level orchestration of the cleaning pipeline.

For every node, depth-first:

    1. clean each child label (dropping junk labels with their subtree)
       and recurse into the kept children
    2. merge similar sibling labels            (similarity.py)
    3. group siblings sharing a prefix         (prefix_grouping.py)

Each level is rebuilt as a fresh dict; the caller's tree is never mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional, Tuple

from .config import DEFAULT_CONFIG, OrgProcessingConfig
from .errors import OrgStructureError
from .label_cleaner import clean_team_name
from .prefix_grouping import group_by_common_prefix
from .similarity import deduplicate_similar_keys
from .tree_types import OrgNode

logger = logging.getLogger(__name__)


def _clean_level(
    node: Mapping[str, Any],
    config: OrgProcessingConfig,
    path: Tuple[str, ...],
) -> OrgNode:
    cleaned: OrgNode = {}

    for raw_key, raw_children in node.items():
        if not isinstance(raw_key, str):
            raise OrgStructureError(f"Label {raw_key!r} is not a string", path)
        if not isinstance(raw_children, Mapping):
            raise OrgStructureError(
                f"Children of {raw_key!r} must be a mapping, "
                f"got {type(raw_children).__name__}",
                path,
            )

        key = clean_team_name(raw_key)
        if key is None:
            continue

        children = _process(raw_children, config, path + (raw_key,))

        # Two raw labels cleaned to the same string: shallow key-union.
        if key in cleaned:
            merged = dict(cleaned[key])
            merged.update(children)
            cleaned[key] = merged
        else:
            cleaned[key] = children

    return cleaned


def _process(
    node: Mapping[str, Any],
    config: OrgProcessingConfig,
    path: Tuple[str, ...],
) -> OrgNode:
    cleaned = _clean_level(node, config, path)
    deduplicated = deduplicate_similar_keys(cleaned, config.similarity_ratio)
    return group_by_common_prefix(
        deduplicated,
        min_group_size=config.min_group_size,
        min_prefix_length=config.min_prefix_length,
    )


def process_org_data(
    node: Mapping[str, Any],
    config: Optional[OrgProcessingConfig] = None,
) -> OrgNode:
    """
    Clean, deduplicate and regroup a raw org tree.

    Parameters
    ----------
    node :
        Raw nested mapping of label → children.
    config :
        Processing thresholds; defaults to `OrgProcessingConfig()`.

    Returns
    -------
    OrgNode
        The cleaned tree. An empty dict means nothing survived cleaning;
        the result is never None.

    Raises
    ------
    OrgStructureError
        If a label is not a string or a child is not a mapping.
    """
    if not isinstance(node, Mapping):
        raise OrgStructureError(
            f"Org tree must be a mapping, got {type(node).__name__}"
        )

    config = (config or DEFAULT_CONFIG).validate()
    return _process(node, config, ())
