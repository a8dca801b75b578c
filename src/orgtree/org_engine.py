# orgtree/org_engine.py

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Mapping, Optional

import pandas as pd

from .config import DEFAULT_CONFIG, OrgProcessingConfig
from .process_org import process_org_data
from .tree_stats import count_leaves, count_nodes, flatten_tree, tree_depth
from .tree_types import OrgNode

logger = logging.getLogger(__name__)


class OrgChartEngine:
    """
    Backend engine for one org chart.

    Responsibilities:
        - Keep a private copy of the raw tree
        - Run the clean → dedupe → group pipeline with the active config
        - Hand out copies of the cleaned tree and a flattened view of it
        - Report before/after summary numbers to the UI
    """

    # ============================================================
    # Initialization
    # ============================================================

    def __init__(
        self,
        raw_tree: Mapping[str, Any],
        config: Optional[OrgProcessingConfig] = None,
    ):
        self._raw_tree: Dict[str, Any] = copy.deepcopy(dict(raw_tree))
        self._config: OrgProcessingConfig = (config or DEFAULT_CONFIG).validate()

        self._clean_tree: OrgNode = {}
        self._tree_df: pd.DataFrame | None = None

        self._build()

    def _build(self) -> None:
        self._clean_tree = process_org_data(self._raw_tree, self._config)
        self._tree_df = None

        logger.info(
            "Processed org chart: %d raw nodes → %d clean nodes (%d top-level)",
            count_nodes(self._raw_tree),
            count_nodes(self._clean_tree),
            len(self._clean_tree),
        )

    # ============================================================
    # Public API
    # ============================================================

    @property
    def config(self) -> OrgProcessingConfig:
        return self._config

    def get_raw_tree(self) -> Dict[str, Any]:
        return copy.deepcopy(self._raw_tree)

    def get_clean_tree(self) -> OrgNode:
        return copy.deepcopy(self._clean_tree)

    def reprocess(self, config: Optional[OrgProcessingConfig] = None) -> None:
        """
        Re-run the pipeline. If `config` is given it becomes the active
        config; otherwise the current one is reused.
        """
        if config is not None:
            self._config = config.validate()
        self._build()

    def get_tree_df(self) -> pd.DataFrame:
        """Flattened cleaned tree (see tree_stats.flatten_tree), cached."""
        if self._tree_df is None:
            self._tree_df = flatten_tree(self._clean_tree)
        return self._tree_df.copy()

    def summary(self) -> Dict[str, int]:
        return {
            "raw_nodes": count_nodes(self._raw_tree),
            "clean_nodes": count_nodes(self._clean_tree),
            "raw_top_level": len(self._raw_tree),
            "clean_top_level": len(self._clean_tree),
            "clean_leaves": count_leaves(self._clean_tree),
            "clean_depth": tree_depth(self._clean_tree),
        }
