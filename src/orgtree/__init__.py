"""
Core processing modules for the Org Chart Cleaner.

This package contains:

    - label_cleaner    → Raw label → canonical display label (or None)
    - similarity       → Sibling deduplication by normalized similarity
    - prefix_grouping  → Common-prefix regrouping of siblings
    - process_org      → Depth-first orchestration of the three passes
    - org_engine       → Stateful wrapper used by the Streamlit app
    - tree_stats       → Ids, sorting, search and tabular views of trees
    - text_utils       → Unicode / whitespace / casing helpers
"""

from .config import OrgProcessingConfig
from .errors import OrgDataLoadError, OrgStructureError
from .label_cleaner import clean_team_name
from .similarity import (
    are_names_similar,
    choose_canonical_name,
    deduplicate_similar_keys,
)
from .prefix_grouping import (
    common_prefix,
    group_by_common_prefix,
    longest_common_prefix,
)
from .process_org import process_org_data
from .org_engine import OrgChartEngine
from .tree_types import OrgNode
