# orgtree/tree_types.py

from __future__ import annotations

from typing import Dict

# label → children; leaves are empty dicts, never None.
OrgNode = Dict[str, "OrgNode"]
