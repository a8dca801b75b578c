"""
Input preprocessing for the Org Chart Cleaner.

    - org_json → load scraped org-chart JSON into raw org trees
"""

from .org_json import coerce_org_tree, dump_org_json, load_org_json

__all__ = ["coerce_org_tree", "dump_org_json", "load_org_json"]
