"""
Reusable UI components for the Org Chart Cleaner wizard.

Currently includes:

    - org_tree_browser.py  (OrgTreeBrowser)
"""
