import streamlit as st
from typing import List, Tuple

from orgtree.tree_stats import (
    get_subtree,
    highlight_label,
    search_tree,
    sort_tree,
    subtree_size,
)


# ============================================================
#                 Org Tree Browser Component
# ============================================================

class OrgTreeBrowser:
    """
    Interactive browser for a cleaned org tree.

    The browser behaves like a file-system explorer: pick a top-level
    unit, then drill down one selectbox per level. The children of the
    current selection are listed with their subtree sizes.

    A search box lists every matching node path with the match
    highlighted.
    """

    def __init__(self, tree: dict, key_prefix: str = "org_browser"):
        self.tree = tree
        self.key_prefix = key_prefix

    # --------------------------------------------------------
    # Helpers
    # --------------------------------------------------------

    def _sorted_tree(self) -> dict:
        col1, col2 = st.columns([2, 1])
        with col1:
            sort_label = st.radio(
                "Sort by",
                ["Name", "Size"],
                horizontal=True,
                key=f"{self.key_prefix}_sort",
            )
        with col2:
            descending = st.checkbox(
                "Descending",
                value=(sort_label == "Size"),
                key=f"{self.key_prefix}_desc",
            )
        return sort_tree(self.tree, by=sort_label.lower(), descending=descending)

    def _render_children_table(self, node: dict):
        rows = {
            "label": list(node.keys()),
            "sub-teams": [len(c) for c in node.values()],
            "total below": [subtree_size(c) for c in node.values()],
        }
        st.dataframe(rows, use_container_width=True)

    # --------------------------------------------------------
    # Search
    # --------------------------------------------------------

    def _render_search(self, tree: dict):
        query = st.text_input("Search teams", key=f"{self.key_prefix}_query")
        if not query.strip():
            return

        matches, expand = search_tree(tree, query)
        if not matches:
            st.info(f"No teams match '{query}'.")
            return

        max_rows = 100
        st.caption(f"{len(matches)} matching teams under {len(expand)} parent units")
        lines: List[str] = []
        for path in matches[:max_rows]:
            parents = " ▸ ".join(path[:-1])
            label = highlight_label(path[-1], query)
            lines.append(f"- {parents + ' ▸ ' if parents else ''}{label}")
        st.markdown("\n".join(lines))

        if len(matches) > max_rows:
            st.caption(f"Showing first {max_rows} of {len(matches)} matches.")

    # --------------------------------------------------------
    # Render
    # --------------------------------------------------------

    def render(self):
        """
        Renders the org tree browser UI.
        """
        if not self.tree:
            st.warning("The cleaned org tree is empty.")
            return

        tree = self._sorted_tree()

        self._render_search(tree)
        st.markdown("---")

        path: Tuple[str, ...] = ()
        node = tree
        level = 0

        while node:
            options = ["—"] + list(node.keys())
            choice = st.selectbox(
                f"Level {level + 1}",
                options=options,
                key=f"{self.key_prefix}_level_{level}",
            )
            if choice == "—":
                break
            path = path + (choice,)
            node = get_subtree(tree, path)
            level += 1

        st.markdown("### Teams in Current Selection")
        if node:
            self._render_children_table(node)
        else:
            st.info("This team has no sub-teams.")

        st.markdown("---")
        st.markdown(
            "**Current Path:** " + (" ▸ ".join(path) if path else "(top level)")
        )
