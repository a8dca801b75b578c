import streamlit as st

from orgtree.tree_stats import flatten_tree, sort_tree
from preprocessing.org_json import dump_org_json


_SORT_OPTIONS = {
    "Keep processing order": None,
    "Alphabetical": ("name", False),
    "Largest units first": ("size", True),
}


# ============================================================
#            Step 3: Export the Cleaned Org Chart
# ============================================================

class DownloadPage:
    """
    Last wizard step. Exports the cleaned tree either as nested JSON (same
    shape as the upload) or as a flat CSV with one row per team, after an
    optional re-sort of every sibling set.
    """

    def __init__(self, wizard):
        self.wizard = wizard

    def _export_tree(self, engine) -> dict:
        choice = st.selectbox("Sibling order in the export", list(_SORT_OPTIONS))
        sort_spec = _SORT_OPTIONS[choice]

        tree = engine.get_clean_tree()
        if sort_spec is None:
            return tree
        by, descending = sort_spec
        return sort_tree(tree, by=by, descending=descending)

    def render(self):
        st.title("📥 Step 3 — Download Cleaned Org Chart")

        engine = st.session_state.engine
        if engine is None:
            st.error("Process an org chart in Step 1 first.")
            st.button("← Upload", on_click=self.wizard.go_to, args=("upload",))
            return

        tree = self._export_tree(engine)
        df_flat = flatten_tree(tree)

        st.caption(f"{len(df_flat)} teams, {len(tree)} top-level units")
        st.dataframe(df_flat.head(50), use_container_width=True)

        json_col, csv_col = st.columns(2)
        json_col.download_button(
            "⬇️ Nested JSON",
            data=dump_org_json(tree).encode("utf-8"),
            file_name="org_structure_clean.json",
            mime="application/json",
        )
        csv_col.download_button(
            "⬇️ Flat CSV",
            data=df_flat.to_csv(index=False).encode("utf-8"),
            file_name="org_structure_clean.csv",
            mime="text/csv",
        )

        st.markdown("---")

        back_col, restart_col = st.columns(2)
        back_col.button("← Back", on_click=self.wizard.prev_page)
        restart_col.button(
            "Start over",
            on_click=self.wizard.go_to,
            args=("upload",),
            type="primary",
        )
