import streamlit as st

from analysis.cleaning_report import label_outcomes, synthesized_labels
from app.components.org_tree_browser import OrgTreeBrowser
from orgtree.tree_stats import summarize_tree


# ============================================================
#        Page 2: Explore Cleaned Tree (Step 2 of Wizard)
# ============================================================

class ExplorePage:
    """
    Step 2 — Explore Cleaned Tree

    Responsibilities:
    - Show headline numbers for the raw vs. cleaned tree
    - Provide interactive drill-down / search over the cleaned tree
    - Show what cleaning did to individual raw labels
    """

    def __init__(self, wizard):
        self.wizard = wizard

    # --------------------------------------------------------
    # Helpers
    # --------------------------------------------------------

    def _validate_engine(self):
        engine = st.session_state.engine
        if engine is None:
            st.error("No org chart processed yet. Return to Step 1.")
            if st.button("← Back to Upload"):
                self.wizard.go_to("upload")
            return None
        return engine

    def _render_summary(self, engine):
        s = engine.summary()
        stats = summarize_tree(engine.get_tree_df())

        col1, col2, col3, col4 = st.columns(4)
        col1.metric("Raw labels", s["raw_nodes"])
        col2.metric("Cleaned labels", s["clean_nodes"], s["clean_nodes"] - s["raw_nodes"])
        col3.metric("Top-level units", s["clean_top_level"])
        col4.metric("Avg. sub-teams", stats["mean_branching"])

    def _render_cleaning_details(self, engine):
        raw = engine.get_raw_tree()
        outcomes = label_outcomes(raw)

        with st.expander("Label cleaning details", expanded=False):
            st.dataframe(
                outcomes["outcome"].value_counts().rename("labels"),
                use_container_width=True,
            )
            changed = outcomes[outcomes["outcome"] != "kept"]
            st.dataframe(changed.head(500), use_container_width=True)

            created = synthesized_labels(raw, engine.get_clean_tree())
            if created:
                st.markdown("**Created by prefix grouping:** " + ", ".join(created[:50]))

    # --------------------------------------------------------
    # Render
    # --------------------------------------------------------

    def render(self):
        st.title("📂 Step 2 — Explore Cleaned Tree")

        engine = self._validate_engine()
        if engine is None:
            return

        self._render_summary(engine)
        st.markdown("---")

        browser = OrgTreeBrowser(engine.get_clean_tree())
        browser.render()

        st.markdown("---")
        self._render_cleaning_details(engine)

        col1, col2 = st.columns([1, 1])

        with col1:
            st.button("← Back", on_click=self.wizard.prev_page)

        with col2:
            st.button(
                "Next → Download",
                on_click=self.wizard.next_page,
                type="primary",
            )
