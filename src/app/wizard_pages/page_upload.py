import hashlib

import streamlit as st

from orgtree.config import OrgProcessingConfig
from orgtree.errors import OrgDataLoadError, OrgStructureError
from preprocessing.org_json import load_org_json


def engine_source_key(data: bytes, config: OrgProcessingConfig) -> tuple:
    """Identity of one engine build: the uploaded bytes plus the settings."""
    return (hashlib.sha1(data).hexdigest(), config)


# ============================================================
#                Page 1: Upload Org Chart
# ============================================================

class UploadPage:
    """
    Step 1 of the wizard: upload the raw org chart and process it.

    Responsibilities:
    - JSON file upload
    - Preview of the raw top-level labels
    - Processing thresholds (group size, prefix length, similarity ratio)
    - Builds the OrgChartEngine and enables Step 2
    """

    def __init__(self, wizard):
        self.wizard = wizard

    # --------------------------------------------------------
    # Config inputs
    # --------------------------------------------------------

    def _render_config(self) -> OrgProcessingConfig:
        cfg = st.session_state.config

        with st.expander("Processing settings", expanded=False):
            col1, col2, col3 = st.columns(3)
            with col1:
                cfg["min_group_size"] = st.number_input(
                    "Min siblings per prefix group",
                    min_value=2,
                    max_value=20,
                    value=int(cfg["min_group_size"]),
                )
            with col2:
                cfg["min_prefix_length"] = st.number_input(
                    "Min shared prefix length",
                    min_value=2,
                    max_value=20,
                    value=int(cfg["min_prefix_length"]),
                )
            with col3:
                cfg["similarity_ratio"] = st.slider(
                    "Similarity length ratio",
                    min_value=0.5,
                    max_value=1.0,
                    value=float(cfg["similarity_ratio"]),
                    step=0.05,
                )

        st.session_state.config = cfg
        return self.wizard.current_config()

    # --------------------------------------------------------
    # Main render
    # --------------------------------------------------------

    def render(self):
        st.title("📁 Step 1 — Upload Org Chart")
        st.markdown(
            """
            Upload a **JSON** org chart: nested objects mapping each team
            name to its sub-teams. Leaves may be `{}`, `null` or `[]`.
            """
        )

        st.markdown("---")

        uploaded_file = st.file_uploader("Choose a file (.json)", type=["json"])

        if uploaded_file is None:
            st.info("Please upload a file to proceed.")
            return

        data = uploaded_file.getvalue()
        try:
            raw_tree = load_org_json(data)
        except OrgDataLoadError as e:
            st.error(f"The uploaded file could not be read: {e}")
            return

        if not raw_tree:
            st.error("The uploaded org chart is empty.")
            return

        st.success(f"Loaded {len(raw_tree)} top-level labels.")

        st.markdown("### Raw Top-Level Labels")
        st.dataframe(
            {"label": list(raw_tree.keys())[:50],
             "sub-teams": [len(v) for v in list(raw_tree.values())[:50]]},
            use_container_width=True,
        )

        config = self._render_config()

        # Streamlit reruns this page on every widget change.
        source_key = engine_source_key(data, config)
        if (
            st.session_state.engine is None
            or st.session_state.engine_source != source_key
        ):
            try:
                self.wizard.init_engine(raw_tree, config)
            except OrgStructureError as e:
                st.error(f"The org chart has an unexpected shape: {e}")
                return
            st.session_state.raw_tree = raw_tree
            st.session_state.engine_source = source_key

        if not st.session_state.engine.get_clean_tree():
            st.warning("Nothing survived cleaning; every label was rejected as noise.")

        st.markdown("---")

        st.button(
            "Next → Explore Cleaned Tree",
            on_click=self.wizard.next_page,
            type="primary",
        )
