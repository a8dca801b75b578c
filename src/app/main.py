import sys, os
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


import logging
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Tuple

import streamlit as st

from orgtree.config import DEFAULT_CONFIG, OrgProcessingConfig
from orgtree.logging_config import configure_logging
from orgtree.org_engine import OrgChartEngine

from app.wizard_pages.page_upload import UploadPage
from app.wizard_pages.page_explore import ExplorePage
from app.wizard_pages.page_download import DownloadPage

logger = logging.getLogger(__name__)


# (page key, sidebar label, needs a processed chart)
STEPS: List[Tuple[str, str, bool]] = [
    ("upload", "1 · Upload Org Chart", False),
    ("explore", "2 · Explore Cleaned Tree", True),
    ("download", "3 · Download", True),
]


# ============================================================
#                   Org Chart Wizard
# ============================================================

class OrgChartWizard:
    """
    Three-step Streamlit flow: upload a raw org chart, explore the cleaned
    tree, download the result.

    The wizard owns the OrgChartEngine (kept in st.session_state so it
    survives reruns) and the processing thresholds the upload page edits.
    Steps that need a processed chart are disabled until one exists.
    """

    def __init__(self):
        self._ensure_session_defaults()
        self.pages: Dict[str, Any] = {
            "upload": UploadPage(self),
            "explore": ExplorePage(self),
            "download": DownloadPage(self),
        }
        self.order = [key for key, _, _ in STEPS]

    def _ensure_session_defaults(self):
        st.session_state.setdefault("page", "upload")
        st.session_state.setdefault("raw_tree", None)
        st.session_state.setdefault("engine", None)
        st.session_state.setdefault("engine_source", None)
        st.session_state.setdefault("config", asdict(DEFAULT_CONFIG))

    # --------------------------------------------------------
    # Navigation
    # --------------------------------------------------------

    def has_engine(self) -> bool:
        return st.session_state.engine is not None

    def go_to(self, page_name: str):
        if page_name not in self.pages:
            logger.warning("Ignoring navigation to unknown page %r", page_name)
            return
        st.session_state.page = page_name

    def _step(self, offset: int):
        idx = self.order.index(st.session_state.page) + offset
        if 0 <= idx < len(self.order):
            self.go_to(self.order[idx])

    def next_page(self):
        self._step(+1)

    def prev_page(self):
        self._step(-1)

    # --------------------------------------------------------
    # Engine
    # --------------------------------------------------------

    def current_config(self) -> OrgProcessingConfig:
        return OrgProcessingConfig.from_mapping(st.session_state.config)

    def init_engine(self, raw_tree: dict, config: Optional[OrgProcessingConfig] = None):
        """Process `raw_tree` and keep the engine for the later steps."""
        engine = OrgChartEngine(raw_tree, config or self.current_config())
        st.session_state.engine = engine
        logger.info("Engine initialized: %s", engine.summary())

    def reprocess(self):
        engine = st.session_state.engine
        if engine is not None:
            engine.reprocess(self.current_config())

    # --------------------------------------------------------
    # Rendering
    # --------------------------------------------------------

    def render_sidebar(self):
        sb = st.sidebar
        sb.title("🏢 Org Chart Cleaner")
        sb.markdown("---")

        current = st.session_state.page
        for key, label, needs_engine in STEPS:
            marker = "▶ " if key == current else ""
            sb.button(
                marker + label,
                key=f"nav_{key}",
                disabled=needs_engine and not self.has_engine(),
                on_click=self.go_to,
                args=(key,),
            )

        sb.markdown("---")

        if not self.has_engine():
            sb.caption("No org chart processed yet.")
            return

        s = st.session_state.engine.summary()
        sb.caption(
            f"{s['raw_nodes']} raw labels → {s['clean_nodes']} cleaned "
            f"({s['clean_top_level']} top-level, depth {s['clean_depth']})"
        )
        sb.button("Re-run cleaning", key="nav_reprocess", on_click=self.reprocess)

    def run(self):
        self.render_sidebar()

        page = self.pages.get(st.session_state.page)
        if page is None:
            st.error(f"Unknown page: {st.session_state.page}")
            return
        page.render()


def run_app():
    st.set_page_config(
        page_title="Org Chart Cleaner",
        layout="wide",
    )
    configure_logging()
    OrgChartWizard().run()


if __name__ == "__main__":
    run_app()
