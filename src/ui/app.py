"""
Audio Testimonial Analyzer Streamlit UI — main entry point.

Run with: ``streamlit run src/ui/app.py``
"""

# ---------------------------------------------------------------------------
# Ensure project root is on sys.path so ``from src.xxx`` imports work.
# Streamlit replaces sys.path[0] with the script directory (src/ui/),
# which removes the project root needed for absolute ``src.*`` imports.
# ---------------------------------------------------------------------------
import sys  # noqa: E402
from pathlib import Path  # noqa: E402

_project_root = str(Path(__file__).resolve().parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import streamlit as st  # noqa: E402

from src.core.config import get_settings  # noqa: E402
from src.core.logging_config import setup_logging  # noqa: E402
from src.ui.analysis_client import get_session  # noqa: E402
from src.ui.components.report_view import render_report  # noqa: E402
from src.ui.components.uploader import render_uploader, reset_uploader  # noqa: E402

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="Audio Testimonial Analyzer",
    page_icon="\U0001f3a7",
    layout="wide",
)

_settings = get_settings()
setup_logging(_settings.log_level)

session = get_session()

# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------
st.title("\U0001f3a7 Audio Testimonial Analyzer")
st.caption(
    "Upload an audio file to automatically transcribe, translate, "
    "and generate a detailed sentiment report."
)

if not _settings.gemini_api_key:
    st.warning("GEMINI_API_KEY is not set. Add it to your environment or `.env` file.")

if "_analysis_notice" in st.session_state:
    st.error(st.session_state.pop("_analysis_notice"))

# ---------------------------------------------------------------------------
# Body
# ---------------------------------------------------------------------------
if session.report is None:
    render_uploader(session)
else:
    source_name = session.selected_file.name if session.selected_file else None
    render_report(session.report, title=_settings.report_title, source_name=source_name)
    st.divider()
    if st.button("Analyze Another File"):
        reset_uploader(session)
        st.rerun()
