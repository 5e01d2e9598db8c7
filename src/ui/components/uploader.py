"""
Uploader component — picks an audio file and starts the analysis.

States: idle/selecting/error -> processing (spinner) -> showing_report | error
"""

import streamlit as st

from src.core.utils import escape_markdown
from src.services.audio import SUPPORTED_EXTENSIONS, is_audio_mime_type
from src.services.audio.encoder import resolve_mime_type
from src.services.orchestrator import AnalysisSession
from src.ui.analysis_client import analyze_selected_file

_NONCE_KEY = "_uploader_nonce"
_REQUEST_KEY = "_analyze_requested"


def reset_uploader(session: AnalysisSession) -> None:
    """Clear the session and the file widget (a new key drops its value)."""
    session.reset()
    st.session_state[_NONCE_KEY] = st.session_state.get(_NONCE_KEY, 0) + 1


def _sync_selection(session: AnalysisSession, uploaded) -> None:
    """Mirror the widget's current file into the session."""
    if uploaded is None:
        if session.selected_file is not None:
            session.reset()
        return

    current = session.selected_file
    data = uploaded.getvalue()
    if current is not None and current.name == uploaded.name and current.data == data:
        return

    mime_type = resolve_mime_type(uploaded.name, uploaded.type)
    if not is_audio_mime_type(mime_type):
        st.warning(f"{uploaded.name} is not an audio file.")
        return
    session.select_file(uploaded.name, mime_type, data)


def render_uploader(session: AnalysisSession) -> None:
    """Render the file picker, selected file info, error and Analyze button."""
    if st.session_state.pop(_REQUEST_KEY, False):
        _render_processing(session)
        st.rerun()
        return
    if session.is_processing:
        # Another run owns the request; show progress only, no inputs.
        st.info("Analyzing the testimonial...")
        return

    uploaded = st.file_uploader(
        "Click to upload or drag and drop",
        type=SUPPORTED_EXTENSIONS,
        help="Audio files (MP3, WAV, M4A, etc.)",
        key=f"audio_upload_{st.session_state.get(_NONCE_KEY, 0)}",
    )
    _sync_selection(session, uploaded)

    selected = session.selected_file
    if selected is not None:
        with st.container(border=True):
            st.markdown(f"**{escape_markdown(selected.name)}**")
            st.caption(f"{selected.size_mb:.2f} MB")
            st.audio(selected.data, format=selected.mime_type or "audio/wav")

    if session.error:
        st.error(session.error)

    if st.button(
        "Analyze Testimonial",
        type="primary",
        disabled=selected is None,
        use_container_width=True,
    ):
        st.session_state[_REQUEST_KEY] = True
        st.rerun()


def _render_processing(session: AnalysisSession) -> None:
    """Run the analysis behind a spinner; no inputs are shown meanwhile."""
    with st.spinner("Transcribing, translating and analyzing the testimonial..."):
        message = analyze_selected_file(session)
    if message:
        st.session_state["_analysis_notice"] = message
