"""
Streamlit-side access to the analysis client and session.

The client is cached per process with ``st.cache_resource``; the session
lives in ``st.session_state`` so it survives reruns of the same browser tab.
"""

import asyncio
import logging

import streamlit as st

from src.core.exceptions import AnalyzerError
from src.services.analysis import AnalysisClient
from src.services.orchestrator import AnalysisSession, run_analysis

logger = logging.getLogger(__name__)

_SESSION_KEY = "analysis_session"


@st.cache_resource
def get_analysis_client() -> AnalysisClient:
    """Return a cached AnalysisClient built from the current settings."""
    return AnalysisClient()


def get_session() -> AnalysisSession:
    """Return this tab's AnalysisSession, creating it on first use."""
    if _SESSION_KEY not in st.session_state:
        st.session_state[_SESSION_KEY] = AnalysisSession()
    return st.session_state[_SESSION_KEY]


def analyze_selected_file(session: AnalysisSession) -> str | None:
    """Run the analysis synchronously for Streamlit.

    Returns:
        An error message for failures that happen before the request starts
        (nothing selected, analysis already running), otherwise None. Errors
        from the request itself are stored on the session.
    """
    try:
        client = get_analysis_client()
        asyncio.run(run_analysis(session, client))
    except AnalyzerError as exc:
        return exc.detail
    except ValueError as exc:
        # Unknown provider or bad settings
        logger.error("Analysis client unavailable: %s", exc)
        return str(exc)
    return None
