"""
Report display components.

Renders a ``ReportData`` as summary, sentiment, key points, marketable
quotes and a collapsible per-section breakdown, with the plain-text export
available to copy or download.
"""

import streamlit as st

from src.core.models import ReportData, ReportSection, Sentiment
from src.core.utils import escape_markdown, format_confidence
from src.services.report import (
    export_file_name,
    format_report_text,
    highlight_html,
    sentiment_tier,
)

_TIER_COLORS = {
    "positive": "green",
    "negative": "red",
    "neutral": "gray",
}


def render_sentiment_badge(sentiment: Sentiment) -> None:
    """Badge like ``Positive (90%)`` colored by sentiment tier."""
    st.badge(
        f"{sentiment.label.value} ({format_confidence(sentiment.confidence)})",
        color=_TIER_COLORS[sentiment_tier(sentiment)],
    )


def render_export_actions(report: ReportData, source_name: str | None = None) -> None:
    """Copyable plain-text export plus a .txt download."""
    report_text = format_report_text(report)
    col_copy, col_download = st.columns([3, 1])
    with col_copy:
        with st.expander("Copy as text"):
            # st.code shows a copy-to-clipboard button on hover
            st.code(report_text, language=None)
    with col_download:
        st.download_button(
            label="Download .txt",
            data=report_text,
            file_name=export_file_name(source_name),
            mime="text/plain",
            use_container_width=True,
        )


def render_section(section: ReportSection, marketable_quotes: tuple[str, ...]) -> None:
    """One collapsible transcript section; collapsed by default."""
    label = (
        f"**{escape_markdown(section.timestamp)}** — {section.sentiment.label.value} "
        f"({format_confidence(section.sentiment.confidence)})"
    )
    with st.expander(label, expanded=False):
        render_sentiment_badge(section.sentiment)

        st.markdown("**Original (Verbatim)**")
        st.markdown(f"*{escape_markdown(section.original)}*")

        st.markdown("**English (Translation)**")
        st.markdown(
            highlight_html(section.translation, marketable_quotes),
            unsafe_allow_html=True,
        )

        if section.notes:
            st.divider()
            st.markdown("**Analyst Notes**")
            st.caption(escape_markdown(section.notes))


def render_report(report: ReportData, title: str, source_name: str | None = None) -> None:
    """Render the full report."""
    st.header(title)
    st.caption("Transcript, Translation & Sentiment Report")
    render_export_actions(report, source_name)

    st.subheader("Overall Analysis")
    st.markdown("**Executive Summary**")
    st.info(escape_markdown(report.overall_summary))

    col_sentiment, col_markers, col_points = st.columns(3)
    with col_sentiment:
        with st.container(border=True):
            st.markdown("**Overall Sentiment**")
            render_sentiment_badge(report.overall_sentiment)
    with col_markers:
        with st.container(border=True):
            st.markdown("**Emotional Markers**")
            if report.emotional_markers:
                st.markdown(
                    " ".join(
                        f":gray-background[{escape_markdown(marker)}]"
                        for marker in report.emotional_markers
                    )
                )
    with col_points:
        with st.container(border=True):
            st.markdown("**Key Points**")
            for phrase in report.key_positive_phrases:
                st.markdown(f":green[+ {escape_markdown(phrase)}]")
            for point in report.frictional_points:
                st.markdown(f":red[- {escape_markdown(point)}]")

    if report.marketable_quotes:
        st.subheader("Marketable Quotes")
        for quote in report.marketable_quotes:
            st.markdown(f"> *{escape_markdown(quote)}*")

    st.subheader("Detailed Breakdown")
    for section in report.sections:
        render_section(section, report.marketable_quotes)
