"""
Report module - Quote highlighting and plain-text export.
"""

from .export import export_file_name, format_report_text, format_sentiment, sentiment_tier
from .highlight import find_highlight_spans, highlight_html, highlight_segments

__all__ = [
    "export_file_name",
    "find_highlight_spans",
    "format_report_text",
    "format_sentiment",
    "highlight_html",
    "highlight_segments",
    "sentiment_tier",
]
