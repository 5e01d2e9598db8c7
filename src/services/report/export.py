"""
Plain-text export of an analysis report.

``format_report_text`` produces the document behind the "copy as text"
action. Output depends only on the report, so the same report always
yields byte-identical text.
"""

from pathlib import PurePath

from src.core.models import ReportData, Sentiment, SentimentLabel
from src.core.utils import format_confidence

REPORT_HEADING = "Dealer Testimonial — Transcript + Translation + Sentiment Report"
_RULE = "-" * 66
_DOUBLE_RULE = "=" * 66


def sentiment_tier(sentiment: Sentiment) -> str:
    """Map a sentiment to its display tier: positive, negative or neutral."""
    if sentiment.label == SentimentLabel.positive:
        return "positive"
    if sentiment.label == SentimentLabel.negative:
        return "negative"
    return "neutral"


def format_sentiment(sentiment: Sentiment) -> str:
    """``Positive (90% confidence)``"""
    return f"{sentiment.label.value} ({format_confidence(sentiment.confidence)} confidence)"


def _bullets(items, prefix: str = "    - ") -> str:
    return "\n".join(f"{prefix}{item}" for item in items)


def format_report_text(report: ReportData) -> str:
    """Serialize a report into the fixed plain-text layout.

    The "Key Positive Phrases", "Frictional Points" and "Marketable Quotes"
    blocks are omitted exactly when their lists are empty.
    """
    content = f"{REPORT_HEADING}\n{_DOUBLE_RULE}\n\n"

    content += "EXECUTIVE SUMMARY\n------------------\n"
    content += f"{report.overall_summary}\n\n"

    content += "OVERALL ANALYSIS\n----------------\n"
    content += f"  - Sentiment: {format_sentiment(report.overall_sentiment)}\n"
    content += f"  - Emotional Markers: {', '.join(report.emotional_markers)}\n"
    if report.key_positive_phrases:
        content += f"  - Key Positive Phrases:\n{_bullets(report.key_positive_phrases)}\n"
    if report.frictional_points:
        content += f"  - Frictional Points:\n{_bullets(report.frictional_points)}\n"
    content += "\n"

    if report.marketable_quotes:
        content += "MARKETABLE QUOTES\n------------------\n"
        content += "\n".join(f'  • "{quote}"' for quote in report.marketable_quotes)
        content += "\n\n"

    content += "DETAILED BREAKDOWN\n==================\n\n"
    for section in report.sections:
        content += f"SECTION: {section.timestamp}\n"
        content += "------------------\n"
        content += f"  - Sentiment: {format_sentiment(section.sentiment)}\n"
        content += f"  - Analyst Notes: {section.notes}\n\n"
        content += f'  Original (Verbatim):\n  "{section.original}"\n\n'
        content += f'  English (Translation):\n  "{section.translation}"\n\n'
        content += f"{_RULE}\n\n"

    return content


def export_file_name(source_name: str | None) -> str:
    """Download name for a report, e.g. ``dealer_01.mp3 -> dealer_01_report.txt``."""
    stem = PurePath(source_name).stem if source_name else ""
    return f"{stem or 'testimonial'}_report.txt"
