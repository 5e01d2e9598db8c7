"""
Pydantic v2 models for the analysis report and the audio payload.

Report models mirror the camelCase JSON returned by the model through
field aliases; Python code uses the snake_case field names.
"""

import base64
import binascii
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------------------------------------------------------------------------
# Sentiment
# ---------------------------------------------------------------------------


class SentimentLabel(StrEnum):
    """Sentiment labels the model is allowed to return."""

    positive = "Positive"
    neutral = "Neutral"
    negative = "Negative"


class _ReportModel(BaseModel):
    """Immutable base for report value objects."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Sentiment(_ReportModel):
    """A sentiment label with the model's confidence in it."""

    label: SentimentLabel = Field(alias="sentiment")
    confidence: float = Field(ge=0.0, le=1.0)

    @field_validator("label", mode="before")
    @classmethod
    def _normalize_label(cls, value):
        # Models occasionally answer "positive" or " NEUTRAL "
        if isinstance(value, str):
            return value.strip().capitalize()
        return value


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------


class ReportSection(_ReportModel):
    """One time-bounded transcript segment with its translation and analysis."""

    timestamp: str
    original: str
    translation: str
    sentiment: Sentiment
    notes: str = ""


class ReportData(_ReportModel):
    """Complete structured analysis of a testimonial."""

    overall_summary: str = Field(alias="overallSummary")
    overall_sentiment: Sentiment = Field(alias="overallSentiment")
    emotional_markers: tuple[str, ...] = Field(default=(), alias="emotionalMarkers")
    key_positive_phrases: tuple[str, ...] = Field(default=(), alias="keyPositivePhrases")
    frictional_points: tuple[str, ...] = Field(default=(), alias="frictionalPoints")
    marketable_quotes: tuple[str, ...] = Field(default=(), alias="marketableQuotes")
    sections: tuple[ReportSection, ...]


# ---------------------------------------------------------------------------
# Audio payload
# ---------------------------------------------------------------------------


class AudioPayload(_ReportModel):
    """Base64-encoded audio ready to be sent inline to the model."""

    file_name: str = ""
    mime_type: str
    data: str

    def to_bytes(self) -> bytes:
        """Decode the base64 ``data`` back to raw audio bytes."""
        try:
            return base64.b64decode(self.data, validate=True)
        except binascii.Error as exc:
            raise ValueError(f"Payload data is not valid base64: {exc}") from exc


# ---------------------------------------------------------------------------
# UI session state
# ---------------------------------------------------------------------------


class AnalysisStatus(StrEnum):
    """Possible states of the single analysis session."""

    idle = "idle"
    selecting = "selecting"
    processing = "processing"
    showing_report = "showing_report"
    error = "error"
