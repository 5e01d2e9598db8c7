"""Shared pytest fixtures for the testimonial analyzer test suite.

Provides a canned model response, the parsed report, a mock LLM provider
and a small WAV file for upload tests.
"""

import copy
import json
import struct
from unittest.mock import AsyncMock

import pytest

# ---------------------------------------------------------------------------
# Report Fixtures
# ---------------------------------------------------------------------------

_REPORT_JSON = {
    "overallSummary": (
        "The dealer praises the product's reliability and the support team. "
        "Delivery delays were the only complaint."
    ),
    "overallSentiment": {"sentiment": "Positive", "confidence": 0.875},
    "emotionalMarkers": ["Trust", "Satisfaction"],
    "keyPositivePhrases": ["very reliable", "great support"],
    "frictionalPoints": ["delivery was late"],
    "marketableQuotes": ["Best decision we ever made"],
    "sections": [
        {
            "timestamp": "[00:00 - 00:25]",
            "original": "Fue la mejor decisión que tomamos.",
            "translation": "Honestly, it was the best decision we ever made.",
            "sentiment": {"sentiment": "Positive", "confidence": 0.9},
            "notes": "Strong endorsement.",
        },
        {
            "timestamp": "[00:25 - 00:50]",
            "original": "La entrega llegó tarde.",
            "translation": "The delivery was late.",
            "sentiment": {"sentiment": "Negative", "confidence": 0.6},
            "notes": "",
        },
    ],
}


@pytest.fixture
def report_dict():
    """A fresh copy of a complete camelCase model response."""
    return copy.deepcopy(_REPORT_JSON)


@pytest.fixture
def report_json(report_dict):
    """The model response serialized as JSON text."""
    return json.dumps(report_dict)


@pytest.fixture
def report(report_dict):
    """The model response parsed into ``ReportData``."""
    from src.core.models import ReportData

    return ReportData.model_validate(report_dict)


# ---------------------------------------------------------------------------
# LLM Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_llm(report_json):
    """Create a mock LLM provider for unit testing.

    Returns:
        AsyncMock: A mock implementing the BaseLLM interface whose
        ``analyze_audio`` returns the canned report JSON.
    """
    from src.services.llm.base import BaseLLM

    llm = AsyncMock(spec=BaseLLM)
    llm.analyze_audio.return_value = report_json
    return llm


# ---------------------------------------------------------------------------
# Audio Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_pcm_bytes():
    """Generate 0.25 seconds of 440Hz sine-wave PCM audio (16kHz, 16-bit, mono).

    Returns:
        bytes: Raw PCM audio data.
    """
    import math

    sample_rate = 16000
    duration = 0.25
    frequency = 440.0
    amplitude = 16000  # ~50% of max int16

    samples = []
    for i in range(int(sample_rate * duration)):
        value = int(amplitude * math.sin(2 * math.pi * frequency * i / sample_rate))
        samples.append(struct.pack("<h", value))
    return b"".join(samples)


@pytest.fixture
def sample_wav_bytes(tmp_path, sample_pcm_bytes):
    """A complete WAV file, as a browser upload would deliver it.

    Returns:
        bytes: WAV file content.
    """
    import wave

    wav_path = tmp_path / "test_audio.wav"
    with wave.open(str(wav_path), "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(16000)
        wf.writeframes(sample_pcm_bytes)
    return wav_path.read_bytes()
