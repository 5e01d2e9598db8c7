"""Unit tests for AnalysisClient and response parsing."""

import json
from unittest.mock import patch

import pytest

from src.core.exceptions import AnalysisServiceError, ResponseValidationError
from src.core.models import AudioPayload, ReportData
from src.services.analysis import AnalysisClient, parse_report
from src.services.analysis.prompt import ANALYSIS_PROMPT, RESPONSE_SCHEMA


@pytest.fixture
def payload():
    return AudioPayload(file_name="dealer.wav", mime_type="audio/wav", data="UklGRg==")


# ---------------------------------------------------------------------------
# parse_report
# ---------------------------------------------------------------------------


class TestParseReport:
    """Shape validation of the model response."""

    def test_valid_response(self, report_json):
        report = parse_report(report_json)

        assert isinstance(report, ReportData)
        assert len(report.sections) == 2

    def test_fenced_response(self, report_json):
        report = parse_report(f"```json\n{report_json}\n```")

        assert report.overall_sentiment.confidence == 0.875

    def test_malformed_json(self):
        with pytest.raises(ResponseValidationError):
            parse_report('{"overallSummary": "cut off')

    def test_non_object_json(self):
        with pytest.raises(ResponseValidationError):
            parse_report("[]")

    @pytest.mark.parametrize("field", ["overallSummary", "overallSentiment", "sections"])
    def test_missing_essential_field(self, report_dict, field):
        del report_dict[field]

        with pytest.raises(ResponseValidationError) as exc_info:
            parse_report(json.dumps(report_dict))

        assert exc_info.value.code == "RESPONSE_VALIDATION_ERROR"

    def test_null_sections(self, report_dict):
        report_dict["sections"] = None

        with pytest.raises(ResponseValidationError):
            parse_report(json.dumps(report_dict))

    def test_malformed_sections(self, report_dict):
        report_dict["sections"] = "[00:00] hello"

        with pytest.raises(ResponseValidationError):
            parse_report(json.dumps(report_dict))

    def test_section_missing_translation(self, report_dict):
        del report_dict["sections"][1]["translation"]

        with pytest.raises(ResponseValidationError):
            parse_report(json.dumps(report_dict))

    def test_empty_sections_list_accepted(self, report_dict):
        report_dict["sections"] = []

        assert parse_report(json.dumps(report_dict)).sections == ()


# ---------------------------------------------------------------------------
# AnalysisClient
# ---------------------------------------------------------------------------


class TestAnalysisClient:
    """End-to-end client behaviour with a mocked provider."""

    async def test_returns_report(self, mock_llm, payload):
        report = await AnalysisClient(llm=mock_llm).analyze(payload)

        assert report.emotional_markers == ("Trust", "Satisfaction")

    async def test_sends_prompt_and_schema(self, mock_llm, payload):
        await AnalysisClient(llm=mock_llm).analyze(payload)

        mock_llm.analyze_audio.assert_awaited_once_with(
            payload,
            prompt=ANALYSIS_PROMPT,
            response_schema=RESPONSE_SCHEMA,
        )

    async def test_service_error_propagates(self, mock_llm, payload):
        mock_llm.analyze_audio.side_effect = AnalysisServiceError()

        with pytest.raises(AnalysisServiceError):
            await AnalysisClient(llm=mock_llm).analyze(payload)

    async def test_missing_sections_is_validation_error(self, mock_llm, payload, report_dict):
        del report_dict["sections"]
        mock_llm.analyze_audio.return_value = json.dumps(report_dict)

        with pytest.raises(ResponseValidationError):
            await AnalysisClient(llm=mock_llm).analyze(payload)

    def test_default_provider_from_settings(self, mock_llm):
        with patch("src.services.analysis.client.create_llm", return_value=mock_llm) as factory:
            client = AnalysisClient()

        factory.assert_called_once()
        assert client._llm is mock_llm


class TestResponseSchema:
    """The declared schema matches the wire contract."""

    def test_all_top_level_fields_required(self):
        assert set(RESPONSE_SCHEMA["required"]) == set(RESPONSE_SCHEMA["properties"])

    def test_sentiment_subfields_required(self):
        overall = RESPONSE_SCHEMA["properties"]["overallSentiment"]
        section = RESPONSE_SCHEMA["properties"]["sections"]["items"]["properties"]["sentiment"]

        assert overall["required"] == ["sentiment", "confidence"]
        assert section["required"] == ["sentiment", "confidence"]
        assert overall["properties"]["sentiment"]["enum"] == ["Positive", "Neutral", "Negative"]

    def test_prompt_asks_for_timestamped_sections(self):
        assert "[00:00 - 00:25]" in ANALYSIS_PROMPT
        assert "marketableQuotes" in ANALYSIS_PROMPT
