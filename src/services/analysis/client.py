"""
Testimonial analysis client.

Packages an encoded audio payload with the fixed instructions and response
schema, calls the model provider once, and turns the JSON answer into a
validated ``ReportData``. Any failure surfaces as a single ``AnalyzerError``;
there is no retry and no partial result.
"""

import json
import logging

from pydantic import ValidationError

from src.core.config import get_settings
from src.core.exceptions import ResponseValidationError
from src.core.models import AudioPayload, ReportData
from src.core.utils import strip_code_fences
from src.services.analysis.prompt import ANALYSIS_PROMPT, ESSENTIAL_FIELDS, RESPONSE_SCHEMA
from src.services.llm import BaseLLM, create_llm

logger = logging.getLogger(__name__)


def parse_report(raw_text: str) -> ReportData:
    """Parse and validate the model's JSON response.

    Args:
        raw_text: JSON text returned by the provider, possibly fenced.

    Returns:
        The validated, immutable report.

    Raises:
        ResponseValidationError: If the text is not a JSON object, lacks the
            summary/sentiment/sections fields, or has the wrong shape.
    """
    try:
        data = json.loads(strip_code_fences(raw_text))
    except json.JSONDecodeError as exc:
        logger.warning("Model returned malformed JSON: %s", exc)
        raise ResponseValidationError() from exc

    if not isinstance(data, dict):
        logger.warning("Model returned %s instead of an object", type(data).__name__)
        raise ResponseValidationError()

    missing = [key for key in ESSENTIAL_FIELDS if data.get(key) in (None, "")]
    if missing:
        logger.warning("Model response missing required fields: %s", ", ".join(missing))
        raise ResponseValidationError()

    try:
        return ReportData.model_validate(data)
    except ValidationError as exc:
        logger.warning("Model response failed validation: %s", exc)
        raise ResponseValidationError() from exc


class AnalysisClient:
    """Sends one testimonial to the model and returns the parsed report.

    Args:
        llm: Provider to call. Defaults to the one selected by
            ``settings.llm_provider``.
    """

    def __init__(self, llm: BaseLLM | None = None) -> None:
        self._llm = llm or create_llm(provider=get_settings().llm_provider)

    async def analyze(self, payload: AudioPayload) -> ReportData:
        """Transcribe, translate and score the audio in ``payload``.

        Raises:
            AnalysisServiceError: If the provider call fails.
            ResponseValidationError: If the response has the wrong shape.
        """
        logger.info("Analyzing %s (%s)", payload.file_name or "<unnamed>", payload.mime_type)
        raw_text = await self._llm.analyze_audio(
            payload,
            prompt=ANALYSIS_PROMPT,
            response_schema=RESPONSE_SCHEMA,
        )
        report = parse_report(raw_text)
        logger.info(
            "Analysis complete: %s sentiment, %d section(s), %d quote(s)",
            report.overall_sentiment.label,
            len(report.sections),
            len(report.marketable_quotes),
        )
        return report
