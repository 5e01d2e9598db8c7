"""
Gemini LLM provider implementation.

Uses the Google GenAI SDK's synchronous client (``google.genai.Client``) to
send inline audio with a declared JSON response schema. The blocking call
runs in a worker thread, so the client is not tied to any one event loop and
can be cached for the lifetime of the process. Exactly one request is issued
per call; failures are not retried.
"""

import asyncio
import logging

import httpx
from google import genai
from google.genai import errors, types

from src.core.config import get_settings
from src.core.exceptions import AnalysisServiceError
from src.core.models import AudioPayload
from src.services.llm.base import BaseLLM

logger = logging.getLogger(__name__)


class GeminiLLM(BaseLLM):
    """Gemini API provider for audio transcription and analysis."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        timeout_seconds: float | None = None,
        temperature: float | None = None,
        base_url: str | None = None,
    ) -> None:
        settings = get_settings()
        self._api_key = api_key or settings.gemini_api_key
        self._model = model or settings.gemini_model
        self._timeout_seconds = timeout_seconds or settings.request_timeout_seconds
        self._temperature = temperature
        self._client = genai.Client(
            api_key=self._api_key,
            # HttpOptions.timeout is in milliseconds
            http_options=types.HttpOptions(
                timeout=int(self._timeout_seconds * 1000),
                base_url=base_url,
            ),
        )

    def _build_contents(self, payload: AudioPayload, prompt: str) -> list:
        audio_part = types.Part.from_bytes(
            data=payload.to_bytes(),
            mime_type=payload.mime_type,
        )
        return [audio_part, prompt]

    async def analyze_audio(
        self,
        payload: AudioPayload,
        prompt: str,
        response_schema: dict,
        **kwargs,
    ) -> str:
        """Send the audio and prompt to Gemini and return the JSON text.

        SDK and transport exceptions are translated to ``AnalysisServiceError``
        so callers only deal with one failure type.
        """
        temperature = kwargs.pop("temperature", self._temperature)
        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=response_schema,
            temperature=temperature,
        )

        try:
            response = await asyncio.to_thread(
                self._client.models.generate_content,
                model=self._model,
                contents=self._build_contents(payload, prompt),
                config=config,
            )
        except errors.ClientError as exc:
            # 4xx: bad key, quota exhausted, unsupported audio
            logger.warning("Gemini API rejected the request (%s): %s", exc.code, exc.message)
            raise AnalysisServiceError() from exc
        except errors.APIError as exc:
            logger.warning("Gemini API error (%s): %s", exc.code, exc.message)
            raise AnalysisServiceError() from exc
        except httpx.TimeoutException as exc:
            logger.warning("Gemini API timeout: %s", exc)
            raise AnalysisServiceError(
                "The analysis timed out. Please try again with a shorter recording."
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("Gemini API connection error: %s", exc)
            raise AnalysisServiceError() from exc
        except ValueError as exc:
            logger.error("Could not build Gemini request: %s", exc)
            raise AnalysisServiceError() from exc

        text = response.text or ""
        logger.info("Gemini (%s) returned %d characters", self._model, len(text))
        return text
