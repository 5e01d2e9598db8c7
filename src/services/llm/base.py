"""
Abstract base class for audio-capable LLM providers.

Provider implementations (Gemini today) must implement this interface,
keeping the analysis client independent of any one SDK.
"""

from abc import ABC, abstractmethod

from src.core.models import AudioPayload


class BaseLLM(ABC):
    """Interface that every audio analysis provider must implement."""

    @abstractmethod
    async def analyze_audio(
        self,
        payload: AudioPayload,
        prompt: str,
        response_schema: dict,
        **kwargs,
    ) -> str:
        """Send inline audio plus instructions and return structured JSON text.

        Args:
            payload: Base64-encoded audio with its media type.
            prompt: Natural-language instructions for the model.
            response_schema: Schema the JSON response must follow.
            **kwargs: Provider-specific options (temperature, etc.).

        Returns:
            The model's raw JSON response text.

        Raises:
            AnalysisServiceError: On network, auth, quota or service failures.
        """
