"""
Testimonial analyzer exception hierarchy.

All application-specific exceptions inherit from AnalyzerError so the UI
layer can reduce any failure to a single human-readable ``detail`` message.
"""

from datetime import UTC, datetime


class AnalyzerError(Exception):
    """Base exception for all analyzer errors."""

    def __init__(
        self,
        detail: str = "An unexpected error occurred",
        code: str = "ANALYZER_ERROR",
    ) -> None:
        self.detail = detail
        self.code = code
        self.timestamp = datetime.now(UTC).isoformat()
        super().__init__(detail)


class NoFileSelectedError(AnalyzerError):
    """Raised when an analysis is requested before any file was chosen."""

    def __init__(self) -> None:
        super().__init__(
            detail="Please select a file first.",
            code="NO_FILE_SELECTED",
        )


class UnsupportedMediaTypeError(AnalyzerError):
    """Raised when the chosen file is not an audio file."""

    def __init__(self, mime_type: str | None) -> None:
        super().__init__(
            detail=f"Unsupported file type: {mime_type or 'unknown'}. Please choose an audio file.",
            code="UNSUPPORTED_MEDIA_TYPE",
        )


class AudioEncodingError(AnalyzerError):
    """Raised when the audio file cannot be read or encoded."""

    def __init__(self, detail: str = "Could not read the selected audio file.") -> None:
        super().__init__(detail=detail, code="AUDIO_ENCODING_ERROR")


class AnalysisServiceError(AnalyzerError):
    """Raised when the external model call fails (network, auth, quota)."""

    def __init__(
        self,
        detail: str = (
            "Failed to analyze the testimonial. "
            "The audio might be unsupported or the API call failed."
        ),
    ) -> None:
        super().__init__(detail=detail, code="ANALYSIS_SERVICE_ERROR")


class ResponseValidationError(AnalyzerError):
    """Raised when the model response is missing required fields or is not JSON."""

    def __init__(self, detail: str = "Invalid data structure received from API.") -> None:
        super().__init__(detail=detail, code="RESPONSE_VALIDATION_ERROR")


class AnalysisInProgressError(AnalyzerError):
    """Raised when trying to start an analysis while one is already running."""

    def __init__(self) -> None:
        super().__init__(
            detail="An analysis is already in progress",
            code="ANALYSIS_IN_PROGRESS",
        )
