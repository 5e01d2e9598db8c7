"""
Audio upload validation and base64 encoding.

Turns the raw bytes of a user-selected file into an ``AudioPayload`` the
model can receive inline. No decoding or resampling happens here; format
support is left to the model.
"""

import base64
import logging
import mimetypes

from src.core.exceptions import (
    AudioEncodingError,
    NoFileSelectedError,
    UnsupportedMediaTypeError,
)
from src.core.models import AudioPayload

logger = logging.getLogger(__name__)

AUDIO_MIME_PREFIX = "audio/"

# Extensions offered by the file picker; the model accepts more.
SUPPORTED_EXTENSIONS = ["mp3", "wav", "m4a", "aac", "ogg", "flac", "webm", "aiff"]


def resolve_mime_type(file_name: str, declared: str | None = None) -> str | None:
    """Return the declared media type, falling back to a guess from the name."""
    if declared:
        return declared.strip().lower()
    guessed, _ = mimetypes.guess_type(file_name)
    return guessed


def is_audio_mime_type(mime_type: str | None) -> bool:
    return bool(mime_type) and mime_type.lower().startswith(AUDIO_MIME_PREFIX)


def encode_audio(
    data: bytes | None,
    mime_type: str | None,
    file_name: str = "",
) -> AudioPayload:
    """Validate an uploaded audio file and base64-encode it.

    Args:
        data: Raw file content, or None when nothing was selected.
        mime_type: Media type reported by the browser (may be empty).
        file_name: Original file name, used to guess a missing media type.

    Returns:
        AudioPayload with the media type and base64 data.

    Raises:
        NoFileSelectedError: If ``data`` is None.
        UnsupportedMediaTypeError: If the media type is not ``audio/*``.
        AudioEncodingError: If the file is empty or cannot be encoded.
    """
    if data is None:
        raise NoFileSelectedError()

    resolved = resolve_mime_type(file_name, mime_type)
    if not is_audio_mime_type(resolved):
        raise UnsupportedMediaTypeError(resolved)

    if len(data) == 0:
        raise AudioEncodingError("The selected audio file is empty.")

    try:
        encoded = base64.b64encode(bytes(data)).decode("ascii")
    except (TypeError, ValueError) as exc:
        logger.warning("Failed to encode %s: %s", file_name or "<unnamed>", exc)
        raise AudioEncodingError() from exc

    logger.info(
        "Encoded %s (%s, %.2f MB)",
        file_name or "<unnamed>",
        resolved,
        len(data) / 1024 / 1024,
    )
    return AudioPayload(file_name=file_name, mime_type=resolved, data=encoded)
