"""
Audio module - Upload validation and inline encoding.
"""

from .encoder import SUPPORTED_EXTENSIONS, encode_audio, is_audio_mime_type

__all__ = ["SUPPORTED_EXTENSIONS", "encode_audio", "is_audio_mime_type"]
