"""
Application configuration via pydantic-settings.

Loads values from .env file with sensible defaults for local development.
Use ``get_settings()`` to obtain the cached singleton instance.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Testimonial analyzer settings loaded from environment / .env file.

    All settings can be overridden via environment variables or a `.env` file.
    Field names map directly to env var names (case-insensitive).

    Attributes:
        llm_provider: Which model backend analyses the audio ("gemini").
        gemini_api_key: Credential for the Gemini API (``GEMINI_API_KEY``).
        gemini_model: Model name passed to ``generate_content``.
        request_timeout_seconds: Upper bound for the single analysis call.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Silently ignore unrecognized env vars
    )

    # --- Model provider ---
    llm_provider: str = "gemini"

    # Gemini (Google GenAI API) settings
    gemini_api_key: str = ""  # Required when llm_provider="gemini"
    gemini_model: str = "gemini-2.5-flash"
    request_timeout_seconds: float = 300.0  # Long recordings take a while

    # --- Application ---
    log_level: str = "INFO"  # Python logging level
    report_title: str = "Dealer Testimonial Analysis"


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings singleton.

    Uses ``functools.lru_cache`` so the .env file is read only once.
    Subsequent calls return the same ``Settings`` instance.

    Returns:
        Settings: The application-wide configuration object.
    """
    return Settings()
