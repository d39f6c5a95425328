"""
Library configuration management.

This module handles configuration from environment variables using Pydantic Settings.
"""

from pydantic_settings import BaseSettings

from .constants import DISAMBIGUATION_FACTOR


class Settings(BaseSettings):
    """
    Library configuration from environment variables.

    All settings can be overridden via environment variables prefixed with
    ``SEMTEXT_`` (e.g. ``SEMTEXT_LOG_LEVEL=DEBUG``).
    """

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Disambiguation heuristic: a top meaning must score more than
    # disambiguation_factor / len(meanings) to be picked automatically
    disambiguation_factor: float = DISAMBIGUATION_FACTOR

    model_config = {
        "env_prefix": "SEMTEXT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()
