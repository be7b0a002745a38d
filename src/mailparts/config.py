"""
Library configuration management.

This module handles configuration from environment variables using Pydantic Settings.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Parser configuration from environment variables.

    All settings can be overridden via environment variables prefixed with
    ``MAILPARTS_`` (e.g. ``MAILPARTS_MAX_NESTING_DEPTH=10``).
    """

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Content fingerprint of the raw message (any hashlib algorithm name)
    hash_algorithm: str = "sha1"

    # Deepest multipart level that is expanded into subparts
    max_nesting_depth: int = 50

    model_config = {
        "env_prefix": "MAILPARTS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()
