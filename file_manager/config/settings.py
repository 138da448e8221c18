"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from file_manager.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.username: str = self._get_env("FILE_MANAGER_USERNAME", "Guest")
        self.chunk_size: int = self._get_int_env(
            "FILE_MANAGER_CHUNK_SIZE", 64 * 1024, minimum=1
        )
        self.brotli_quality: int = self._get_int_env(
            "FILE_MANAGER_BROTLI_QUALITY", 11, minimum=0, maximum=11
        )
        self.log_level: str = self._get_env("FILE_MANAGER_LOG_LEVEL", "WARNING").upper()

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int_env(
        self,
        key: str,
        default: int,
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> int:
        """Get an integer environment variable, raise error if malformed or out of range."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer")
        if minimum is not None and value < minimum:
            raise ConfigurationError(f"Environment variable {key} must be >= {minimum}")
        if maximum is not None and value > maximum:
            raise ConfigurationError(f"Environment variable {key} must be <= {maximum}")
        return value
