"""
Vigenere Breaker - Configuration Management
Centralized configuration using pydantic-settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent

    # Key-length estimation
    MIN_COLUMN_LENGTH: int = 50  # shortest column considered statistically reliable
    ABSOLUTE_MAX_KEY_LENGTH: int = 50
    ENGLISH_IC: float = 0.065
    DIVISOR_IC_TOLERANCE: float = 0.01

    # Diagnostics shown by the CLI
    TOP_N_CANDIDATES: int = 3

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Path = PROJECT_ROOT / "vigenere.log"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
