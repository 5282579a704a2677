"""Application configuration using pydantic-settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


# Find .env file: check backend dir first, then project root
_BACKEND_DIR = Path(__file__).parent.parent
_PROJECT_ROOT = _BACKEND_DIR.parent
_ENV_FILE = _BACKEND_DIR / ".env" if (_BACKEND_DIR / ".env").exists() else _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Registry settings loaded from environment variables.

    Every field can be overridden with an ``EMERGENCY_`` prefixed variable,
    e.g. ``EMERGENCY_CSV_ENCODING=latin-1``.
    """

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        env_prefix="EMERGENCY_",
        extra="ignore",
    )

    # Working hours recorded for professionals that do not declare any
    default_working_hours: str = "24"

    # Encoding used when ingesting CSV files from a path
    csv_encoding: str = "utf-8"


settings = Settings()
