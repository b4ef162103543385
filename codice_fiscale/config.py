"""Package configuration via pydantic-settings.

Values are read from CF_-prefixed environment variables (.env file supported).

Usage:
    from codice_fiscale.config import settings
    settings.century_base
    settings.belfiore_path
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_BELFIORE_PATH = _DATA_DIR / "belfiore.csv"


class Settings(BaseSettings):
    """Codec and directory settings."""

    model_config = SettingsConfigDict(env_prefix="CF_", env_file=".env", extra="ignore")

    log_level: str = Field(default="INFO")

    # Codec
    century_base: int = Field(
        default=2000,
        description="Reference century used to resolve 2-digit birth years",
    )
    belfiore_path: Path = Field(
        default=DEFAULT_BELFIORE_PATH,
        description="Flat file with code,province,name rows",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper

    @field_validator("century_base")
    @classmethod
    def validate_century_base(cls, v: int) -> int:
        """Century base must be a whole century."""
        if v <= 0 or v % 100 != 0:
            msg = f"Invalid century base: {v}. Must be a positive multiple of 100"
            raise ValueError(msg)
        return v


# Module-level singleton — import this wherever settings are needed.
settings = Settings()
