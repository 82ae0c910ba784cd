from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DICEBAG_",
        extra="ignore",
    )

    environment: str = "local"
    log_level: str = "WARNING"

    # Notation policy. The strict default only accepts a lowercase "d" with no
    # surrounding whitespace; both relaxations are opt-in.
    accept_uppercase: bool = False
    strip_whitespace: bool = False

    # Which RandomSource backs a run: "system" uses the process-wide Mersenne
    # Twister, "secure" draws from the OS CSPRNG.
    random_source: Literal["system", "secure"] = "system"

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {v!r} (expected one of: {', '.join(LOG_LEVELS)})")
        return level


settings = Settings()
