import logging
import os

from pydantic import BaseModel, Field, field_validator


class TriageSettings(BaseModel):
    reply_delay: float = Field(default=0.0, ge=0.0)  # seconds of simulated "thinking"
    max_conditions: int = Field(default=3, ge=1)  # conditions listed per chat reply
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_settings() -> TriageSettings:
    """Build settings from ``SYMPTOM_TRIAGE_*`` environment variables."""

    return TriageSettings(
        reply_delay=os.getenv("SYMPTOM_TRIAGE_REPLY_DELAY", "0"),
        max_conditions=os.getenv("SYMPTOM_TRIAGE_MAX_CONDITIONS", "3"),
        log_level=os.getenv("SYMPTOM_TRIAGE_LOG_LEVEL", "INFO"),
    )
