import logging
import os

from pydantic import BaseModel, field_validator

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = DEFAULT_LOG_FORMAT

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level '{value}'. Expected one of {', '.join(LOG_LEVELS)}."
            )
        return value

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.LOG_LEVEL)

    @classmethod
    def load(cls) -> "Settings":
        overrides = {
            name: os.environ[name]
            for name in ("LOG_LEVEL", "LOG_FORMAT")
            if os.environ.get(name)
        }
        return cls(**overrides)
