import logging
import sys
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central config loaded from environment variables and optionally .env (local).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # -------------------------
    # Quantile engine
    # Used whenever a call passes interpolation=None.
    # -------------------------
    default_interpolation: str = Field("linear", alias="NDSTATS_DEFAULT_INTERPOLATION")

    # -------------------------
    # Logging (applied by configure_logging only; the library never configures
    # handlers on import)
    # -------------------------
    log_level: str = Field("WARNING", alias="NDSTATS_LOG_LEVEL")

    @field_validator("default_interpolation")
    @classmethod
    def _known_interpolation(cls, value: str) -> str:
        from .interpolate.registry import registry

        name = value.strip().lower()
        if registry.get(name) is None:
            raise ValueError(
                f"default interpolation must be one of {', '.join(registry.list_names())}, got {value!r}"
            )
        return name

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level


settings = Settings()


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stream handler to the package logger (opt-in for applications)."""
    logger = logging.getLogger("ndstats")
    logger.setLevel(level or settings.log_level)
    if not any(getattr(h, "_ndstats_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        handler._ndstats_handler = True
        logger.addHandler(handler)
    return logger
