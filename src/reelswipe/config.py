"""Runtime configuration for ReelSwipe.

Settings come from environment variables, optionally seeded from a ``.env``
file in the working directory. API keys are kept as ``SecretStr`` so they do
not leak into logs or reprs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Sequence

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS: tuple[str, ...] = ("*",)


class ConfigError(RuntimeError):
    """Raised when configuration cannot be loaded safely."""


class AppConfig(BaseSettings):
    """Typed runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        validate_default=True,
    )

    # Credentials
    youtube_api_key: SecretStr | None = Field(default=None, validation_alias="YOUTUBE_API_KEY")
    pexels_api_key: SecretStr | None = Field(default=None, validation_alias="PEXELS_API_KEY")
    pixabay_api_key: SecretStr | None = Field(default=None, validation_alias="PIXABAY_API_KEY")
    reddit_user_agent: str = Field(
        default="ReelSwipe/1.0",
        validation_alias=AliasChoices("REELSWIPE_REDDIT_USER_AGENT", "REDDIT_USER_AGENT"),
    )

    # Server
    host: str = Field(default="0.0.0.0", validation_alias=AliasChoices("REELSWIPE_HOST", "HOST"))
    port: int = Field(default=5000, ge=1, le=65535, validation_alias=AliasChoices("REELSWIPE_PORT", "PORT"))
    http_timeout: float = Field(default=10.0, gt=0, validation_alias="REELSWIPE_HTTP_TIMEOUT")
    static_dir: Path = Field(default=Path("public"), validation_alias="REELSWIPE_STATIC_DIR")
    cors_origins: Annotated[tuple[str, ...], NoDecode] = Field(
        DEFAULT_CORS_ORIGINS, validation_alias="REELSWIPE_CORS_ORIGINS"
    )

    # Logging
    log_level: str = Field(default="INFO", validation_alias=AliasChoices("REELSWIPE_LOG_LEVEL", "LOG_LEVEL"))
    log_path: Path | None = Field(default=None, validation_alias="REELSWIPE_LOG_PATH")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: str | Sequence[str] | None) -> tuple[str, ...]:
        if value is None:
            return DEFAULT_CORS_ORIGINS
        if isinstance(value, str):
            tokens = [part.strip() for part in value.split(",") if part.strip()]
            return tuple(tokens) if tokens else DEFAULT_CORS_ORIGINS
        return tuple(value)

    @field_validator("log_level", mode="after")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    def missing_api_keys(self) -> list[str]:
        """Return the env var names of provider keys that are not set."""
        keys = {
            "YOUTUBE_API_KEY": self.youtube_api_key,
            "PEXELS_API_KEY": self.pexels_api_key,
            "PIXABAY_API_KEY": self.pixabay_api_key,
        }
        return [name for name, secret in keys.items() if secret is None or not secret.get_secret_value()]


def secret_value(secret: SecretStr | None) -> str:
    """Unwrap an optional secret, treating a missing one as an empty string."""
    return secret.get_secret_value() if secret is not None else ""


def load_config(env_path: Path | None = None) -> AppConfig:
    """Load configuration from .env/environment with validation."""
    load_kwargs: dict[str, str] = {}
    if env_path is not None:
        load_dotenv(env_path, override=False)
        load_kwargs["_env_file"] = str(env_path)
    else:
        load_dotenv(override=False)
    try:
        config = AppConfig(**load_kwargs)
    except ValidationError as exc:
        raise ConfigError("Invalid configuration") from exc

    for name in config.missing_api_keys():
        logger.warning(f"{name} is not set; requests to that provider will be rejected upstream")
    return config
