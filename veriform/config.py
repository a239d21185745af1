# -*- coding: utf-8 -*-
"""Location: ./veriform/config.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Veriform Configuration.
This module defines configuration settings for the Veriform decoder using Pydantic.
It loads configuration from environment variables with sensible defaults.

Environment variables:
- VERIFORM_LOG_LEVEL: Logging level used by the CLI (default: "WARNING")
- VERIFORM_MAX_MESSAGE_SIZE: Largest message in bytes the parser accepts (default: 1024)

Examples:
    >>> from veriform.config import Settings
    >>> s = Settings(log_level="debug", max_message_size=4096)
    >>> s.log_level
    'DEBUG'
    >>> s.max_message_size
    4096
    >>> try:
    ...     Settings(log_level="chatty")
    ... except ValueError:
    ...     print("error")
    error
"""

# Standard
from functools import lru_cache
import logging
from typing import Any, Literal

# Third-Party
from pydantic import Field, field_validator, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Default maximum message length in bytes
DEFAULT_MAX_MESSAGE_SIZE = 1024

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Veriform configuration settings.

    Examples:
        >>> s = Settings()
        >>> s.max_message_size == DEFAULT_MAX_MESSAGE_SIZE
        True
    """

    log_level: LogLevel = Field(default="WARNING", description="Logging level for the veriform CLI")
    max_message_size: PositiveInt = Field(default=DEFAULT_MAX_MESSAGE_SIZE, description="Largest message in bytes accepted by the parser")

    model_config = SettingsConfigDict(env_prefix="VERIFORM_", env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        """Normalize the log level to upper case.

        Args:
            v: Raw log level value.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the level is not a known logging level.

        Examples:
            >>> Settings.validate_log_level("info")
            'INFO'
        """
        level = str(v).strip().upper()
        if level not in LogLevel.__args__:
            raise ValueError(f"Invalid log_level: {v}")
        return level


@lru_cache()
def get_settings(**kwargs: Any) -> Settings:
    """Get cached settings instance.

    Args:
        **kwargs: Keyword arguments to pass to the Settings setup.

    Returns:
        Settings: A cached instance of the Settings class.

    Examples:
        >>> settings = get_settings()
        >>> settings is get_settings()
        True
    """
    cfg = Settings(**kwargs)
    logger.debug(f"Loaded veriform settings: max_message_size={cfg.max_message_size}")
    return cfg


class LazySettingsWrapper:
    """Lazily initialize settings singleton on getattr"""

    def __getattr__(self, key: str) -> Any:
        """Get the real settings object and forward to it

        Args:
            key: The key to fetch from settings

        Returns:
            Any: The value of the attribute on the settings
        """
        return getattr(get_settings(), key)


settings = LazySettingsWrapper()
