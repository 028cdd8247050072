"""
Centralized configuration management using Pydantic Settings.

Configuration is loaded from environment variables with sensible defaults.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ObserverConfig(BaseSettings):
    """Observer registry configuration."""

    model_config = SettingsConfigDict(env_prefix="SMARTHOME_OBSERVER_")

    capacity: int = Field(
        default=5,
        ge=1,
        le=1000,
        description="Maximum number of callbacks the default registry holds",
    )


class ControllerConfig(BaseSettings):
    """Home controller configuration."""

    model_config = SettingsConfigDict(env_prefix="SMARTHOME_CONTROLLER_")

    name: str = Field(default="MainController", description="Controller display name")


class ProxyConfig(BaseSettings):
    """Device proxy configuration."""

    model_config = SettingsConfigDict(env_prefix="SMARTHOME_PROXY_")

    log_prefix: str = Field(default="[LOG]", description="Prefix for proxy trace lines")


class Settings(BaseSettings):
    """Application-wide settings."""

    model_config = SettingsConfigDict(
        env_prefix="SMARTHOME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # General
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="WARNING", description="Logging level")
    color: bool = Field(default=True, description="Colorize demo console output")

    # Nested configs
    observer: ObserverConfig = Field(default_factory=ObserverConfig)
    controller: ControllerConfig = Field(default_factory=ControllerConfig)
    proxy: ProxyConfig = Field(default_factory=ProxyConfig)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


# Singleton settings instance
settings = Settings()
