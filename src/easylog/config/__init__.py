"""
easylog Configuration Module.

Settings are split into orthogonal domains, each with its own environment
variable prefix:

    EASYLOG_*          gate, tag and sinks (LoggingSettings)
    EASYLOG_FORMAT_*   formatter bounds (FormattingSettings)

Usage:
    from easylog.config import settings

    settings.logging.minimum_severity
    settings.formatting.to_options()

These settings only seed the runtime configuration; reconfiguration at runtime
goes through ``easylog.core.EasyLogConfig``.
"""

from functools import cached_property

from pydantic_settings import BaseSettings, SettingsConfigDict

from .formatting import FormattingSettings
from .logging import LoggingSettings


class Settings(BaseSettings):
    """Composite settings aggregating the configuration domains."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()

    @cached_property
    def formatting(self) -> FormattingSettings:
        return FormattingSettings()


# Singleton instance
settings = Settings()

__all__ = [
    "Settings",
    "settings",
    "LoggingSettings",
    "FormattingSettings",
]
