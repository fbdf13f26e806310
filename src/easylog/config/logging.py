"""
Logging Configuration.
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from easylog.severity import Severity


class LoggingSettings(BaseSettings):
    """Gate, tag and sink configuration."""

    model_config = SettingsConfigDict(
        env_prefix="EASYLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    tag: str = Field(default="EASY-LOG", description="Tag shown by console and stdlib sinks")
    debug_enabled: bool = Field(default=True, description="Master switch; False skips formatting entirely")
    minimum_severity: Severity = Field(default=Severity.DEBUG, description="Lowest severity delivered to sinks")
    sinks: str = Field(default="console", description="Comma-separated sink names (console, file, stdlib, structlog)")
    file_path: str = Field(default="logs/easylog.log", description="Path for file sink")
    file_max_bytes: int = Field(default=10 * 1024 * 1024, ge=0, description="Rotate the file sink above this size")
    file_backup_count: int = Field(default=5, ge=0, description="Rotated files kept by the file sink")
    console_timestamp_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Console timestamp format",
    )
    console_level_width: int = Field(default=7, description="Console level column width")
    console_tag_width: int = Field(default=16, description="Console tag column width")
    console_separator: str = Field(default=" | ", description="Console column separator")

    @field_validator("minimum_severity", mode="before")
    @classmethod
    def _parse_severity(cls, value: Any) -> Severity:
        return Severity.coerce(value)
