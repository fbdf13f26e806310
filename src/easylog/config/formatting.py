"""
Formatting Configuration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from easylog.formatting.options import DEFAULT_MAX_DEPTH, DEFAULT_MAX_ITEMS, FormatOptions
from easylog.formatting.layout import DEFAULT_BOXED_THRESHOLD


class FormattingSettings(BaseSettings):
    """Bounds for the value formatter."""

    model_config = SettingsConfigDict(
        env_prefix="EASYLOG_FORMAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=0)
    max_items: int = Field(default=DEFAULT_MAX_ITEMS, ge=1)
    boxed_threshold: int = Field(default=DEFAULT_BOXED_THRESHOLD, ge=0)

    def to_options(self) -> FormatOptions:
        return FormatOptions(
            max_depth=self.max_depth,
            max_items=self.max_items,
            boxed_threshold=self.boxed_threshold,
        )
