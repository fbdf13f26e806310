from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .layout import DEFAULT_BOXED_THRESHOLD

DEFAULT_MAX_DEPTH = 3
DEFAULT_MAX_ITEMS = 10


class FormatOptions(BaseModel):
    """Bounds applied by the value formatter."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=0, description="Recursion ceiling for nested values")
    max_items: int = Field(default=DEFAULT_MAX_ITEMS, ge=1, description="Children rendered before truncation")
    boxed_threshold: int = Field(
        default=DEFAULT_BOXED_THRESHOLD,
        ge=0,
        description="Child count above which the boxed header style is used",
    )
