"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tripview.toml only contains
overrides. The defaults reproduce the fixed display rules exactly.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from tripview.display.dates import RANGE_SEPARATOR
from tripview.display.text import LIST_MAX_ITEMS, LIST_PLACEHOLDER, LIST_SEPARATOR

# --- tripview.toml sections ---


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    range_separator: str = RANGE_SEPARATOR
    list_separator: str = LIST_SEPARATOR
    list_max_items: int = Field(default=LIST_MAX_ITEMS, ge=3)
    list_placeholder: str = LIST_PLACEHOLDER
    timezone: str | None = None
