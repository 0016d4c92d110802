"""Slot and grid configuration."""

from dataclasses import dataclass

from ..config import (
    CARD_BACK_URL,
    FALLBACK_IMAGE_URL,
    LOOKUP_TIMEOUT,
    SLOT_COLUMNS,
    SLOT_ROWS,
)


@dataclass(frozen=True)
class SlotSettings:
    """Immutable values injected into every slot resolver."""
    fallback_image_url: str = FALLBACK_IMAGE_URL   # Empty query or failed lookup
    card_back_url: str = CARD_BACK_URL             # Nothing applied yet
    lookup_timeout: float = LOOKUP_TIMEOUT         # Seconds, client-side
    show_input_on_mount: bool = True               # False = input opens on image click only


@dataclass(frozen=True)
class GridLayout:
    """Fixed sub-grid shape of a category."""
    rows: int = SLOT_ROWS
    columns: int = SLOT_COLUMNS

    @property
    def slots_per_category(self) -> int:
        return self.rows * self.columns
