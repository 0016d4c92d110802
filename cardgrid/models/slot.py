"""Slot state definitions."""

from dataclasses import dataclass
from enum import Enum


class SlotState(Enum):
    IDLE = "idle"
    EDITING = "editing"
    LOOKING_UP = "looking_up"
    RESOLVED = "resolved"
    FAILED = "failed"


class Command(Enum):
    """UI side effect requested by a slot transition."""
    SHOW_INPUT = "show_input"
    HIDE_INPUT = "hide_input"
    FOCUS_INPUT = "focus_input"


@dataclass(frozen=True)
class SlotView:
    """Read-only snapshot of a slot for rendering."""
    state: SlotState
    image_url: str              # Never empty: card back, fallback or resolved URL
    query: str
    input_visible: bool
    generation: int             # Bumped on every submit; only the latest lookup may land
