"""Data models."""

from .config import GridLayout, SlotSettings
from .slot import Command, SlotState, SlotView

__all__ = ["Command", "GridLayout", "SlotSettings", "SlotState", "SlotView"]
