"""Grid and slot services."""

from .grid import Category, GridController, make_slot_factory
from .slot_resolver import SlotResolver

__all__ = ["Category", "GridController", "SlotResolver", "make_slot_factory"]
