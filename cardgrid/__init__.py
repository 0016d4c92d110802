"""Card grid: free-text queries resolved to card images, slot by slot."""

from .clients import CardSearchClient, LookupFailed, NoResults
from .models import Command, GridLayout, SlotSettings, SlotState, SlotView
from .services import Category, GridController, SlotResolver, make_slot_factory

__all__ = [
    "CardSearchClient",
    "Category",
    "Command",
    "GridController",
    "GridLayout",
    "LookupFailed",
    "NoResults",
    "SlotResolver",
    "SlotSettings",
    "SlotState",
    "SlotView",
    "make_slot_factory",
]
