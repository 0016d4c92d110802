"""Test doubles and constants shared by the test modules."""
import threading
from typing import Any

from cardgrid.clients import NoResults

FALLBACK = "https://img.test/fallback.jpg"
CARD_BACK = "https://img.test/card-back.jpg"


class FakeLookup:
    """
    In-process replacement for CardSearchClient.

    Queries map either to an image URL or to an exception; a query can
    also be gated on a threading.Event so tests decide when its lookup
    finishes.
    """

    def __init__(self, results: dict[str, Any] | None = None):
        self.results: dict[str, Any] = dict(results or {})
        self.gates: dict[str, threading.Event] = {}
        self.calls: list[str] = []

    def gate(self, query: str) -> threading.Event:
        event = threading.Event()
        self.gates[query] = event
        return event

    def release_all(self) -> None:
        for event in self.gates.values():
            event.set()

    def find_image_url(self, query: str, cancel: threading.Event | None = None) -> str:
        self.calls.append(query)
        gate = self.gates.get(query)
        if gate is not None:
            gate.wait(timeout=5)
        result = self.results.get(query)
        if result is None:
            raise NoResults(f"No cards match {query!r}")
        if isinstance(result, BaseException):
            raise result
        return result
