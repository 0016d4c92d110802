"""
Shared fixtures for the cardgrid test suite.

The card search service is replaced by FakeLookup (see helpers.py) or,
for client-level tests, by patching requests.get with make_response.
"""
from collections.abc import Callable, Generator
from typing import Any

import pytest

from cardgrid.clients import LookupFailed
from cardgrid.models import SlotSettings

from .helpers import CARD_BACK, FALLBACK, FakeLookup


@pytest.fixture
def settings() -> SlotSettings:
    """Slot settings with test image constants."""
    return SlotSettings(
        fallback_image_url=FALLBACK,
        card_back_url=CARD_BACK,
        lookup_timeout=2.0,
    )


@pytest.fixture
def lookup() -> Generator[FakeLookup, None, None]:
    """A fake search service knowing a few cards."""
    fake = FakeLookup({
        "island": "https://img.test/island.jpg",
        "delver": "https://img.test/delver-front.jpg",
        "broken": LookupFailed("Card search error: 404", status_code=404),
        "boom": ValueError("unexpected payload"),
    })
    yield fake
    fake.release_all()


@pytest.fixture
def make_response(mocker) -> Callable[..., Any]:
    """Build a fake requests.Response."""
    def _make(status_code: int = 200, body: Any = None, json_error: bool = False):
        response = mocker.Mock()
        response.status_code = status_code
        if json_error:
            response.json.side_effect = ValueError("Expecting value")
        else:
            response.json.return_value = body
        return response
    return _make
