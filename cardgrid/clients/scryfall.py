"""Card search client (Scryfall API)."""

import logging
import threading
import time

import requests

from ..config import CARD_SEARCH_URL, LOOKUP_MAX_RETRIES, LOOKUP_TIMEOUT

logger = logging.getLogger(__name__)


class LookupFailed(RuntimeError):
    """A card lookup did not produce a usable image."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NoResults(LookupFailed):
    """The search succeeded but matched no cards."""


def extract_image_url(card: dict) -> str:
    """
    Pick the display image of a card.

    Single-faced cards carry image_uris at the top level; double-faced
    cards only have them per face, in which case the front face wins.

    Raises:
        LookupFailed: if neither shape holds a "normal" image.
    """
    image_uris = card.get("image_uris")
    if not image_uris:
        faces = card.get("card_faces") or []
        if faces:
            image_uris = faces[0].get("image_uris")

    url = (image_uris or {}).get("normal")
    if not url:
        raise LookupFailed("Card has no normal image")
    return url


def _check_cancelled(cancel: threading.Event | None) -> None:
    if cancel is not None and cancel.is_set():
        raise LookupFailed("Card search cancelled")


class CardSearchClient:
    """Client for full-text card search."""

    def __init__(
        self,
        base_url: str = CARD_SEARCH_URL,
        timeout: float = LOOKUP_TIMEOUT,
        max_retries: int = LOOKUP_MAX_RETRIES,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.max_retries = max_retries

    def _get_with_retry(
        self, params: dict, cancel: threading.Event | None = None
    ) -> requests.Response:
        """GET with exponential backoff on 429 errors. Stops once cancel is set."""
        response = None
        for attempt in range(max(self.max_retries, 1)):
            _check_cancelled(cancel)
            response = requests.get(self.base_url, params=params, timeout=self.timeout)

            if response.status_code == 429 and attempt < self.max_retries - 1:
                wait_time = 2 ** attempt
                _check_cancelled(cancel)
                logger.debug(f"Rate limited, retrying in {wait_time}s")
                time.sleep(wait_time)
                continue

            return response

        return response

    def search(self, query: str, cancel: threading.Event | None = None) -> dict:
        """
        Run a search and return the decoded JSON body.

        Raises:
            LookupFailed: on transport errors, non-200 status, a body
                that is not JSON, or when cancel is set.
        """
        try:
            response = self._get_with_retry({"q": query}, cancel)
        except requests.RequestException as e:
            raise LookupFailed(f"Card search request failed: {e}") from e

        if response.status_code != 200:
            raise LookupFailed(
                f"Card search error: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise LookupFailed(f"Card search returned invalid JSON: {e}", status_code=200) from e

    def find_image_url(self, query: str, cancel: threading.Event | None = None) -> str:
        """
        Resolve a query to the image URL of its first matching card.

        Raises:
            NoResults: if the search matched nothing.
            LookupFailed: on any other failure.
        """
        data = self.search(query, cancel)
        cards = data.get("data") if isinstance(data, dict) else None
        if not cards:
            raise NoResults(f"No cards match {query!r}", status_code=200)
        return extract_image_url(cards[0])
