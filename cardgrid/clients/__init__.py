"""API clients for external services."""

from .scryfall import CardSearchClient, LookupFailed, NoResults, extract_image_url

__all__ = ["CardSearchClient", "LookupFailed", "NoResults", "extract_image_url"]
