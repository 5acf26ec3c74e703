"""Music catalog adapters."""

from listening_party.infrastructure.catalog.spotify_client import SpotifyCatalogClient

__all__ = ["SpotifyCatalogClient"]
