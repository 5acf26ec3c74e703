"""
Catalog Client Interface

Port interface for the music catalog the album fetcher reads from.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field


class CatalogAlbum(BaseModel):
    """Album summary as reported by the catalog."""

    model_config = ConfigDict(frozen=True)

    artists: tuple[str, ...] = ()
    name: str
    external_url: str | None = None


class CatalogTrack(BaseModel):
    """One entry of an album's track listing as reported by the catalog."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(gt=0)
    name: str
    duration: timedelta
    external_url: str | None = None


class CatalogClient(ABC):
    """Abstract interface for music catalog lookups.

    Implementations own authentication and transport. Any failure is raised
    as-is; the album fetcher wraps it into a FetchFailedError.
    """

    @abstractmethod
    async def fetch_album_summary(self, album_id: str) -> CatalogAlbum:
        """Fetch album metadata.

        Args:
            album_id: A validated catalog album identifier.

        Returns:
            The album's artists, display name and canonical link.
        """
        ...

    @abstractmethod
    def fetch_album_tracks(self, album_id: str) -> AsyncIterator[CatalogTrack]:
        """Lazily iterate over the album's full track listing in album order.

        Args:
            album_id: A validated catalog album identifier.

        Yields:
            Tracks in remote order, following pagination as needed.
        """
        ...

    async def aclose(self) -> None:
        """Release transport resources (no-op by default)."""
        return None
