from collections.abc import AsyncIterator
from datetime import UTC, datetime, timedelta

import pytest

from listening_party.application.interfaces.catalog_client import (
    CatalogAlbum,
    CatalogClient,
    CatalogTrack,
)

# ============================================================================
# Constants
# ============================================================================

TRUSTED_ROLE_ID = 1198354637137391709
OTHER_ROLE_ID = 222222222222222222
CHANNEL_ID = 333333333333333333
OTHER_CHANNEL_ID = 444444444444444444
LINK_HOST = "open.catalog.example"

T0 = datetime(2024, 3, 1, 20, 0, 0, tzinfo=UTC)


# ============================================================================
# Fakes
# ============================================================================


class FrozenClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime = T0) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


class FakeCatalogClient(CatalogClient):
    """In-memory catalog recording every call made to it."""

    def __init__(
        self,
        albums: dict[str, tuple[CatalogAlbum, list[CatalogTrack]]] | None = None,
        *,
        summary_error: Exception | None = None,
        tracks_error: Exception | None = None,
    ) -> None:
        self.albums = albums or {}
        self.summary_error = summary_error
        self.tracks_error = tracks_error
        self.summary_calls: list[str] = []
        self.track_calls: list[str] = []

    async def fetch_album_summary(self, album_id: str) -> CatalogAlbum:
        self.summary_calls.append(album_id)
        if self.summary_error is not None:
            raise self.summary_error
        return self.albums[album_id][0]

    async def fetch_album_tracks(self, album_id: str) -> AsyncIterator[CatalogTrack]:
        self.track_calls.append(album_id)
        for index, track in enumerate(self.albums[album_id][1]):
            if self.tracks_error is not None and index == 1:
                raise self.tracks_error
            yield track


# ============================================================================
# Domain Entity Fixtures
# ============================================================================


def make_track(number: int, seconds: int, name: str | None = None, uri: str | None = None):
    from listening_party.domain.party.entities import TrackInfo

    return TrackInfo(
        number=number,
        name=name or f"Track {number}",
        uri=uri,
        duration=timedelta(seconds=seconds),
    )


def make_album(*durations: int, uri: str | None = "https://open.catalog.example/album/ABC123"):
    from listening_party.domain.party.entities import AlbumInfo

    return AlbumInfo(
        artist="Test Artist",
        name="Test Album",
        uri=uri,
        tracks=tuple(make_track(i, seconds) for i, seconds in enumerate(durations, start=1)),
    )


@pytest.fixture
def clock():
    return FrozenClock()


@pytest.fixture
def two_minute_album():
    """Album with two 60-second tracks."""
    return make_album(60, 60)


@pytest.fixture
def registry():
    from listening_party.infrastructure.persistence.party_registry import InMemoryPartyRegistry

    return InMemoryPartyRegistry()


@pytest.fixture
def catalog_album():
    return (
        CatalogAlbum(
            artists=("Artist One", "Artist Two"),
            name="Catalog Album",
            external_url="https://open.catalog.example/album/ABC123",
        ),
        [
            CatalogTrack(
                number=1,
                name="Opening",
                duration=timedelta(seconds=180),
                external_url="https://open.catalog.example/track/T1",
            ),
            CatalogTrack(number=2, name="Closing", duration=timedelta(seconds=240)),
        ],
    )


@pytest.fixture
def fake_catalog(catalog_album):
    return FakeCatalogClient({"ABC123": catalog_album})
