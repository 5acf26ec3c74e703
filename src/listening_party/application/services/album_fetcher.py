"""Album fetcher: turns a catalog album identifier into a complete AlbumInfo."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from listening_party.domain.party.entities import AlbumInfo, TrackInfo
from listening_party.domain.party.value_objects import AlbumId
from listening_party.domain.shared.exceptions import FetchFailedError
from listening_party.domain.shared.messages import ErrorMessages

if TYPE_CHECKING:
    from ..interfaces.catalog_client import CatalogClient, CatalogTrack

logger = logging.getLogger(__name__)

ARTIST_SEPARATOR = ", "


class AlbumFetcher:
    """Fetches album metadata and the full track listing from the catalog.

    The lookup takes two round trips (summary, then tracks). Either both
    succeed and a complete album is returned, or FetchFailedError is raised;
    partial results are never surfaced. An album with no tracks counts as a
    failed fetch.
    """

    def __init__(self, *, catalog_client: CatalogClient) -> None:
        self._catalog = catalog_client

    async def fetch(self, raw_album_id: str) -> AlbumInfo:
        """Fetch an album by its (not yet validated) identifier.

        Raises:
            InvalidIdentifierError: If the identifier is malformed. No request is made.
            FetchFailedError: If either catalog call or the result mapping fails,
                or the album has no tracks.
        """
        album_id = AlbumId.parse(raw_album_id)

        try:
            summary = await self._catalog.fetch_album_summary(album_id.value)
            tracks = [
                self._to_track_info(track)
                async for track in self._catalog.fetch_album_tracks(album_id.value)
            ]
            if not tracks:
                raise ValueError(ErrorMessages.ALBUM_HAS_NO_TRACKS)
            album = AlbumInfo(
                artist=ARTIST_SEPARATOR.join(summary.artists),
                name=summary.name,
                uri=summary.external_url,
                tracks=tuple(tracks),
            )
        except Exception as exc:
            raise FetchFailedError(album_id.value, exc) from exc

        logger.debug("Fetched album %s: %s (%d tracks)", album_id, album.display_name, album.track_count)
        return album

    @staticmethod
    def _to_track_info(track: CatalogTrack) -> TrackInfo:
        return TrackInfo(
            number=track.number,
            name=track.name,
            uri=track.external_url,
            duration=track.duration,
        )
