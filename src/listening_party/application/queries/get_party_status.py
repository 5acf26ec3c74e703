"""Query for rendering the listening party status of a channel."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from listening_party.domain.party.services import PlayPositionResolver
from listening_party.domain.party.value_objects import Finished, NotStarted, Playing, PlayState
from listening_party.domain.shared.datetime_utils import Clock, utcnow
from listening_party.domain.shared.messages import DiscordUIMessages
from listening_party.domain.shared.types import DiscordSnowflake
from listening_party.utils.reply import format_duration

if TYPE_CHECKING:
    from ...domain.party.entities import AlbumInfo, PartyRecord
    from ...domain.party.repository import PartyRegistry


class GetPartyStatusQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    channel_id: DiscordSnowflake


def render_play_state(state: PlayState) -> str:
    match state:
        case NotStarted():
            return DiscordUIMessages.STATUS_NOT_STARTED
        case Finished(since_end=since_end):
            return DiscordUIMessages.STATUS_FINISHED.format(since=format_duration(since_end))
        case Playing(track=track, position=position):
            return DiscordUIMessages.STATUS_PLAYING.format(
                number=track.number,
                name=track.name,
                position=format_duration(position),
                duration=format_duration(track.duration),
            )
    raise TypeError(f"Unknown play state: {state!r}")


def render_album_link(album: AlbumInfo) -> str:
    if album.uri is None:
        return DiscordUIMessages.STATUS_NO_ALBUM_LINK
    return DiscordUIMessages.STATUS_ALBUM_LINK.format(uri=album.uri)


def render_status(record: PartyRecord | None, now: datetime) -> str:
    """Render the status block: header, album line, play state, link."""
    if record is None:
        return DiscordUIMessages.STATUS_NO_PARTY

    album = record.album
    lines = [
        DiscordUIMessages.STATUS_HEADER,
        DiscordUIMessages.STATUS_ALBUM_LINE.format(
            artist=album.artist,
            name=album.name,
            total=format_duration(album.total_duration),
        ),
        render_play_state(PlayPositionResolver.resolve(record, now)),
        render_album_link(album),
    ]
    return "\n".join(lines)


class GetPartyStatusHandler:
    """Read-only status reporter; delivering the text is the caller's job."""

    def __init__(self, *, party_registry: PartyRegistry, clock: Clock = utcnow) -> None:
        self._registry = party_registry
        self._clock = clock

    async def handle(self, query: GetPartyStatusQuery) -> str:
        record = await self._registry.get(query.channel_id)
        return render_status(record, self._clock())
