"""
Listening Party Bounded Context

Announced albums, per-channel party records and play-position derivation.
"""

from listening_party.domain.party.entities import AlbumInfo, PartyRecord, TrackInfo
from listening_party.domain.party.repository import PartyRegistry
from listening_party.domain.party.services import PlayPositionResolver
from listening_party.domain.party.value_objects import (
    AlbumId,
    Finished,
    NotStarted,
    Playing,
    PlayState,
)

__all__ = [
    # Entities
    "TrackInfo",
    "AlbumInfo",
    "PartyRecord",
    # Value Objects
    "AlbumId",
    "PlayState",
    "NotStarted",
    "Playing",
    "Finished",
    # Repository
    "PartyRegistry",
    # Services
    "PlayPositionResolver",
]
