"""In-memory state stores."""

from listening_party.infrastructure.persistence.party_registry import (
    InMemoryPartyRegistry,
    ReadWriteLock,
)

__all__ = [
    "InMemoryPartyRegistry",
    "ReadWriteLock",
]
