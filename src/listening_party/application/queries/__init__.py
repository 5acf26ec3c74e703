"""
Application Queries

Read-side handlers.
"""

from listening_party.application.queries.get_party_status import (
    GetPartyStatusHandler,
    GetPartyStatusQuery,
)

__all__ = [
    "GetPartyStatusQuery",
    "GetPartyStatusHandler",
]
