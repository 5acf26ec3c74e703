"""
Application Commands

Write-side handlers.
"""

from listening_party.application.commands.start_party import (
    StartPartyCommand,
    StartPartyHandler,
    StartPartyResult,
)

__all__ = [
    "StartPartyCommand",
    "StartPartyHandler",
    "StartPartyResult",
]
