"""
Shared Domain Kernel

Contains exceptions, constrained types and helpers shared across the domain.
"""

from listening_party.domain.shared.exceptions import (
    DomainError,
    FetchFailedError,
    InvalidIdentifierError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "InvalidIdentifierError",
    "FetchFailedError",
]
