# ruff: noqa: N999
"""
Domain Layer

Contains pure business logic organized by bounded contexts:
- shared/: Cross-cutting exceptions, types and helpers
- party/: Announced albums, party records and play-position derivation
"""

from listening_party.domain.shared.exceptions import DomainError

__all__ = [
    "DomainError",
]
