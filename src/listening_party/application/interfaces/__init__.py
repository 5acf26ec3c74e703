"""
Application Interfaces (Ports)

Abstract interfaces that define contracts between the application
layer and infrastructure adapters. These are the "ports" in
hexagonal architecture.
"""

from listening_party.application.interfaces.catalog_client import (
    CatalogAlbum,
    CatalogClient,
    CatalogTrack,
)

__all__ = [
    "CatalogClient",
    "CatalogAlbum",
    "CatalogTrack",
]
