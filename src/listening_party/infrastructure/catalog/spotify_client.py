"""Spotify Web API catalog client (client-credentials flow) built on httpx."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import AsyncIterator, Callable
from datetime import timedelta
from typing import Any

import httpx
from pydantic import BaseModel, Field

from listening_party.application.interfaces.catalog_client import (
    CatalogAlbum,
    CatalogClient,
    CatalogTrack,
)
from listening_party.config.settings import CatalogSettings
from listening_party.domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)

# Refresh the bearer token this many seconds before it actually expires.
TOKEN_REFRESH_MARGIN: float = 60.0
EXTERNAL_URL_KEY = "spotify"


class SpotifyArtistPayload(BaseModel):
    name: str


class SpotifyAlbumPayload(BaseModel):
    name: str
    artists: list[SpotifyArtistPayload] = Field(default_factory=list)
    external_urls: dict[str, str] = Field(default_factory=dict)

    def to_domain(self) -> CatalogAlbum:
        return CatalogAlbum(
            artists=tuple(artist.name for artist in self.artists),
            name=self.name,
            external_url=self.external_urls.get(EXTERNAL_URL_KEY),
        )


class SpotifyTrackPayload(BaseModel):
    track_number: int = Field(gt=0)
    name: str
    duration_ms: int = Field(ge=0)
    external_urls: dict[str, str] = Field(default_factory=dict)

    def to_domain(self) -> CatalogTrack:
        return CatalogTrack(
            number=self.track_number,
            name=self.name,
            duration=timedelta(milliseconds=self.duration_ms),
            external_url=self.external_urls.get(EXTERNAL_URL_KEY),
        )


class SpotifyTrackPage(BaseModel):
    """One page of ``GET /albums/{id}/tracks``."""

    items: list[SpotifyTrackPayload] = Field(default_factory=list)
    next: str | None = None
    offset: int = 0


class SpotifyTokenPayload(BaseModel):
    access_token: str = Field(min_length=1)
    token_type: str = "Bearer"
    expires_in: int = Field(default=3600, ge=0)


class SpotifyCatalogClient(CatalogClient):
    def __init__(
        self,
        settings: CatalogSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._settings = settings or CatalogSettings()
        self._client = http_client
        self._owns_client = http_client is None
        self._monotonic = monotonic

        self._token: str | None = None
        self._token_expires_at: float = 0.0
        self._token_lock = asyncio.Lock()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._settings.timeout_seconds)
        return self._client

    def _token_valid(self) -> bool:
        return self._token is not None and self._monotonic() < self._token_expires_at

    async def _access_token(self) -> str:
        if self._token_valid():
            return self._token  # type: ignore[return-value]

        if not self._settings.has_credentials:
            raise RuntimeError(ErrorMessages.CATALOG_CREDENTIALS_NOT_SET)

        # Concurrent fetches share a single token refresh.
        async with self._token_lock:
            if self._token_valid():
                return self._token  # type: ignore[return-value]

            response = await self._get_client().post(
                self._settings.token_url,
                data={"grant_type": "client_credentials"},
                auth=(
                    self._settings.client_id.get_secret_value(),
                    self._settings.client_secret.get_secret_value(),
                ),
            )
            response.raise_for_status()
            payload = SpotifyTokenPayload.model_validate(response.json())

            self._token = payload.access_token
            self._token_expires_at = (
                self._monotonic() + max(payload.expires_in - TOKEN_REFRESH_MARGIN, 0.0)
            )
            logger.debug(LogTemplates.CATALOG_TOKEN_REFRESHED, payload.expires_in)
            return self._token

    async def _get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        token = await self._access_token()
        logger.debug(LogTemplates.CATALOG_REQUEST, "GET", url)
        response = await self._get_client().get(
            url,
            params=params,
            headers={"Authorization": f"Bearer {token}"},
        )
        response.raise_for_status()
        return response.json()

    def _market_params(self) -> dict[str, Any]:
        return {"market": self._settings.market} if self._settings.market else {}

    async def fetch_album_summary(self, album_id: str) -> CatalogAlbum:
        data = await self._get_json(
            f"{self._settings.api_base_url}/albums/{album_id}", params=self._market_params() or None
        )
        return SpotifyAlbumPayload.model_validate(data).to_domain()

    async def fetch_album_tracks(self, album_id: str) -> AsyncIterator[CatalogTrack]:
        url: str | None = f"{self._settings.api_base_url}/albums/{album_id}/tracks"
        params: dict[str, Any] | None = {
            "limit": self._settings.page_size,
            "offset": 0,
            **self._market_params(),
        }

        while url is not None:
            page = SpotifyTrackPage.model_validate(await self._get_json(url, params=params))
            logger.debug(LogTemplates.CATALOG_PAGE_FETCHED, len(page.items), album_id, page.offset)
            for item in page.items:
                yield item.to_domain()
            # ``next`` already carries limit/offset/market in its query string.
            url, params = page.next, None

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            logger.debug(LogTemplates.CATALOG_CLIENT_CLOSED)
        self._client = None
