from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import parse_qs, urlencode, urlsplit

import httpx

from manhwa.config import AppConfig
from manhwa.library.models import Series, SeriesDetail, SeriesListing, SeriesResult
from manhwa.provider.api import SERIES_PATH, create_app
from manhwa.provider.exceptions import MalformedResponse, NetworkFailure, NotFound

log = logging.getLogger(__name__)

IN_PROCESS_BASE_URL = "http://manhwa.local"


def series_key(series_id: Optional[str] = None) -> str:
    """Request key for the whole catalog, or for one series."""
    if series_id is None:
        return SERIES_PATH
    return f"{SERIES_PATH}?{urlencode({'id': series_id})}"


def key_series_id(key: str) -> Optional[str]:
    """Series id carried by a request key, if any. Empty ids count as absent."""
    values = parse_qs(urlsplit(key).query).get("id")
    if not values or not values[0]:
        return None
    return values[0]


class ContentClient:
    """Reads the content provider and normalises its two response shapes."""

    def __init__(
        self,
        config: AppConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._series_cache: dict[str, Series] = {}

    @property
    def base_url(self) -> str:
        if self._config.uses_remote_provider:
            return self._config.api_base_url.rstrip("/")
        return IN_PROCESS_BASE_URL

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            transport = self._transport
            if transport is None and not self._config.uses_remote_provider:
                transport = httpx.ASGITransport(app=create_app())
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                transport=transport,
                timeout=self._config.request_timeout,
            )
        return self._client

    def clear_cache(self) -> None:
        self._series_cache.clear()

    async def fetch(self, key: str) -> SeriesResult:
        """Resolve a request key into a SeriesListing or SeriesDetail.

        Raises NetworkFailure, NotFound or MalformedResponse.
        """
        series_id = key_series_id(key)
        if series_id is not None and self._config.cache_series:
            hit = self._series_cache.get(series_id)
            if hit is not None:
                log.debug("Series cache hit: %s", series_id)
                return SeriesDetail(series=hit)

        body = await self._get_json(key)
        if series_id is None:
            return self._parse_listing(body)

        detail = self._parse_detail(body)
        if self._config.cache_series:
            self._series_cache[series_id] = detail.series
        return detail

    async def _get_json(self, key: str) -> Any:
        client = self._get_client()
        try:
            resp = await client.get(key)
        except httpx.RequestError as e:
            log.error("Content request error: %s %s -> %s", type(e).__name__, key, e)
            raise NetworkFailure(f"{type(e).__name__}: {e}") from e

        if resp.status_code == 404:
            message = self._error_message(resp)
            if message is not None:
                raise NotFound(message, series_id=key_series_id(key) or "")

        if not resp.is_success:
            log.error("Content API error: %s %s", resp.status_code, resp.text[:200])
            raise NetworkFailure(
                f"HTTP error! status: {resp.status_code}", status_code=resp.status_code
            )

        try:
            return resp.json()
        except ValueError as e:
            log.error("Content API returned non-JSON body for %s", key)
            raise MalformedResponse(f"Response is not valid JSON: {e}") from e

    @staticmethod
    def _error_message(resp: httpx.Response) -> Optional[str]:
        try:
            body = resp.json()
        except ValueError:
            return None
        if isinstance(body, dict) and isinstance(body.get("error"), str):
            return body["error"]
        return None

    @staticmethod
    def _parse_listing(body: Any) -> SeriesListing:
        if not isinstance(body, dict) or not isinstance(body.get("series"), list):
            raise MalformedResponse("Expected {'series': [...]} in listing response")
        try:
            return SeriesListing(
                series=tuple(Series.from_dict(s) for s in body["series"])
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise MalformedResponse(f"Invalid series in listing: {e}") from e

    @staticmethod
    def _parse_detail(body: Any) -> SeriesDetail:
        if not isinstance(body, dict) or not isinstance(body.get("series"), dict):
            raise MalformedResponse("Expected {'series': {...}} in series response")
        try:
            return SeriesDetail(series=Series.from_dict(body["series"]))
        except (KeyError, TypeError, AttributeError) as e:
            raise MalformedResponse(f"Invalid series: {e}") from e

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
