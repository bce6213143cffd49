"""Fetch-by-key cache for catalog API responses.

Each distinct key holds the last fetched value together with loading and
error flags. Concurrent fetches of the same key share one in-flight request.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Hashable, Mapping
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict

from src.config import settings

logger = logging.getLogger(__name__)

QueryKey = tuple[Hashable, ...]


class DataFetchError(Exception):
    """Raised when a request for a cached key fails."""

    def __init__(self, key: QueryKey, message: str) -> None:
        super().__init__(message)
        self.key = key


class QueryState(BaseModel):
    """Snapshot of one cache entry."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    data: Any = None
    is_loading: bool = False
    error: DataFetchError | None = None
    fetched: bool = False


class RemoteDataCache:
    """Async cache over an injected ``httpx.AsyncClient``."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._http = http_client
        self._entries: dict[QueryKey, QueryState] = {}
        self._in_flight: dict[QueryKey, asyncio.Task] = {}

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http

    async def aclose(self) -> None:
        await self._http.aclose()

    def state(self, key: QueryKey) -> QueryState:
        entry = self._entries.get(key)
        if entry is None:
            return QueryState()
        return entry.model_copy()

    def invalidate(self, key: QueryKey | None = None) -> None:
        """Drop one cached entry, or every entry when ``key`` is None."""

        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)

    async def fetch(
        self,
        key: QueryKey,
        url: str,
        params: Mapping[str, str] | None = None,
        *,
        parse: Callable[[Any], Any] | None = None,
        allow_not_found: bool = False,
    ) -> Any:
        """Return the cached value for ``key``, fetching it when missing.

        ``parse`` converts the decoded JSON body before it is cached. With
        ``allow_not_found`` a 404 answer caches and returns ``None``.
        """

        entry = self._entries.get(key)
        # A successful fetch is cached even when its value is None.
        if entry is not None and entry.fetched and entry.error is None:
            return entry.data

        task = self._in_flight.get(key)
        if task is None:
            task = asyncio.create_task(
                self._request(key, url, params, parse, allow_not_found)
            )
            self._in_flight[key] = task
            task.add_done_callback(lambda _: self._in_flight.pop(key, None))

        return await asyncio.shield(task)

    async def _request(
        self,
        key: QueryKey,
        url: str,
        params: Mapping[str, str] | None,
        parse: Callable[[Any], Any] | None,
        allow_not_found: bool,
    ) -> Any:
        previous = self._entries.get(key, QueryState())
        self._entries[key] = QueryState(data=previous.data, is_loading=True)

        try:
            response = await self._http.get(url, params=params)
            if allow_not_found and response.status_code == 404:
                data = None
            else:
                response.raise_for_status()
                data = response.json()
                if parse is not None:
                    data = parse(data)
        except (httpx.HTTPError, ValueError) as exc:
            error = DataFetchError(key, f"Failed to fetch {url}: {exc}")
            self._entries[key] = QueryState(data=previous.data, error=error)
            logger.warning("Fetch failed for key %s: %s", key, exc)
            raise error from exc

        self._entries[key] = QueryState(data=data, fetched=True)
        logger.debug("Fetched key %s", key)
        return data


def create_remote_data_cache(base_url: str | None = None) -> RemoteDataCache:
    """Build a cache with its own HTTP client aimed at the catalog API."""

    http_client = httpx.AsyncClient(base_url=base_url or settings.API_BASE_URL)
    return RemoteDataCache(http_client)
