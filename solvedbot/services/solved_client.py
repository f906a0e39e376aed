"""
solved.ac search client.

This module provides the client for the solved.ac search recommendations API.
"""

import logging
from typing import Optional

import httpx

from solvedbot.config import config
from solvedbot.errors import DecodeError, EmptySearchResult, TransportError
from solvedbot.models.solved import Search

logger = logging.getLogger(__name__)


class SolvedClient:
    """Client for searching problems and users on solved.ac."""

    def __init__(
        self,
        search_url: Optional[str] = None,
        http: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize the client.

        Args:
            search_url: Search endpoint, defaults to the configured one
            http: Shared httpx client; one is created (and owned) when omitted
        """
        self.search_url = search_url or config.SOLVED_SEARCH_URL
        self._owns_http = http is None
        self.http = http if http is not None else httpx.AsyncClient()

    async def __aenter__(self) -> "SolvedClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self):
        """Close the underlying httpx client if this instance created it."""
        if self._owns_http:
            await self.http.aclose()

    async def search(self, query: str) -> Search:
        """
        Search solved.ac.

        Args:
            query: Free-form search query

        Returns:
            Decoded search result

        Raises:
            TransportError: If the request failed
            DecodeError: If the response is not the expected JSON
            EmptySearchResult: If the response envelope carries no result
        """
        logger.debug(f"Searching solved.ac for {query!r}")
        try:
            response = await self.http.get(self.search_url, params={"query": query})
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise TransportError(query, str(e)) from e

        try:
            envelope = response.json()
        except ValueError as e:
            raise DecodeError(f"Invalid JSON in search response for {query!r}: {e}") from e

        if not isinstance(envelope, dict):
            raise DecodeError(f"Search response for {query!r} is not an object")

        result = envelope.get("result")
        if result is None:
            raise EmptySearchResult(query)
        if not isinstance(result, dict):
            raise DecodeError(f"Search result for {query!r} is not an object")

        search = Search.from_dict(result)
        logger.info(
            f"Search {query!r}: {len(search.problems)} problems, {len(search.users)} users"
        )
        return search
