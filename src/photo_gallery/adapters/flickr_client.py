"""Flickr REST API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

RECENT_METHOD = "flickr.photos.getRecent"
SEARCH_METHOD = "flickr.photos.search"


class FlickrClient(Protocol):
    """Interface for Flickr photo listing calls."""

    async def get_recent(self) -> dict[str, object]:
        """Fetch recent public photos and return raw API data."""

    async def search(self, text: str) -> dict[str, object]:
        """Search photos by free text and return raw API data."""


@dataclass
class HttpxFlickrClient(FlickrClient):
    """HTTPX-backed Flickr client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxFlickrClient":
        """Create a Flickr client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def get_recent(self) -> dict[str, object]:
        """Fetch recent public photos."""
        return await self._call(RECENT_METHOD)

    async def search(self, text: str) -> dict[str, object]:
        """Search photos by free text."""
        return await self._call(SEARCH_METHOD, text=text)

    async def _call(self, method: str, **params: str) -> dict[str, object]:
        response = await self.http_client.get(
            self.base_url,
            params={
                "method": method,
                "api_key": self.api_key,
                "extras": "url_s",
                "format": "json",
                "nojsoncallback": "1",
                **params,
            },
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
