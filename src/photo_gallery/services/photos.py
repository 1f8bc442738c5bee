"""Remote photo listings backed by Flickr."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from photo_gallery.adapters.flickr_client import FlickrClient
from photo_gallery.adapters.flickr_models import FlickrResponse
from photo_gallery.domain.errors import FetchError
from photo_gallery.domain.photos import PhotoRecord

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass
class RemotePhotoSource:
    """Fetches recent and searched photos, one request per call."""

    client: FlickrClient

    async def fetch_recent(self) -> list[PhotoRecord]:
        """Return the most recent public photos."""
        return await self._fetch(self.client.get_recent, action="recent")

    async def search(self, query: str) -> list[PhotoRecord]:
        """Return photos matching a free-text query."""
        return await self._fetch(
            lambda: self.client.search(query), action=f"search:{query}"
        )

    async def _fetch(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> list[PhotoRecord]:
        try:
            payload = await func()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(
                f"Flickr {action} request failed ({_status_code(exc)}): {exc}"
            ) from exc
        except ValueError as exc:
            raise FetchError(f"Flickr {action} returned invalid JSON") from exc
        photos = _parse_photos(payload, action)
        _logger.debug("Flickr %s returned %s photos", action, len(photos))
        return photos


def _parse_photos(payload: object, action: str) -> list[PhotoRecord]:
    """Decode a raw payload into photo records."""
    try:
        response = FlickrResponse.model_validate(payload)
    except ValidationError as exc:
        raise FetchError(f"Flickr {action} returned a malformed payload") from exc
    if response.stat != "ok":
        detail = response.message or response.stat
        raise FetchError(f"Flickr {action} failed: {detail} (code={response.code})")
    if response.photos is None:
        raise FetchError(f"Flickr {action} returned no photos block")
    return [
        PhotoRecord(id=item.id, title=item.title, image_url=item.url_s or None)
        for item in response.photos.photo
    ]


def _status_code(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
