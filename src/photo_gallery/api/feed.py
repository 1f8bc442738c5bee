"""Feed endpoints for the presentation layer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from photo_gallery.api.feed_models import FeedResponse, PhotoPayload, SearchRequest

if TYPE_CHECKING:
    from photo_gallery.services.feed import PhotoFeedState

router = APIRouter(prefix="/feed", tags=["feed"])


def _feed(request: Request) -> PhotoFeedState:
    return request.app.state.container.feed


@router.get("")
async def get_feed(request: Request) -> FeedResponse:
    """Return the current feed projection."""
    return FeedResponse.from_snapshot(_feed(request).snapshot())


@router.post("/load")
async def load_default(request: Request) -> FeedResponse:
    """Reload the recent photos listing."""
    feed = _feed(request)
    await feed.load_default()
    return FeedResponse.from_snapshot(feed.snapshot())


@router.post("/search")
async def search(payload: SearchRequest, request: Request) -> FeedResponse:
    """Replace the browse list with search results."""
    feed = _feed(request)
    await feed.search(payload.query)
    return FeedResponse.from_snapshot(feed.snapshot())


@router.post("/mode/toggle")
async def toggle_mode(request: Request) -> FeedResponse:
    """Switch between browse and favorites."""
    feed = _feed(request)
    await feed.toggle_favorites_view()
    return FeedResponse.from_snapshot(feed.snapshot())


@router.post("/favorites")
async def add_favorite(payload: PhotoPayload, request: Request) -> FeedResponse:
    """Favorite a photo; photos without an image are ignored."""
    feed = _feed(request)
    await feed.favorite(payload.to_record())
    return FeedResponse.from_snapshot(feed.snapshot())


@router.delete("/favorites")
async def clear_favorites(request: Request) -> FeedResponse:
    """Remove all favorites."""
    feed = _feed(request)
    await feed.clear_favorites()
    return FeedResponse.from_snapshot(feed.snapshot())
