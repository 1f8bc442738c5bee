"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from photo_gallery.adapters.flickr_client import HttpxFlickrClient
from photo_gallery.adapters.sqlite_favorites_repository import (
    SqliteFavoritesRepository,
)
from photo_gallery.adapters.supabase_favorites_repository import (
    SupabaseFavoritesRepository,
)
from photo_gallery.config import Settings, resolve_favorites_backend
from photo_gallery.services.feed import (
    FavoritesRepository,
    PhotoFeedState,
    PhotoSource,
)
from photo_gallery.services.photos import RemotePhotoSource


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    photo_source: PhotoSource
    favorites_repository: FavoritesRepository
    feed: PhotoFeedState
    close_resources: Callable[[], Awaitable[None]]


def build_favorites_repository(settings: Settings) -> FavoritesRepository:
    """Create the favorites repository selected in settings."""
    if resolve_favorites_backend(settings) == "supabase":
        supabase_client = create_client(
            settings.supabase_url, settings.supabase_service_key
        )
        return SupabaseFavoritesRepository(supabase_client)
    return SqliteFavoritesRepository.create(settings.favorites_db_path)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    favorites_repository = build_favorites_repository(resolved_settings)
    flickr_client = HttpxFlickrClient.create(
        api_key=resolved_settings.flickr_api_key,
        base_url=resolved_settings.flickr_base_url,
    )
    photo_source = RemotePhotoSource(flickr_client)
    feed = PhotoFeedState(
        photo_source=photo_source,
        favorites_repository=favorites_repository,
    )

    async def close_resources() -> None:
        await flickr_client.close()

    return AppContainer(
        settings=resolved_settings,
        photo_source=photo_source,
        favorites_repository=favorites_repository,
        feed=feed,
        close_resources=close_resources,
    )
