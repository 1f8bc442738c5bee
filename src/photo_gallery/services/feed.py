"""Photo feed state: remote listings, local favorites and the display mode."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Protocol

from photo_gallery.domain.errors import FetchError, StoreError
from photo_gallery.domain.photos import (
    DisplayMode,
    FavoriteEntry,
    FeedSnapshot,
    PhotoRecord,
)

_logger = logging.getLogger(__name__)

FeedListener = Callable[[FeedSnapshot], None]


class PhotoSource(Protocol):
    """Interface for remote photo listings."""

    async def fetch_recent(self) -> list[PhotoRecord]:
        """Return recent photos or raise FetchError."""

    async def search(self, query: str) -> list[PhotoRecord]:
        """Return photos matching a query or raise FetchError."""


class FavoritesRepository(Protocol):
    """Persistence interface for favorited photos.

    ``insert`` replaces an existing entry with the same id.
    """

    def insert(self, entry: FavoriteEntry) -> None:
        """Store a favorite, replacing any entry with the same id."""

    def list_all(self) -> list[FavoriteEntry]:
        """Return every stored favorite in the store's natural order."""

    def clear_all(self) -> None:
        """Remove every stored favorite."""


@dataclass
class PhotoFeedState:
    """Single owner of what the photo grid should currently show.

    Action methods never raise fetch or store errors: failures are logged,
    exposed through ``last_error`` and leave the previously displayed list
    untouched. Only the newest browse/search request may replace the list.
    """

    photo_source: PhotoSource
    favorites_repository: FavoritesRepository
    mode: DisplayMode = field(default=DisplayMode.BROWSE, init=False)
    _photos: list[PhotoRecord] = field(default_factory=list, init=False)
    _favorites: list[FavoriteEntry] = field(default_factory=list, init=False)
    _listeners: list[FeedListener] = field(default_factory=list, init=False)
    _generation: int = field(default=0, init=False)
    _last_error: str | None = field(default=None, init=False)

    async def start(self) -> None:
        """Load stored favorites and the default listing."""
        self._refresh_favorites()
        await self.load_default()

    async def load_default(self) -> None:
        """Replace the browse list with the most recent photos."""
        await self._load(self.photo_source.fetch_recent, action="recent")

    async def search(self, query: str) -> None:
        """Replace the browse list with search results.

        An empty or blank query loads the default listing instead.
        """
        cleaned = query.strip()
        if not cleaned:
            await self.load_default()
            return
        await self._load(
            lambda: self.photo_source.search(cleaned), action=f"search:{cleaned}"
        )

    async def toggle_favorites_view(self) -> DisplayMode:
        """Flip between browse and favorites, re-reading stored favorites."""
        self.mode = (
            DisplayMode.BROWSE
            if self.mode is DisplayMode.FAVORITES
            else DisplayMode.FAVORITES
        )
        self._refresh_favorites()
        self._notify()
        return self.mode

    async def favorite(self, photo: PhotoRecord) -> None:
        """Add a photo to favorites.

        The in-memory projection updates before the write; a failed write
        reverts it.
        """
        entry = FavoriteEntry.from_photo(photo)
        if entry is None:
            _logger.debug("Ignoring favorite for photo without image: %s", photo.id)
            return
        previous = list(self._favorites)
        self._favorites = [item for item in previous if item.id != entry.id]
        self._favorites.append(entry)
        self._notify()
        try:
            self.favorites_repository.insert(entry)
        except StoreError as exc:
            _logger.warning("Failed to store favorite %s: %s", entry.id, exc)
            self._favorites = previous
            self._last_error = str(exc)
            self._notify()

    async def clear_favorites(self) -> None:
        """Remove every favorite from the store and the projection."""
        try:
            self.favorites_repository.clear_all()
        except StoreError as exc:
            _logger.warning("Failed to clear favorites: %s", exc)
            self._last_error = str(exc)
        else:
            self._favorites = []
        self._notify()

    def current_display_list(self) -> list[PhotoRecord]:
        """Return the photos the grid should show for the current mode."""
        if self.mode is DisplayMode.FAVORITES:
            return [entry.to_photo() for entry in self._favorites]
        return list(self._photos)

    def favorite_ids(self) -> frozenset[str]:
        """Return the ids of all favorited photos."""
        return frozenset(entry.id for entry in self._favorites)

    def is_favorite(self, photo_id: str) -> bool:
        """Return True if the photo is favorited."""
        return photo_id in self.favorite_ids()

    def snapshot(self) -> FeedSnapshot:
        """Return an immutable view of the current feed."""
        return FeedSnapshot(
            mode=self.mode,
            photos=tuple(self.current_display_list()),
            favorite_ids=self.favorite_ids(),
            last_error=self._last_error,
        )

    def subscribe(self, listener: FeedListener) -> Callable[[], None]:
        """Register a listener for feed changes and return an unsubscriber."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def _load(
        self, fetch: Callable[[], Awaitable[list[PhotoRecord]]], *, action: str
    ) -> None:
        self._generation += 1
        generation = self._generation
        try:
            photos = await fetch()
        except FetchError as exc:
            if generation == self._generation:
                _logger.warning("Photo %s failed, keeping last list: %s", action, exc)
                self._last_error = str(exc)
                self._notify()
            else:
                _logger.debug("Ignoring failure of superseded %s request", action)
            return
        if generation != self._generation:
            _logger.debug("Discarding superseded %s response", action)
            return
        self._photos = list(photos)
        self._last_error = None
        self._notify()

    def _refresh_favorites(self) -> None:
        try:
            self._favorites = list(self.favorites_repository.list_all())
        except StoreError as exc:
            _logger.warning("Failed to read favorites, keeping last list: %s", exc)
            self._last_error = str(exc)

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                _logger.exception("Feed listener failed")
