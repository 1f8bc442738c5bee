"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from photo_gallery.adapters.flickr_client import FlickrClient
from photo_gallery.config import Settings
from photo_gallery.containers import AppContainer
from photo_gallery.domain.errors import FetchError, StoreError
from photo_gallery.domain.photos import FavoriteEntry, PhotoRecord
from photo_gallery.services.feed import FavoritesRepository, PhotoFeedState

CAT = PhotoRecord(id="1", title="Cat", image_url="http://x/1.jpg")
DOG = PhotoRecord(id="2", title="Dog", image_url=None)


def flickr_payload(*items: dict[str, object]) -> dict[str, object]:
    """Build a successful Flickr listing payload."""
    return {
        "stat": "ok",
        "photos": {"page": 1, "pages": 1, "perpage": 100, "photo": list(items)},
    }


@dataclass
class InMemoryFavoritesRepository(FavoritesRepository):
    """In-memory favorites repository for tests."""

    entries: dict[str, FavoriteEntry] = field(default_factory=dict)
    fail_writes: bool = False
    fail_reads: bool = False

    def insert(self, entry: FavoriteEntry) -> None:
        if self.fail_writes:
            raise StoreError("disk full")
        self.entries.pop(entry.id, None)
        self.entries[entry.id] = entry

    def list_all(self) -> list[FavoriteEntry]:
        if self.fail_reads:
            raise StoreError("database locked")
        return list(self.entries.values())

    def clear_all(self) -> None:
        if self.fail_writes:
            raise StoreError("disk full")
        self.entries.clear()


@dataclass
class FakePhotoSource:
    """Photo source returning canned results or raising FetchError."""

    recent: list[PhotoRecord] = field(default_factory=list)
    results: dict[str, list[PhotoRecord]] = field(default_factory=dict)
    error: str | None = None
    queries: list[str] = field(default_factory=list)
    recent_calls: int = 0

    async def fetch_recent(self) -> list[PhotoRecord]:
        self.recent_calls += 1
        if self.error:
            raise FetchError(self.error)
        return list(self.recent)

    async def search(self, query: str) -> list[PhotoRecord]:
        self.queries.append(query)
        if self.error:
            raise FetchError(self.error)
        return list(self.results.get(query, []))


@dataclass
class FakeFlickrClient(FlickrClient):
    """Fake Flickr client returning fixed payloads."""

    recent_payload: dict[str, object] = field(
        default_factory=lambda: flickr_payload(
            {"id": "1", "title": "Cat", "url_s": "http://x/1.jpg"},
            {"id": "2", "title": "Dog"},
        )
    )
    search_payload: dict[str, object] = field(default_factory=flickr_payload)
    searches: list[str] = field(default_factory=list)

    async def get_recent(self) -> dict[str, object]:
        return self.recent_payload

    async def search(self, text: str) -> dict[str, object]:
        self.searches.append(text)
        return self.search_payload


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        flickr_api_key="flickr-key",
        favorites_db_path=str(tmp_path / "favorites.db"),
    )


@pytest.fixture
def favorites_repository() -> InMemoryFavoritesRepository:
    return InMemoryFavoritesRepository()


@pytest.fixture
def photo_source() -> FakePhotoSource:
    return FakePhotoSource(recent=[CAT, DOG])


@pytest.fixture
def feed(
    photo_source: FakePhotoSource,
    favorites_repository: InMemoryFavoritesRepository,
) -> PhotoFeedState:
    return PhotoFeedState(
        photo_source=photo_source,
        favorites_repository=favorites_repository,
    )


@pytest.fixture
def container(
    settings: Settings,
    photo_source: FakePhotoSource,
    favorites_repository: InMemoryFavoritesRepository,
    feed: PhotoFeedState,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        photo_source=photo_source,
        favorites_repository=favorites_repository,
        feed=feed,
        close_resources=close_resources,
    )
