"""Photo feed domain models."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class PhotoRecord:
    """A photo as listed by the remote photo API."""

    id: str
    title: str
    image_url: str | None


@dataclass(frozen=True)
class FavoriteEntry:
    """A favorited photo kept in the local favorites store."""

    id: str
    title: str
    image_url: str

    @classmethod
    def from_photo(cls, photo: PhotoRecord) -> "FavoriteEntry | None":
        """Build an entry from a photo; photos without an image URL yield None."""
        if not photo.image_url:
            return None
        return cls(id=photo.id, title=photo.title, image_url=photo.image_url)

    def to_photo(self) -> PhotoRecord:
        """Return the entry in the shape the feed displays."""
        return PhotoRecord(id=self.id, title=self.title, image_url=self.image_url)


class DisplayMode(str, Enum):
    """Which list the feed currently projects."""

    BROWSE = "browse"
    FAVORITES = "favorites"


@dataclass(frozen=True)
class FeedSnapshot:
    """Read-only view of the feed handed to the presentation layer."""

    mode: DisplayMode
    photos: tuple[PhotoRecord, ...]
    favorite_ids: frozenset[str]
    last_error: str | None = None

    def is_favorite(self, photo_id: str) -> bool:
        """Return True if the photo id is currently favorited."""
        return photo_id in self.favorite_ids
