"""Pydantic models for the feed HTTP API."""

from pydantic import BaseModel

from photo_gallery.domain.photos import DisplayMode, FeedSnapshot, PhotoRecord


class SearchRequest(BaseModel):
    """Search action payload."""

    query: str = ""


class PhotoPayload(BaseModel):
    """A photo as sent by the presentation layer."""

    id: str
    title: str = ""
    image_url: str | None = None

    def to_record(self) -> PhotoRecord:
        """Convert to the domain record."""
        return PhotoRecord(
            id=self.id, title=self.title, image_url=self.image_url or None
        )


class FeedPhoto(PhotoPayload):
    """A displayed photo with its favorite flag."""

    favorite: bool


class FeedResponse(BaseModel):
    """Current feed projection."""

    mode: DisplayMode
    photos: list[FeedPhoto]
    last_error: str | None = None

    @classmethod
    def from_snapshot(cls, snapshot: FeedSnapshot) -> "FeedResponse":
        """Build a response from a feed snapshot."""
        return cls(
            mode=snapshot.mode,
            photos=[
                FeedPhoto(
                    id=photo.id,
                    title=photo.title,
                    image_url=photo.image_url,
                    favorite=snapshot.is_favorite(photo.id),
                )
                for photo in snapshot.photos
            ],
            last_error=snapshot.last_error,
        )
