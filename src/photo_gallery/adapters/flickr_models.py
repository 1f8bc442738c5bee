"""Pydantic models for Flickr photo listing payloads."""

from pydantic import BaseModel, Field


class FlickrPhoto(BaseModel):
    """A single photo item."""

    id: str
    title: str = ""
    url_s: str | None = None


class FlickrPhotoPage(BaseModel):
    """The photos block of a listing response."""

    photo: list[FlickrPhoto] = Field(default_factory=list)


class FlickrResponse(BaseModel):
    """Top-level Flickr REST response.

    Failed calls carry ``stat="fail"`` with ``code`` and ``message`` and no
    ``photos`` block.
    """

    stat: str
    photos: FlickrPhotoPage | None = None
    code: int | None = None
    message: str | None = None
