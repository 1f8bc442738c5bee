"""Errors raised by photo gallery adapters and services."""


class PhotoGalleryError(Exception):
    """Base class for photo gallery errors."""


class FetchError(PhotoGalleryError):
    """A remote photo listing could not be obtained.

    Transport failures, malformed payloads and API-reported failures all
    surface as this one error; the message carries the diagnostic.
    """


class StoreError(PhotoGalleryError):
    """The favorites store failed to read or write."""
