"""Supabase-backed favorites repository."""

from dataclasses import dataclass

import httpx
from supabase import Client, PostgrestAPIError

from photo_gallery.domain.errors import StoreError
from photo_gallery.domain.photos import FavoriteEntry
from photo_gallery.services.feed import FavoritesRepository

_TABLE = "favorite_photos"


@dataclass
class SupabaseFavoritesRepository(FavoritesRepository):
    """Supabase implementation for favorites persistence.

    ``list_all`` returns rows in the server's natural order, which is not
    guaranteed to be stable.
    """

    client: Client

    def insert(self, entry: FavoriteEntry) -> None:
        """Upsert a favorite row keyed by photo id."""
        try:
            self.client.table(_TABLE).upsert(
                {"id": entry.id, "title": entry.title, "image_url": entry.image_url},
                on_conflict="id",
            ).execute()
        except (PostgrestAPIError, httpx.HTTPError) as exc:
            raise StoreError(f"Failed to store favorite {entry.id}: {exc}") from exc

    def list_all(self) -> list[FavoriteEntry]:
        """Return all favorite rows."""
        try:
            response = self.client.table(_TABLE).select("id, title, image_url").execute()
        except (PostgrestAPIError, httpx.HTTPError) as exc:
            raise StoreError(f"Failed to list favorites: {exc}") from exc
        return [
            FavoriteEntry(id=row["id"], title=row["title"], image_url=row["image_url"])
            for row in response.data or []
        ]

    def clear_all(self) -> None:
        """Delete every favorite row."""
        # PostgREST refuses an unfiltered delete.
        try:
            self.client.table(_TABLE).delete().neq("id", "").execute()
        except (PostgrestAPIError, httpx.HTTPError) as exc:
            raise StoreError(f"Failed to clear favorites: {exc}") from exc
