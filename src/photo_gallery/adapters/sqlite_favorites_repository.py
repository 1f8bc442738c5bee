"""SQLite-backed favorites repository."""

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from photo_gallery.domain.errors import StoreError
from photo_gallery.domain.photos import FavoriteEntry
from photo_gallery.services.feed import FavoritesRepository

FAVORITES_TABLE_SCHEMA = """
CREATE TABLE IF NOT EXISTS favorite_photos (
    id TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    image_url TEXT NOT NULL
);
"""


@dataclass
class SqliteFavoritesRepository(FavoritesRepository):
    """Local favorites table in a SQLite file.

    ``list_all`` returns entries in the order they were last inserted; a
    replaced entry moves to the end because ``INSERT OR REPLACE`` deletes the
    old row first.
    """

    db_path: Path

    @classmethod
    def create(cls, db_path: str | Path) -> "SqliteFavoritesRepository":
        """Create the repository and make sure the table exists."""
        repository = cls(db_path=Path(db_path))
        with repository._connect():
            pass
        return repository

    def insert(self, entry: FavoriteEntry) -> None:
        """Store a favorite, replacing any entry with the same id."""
        with self._connect() as connection:
            connection.execute(
                "INSERT OR REPLACE INTO favorite_photos (id, title, image_url) "
                "VALUES (?, ?, ?)",
                (entry.id, entry.title, entry.image_url),
            )

    def list_all(self) -> list[FavoriteEntry]:
        """Return all favorites in insertion order."""
        with self._connect() as connection:
            rows = connection.execute(
                "SELECT id, title, image_url FROM favorite_photos ORDER BY rowid"
            ).fetchall()
        return [
            FavoriteEntry(id=row["id"], title=row["title"], image_url=row["image_url"])
            for row in rows
        ]

    def clear_all(self) -> None:
        """Delete every favorite."""
        with self._connect() as connection:
            connection.execute("DELETE FROM favorite_photos")

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection, commit on success and translate sqlite errors."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            connection = sqlite3.connect(self.db_path)
        except (OSError, sqlite3.Error) as exc:
            raise StoreError(f"Failed to open favorites database: {exc}") from exc
        connection.row_factory = sqlite3.Row
        try:
            connection.executescript(FAVORITES_TABLE_SCHEMA)
            yield connection
            connection.commit()
        except sqlite3.Error as exc:
            connection.rollback()
            raise StoreError(f"Favorites database error: {exc}") from exc
        finally:
            connection.close()
