"""
Business logic for albums.

``AlbumService`` implements create, list, get, delete and partial
update over an :class:`~album_api.app.core.store.AlbumStore`.  Every
mutation is preceded by field validation; the first failing field is
reported through :class:`AlbumValidationError` and nothing is changed.
Lookups that miss raise :class:`AlbumNotFoundError`.

Partial updates are atomic: all provided fields are validated before
any of them is written.  A field counts as provided only when it is a
non-empty string (title, artist) or a price above zero, so a patch can
neither clear a text field nor set the price to zero.
"""

import logging
from typing import Any, Dict, List

from fastapi import Depends

from ..core.errors import AlbumNotFoundError, AlbumValidationError
from ..core.store import AlbumStore, get_store
from ..schemas.album import AlbumCreate, AlbumRead, AlbumUpdate
from .validation import validate_artist, validate_price, validate_title

logger = logging.getLogger(__name__)


class AlbumService:
    """Service for managing the album collection."""

    def __init__(self, store: AlbumStore) -> None:
        self.store = store

    def list_albums(self) -> List[AlbumRead]:
        """Return every album in insertion order."""
        return self.store.list()

    def get_album(self, album_id: str) -> AlbumRead:
        album = self.store.get(album_id)
        if album is None:
            raise AlbumNotFoundError(album_id)
        return album

    def create_album(self, data: AlbumCreate) -> AlbumRead:
        """Validate all fields as required and append a new album.

        The stored album always receives a newly generated id.
        """
        title = data.title or ""
        artist = data.artist or ""
        price = data.price or 0.0
        for field, error in (
            ("title", validate_title(title, True)),
            ("artist", validate_artist(artist, True)),
            ("price", validate_price(price, True)),
        ):
            if error:
                logger.debug("Rejected album creation on %s: %s", field, error)
                raise AlbumValidationError(field, error)
        album = self.store.add(title=title, artist=artist, price=price)
        logger.info("Created album %s ('%s' by %s)", album.id, album.title, album.artist)
        return album

    def delete_album(self, album_id: str) -> AlbumRead:
        album = self.store.remove(album_id)
        if album is None:
            raise AlbumNotFoundError(album_id)
        logger.info("Deleted album %s", album_id)
        return album

    def update_album(self, album_id: str, data: AlbumUpdate) -> AlbumRead:
        """Apply the provided fields of ``data`` to an existing album.

        A missing album is reported before any field validation.
        """
        with self.store.locked():
            if self.store.get(album_id) is None:
                raise AlbumNotFoundError(album_id)
            changes = self._collect_changes(data)
            album = self.store.update(album_id, changes)
        if changes:
            logger.info("Updated album %s: %s", album_id, ", ".join(changes))
        return album

    @staticmethod
    def _collect_changes(data: AlbumUpdate) -> Dict[str, Any]:
        # Order matters: it decides which error is reported first.
        changes: Dict[str, Any] = {}
        if data.title:
            error = validate_title(data.title, False)
            if error:
                raise AlbumValidationError("title", error)
            changes["title"] = data.title
        if data.artist:
            error = validate_artist(data.artist, False)
            if error:
                raise AlbumValidationError("artist", error)
            changes["artist"] = data.artist
        if data.price is not None and data.price > 0:
            error = validate_price(data.price, False)
            if error:
                raise AlbumValidationError("price", error)
            changes["price"] = data.price
        return changes


def get_album_service(store: AlbumStore = Depends(get_store)) -> AlbumService:
    """FastAPI dependency building a service bound to the app's store."""
    return AlbumService(store)
