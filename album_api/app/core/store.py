"""
In‑memory album store.

The store owns the ordered album collection and guards it with a
re‑entrant lock.  Every read returns copies so callers never hold a
live reference into the collection, and every mutation happens with
the lock held.  Services that need to combine a lookup with a
mutation (check, then update) wrap both in :meth:`AlbumStore.locked`.

One store is created per application by ``init_store`` and attached to
``app.state``; request handlers obtain it through the ``get_store``
dependency.
"""

import logging
import threading
import uuid
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from fastapi import Request

from ..schemas.album import AlbumRead
from .config import settings

logger = logging.getLogger(__name__)

SEED_ALBUMS: List[AlbumRead] = [
    AlbumRead(id="550e8400-e29b-41d4-a716-446655440001", title="Blue Train", artist="John Coltrane", price=56.99),
    AlbumRead(id="550e8400-e29b-41d4-a716-446655440002", title="Jeru", artist="Gerry Mulligan", price=17.99),
    AlbumRead(
        id="550e8400-e29b-41d4-a716-446655440003",
        title="Sarah Vaughan and Clifford Brown",
        artist="Sarah Vaughan",
        price=39.99,
    ),
]


def new_album_id() -> str:
    return str(uuid.uuid4())


class AlbumStore:
    """Thread-safe ordered collection of albums."""

    def __init__(
        self,
        albums: Iterable[AlbumRead] = (),
        id_factory: Callable[[], str] = new_album_id,
    ) -> None:
        self._lock = threading.RLock()
        self._albums: List[AlbumRead] = []
        self._id_factory = id_factory
        self.reset(albums)

    @contextmanager
    def locked(self) -> Iterator["AlbumStore"]:
        """Hold the store lock for a multi-step operation."""
        with self._lock:
            yield self

    def reset(self, albums: Iterable[AlbumRead] = ()) -> None:
        """Replace the collection, rejecting empty or duplicate ids."""
        fresh = [album.model_copy() for album in albums]
        seen = set()
        for album in fresh:
            if not album.id or album.id in seen:
                raise ValueError(f"Invalid or duplicate album id: {album.id!r}")
            seen.add(album.id)
        with self._lock:
            self._albums = fresh

    def __len__(self) -> int:
        with self._lock:
            return len(self._albums)

    def list(self) -> List[AlbumRead]:
        with self._lock:
            return [album.model_copy() for album in self._albums]

    def _index_of(self, album_id: str) -> Optional[int]:
        for index, album in enumerate(self._albums):
            if album.id == album_id:
                return index
        return None

    def get(self, album_id: str) -> Optional[AlbumRead]:
        with self._lock:
            index = self._index_of(album_id)
            if index is None:
                return None
            return self._albums[index].model_copy()

    def add(self, title: str, artist: str, price: float) -> AlbumRead:
        """Append a new album under a freshly generated id."""
        with self._lock:
            album_id = self._id_factory()
            while not album_id or self._index_of(album_id) is not None:
                logger.warning("Generated album id %r is already taken, drawing another", album_id)
                album_id = self._id_factory()
            album = AlbumRead(id=album_id, title=title, artist=artist, price=price)
            self._albums.append(album)
            return album.model_copy()

    def remove(self, album_id: str) -> Optional[AlbumRead]:
        """Remove the first album with ``album_id`` and return it."""
        with self._lock:
            index = self._index_of(album_id)
            if index is None:
                return None
            return self._albums.pop(index)

    def update(self, album_id: str, changes: Dict[str, Any]) -> Optional[AlbumRead]:
        """Apply ``changes`` to an album in place.

        The ``id`` field is never changed.  Returns the updated album,
        or ``None`` if no album has this id.
        """
        changes = {key: value for key, value in changes.items() if key != "id"}
        with self._lock:
            index = self._index_of(album_id)
            if index is None:
                return None
            updated = self._albums[index].model_copy(update=changes)
            self._albums[index] = updated
            return updated.model_copy()


def init_store(seed: Optional[bool] = None) -> AlbumStore:
    """Create the application's album store.

    The seed albums are loaded unless ``seed`` (or, when omitted,
    ``settings.seed_albums``) is false.
    """
    if seed is None:
        seed = settings.seed_albums
    store = AlbumStore(SEED_ALBUMS if seed else ())
    logger.info("Album store initialised with %d album(s)", len(store))
    return store


def get_store(request: Request) -> AlbumStore:
    """FastAPI dependency returning the store attached to the running app."""
    return request.app.state.album_store
