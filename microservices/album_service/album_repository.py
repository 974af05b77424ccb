"""
Album Repository - Data access layer for album service
Holds the album sequence and the next-id counter in process memory.

Nothing is persisted: the store is seeded at startup and lost on exit.
A single asyncio.Lock serializes every operation on the collection.
"""

import asyncio
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .models import Album, ALBUM_ID_FIELD

logger = logging.getLogger(__name__)


# ==================== Seed Data ====================

SEED_ALBUMS: List[Dict[str, Any]] = [
    {
        "albumId": 10,
        "artistName": "Beyoncé",
        "collectionName": "Lemonade",
        "artworkUrl100": "http://is1.mzstatic.com/image/thumb/Music20/v4/23/c1/9e/23c19e53-783f-ae47-7212-03cc9998bd84/source/100x100bb.jpg",
        "releaseDate": "2016-04-25T07:00:00Z",
        "primaryGenreName": "Pop",
        "url": "https://www.youtube.com/embed/PeonBmeFR8o?rel=0&amp;controls=0&amp;showinfo=0",
    },
    {
        "albumId": 11,
        "artistName": "Billy Joel",
        "collectionName": "Dangerously In Love",
        "artworkUrl100": "http://is1.mzstatic.com/image/thumb/Music/v4/18/93/6d/18936d85-8f6b-7597-87ef-62c4c5211298/source/100x100bb.jpg",
        "releaseDate": "2003-06-24T07:00:00Z",
        "primaryGenreName": "Pop",
        "url": "https://www.youtube.com/embed/ViwtNLUqkMY?rel=0&amp;controls=0&amp;showinfo=0",
    },
]


class AlbumRepository:
    """Album repository - in-memory data access layer for album operations"""

    def __init__(self, seed: Optional[Iterable[Dict[str, Any]]] = None):
        """
        Initialize the store.

        Args:
            seed: Album records to start with (wire-format dicts).
                The next albumId is one more than the largest seeded id,
                or 1 for an empty store.
        """
        self._albums: List[Album] = [Album.model_validate(data) for data in (seed or [])]
        self._next_id = 1 + max([0] + [album.album_id for album in self._albums])
        self._lock = asyncio.Lock()

        ids = [album.album_id for album in self._albums]
        if len(ids) != len(set(ids)):
            raise ValueError("Seed albums must have unique albumId values")

    @property
    def next_id(self) -> int:
        """albumId the next created album will receive"""
        return self._next_id

    def _index_of(self, album_id: int) -> Optional[int]:
        for index, album in enumerate(self._albums):
            if album.album_id == album_id:
                return index
        return None

    # ==================== Album Operations ====================

    async def list_albums(self, artist_name: Optional[str] = None) -> List[Album]:
        """All albums, or those whose artistName equals artist_name exactly"""
        async with self._lock:
            if artist_name is None:
                return list(self._albums)
            return [album for album in self._albums if album.artist_name == artist_name]

    async def get_album_by_id(self, album_id: int) -> Optional[Album]:
        """Get album by albumId"""
        async with self._lock:
            index = self._index_of(album_id)
            return self._albums[index] if index is not None else None

    async def create_album(self, fields: Dict[str, Any]) -> Album:
        """
        Append a new album.

        The albumId comes from the counter; any albumId in ``fields`` is
        ignored.
        """
        async with self._lock:
            data = {key: value for key, value in fields.items() if key != ALBUM_ID_FIELD}
            album = Album.model_validate({ALBUM_ID_FIELD: self._next_id, **data})
            self._next_id += 1
            self._albums.append(album)
            logger.debug(f"Stored album {album.album_id}, next id {self._next_id}")
            return album

    async def update_album(
        self,
        album_id: int,
        update_data: Dict[str, Any]
    ) -> Optional[Tuple[Album, Album]]:
        """
        Shallow-merge update_data over the stored album.

        Returns:
            (original, updated), or None when the album does not exist
        """
        async with self._lock:
            index = self._index_of(album_id)
            if index is None:
                return None

            original = self._albums[index]
            merged = {**original.to_payload(), **update_data, ALBUM_ID_FIELD: original.album_id}
            updated = Album.model_validate(merged)
            self._albums[index] = updated
            return original, updated

    async def delete_album(self, album_id: int) -> Optional[Album]:
        """Remove an album, returning the removed record"""
        async with self._lock:
            index = self._index_of(album_id)
            if index is None:
                return None
            return self._albums.pop(index)

    # ==================== Utility Methods ====================

    async def count_albums(self) -> int:
        """Number of stored albums"""
        async with self._lock:
            return len(self._albums)

    async def check_connection(self) -> bool:
        """The in-memory store is always reachable"""
        return True
