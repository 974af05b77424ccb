"""
Album Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Any, Dict, List, Optional, Protocol, Tuple, runtime_checkable

# Import only models (no I/O dependencies)
from .models import Album


# Custom exceptions - defined here to avoid importing repository
class AlbumServiceError(Exception):
    """Base exception for album service errors"""
    pass


class AlbumNotFoundError(AlbumServiceError):
    """Album not found error"""
    pass


class AlbumValidationError(AlbumServiceError):
    """Request body is missing compulsory album fields"""
    pass


class InvalidAlbumIdError(AlbumServiceError):
    """Path identifier does not parse as an integer"""
    pass


@runtime_checkable
class AlbumRepositoryProtocol(Protocol):
    """
    Interface for Album Repository.

    Implementations own the album sequence and the next-id counter.
    Records come back in insertion order.
    """

    # ==================== Album Operations ====================

    async def list_albums(self, artist_name: Optional[str] = None) -> List[Album]:
        """All albums, or those whose artistName matches exactly"""
        ...

    async def get_album_by_id(self, album_id: int) -> Optional[Album]:
        """First album with this albumId"""
        ...

    async def create_album(self, fields: Dict[str, Any]) -> Album:
        """Assign the next albumId, append and return the new album"""
        ...

    async def update_album(
        self, album_id: int, update_data: Dict[str, Any]
    ) -> Optional[Tuple[Album, Album]]:
        """Shallow-merge update_data over the stored album; returns (original, updated)"""
        ...

    async def delete_album(self, album_id: int) -> Optional[Album]:
        """Remove and return the album"""
        ...

    # ==================== Utility Methods ====================

    async def count_albums(self) -> int:
        """Number of stored albums"""
        ...

    async def check_connection(self) -> bool:
        """Check the store is usable"""
        ...
