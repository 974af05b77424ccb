"""
Album Service Business Logic

Album management business logic layer for the microservice.
Handles identifier parsing, validation, field projection and merging.

Uses dependency injection for testability:
- Repository is injected, not created at import time
"""

from typing import Optional, List, Dict, Any, Type, TypeVar, Union
import logging
import re

from pydantic import BaseModel, ValidationError

# Import protocols (no I/O dependencies) - NOT the concrete repository!
from .protocols import (
    AlbumRepositoryProtocol,
    AlbumNotFoundError,
    AlbumValidationError,
    AlbumServiceError,
    InvalidAlbumIdError,
)
from .models import (
    AlbumCreateRequest,
    AlbumUpdateRequest,
    ALLOWED_FIELDS,
    COMPULSORY_FIELDS,
)

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Not all compulsory fields supplied"

# Leading integer: optional whitespace and sign, then decimal digits or a
# 0x-prefixed hex number. Anything after the digits is ignored, so "12abc" is
# album 12 and "0x0B" is album 11.
_ALBUM_ID_PATTERN = re.compile(
    r"\s*(?P<sign>[+-]?)(?:0[xX](?P<hex>[0-9a-fA-F]*)|(?P<dec>\d+))", re.ASCII
)

RequestT = TypeVar("RequestT", bound=BaseModel)


def parse_album_id(raw_id: str) -> int:
    """
    Parse an album identifier taken from a request path.

    Raises:
        InvalidAlbumIdError: If the value does not start with an integer
    """
    match = _ALBUM_ID_PATTERN.match(raw_id or "")
    if not match or not (match.group("hex") or match.group("dec")):
        raise InvalidAlbumIdError(f"Invalid album id: {raw_id!r}")

    if match.group("hex"):
        value = int(match.group("hex"), 16)
    else:
        value = int(match.group("dec"))
    return -value if match.group("sign") == "-" else value


def load_request(model: Type[RequestT], body: Any) -> RequestT:
    """
    Build a request model from a raw JSON body.

    A missing body is an empty mapping. A body that is not a JSON object
    supplies no fields at all.

    Raises:
        AlbumValidationError: If the body is not an object or a field has the wrong type
    """
    if body is None:
        body = {}
    if isinstance(body, model):
        return body
    if not isinstance(body, dict):
        raise AlbumValidationError(MISSING_FIELDS_MESSAGE)

    try:
        return model.model_validate(body)
    except ValidationError as e:
        fields = sorted({str(error["loc"][0]) for error in e.errors() if error["loc"]})
        raise AlbumValidationError(f"Invalid album fields: {', '.join(fields)}")


# ==================== Album Service ====================

class AlbumService:
    """
    Album management business logic service

    Applies the album rules and delegates storage to the repository.
    Every public method returns wire-format payloads (camelCase dicts).
    """

    def __init__(self, repository: Optional[AlbumRepositoryProtocol] = None):
        """
        Initialize service with injected dependencies.

        Args:
            repository: Repository (inject a fresh or seeded store for testing)
        """
        self.repo = repository  # Will be set by factory if None

    # ==================== Album Queries ====================

    async def list_albums(self, artist_name: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        List albums, optionally filtered by exact artist name

        Args:
            artist_name: Case-sensitive exact match; empty means no filter

        Returns:
            List of album payloads in insertion order

        Raises:
            AlbumNotFoundError: If a filter was given and nothing matched
        """
        try:
            if not artist_name:
                albums = await self.repo.list_albums()
                return [album.to_payload() for album in albums]

            albums = await self.repo.list_albums(artist_name=artist_name)
            if not albums:
                raise AlbumNotFoundError(f"No albums by artist: {artist_name}")

            return [album.to_payload() for album in albums]

        except AlbumServiceError:
            raise
        except Exception as e:
            logger.error(f"Failed to list albums: {e}")
            raise AlbumServiceError(f"Failed to list albums: {str(e)}")

    async def get_album(self, raw_id: str) -> Dict[str, Any]:
        """
        Get album by ID

        Args:
            raw_id: Album ID as it appeared in the path

        Returns:
            Album payload

        Raises:
            InvalidAlbumIdError: If raw_id is not an integer
            AlbumNotFoundError: If album not found
        """
        album_id = parse_album_id(raw_id)
        try:
            album = await self.repo.get_album_by_id(album_id)

            if not album:
                raise AlbumNotFoundError(f"Album not found: {album_id}")

            return album.to_payload()

        except AlbumServiceError:
            raise
        except Exception as e:
            logger.error(f"Failed to get album: {e}")
            raise AlbumServiceError(f"Failed to get album: {str(e)}")

    # ==================== Album Lifecycle Operations ====================

    async def create_album(
        self,
        body: Union[AlbumCreateRequest, Dict[str, Any], None] = None
    ) -> List[Dict[str, Any]]:
        """
        Create a new album

        The compulsory check only looks at which keys were sent. Values are
        then copied for known fields only when truthy, so a compulsory field
        sent as "" is accepted but not stored.

        Args:
            body: Raw JSON body or a creation request; None is an empty body

        Returns:
            The whole collection after the append

        Raises:
            AlbumValidationError: If a compulsory key is missing or a value is mistyped
        """
        request = load_request(AlbumCreateRequest, body)

        supplied = request.supplied_fields()
        missing = [name for name in COMPULSORY_FIELDS if name not in supplied]
        if missing:
            logger.warning(f"Album creation rejected, missing fields: {missing}")
            raise AlbumValidationError(MISSING_FIELDS_MESSAGE)

        try:
            fields = {}
            for name in ALLOWED_FIELDS:
                value = request.get_field(name)
                if value:
                    fields[name] = value

            album = await self.repo.create_album(fields)
            logger.info(f"Album created: {album.album_id}")

            albums = await self.repo.list_albums()
            return [stored.to_payload() for stored in albums]

        except AlbumServiceError:
            raise
        except Exception as e:
            logger.error(f"Failed to create album: {e}")
            raise AlbumServiceError(f"Failed to create album: {str(e)}")

    async def update_album(
        self,
        raw_id: str,
        body: Union[AlbumUpdateRequest, Dict[str, Any], None] = None
    ) -> List[Dict[str, Any]]:
        """
        Update album

        Every compulsory field must be sent with a non-empty value. The body
        is then merged over the stored record key by key, including keys
        outside the album field set; albumId never changes.

        Args:
            raw_id: Album ID as it appeared in the path
            body: Raw JSON body or an update request, checked after the lookup

        Returns:
            [original, updated] album payloads

        Raises:
            InvalidAlbumIdError: If raw_id is not an integer
            AlbumNotFoundError: If album not found
            AlbumValidationError: If a compulsory field is missing, empty or mistyped
        """
        album_id = parse_album_id(raw_id)
        try:
            album = await self.repo.get_album_by_id(album_id)
            if not album:
                raise AlbumNotFoundError(f"Album not found: {album_id}")

            request = load_request(AlbumUpdateRequest, body)

            if not all(request.get_field(name) for name in COMPULSORY_FIELDS):
                logger.warning(f"Album update rejected for {album_id}: compulsory fields missing or empty")
                raise AlbumValidationError(MISSING_FIELDS_MESSAGE)

            result = await self.repo.update_album(album_id, request.updates())
            if result is None:
                raise AlbumNotFoundError(f"Album not found: {album_id}")

            original, updated = result
            logger.info(f"Album updated: {album_id}")
            return [original.to_payload(), updated.to_payload()]

        except AlbumServiceError:
            raise
        except Exception as e:
            logger.error(f"Failed to update album: {e}")
            raise AlbumServiceError(f"Failed to update album: {str(e)}")

    async def delete_album(self, raw_id: str) -> Dict[str, Any]:
        """
        Delete album

        Args:
            raw_id: Album ID as it appeared in the path

        Returns:
            The removed album payload

        Raises:
            InvalidAlbumIdError: If raw_id is not an integer
            AlbumNotFoundError: If album not found
        """
        album_id = parse_album_id(raw_id)
        try:
            album = await self.repo.delete_album(album_id)
            if not album:
                raise AlbumNotFoundError(f"Album not found: {album_id}")

            logger.info(f"Album deleted: {album_id}")
            return album.to_payload()

        except AlbumServiceError:
            raise
        except Exception as e:
            logger.error(f"Failed to delete album: {e}")
            raise AlbumServiceError(f"Failed to delete album: {str(e)}")

    # ==================== Utility Methods ====================

    async def count_albums(self) -> int:
        """Number of stored albums"""
        return await self.repo.count_albums()

    async def check_connection(self) -> bool:
        """Check the backing store"""
        try:
            return await self.repo.check_connection()
        except Exception as e:
            logger.error(f"Connection check failed: {e}")
            return False
