"""
Album Service Models

Independent models for the album record store.
Wire names are camelCase; Python attributes are snake_case with aliases.
"""

from typing import Optional, Dict, Any, List, Set
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


# ==================== Field Sets ====================

COMPULSORY_FIELDS = ("artistName", "collectionName", "releaseDate", "primaryGenreName")
OPTIONAL_FIELDS = ("artworkUrl100", "url")
ALLOWED_FIELDS = COMPULSORY_FIELDS + OPTIONAL_FIELDS

ALBUM_ID_FIELD = "albumId"


class _AliasedFields(BaseModel):
    """Shared helpers for models that carry the six album fields"""

    def supplied_fields(self) -> Set[str]:
        """Wire names of every key the client actually sent (null included)"""
        supplied = set()
        for name in self.model_fields_set:
            field = type(self).model_fields.get(name)
            supplied.add(field.alias if field and field.alias else name)
        if self.model_extra:
            supplied.update(self.model_extra)
        return supplied

    def wire_dump(self) -> Dict[str, Any]:
        """Supplied keys only, under their wire names, extras included"""
        data = self.model_dump(by_alias=True, exclude_unset=True)
        for key, value in (self.model_extra or {}).items():
            data.setdefault(key, value)
        return data

    def get_field(self, wire_name: str) -> Any:
        """Value for a wire name, or None when it was not sent"""
        return self.wire_dump().get(wire_name)


# ==================== Core Models ====================

class Album(_AliasedFields):
    """
    Album record

    Only ``albumId`` is guaranteed. Every other field may be absent, and
    records produced by an update may carry extra keys.
    """
    model_config = ConfigDict(extra="allow")

    album_id: int = Field(..., alias="albumId")
    artist_name: Optional[str] = Field(None, alias="artistName")
    collection_name: Optional[str] = Field(None, alias="collectionName")
    release_date: Optional[str] = Field(None, alias="releaseDate")
    primary_genre_name: Optional[str] = Field(None, alias="primaryGenreName")
    artwork_url_100: Optional[str] = Field(None, alias="artworkUrl100")
    url: Optional[str] = Field(None, alias="url")

    def to_payload(self) -> Dict[str, Any]:
        """Wire representation; absent fields stay absent"""
        return self.wire_dump()


# ==================== Request Models ====================

class AlbumCreateRequest(_AliasedFields):
    """
    Album creation request

    Every field is optional at the schema level so that a missing
    compulsory field reaches the service's own validation. Unknown keys
    are dropped.
    """
    model_config = ConfigDict(extra="ignore")

    artist_name: Optional[str] = Field(None, alias="artistName", description="Artist name")
    collection_name: Optional[str] = Field(None, alias="collectionName", description="Album title")
    release_date: Optional[str] = Field(None, alias="releaseDate", description="ISO-8601 release timestamp")
    primary_genre_name: Optional[str] = Field(None, alias="primaryGenreName", description="Primary genre")
    artwork_url_100: Optional[str] = Field(None, alias="artworkUrl100", description="100px artwork URL")
    url: Optional[str] = Field(None, alias="url", description="Embed or store URL")


class AlbumUpdateRequest(_AliasedFields):
    """
    Album update request

    Partial-update body: only the keys the client sent are merged into the
    stored record. Keys outside the album field set are kept and merged too.
    """
    model_config = ConfigDict(extra="allow")

    artist_name: Optional[str] = Field(None, alias="artistName", description="Artist name")
    collection_name: Optional[str] = Field(None, alias="collectionName", description="Album title")
    release_date: Optional[str] = Field(None, alias="releaseDate", description="ISO-8601 release timestamp")
    primary_genre_name: Optional[str] = Field(None, alias="primaryGenreName", description="Primary genre")
    artwork_url_100: Optional[str] = Field(None, alias="artworkUrl100", description="100px artwork URL")
    url: Optional[str] = Field(None, alias="url", description="Embed or store URL")

    def updates(self) -> Dict[str, Any]:
        """Supplied keys to merge, without the immutable albumId"""
        data = self.wire_dump()
        data.pop(ALBUM_ID_FIELD, None)
        return data


# ==================== Service Status Models ====================

class AlbumServiceStatus(BaseModel):
    """Album service health response"""
    service: str = "album_service"
    status: str = "healthy"
    version: str = "1.0.0"
    album_count: int = 0
    timestamp: datetime


class AlbumServiceInfo(BaseModel):
    """Album service metadata response"""
    service: str = "album_service"
    version: str = "1.0.0"
    tags: List[str] = Field(default_factory=list)
    capabilities: List[str] = Field(default_factory=list)
    routes: List[Dict[str, Any]] = Field(default_factory=list)


# ==================== Export Models ====================

__all__ = [
    # Field sets
    'COMPULSORY_FIELDS', 'OPTIONAL_FIELDS', 'ALLOWED_FIELDS', 'ALBUM_ID_FIELD',
    # Core Models
    'Album',
    # Request Models
    'AlbumCreateRequest', 'AlbumUpdateRequest',
    # Service Models
    'AlbumServiceStatus', 'AlbumServiceInfo',
]
