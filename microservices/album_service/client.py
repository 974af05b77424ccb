"""
Album Service Client

Client library for other microservices to interact with album service via HTTP
"""

import os
import httpx
import logging
from typing import Optional, List, Dict, Any

logger = logging.getLogger(__name__)

DEFAULT_ALBUM_SERVICE_URL = "http://localhost:3004"


class AlbumServiceClient:
    """Album Service HTTP client"""

    def __init__(self, base_url: str = None, http_client: Optional[httpx.AsyncClient] = None):
        """
        Initialize Album Service client

        Args:
            base_url: Album service base URL, defaults to ALBUM_SERVICE_URL
                or http://localhost:3004
            http_client: Pre-built httpx client (custom transport, tests)
        """
        base_url = base_url or os.getenv("ALBUM_SERVICE_URL", DEFAULT_ALBUM_SERVICE_URL)
        self.base_url = base_url.rstrip('/')
        self.client = http_client or httpx.AsyncClient(timeout=30.0)

    async def close(self):
        """Close HTTP client"""
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # =============================================================================
    # Album Management
    # =============================================================================

    async def list_albums(self, artist_name: Optional[str] = None) -> Optional[List[Dict[str, Any]]]:
        """
        List albums, optionally only those by one artist

        Args:
            artist_name: Exact, case-sensitive artist name

        Returns:
            List of albums; an empty list when the artist has none

        Example:
            >>> async with AlbumServiceClient() as client:
            ...     albums = await client.list_albums(artist_name="Billy Joel")
        """
        try:
            params = {"artistName": artist_name} if artist_name else None
            response = await self.client.get(f"{self.base_url}/albums", params=params)
            if response.status_code == 404 and artist_name:
                return []
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            logger.error(f"Failed to list albums: {e.response.status_code} - {e.response.text}")
            return None
        except Exception as e:
            logger.error(f"Unexpected error listing albums: {e}")
            return None

    async def get_album(self, album_id: int) -> Optional[Dict[str, Any]]:
        """
        Get album by ID

        Args:
            album_id: Album ID

        Returns:
            Album details, or None if it does not exist

        Example:
            >>> album = await client.get_album(10)
        """
        try:
            response = await self.client.get(f"{self.base_url}/albums/{album_id}")
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                logger.debug(f"Album not found: {album_id}")
            else:
                logger.error(f"Failed to get album: {e.response.status_code} - {e.response.text}")
            return None
        except Exception as e:
            logger.error(f"Unexpected error getting album: {e}")
            return None

    async def create_album(
        self,
        artist_name: str,
        collection_name: str,
        release_date: str,
        primary_genre_name: str,
        artwork_url_100: Optional[str] = None,
        url: Optional[str] = None
    ) -> Optional[List[Dict[str, Any]]]:
        """
        Create a new album

        Args:
            artist_name: Artist name
            collection_name: Album title
            release_date: ISO-8601 release timestamp
            primary_genre_name: Primary genre
            artwork_url_100: 100px artwork URL
            url: Embed or store URL

        Returns:
            The full album list, new album last

        Example:
            >>> albums = await client.create_album(
            ...     artist_name="Radiohead",
            ...     collection_name="OK Computer",
            ...     release_date="1997-05-21T00:00:00Z",
            ...     primary_genre_name="Alternative",
            ... )
        """
        try:
            payload = {
                "artistName": artist_name,
                "collectionName": collection_name,
                "releaseDate": release_date,
                "primaryGenreName": primary_genre_name,
            }

            if artwork_url_100:
                payload["artworkUrl100"] = artwork_url_100
            if url:
                payload["url"] = url

            response = await self.client.post(f"{self.base_url}/albums", json=payload)
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            logger.error(f"Failed to create album: {e.response.status_code} - {e.response.text}")
            return None
        except Exception as e:
            logger.error(f"Unexpected error creating album: {e}")
            return None

    async def update_album(
        self,
        album_id: int,
        artist_name: str,
        collection_name: str,
        release_date: str,
        primary_genre_name: str,
        **extra_fields: Any
    ) -> Optional[List[Dict[str, Any]]]:
        """
        Update album

        Args:
            album_id: Album ID
            artist_name: Artist name
            collection_name: Album title
            release_date: ISO-8601 release timestamp
            primary_genre_name: Primary genre
            **extra_fields: Further wire-format keys to merge (e.g. artworkUrl100)

        Returns:
            [original, updated], or None on failure

        Example:
            >>> original, updated = await client.update_album(
            ...     10, "Beyoncé", "Lemonade (Deluxe)", "2016-04-25T07:00:00Z", "Pop"
            ... )
        """
        try:
            payload = {
                **extra_fields,
                "artistName": artist_name,
                "collectionName": collection_name,
                "releaseDate": release_date,
                "primaryGenreName": primary_genre_name,
            }

            response = await self.client.put(f"{self.base_url}/albums/{album_id}", json=payload)
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            logger.error(f"Failed to update album: {e.response.status_code} - {e.response.text}")
            return None
        except Exception as e:
            logger.error(f"Unexpected error updating album: {e}")
            return None

    async def delete_album(self, album_id: int) -> Optional[Dict[str, Any]]:
        """
        Delete album

        Args:
            album_id: Album ID

        Returns:
            The removed album, or None on failure

        Example:
            >>> removed = await client.delete_album(11)
        """
        try:
            response = await self.client.delete(f"{self.base_url}/albums/{album_id}")
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            logger.error(f"Failed to delete album: {e.response.status_code} - {e.response.text}")
            return None
        except Exception as e:
            logger.error(f"Unexpected error deleting album: {e}")
            return None

    # =============================================================================
    # Health Check
    # =============================================================================

    async def health_check(self) -> Optional[Dict[str, Any]]:
        """
        Check service health

        Returns:
            Health payload, or None if the service is unreachable
        """
        try:
            response = await self.client.get(f"{self.base_url}/health")
            response.raise_for_status()
            return response.json()

        except Exception as e:
            logger.error(f"Health check failed: {e}")
            return None


__all__ = ["AlbumServiceClient"]
