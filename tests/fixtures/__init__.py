"""
Shared Test Fixtures

Centralized factories used across all test layers.

Structure:
    - album_fixtures.py: Album service factories
"""

# Album service fixtures
from .album_fixtures import (
    make_artist_name,
    make_album,
    make_album_create_request,
    make_album_update_request,
)

__all__ = [
    "make_artist_name",
    "make_album",
    "make_album_create_request",
    "make_album_update_request",
]
