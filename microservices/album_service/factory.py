"""
Album Service Factory

Factory functions for creating service instances with real dependencies.
This is the ONLY place that builds the concrete repository.

Usage:
    from .factory import create_album_service
    service = create_album_service(config)
"""
from typing import Optional

from core.config_manager import ConfigManager

from .album_service import AlbumService


def create_album_service(
    config: Optional[ConfigManager] = None,
    seed_data: Optional[bool] = None,
) -> AlbumService:
    """
    Create AlbumService backed by a fresh in-memory repository.

    Args:
        config: Optional ConfigManager instance
        seed_data: Start with the two seed albums; defaults to the
            service config's seed_data setting

    Returns:
        AlbumService: Configured service instance
    """
    from .album_repository import AlbumRepository, SEED_ALBUMS

    if seed_data is None:
        config = config or ConfigManager("album_service")
        seed_data = config.get_service_config().seed_data

    repository = AlbumRepository(seed=SEED_ALBUMS if seed_data else None)

    return AlbumService(repository=repository)
