#!/usr/bin/env python3
"""
Core Module for Microservices Architecture

Shared infrastructure for the album microservice.

COMPONENTS:
    - config/: dataclass configuration loaded from the environment
    - config_manager.py: per-service configuration entry point
    - logger.py: service logger setup

USAGE:
    from core.config_manager import ConfigManager
    from core.logger import setup_service_logger

    config = ConfigManager("album_service")
    logger = setup_service_logger("album_service")
"""

from .config_manager import ConfigManager
from .logger import setup_service_logger

# Export public API
__all__ = [
    "ConfigManager",
    "setup_service_logger",
]

__version__ = "2.0.0"
