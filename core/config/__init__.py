#!/usr/bin/env python3
"""Modular configuration system for the album service

Configuration hierarchy:
- service_config: listen address, validation status, seeding
- logging_config: logging configuration
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .service_config import ServiceConfig

# Load an optional env file; real environment variables always win
env_file = os.getenv("ENV_FILE", ".env")
load_dotenv(env_file, override=False)

# Create global settings instance
settings = ServiceConfig.from_env()

def get_settings() -> ServiceConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> ServiceConfig:
    """Reload settings from environment"""
    global settings
    settings = ServiceConfig.from_env()
    return settings

__all__ = [
    'ServiceConfig',
    'LoggingConfig',
    'get_settings',
    'reload_settings',
    'settings',
]
