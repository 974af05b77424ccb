#!/usr/bin/env python3
"""Logging configuration"""
import os
from dataclasses import dataclass

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _bool(val: str) -> bool:
    return val.lower() == "true"


@dataclass
class LoggingConfig:
    """Logging configuration"""
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT
    log_file: str = ""
    enable_console: bool = True

    # Service identity for logging
    service_name: str = "album_service"
    environment: str = "development"

    @classmethod
    def from_env(cls, service_name: str = "album_service") -> 'LoggingConfig':
        """Load logging config from environment variables"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            log_level=os.getenv("LOG_LEVEL", "DEBUG" if env == "development" else "INFO").upper(),
            log_format=os.getenv("LOG_FORMAT", DEFAULT_LOG_FORMAT),
            log_file=os.getenv("LOG_FILE", ""),
            enable_console=_bool(os.getenv("LOG_CONSOLE", "true")),
            service_name=os.getenv("SERVICE_NAME", service_name),
            environment=env,
        )
