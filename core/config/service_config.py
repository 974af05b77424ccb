#!/usr/bin/env python3
"""Album service runtime configuration

Listen address, validation status and seeding behaviour for the album
service. Every value can be overridden from the environment.
"""
import os
from dataclasses import dataclass

def _bool(val: str) -> bool:
    return val.lower() == "true"

def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


@dataclass
class ServiceConfig:
    """Album service settings"""

    # ===========================================
    # Identity
    # ===========================================
    service_name: str = "album_service"
    version: str = "1.0.0"

    # ===========================================
    # HTTP listener
    # ===========================================
    service_host: str = "0.0.0.0"
    service_port: int = 3004
    reload: bool = False

    # ===========================================
    # Behaviour
    # ===========================================
    # 401 is what existing clients of the album API expect for a body that
    # lacks compulsory fields; 400 or 422 are the clean alternatives.
    validation_status_code: int = 401
    seed_data: bool = True

    @classmethod
    def from_env(cls, service_name: str = "album_service") -> 'ServiceConfig':
        """Load service configuration from environment variables"""
        return cls(
            service_name=os.getenv("SERVICE_NAME", service_name),
            service_host=os.getenv("HOST", "0.0.0.0"),
            service_port=_int(os.getenv("PORT", "3004"), 3004),
            reload=_bool(os.getenv("RELOAD", "false")),
            validation_status_code=_int(os.getenv("VALIDATION_STATUS_CODE", "401"), 401),
            seed_data=_bool(os.getenv("SEED_ALBUMS", "true")),
        )
