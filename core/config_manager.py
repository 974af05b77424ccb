"""
Configuration Manager

Per-service entry point to configuration. Each microservice creates one
manager with its own name and reads its sub-configs from it.

Usage:
    from core.config_manager import ConfigManager

    config_manager = ConfigManager("album_service")
    service_config = config_manager.get_service_config()
"""
from typing import Optional

from core.config import LoggingConfig, ServiceConfig


class ConfigManager:
    """Bundles the service and logging configuration for one service"""

    def __init__(
        self,
        service_name: str,
        service_config: Optional[ServiceConfig] = None,
        logging_config: Optional[LoggingConfig] = None,
    ):
        self.service_name = service_name
        self._service_config = service_config
        self._logging_config = logging_config

    def get_service_config(self) -> ServiceConfig:
        """Service settings, loaded from the environment on first use"""
        if self._service_config is None:
            self._service_config = ServiceConfig.from_env(self.service_name)
        return self._service_config

    def get_logging_config(self) -> LoggingConfig:
        """Logging settings, loaded from the environment on first use"""
        if self._logging_config is None:
            self._logging_config = LoggingConfig.from_env(self.service_name)
        return self._logging_config

    def reload(self) -> None:
        """Drop cached configs so the next access re-reads the environment"""
        self._service_config = None
        self._logging_config = None
