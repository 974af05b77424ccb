"""
Service logger setup

Configures a named stdlib logger from LoggingConfig. Handlers are attached
once per logger name, so calling setup_service_logger repeatedly (app reloads,
tests) does not duplicate output.
"""
import logging
import sys
from typing import Optional

from core.config import LoggingConfig


def setup_service_logger(
    service_name: str,
    level: Optional[str] = None,
    config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Create or fetch the logger for a service.

    Args:
        service_name: Logger name, usually the service name
        level: Overrides the configured level (e.g. "DEBUG")
        config: Logging config, defaults to LoggingConfig.from_env()

    Returns:
        logging.Logger: Configured logger
    """
    config = config or LoggingConfig.from_env(service_name)
    logger = logging.getLogger(service_name)
    logger.setLevel((level or config.log_level).upper())

    if getattr(logger, "_service_configured", False):
        return logger

    formatter = logging.Formatter(config.log_format)

    if config.enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    logger._service_configured = True
    return logger
