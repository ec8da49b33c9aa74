"""Configuration module."""

from product_manager.config.configuration import (
    AppConfig,
    ConfigurationError,
    LoggingConfig,
    StorageConfig,
    get_config,
    load_config,
)

__all__ = [
    "AppConfig",
    "ConfigurationError",
    "LoggingConfig",
    "StorageConfig",
    "get_config",
    "load_config",
]
