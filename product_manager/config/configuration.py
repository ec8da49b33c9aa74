"""Configuration module for the product manager.

Loads settings from config.yaml for non-sensitive values and lets .env / the
process environment override them. Fails fast with clear error messages if
the configuration file is missing or a value is invalid.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _get_project_root() -> Path:
    """Get the project root directory (where config.yaml lives)."""
    # Navigate from product_manager/config/ up to project root
    return Path(__file__).parent.parent.parent


def _load_yaml_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration from config.yaml."""
    config_path = config_path or _get_project_root() / "config.yaml"
    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get optional environment variable with default."""
    return os.environ.get(key, default)


def _resolve_path(value: str, root: Path) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else root / path


@dataclass(frozen=True)
class StorageConfig:
    """Product file configuration."""
    path: Path
    indent: int
    strict_reads: bool


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""
    level: str

    @property
    def level_number(self) -> int:
        return getattr(logging, self.level)


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration container."""
    storage: StorageConfig
    logging: LoggingConfig


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load and validate all application configuration.

    Loads from config.yaml for the defaults, then applies PRODUCTS_FILE and
    LOG_LEVEL from the environment (.env is read first).

    Args:
        config_path: Explicit config file. Defaults to config.yaml in the project root.

    Returns:
        AppConfig: Validated application configuration.

    Raises:
        ConfigurationError: If the config file is missing or a value is invalid.
    """
    # Load environment variables from .env file
    load_dotenv()

    yaml_config = _load_yaml_config(Path(config_path) if config_path else None)
    root = Path(config_path).parent if config_path else _get_project_root()

    # Build Storage config
    storage_section = yaml_config.get("storage") or {}

    raw_path = _get_optional_env("PRODUCTS_FILE") or storage_section.get("path", "productos.json")
    indent = storage_section.get("indent", 2)
    if not isinstance(indent, int) or isinstance(indent, bool) or indent < 0:
        raise ConfigurationError(f"storage.indent must be a non-negative integer, got {indent!r}")

    storage_config = StorageConfig(
        path=_resolve_path(str(raw_path), root),
        indent=indent,
        strict_reads=bool(storage_section.get("strict_reads", False)),
    )

    # Build Logging config
    logging_section = yaml_config.get("logging") or {}

    level = str(_get_optional_env("LOG_LEVEL") or logging_section.get("level", "INFO")).upper()
    if level not in _VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid log level '{level}'. "
            f"Expected one of: {', '.join(_VALID_LOG_LEVELS)}."
        )

    logging_config = LoggingConfig(level=level)

    return AppConfig(
        storage=storage_config,
        logging=logging_config,
    )


# Module-level singleton for convenience
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get the application configuration singleton.

    Lazy-loads configuration on first access.

    Returns:
        AppConfig: Application configuration.

    Raises:
        ConfigurationError: If required configuration is missing.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config
