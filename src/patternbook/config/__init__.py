"""
Configuration Management

This module provides configuration management including:
- YAML configuration loading and validation
- .env loading via python-dotenv
- PATTERNBOOK_* environment overrides
"""

from patternbook.config.environment import ensure_dotenv_loaded, reset_environment
from patternbook.config.loader import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATHS,
    ENV_VAR_OVERRIDES,
    ConfigLoader,
    ConfigurationError,
    get_config,
    get_loader,
    load_config,
    load_config_from_env,
    reset_config,
)
from patternbook.config.models import (
    CatalogConfig,
    DisplayConfig,
    LoggingConfig,
    LogLevel,
    PatternbookConfig,
)

__all__ = [
    # Config models
    "CatalogConfig",
    "DisplayConfig",
    "LogLevel",
    "LoggingConfig",
    "PatternbookConfig",
    # Loader
    "ConfigLoader",
    "ConfigurationError",
    "load_config",
    "load_config_from_env",
    "get_config",
    "get_loader",
    "reset_config",
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATHS",
    "ENV_VAR_OVERRIDES",
    # Environment
    "ensure_dotenv_loaded",
    "reset_environment",
]
