"""
Configuration Loader.

Loads and validates configuration from YAML files with environment
variable substitution.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from patternbook.config.environment import ensure_dotenv_loaded
from patternbook.config.models import PatternbookConfig

logger = logging.getLogger(__name__)

# Default configuration file locations
DEFAULT_CONFIG_PATHS = [
    "patternbook.yaml",
    "patternbook.yml",
    ".patternbook.yaml",
    ".patternbook.yml",
]

# Environment variable for config path
CONFIG_ENV_VAR = "PATTERNBOOK_CONFIG"

# Maps env var name to config path (dot-separated)
ENV_VAR_OVERRIDES = {
    "PATTERNBOOK_LOG_LEVEL": "logging.level",
    "PATTERNBOOK_LOG_FILE": "logging.file",
    "PATTERNBOOK_SHOW_SOURCE": "display.show_source",
    "PATTERNBOOK_THEME": "display.theme",
    "PATTERNBOOK_DEBUG": "debug",
}


class ConfigurationError(Exception):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        errors: list[dict] | None = None,
        path: Path | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message
            errors: List of validation errors (from Pydantic)
            path: Path to the config file that caused the error
        """
        super().__init__(message)
        self.errors = errors or []
        self.path = path

    def __str__(self) -> str:
        """Format error message with details."""
        msg = super().__str__()
        if self.path:
            msg = f"{msg} (file: {self.path})"
        if self.errors:
            error_details = []
            for err in self.errors[:5]:
                loc = ".".join(str(x) for x in err.get("loc", []))
                error_msg = err.get("msg", "Unknown error")
                error_details.append(f"  - {loc}: {error_msg}")
            if len(self.errors) > 5:
                error_details.append(f"  ... and {len(self.errors) - 5} more errors")
            msg = f"{msg}\n" + "\n".join(error_details)
        return msg


class ConfigLoader:
    """Loads configuration from YAML files.

    Supports:
    - YAML configuration files
    - Environment variable substitution (${VAR} and ${VAR:-default} syntax)
    - PATTERNBOOK_* environment overrides
    - Validation via Pydantic

    Usage:
        # Load from specific file
        loader = ConfigLoader("patternbook.yaml")
        config = loader.load()

        # Load from environment variable or default locations
        loader = ConfigLoader()
        config = loader.load_from_env()
    """

    # Matches: ${VAR_NAME} or ${VAR_NAME:-default_value} or ${VAR_NAME:default_value}
    ENV_PATTERN = re.compile(r"\$\{(\w+)(?::-?([^}]*))?\}")

    def __init__(
        self,
        config_path: str | Path | None = None,
        env_file: str = ".env",
    ) -> None:
        """Initialize the config loader.

        Args:
            config_path: Path to YAML config file (optional).
                If not provided, use load_from_env() to auto-discover.
            env_file: Path to .env file for environment loading
        """
        self._config_path = Path(config_path) if config_path else None
        self._env_file = env_file
        self._config: PatternbookConfig | None = None
        self._loaded_from_path: Path | None = None

    @property
    def config_path(self) -> Path | None:
        """Get config file path."""
        return self._config_path

    @property
    def loaded_from_path(self) -> Path | None:
        """Get the path the config was actually loaded from.

        None when defaults were used because no file exists.
        """
        return self._loaded_from_path

    @property
    def config(self) -> PatternbookConfig | None:
        """Get loaded configuration, or None if not loaded yet."""
        return self._config

    def load(self, path: str | Path | None = None) -> PatternbookConfig:
        """Load and validate configuration from a specific path.

        Args:
            path: Optional path to config file. Overrides the path set in
                __init__. With no path at all, defaults are used.

        Returns:
            Validated PatternbookConfig

        Raises:
            ConfigurationError: If config is invalid
            FileNotFoundError: If config file not found
        """
        if path is not None:
            self._config_path = Path(path)

        ensure_dotenv_loaded(self._env_file)

        if self._config_path:
            raw = self._load_yaml()
            self._loaded_from_path = self._config_path
        else:
            raw = {}
            self._loaded_from_path = None

        processed = self._substitute_env_vars(raw)
        processed = self._apply_env_overrides(processed)
        # YAML parses empty sections as None, but Pydantic expects them omitted
        processed = self._clean_none_values(processed)

        try:
            self._config = PatternbookConfig(**processed)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed: {e.error_count()} errors",
                errors=e.errors(),
                path=self._loaded_from_path,
            )

        logger.debug("Configuration loaded from %s", self._loaded_from_path or "defaults")
        return self._config

    def load_from_env(self) -> PatternbookConfig:
        """Load configuration from environment variable or default locations.

        Search order:
        1. PATTERNBOOK_CONFIG environment variable (if set)
        2. Default config file locations in the current directory
        3. Built-in defaults

        Returns:
            Validated PatternbookConfig

        Raises:
            ConfigurationError: If config is invalid
            FileNotFoundError: If PATTERNBOOK_CONFIG names a missing file
        """
        ensure_dotenv_loaded(self._env_file)

        env_config_path = os.environ.get(CONFIG_ENV_VAR)
        if env_config_path:
            config_path = Path(env_config_path)
            if not config_path.exists():
                raise FileNotFoundError(
                    f"Config file specified by {CONFIG_ENV_VAR} not found: {env_config_path}"
                )
            self._config_path = config_path
            return self.load()

        for default_path in DEFAULT_CONFIG_PATHS:
            path = Path(default_path)
            if path.exists():
                self._config_path = path
                return self.load()

        # Every setting has a default, so a missing file is fine
        self._config_path = None
        return self.load()

    def _load_yaml(self) -> dict[str, Any]:
        """Load YAML configuration file.

        Raises:
            FileNotFoundError: If file doesn't exist
            ConfigurationError: If YAML is invalid or not a mapping
        """
        if not self._config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self._config_path}")

        try:
            with open(self._config_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML: {e}", path=self._config_path)

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration root must be a mapping", path=self._config_path
            )
        return data

    def _substitute_env_vars(self, data: Any) -> Any:
        """Recursively substitute environment variables in config."""
        if isinstance(data, dict):
            return {k: self._substitute_env_vars(v) for k, v in data.items()}
        elif isinstance(data, list):
            return [self._substitute_env_vars(item) for item in data]
        elif isinstance(data, str):
            return self._substitute_string(data)
        else:
            return data

    def _clean_none_values(self, data: Any) -> Any:
        """Recursively remove None values from nested dicts."""
        if isinstance(data, dict):
            return {k: self._clean_none_values(v) for k, v in data.items() if v is not None}
        elif isinstance(data, list):
            return [self._clean_none_values(item) for item in data]
        else:
            return data

    def _substitute_string(self, value: str) -> Any:
        """Substitute environment variables in a string.

        A string that is entirely one ${VAR} reference is coerced to
        bool/int/float/None; embedded references are plain text.
        Unresolved references are left as-is.
        """
        full_match = self.ENV_PATTERN.fullmatch(value)
        if full_match:
            var_name, default = full_match.group(1), full_match.group(2)
            env_value = os.environ.get(var_name)
            resolved = env_value if env_value is not None else default
            if resolved is not None:
                return self._coerce_type(resolved)
            return value

        def replace(match: re.Match[str]) -> str:
            env_value = os.environ.get(match.group(1))
            if env_value is not None:
                return env_value
            elif match.group(2) is not None:
                return match.group(2)
            return match.group(0)

        return self.ENV_PATTERN.sub(replace, value)

    def _coerce_type(self, value: str) -> Any:
        """Coerce string value to appropriate Python type."""
        if value == "":
            return None

        lower_value = value.lower()
        if lower_value in ("true", "yes", "on"):
            return True
        if lower_value in ("false", "no", "off"):
            return False

        try:
            if "." not in value and "e" not in lower_value:
                return int(value)
            return float(value)
        except ValueError:
            pass

        return value

    def _apply_env_overrides(self, config_dict: dict[str, Any]) -> dict[str, Any]:
        """Apply PATTERNBOOK_* overrides; they take precedence over the file."""
        for env_var, config_path in ENV_VAR_OVERRIDES.items():
            env_value = os.environ.get(env_var)
            if env_value is not None:
                self._set_nested_value(config_dict, config_path, self._coerce_type(env_value))
        return config_dict

    def _set_nested_value(self, config_dict: dict[str, Any], path: str, value: Any) -> None:
        """Set a nested value in a dictionary using dot notation."""
        parts = path.split(".")
        current = config_dict
        for part in parts[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value

    def save(self, path: str | Path | None = None) -> None:
        """Save current configuration to YAML file.

        Raises:
            ValueError: If no config loaded or no path specified
        """
        if self._config is None:
            raise ValueError("No configuration loaded")

        save_path = Path(path) if path else self._config_path
        if save_path is None:
            raise ValueError("No path specified for saving")

        with open(save_path, "w") as f:
            yaml.safe_dump(
                self._config.to_yaml_dict(),
                f,
                default_flow_style=False,
                sort_keys=False,
            )


# Global loader instance for caching
_global_loader: ConfigLoader | None = None
_global_config: PatternbookConfig | None = None


def load_config(
    config_path: str | Path | None = None,
    env_file: str = ".env",
) -> PatternbookConfig:
    """Load configuration from file and cache it globally.

    Args:
        config_path: Path to YAML config file. None uses defaults.
        env_file: Path to .env file

    Returns:
        Validated PatternbookConfig
    """
    global _global_loader, _global_config

    _global_loader = ConfigLoader(config_path, env_file)
    _global_config = _global_loader.load()
    return _global_config


def load_config_from_env(env_file: str = ".env") -> PatternbookConfig:
    """Discover configuration (PATTERNBOOK_CONFIG, default paths, defaults).

    Args:
        env_file: Path to .env file

    Returns:
        Validated PatternbookConfig
    """
    global _global_loader, _global_config

    _global_loader = ConfigLoader(env_file=env_file)
    _global_config = _global_loader.load_from_env()
    return _global_config


def get_config() -> PatternbookConfig:
    """Get the global configuration.

    Raises:
        RuntimeError: If configuration not loaded
    """
    if _global_config is None:
        raise RuntimeError(
            "Configuration not loaded. Call load_config() or load_config_from_env() first."
        )
    return _global_config


def get_loader() -> ConfigLoader | None:
    """Get the global config loader instance, if any."""
    return _global_loader


def reset_config() -> None:
    """Reset global configuration.

    Clears the cached configuration. Useful for testing.
    """
    global _global_loader, _global_config
    _global_loader = None
    _global_config = None
