"""
Configuration Data Models.

Defines all configuration schemas using Pydantic for validation
and type safety.
"""

import logging
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from patternbook.models.base import PatternCategory


class LogLevel(str, Enum):
    """Logging verbosity."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        """Convert to the numeric level used by the logging module."""
        return getattr(logging, self.value)


class CatalogConfig(BaseModel):
    """Configuration for which patterns are loaded.

    Attributes:
        categories: Categories shown by list/check (empty = none)
        extra_modules: Dotted module paths imported to register more patterns
    """

    categories: list[PatternCategory] = Field(
        default_factory=lambda: list(PatternCategory),
        description="Enabled categories",
    )
    extra_modules: list[str] = Field(
        default_factory=list,
        description="Additional pattern modules to import",
        examples=[["mypackage.patterns.repository"]],
    )

    @field_validator("extra_modules")
    @classmethod
    def valid_module_paths(cls, v: list[str]) -> list[str]:
        """Validate that every entry looks like a dotted module path."""
        for name in v:
            if not all(part.isidentifier() for part in name.split(".")):
                raise ValueError(f"'{name}' is not a valid module path")
        return v


class DisplayConfig(BaseModel):
    """Configuration for terminal rendering.

    Attributes:
        show_source: Include module source in `show` by default
        theme: Pygments theme for syntax highlighting
        line_numbers: Number source lines
    """

    show_source: bool = Field(
        default=False,
        description="Show source by default",
    )
    theme: str = Field(
        default="monokai",
        min_length=1,
        description="Syntax highlighting theme",
    )
    line_numbers: bool = Field(
        default=True,
        description="Number source lines",
    )


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Attributes:
        level: Minimum level emitted
        file: Optional log file in addition to stderr
        format: Log record format string
    """

    level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Log level",
    )
    file: Optional[str] = Field(
        default=None,
        description="Log file path",
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.upper()
        return v


class PatternbookConfig(BaseModel):
    """Root configuration.

    Attributes:
        catalog: Which patterns are loaded
        display: Terminal rendering options
        logging: Logging options
        debug: Enable debug mode
    """

    catalog: CatalogConfig = Field(
        default_factory=CatalogConfig,
        description="Catalog configuration",
    )
    display: DisplayConfig = Field(
        default_factory=DisplayConfig,
        description="Display configuration",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-friendly dictionary.

        Returns:
            Dict suitable for YAML serialization
        """
        return self.model_dump(mode="json", exclude_none=True)
