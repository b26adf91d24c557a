"""Tests for configuration models."""

import logging

import pytest
from pydantic import ValidationError

from patternbook.config import (
    CatalogConfig,
    DisplayConfig,
    LoggingConfig,
    LogLevel,
    PatternbookConfig,
)
from patternbook.models import PatternCategory


class TestCatalogConfig:
    """Tests for CatalogConfig model."""

    def test_defaults_enable_every_category(self):
        """Test that all categories are enabled by default."""
        config = CatalogConfig()

        assert config.categories == list(PatternCategory)
        assert config.extra_modules == []

    def test_categories_from_strings(self):
        """Test that categories accept string values."""
        config = CatalogConfig(categories=["creational"])

        assert config.categories == [PatternCategory.CREATIONAL]

    def test_unknown_category_rejected(self):
        """Test that unknown categories are rejected."""
        with pytest.raises(ValidationError):
            CatalogConfig(categories=["architectural"])

    def test_invalid_module_path_rejected(self):
        """Test that extra modules must be dotted module paths."""
        with pytest.raises(ValidationError):
            CatalogConfig(extra_modules=["my-package/patterns.py"])


class TestDisplayConfig:
    """Tests for DisplayConfig model."""

    def test_defaults(self):
        config = DisplayConfig()

        assert config.show_source is False
        assert config.theme == "monokai"
        assert config.line_numbers is True

    def test_empty_theme_rejected(self):
        with pytest.raises(ValidationError):
            DisplayConfig(theme="")


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_defaults(self):
        config = LoggingConfig()

        assert config.level == LogLevel.WARNING
        assert config.file is None

    def test_lowercase_level_accepted(self):
        """Test that level names are case-insensitive."""
        assert LoggingConfig(level="debug").level == LogLevel.DEBUG

    def test_invalid_level_rejected(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")

    def test_to_logging_level(self):
        assert LogLevel.INFO.to_logging_level() == logging.INFO
        assert LogLevel.CRITICAL.to_logging_level() == logging.CRITICAL


class TestPatternbookConfig:
    """Tests for the root configuration."""

    def test_everything_has_defaults(self):
        """Test that an empty config is valid."""
        config = PatternbookConfig()

        assert config.debug is False
        assert config.display.theme == "monokai"

    def test_to_yaml_dict_round_trips(self):
        """Test that the YAML dict rebuilds an equal config."""
        config = PatternbookConfig(logging={"file": "pb.log"}, debug=True)

        assert PatternbookConfig(**config.to_yaml_dict()) == config

    def test_to_yaml_dict_omits_none(self):
        assert "file" not in PatternbookConfig().to_yaml_dict()["logging"]
