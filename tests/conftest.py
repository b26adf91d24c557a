"""
Patternbook Test Configuration and Fixtures

All fixtures are deterministic and isolated from the developer's
environment (.env files, PATTERNBOOK_* variables, config files in cwd).

Fixture Categories:
- Paths: project root and a scratch working directory
- Environment: config/env reset between tests
- Catalog: a registry populated with the built-in patterns
- Sample entries: small hand-built PatternEntry objects
"""

import logging
from pathlib import Path

import pytest

from patternbook.catalog import PatternEntry, PatternRegistry, get_registry, load_builtin_patterns
from patternbook.config import ENV_VAR_OVERRIDES, CONFIG_ENV_VAR, reset_config
from patternbook.models import FaqEntry, PatternCategory, PatternDoc

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from an empty directory (no config files, no .env)."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


# =============================================================================
# Environment Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Reset global config and strip PATTERNBOOK_* variables.

    Also marks .env as already loaded so a developer's .env file never
    leaks into test expectations.
    """
    import patternbook.config.environment as env_module

    reset_config()
    for var in [CONFIG_ENV_VAR, *ENV_VAR_OVERRIDES]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(env_module, "_dotenv_loaded", True)

    yield

    reset_config()


@pytest.fixture(autouse=True)
def isolated_package_logger():
    """Undo level and file handler changes the CLI makes to the package logger."""
    package_logger = logging.getLogger("patternbook")
    level = package_logger.level
    handlers = list(package_logger.handlers)

    yield package_logger

    for handler in list(package_logger.handlers):
        if handler not in handlers:
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(level)


# =============================================================================
# Catalog Fixtures
# =============================================================================


@pytest.fixture
def empty_registry() -> PatternRegistry:
    """The global registry, cleared before and restored after the test."""
    PatternRegistry.reset()
    yield get_registry()
    PatternRegistry.reset()
    load_builtin_patterns()


@pytest.fixture
def registry() -> PatternRegistry:
    """The global registry holding exactly the built-in patterns."""
    PatternRegistry.reset()
    load_builtin_patterns()
    return get_registry()


# =============================================================================
# Sample Entries
# =============================================================================


def check_passes():
    assert 1 + 1 == 2


def check_fails():
    raise AssertionError("wrong answer")


def check_errors():
    raise RuntimeError("boom")


@pytest.fixture
def sample_doc() -> PatternDoc:
    """A minimal but complete PatternDoc."""
    return PatternDoc(
        name="Null Object",
        slug="null-object",
        category=PatternCategory.BEHAVIORAL,
        intent="Provide a do-nothing stand-in for an absent collaborator.",
        aliases=["Stub"],
        faq=[FaqEntry(question="Why?", answer="To avoid None checks.")],
    )


@pytest.fixture
def sample_entry(sample_doc: PatternDoc) -> PatternEntry:
    """An entry with one passing, one failing and one erroring check."""
    return PatternEntry(
        doc=sample_doc,
        demo=lambda: ["nothing happened"],
        checks=[check_passes, check_fails, check_errors],
    )
