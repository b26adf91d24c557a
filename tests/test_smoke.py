"""
Smoke tests to verify the package and test infrastructure are wired up.
"""

from pathlib import Path

import patternbook


class TestInfrastructure:
    """Tests to verify the testing infrastructure itself."""

    def test_project_root_fixture(self, project_root: Path):
        """Verify project root fixture returns correct path."""
        assert (project_root / "pyproject.toml").exists()

    def test_workdir_is_empty(self, workdir: Path):
        """Verify the scratch directory starts empty."""
        assert list(workdir.iterdir()) == []


class TestPublicApi:
    """Tests for the top-level package exports."""

    def test_version(self):
        assert patternbook.__version__

    def test_quickstart(self, registry):
        """Verify the example in the package docstring works."""
        patternbook.load_builtin_patterns()
        result = patternbook.run_demo(patternbook.get_pattern("decorator"))

        assert "Drawing a border around the window" in result.lines

    def test_module_entry_point(self):
        import patternbook.__main__ as entry

        assert entry.main.name == "main"
