"""Tests for the pattern registry."""

import sys
import types

import pytest

from patternbook.catalog import (
    BUILTIN_MODULES,
    PatternEntry,
    PatternLoadError,
    PatternNotFoundError,
    PatternRegistry,
    get_pattern,
    get_registry,
    load_builtin_patterns,
    load_modules,
    register_pattern,
)
from patternbook.models import PatternCategory


class TestPatternRegistry:
    """Tests for PatternRegistry class."""

    def test_is_singleton(self):
        """Test that every construction returns the global registry."""
        assert PatternRegistry() is PatternRegistry()
        assert PatternRegistry() is get_registry()

    def test_register_and_get(self, empty_registry, sample_entry):
        empty_registry.register(sample_entry)

        assert empty_registry.get("null-object") is sample_entry
        assert empty_registry.is_registered("null-object")
        assert "null-object" in empty_registry
        assert len(empty_registry) == 1

    @pytest.mark.parametrize("name", ["NULL-OBJECT", "Null Object", "null_object", "stub", " Stub "])
    def test_get_by_name_alias_and_case(self, empty_registry, sample_entry, name):
        """Test lookup by display name, alias, and case/separator variants."""
        empty_registry.register(sample_entry)

        assert empty_registry.get(name) is sample_entry

    def test_unknown_name_raises_with_suggestions(self, empty_registry, sample_entry):
        empty_registry.register(sample_entry)

        with pytest.raises(PatternNotFoundError) as exc_info:
            empty_registry.get("null-objet")

        err = exc_info.value
        assert isinstance(err, KeyError)
        assert err.name == "null-objet"
        assert err.suggestions == ["null-object"]
        assert "did you mean: null-object" in str(err)

    def test_unknown_name_without_close_match(self, empty_registry, sample_entry):
        empty_registry.register(sample_entry)

        with pytest.raises(PatternNotFoundError) as exc_info:
            empty_registry.get("zzzzzz")

        assert exc_info.value.suggestions == []
        assert "did you mean" not in str(exc_info.value)

    def test_reregistering_replaces_and_warns(self, empty_registry, sample_entry, caplog):
        replacement = PatternEntry(doc=sample_entry.doc, demo=lambda: [])
        empty_registry.register(sample_entry)

        with caplog.at_level("WARNING", logger="patternbook.catalog.registry"):
            empty_registry.register(replacement)

        assert empty_registry.get("null-object") is replacement
        assert "Replacing registered pattern" in caplog.text

    def test_reregistering_same_entry_is_silent(self, empty_registry, sample_entry, caplog):
        empty_registry.register(sample_entry)

        with caplog.at_level("WARNING", logger="patternbook.catalog.registry"):
            empty_registry.register(sample_entry)

        assert caplog.text == ""

    def test_unregister(self, empty_registry, sample_entry):
        empty_registry.register(sample_entry)

        assert empty_registry.unregister("null-object") is True
        assert empty_registry.unregister("null-object") is False
        assert not empty_registry.is_registered("null-object")

    def test_list_registered_sorted_and_filtered(self, registry):
        entries = registry.list_registered()
        slugs = [e.slug for e in entries]

        assert slugs == sorted(slugs)
        structural = registry.list_registered(PatternCategory.STRUCTURAL)
        assert structural
        assert all(e.category == PatternCategory.STRUCTURAL for e in structural)

    def test_categories_groups_in_category_order(self, registry):
        groups = registry.categories()

        assert list(groups) == list(PatternCategory)
        assert "singleton" in [e.slug for e in groups[PatternCategory.CREATIONAL]]
        assert "observer" in [e.slug for e in groups[PatternCategory.BEHAVIORAL]]

    def test_reset_clears_entries(self, registry):
        PatternRegistry.reset()

        assert len(registry) == 0
        load_builtin_patterns()


class TestModuleLoading:
    """Tests for load_modules and load_builtin_patterns."""

    def test_builtin_patterns_all_register(self, empty_registry):
        entries = load_builtin_patterns()

        assert len(entries) == len(BUILTIN_MODULES)
        assert len(empty_registry) == len(BUILTIN_MODULES)

    def test_loading_twice_is_idempotent(self, empty_registry):
        load_builtin_patterns()
        load_builtin_patterns()

        assert len(empty_registry) == len(BUILTIN_MODULES)

    def test_missing_module_raises_load_error(self, empty_registry):
        with pytest.raises(PatternLoadError) as exc_info:
            load_modules(["patternbook.patterns.does_not_exist"])

        assert exc_info.value.module == "patternbook.patterns.does_not_exist"

    def test_module_without_entry_raises_load_error(self, empty_registry, monkeypatch):
        monkeypatch.setitem(sys.modules, "pb_test_no_entry", types.ModuleType("pb_test_no_entry"))

        with pytest.raises(PatternLoadError, match="ENTRY"):
            load_modules(["pb_test_no_entry"])

    def test_extra_module_registered_with_module_name(self, empty_registry, sample_entry, monkeypatch):
        module = types.ModuleType("pb_test_extra")
        module.ENTRY = sample_entry
        monkeypatch.setitem(sys.modules, "pb_test_extra", module)

        loaded = load_modules(["pb_test_extra"])

        assert loaded == [sample_entry]
        assert get_pattern("null-object").module == "pb_test_extra"

    def test_syntax_error_raises_load_error(self, empty_registry, tmp_path, monkeypatch):
        """A module that does not compile is reported by name."""
        (tmp_path / "pb_test_syntax.py").write_text("def oops(:\n    pass\n")
        monkeypatch.syspath_prepend(str(tmp_path))

        with pytest.raises(PatternLoadError) as exc_info:
            load_modules(["pb_test_syntax"])

        assert exc_info.value.module == "pb_test_syntax"
        assert "SyntaxError" in str(exc_info.value)

    def test_invalid_doc_raises_load_error(self, empty_registry, tmp_path, monkeypatch):
        """A PatternDoc that fails validation at import time is reported by name."""
        (tmp_path / "pb_test_bad_doc.py").write_text(
            "from patternbook.models import PatternCategory, PatternDoc\n"
            "DOC = PatternDoc(name=\"Bad\", slug=\"Not A Slug\",\n"
            "                 category=PatternCategory.BEHAVIORAL, intent=\"x\")\n"
        )
        monkeypatch.syspath_prepend(str(tmp_path))

        with pytest.raises(PatternLoadError) as exc_info:
            load_modules(["pb_test_bad_doc"])

        assert exc_info.value.module == "pb_test_bad_doc"
        assert "ValidationError" in str(exc_info.value)
        assert len(empty_registry) == 0


class TestModuleHelpers:
    """Tests for the module-level convenience functions."""

    def test_register_pattern_and_get_pattern(self, empty_registry, sample_entry):
        register_pattern(sample_entry)

        assert get_pattern("stub") is sample_entry

    def test_get_pattern_unknown(self, empty_registry):
        with pytest.raises(KeyError):
            get_pattern("anything")
