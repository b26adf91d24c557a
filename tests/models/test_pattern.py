"""Tests for pattern documentation models."""

import pytest
from pydantic import ValidationError

from patternbook.models import FaqEntry, PatternCategory, PatternDoc


def _doc(**overrides) -> PatternDoc:
    fields = {
        "name": "Chain of Responsibility",
        "slug": "chain-of-responsibility",
        "category": PatternCategory.BEHAVIORAL,
        "intent": "Pass a request along a chain of handlers.",
    }
    fields.update(overrides)
    return PatternDoc(**fields)


class TestPatternDoc:
    """Tests for PatternDoc model."""

    def test_minimal_doc(self):
        """Test creating a doc with only required fields."""
        doc = _doc()

        assert doc.slug == "chain-of-responsibility"
        assert doc.category == PatternCategory.BEHAVIORAL
        assert doc.participants == []
        assert doc.faq == []
        assert doc.aliases == []

    def test_category_from_string(self):
        """Test that category accepts its string value."""
        assert _doc(category="structural").category == PatternCategory.STRUCTURAL

    @pytest.mark.parametrize("slug", ["Singleton", "factory_method", "-bad", "bad-", "two  words"])
    def test_invalid_slug_rejected(self, slug):
        """Test that non-kebab-case slugs are rejected."""
        with pytest.raises(ValidationError):
            _doc(slug=slug)

    def test_invalid_related_rejected(self):
        """Test that related references must be slugs."""
        with pytest.raises(ValidationError):
            _doc(related=["Template Method"])

    def test_empty_intent_rejected(self):
        """Test that intent is required to be non-empty."""
        with pytest.raises(ValidationError):
            _doc(intent="")

    def test_lookup_keys(self):
        """Test that lookup keys include slug, lowercase name and aliases."""
        doc = _doc(aliases=["CoR"])

        assert doc.lookup_keys == {
            "chain-of-responsibility",
            "chain of responsibility",
            "cor",
        }


class TestFaqEntry:
    """Tests for FaqEntry model."""

    def test_question_and_answer_required(self):
        """Test that both parts must be non-empty."""
        with pytest.raises(ValidationError):
            FaqEntry(question="", answer="yes")
        with pytest.raises(ValidationError):
            FaqEntry(question="Why?", answer="")
