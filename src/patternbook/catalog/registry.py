"""
Pattern Registry.

Manages registration and lookup of catalog entries. Built-in pattern
modules, and any extra modules named in configuration, each expose a
module-level ENTRY that is registered here.
"""

import difflib
import importlib
import logging
from typing import Iterable, Optional

from patternbook.catalog.entry import PatternEntry
from patternbook.models import PatternCategory

logger = logging.getLogger(__name__)

# Modules shipped with the package, in catalog order
BUILTIN_MODULES = [
    "patternbook.patterns.creational.singleton",
    "patternbook.patterns.creational.builder",
    "patternbook.patterns.creational.factory_method",
    "patternbook.patterns.creational.abstract_factory",
    "patternbook.patterns.creational.prototype",
    "patternbook.patterns.structural.adapter",
    "patternbook.patterns.structural.bridge",
    "patternbook.patterns.structural.composite",
    "patternbook.patterns.structural.decorator",
    "patternbook.patterns.structural.facade",
    "patternbook.patterns.structural.flyweight",
    "patternbook.patterns.structural.proxy",
    "patternbook.patterns.behavioral.chain_of_responsibility",
    "patternbook.patterns.behavioral.command",
    "patternbook.patterns.behavioral.iterator",
    "patternbook.patterns.behavioral.mediator",
    "patternbook.patterns.behavioral.memento",
    "patternbook.patterns.behavioral.observer",
    "patternbook.patterns.behavioral.state",
    "patternbook.patterns.behavioral.strategy",
    "patternbook.patterns.behavioral.template_method",
    "patternbook.patterns.behavioral.visitor",
]


class PatternNotFoundError(KeyError):
    """Raised when a pattern name does not match any registered entry.

    Attributes:
        name: The name that was looked up
        suggestions: Close matches among registered names
    """

    def __init__(self, name: str, suggestions: Optional[list[str]] = None) -> None:
        self.name = name
        self.suggestions = suggestions or []
        super().__init__(name)

    def __str__(self) -> str:
        msg = f"Unknown pattern: {self.name!r}"
        if self.suggestions:
            msg = f"{msg} (did you mean: {', '.join(self.suggestions)}?)"
        return msg


class PatternLoadError(Exception):
    """Raised when a pattern module cannot be imported or has no ENTRY."""

    def __init__(self, module: str, reason: str) -> None:
        self.module = module
        super().__init__(f"Cannot load pattern module '{module}': {reason}")


class PatternRegistry:
    """Registry for catalog entries.

    Usage:
        # Register an entry
        registry.register(entry)

        # Look up by slug, display name or alias
        entry = registry.get("chain-of-responsibility")
        entry = registry.get("Virtual Constructor")

        # Browse
        for entry in registry.list_registered(PatternCategory.STRUCTURAL):
            ...
    """

    _instance: Optional["PatternRegistry"] = None
    _entries: dict[str, PatternEntry]

    def __new__(cls) -> "PatternRegistry":
        """Singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._entries = {}
        return cls._instance

    def register(self, entry: PatternEntry) -> None:
        """Register an entry, replacing any entry with the same slug.

        Args:
            entry: Entry to register
        """
        if entry.slug in self._entries and self._entries[entry.slug] is not entry:
            logger.warning("Replacing registered pattern: %s", entry.slug)
        self._entries[entry.slug] = entry
        logger.debug("Registered pattern %s (%s)", entry.slug, entry.category.value)

    def unregister(self, slug: str) -> bool:
        """Unregister an entry.

        Returns:
            True if was registered, False otherwise
        """
        if slug in self._entries:
            del self._entries[slug]
            return True
        return False

    def get(self, name: str) -> PatternEntry:
        """Look up an entry by slug, display name or alias.

        Matching is case-insensitive; spaces and underscores are treated
        like dashes.

        Raises:
            PatternNotFoundError: If nothing matches
        """
        key = name.strip().lower()
        if key in self._entries:
            return self._entries[key]

        normalized = key.replace("_", "-").replace(" ", "-")
        for entry in self._entries.values():
            keys = entry.doc.lookup_keys
            if key in keys or normalized in keys:
                return entry
            if normalized in {k.replace(" ", "-") for k in keys}:
                return entry

        raise PatternNotFoundError(name, self.suggest(name))

    def suggest(self, name: str, limit: int = 3) -> list[str]:
        """Registered slugs that look like `name`."""
        candidates = {}
        for entry in self._entries.values():
            for key in entry.doc.lookup_keys:
                candidates.setdefault(key, entry.slug)
        matches = difflib.get_close_matches(name.lower(), list(candidates), n=limit, cutoff=0.6)
        suggestions: list[str] = []
        for match in matches:
            slug = candidates[match]
            if slug not in suggestions:
                suggestions.append(slug)
        return suggestions

    def is_registered(self, slug: str) -> bool:
        return slug in self._entries

    def list_registered(
        self,
        category: Optional[PatternCategory] = None,
    ) -> list[PatternEntry]:
        """List registered entries sorted by slug.

        Args:
            category: Only include this category (optional)
        """
        entries = sorted(self._entries.values(), key=lambda e: e.slug)
        if category is not None:
            entries = [e for e in entries if e.category == category]
        return entries

    def categories(self) -> dict[PatternCategory, list[PatternEntry]]:
        """Group registered entries by category, in category order."""
        return {category: self.list_registered(category) for category in PatternCategory}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, slug: object) -> bool:
        return slug in self._entries

    @classmethod
    def reset(cls) -> None:
        """Reset the registry (mainly for testing).

        Clears all registrations.
        """
        if cls._instance is not None:
            cls._instance._entries.clear()


# Global registry instance
_registry = PatternRegistry()


def register_pattern(entry: PatternEntry) -> None:
    """Register an entry with the global registry."""
    _registry.register(entry)


def get_pattern(name: str) -> PatternEntry:
    """Look up an entry in the global registry.

    Raises:
        PatternNotFoundError: If nothing matches
    """
    return _registry.get(name)


def get_registry() -> PatternRegistry:
    """Get the global registry instance."""
    return _registry


def load_modules(names: Iterable[str]) -> list[PatternEntry]:
    """Import pattern modules and register their ENTRY.

    Safe to call repeatedly; modules are imported once by Python and
    their entries simply re-registered.

    Args:
        names: Dotted module paths

    Returns:
        Entries that were registered

    Raises:
        PatternLoadError: If a module cannot be imported or lacks ENTRY
    """
    loaded = []
    for name in names:
        try:
            module = importlib.import_module(name)
        except ImportError as e:
            raise PatternLoadError(name, str(e)) from e
        except Exception as e:
            # Syntax errors and invalid docs also surface at import time
            raise PatternLoadError(name, f"{type(e).__name__}: {e}") from e

        entry = getattr(module, "ENTRY", None)
        if not isinstance(entry, PatternEntry):
            raise PatternLoadError(name, "module does not define a PatternEntry named ENTRY")

        if not entry.module:
            entry.module = name
        _registry.register(entry)
        loaded.append(entry)
    return loaded


def load_builtin_patterns() -> list[PatternEntry]:
    """Register every pattern shipped with the package."""
    entries = load_modules(BUILTIN_MODULES)
    logger.debug("Loaded %d built-in patterns", len(entries))
    return entries
