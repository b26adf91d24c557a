"""
Pattern documentation models.

A PatternDoc is the prose half of a catalog entry: intent, motivation,
participants, consequences and the FAQ-style commentary that goes with
each write-up.
"""

import re

from pydantic import BaseModel, Field, field_validator

from patternbook.models.base import PatternCategory

SLUG_PATTERN = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]+)*$")


class FaqEntry(BaseModel):
    """A single question and answer attached to a pattern.

    Attributes:
        question: The question as a reader would ask it
        answer: Short answer
    """

    question: str = Field(..., min_length=1, description="Reader question")
    answer: str = Field(..., min_length=1, description="Answer to the question")


class PatternDoc(BaseModel):
    """Descriptive record for one design pattern.

    Attributes:
        name: Display name (e.g. "Chain of Responsibility")
        slug: Lowercase kebab-case identifier used for lookup
        category: Creational, structural or behavioral
        intent: One-sentence statement of what the pattern does
        motivation: Paragraph describing the problem it solves
        participants: Roles taking part in the pattern
        consequences: Trade-offs of applying the pattern
        related: Slugs of related patterns
        faq: Frequently asked questions
        aliases: Alternative names the pattern is known by
    """

    name: str = Field(..., min_length=1, description="Display name")
    slug: str = Field(
        ...,
        description="Lookup identifier",
        examples=["singleton", "chain-of-responsibility"],
    )
    category: PatternCategory = Field(..., description="Pattern category")
    intent: str = Field(..., min_length=1, description="Intent statement")
    motivation: str = Field(default="", description="Problem being solved")
    participants: list[str] = Field(default_factory=list, description="Roles")
    consequences: list[str] = Field(default_factory=list, description="Trade-offs")
    related: list[str] = Field(default_factory=list, description="Related slugs")
    faq: list[FaqEntry] = Field(default_factory=list, description="FAQ")
    aliases: list[str] = Field(default_factory=list, description="Other names")

    @field_validator("slug")
    @classmethod
    def valid_slug(cls, v: str) -> str:
        """Validate that slug is lowercase kebab-case."""
        if not SLUG_PATTERN.match(v):
            raise ValueError(f"'{v}' is not a valid slug (expected lowercase kebab-case)")
        return v

    @field_validator("related")
    @classmethod
    def related_are_slugs(cls, v: list[str]) -> list[str]:
        """Validate that related references are slugs."""
        for slug in v:
            if not SLUG_PATTERN.match(slug):
                raise ValueError(f"Related reference '{slug}' is not a valid slug")
        return v

    @property
    def lookup_keys(self) -> set[str]:
        """All lowercase names this pattern can be found by."""
        keys = {self.slug, self.name.lower()}
        keys.update(alias.lower() for alias in self.aliases)
        return keys
