"""
Factory Method: documents decide which pages they are made of.
"""

from abc import ABC, abstractmethod

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


class Page(ABC):
    title = "Page"

    def __repr__(self) -> str:
        return self.title


class SkillsPage(Page):
    title = "Skills"


class EducationPage(Page):
    title = "Education"


class ExperiencePage(Page):
    title = "Experience"


class IntroductionPage(Page):
    title = "Introduction"


class ResultsPage(Page):
    title = "Results"


class ConclusionPage(Page):
    title = "Conclusion"


class Document(ABC):
    def __init__(self) -> None:
        self.pages = self.create_pages()

    @abstractmethod
    def create_pages(self) -> list[Page]:
        """Factory method."""

    def outline(self) -> str:
        return f"{type(self).__name__}: " + ", ".join(page.title for page in self.pages)


class Resume(Document):
    def create_pages(self) -> list[Page]:
        return [SkillsPage(), EducationPage(), ExperiencePage()]


class Report(Document):
    def create_pages(self) -> list[Page]:
        return [IntroductionPage(), ResultsPage(), ConclusionPage()]


def demo() -> list[str]:
    return [document.outline() for document in (Resume(), Report())]


def check_subclass_chooses_products():
    assert [type(p) for p in Resume().pages] == [SkillsPage, EducationPage, ExperiencePage]
    assert isinstance(Report().pages[0], IntroductionPage)


def check_each_document_gets_fresh_pages():
    first, second = Resume(), Resume()
    assert first.pages[0] is not second.pages[0]


DOC = PatternDoc(
    name="Factory Method",
    slug="factory-method",
    category=PatternCategory.CREATIONAL,
    intent=(
        "Define an interface for creating an object, but let subclasses decide "
        "which class to instantiate."
    ),
    motivation=(
        "A Document knows it is made of pages but not which ones. Deferring "
        "the choice to create_pages() lets Resume and Report share the "
        "Document machinery while producing different pages."
    ),
    participants=[
        "Product (Page): interface of objects the factory method creates",
        "ConcreteProduct (SkillsPage, ResultsPage, ...): implements Product",
        "Creator (Document): declares the factory method",
        "ConcreteCreator (Resume, Report): overrides the factory method",
    ],
    consequences=[
        "Removes the need to bind application-specific classes into shared code",
        "Requires a Creator subclass per product family",
    ],
    related=["abstract-factory", "template-method", "prototype"],
    aliases=["Virtual Constructor"],
    faq=[
        FaqEntry(
            question="Is a function returning objects a factory method?",
            answer=(
                "That is a simple factory. The Factory Method pattern specifically "
                "relies on subclasses overriding the creation step."
            ),
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[check_subclass_chooses_products, check_each_document_gets_fresh_pages],
    module=__name__,
)
