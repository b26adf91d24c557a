"""
Abstract Factory: families of matching widgets.
"""

from abc import ABC, abstractmethod

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


class Button(ABC):
    @abstractmethod
    def paint(self) -> str: ...


class Checkbox(ABC):
    @abstractmethod
    def paint(self) -> str: ...


class WinButton(Button):
    def paint(self) -> str:
        return "Windows button"


class WinCheckbox(Checkbox):
    def paint(self) -> str:
        return "Windows checkbox"


class MacButton(Button):
    def paint(self) -> str:
        return "macOS button"


class MacCheckbox(Checkbox):
    def paint(self) -> str:
        return "macOS checkbox"


class GUIFactory(ABC):
    @abstractmethod
    def create_button(self) -> Button: ...

    @abstractmethod
    def create_checkbox(self) -> Checkbox: ...


class WinFactory(GUIFactory):
    def create_button(self) -> Button:
        return WinButton()

    def create_checkbox(self) -> Checkbox:
        return WinCheckbox()


class MacFactory(GUIFactory):
    def create_button(self) -> Button:
        return MacButton()

    def create_checkbox(self) -> Checkbox:
        return MacCheckbox()


class Application:
    """Client code; sees only the abstract factory and products."""

    def __init__(self, factory: GUIFactory) -> None:
        self.button = factory.create_button()
        self.checkbox = factory.create_checkbox()

    def paint(self) -> list[str]:
        return [self.button.paint(), self.checkbox.paint()]


def demo() -> list[str]:
    lines = []
    for factory in (WinFactory(), MacFactory()):
        lines.append(f"{type(factory).__name__}:")
        lines.extend(f"  {line}" for line in Application(factory).paint())
    return lines


def check_products_come_from_one_family():
    app = Application(MacFactory())
    assert isinstance(app.button, MacButton)
    assert isinstance(app.checkbox, MacCheckbox)


def check_swapping_factory_swaps_family():
    assert Application(WinFactory()).paint() == ["Windows button", "Windows checkbox"]
    assert Application(MacFactory()).paint() == ["macOS button", "macOS checkbox"]


DOC = PatternDoc(
    name="Abstract Factory",
    slug="abstract-factory",
    category=PatternCategory.CREATIONAL,
    intent=(
        "Provide an interface for creating families of related objects without "
        "specifying their concrete classes."
    ),
    motivation=(
        "A user interface must not mix Windows buttons with macOS checkboxes. "
        "Handing the application one factory guarantees every widget it "
        "creates belongs to the same family."
    ),
    participants=[
        "AbstractFactory (GUIFactory): declares creation operations",
        "ConcreteFactory (WinFactory, MacFactory): creates one product family",
        "AbstractProduct (Button, Checkbox): product interfaces",
        "Client (Application): uses only the abstract interfaces",
    ],
    consequences=[
        "Isolates concrete classes from the client",
        "Makes exchanging product families easy",
        "Promotes consistency among products",
        "Adding a new kind of product means changing every factory",
    ],
    related=["factory-method", "prototype", "singleton"],
    aliases=["Kit"],
    faq=[
        FaqEntry(
            question="How do factories usually get implemented?",
            answer="Often as a set of factory methods, one per product kind.",
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[check_products_come_from_one_family, check_swapping_factory_swaps_family],
    module=__name__,
)
