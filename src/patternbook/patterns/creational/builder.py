"""
Builder: constructing houses step by step.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


@dataclass
class House:
    foundation: str = ""
    structure: str = ""
    roof: str = ""
    interior: str = ""

    def describe(self) -> str:
        return (
            f"House with {self.foundation} foundation, {self.structure} structure, "
            f"{self.roof} roof and {self.interior} interior"
        )


class HouseBuilder(ABC):
    def __init__(self) -> None:
        self.house = House()

    @abstractmethod
    def build_foundation(self) -> "HouseBuilder": ...

    @abstractmethod
    def build_structure(self) -> "HouseBuilder": ...

    @abstractmethod
    def build_roof(self) -> "HouseBuilder": ...

    @abstractmethod
    def build_interior(self) -> "HouseBuilder": ...

    def get_house(self) -> House:
        return self.house


class ConcreteHouseBuilder(HouseBuilder):
    def build_foundation(self) -> "HouseBuilder":
        self.house.foundation = "concrete"
        return self

    def build_structure(self) -> "HouseBuilder":
        self.house.structure = "brick"
        return self

    def build_roof(self) -> "HouseBuilder":
        self.house.roof = "tiled"
        return self

    def build_interior(self) -> "HouseBuilder":
        self.house.interior = "plastered"
        return self


class WoodenHouseBuilder(HouseBuilder):
    def build_foundation(self) -> "HouseBuilder":
        self.house.foundation = "stone"
        return self

    def build_structure(self) -> "HouseBuilder":
        self.house.structure = "timber"
        return self

    def build_roof(self) -> "HouseBuilder":
        self.house.roof = "shingled"
        return self

    def build_interior(self) -> "HouseBuilder":
        self.house.interior = "wood-panelled"
        return self


class HouseDirector:
    """Knows the order of construction steps, not their details."""

    def __init__(self, builder: HouseBuilder) -> None:
        self.builder = builder

    def construct(self) -> House:
        (
            self.builder.build_foundation()
            .build_structure()
            .build_roof()
            .build_interior()
        )
        return self.builder.get_house()


def demo() -> list[str]:
    lines = []
    for builder in (ConcreteHouseBuilder(), WoodenHouseBuilder()):
        house = HouseDirector(builder).construct()
        lines.append(f"{type(builder).__name__}: {house.describe()}")
    return lines


def check_director_runs_every_step():
    house = HouseDirector(ConcreteHouseBuilder()).construct()
    assert house == House("concrete", "brick", "tiled", "plastered")


def check_same_process_different_products():
    concrete = HouseDirector(ConcreteHouseBuilder()).construct()
    wooden = HouseDirector(WoodenHouseBuilder()).construct()
    assert concrete != wooden
    assert wooden.structure == "timber"


def check_partial_build_without_director():
    house = WoodenHouseBuilder().build_foundation().build_roof().get_house()
    assert house.foundation == "stone" and house.roof == "shingled"
    assert house.structure == "" and house.interior == ""


DOC = PatternDoc(
    name="Builder",
    slug="builder",
    category=PatternCategory.CREATIONAL,
    intent=(
        "Separate the construction of a complex object from its representation "
        "so the same construction process can create different representations."
    ),
    motivation=(
        "A house is assembled from a foundation, a structure, a roof and an "
        "interior. The order is always the same, but the materials differ. "
        "The Director fixes the order and each Builder supplies the materials."
    ),
    participants=[
        "Builder (HouseBuilder): abstract interface for creating the parts",
        "ConcreteBuilder (ConcreteHouseBuilder, WoodenHouseBuilder): builds and assembles parts",
        "Director (HouseDirector): runs the construction steps in order",
        "Product (House): the object under construction",
    ],
    consequences=[
        "Varies a product's internal representation without touching the Director",
        "Isolates construction code from representation code",
        "Gives fine control over the construction process, one step at a time",
    ],
    related=["abstract-factory", "composite"],
    faq=[
        FaqEntry(
            question="Do I always need a Director?",
            answer=(
                "No. Fluent builders are often driven directly by the client. "
                "A Director pays off when several clients repeat the same recipe."
            ),
        ),
        FaqEntry(
            question="How is this different from Abstract Factory?",
            answer=(
                "Abstract Factory returns a finished product in one call. Builder "
                "assembles one product over several steps and returns it at the end."
            ),
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[
        check_director_runs_every_step,
        check_same_process_different_products,
        check_partial_build_without_director,
    ],
    module=__name__,
)
