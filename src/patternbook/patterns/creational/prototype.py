"""
Prototype: creating shapes by copying registered prototypes.
"""

import copy
from dataclasses import dataclass, field

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


@dataclass
class Shape:
    x: int = 0
    y: int = 0
    color: str = "black"
    tags: list[str] = field(default_factory=list)

    def clone(self) -> "Shape":
        return copy.deepcopy(self)


@dataclass
class CircleShape(Shape):
    radius: int = 1


@dataclass
class RectangleShape(Shape):
    width: int = 1
    height: int = 1


class PrototypeRegistry:
    def __init__(self) -> None:
        self._prototypes: dict[str, Shape] = {}

    def add(self, key: str, prototype: Shape) -> None:
        self._prototypes[key] = prototype

    def create(self, key: str) -> Shape:
        """Return a copy of the prototype registered under `key`.

        Raises:
            KeyError: If nothing is registered under `key`
        """
        return self._prototypes[key].clone()


def demo() -> list[str]:
    registry = PrototypeRegistry()
    registry.add("big-red-circle", CircleShape(color="red", radius=10, tags=["big"]))
    registry.add("square", RectangleShape(width=5, height=5))

    first = registry.create("big-red-circle")
    second = registry.create("big-red-circle")
    second.x = 20
    return [
        f"first:  {first}",
        f"second: {second}",
        f"Distinct objects: {first is not second}",
        f"square: {registry.create('square')}",
    ]


def check_clone_is_distinct_with_equal_fields():
    original = CircleShape(x=1, y=2, color="blue", radius=7)
    clone = original.clone()
    assert clone is not original
    assert clone == original


def check_clone_is_deep():
    original = RectangleShape(tags=["a"])
    clone = original.clone()
    clone.tags.append("b")
    assert original.tags == ["a"]


def check_registry_returns_copies():
    registry = PrototypeRegistry()
    registry.add("dot", CircleShape(radius=1))
    assert registry.create("dot") is not registry.create("dot")


DOC = PatternDoc(
    name="Prototype",
    slug="prototype",
    category=PatternCategory.CREATIONAL,
    intent=(
        "Specify the kinds of objects to create using a prototypical instance, "
        "and create new objects by copying this prototype."
    ),
    motivation=(
        "When configuring an object is more work than copying one, keep "
        "preconfigured instances around and clone them on demand."
    ),
    participants=[
        "Prototype (Shape): declares clone()",
        "ConcretePrototype (CircleShape, RectangleShape): implements cloning",
        "Client: asks a prototype to clone itself",
        "Registry (PrototypeRegistry): optional catalog of prototypes by key",
    ],
    consequences=[
        "Adds and removes products at run time",
        "Reduces subclassing compared to factory hierarchies",
        "Deep copies of object graphs with cycles or external resources can be tricky",
    ],
    related=["abstract-factory", "composite", "decorator"],
    faq=[
        FaqEntry(
            question="Shallow or deep copy?",
            answer=(
                "Deep, unless the prototype's mutable parts are meant to be "
                "shared. copy.deepcopy keeps a clone's list of tags independent."
            ),
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[
        check_clone_is_distinct_with_equal_fields,
        check_clone_is_deep,
        check_registry_returns_copies,
    ],
    module=__name__,
)
