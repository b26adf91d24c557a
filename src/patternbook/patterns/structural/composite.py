"""
Composite: drawings made of shapes and groups of shapes.
"""

from abc import ABC, abstractmethod

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


class Graphic(ABC):
    @abstractmethod
    def draw(self, depth: int = 0) -> list[str]: ...

    def count(self) -> int:
        return 1


class Line(Graphic):
    def draw(self, depth: int = 0) -> list[str]:
        return ["  " * depth + "Line"]


class Text(Graphic):
    def __init__(self, text: str) -> None:
        self.text = text

    def draw(self, depth: int = 0) -> list[str]:
        return ["  " * depth + f"Text({self.text!r})"]


class Picture(Graphic):
    def __init__(self, name: str) -> None:
        self.name = name
        self.children: list[Graphic] = []

    def add(self, graphic: Graphic) -> "Picture":
        self.children.append(graphic)
        return self

    def remove(self, graphic: Graphic) -> None:
        self.children.remove(graphic)

    def draw(self, depth: int = 0) -> list[str]:
        lines = ["  " * depth + f"Picture {self.name}"]
        for child in self.children:
            lines.extend(child.draw(depth + 1))
        return lines

    def count(self) -> int:
        return sum(child.count() for child in self.children)


def demo() -> list[str]:
    logo = Picture("logo").add(Line()).add(Text("ACME"))
    page = Picture("page").add(Text("Title")).add(logo).add(Line())
    return page.draw() + [f"Leaf count: {page.count()}"]


def check_leaf_and_composite_share_interface():
    for graphic in (Line(), Picture("empty")):
        assert isinstance(graphic.draw(), list)


def check_operations_recurse_through_tree():
    inner = Picture("inner").add(Line()).add(Line())
    outer = Picture("outer").add(inner).add(Text("x"))
    assert outer.count() == 3
    assert outer.draw()[2] == "    Line"


DOC = PatternDoc(
    name="Composite",
    slug="composite",
    category=PatternCategory.STRUCTURAL,
    intent=(
        "Compose objects into tree structures to represent part-whole hierarchies, "
        "letting clients treat individual objects and compositions uniformly."
    ),
    motivation=(
        "A picture contains lines, text and other pictures. Code that draws "
        "or counts graphics should not care which of those it holds."
    ),
    participants=[
        "Component (Graphic): interface for leaves and composites",
        "Leaf (Line, Text): has no children",
        "Composite (Picture): stores children and forwards operations to them",
    ],
    consequences=[
        "Clients stay simple; one code path handles leaves and groups",
        "New component kinds slot in easily",
        "Harder to restrict which components a composite may contain",
    ],
    related=["decorator", "iterator", "visitor", "flyweight"],
    faq=[
        FaqEntry(
            question="Should add() live on the leaf too?",
            answer=(
                "GoF discusses both options. Keeping it on the composite only, "
                "as here, is safer. Putting it on Component is more uniform."
            ),
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[check_leaf_and_composite_share_interface, check_operations_recurse_through_tree],
    module=__name__,
)
