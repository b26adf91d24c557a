"""
Visitor: computing areas and XML exports over a set of shapes.
"""

import math
from abc import ABC, abstractmethod

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


class Visitor(ABC):
    @abstractmethod
    def visit_dot(self, dot: "Dot"): ...

    @abstractmethod
    def visit_circle(self, circle: "CircleShape"): ...

    @abstractmethod
    def visit_rectangle(self, rectangle: "Rectangle"): ...


class Shape(ABC):
    @abstractmethod
    def accept(self, visitor: Visitor): ...


class Dot(Shape):
    def __init__(self, x: int, y: int) -> None:
        self.x, self.y = x, y

    def accept(self, visitor: Visitor):
        return visitor.visit_dot(self)


class CircleShape(Shape):
    def __init__(self, x: int, y: int, radius: float) -> None:
        self.x, self.y, self.radius = x, y, radius

    def accept(self, visitor: Visitor):
        return visitor.visit_circle(self)


class Rectangle(Shape):
    def __init__(self, x: int, y: int, width: float, height: float) -> None:
        self.x, self.y, self.width, self.height = x, y, width, height

    def accept(self, visitor: Visitor):
        return visitor.visit_rectangle(self)


class AreaVisitor(Visitor):
    def visit_dot(self, dot: Dot) -> float:
        return 0.0

    def visit_circle(self, circle: CircleShape) -> float:
        return math.pi * circle.radius**2

    def visit_rectangle(self, rectangle: Rectangle) -> float:
        return rectangle.width * rectangle.height


class XMLExportVisitor(Visitor):
    def visit_dot(self, dot: Dot) -> str:
        return f'<dot x="{dot.x}" y="{dot.y}"/>'

    def visit_circle(self, circle: CircleShape) -> str:
        return f'<circle x="{circle.x}" y="{circle.y}" radius="{circle.radius}"/>'

    def visit_rectangle(self, rectangle: Rectangle) -> str:
        return (
            f'<rectangle x="{rectangle.x}" y="{rectangle.y}" '
            f'width="{rectangle.width}" height="{rectangle.height}"/>'
        )


def demo() -> list[str]:
    shapes = [Dot(1, 2), CircleShape(0, 0, 2), Rectangle(3, 4, 5, 6)]
    area = AreaVisitor()
    export = XMLExportVisitor()
    lines = [shape.accept(export) for shape in shapes]
    lines.append(f"Total area: {sum(shape.accept(area) for shape in shapes):.2f}")
    return lines


def check_double_dispatch_selects_element_method():
    export = XMLExportVisitor()
    assert Dot(1, 1).accept(export).startswith("<dot")
    assert CircleShape(0, 0, 1).accept(export).startswith("<circle")
    assert Rectangle(0, 0, 1, 1).accept(export).startswith("<rectangle")


def check_new_operation_without_changing_elements():
    area = AreaVisitor()
    assert Rectangle(0, 0, 2, 3).accept(area) == 6
    assert math.isclose(CircleShape(0, 0, 1).accept(area), math.pi)


DOC = PatternDoc(
    name="Visitor",
    slug="visitor",
    category=PatternCategory.BEHAVIORAL,
    intent=(
        "Represent an operation to be performed on the elements of an object "
        "structure, letting you define new operations without changing the "
        "classes of the elements."
    ),
    motivation=(
        "Shapes need area calculation today and XML export tomorrow. Putting "
        "each operation in every shape class spreads unrelated code around. "
        "A visitor collects one operation for all shape kinds in one class."
    ),
    participants=[
        "Visitor: declares a visit method per element class",
        "ConcreteVisitor (AreaVisitor, XMLExportVisitor): implements one operation",
        "Element (Shape): defines accept(visitor)",
        "ConcreteElement (Dot, CircleShape, Rectangle): calls the matching visit method",
    ],
    consequences=[
        "Adding operations is easy",
        "Related behavior is gathered in one visitor",
        "Adding element classes is hard because every visitor must change",
        "Elements may need to expose state the visitor reads",
    ],
    related=["composite", "iterator"],
    faq=[
        FaqEntry(
            question="What is double dispatch?",
            answer=(
                "The method that runs depends on two types: the element (chosen "
                "by accept) and the visitor (chosen by the visit call inside it)."
            ),
        ),
        FaqEntry(
            question="Could functools.singledispatch replace this?",
            answer=(
                "For many Python uses, yes. It dispatches on the element type "
                "without accept methods. The classic form keeps both roles explicit."
            ),
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[check_double_dispatch_selects_element_method, check_new_operation_without_changing_elements],
    module=__name__,
)
