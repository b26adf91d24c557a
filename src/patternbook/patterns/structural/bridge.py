"""
Bridge: shapes decoupled from the drawing API that renders them.
"""

from abc import ABC, abstractmethod

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


class DrawingAPI(ABC):
    """Implementor."""

    @abstractmethod
    def draw_circle(self, x: float, y: float, radius: float) -> str: ...


class DrawingAPI1(DrawingAPI):
    def draw_circle(self, x: float, y: float, radius: float) -> str:
        return f"API1.circle at {x}:{y} radius {radius}"


class DrawingAPI2(DrawingAPI):
    def draw_circle(self, x: float, y: float, radius: float) -> str:
        return f"API2.circle at {x}:{y} radius {radius}"


class Shape(ABC):
    """Abstraction; holds a reference to its implementor."""

    def __init__(self, drawing_api: DrawingAPI) -> None:
        self.drawing_api = drawing_api

    @abstractmethod
    def draw(self) -> str: ...

    @abstractmethod
    def resize_by_percentage(self, percent: float) -> None: ...


class Circle(Shape):
    def __init__(self, x: float, y: float, radius: float, drawing_api: DrawingAPI) -> None:
        super().__init__(drawing_api)
        self.x = x
        self.y = y
        self.radius = radius

    def draw(self) -> str:
        return self.drawing_api.draw_circle(self.x, self.y, self.radius)

    def resize_by_percentage(self, percent: float) -> None:
        self.radius *= 1 + percent / 100


def demo() -> list[str]:
    shapes = [Circle(1, 2, 3, DrawingAPI1()), Circle(5, 7, 11, DrawingAPI2())]
    return [shape.draw() for shape in shapes]


def check_output_names_the_api():
    assert Circle(1, 2, 3, DrawingAPI1()).draw() == "API1.circle at 1:2 radius 3"
    assert Circle(5, 7, 11, DrawingAPI2()).draw() == "API2.circle at 5:7 radius 11"


def check_abstraction_varies_independently():
    circle = Circle(0, 0, 10, DrawingAPI1())
    circle.resize_by_percentage(50)
    assert circle.radius == 15
    circle.drawing_api = DrawingAPI2()
    assert circle.draw().startswith("API2.")


DOC = PatternDoc(
    name="Bridge",
    slug="bridge",
    category=PatternCategory.STRUCTURAL,
    intent="Decouple an abstraction from its implementation so that the two can vary independently.",
    motivation=(
        "Circles can be drawn through different rendering APIs. Subclassing "
        "every shape for every API multiplies classes. Instead each Shape holds "
        "a DrawingAPI and delegates the low-level drawing to it."
    ),
    participants=[
        "Abstraction (Shape): defines the high-level interface and keeps an implementor",
        "RefinedAbstraction (Circle): extends the abstraction",
        "Implementor (DrawingAPI): low-level operations",
        "ConcreteImplementor (DrawingAPI1, DrawingAPI2): implements them",
    ],
    consequences=[
        "Implementation can be chosen or swapped at run time",
        "Abstraction and implementation hierarchies extend independently",
        "Hides implementation details from clients",
    ],
    related=["adapter", "abstract-factory"],
    aliases=["Handle/Body"],
    faq=[
        FaqEntry(
            question="Isn't this just an adapter?",
            answer=(
                "The structure is similar. An adapter makes existing classes "
                "fit after the fact. A bridge is designed up front so both "
                "sides can evolve separately."
            ),
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[check_output_names_the_api, check_abstraction_varies_independently],
    module=__name__,
)
