"""
Decorator: adding borders and scrollbars to windows.
"""

from abc import ABC, abstractmethod

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


class Window(ABC):
    @abstractmethod
    def draw(self) -> list[str]: ...


class SimpleWindow(Window):
    def draw(self) -> list[str]:
        return ["Drawing a simple window"]


class WindowDecorator(Window):
    def __init__(self, window: Window) -> None:
        self.window = window

    def draw(self) -> list[str]:
        return self.window.draw()


class BorderedWindowDecorator(WindowDecorator):
    def draw(self) -> list[str]:
        return super().draw() + [self.draw_border()]

    def draw_border(self) -> str:
        return "Drawing a border around the window"


class ScrollableWindowDecorator(WindowDecorator):
    def draw(self) -> list[str]:
        return super().draw() + ["Drawing a scrollbar"]


def demo() -> list[str]:
    simple_window = SimpleWindow()
    decorated_window = BorderedWindowDecorator(simple_window)
    return (
        ["Simple Window:"]
        + simple_window.draw()
        + ["", "Decorated Window:"]
        + decorated_window.draw()
        + ["", "Scrollable Bordered Window:"]
        + ScrollableWindowDecorator(decorated_window).draw()
    )


def check_decoration_adds_after_wrapped_call():
    assert BorderedWindowDecorator(SimpleWindow()).draw() == [
        "Drawing a simple window",
        "Drawing a border around the window",
    ]


def check_decorators_stack_in_order():
    window = ScrollableWindowDecorator(BorderedWindowDecorator(SimpleWindow()))
    assert window.draw()[1:] == ["Drawing a border around the window", "Drawing a scrollbar"]


def check_wrapped_window_is_unchanged():
    simple = SimpleWindow()
    BorderedWindowDecorator(simple).draw()
    assert simple.draw() == ["Drawing a simple window"]


DOC = PatternDoc(
    name="Decorator",
    slug="decorator",
    category=PatternCategory.STRUCTURAL,
    intent=(
        "Attach additional responsibilities to an object dynamically, as a "
        "flexible alternative to subclassing."
    ),
    motivation=(
        "Some windows need a border, some a scrollbar, some both. A subclass "
        "per combination does not scale. Decorators share the Window "
        "interface, wrap another window and add their own drawing after it."
    ),
    participants=[
        "Component (Window): interface for objects that can be decorated",
        "ConcreteComponent (SimpleWindow): the object being decorated",
        "Decorator (WindowDecorator): holds a component and forwards to it",
        "ConcreteDecorator (BorderedWindowDecorator, ScrollableWindowDecorator): add behavior",
    ],
    consequences=[
        "More flexible than static inheritance; responsibilities can be mixed at run time",
        "Avoids feature-laden classes high up the hierarchy",
        "A decorator and its component are not identical objects",
        "Many small look-alike objects can be harder to debug",
    ],
    related=["adapter", "composite", "strategy", "proxy"],
    faq=[
        FaqEntry(
            question="Is this the same as a Python @decorator?",
            answer=(
                "Related but not the same. Function decorators wrap callables at "
                "definition time. The pattern wraps objects at run time behind "
                "a shared interface."
            ),
        ),
        FaqEntry(
            question="Does decoration order matter?",
            answer="Yes. Each decorator adds its output after the window it wraps.",
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[
        check_decoration_adds_after_wrapped_call,
        check_decorators_stack_in_order,
        check_wrapped_window_is_unchanged,
    ],
    module=__name__,
)
