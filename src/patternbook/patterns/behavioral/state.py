"""
State: a traffic light that changes behavior with its state.
"""

from abc import ABC, abstractmethod

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


class LightState(ABC):
    name = ""

    @abstractmethod
    def next(self, light: "TrafficLight") -> None: ...

    @abstractmethod
    def signal(self) -> str: ...


class Red(LightState):
    name = "Red"

    def next(self, light: "TrafficLight") -> None:
        light.state = Green()

    def signal(self) -> str:
        return "Stop"


class Green(LightState):
    name = "Green"

    def next(self, light: "TrafficLight") -> None:
        light.state = Yellow()

    def signal(self) -> str:
        return "Go"


class Yellow(LightState):
    name = "Yellow"

    def next(self, light: "TrafficLight") -> None:
        light.state = Red()

    def signal(self) -> str:
        return "Slow down"


class TrafficLight:
    """Context; forwards requests to its current state."""

    def __init__(self) -> None:
        self.state: LightState = Red()

    def change(self) -> None:
        self.state.next(self)

    def signal(self) -> str:
        return f"{self.state.name}: {self.state.signal()}"


def demo() -> list[str]:
    light = TrafficLight()
    lines = []
    for _ in range(4):
        lines.append(light.signal())
        light.change()
    return lines


def check_cycle_red_green_yellow_red():
    light = TrafficLight()
    seen = []
    for _ in range(4):
        seen.append(light.state.name)
        light.change()
    assert seen == ["Red", "Green", "Yellow", "Red"]


def check_behavior_follows_state():
    light = TrafficLight()
    assert light.signal() == "Red: Stop"
    light.change()
    assert light.signal() == "Green: Go"


DOC = PatternDoc(
    name="State",
    slug="state",
    category=PatternCategory.BEHAVIORAL,
    intent="Allow an object to alter its behavior when its internal state changes.",
    motivation=(
        "A traffic light's signal and its next color both depend on the "
        "current color. Each color becomes a class, and the light delegates "
        "to whichever one is current."
    ),
    participants=[
        "Context (TrafficLight): holds the current state",
        "State (LightState): interface for state-specific behavior",
        "ConcreteState (Red, Green, Yellow): behavior and transition for one state",
    ],
    consequences=[
        "State-specific behavior is localized",
        "Transitions are explicit",
        "Adds a class per state",
    ],
    related=["flyweight", "singleton", "strategy"],
    aliases=["Objects for States"],
    faq=[
        FaqEntry(
            question="Who decides the next state?",
            answer=(
                "Here, each state does. The context could decide instead, which "
                "keeps states unaware of each other."
            ),
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[check_cycle_red_green_yellow_red, check_behavior_follows_state],
    module=__name__,
)
