"""
Facade: one class fronting three subsystems.
"""

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


class SubsystemA:
    def operation_a(self) -> str:
        return "Subsystem A: operation A"


class SubsystemB:
    def operation_b(self) -> str:
        return "Subsystem B: operation B"


class SubsystemC:
    def operation_c(self) -> str:
        return "Subsystem C: operation C"


class Facade:
    def __init__(self) -> None:
        self.subsystem_a = SubsystemA()
        self.subsystem_b = SubsystemB()
        self.subsystem_c = SubsystemC()

    def operation1(self) -> list[str]:
        return [
            "Facade: operation 1",
            self.subsystem_a.operation_a(),
            self.subsystem_b.operation_b(),
        ]

    def operation2(self) -> list[str]:
        return [
            "Facade: operation 2",
            self.subsystem_b.operation_b(),
            self.subsystem_c.operation_c(),
        ]


def demo() -> list[str]:
    facade = Facade()
    return facade.operation1() + facade.operation2()


def check_operation1_uses_a_and_b():
    assert Facade().operation1() == [
        "Facade: operation 1",
        "Subsystem A: operation A",
        "Subsystem B: operation B",
    ]


def check_operation2_uses_b_and_c():
    assert Facade().operation2()[1:] == ["Subsystem B: operation B", "Subsystem C: operation C"]


DOC = PatternDoc(
    name="Facade",
    slug="facade",
    category=PatternCategory.STRUCTURAL,
    intent="Provide a unified interface to a set of interfaces in a subsystem.",
    motivation=(
        "Clients that need operations from several subsystems would otherwise "
        "have to know all of them and the order to call them in. The facade "
        "bundles the common sequences behind two methods."
    ),
    participants=[
        "Facade: knows which subsystem classes handle a request",
        "Subsystem classes (SubsystemA, SubsystemB, SubsystemC): do the work, unaware of the facade",
    ],
    consequences=[
        "Shields clients from subsystem components",
        "Weakens coupling between clients and the subsystem",
        "Does not prevent direct subsystem use when clients need it",
    ],
    related=["abstract-factory", "mediator", "singleton"],
    faq=[
        FaqEntry(
            question="Facade or Mediator?",
            answer=(
                "A facade is one-way: clients call through it, subsystems don't "
                "know it exists. A mediator sits between colleagues that talk to it."
            ),
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[check_operation1_uses_a_and_b, check_operation2_uses_b_and_c],
    module=__name__,
)
