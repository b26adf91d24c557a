"""
Chain of Responsibility: purchase approval by spending limit.
"""

from typing import Optional

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


class Approver:
    def __init__(self, title: str, limit: float) -> None:
        self.title = title
        self.limit = limit
        self.successor: Optional["Approver"] = None

    def set_next(self, successor: "Approver") -> "Approver":
        self.successor = successor
        return successor

    def handle(self, amount: float) -> str:
        if amount <= self.limit:
            return f"{self.title} approved {amount:.2f}"
        if self.successor is not None:
            return self.successor.handle(amount)
        return f"Nobody approved {amount:.2f}"


def build_chain() -> Approver:
    manager = Approver("Manager", 1_000)
    manager.set_next(Approver("Director", 10_000)).set_next(Approver("CEO", 100_000))
    return manager


def demo() -> list[str]:
    chain = build_chain()
    return [chain.handle(amount) for amount in (500, 5_000, 50_000, 500_000)]


def check_first_capable_handler_wins():
    chain = build_chain()
    assert chain.handle(1_000) == "Manager approved 1000.00"
    assert chain.handle(1_000.01).startswith("Director")


def check_unhandled_request_falls_off_the_end():
    assert build_chain().handle(1e9).startswith("Nobody approved")


DOC = PatternDoc(
    name="Chain of Responsibility",
    slug="chain-of-responsibility",
    category=PatternCategory.BEHAVIORAL,
    intent=(
        "Avoid coupling the sender of a request to its receiver by giving more "
        "than one object a chance to handle it; pass the request along a chain "
        "until an object handles it."
    ),
    motivation=(
        "A purchase request should reach whoever can approve it. The requester "
        "only knows the first approver. Each approver either decides or "
        "forwards the request up the chain."
    ),
    participants=[
        "Handler (Approver): handles requests it can, forwards the rest",
        "Client: sends the request to the first handler",
    ],
    consequences=[
        "Reduced coupling between sender and receivers",
        "Chains can be rearranged at run time",
        "Receipt is not guaranteed; a request may fall off the end",
    ],
    related=["composite", "command"],
    faq=[
        FaqEntry(
            question="What happens when nobody handles the request?",
            answer="The last handler reports it; here the chain answers \"Nobody approved\".",
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[check_first_capable_handler_wins, check_unhandled_request_falls_off_the_end],
    module=__name__,
)
