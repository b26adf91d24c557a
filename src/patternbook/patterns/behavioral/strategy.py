"""
Strategy: interchangeable payment methods for a shopping cart.
"""

from abc import ABC, abstractmethod
from typing import Optional

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


class PaymentStrategy(ABC):
    @abstractmethod
    def pay(self, amount: float) -> str: ...


class CreditCardPayment(PaymentStrategy):
    def __init__(self, card_number: str) -> None:
        self.card_number = card_number

    def pay(self, amount: float) -> str:
        return f"Paid {amount:.2f} with credit card ending {self.card_number[-4:]}"


class PayPalPayment(PaymentStrategy):
    def __init__(self, email: str) -> None:
        self.email = email

    def pay(self, amount: float) -> str:
        return f"Paid {amount:.2f} via PayPal account {self.email}"


class ShoppingCart:
    def __init__(self, strategy: Optional[PaymentStrategy] = None) -> None:
        self.items: list[tuple[str, float]] = []
        self.strategy = strategy

    def add(self, name: str, price: float) -> None:
        self.items.append((name, price))

    def total(self) -> float:
        return sum(price for _, price in self.items)

    def checkout(self) -> str:
        """Pay the total with the current strategy.

        Raises:
            ValueError: If no payment strategy has been set
        """
        if self.strategy is None:
            raise ValueError("No payment strategy set")
        return self.strategy.pay(self.total())


def demo() -> list[str]:
    cart = ShoppingCart()
    cart.add("Book", 12.5)
    cart.add("Pen", 2.0)
    lines = []
    for strategy in (CreditCardPayment("4111111111111111"), PayPalPayment("ada@example.com")):
        cart.strategy = strategy
        lines.append(cart.checkout())
    return lines


def check_strategy_swapped_at_runtime():
    cart = ShoppingCart(CreditCardPayment("0000111122223333"))
    cart.add("x", 1)
    assert "credit card ending 3333" in cart.checkout()
    cart.strategy = PayPalPayment("a@b.c")
    assert "PayPal" in cart.checkout()


def check_context_needs_a_strategy():
    try:
        ShoppingCart().checkout()
    except ValueError:
        return
    raise AssertionError("checkout without a strategy did not raise ValueError")


DOC = PatternDoc(
    name="Strategy",
    slug="strategy",
    category=PatternCategory.BEHAVIORAL,
    intent=(
        "Define a family of algorithms, encapsulate each one, and make them "
        "interchangeable so the algorithm varies independently of its clients."
    ),
    motivation=(
        "A cart should not contain an if/elif chain for every payment method. "
        "Each method becomes an object with the same pay() interface and the "
        "cart uses whichever it is given."
    ),
    participants=[
        "Strategy (PaymentStrategy): common algorithm interface",
        "ConcreteStrategy (CreditCardPayment, PayPalPayment): one algorithm each",
        "Context (ShoppingCart): configured with a strategy, delegates to it",
    ],
    consequences=[
        "Replaces conditionals with polymorphism",
        "Algorithms can be swapped at run time",
        "Clients must know the strategies to choose between them",
    ],
    related=["flyweight", "state", "template-method"],
    aliases=["Policy"],
    faq=[
        FaqEntry(
            question="Do strategies have to be classes in Python?",
            answer="No. Plain functions with the same signature work as strategies too.",
        ),
        FaqEntry(
            question="Strategy or State?",
            answer=(
                "Same structure. In State the objects swap themselves as the "
                "context changes. In Strategy the client picks one."
            ),
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[check_strategy_swapped_at_runtime, check_context_needs_a_strategy],
    module=__name__,
)
