"""
Adapter: making a StringConverter look like a Converter.
"""

from abc import ABC, abstractmethod

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


class Converter(ABC):
    """Target interface the client expects."""

    @abstractmethod
    def convert(self, text: str) -> str: ...


class StringConverter:
    """Adaptee with a useful but incompatible interface."""

    def to_upper_case(self, text: str) -> str:
        return text.upper()


class StringConverterAdapter(Converter):
    def __init__(self, string_converter: StringConverter) -> None:
        self.string_converter = string_converter

    def convert(self, text: str) -> str:
        return self.string_converter.to_upper_case(text)


class Client:
    def __init__(self, converter: Converter) -> None:
        self.converter = converter

    def request(self, text: str) -> str:
        return self.converter.convert(text)


def demo() -> list[str]:
    adapter = StringConverterAdapter(StringConverter())
    client = Client(adapter)
    return [client.request("hello world")]


def check_adapter_delegates_to_adaptee():
    adaptee = StringConverter()
    assert StringConverterAdapter(adaptee).convert("abc") == adaptee.to_upper_case("abc")


def check_client_sees_only_target_interface():
    adapter = StringConverterAdapter(StringConverter())
    assert isinstance(adapter, Converter)
    assert not isinstance(StringConverter(), Converter)
    assert Client(adapter).request("hello world") == "HELLO WORLD"


DOC = PatternDoc(
    name="Adapter",
    slug="adapter",
    category=PatternCategory.STRUCTURAL,
    intent=(
        "Convert the interface of a class into another interface clients expect, "
        "letting classes work together that couldn't otherwise."
    ),
    motivation=(
        "The client talks to a Converter. The existing StringConverter already "
        "does the work but calls it to_upper_case. Rather than change either "
        "side, a small adapter translates one call into the other."
    ),
    participants=[
        "Target (Converter): interface the client uses",
        "Adaptee (StringConverter): existing class with an incompatible interface",
        "Adapter (StringConverterAdapter): implements Target by delegating to Adaptee",
        "Client: collaborates with objects through Target",
    ],
    consequences=[
        "Reuses existing classes without modifying them",
        "An object adapter works with the adaptee and all its subclasses",
        "Adds one level of indirection",
    ],
    related=["bridge", "decorator", "proxy", "facade"],
    aliases=["Wrapper"],
    faq=[
        FaqEntry(
            question="Object adapter or class adapter?",
            answer=(
                "This is an object adapter: it holds an adaptee. A class adapter "
                "would inherit from both Converter and StringConverter instead."
            ),
        ),
        FaqEntry(
            question="How does this differ from Decorator?",
            answer=(
                "An adapter changes the interface and keeps the behavior. A "
                "decorator keeps the interface and adds behavior."
            ),
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[check_adapter_delegates_to_adaptee, check_client_sees_only_target_interface],
    module=__name__,
)
