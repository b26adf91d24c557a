"""
Iterator: walking a collection without exposing its storage.
"""

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


class NameIterator:
    def __init__(self, names: tuple[str, ...]) -> None:
        self._names = names
        self._index = 0

    def __iter__(self) -> "NameIterator":
        return self

    def __next__(self) -> str:
        if self._index >= len(self._names):
            raise StopIteration
        name = self._names[self._index]
        self._index += 1
        return name


class ReverseNameIterator(NameIterator):
    def __init__(self, names: tuple[str, ...]) -> None:
        super().__init__(tuple(reversed(names)))


class NameCollection:
    """Aggregate; storage is private, traversal goes through iterators."""

    def __init__(self, *names: str) -> None:
        self._names = tuple(names)

    def __iter__(self) -> NameIterator:
        return NameIterator(self._names)

    def reverse_iterator(self) -> NameIterator:
        return ReverseNameIterator(self._names)


def demo() -> list[str]:
    names = NameCollection("Ada", "Grace", "Linus")
    lines = [f"Forward: {name}" for name in names]
    lines.extend(f"Reverse: {name}" for name in names.reverse_iterator())
    return lines


def check_exhausted_iterator_raises_stop_iteration():
    iterator = iter(NameCollection("only"))
    assert next(iterator) == "only"
    try:
        next(iterator)
    except StopIteration:
        return
    raise AssertionError("exhausted iterator did not raise StopIteration")


def check_independent_traversals():
    names = NameCollection("a", "b")
    first, second = iter(names), iter(names)
    next(first)
    assert next(second) == "a"


def check_alternate_traversal_order():
    assert list(NameCollection("a", "b", "c").reverse_iterator()) == ["c", "b", "a"]


DOC = PatternDoc(
    name="Iterator",
    slug="iterator",
    category=PatternCategory.BEHAVIORAL,
    intent=(
        "Provide a way to access the elements of an aggregate object sequentially "
        "without exposing its underlying representation."
    ),
    motivation=(
        "Callers want to loop over names without knowing they live in a tuple. "
        "Traversal state lives in a separate iterator object, so several "
        "traversals can run at once and new orders can be added."
    ),
    participants=[
        "Iterator (NameIterator): __iter__/__next__ protocol",
        "ConcreteIterator (ReverseNameIterator): keeps traversal position",
        "Aggregate (NameCollection): creates iterators",
    ],
    consequences=[
        "Supports variations in traversal",
        "Simplifies the aggregate's interface",
        "More than one traversal can be pending on an aggregate",
    ],
    related=["composite", "factory-method", "memento"],
    aliases=["Cursor"],
    faq=[
        FaqEntry(
            question="Why not just use a generator?",
            answer=(
                "In Python you usually would. The explicit class shows the "
                "roles that a generator function fills in for you."
            ),
        ),
        FaqEntry(
            question="What signals the end?",
            answer="The language-native StopIteration exception, which for loops handle for you.",
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[
        check_exhausted_iterator_raises_stop_iteration,
        check_independent_traversals,
        check_alternate_traversal_order,
    ],
    module=__name__,
)
