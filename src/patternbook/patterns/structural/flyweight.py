"""
Flyweight: a forest whose trees share their type data.
"""

from dataclasses import dataclass

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


@dataclass(frozen=True)
class TreeType:
    """Intrinsic, shared state."""

    name: str
    color: str
    texture: str

    def draw(self, x: int, y: int) -> str:
        return f"{self.name} ({self.color}) at {x},{y}"


class TreeTypeFactory:
    def __init__(self) -> None:
        self._types: dict[tuple[str, str, str], TreeType] = {}

    def get(self, name: str, color: str, texture: str) -> TreeType:
        key = (name, color, texture)
        if key not in self._types:
            self._types[key] = TreeType(name, color, texture)
        return self._types[key]

    def __len__(self) -> int:
        return len(self._types)


@dataclass
class Tree:
    """Extrinsic state plus a reference to the shared flyweight."""

    x: int
    y: int
    tree_type: TreeType

    def draw(self) -> str:
        return self.tree_type.draw(self.x, self.y)


class Forest:
    def __init__(self) -> None:
        self.factory = TreeTypeFactory()
        self.trees: list[Tree] = []

    def plant(self, x: int, y: int, name: str, color: str, texture: str) -> Tree:
        tree = Tree(x, y, self.factory.get(name, color, texture))
        self.trees.append(tree)
        return tree


def demo() -> list[str]:
    forest = Forest()
    for i in range(3):
        forest.plant(i, i * 2, "Oak", "green", "oak.png")
    forest.plant(9, 9, "Birch", "white", "birch.png")
    lines = [tree.draw() for tree in forest.trees]
    lines.append(f"{len(forest.trees)} trees share {len(forest.factory)} tree types")
    return lines


def check_equal_keys_share_one_flyweight():
    factory = TreeTypeFactory()
    assert factory.get("Oak", "green", "oak.png") is factory.get("Oak", "green", "oak.png")
    assert len(factory) == 1


def check_extrinsic_state_stays_per_object():
    forest = Forest()
    a = forest.plant(1, 1, "Pine", "green", "pine.png")
    b = forest.plant(2, 2, "Pine", "green", "pine.png")
    assert a.tree_type is b.tree_type
    assert (a.x, b.x) == (1, 2)


DOC = PatternDoc(
    name="Flyweight",
    slug="flyweight",
    category=PatternCategory.STRUCTURAL,
    intent="Use sharing to support large numbers of fine-grained objects efficiently.",
    motivation=(
        "A forest has thousands of trees but only a few kinds of tree. Each "
        "tree keeps its position. Name, color and texture live once per "
        "kind, handed out by a factory."
    ),
    participants=[
        "Flyweight (TreeType): immutable intrinsic state",
        "FlyweightFactory (TreeTypeFactory): creates and shares flyweights",
        "Client (Tree, Forest): stores extrinsic state and references flyweights",
    ],
    consequences=[
        "Memory use drops with the number of shared instances",
        "Intrinsic state must be immutable",
        "Extrinsic state has to be passed in on every call",
    ],
    related=["composite", "state", "strategy"],
    faq=[
        FaqEntry(
            question="Why is TreeType frozen?",
            answer="Shared state that one client could mutate would change every tree using it.",
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[check_equal_keys_share_one_flyweight, check_extrinsic_state_stays_per_object],
    module=__name__,
)
