"""
Template Method: a fixed data-mining skeleton with pluggable steps.
"""

from abc import ABC, abstractmethod

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


class DataMiner(ABC):
    def mine(self, path: str) -> list[str]:
        """Template method; subclasses fill in the steps, never the order."""
        steps = [self.open_file(path)]
        raw = self.extract_data()
        steps.append(f"Extracted {len(raw)} records")
        steps.append(self.analyze(raw))
        steps.append(self.close_file())
        return steps

    @abstractmethod
    def open_file(self, path: str) -> str: ...

    @abstractmethod
    def extract_data(self) -> list[str]: ...

    def analyze(self, data: list[str]) -> str:
        return f"Analyzed: {', '.join(data)}"

    def close_file(self) -> str:
        return "Closed file"


class CSVDataMiner(DataMiner):
    def open_file(self, path: str) -> str:
        return f"Opened CSV {path}"

    def extract_data(self) -> list[str]:
        return ["row1", "row2"]


class PDFDataMiner(DataMiner):
    def open_file(self, path: str) -> str:
        return f"Opened PDF {path}"

    def extract_data(self) -> list[str]:
        return ["page1", "page2", "page3"]

    def analyze(self, data: list[str]) -> str:
        return f"Analyzed {len(data)} pages"


def demo() -> list[str]:
    return CSVDataMiner().mine("sales.csv") + PDFDataMiner().mine("report.pdf")


def check_skeleton_order_is_fixed():
    steps = CSVDataMiner().mine("x.csv")
    assert steps[0].startswith("Opened") and steps[-1] == "Closed file"


def check_hook_can_be_overridden():
    assert PDFDataMiner().mine("x.pdf")[2] == "Analyzed 3 pages"
    assert CSVDataMiner().mine("x.csv")[2] == "Analyzed: row1, row2"


DOC = PatternDoc(
    name="Template Method",
    slug="template-method",
    category=PatternCategory.BEHAVIORAL,
    intent=(
        "Define the skeleton of an algorithm in an operation, deferring some "
        "steps to subclasses without changing the algorithm's structure."
    ),
    motivation=(
        "Mining CSV and PDF files follows the same steps: open, extract, "
        "analyze, close. The base class owns that sequence and subclasses "
        "supply only the steps that differ."
    ),
    participants=[
        "AbstractClass (DataMiner): defines the template method and primitive steps",
        "ConcreteClass (CSVDataMiner, PDFDataMiner): implements the steps",
    ],
    consequences=[
        "Factors out common behavior",
        "Inverted control: the base class calls the subclass",
        "Hooks give optional extension points with defaults",
    ],
    related=["factory-method", "strategy"],
    faq=[
        FaqEntry(
            question="Template Method or Strategy?",
            answer=(
                "Template Method varies steps through inheritance. Strategy "
                "varies the whole algorithm through composition."
            ),
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[check_skeleton_order_is_fixed, check_hook_can_be_overridden],
    module=__name__,
)
