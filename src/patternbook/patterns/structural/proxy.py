"""
Proxy: an image that is only loaded when first displayed.
"""

from abc import ABC, abstractmethod
from typing import Optional

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


class Image(ABC):
    @abstractmethod
    def display(self) -> list[str]: ...


class RealImage(Image):
    loads = 0

    def __init__(self, filename: str) -> None:
        self.filename = filename
        RealImage.loads += 1
        self.load_message = f"Loading {filename}"

    def display(self) -> list[str]:
        return [f"Displaying {self.filename}"]


class ImageProxy(Image):
    def __init__(self, filename: str) -> None:
        self.filename = filename
        self._real_image: Optional[RealImage] = None

    @property
    def loaded(self) -> bool:
        return self._real_image is not None

    def display(self) -> list[str]:
        lines = []
        if self._real_image is None:
            self._real_image = RealImage(self.filename)
            lines.append(self._real_image.load_message)
        return lines + self._real_image.display()


def demo() -> list[str]:
    image = ImageProxy("photo.png")
    lines = [f"Proxy created, loaded: {image.loaded}"]
    lines.extend(image.display())
    lines.extend(image.display())
    return lines


def check_loading_is_deferred():
    proxy = ImageProxy("a.png")
    assert not proxy.loaded
    proxy.display()
    assert proxy.loaded


def check_real_subject_loaded_once():
    before = RealImage.loads
    proxy = ImageProxy("b.png")
    proxy.display()
    proxy.display()
    assert RealImage.loads - before == 1


DOC = PatternDoc(
    name="Proxy",
    slug="proxy",
    category=PatternCategory.STRUCTURAL,
    intent="Provide a surrogate or placeholder for another object to control access to it.",
    motivation=(
        "Loading a large image is expensive, and documents often contain "
        "images nobody scrolls to. The proxy stands in for the image and "
        "creates the real one on first display."
    ),
    participants=[
        "Subject (Image): common interface",
        "RealSubject (RealImage): the expensive object",
        "Proxy (ImageProxy): controls access and creates the RealSubject on demand",
    ],
    consequences=[
        "A virtual proxy defers expensive creation",
        "Protection and remote proxies use the same structure for access control and distribution",
        "Adds indirection on every call",
    ],
    related=["adapter", "decorator"],
    aliases=["Surrogate"],
    faq=[
        FaqEntry(
            question="Proxy or Decorator?",
            answer=(
                "Both wrap an object behind its own interface. A proxy controls "
                "access and usually manages the subject's lifecycle. A decorator "
                "adds behavior to a subject it is given."
            ),
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[check_loading_is_deferred, check_real_subject_loaded_once],
    module=__name__,
)
