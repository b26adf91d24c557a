"""
Singleton: a logger with exactly one instance.

The instance is created lazily on first access. Creation is guarded by
double-checked locking so concurrent first accesses still agree on a
single object.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc

logger = logging.getLogger(__name__)


class Logger:
    """Process-wide logger.

    Use Logger.get_instance() (or simply Logger()); both return the same
    object.
    """

    _instance: Optional["Logger"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "Logger":
        if cls._instance is None:
            with cls._lock:
                # Another thread may have created it while we waited
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance.messages = []
                    cls._instance = instance
        return cls._instance

    @classmethod
    def get_instance(cls) -> "Logger":
        return cls()

    def log(self, message: str) -> str:
        line = f"[LOG] {message}"
        self.messages.append(line)
        logger.info(message)
        return line

    @classmethod
    def _reset(cls) -> None:
        """Drop the instance so the next access creates a fresh one."""
        with cls._lock:
            cls._instance = None


def demo() -> list[str]:
    first = Logger.get_instance()
    second = Logger.get_instance()
    return [
        first.log("Application started"),
        second.log("Second access writes to the same logger"),
        f"Same instance: {first is second}",
    ]


def check_same_reference():
    assert Logger.get_instance() is Logger.get_instance()
    assert Logger() is Logger.get_instance()


def check_state_is_shared():
    Logger.get_instance().log("shared")
    assert Logger().messages[-1] == "[LOG] shared"


def check_concurrent_first_access():
    Logger._reset()
    barrier = threading.Barrier(8)

    def access() -> Logger:
        barrier.wait()
        return Logger.get_instance()

    with ThreadPoolExecutor(max_workers=8) as pool:
        instances = list(pool.map(lambda _: access(), range(8)))
    assert len({id(i) for i in instances}) == 1, "threads created different instances"


DOC = PatternDoc(
    name="Singleton",
    slug="singleton",
    category=PatternCategory.CREATIONAL,
    intent="Ensure a class has only one instance and provide a global point of access to it.",
    motivation=(
        "Some objects should exist exactly once: a logger, a configuration "
        "store, a connection pool. Letting every caller construct its own "
        "copy wastes resources and splits state that should be shared."
    ),
    participants=[
        "Singleton (Logger): owns the single instance and the access method",
        "Client: obtains the instance through get_instance()",
    ],
    consequences=[
        "Controlled access to the sole instance",
        "Lazy creation defers cost until first use",
        "Global state makes tests order-dependent unless the instance can be reset",
        "Hides dependencies that would otherwise appear in constructor signatures",
    ],
    related=["abstract-factory", "builder", "facade"],
    faq=[
        FaqEntry(
            question="Why check the instance twice?",
            answer=(
                "The first check avoids taking the lock on every access. The "
                "second, made while holding the lock, stops two threads that "
                "both passed the first check from creating two instances."
            ),
        ),
        FaqEntry(
            question="Isn't a Python module already a singleton?",
            answer=(
                "Yes. A module-level object is the simplest singleton in Python. "
                "The class form is shown because it makes lazy creation and "
                "the locking explicit."
            ),
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[check_same_reference, check_state_is_shared, check_concurrent_first_access],
    module=__name__,
)
