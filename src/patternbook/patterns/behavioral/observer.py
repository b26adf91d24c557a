"""
Observer: a weather station notifying its displays.
"""

from abc import ABC, abstractmethod

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


class Observer(ABC):
    @abstractmethod
    def update(self, subject: "Subject") -> None: ...


class Subject:
    def __init__(self) -> None:
        self._observers: list[Observer] = []

    def attach(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        """Stop notifying an observer.

        Raises:
            ValueError: If the observer was never attached
        """
        self._observers.remove(observer)

    def notify(self) -> None:
        for observer in list(self._observers):
            observer.update(self)


class WeatherStation(Subject):
    def __init__(self) -> None:
        super().__init__()
        self.temperature = 0.0

    def set_temperature(self, temperature: float) -> None:
        self.temperature = temperature
        self.notify()


class Display(Observer):
    def __init__(self, name: str, log: list[str]) -> None:
        self.name = name
        self.log = log

    def update(self, subject: Subject) -> None:
        self.log.append(f"{self.name} shows {subject.temperature:.1f}°C")


def demo() -> list[str]:
    log: list[str] = []
    station = WeatherStation()
    phone = Display("Phone", log)
    wall = Display("Wall panel", log)
    station.attach(phone)
    station.attach(wall)
    station.set_temperature(21.5)
    station.detach(phone)
    log.append("Phone detached")
    station.set_temperature(23.0)
    return log


def check_observers_notified_in_attach_order():
    log: list[str] = []
    station = WeatherStation()
    for name in ("a", "b", "c"):
        station.attach(Display(name, log))
    station.set_temperature(1)
    assert [line.split()[0] for line in log] == ["a", "b", "c"]


def check_detached_observer_not_notified():
    log: list[str] = []
    station = WeatherStation()
    gone = Display("gone", log)
    station.attach(gone)
    station.detach(gone)
    station.set_temperature(5)
    assert log == []


def check_attaching_twice_notifies_once():
    log: list[str] = []
    station = WeatherStation()
    display = Display("d", log)
    station.attach(display)
    station.attach(display)
    station.notify()
    assert len(log) == 1


DOC = PatternDoc(
    name="Observer",
    slug="observer",
    category=PatternCategory.BEHAVIORAL,
    intent=(
        "Define a one-to-many dependency so that when one object changes state, "
        "all its dependents are notified and updated automatically."
    ),
    motivation=(
        "Several displays show the station's temperature. The station should "
        "not know what kinds of display exist. It only keeps a list of "
        "observers and tells each of them when something changed."
    ),
    participants=[
        "Subject: keeps observers and notifies them",
        "ConcreteSubject (WeatherStation): holds the state of interest",
        "Observer: update interface",
        "ConcreteObserver (Display): reacts to notifications",
    ],
    consequences=[
        "Subjects and observers are loosely coupled",
        "Broadcast communication to any number of observers",
        "Cascades of unexpected updates are possible",
    ],
    related=["mediator", "singleton"],
    aliases=["Publish-Subscribe", "Dependents"],
    faq=[
        FaqEntry(
            question="Push or pull?",
            answer=(
                "This example pulls: observers receive the subject and read what "
                "they need. Push models send the changed data in the call."
            ),
        ),
        FaqEntry(
            question="Why iterate over a copy of the observer list?",
            answer="So an observer can detach itself during notification.",
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[
        check_observers_notified_in_attach_order,
        check_detached_observer_not_notified,
        check_attaching_twice_notifies_once,
    ],
    module=__name__,
)
