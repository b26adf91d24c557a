"""
Command: a remote control with undo.
"""

from abc import ABC, abstractmethod

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


class Light:
    """Receiver."""

    def __init__(self, location: str) -> None:
        self.location = location
        self.is_on = False

    def on(self) -> str:
        self.is_on = True
        return f"{self.location} light is on"

    def off(self) -> str:
        self.is_on = False
        return f"{self.location} light is off"


class Command(ABC):
    @abstractmethod
    def execute(self) -> str: ...

    @abstractmethod
    def undo(self) -> str: ...


class LightOnCommand(Command):
    def __init__(self, light: Light) -> None:
        self.light = light

    def execute(self) -> str:
        return self.light.on()

    def undo(self) -> str:
        return self.light.off()


class LightOffCommand(Command):
    def __init__(self, light: Light) -> None:
        self.light = light

    def execute(self) -> str:
        return self.light.off()

    def undo(self) -> str:
        return self.light.on()


class RemoteControl:
    """Invoker; knows commands, not receivers."""

    def __init__(self) -> None:
        self.history: list[Command] = []

    def press(self, command: Command) -> str:
        self.history.append(command)
        return command.execute()

    def undo(self) -> str:
        if not self.history:
            return "Nothing to undo"
        return self.history.pop().undo()


def demo() -> list[str]:
    kitchen = Light("Kitchen")
    remote = RemoteControl()
    return [
        remote.press(LightOnCommand(kitchen)),
        remote.press(LightOffCommand(kitchen)),
        "Undo: " + remote.undo(),
        "Undo: " + remote.undo(),
        "Undo: " + remote.undo(),
    ]


def check_invoker_executes_through_command():
    light = Light("Hall")
    RemoteControl().press(LightOnCommand(light))
    assert light.is_on


def check_undo_reverses_in_lifo_order():
    light = Light("Hall")
    remote = RemoteControl()
    remote.press(LightOnCommand(light))
    remote.press(LightOffCommand(light))
    remote.undo()
    assert light.is_on
    remote.undo()
    assert not light.is_on
    assert remote.undo() == "Nothing to undo"


DOC = PatternDoc(
    name="Command",
    slug="command",
    category=PatternCategory.BEHAVIORAL,
    intent=(
        "Encapsulate a request as an object, letting you parameterize clients "
        "with requests, queue or log them, and support undo."
    ),
    motivation=(
        "A remote control should not know how to switch on a light. Each "
        "button holds a command object that knows its receiver. Keeping the "
        "executed commands in a history makes undo possible."
    ),
    participants=[
        "Command: execute/undo interface",
        "ConcreteCommand (LightOnCommand, LightOffCommand): binds a receiver to an action",
        "Receiver (Light): performs the work",
        "Invoker (RemoteControl): asks commands to run and keeps history",
    ],
    consequences=[
        "Decouples the invoker from the receiver",
        "Commands are first-class objects that can be stored, queued or composed",
        "Undo/redo follow naturally from a history of commands",
    ],
    related=["memento", "composite", "prototype"],
    aliases=["Action", "Transaction"],
    faq=[
        FaqEntry(
            question="Isn't a command just a callback?",
            answer=(
                "A callable covers execute. Undo and other metadata are what make "
                "a full command object worthwhile."
            ),
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[check_invoker_executes_through_command, check_undo_reverses_in_lifo_order],
    module=__name__,
)
