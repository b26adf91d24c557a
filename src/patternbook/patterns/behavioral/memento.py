"""
Memento: undoable editor state.
"""

from dataclasses import dataclass

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


@dataclass(frozen=True)
class EditorMemento:
    content: str
    cursor: int


class Editor:
    """Originator."""

    def __init__(self) -> None:
        self.content = ""
        self.cursor = 0

    def type(self, text: str) -> None:
        self.content = self.content[: self.cursor] + text + self.content[self.cursor :]
        self.cursor += len(text)

    def save(self) -> EditorMemento:
        return EditorMemento(self.content, self.cursor)

    def restore(self, memento: EditorMemento) -> None:
        self.content = memento.content
        self.cursor = memento.cursor


class History:
    """Caretaker; stores mementos without looking inside them."""

    def __init__(self, editor: Editor) -> None:
        self.editor = editor
        self._snapshots: list[EditorMemento] = []

    def backup(self) -> None:
        self._snapshots.append(self.editor.save())

    def undo(self) -> bool:
        if not self._snapshots:
            return False
        self.editor.restore(self._snapshots.pop())
        return True


def demo() -> list[str]:
    editor = Editor()
    history = History(editor)
    lines = []
    for word in ("Hello", ", world", "!!!"):
        history.backup()
        editor.type(word)
        lines.append(f"Typed {word!r}: {editor.content!r}")
    while history.undo():
        lines.append(f"Undo: {editor.content!r}")
    return lines


def check_restore_returns_saved_state():
    editor = Editor()
    editor.type("abc")
    snapshot = editor.save()
    editor.type("def")
    editor.restore(snapshot)
    assert (editor.content, editor.cursor) == ("abc", 3)


def check_memento_is_immutable():
    memento = Editor().save()
    try:
        memento.content = "tampered"
    except AttributeError:
        return
    raise AssertionError("memento allowed mutation")


DOC = PatternDoc(
    name="Memento",
    slug="memento",
    category=PatternCategory.BEHAVIORAL,
    intent=(
        "Without violating encapsulation, capture and externalize an object's "
        "internal state so that it can be restored later."
    ),
    motivation=(
        "Undo needs earlier editor states, but the history should not poke "
        "at the editor's fields. The editor hands out opaque snapshots and "
        "accepts them back."
    ),
    participants=[
        "Originator (Editor): creates and restores mementos",
        "Memento (EditorMemento): immutable snapshot",
        "Caretaker (History): keeps mementos, never inspects them",
    ],
    consequences=[
        "Preserves encapsulation boundaries",
        "Simplifies the originator",
        "Snapshots can be expensive for large state",
    ],
    related=["command", "iterator"],
    aliases=["Token"],
    faq=[
        FaqEntry(
            question="Why frozen?",
            answer="A snapshot that can be edited after the fact is no longer a faithful record.",
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[check_restore_returns_saved_state, check_memento_is_immutable],
    module=__name__,
)
