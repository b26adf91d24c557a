"""
Mediator: users talking through a chat room instead of to each other.
"""

from patternbook.catalog import PatternEntry
from patternbook.models import FaqEntry, PatternCategory, PatternDoc


class ChatRoom:
    def __init__(self) -> None:
        self.users: dict[str, "User"] = {}

    def join(self, user: "User") -> None:
        self.users[user.name] = user
        user.room = self

    def broadcast(self, sender: "User", message: str) -> None:
        for user in self.users.values():
            if user is not sender:
                user.receive(sender.name, message)

    def direct(self, sender: "User", recipient: str, message: str) -> None:
        """Deliver to one user.

        Raises:
            KeyError: If the recipient is not in the room
        """
        self.users[recipient].receive(sender.name, message)


class User:
    def __init__(self, name: str) -> None:
        self.name = name
        self.room: ChatRoom | None = None
        self.inbox: list[str] = []

    def send(self, message: str, to: str | None = None) -> None:
        if self.room is None:
            raise RuntimeError(f"{self.name} has not joined a room")
        if to is None:
            self.room.broadcast(self, message)
        else:
            self.room.direct(self, to, message)

    def receive(self, sender: str, message: str) -> None:
        self.inbox.append(f"{self.name} <- {sender}: {message}")


def demo() -> list[str]:
    room = ChatRoom()
    alice, bob, carol = User("Alice"), User("Bob"), User("Carol")
    for user in (alice, bob, carol):
        room.join(user)
    alice.send("Hi all")
    bob.send("Hi Alice", to="Alice")
    return alice.inbox + bob.inbox + carol.inbox


def check_broadcast_skips_sender():
    room = ChatRoom()
    a, b = User("a"), User("b")
    room.join(a)
    room.join(b)
    a.send("x")
    assert a.inbox == [] and b.inbox == ["b <- a: x"]


def check_colleagues_know_only_the_mediator():
    room = ChatRoom()
    a, b, c = User("a"), User("b"), User("c")
    for user in (a, b, c):
        room.join(user)
    a.send("psst", to="c")
    assert b.inbox == [] and c.inbox == ["c <- a: psst"]


DOC = PatternDoc(
    name="Mediator",
    slug="mediator",
    category=PatternCategory.BEHAVIORAL,
    intent=(
        "Define an object that encapsulates how a set of objects interact, "
        "keeping them from referring to each other explicitly."
    ),
    motivation=(
        "If every user held a reference to every other user, adding one "
        "person would touch everybody. Users only know the room, and the "
        "room knows how to route messages."
    ),
    participants=[
        "Mediator (ChatRoom): coordinates colleagues",
        "Colleague (User): talks to the mediator instead of to peers",
    ],
    consequences=[
        "Replaces many-to-many links with one-to-many",
        "Centralizes control",
        "The mediator can grow into a monolith",
    ],
    related=["facade", "observer"],
    faq=[
        FaqEntry(
            question="Is this a chat system?",
            answer="No. It only shows how routing moves out of the colleagues and into one object.",
        ),
    ],
)

ENTRY = PatternEntry(
    doc=DOC,
    demo=demo,
    checks=[check_broadcast_skips_sender, check_colleagues_know_only_the_mediator],
    module=__name__,
)
