"""Tests for behavioral pattern snippets."""

import pytest

from patternbook.patterns.behavioral import (
    chain_of_responsibility,
    command,
    iterator,
    mediator,
    memento,
    observer,
    state,
    strategy,
    template_method,
    visitor,
)


class TestObserver:
    """Tests for the weather station Observer."""

    def test_demo_output(self):
        assert observer.demo() == [
            "Phone shows 21.5°C",
            "Wall panel shows 21.5°C",
            "Phone detached",
            "Wall panel shows 23.0°C",
        ]

    def test_observer_can_detach_during_notify(self):
        station = observer.WeatherStation()
        log = []

        class OneShot(observer.Observer):
            def update(self, subject):
                log.append("fired")
                subject.detach(self)

        station.attach(OneShot())
        station.set_temperature(1)
        station.set_temperature(2)

        assert log == ["fired"]

    def test_detach_unknown_raises(self):
        with pytest.raises(ValueError):
            observer.WeatherStation().detach(observer.Display("x", []))


class TestIterator:
    """Tests for the name Iterator."""

    def test_exhaustion_raises_stop_iteration(self):
        it = iter(iterator.NameCollection())

        with pytest.raises(StopIteration):
            next(it)

    def test_for_loop(self):
        assert list(iterator.NameCollection("a", "b")) == ["a", "b"]

    def test_iterator_is_its_own_iterable(self):
        it = iter(iterator.NameCollection("a"))

        assert iter(it) is it


class TestVisitor:
    """Tests for the shape Visitor."""

    def test_demo_output(self):
        lines = visitor.demo()

        assert lines[0] == '<dot x="1" y="2"/>'
        assert lines[-1] == "Total area: 42.57"

    def test_visitor_is_abstract(self):
        with pytest.raises(TypeError):
            visitor.Visitor()


class TestStrategy:
    """Tests for the payment Strategy."""

    def test_function_like_strategy(self):
        class FreeStrategy(strategy.PaymentStrategy):
            def pay(self, amount):
                return "free"

        cart = strategy.ShoppingCart(FreeStrategy())

        assert cart.checkout() == "free"

    def test_checkout_without_strategy(self):
        with pytest.raises(ValueError, match="No payment strategy"):
            strategy.ShoppingCart().checkout()

    def test_total(self):
        cart = strategy.ShoppingCart()
        cart.add("a", 1.5)
        cart.add("b", 2.5)

        assert cart.total() == 4.0


class TestCommand:
    """Tests for the remote control Command."""

    def test_demo_output(self):
        assert command.demo() == [
            "Kitchen light is on",
            "Kitchen light is off",
            "Undo: Kitchen light is on",
            "Undo: Kitchen light is off",
            "Undo: Nothing to undo",
        ]


class TestState:
    """Tests for the traffic light State."""

    def test_demo_output(self):
        assert state.demo() == ["Red: Stop", "Green: Go", "Yellow: Slow down", "Red: Stop"]


class TestTemplateMethod:
    """Tests for the data miner Template Method."""

    def test_csv_steps(self):
        assert template_method.CSVDataMiner().mine("a.csv") == [
            "Opened CSV a.csv",
            "Extracted 2 records",
            "Analyzed: row1, row2",
            "Closed file",
        ]


class TestChainOfResponsibility:
    """Tests for the approval Chain of Responsibility."""

    def test_demo_output(self):
        assert chain_of_responsibility.demo() == [
            "Manager approved 500.00",
            "Director approved 5000.00",
            "CEO approved 50000.00",
            "Nobody approved 500000.00",
        ]

    def test_single_handler_chain(self):
        approver = chain_of_responsibility.Approver("Clerk", 10)

        assert approver.handle(11) == "Nobody approved 11.00"


class TestMediator:
    """Tests for the chat room Mediator."""

    def test_send_without_room_raises(self):
        with pytest.raises(RuntimeError, match="has not joined"):
            mediator.User("loner").send("hello?")

    def test_direct_to_unknown_user_raises(self):
        room = mediator.ChatRoom()
        user = mediator.User("a")
        room.join(user)

        with pytest.raises(KeyError):
            user.send("hi", to="ghost")

    def test_demo_output(self):
        assert mediator.demo() == [
            "Alice <- Bob: Hi Alice",
            "Bob <- Alice: Hi all",
            "Carol <- Alice: Hi all",
        ]


class TestMemento:
    """Tests for the editor Memento."""

    def test_undo_all_the_way(self):
        editor = memento.Editor()
        history = memento.History(editor)
        history.backup()
        editor.type("abc")
        history.backup()
        editor.type("def")

        assert history.undo() and editor.content == "abc"
        assert history.undo() and editor.content == ""
        assert history.undo() is False

    def test_demo_ends_empty(self):
        assert memento.demo()[-1] == "Undo: ''"
