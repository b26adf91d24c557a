"""Tests for structural pattern snippets."""

import pytest

from patternbook.patterns.structural import adapter, bridge, composite, decorator, facade, flyweight, proxy


class TestAdapter:
    """Tests for the string converter Adapter."""

    def test_demo_output(self):
        assert adapter.demo() == ["HELLO WORLD"]

    def test_adapter_matches_adaptee(self):
        adaptee = adapter.StringConverter()
        adapted = adapter.StringConverterAdapter(adaptee)

        assert adapted.convert("Mixed Case") == adaptee.to_upper_case("Mixed Case")


class TestBridge:
    """Tests for the shape/drawing-API Bridge."""

    def test_demo_output(self):
        assert bridge.demo() == [
            "API1.circle at 1:2 radius 3",
            "API2.circle at 5:7 radius 11",
        ]

    def test_resize_then_draw(self):
        circle = bridge.Circle(0, 0, 4, bridge.DrawingAPI2())
        circle.resize_by_percentage(-50)

        assert circle.draw() == "API2.circle at 0:0 radius 2.0"

    def test_shape_is_abstract(self):
        with pytest.raises(TypeError):
            bridge.Shape(bridge.DrawingAPI1())


class TestDecorator:
    """Tests for the window Decorator."""

    def test_demo_output(self):
        assert decorator.demo()[:5] == [
            "Simple Window:",
            "Drawing a simple window",
            "",
            "Decorated Window:",
            "Drawing a simple window",
        ]

    def test_plain_decorator_only_forwards(self):
        window = decorator.WindowDecorator(decorator.SimpleWindow())

        assert window.draw() == ["Drawing a simple window"]

    def test_double_border(self):
        window = decorator.BorderedWindowDecorator(
            decorator.BorderedWindowDecorator(decorator.SimpleWindow())
        )

        assert window.draw().count("Drawing a border around the window") == 2


class TestFacade:
    """Tests for the subsystem Facade."""

    def test_demo_output(self):
        assert facade.demo() == [
            "Facade: operation 1",
            "Subsystem A: operation A",
            "Subsystem B: operation B",
            "Facade: operation 2",
            "Subsystem B: operation B",
            "Subsystem C: operation C",
        ]


class TestComposite:
    """Tests for the graphic Composite."""

    def test_remove_child(self):
        line = composite.Line()
        picture = composite.Picture("p").add(line).add(composite.Text("t"))
        picture.remove(line)

        assert picture.count() == 1

    def test_empty_picture_counts_zero(self):
        assert composite.Picture("empty").count() == 0


class TestProxy:
    """Tests for the image Proxy."""

    def test_demo_loads_once(self):
        lines = proxy.demo()

        assert lines == [
            "Proxy created, loaded: False",
            "Loading photo.png",
            "Displaying photo.png",
            "Displaying photo.png",
        ]


class TestFlyweight:
    """Tests for the tree Flyweight."""

    def test_demo_summary(self):
        assert flyweight.demo()[-1] == "4 trees share 2 tree types"

    def test_flyweight_is_immutable(self):
        tree_type = flyweight.TreeTypeFactory().get("Oak", "green", "oak.png")

        with pytest.raises(AttributeError):
            tree_type.color = "red"
