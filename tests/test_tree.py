"""Tests for widget tree structure and keyboard routing."""

import gc

import pytest

from conftest import RecordingWidget
from textvision.errors import TextVisionError, WidgetTreeError
from textvision.event.keypress import Key, KeyEvent
from textvision.widgets.base import Widget
from textvision.widgets.window import Window


class TestTreeStructure:
    """Tests for adding, removing and reordering children."""

    def test_parent_constructor_argument(self) -> None:
        root = Widget(0, 0, 10, 10)
        child = Widget(1, 1, 2, 2, parent=root)
        assert child.parent is root
        assert root.children == [child]

    def test_children_is_a_copy(self) -> None:
        root = Widget()
        Widget(parent=root)
        root.children.clear()
        assert len(root.children) == 1

    def test_add_child_twice_fails(self) -> None:
        root = Widget()
        other = Widget()
        child = Widget(parent=root)
        with pytest.raises(WidgetTreeError):
            other.add_child(child)

    def test_cycles_are_rejected(self) -> None:
        root = Widget()
        child = Widget(parent=root)
        grandchild = Widget(parent=child)
        with pytest.raises(WidgetTreeError):
            root.add_child(root)
        with pytest.raises(WidgetTreeError):
            grandchild.add_child(root)

    def test_tree_error_hierarchy(self) -> None:
        assert issubclass(WidgetTreeError, TextVisionError)
        assert issubclass(WidgetTreeError, ValueError)

    def test_remove_child_clears_parent(self) -> None:
        root = Widget(5, 5, 10, 10)
        child = Widget(1, 1, 2, 2, parent=root)
        root.remove_child(child)
        assert child.parent is None
        assert root.children == []
        assert (child.absolute_x, child.absolute_y) == (1, 1)
        with pytest.raises(WidgetTreeError):
            root.remove_child(child)

    def test_parent_reference_is_weak(self) -> None:
        root = Widget()
        child = Widget(parent=root)
        del root
        gc.collect()
        assert child.parent is None

    def test_raise_child(self) -> None:
        root = Widget()
        a = Widget(parent=root)
        b = Widget(parent=root)
        root.raise_child(b)
        assert root.children == [b, a]
        with pytest.raises(WidgetTreeError):
            root.raise_child(Widget())

    def test_walk_is_depth_first_front_to_back(self) -> None:
        root = Widget()
        a = Widget(parent=root)
        a1 = Widget(parent=a)
        b = Widget(parent=root)
        assert list(root.walk()) == [(0, root), (1, a), (2, a1), (1, b)]


class TestWindowStructure:
    """Tests for window-only fields."""

    def test_primary_must_be_direct_child(self) -> None:
        window = Window("W", 0, 0, 10, 10)
        child = Widget(parent=window)
        grandchild = Widget(parent=child)
        with pytest.raises(WidgetTreeError):
            window.primary = grandchild
        window.primary = child
        assert window.primary is child

    def test_removing_primary_clears_it(self) -> None:
        window = Window("W", 0, 0, 10, 10)
        child = Widget(parent=window)
        window.primary = child
        window.remove_child(child)
        assert window.primary is None

    def test_default_flags(self) -> None:
        window = Window("W")
        assert window.resizable is True
        assert window.modal is False
        assert window.centered is False
        assert window.status_bar is None
        assert repr(window) == "Window('W', 0, 0, 0x0)"


class TestKeyboardRouting:
    """Tests for keypress routing along the active chain."""

    def test_first_child_is_active(self) -> None:
        root = Widget()
        a = Widget(parent=root)
        Widget(parent=root)
        assert root.active is a

    def test_deepest_active_widget_gets_first_chance(self) -> None:
        root = RecordingWidget()
        child = RecordingWidget(parent=root)
        leaf = RecordingWidget(parent=child)
        event = KeyEvent(key=Key.ENTER, raw="\r")

        assert root.dispatch_keypress(event) is leaf
        assert leaf.keys == [event]
        assert child.keys == []

    def test_unconsumed_key_bubbles(self) -> None:
        root = RecordingWidget()
        child = RecordingWidget(parent=root)
        leaf = RecordingWidget(parent=child, consume=False)

        assert root.dispatch_keypress(KeyEvent(char="x", raw="x")) is child
        assert len(leaf.keys) == 1

    def test_activate(self) -> None:
        root = Widget()
        a = RecordingWidget(parent=root)
        b = RecordingWidget(parent=root)
        root.activate(b)

        assert root.dispatch_keypress(KeyEvent(key=Key.TAB)) is b
        assert a.keys == []
        with pytest.raises(WidgetTreeError):
            root.activate(Widget())

    def test_removing_active_moves_focus(self) -> None:
        root = Widget()
        a = Widget(parent=root)
        b = Widget(parent=root)
        root.remove_child(a)
        assert root.active is b
        root.remove_child(b)
        assert root.active is None
