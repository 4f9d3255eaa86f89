import pytest

from flut.models import HorizontalAlign, VerticalAlign
from flut.widgets.core import Rect, Stack
from flut.widgets.layout import Column, Row
from flut.widgets.painters import RectWidget, Spacing


def test_column_fills_gap_between_sized_children():
    constraint = Rect(0.0, 0.0, 100.0, 200.0)
    top, filler, bottom = Spacing(height=20.0), RectWidget(), Spacing(height=30.0)
    stack = Column(children=[top, filler, bottom]).build(constraint)
    assert isinstance(stack, Stack)
    assert [c.child for c in stack.children] == [top, filler, bottom]
    first, middle, last = stack.children
    assert first.position == (constraint.x, constraint.y)
    assert first.size == (constraint.width, 20.0)
    assert middle.position[1] == first.position[1] + first.size[1]
    assert middle.position[1] + middle.size[1] == last.position[1]
    assert last.position[1] + last.size[1] == constraint.bottom
    assert last.size == (constraint.width, 30.0)


def test_column_without_unsized_child_packs_in_order():
    constraint = Rect(5.0, 7.0, 50.0, 100.0)
    a, b = Spacing(height=10.0), Spacing(height=20.0)
    stack = Column(children=[a, b]).build(constraint)
    assert [c.child for c in stack.children] == [a, b]
    first, second = stack.children
    assert first.position == (constraint.x, constraint.y)
    assert second.position[1] == first.position[1] + first.size[1]
    assert all(c.size[0] == constraint.width for c in stack.children)


def test_column_build_consumes_children():
    column = Column(children=[Spacing(height=10.0)])
    column.build(Rect(0.0, 0.0, 10.0, 10.0))
    assert column.children == []
    assert column.build(Rect(0.0, 0.0, 10.0, 10.0)).children == []


@pytest.mark.parametrize("align", list(HorizontalAlign))
def test_column_alignment(align):
    constraint = Rect(0.0, 0.0, 100.0, 100.0)
    stack = Column(align=align, children=[Spacing(width=40.0, height=10.0)]).build(constraint)
    (child,) = stack.children
    x, width = child.position[0], child.size[0]
    assert width == 40.0
    if align is HorizontalAlign.LEFT:
        assert x == constraint.x
    elif align is HorizontalAlign.CENTER:
        assert x + width / 2 == constraint.center[0]
    else:
        assert x + width == constraint.right


def test_column_remaining_child_keeps_its_width():
    constraint = Rect(0.0, 0.0, 100.0, 60.0)
    filler = Spacing(width=30.0)
    stack = Column(align=HorizontalAlign.CENTER, children=[filler]).build(constraint)
    (child,) = stack.children
    assert child.size == (30.0, constraint.height)
    assert child.position[0] + 15.0 == constraint.center[0]


def test_column_drops_children_beyond_second_unsized():
    constraint = Rect(0.0, 0.0, 100.0, 100.0)
    head = Spacing(height=10.0)
    first_fill = RectWidget()
    skipped = Spacing(height=5.0)
    second_fill = RectWidget()
    foot = Spacing(height=20.0)
    stack = Column(children=[head, first_fill, skipped, second_fill, foot]).build(constraint)
    assert [c.child for c in stack.children] == [head, first_fill, foot]
    _, middle, last = stack.children
    assert middle.position[1] + middle.size[1] == last.position[1]
    assert last.position[1] + last.size[1] == constraint.bottom


def test_column_bottom_children_are_in_reverse_order():
    constraint = Rect(0.0, 0.0, 50.0, 100.0)
    fill, a, b = RectWidget(), Spacing(height=10.0), Spacing(height=20.0)
    stack = Column(children=[fill, a, b]).build(constraint)
    assert [c.child for c in stack.children] == [fill, b, a]
    _, placed_b, placed_a = stack.children
    assert placed_b.position[1] + placed_b.size[1] == constraint.bottom
    assert placed_a.position[1] + placed_a.size[1] == placed_b.position[1]


def test_row_fills_gap_between_sized_children():
    constraint = Rect(10.0, 0.0, 200.0, 50.0)
    left, filler, right = Spacing(width=20.0), RectWidget(), Spacing(width=30.0)
    stack = Row(children=[left, filler, right]).build(constraint)
    assert [c.child for c in stack.children] == [left, filler, right]
    first, middle, last = stack.children
    assert first.position == (constraint.x, constraint.y)
    assert first.size == (20.0, constraint.height)
    assert middle.position[0] == first.position[0] + first.size[0]
    assert middle.position[0] + middle.size[0] == last.position[0]
    assert last.position[0] + last.size[0] == constraint.right


@pytest.mark.parametrize("align", list(VerticalAlign))
def test_row_alignment(align):
    constraint = Rect(0.0, 0.0, 100.0, 100.0)
    stack = Row(align=align, children=[Spacing(width=10.0, height=40.0)]).build(constraint)
    (child,) = stack.children
    y, height = child.position[1], child.size[1]
    assert height == 40.0
    if align is VerticalAlign.TOP:
        assert y == constraint.y
    elif align is VerticalAlign.CENTER:
        assert y + height / 2 == constraint.center[1]
    else:
        assert y + height == constraint.bottom


def test_row_only_unsized_child_fills_constraint():
    constraint = Rect(3.0, 4.0, 80.0, 20.0)
    fill = RectWidget()
    stack = Row(children=[fill]).build(constraint)
    (child,) = stack.children
    assert child.child is fill
    assert child.position == (constraint.x, constraint.y)
    assert child.size == (constraint.width, constraint.height)