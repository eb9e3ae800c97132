import pytest

from ectimport.geometry import (
    BOTTOM_RIGHT,
    TOP_LEFT,
    TOP_RIGHT,
    LayoutItem,
    MoveFlags,
    Rect,
    Size,
    make_item,
)
from ectimport.layout import Layout

PARENT = Rect(0, 0, 200, 100)
CHILD = Rect(10, 20, 190, 80)


def test_arrange_with_same_parent_moves_nothing():
    layout = Layout()
    layout.add_anchor("a", CHILD, PARENT, TOP_LEFT, BOTTOM_RIGHT)
    layout.add_anchor("b", CHILD, PARENT, BOTTOM_RIGHT)
    assert layout.arrange(PARENT, {"a": CHILD, "b": CHILD}) == []


def test_empty_layout_arranges_nothing():
    assert Layout().arrange(PARENT, {}) == []


def test_bottom_right_anchor_moves_without_resizing():
    layout = Layout()
    layout.add_anchor("btn", CHILD, PARENT, BOTTOM_RIGHT)
    grown = Rect(0, 0, 250, 130)
    moves = layout.arrange(grown, {"btn": CHILD})
    assert len(moves) == 1
    key, rect, flags = moves[0]
    assert key == "btn"
    assert rect == CHILD.offset(50, 30)
    assert flags & MoveFlags.NO_SIZE
    assert not flags & MoveFlags.NO_MOVE


def test_stretched_child_resizes_in_place():
    layout = Layout()
    layout.add_anchor("edit", CHILD, PARENT, TOP_LEFT, BOTTOM_RIGHT)
    grown = Rect(0, 0, 250, 130)
    rect, flags = layout.anchor_position("edit", grown, CHILD)
    assert (rect.left, rect.top) == (CHILD.left, CHILD.top)
    assert rect.width() == CHILD.width() + 50
    assert rect.height() == CHILD.height() + 30
    assert flags & MoveFlags.NO_MOVE
    assert not flags & MoveFlags.NO_SIZE


def test_arrange_returns_new_rect_matching_anchor_position():
    layout = Layout()
    layout.add_anchor("x", CHILD, PARENT, TOP_RIGHT)
    grown = Rect(0, 0, 300, 100)
    moves = layout.arrange(grown, {"x": CHILD})
    expected = layout.anchor_position("x", grown, CHILD)
    assert moves == [("x", expected[0], expected[1])]


def test_duplicate_anchor_raises():
    layout = Layout()
    layout.add_anchor("a", CHILD, PARENT, TOP_LEFT)
    with pytest.raises(ValueError):
        layout.add_anchor("a", CHILD, PARENT, TOP_LEFT)


def test_remove_anchor():
    layout = Layout()
    layout.add_anchor("a", CHILD, PARENT, TOP_LEFT)
    layout.remove_anchor("a")
    with pytest.raises(KeyError):
        layout.anchor_position("a", PARENT, CHILD)
    with pytest.raises(KeyError):
        layout.remove_anchor("a")


def test_remove_all_clears_everything():
    layout = Layout()
    layout.add_anchor("a", CHILD, PARENT, BOTTOM_RIGHT)
    layout.add_anchor_callback()
    layout.remove_all()
    assert layout.arrange(Rect(0, 0, 400, 400), {"a": CHILD}) == []
    assert layout.add_anchor_callback() == 1


def test_callback_ids_count_up():
    layout = Layout()
    assert [layout.add_anchor_callback() for _ in range(3)] == [1, 2, 3]


def test_default_callback_skips_slot():
    layout = Layout()
    layout.add_anchor_callback()
    assert layout.arrange(Rect(0, 0, 400, 400), {}) == []


class _CallbackLayout(Layout):
    def arrange_callback(self, item: LayoutItem) -> LayoutItem | None:
        if item.callback_id == 1:
            return make_item("dyn", CHILD, PARENT, BOTTOM_RIGHT)
        return None


def test_overridden_callback_places_child():
    layout = _CallbackLayout()
    assert layout.add_anchor_callback() == 1
    layout.add_anchor_callback()
    moves = layout.arrange(Rect(0, 0, 220, 110), {"dyn": CHILD})
    assert [(key, rect) for key, rect, _ in moves] == [("dyn", CHILD.offset(20, 10))]


def test_anchor_margins_round_trip():
    layout = Layout()
    layout.add_anchor("a", CHILD, PARENT, TOP_LEFT, BOTTOM_RIGHT)
    margins = layout.anchor_margins("a", Size(CHILD.width(), CHILD.height()))
    assert margins == Rect(
        CHILD.left - PARENT.left,
        CHILD.top - PARENT.top,
        PARENT.right - CHILD.right,
        PARENT.bottom - CHILD.bottom,
    )


def test_anchor_margins_errors():
    layout = Layout()
    layout.add_anchor("fixed", CHILD, PARENT, TOP_LEFT)
    with pytest.raises(ValueError):
        layout.anchor_margins("fixed", Size(10, 10))
    with pytest.raises(KeyError):
        layout.anchor_margins("missing", Size(10, 10))