"""Anchor-based placement of child rectangles inside a resizable parent."""

from __future__ import annotations

import enum
from collections.abc import Hashable
from dataclasses import dataclass


def _cdiv(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


@dataclass(frozen=True)
class Anchor:
    """An anchor point as a percentage of the parent's width and height."""

    cx: int
    cy: int


TOP_LEFT = Anchor(0, 0)
TOP_CENTER = Anchor(50, 0)
TOP_RIGHT = Anchor(100, 0)
MIDDLE_LEFT = Anchor(0, 50)
MIDDLE_CENTER = Anchor(50, 50)
MIDDLE_RIGHT = Anchor(100, 50)
BOTTOM_LEFT = Anchor(0, 100)
BOTTOM_CENTER = Anchor(50, 100)
BOTTOM_RIGHT = Anchor(100, 100)


@dataclass(frozen=True)
class Size:
    """A width and height, or a horizontal and vertical distance."""

    cx: int
    cy: int


@dataclass(frozen=True)
class Rect:
    """A rectangle given by its edges."""

    left: int
    top: int
    right: int
    bottom: int

    def width(self) -> int:
        return self.right - self.left

    def height(self) -> int:
        return self.bottom - self.top

    def offset(self, dx: int, dy: int) -> Rect:
        """Return the rectangle moved by dx and dy."""
        return Rect(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)


class MoveFlags(enum.IntFlag):
    """Flags describing how a child must be repositioned."""

    NO_SIZE = 0x0001
    NO_MOVE = 0x0002
    NO_Z_ORDER = 0x0004
    NO_ACTIVATE = 0x0010
    NO_COPY_BITS = 0x0100
    NO_REPOSITION = 0x0200


@dataclass
class LayoutItem:
    """Layout settings of one child: anchors and the fixed margins to them."""

    key: Hashable
    anchor_top_left: Anchor = TOP_LEFT
    margin_top_left: Size = Size(0, 0)
    anchor_bottom_right: Anchor = TOP_LEFT
    margin_bottom_right: Size = Size(0, 0)
    callback_id: int = 0
    refresh_on_resize: bool = False


def make_item(
    key: Hashable,
    child_rect: Rect,
    parent_rect: Rect,
    top_left: Anchor,
    bottom_right: Anchor | None = None,
) -> LayoutItem:
    """Build the layout settings that keep child_rect at its place in parent_rect."""
    if bottom_right is None:
        bottom_right = top_left
    child = child_rect.offset(-parent_rect.left, -parent_rect.top)
    width, height = parent_rect.width(), parent_rect.height()
    margin_tl = Size(
        child.left - _cdiv(width * top_left.cx, 100),
        child.top - _cdiv(height * top_left.cy, 100),
    )
    margin_br = Size(
        child.right - _cdiv(width * bottom_right.cx, 100),
        child.bottom - _cdiv(height * bottom_right.cy, 100),
    )
    return LayoutItem(key, top_left, margin_tl, bottom_right, margin_br)


def new_child_position(
    item: LayoutItem, parent_rect: Rect, current_rect: Rect
) -> tuple[Rect, MoveFlags]:
    """Return the child's new rectangle and the flags for moving it there."""
    width, height = parent_rect.width(), parent_rect.height()
    new = Rect(
        item.margin_top_left.cx + _cdiv(width * item.anchor_top_left.cx, 100),
        item.margin_top_left.cy + _cdiv(height * item.anchor_top_left.cy, 100),
        item.margin_bottom_right.cx + _cdiv(width * item.anchor_bottom_right.cx, 100),
        item.margin_bottom_right.cy + _cdiv(height * item.anchor_bottom_right.cy, 100),
    ).offset(parent_rect.left, parent_rect.top)

    same_size = (
        new.width() == current_rect.width() and new.height() == current_rect.height()
    )
    flags = MoveFlags.NO_Z_ORDER | MoveFlags.NO_ACTIVATE | MoveFlags.NO_REPOSITION
    if item.refresh_on_resize and not same_size:
        flags |= MoveFlags.NO_COPY_BITS
    if new.left == current_rect.left and new.top == current_rect.top:
        flags |= MoveFlags.NO_MOVE
    if same_size:
        flags |= MoveFlags.NO_SIZE
    return new, flags


def anchor_margins(item: LayoutItem, child_size: Size) -> Rect:
    """Return the parent's margins around the child when it has child_size."""
    size = Size(
        child_size.cx + item.margin_top_left.cx - item.margin_bottom_right.cx,
        child_size.cy + item.margin_top_left.cy - item.margin_bottom_right.cy,
    )
    percent = Size(
        item.anchor_bottom_right.cx - item.anchor_top_left.cx,
        item.anchor_bottom_right.cy - item.anchor_top_left.cy,
    )
    if percent.cx == 0 or percent.cy == 0:
        raise ValueError("child does not resize with its parent in both directions")
    return Rect(
        _cdiv(size.cx * item.anchor_top_left.cx, percent.cx) + item.margin_top_left.cx,
        _cdiv(size.cy * item.anchor_top_left.cy, percent.cy) + item.margin_top_left.cy,
        _cdiv(size.cx * (100 - item.anchor_bottom_right.cx), percent.cx)
        - item.margin_bottom_right.cx,
        _cdiv(size.cy * (100 - item.anchor_bottom_right.cy), percent.cy)
        - item.margin_bottom_right.cy,
    )