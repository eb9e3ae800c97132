"""Layout manager keeping anchored children in place while the parent resizes."""

from __future__ import annotations

from collections.abc import Hashable, Mapping

from ectimport.geometry import (
    Anchor,
    LayoutItem,
    MoveFlags,
    Rect,
    Size,
    anchor_margins,
    make_item,
    new_child_position,
)

_UNCHANGED = MoveFlags.NO_MOVE | MoveFlags.NO_SIZE


class Layout:
    """Anchored children and callback slots of one resizable parent."""

    def __init__(self) -> None:
        self._items: dict[Hashable, LayoutItem] = {}
        self._callbacks: list[LayoutItem] = []

    def add_anchor(
        self,
        key: Hashable,
        child_rect: Rect,
        parent_rect: Rect,
        top_left: Anchor,
        bottom_right: Anchor | None = None,
    ) -> LayoutItem:
        """Anchor a child so it keeps its place when the parent is resized."""
        if key in self._items:
            raise ValueError(f"child {key!r} is already anchored")
        item = make_item(key, child_rect, parent_rect, top_left, bottom_right)
        self._items[key] = item
        return item

    def add_anchor_callback(self) -> int:
        """Add a slot whose layout arrange_callback supplies; return its id."""
        item = LayoutItem(key=None, callback_id=len(self._callbacks) + 1)
        self._callbacks.append(item)
        return item.callback_id

    def arrange_callback(self, item: LayoutItem) -> LayoutItem | None:
        """Return the layout settings for a callback slot, or None to skip it.

        Subclasses that add callback slots override this; the base skips them.
        """
        return None

    def remove_anchor(self, key: Hashable) -> None:
        """Remove a child from the layout; KeyError if it is not anchored."""
        try:
            del self._items[key]
        except KeyError:
            raise KeyError(key) from None

    def remove_all(self) -> None:
        """Remove every anchored child and every callback slot."""
        self._items.clear()
        self._callbacks.clear()

    def _item(self, key: Hashable) -> LayoutItem:
        try:
            return self._items[key]
        except KeyError:
            raise KeyError(key) from None

    def anchor_position(
        self, key: Hashable, parent_rect: Rect, current_rect: Rect
    ) -> tuple[Rect, MoveFlags]:
        """Return where a child goes in parent_rect, with the flags for moving it."""
        return new_child_position(self._item(key), parent_rect, current_rect)

    def anchor_margins(self, key: Hashable, child_size: Size) -> Rect:
        """Return the parent's margins around a child of the given size."""
        return anchor_margins(self._item(key), child_size)

    def arrange(
        self, parent_rect: Rect, current_rects: Mapping[Hashable, Rect]
    ) -> list[tuple[Hashable, Rect, MoveFlags]]:
        """Return the children that must move or resize, in layout order.

        current_rects maps each child's key to its present rectangle.
        """
        moves: list[tuple[Hashable, Rect, MoveFlags]] = []
        if not self._items and not self._callbacks:
            return moves

        def place(item: LayoutItem) -> None:
            new, flags = new_child_position(item, parent_rect, current_rects[item.key])
            if flags & _UNCHANGED != _UNCHANGED:
                moves.append((item.key, new, flags))

        for item in self._items.values():
            place(item)
        for slot in self._callbacks:
            item = self.arrange_callback(slot)
            if item is not None:
                place(item)
        return moves