"""Minimum and maximum tracking sizes of a resizable window."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ectimport.geometry import Size


@dataclass(frozen=True)
class Point:
    """A pair of coordinates, or a width and height stored as a point."""

    x: int
    y: int


@dataclass(frozen=True)
class MinMaxInfo:
    """Sizes and position a window may take when maximized or resized."""

    max_size: Point = Point(0, 0)
    max_position: Point = Point(0, 0)
    min_track_size: Point = Point(0, 0)
    max_track_size: Point = Point(0, 0)


class MinMax:
    """Optional overrides for a window's tracking sizes and maximized rectangle."""

    def __init__(self) -> None:
        self._min_track: Point | None = None
        self._max_track: Point | None = None
        self._max_position: Point | None = None
        self._max_size: Point | None = None

    def apply(self, info: MinMaxInfo) -> MinMaxInfo:
        """Return info with every override that is set applied to it."""
        if self._min_track is not None:
            info = replace(info, min_track_size=self._min_track)
        if self._max_track is not None:
            info = replace(info, max_track_size=self._max_track)
        if self._max_position is not None and self._max_size is not None:
            info = replace(
                info, max_position=self._max_position, max_size=self._max_size
            )
        return info

    def set_min_track_size(self, width: int, height: int) -> None:
        """Set the smallest size the window may be resized to."""
        self._min_track = Point(width, height)

    def reset_min_track_size(self) -> None:
        """Fall back to the default minimum tracking size."""
        self._min_track = None

    def set_max_track_size(self, width: int, height: int) -> None:
        """Set the largest size the window may be resized to."""
        self._max_track = Point(width, height)

    def reset_max_track_size(self) -> None:
        """Fall back to the default maximum tracking size."""
        self._max_track = None

    def set_maximized_rect(self, left: int, top: int, right: int, bottom: int) -> None:
        """Set the rectangle the window takes when maximized."""
        self._max_position = Point(left, top)
        self._max_size = Point(right - left, bottom - top)

    def reset_maximized_rect(self) -> None:
        """Fall back to the default maximized rectangle."""
        self._max_position = None
        self._max_size = None


def chain_min_max(info: MinMaxInfo, child_info: MinMaxInfo, extra: Size) -> MinMaxInfo:
    """Combine a window's tracking sizes with those a child reported.

    child_info is what the child answered when handed info; extra is the space
    the parent adds around the child. Only limits the child changed are taken
    over: the minimum becomes the larger, the maximum the smaller of the two.
    """
    changed_max = info.max_track_size != child_info.max_track_size
    changed_min = info.min_track_size != child_info.min_track_size

    child_max = Point(
        child_info.max_track_size.x + extra.cx, child_info.max_track_size.y + extra.cy
    )
    child_min = Point(
        child_info.min_track_size.x + extra.cx, child_info.min_track_size.y + extra.cy
    )

    if changed_min:
        info = replace(
            info,
            min_track_size=Point(
                max(info.min_track_size.x, child_min.x),
                max(info.min_track_size.y, child_min.y),
            ),
        )
    if changed_max:
        info = replace(
            info,
            max_track_size=Point(
                min(info.max_track_size.x, child_max.x),
                min(info.max_track_size.y, child_max.y),
            ),
        )
    return info