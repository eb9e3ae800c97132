# ectimport

Helpers for importing bookkeeping entries from CSV files. The package has
two parts: a CSV line splitter, and pure geometry for dialogs whose
controls follow the window when it is resized.

## Modules

- `ectimport.csvparse.parse_line(line, separator=";")` splits one CSV line
  into a list of fields. Quoted parts may hold the separator. A doubled
  quote inside a quoted part stands for one quote. The separator `<Tab>`,
  in any letter case, stands for a tab. A trailing empty field is dropped,
  so an empty line gives an empty list.
- `ectimport.geometry` provides `Anchor`, `Size`, `Rect` and `MoveFlags`.
  It also provides the named anchors `TOP_LEFT`, `TOP_CENTER`, `TOP_RIGHT`,
  `MIDDLE_LEFT`, `MIDDLE_CENTER`, `MIDDLE_RIGHT`, `BOTTOM_LEFT`,
  `BOTTOM_CENTER` and `BOTTOM_RIGHT`. Anchors are percentages of the
  parent's width and height. Its functions are:
  - `make_item` builds a `LayoutItem` that keeps a child at fixed distances
    from its two anchor points.
  - `new_child_position` returns the child's new rectangle for a given
    parent rectangle, together with the move flags.
  - `anchor_margins` returns the margins the parent needs around a child of
    a given size. It raises `ValueError` if the child does not grow with the
    parent in both directions.
- `ectimport.layout.Layout` holds the anchored children of one parent.
  - `add_anchor` anchors a child. A key that is already anchored raises
    `ValueError`.
  - `remove_anchor`, `anchor_position` and `anchor_margins` raise `KeyError`
    for a key that is not anchored.
  - `remove_all` clears the layout.
  - `add_anchor_callback` adds a slot. `arrange` asks `arrange_callback` for
    each slot's layout. Override `arrange_callback` in a subclass; the base
    returns `None`, so slots are skipped.
  - `arrange(parent_rect, current_rects)` returns `(key, new_rect, flags)`
    for every child that must move or change size, in layout order.
- `ectimport.minmax` provides `Point`, `MinMaxInfo`, `MinMax` and
  `chain_min_max`.
  - `MinMax` holds optional overrides for the minimum tracking size, the
    maximum tracking size and the maximized rectangle. `apply` returns a
    `MinMaxInfo` with the overrides that are set applied.
  - `chain_min_max(info, child_info, extra)` merges the limits a child
    reported, enlarged by `extra`. The minimum becomes the larger of the
    two, the maximum the smaller. Only limits that the child changed are
    taken over.

## Example

```python
from ectimport.csvparse import parse_line
from ectimport.geometry import BOTTOM_RIGHT, TOP_LEFT, Rect
from ectimport.layout import Layout

fields = parse_line('2024-01-05;"Office; paper";12,5', ";")
# ['2024-01-05', 'Office; paper', '12,5']

layout = Layout()
layout.add_anchor("list", Rect(10, 10, 60, 30), Rect(0, 0, 200, 100),
                  TOP_LEFT, BOTTOM_RIGHT)
moves = layout.arrange(Rect(0, 0, 300, 200), {"list": Rect(10, 10, 60, 30)})
# [('list', Rect(left=10, top=10, right=160, bottom=130), <flags>)]
```

## What the package does not do

- It does not convert the split fields into dates, amounts or other typed
  values.
- It does not store import descriptions or settings.
- It has no command-line tool and no user interface of its own. It only
  computes positions and sizes; drawing and moving windows is up to the
  caller.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```