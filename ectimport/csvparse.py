"""Splitting of one CSV line into its fields."""

from __future__ import annotations

TAB_NAME = "<Tab>"
QUOTE = '"'


def _decode_separator(separator: str) -> str:
    if separator.casefold() == TAB_NAME.casefold():
        return "\t"
    return separator


def parse_line(line: str, separator: str = ";") -> list[str]:
    """Split a CSV line into fields.

    The separator "<Tab>" (any case) stands for a tab. Quoted parts may hold
    the separator, and a doubled quote inside them stands for one quote.
    A trailing empty field is dropped, so an empty line gives no fields.
    """
    sep = _decode_separator(separator)
    items: list[str] = []
    part: list[str] = []
    in_quotation = False
    chars = iter(enumerate(line))
    for index, ch in chars:
        if in_quotation:
            if ch == QUOTE:
                if line[index + 1:index + 2] == QUOTE:
                    part.append(ch)
                    next(chars, None)
                else:
                    in_quotation = False
            else:
                part.append(ch)
        elif ch == sep:
            items.append("".join(part))
            part = []
        elif ch == QUOTE:
            in_quotation = True
        else:
            part.append(ch)
    if part:
        items.append("".join(part))
    return items