"""Fixed-width column helpers for table output.

Widths are counted in pad units of ``pad_length`` characters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_PAD_LENGTH = 4
DEFAULT_TRUNCATION_MARKER = "... "


def break_line(clusters: int, pad_length: int = DEFAULT_PAD_LENGTH) -> str:
    """Border made of '=' spanning the given number of pad units."""
    return "=" * (pad_length * clusters)


def append_tab(
    value: Any,
    pad_count: int,
    pad_length: int = DEFAULT_PAD_LENGTH,
    marker: str = DEFAULT_TRUNCATION_MARKER,
) -> str:
    """Pad or cut ``value`` to exactly ``pad_count`` pad units.

    The value is followed by a column's worth of spaces and cut at the column
    width. When the character at the cut is not a space the text overflowed, so
    it is cut shorter and ``marker`` appended. A ``pad_count`` below 1 returns
    the value unchanged.
    """
    text = str(value)
    if pad_count < 1:
        return text

    width = pad_length * pad_count
    result = text + " " * width
    if result[width - 1] != " ":
        return result[: width - len(marker)] + marker
    return result[:width]


@dataclass(frozen=True)
class ColumnLayout:
    """Column widths of the directory listing table, in pad units."""

    name: int = 10
    attributes: int = 8
    size: int = 3
    pad_length: int = DEFAULT_PAD_LENGTH
    marker: str = DEFAULT_TRUNCATION_MARKER

    def cell(self, value: Any, pad_count: int) -> str:
        return append_tab(value, pad_count, self.pad_length, self.marker)

    def border(self) -> str:
        return "".join(
            break_line(c, self.pad_length) for c in (self.name, self.attributes, self.size)
        )

    def row(self, name: Any, attributes: Any, size: Any = None) -> str:
        text = self.cell(name, self.name) + self.cell(attributes, self.attributes)
        if size is not None:
            text += self.cell(size, self.size)
        return text

    def header(self) -> str:
        return self.row("File Name", "Attributes", "Size")
