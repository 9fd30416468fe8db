"""
Screen layout planning and scroll bookkeeping.

Every game gets a fixed slot of GAME_SLOT_ROWS text rows no matter how much
it actually prints, so the number of games per screen depends only on the
content area. Wide terminals show two columns, filled by interleaving: even
list positions on the left, odd on the right.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

TWO_COLUMN_MIN_WIDTH = 80
GAME_SLOT_ROWS = 6


@dataclass(frozen=True)
class LayoutPlan:
    columns: int
    rows_per_column: int

    @property
    def page_size(self) -> int:
        return self.rows_per_column * self.columns


def plan(content_width: int, content_height: int, game_count: Optional[int] = None) -> LayoutPlan:
    """
    Decide column count and games per screen for a content area.

    `game_count`, when given, keeps a lone game in a single column even on a
    wide terminal. The page size is never below 1.
    """
    width = max(0, content_width)
    height = max(0, content_height)

    columns = 2 if width >= TWO_COLUMN_MIN_WIDTH else 1
    if game_count is not None and game_count <= 1:
        columns = 1

    rows_per_column = max(1, height // GAME_SLOT_ROWS)
    return LayoutPlan(columns=columns, rows_per_column=rows_per_column)


def interleave(items: Sequence[T]) -> Tuple[List[T], List[T]]:
    """Split items into (left, right) columns: even indexes left, odd right."""
    return list(items[0::2]), list(items[1::2])


class ScrollState:
    """Offset of the first visible game in the filtered list."""

    def __init__(self, offset: int = 0):
        self.offset = max(0, offset)

    def scroll_up(self) -> None:
        if self.offset > 0:
            self.offset -= 1

    def scroll_down(self, total: int, page_size: int) -> None:
        """Advance one game unless the last page is already fully visible."""
        if self.offset + page_size < total:
            self.offset += 1

    def clamp(self, total: int, page_size: int) -> int:
        """Pull the offset back into range after the list shrank or the page grew."""
        self.offset = min(self.offset, max(total - page_size, 0))
        self.offset = max(self.offset, 0)
        return self.offset

    def window(self, items: Sequence[T], page_size: int) -> List[T]:
        """The visible slice of `items`, clamping the offset first."""
        total = len(items)
        start = self.clamp(total, page_size)
        return list(items[start:min(start + page_size, total)])

    def indicator(self, total: int) -> str:
        """Page counter text such as "3/12"."""
        return f"{self.offset + 1}/{total}"
