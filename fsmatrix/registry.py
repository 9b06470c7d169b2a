# fsmatrix/registry.py

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Tuple

from .column import Column

if TYPE_CHECKING:  # pragma: no cover
    from .ui.renderer import Renderer


class ColumnRegistry:
    """Active columns keyed by horizontal position, at most one per position."""

    def __init__(self) -> None:
        self._columns: Dict[int, Column] = {}

    def __len__(self) -> int:
        return len(self._columns)

    def __contains__(self, position: object) -> bool:
        return position in self._columns

    def __iter__(self) -> Iterator[Tuple[int, Column]]:
        return iter(list(self._columns.items()))

    def get(self, position: int) -> Optional[Column]:
        return self._columns.get(position)

    def insert(self, position: int, column: Column) -> bool:
        """Add `column` at `position`. Returns False (and does nothing) if taken."""
        if position in self._columns:
            return False
        self._columns[position] = column
        return True

    def remove(self, position: int) -> None:
        self._columns.pop(position, None)

    def occupied_within(self, width: int) -> int:
        """Number of occupied positions that still fit in a grid `width` wide."""
        return sum(1 for position in self._columns if 0 <= position < width)

    def step_all(self, renderer: "Renderer") -> List[int]:
        """Step every column once and drop the ones that finished."""
        completed = [position for position, column in self if not column.step(renderer)]
        for position in completed:
            self.remove(position)
        return completed
