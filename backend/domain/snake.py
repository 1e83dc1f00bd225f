"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Optional, Tuple

from .constants import Cell, is_cell


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        death_reason: 'wall' or 'self' once the snake has died
    """

    def __init__(self, positions: Iterable[Cell]):
        self.positions = deque(positions)
        if not self.positions:
            raise ValueError("Snake needs at least one segment.")
        for cell in self.positions:
            if not is_cell(cell):
                raise ValueError(f"Snake segment must be an (x, y) tuple of ints, got {cell!r}")
        if len(set(self.positions)) != len(self.positions):
            raise ValueError(f"Snake segments overlap: {list(self.positions)}")
        self.death_reason: Optional[str] = None

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def occupies(self, cell: Cell) -> bool:
        return cell in self.positions

    def hits_body(self, cell: Cell) -> bool:
        """
        True if cell lands on any segment after the head.

        The current tail counts even though it would move away on a
        non-growing step.
        """
        for i in range(1, len(self.positions)):
            if self.positions[i] == cell:
                return True
        return False

    def advance(self, new_head: Cell, grow: bool) -> None:
        self.positions.appendleft(new_head)
        if not grow:
            self.positions.pop()

    def kill(self, reason: str) -> None:
        self.death_reason = reason

    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self.positions)
