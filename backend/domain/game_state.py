"""
GameState entity - an immutable snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .constants import Cell, Direction


class Phase(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    OVER = "over"


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game handed to renderers.

    Attributes:
        snake: cells from head (index 0) to tail
        food: position of the single food cell
        direction: heading the snake will take on the next tick
        heading: direction of the last move; reversals are judged against it
        score: food eaten since the last start
        phase: NOT_STARTED, RUNNING or OVER
        board_size: width and height of the square board
        tick: successful moves since the last start
        death_reason: 'wall' or 'self' when phase is OVER
    """

    snake: Tuple[Cell, ...]
    food: Cell
    direction: Direction
    heading: Direction
    score: int
    phase: Phase
    board_size: int
    tick: int = 0
    death_reason: Optional[str] = None

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def is_over(self) -> bool:
        return self.phase == Phase.OVER

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly form consumed by the browser frontend."""
        return {
            "snakeCells": [list(cell) for cell in self.snake],
            "food": list(self.food),
            "score": self.score,
            "phase": self.phase.value,
            "direction": list(self.direction),
            "heading": list(self.heading),
            "boardSize": self.board_size,
            "tick": self.tick,
            "deathReason": self.death_reason,
        }

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        o = snake body
        Row 0 is printed first (top of the screen).
        """
        board = [['.' for _ in range(self.board_size)] for _ in range(self.board_size)]

        fx, fy = self.food
        board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if pos_idx == 0 else 'o'

        result = []
        for y in range(self.board_size):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # Column labels use the last digit so wide boards stay aligned
        result.append("   " + " ".join(str(i % 10) for i in range(self.board_size)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState phase={self.phase.value}, tick={self.tick}, "
            f"length={len(self.snake)}, food={self.food}, score={self.score}>"
        )
