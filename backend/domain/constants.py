"""
Game constants for the snake engine.

Coordinates are screen coordinates: x grows to the right, y grows downward.
"""

from typing import Tuple

from config import DEFAULT_BOARD_SIZE, DEFAULT_TICK_INTERVAL_MS

Cell = Tuple[int, int]
Direction = Tuple[int, int]

# Movement directions
UP: Direction = (0, -1)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)
VALID_DIRECTIONS = {UP, DOWN, LEFT, RIGHT}

# Game settings
BOARD_SIZE = DEFAULT_BOARD_SIZE
TICK_INTERVAL_MS = DEFAULT_TICK_INTERVAL_MS

INITIAL_SNAKE: Tuple[Cell, ...] = ((10, 10),)
INITIAL_FOOD: Cell = (5, 5)
INITIAL_DIRECTION: Direction = DOWN


def opposite(direction: Direction) -> Direction:
    return (-direction[0], -direction[1])



def is_cell(value) -> bool:
    """True for an (x, y) tuple of two ints."""
    return (
        isinstance(value, tuple)
        and len(value) == 2
        and all(isinstance(v, int) and not isinstance(v, bool) for v in value)
    )


def is_direction(value) -> bool:
    return is_cell(value) and value in VALID_DIRECTIONS
