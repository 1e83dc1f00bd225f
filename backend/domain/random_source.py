"""
Sources of random board cells used for food placement.
"""

import random
from typing import Iterable, Iterator, Optional

from .constants import Cell


class RandomCellProvider:
    """
    Interface for picking a cell uniformly over the whole board.

    The engine resamples until the returned cell is free, so implementations
    do not need to know where the snake is.
    """

    def random_cell(self, board_size: int) -> Cell:
        raise NotImplementedError


class UniformCellProvider(RandomCellProvider):
    """Draws cells from a random.Random instance, optionally seeded."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random(seed)

    def random_cell(self, board_size: int) -> Cell:
        x = self.rng.randint(0, board_size - 1)
        y = self.rng.randint(0, board_size - 1)
        return (x, y)


class ScriptedCellProvider(RandomCellProvider):
    """
    Replays a fixed sequence of cells, for deterministic games and tests.

    Raises:
        LookupError: When the script runs out of cells.
    """

    def __init__(self, cells: Iterable[Cell]):
        self._cells: Iterator[Cell] = iter(list(cells))
        self.calls = 0

    def random_cell(self, board_size: int) -> Cell:
        self.calls += 1
        try:
            return next(self._cells)
        except StopIteration:
            raise LookupError("Scripted cell provider is exhausted.")
