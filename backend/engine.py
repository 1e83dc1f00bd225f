"""
Single-player snake engine.

The engine is not thread-safe. All calls are expected to come from one
execution context (see game_loop.GameLoop); other threads read the
immutable GameState snapshots returned by get_state().
"""

import logging
from typing import Iterable, Optional

from domain.constants import (
    BOARD_SIZE,
    INITIAL_DIRECTION,
    INITIAL_FOOD,
    INITIAL_SNAKE,
    Cell,
    Direction,
    is_cell,
    is_direction,
    opposite,
)
from domain.game_state import GameState, Phase
from domain.random_source import RandomCellProvider, UniformCellProvider
from domain.snake import Snake

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Manages:
      - Board (square, board_size cells per side)
      - Snake
      - Food
      - Direction (current heading and the pending change)
      - Score
      - Phase (NOT_STARTED -> RUNNING -> OVER -> RUNNING ...)
    """

    def __init__(
        self,
        board_size: int = BOARD_SIZE,
        initial_snake: Optional[Iterable[Cell]] = None,
        initial_food: Optional[Cell] = None,
        initial_direction: Optional[Direction] = None,
        cell_provider: Optional[RandomCellProvider] = None,
    ):
        if board_size < 1:
            raise ValueError(f"Board size must be positive, got {board_size}.")
        self.board_size = board_size
        self.initial_snake = tuple(initial_snake) if initial_snake is not None else INITIAL_SNAKE
        self.initial_food = initial_food if initial_food is not None else INITIAL_FOOD
        self.initial_direction = initial_direction if initial_direction is not None else INITIAL_DIRECTION
        self.cell_provider = cell_provider or UniformCellProvider()

        self._validate_initial_layout()

        self._load_initial_layout()
        self.phase = Phase.NOT_STARTED

    def _validate_initial_layout(self):
        # Snake() rejects empty, malformed and overlapping bodies
        snake = Snake(self.initial_snake)
        for cell in snake.positions:
            if not self.in_bounds(cell):
                raise ValueError(f"Snake segment out of bounds at {cell}.")
        if not is_cell(self.initial_food):
            raise ValueError(f"Food must be an (x, y) tuple of ints, got {self.initial_food!r}.")
        if not self.in_bounds(self.initial_food):
            raise ValueError(f"Food out of bounds at {self.initial_food}.")
        if snake.occupies(self.initial_food):
            raise ValueError(f"Food at {self.initial_food} overlaps the snake.")
        if not is_direction(self.initial_direction):
            raise ValueError(f"Not a unit direction: {self.initial_direction!r}.")

    def _load_initial_layout(self):
        self.snake = Snake(self.initial_snake)
        self.food: Cell = self.initial_food
        self.heading: Direction = self.initial_direction
        self.pending_direction: Direction = self.initial_direction
        self.score = 0
        self.tick_count = 0

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.board_size and 0 <= y < self.board_size

    def reset(self):
        """Put the initial snake, food and direction back and start running."""
        self._load_initial_layout()
        self.phase = Phase.RUNNING
        logger.info("Game started on a %sx%s board", self.board_size, self.board_size)

    def start(self):
        """
        Handle a start intent.

        Starts a fresh game from NOT_STARTED or OVER. A game already in
        progress is left alone.
        """
        if self.phase == Phase.RUNNING:
            logger.debug("Start ignored, game already running")
            return
        self.reset()

    def set_direction(self, requested: Direction):
        """
        Queue a heading change for the next tick.

        Ignored unless the game is running, and ignored when requested is
        the exact opposite of the heading the snake last moved in.

        Raises:
            ValueError: If requested is not one of the four unit directions.
        """
        if not is_direction(requested):
            raise ValueError(f"Not a unit direction: {requested!r}")
        if self.phase != Phase.RUNNING:
            return
        if requested == opposite(self.heading):
            logger.debug("Rejected reversal %s while heading %s", requested, self.heading)
            return
        self.pending_direction = requested

    def tick(self):
        """
        Advance the snake by one cell.

          1) If the game is not running, do nothing
          2) Compute the new head from the pending direction
          3) Wall or body hit ends the game and leaves everything else as is
          4) Otherwise move; eating food grows the snake and respawns food
        """
        if self.phase != Phase.RUNNING:
            return

        direction = self.pending_direction
        hx, hy = self.snake.head
        new_head = (hx + direction[0], hy + direction[1])

        death_reason = self._collision_reason(new_head)
        if death_reason is not None:
            self.snake.kill(death_reason)
            self.phase = Phase.OVER
            logger.info(
                "Game over: hit %s at %s after %s ticks, score %s",
                death_reason, new_head, self.tick_count, self.score,
            )
            return

        self.heading = direction
        eats_food = new_head == self.food
        self.snake.advance(new_head, grow=eats_food)
        self.tick_count += 1

        if eats_food:
            self.score += 1
            self.food = self._random_free_cell()
            logger.debug("Food eaten at %s, score %s, new food at %s", new_head, self.score, self.food)

    def _collision_reason(self, cell: Cell) -> Optional[str]:
        if not self.in_bounds(cell):
            return "wall"
        if self.snake.hits_body(cell):
            return "self"
        return None

    def _random_free_cell(self) -> Cell:
        """
        Return a random cell not occupied by the snake.

        Simple rejection sampling over the whole board. If the snake ever
        filled every cell this would never return; on a board of the
        configured size that is not reached in practice.
        """
        while True:
            cell = self.cell_provider.random_cell(self.board_size)
            if not self.snake.occupies(cell):
                return cell

    def get_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            snake=self.snake.cells(),
            food=self.food,
            direction=self.pending_direction,
            heading=self.heading,
            score=self.score,
            phase=self.phase,
            board_size=self.board_size,
            tick=self.tick_count,
            death_reason=self.snake.death_reason,
        )
