"""
Tests for the domain package - constants, Snake, GameState and cell providers.
"""

import dataclasses
import pytest
import sys
import os
import random
from collections import deque

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (
    UP, DOWN, LEFT, RIGHT,
    VALID_DIRECTIONS,
    opposite,
    is_cell,
    is_direction,
    Snake,
    GameState,
    Phase,
    UniformCellProvider,
    ScriptedCellProvider,
)


class TestDirections:
    """Tests for direction constants and helpers."""

    def test_screen_coordinates(self):
        """Up decreases y, down increases y."""
        assert UP == (0, -1)
        assert DOWN == (0, 1)
        assert LEFT == (-1, 0)
        assert RIGHT == (1, 0)
        assert VALID_DIRECTIONS == {UP, DOWN, LEFT, RIGHT}

    def test_opposite(self):
        assert opposite(UP) == DOWN
        assert opposite(LEFT) == RIGHT

    def test_is_cell_requires_int_tuple(self):
        assert is_cell((3, 4)) is True
        assert is_cell([3, 4]) is False
        assert is_cell((3, 4, 5)) is False
        assert is_cell((3.0, 4)) is False
        assert is_cell((True, 4)) is False

    def test_is_direction(self):
        assert is_direction(RIGHT) is True
        assert is_direction([1, 0]) is False
        assert is_direction((2, 0)) is False
        assert is_direction(None) is False


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_initialization(self):
        """Snake stores its segments head first in a deque."""
        snake = Snake([(5, 5), (4, 5)])
        assert isinstance(snake.positions, deque)
        assert snake.head == (5, 5)
        assert len(snake) == 2
        assert snake.death_reason is None

    def test_advance_without_growth_drops_tail(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        snake.advance((6, 5), grow=False)
        assert snake.cells() == ((6, 5), (5, 5), (4, 5))

    def test_advance_with_growth_keeps_tail(self):
        snake = Snake([(5, 5), (4, 5)])
        snake.advance((6, 5), grow=True)
        assert snake.cells() == ((6, 5), (5, 5), (4, 5))

    def test_hits_body_ignores_head_and_counts_tail(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.hits_body((5, 5)) is False
        assert snake.hits_body((4, 5)) is True
        assert snake.hits_body((3, 5)) is True
        assert snake.hits_body((9, 9)) is False

    def test_kill_records_reason(self):
        snake = Snake([(5, 5)])
        snake.kill("wall")
        assert snake.death_reason == "wall"

    def test_rejects_overlap_and_empty(self):
        with pytest.raises(ValueError):
            Snake([(1, 1), (1, 1)])
        with pytest.raises(ValueError):
            Snake([])

    def test_rejects_malformed_segments(self):
        """Segments must be hashable (x, y) tuples of ints."""
        with pytest.raises(ValueError, match="tuple of ints"):
            Snake([[1, 1]])
        with pytest.raises(ValueError):
            Snake([(1, 1), (1, 2, 3)])


def _state(**overrides):
    values = dict(
        snake=((1, 1), (1, 0)),
        food=(0, 2),
        direction=DOWN,
        heading=DOWN,
        score=3,
        phase=Phase.RUNNING,
        board_size=3,
        tick=7,
    )
    values.update(overrides)
    return GameState(**values)


class TestGameState:
    """Tests for the GameState snapshot."""

    def test_snapshot_is_immutable(self):
        state = _state()
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.score = 10

    def test_to_dict(self):
        """to_dict produces the JSON the frontend reads."""
        assert _state().to_dict() == {
            "snakeCells": [[1, 1], [1, 0]],
            "food": [0, 2],
            "score": 3,
            "phase": "running",
            "direction": [0, 1],
            "heading": [0, 1],
            "boardSize": 3,
            "tick": 7,
            "deathReason": None,
        }

    def test_print_board(self):
        """Rows are printed top to bottom with head, body and food markers."""
        assert _state().print_board() == "\n".join([
            " 0 . o .",
            " 1 . H .",
            " 2 F . .",
            "   0 1 2",
        ])

    def test_head_and_is_over(self):
        state = _state(phase=Phase.OVER, death_reason="self")
        assert state.head == (1, 1)
        assert state.is_over is True
        assert _state().is_over is False

    def test_repr(self):
        repr_str = repr(_state())
        assert "phase=running" in repr_str
        assert "score=3" in repr_str

    def test_equal_snapshots_compare_equal(self):
        assert _state() == _state()
        assert _state() != _state(score=4)


class TestCellProviders:
    """Tests for the injectable random cell sources."""

    def test_uniform_provider_stays_on_board(self):
        provider = UniformCellProvider(seed=5)
        for _ in range(500):
            x, y = provider.random_cell(4)
            assert 0 <= x < 4
            assert 0 <= y < 4

    def test_uniform_provider_is_reproducible_with_seed(self):
        a = UniformCellProvider(seed=11)
        b = UniformCellProvider(rng=random.Random(11))
        assert [a.random_cell(20) for _ in range(10)] == [b.random_cell(20) for _ in range(10)]

    def test_scripted_provider_replays_and_exhausts(self):
        provider = ScriptedCellProvider([(1, 2), (3, 4)])
        assert provider.random_cell(20) == (1, 2)
        assert provider.random_cell(20) == (3, 4)
        with pytest.raises(LookupError):
            provider.random_cell(20)
        assert provider.calls == 3
