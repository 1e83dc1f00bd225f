"""
Domain entities for the snake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (HTTP API, scheduling, rendering).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_DIRECTIONS,
    BOARD_SIZE, TICK_INTERVAL_MS, INITIAL_SNAKE, INITIAL_FOOD, INITIAL_DIRECTION,
    opposite, is_cell, is_direction,
)
from .snake import Snake
from .game_state import GameState, Phase
from .random_source import RandomCellProvider, UniformCellProvider, ScriptedCellProvider

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_DIRECTIONS',
    'BOARD_SIZE', 'TICK_INTERVAL_MS', 'INITIAL_SNAKE', 'INITIAL_FOOD', 'INITIAL_DIRECTION',
    'opposite', 'is_cell', 'is_direction',
    'Snake',
    'GameState', 'Phase',
    'RandomCellProvider', 'UniformCellProvider', 'ScriptedCellProvider',
]
