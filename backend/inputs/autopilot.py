"""
Autopilot input source - picks random safe moves.
"""

import random
from typing import Callable, List, Optional

from domain.constants import opposite
from domain.game_state import GameState, Phase
from .base import INTENT_DIRECTIONS, InputSource, Intent


class AutopilotInputSource(InputSource):
    """
    Steers the snake with a random direction that avoids walls and its own
    body, and presses Start whenever no game is running.
    """

    def __init__(self, state_provider: Callable[[], GameState], rng: Optional[random.Random] = None):
        self.state_provider = state_provider
        self.rng = rng or random.Random()

    def poll_intents(self) -> List[Intent]:
        state = self.state_provider()
        if state.phase != Phase.RUNNING:
            return [Intent.START]
        return [self.choose_move(state)]

    def choose_move(self, state: GameState) -> Intent:
        head_x, head_y = state.head
        reverse = opposite(state.heading)

        # Filter out moves that:
        # 1. Reverse into the neck (the engine would ignore them)
        # 2. Hit walls
        # 3. Hit the body (the tail counts, the engine treats it as fatal)
        valid_moves: List[Intent] = []
        for intent, (dx, dy) in INTENT_DIRECTIONS.items():
            if (dx, dy) == reverse:
                continue

            new_x, new_y = head_x + dx, head_y + dy
            if (new_x < 0 or new_x >= state.board_size or
                    new_y < 0 or new_y >= state.board_size):
                continue

            if (new_x, new_y) in state.snake[1:]:
                continue

            valid_moves.append(intent)

        # No safe move left, the snake dies either way
        if not valid_moves:
            return self.rng.choice(list(INTENT_DIRECTIONS))

        return self.rng.choice(valid_moves)
