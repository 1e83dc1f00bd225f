"""
Plain-text renderers: an ASCII board for terminals and a holder that keeps
the latest snapshot for readers on other threads.
"""

import sys
import threading
from typing import Optional, TextIO

from domain.game_state import GameState, Phase
from .base import Renderer

PHASE_LABELS = {
    Phase.NOT_STARTED: "Press Enter to start",
    Phase.RUNNING: "Running",
    Phase.OVER: "Game Over!",
}


class TextRenderer(Renderer):
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def format(self, state: GameState) -> str:
        status = f"Score: {state.score} | {PHASE_LABELS[state.phase]}"
        if state.is_over and state.death_reason:
            status += f" (hit {state.death_reason})"
        return f"{status}\n{state.print_board()}\n"

    def render(self, state: GameState) -> None:
        self.stream.write("\n" + self.format(state))
        self.stream.flush()


class SnapshotRenderer(Renderer):
    """Keeps the most recent snapshot; the HTTP API reads it."""

    def __init__(self, initial: Optional[GameState] = None):
        self._lock = threading.Lock()
        self._latest = initial
        self.frames = 0

    def render(self, state: GameState) -> None:
        with self._lock:
            self._latest = state
            self.frames += 1

    @property
    def latest(self) -> Optional[GameState]:
        with self._lock:
            return self._latest
