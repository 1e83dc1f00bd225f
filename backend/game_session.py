"""
Wires one engine to a queued input source, a snapshot renderer and a
background game loop, for use by the HTTP API.
"""

import logging
import threading
from typing import Optional

import config
from domain.game_state import GameState
from engine import GameEngine
from game_loop import GameLoop
from inputs.base import Intent
from inputs.queued import QueuedInputSource
from renderers.text import SnapshotRenderer

logger = logging.getLogger(__name__)


class GameSession:
    """
    The loop thread is the only writer to the engine. Request handlers
    push intents into the queue and read the latest snapshot.
    """

    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        interval_ms: Optional[int] = None,
        autostart_loop: bool = True,
    ):
        self.engine = engine or GameEngine(board_size=config.get_board_size())
        self.inputs = QueuedInputSource()
        self.renderer = SnapshotRenderer(initial=self.engine.get_state())
        self.loop = GameLoop(
            self.engine,
            self.inputs,
            renderer=self.renderer,
            interval_ms=interval_ms or config.get_tick_interval_ms(),
        )
        self.autostart_loop = autostart_loop
        self._lock = threading.Lock()

    def ensure_loop(self) -> None:
        """Start the background loop once, if this session owns one."""
        if not self.autostart_loop:
            return
        with self._lock:
            if not self.loop.is_running:
                logger.info("Starting background game loop")
                self.loop.start_background()

    def submit(self, intent: Intent) -> None:
        self.ensure_loop()
        self.inputs.push(intent)

    def submit_key(self, key: str) -> Optional[Intent]:
        self.ensure_loop()
        return self.inputs.push_key(key)

    def snapshot(self) -> GameState:
        self.ensure_loop()
        return self.renderer.latest

    def shutdown(self) -> None:
        with self._lock:
            self.loop.stop(timeout=1.0)
