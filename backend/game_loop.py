"""
Fixed-cadence clock that drives the engine.

Every step drains the input source, applies the intents, ticks the engine
when a game is running and hands the snapshot to the renderer. The loop is
the only caller of engine mutators, so running it on one thread (or
calling step() from one place) keeps all engine calls serialized.
"""

import logging
import threading
from typing import Callable, Optional

from domain.constants import TICK_INTERVAL_MS
from domain.game_state import GameState, Phase
from engine import GameEngine
from inputs.base import InputSource, apply_intent
from renderers.base import Renderer

logger = logging.getLogger(__name__)


class GameLoop:
    def __init__(
        self,
        engine: GameEngine,
        input_source: InputSource,
        renderer: Optional[Renderer] = None,
        interval_ms: int = TICK_INTERVAL_MS,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms} ms.")
        self.engine = engine
        self.input_source = input_source
        self.renderer = renderer
        self.interval_ms = interval_ms
        self.ticks = 0
        self._stop_event = threading.Event()
        self._sleep = sleep or self._stop_event.wait
        self._thread: Optional[threading.Thread] = None

    @property
    def interval_seconds(self) -> float:
        return self.interval_ms / 1000.0

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def step(self) -> GameState:
        """
        Run one loop iteration and return the resulting snapshot.

        A game that was (re)started during this step makes its first move
        on the next step, one interval later. Nothing ticks while the
        phase is NOT_STARTED or OVER.
        """
        was_running = self.engine.phase == Phase.RUNNING

        for intent in self.input_source.poll_intents():
            apply_intent(self.engine, intent)

        if was_running and self.engine.phase == Phase.RUNNING:
            self.engine.tick()
            self.ticks += 1

        state = self.engine.get_state()
        if self.renderer is not None:
            self.renderer.render(state)
        return state

    def run(self, max_ticks: Optional[int] = None, stop_when_over: bool = False) -> GameState:
        """
        Step at the configured interval until stopped.

        Args:
            max_ticks: stop after this many engine ticks (None = no limit)
            stop_when_over: stop as soon as a game ends

        Returns:
            The last snapshot produced
        """
        start_ticks = self.ticks
        state = self.engine.get_state()
        logger.info("Game loop running every %s ms", self.interval_ms)

        try:
            while not self._stop_event.is_set():
                state = self.step()
                if max_ticks is not None and self.ticks - start_ticks >= max_ticks:
                    break
                if stop_when_over and state.is_over:
                    break
                self._sleep(self.interval_seconds)
        except Exception:
            logger.exception("Game loop stopped by an unexpected error")
            raise
        finally:
            self._stop_event.clear()

        logger.info("Game loop stopped after %s ticks", self.ticks - start_ticks)
        return state

    def start_background(self) -> threading.Thread:
        """Run the loop on a daemon thread; returns the thread."""
        if self.is_running:
            raise RuntimeError("Game loop is already running.")
        self._stop_event.clear()
        self._thread = threading.Thread(target=self.run, name="game-loop", daemon=True)
        self._thread.start()
        return self._thread

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop_event.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)
        self._thread = None
