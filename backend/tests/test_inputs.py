"""
Tests for the inputs package - intents, key bindings and input sources.
"""

import pytest
import sys
import os
import random
import threading
from unittest.mock import Mock

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import UP, DOWN, LEFT, RIGHT, GameState, Phase
from inputs import (
    Intent,
    InputSource,
    KEY_BINDINGS,
    INTENT_DIRECTIONS,
    intent_for_key,
    parse_intent,
    apply_intent,
    QueuedInputSource,
    AutopilotInputSource,
)


def _state(snake, direction, phase=Phase.RUNNING, board_size=10, food=(5, 5), heading=None):
    return GameState(
        snake=tuple(snake),
        food=food,
        direction=direction,
        heading=heading or direction,
        score=0,
        phase=phase,
        board_size=board_size,
    )


class TestIntents:
    """Tests for Intent and its helpers."""

    def test_direction_intents_map_to_vectors(self):
        assert Intent.UP.direction == UP
        assert Intent.DOWN.direction == DOWN
        assert Intent.LEFT.direction == LEFT
        assert Intent.RIGHT.direction == RIGHT
        assert Intent.START.direction is None

    def test_arrow_keys_and_enter_are_bound(self):
        """The browser bindings: arrows steer, Enter starts."""
        assert intent_for_key("ArrowUp") == Intent.UP
        assert intent_for_key("ArrowDown") == Intent.DOWN
        assert intent_for_key("ArrowLeft") == Intent.LEFT
        assert intent_for_key("ArrowRight") == Intent.RIGHT
        assert intent_for_key("Enter") == Intent.START
        assert intent_for_key("q") is None

    def test_every_intent_has_a_key(self):
        assert set(KEY_BINDINGS.values()) == set(Intent)

    def test_parse_intent(self):
        assert parse_intent("up") == Intent.UP
        assert parse_intent("START") == Intent.START
        with pytest.raises(ValueError, match="Unknown intent"):
            parse_intent("jump")

    def test_apply_start_intent(self):
        engine = Mock()
        apply_intent(engine, Intent.START)
        engine.start.assert_called_once_with()
        engine.set_direction.assert_not_called()

    def test_apply_direction_intent(self):
        engine = Mock()
        apply_intent(engine, Intent.LEFT)
        engine.set_direction.assert_called_once_with((-1, 0))
        engine.start.assert_not_called()

    def test_base_source_is_abstract(self):
        with pytest.raises(NotImplementedError):
            InputSource().poll_intents()


class TestQueuedInputSource:
    """Tests for the thread-safe queued source."""

    def test_poll_drains_in_order(self):
        source = QueuedInputSource()
        source.push(Intent.START)
        source.push(Intent.LEFT)
        assert len(source) == 2

        assert source.poll_intents() == [Intent.START, Intent.LEFT]
        assert source.poll_intents() == []

    def test_push_key(self):
        source = QueuedInputSource()
        assert source.push_key("ArrowRight") == Intent.RIGHT
        assert source.push_key("Escape") is None
        assert source.poll_intents() == [Intent.RIGHT]

    def test_push_from_many_threads(self):
        source = QueuedInputSource()

        def producer():
            for _ in range(100):
                source.push(Intent.UP)

        threads = [threading.Thread(target=producer) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(source.poll_intents()) == 400


class TestAutopilotInputSource:
    """Tests for the autopilot source."""

    def test_presses_start_when_not_running(self):
        for phase in (Phase.NOT_STARTED, Phase.OVER):
            state = _state([(5, 5)], DOWN, phase=phase)
            autopilot = AutopilotInputSource(lambda: state)
            assert autopilot.poll_intents() == [Intent.START]

    def test_avoids_walls_and_reversal(self):
        """In the top-left corner heading left, down is the only safe move."""
        state = _state([(0, 0)], LEFT)
        autopilot = AutopilotInputSource(lambda: state, rng=random.Random(3))

        for _ in range(20):
            assert autopilot.poll_intents() == [Intent.DOWN]

    def test_avoids_body(self):
        """Body cells, tail included, are never chosen."""
        state = _state([(5, 5), (5, 4), (4, 4), (4, 5)], DOWN)
        autopilot = AutopilotInputSource(lambda: state, rng=random.Random(1))

        moves = {autopilot.choose_move(state) for _ in range(50)}
        assert moves == {Intent.DOWN, Intent.RIGHT}

    def test_trapped_snake_still_moves(self):
        """With no safe move left any direction is returned."""
        state = _state([(0, 0), (1, 0), (1, 1), (0, 1)], LEFT)
        autopilot = AutopilotInputSource(lambda: state, rng=random.Random(2))

        assert autopilot.choose_move(state) in INTENT_DIRECTIONS

    def test_reversal_judged_against_last_move(self):
        """A pending turn does not change which move counts as a reversal."""
        # Moving down with a pending turn right: up is still the reversal
        state = _state([(5, 5), (5, 4)], RIGHT, heading=DOWN)
        autopilot = AutopilotInputSource(lambda: state, rng=random.Random(4))

        moves = {autopilot.choose_move(state) for _ in range(50)}
        assert Intent.UP not in moves
        assert moves == {Intent.DOWN, Intent.LEFT, Intent.RIGHT}
