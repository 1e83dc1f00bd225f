"""
Base input source interface for the game engine.
"""

from enum import Enum
from typing import List, Optional

from domain.constants import DOWN, LEFT, RIGHT, UP, Direction


class Intent(str, Enum):
    """A logical request, independent of the device it came from."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    START = "START"

    @property
    def direction(self) -> Optional[Direction]:
        return INTENT_DIRECTIONS.get(self)


INTENT_DIRECTIONS = {
    Intent.UP: UP,
    Intent.DOWN: DOWN,
    Intent.LEFT: LEFT,
    Intent.RIGHT: RIGHT,
}

# Arrow keys steer and Enter starts, as in the browser game; WASD and
# space are accepted as well.
KEY_BINDINGS = {
    "ArrowUp": Intent.UP,
    "ArrowDown": Intent.DOWN,
    "ArrowLeft": Intent.LEFT,
    "ArrowRight": Intent.RIGHT,
    "Enter": Intent.START,
    "w": Intent.UP,
    "s": Intent.DOWN,
    "a": Intent.LEFT,
    "d": Intent.RIGHT,
    " ": Intent.START,
}


def intent_for_key(key: str) -> Optional[Intent]:
    """Map a key name to its intent, or None if the key is not bound."""
    return KEY_BINDINGS.get(key)


def parse_intent(name: str) -> Intent:
    """
    Parse an intent name such as "up" or "START".

    Raises:
        ValueError: If name is not a known intent.
    """
    key = (name or "").strip().upper()
    try:
        return Intent(key)
    except ValueError:
        available = ", ".join(i.value for i in Intent)
        raise ValueError(f"Unknown intent '{name}'. Available intents: {available}")


def apply_intent(engine, intent: Intent) -> None:
    """Route an intent to the matching engine call."""
    if intent == Intent.START:
        engine.start()
    else:
        engine.set_direction(intent.direction)


class InputSource:
    """
    Base class/interface for input handling.

    Each source is responsible for returning the intents that arrived since
    the previous poll, oldest first.
    """

    def poll_intents(self) -> List[Intent]:
        """
        Drain and return pending intents.

        Returns:
            A list of Intent values, possibly empty
        """
        raise NotImplementedError
