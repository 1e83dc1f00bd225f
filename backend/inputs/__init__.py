"""
Input sources for the snake engine.

Sources turn device events (keys, HTTP calls, an autopilot) into logical
intents that the game loop applies to the engine.
"""

from .base import (
    Intent,
    InputSource,
    KEY_BINDINGS,
    INTENT_DIRECTIONS,
    intent_for_key,
    parse_intent,
    apply_intent,
)
from .queued import QueuedInputSource
from .autopilot import AutopilotInputSource

__all__ = [
    'Intent',
    'InputSource',
    'KEY_BINDINGS',
    'INTENT_DIRECTIONS',
    'intent_for_key',
    'parse_intent',
    'apply_intent',
    'QueuedInputSource',
    'AutopilotInputSource',
]
