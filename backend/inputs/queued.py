"""
Queued input source - collects intents pushed from other threads.
"""

import logging
import queue
from typing import List, Optional

from .base import InputSource, Intent, intent_for_key

logger = logging.getLogger(__name__)


class QueuedInputSource(InputSource):
    """
    Thread-safe buffer between event producers (key handlers, HTTP requests)
    and the game loop, which drains it once per step.
    """

    def __init__(self):
        self._queue: "queue.Queue[Intent]" = queue.Queue()

    def push(self, intent: Intent) -> None:
        self._queue.put(intent)

    def push_key(self, key: str) -> Optional[Intent]:
        """
        Queue the intent bound to key.

        Returns:
            The queued intent, or None when the key is not bound
        """
        intent = intent_for_key(key)
        if intent is None:
            logger.debug("Ignoring unbound key %r", key)
            return None
        self.push(intent)
        return intent

    def poll_intents(self) -> List[Intent]:
        intents: List[Intent] = []
        while True:
            try:
                intents.append(self._queue.get_nowait())
            except queue.Empty:
                return intents

    def __len__(self) -> int:
        return self._queue.qsize()
