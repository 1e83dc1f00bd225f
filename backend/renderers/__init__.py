"""
Renderers consume GameState snapshots produced by the game loop.
"""

from .base import Renderer
from .text import TextRenderer, SnapshotRenderer

__all__ = [
    'Renderer',
    'TextRenderer',
    'SnapshotRenderer',
]
