"""
Base renderer interface.
"""

from domain.game_state import GameState


class Renderer:
    """
    Receives a snapshot after every loop step and decides how to draw it.
    """

    def render(self, state: GameState) -> None:
        raise NotImplementedError
