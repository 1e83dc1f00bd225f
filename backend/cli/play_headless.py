#!/usr/bin/env python3
"""
Play snake in the terminal with the autopilot at the wheel.

Each step prints the board. Useful for eyeballing engine changes without
the browser frontend.

Usage:
    python backend/cli/play_headless.py
    python backend/cli/play_headless.py --seed 7 --games 3 --interval 50
    python backend/cli/play_headless.py --max-ticks 200 --quiet
"""

import argparse
import logging
import os
import random
import sys
from typing import List, Optional

# Add parent directory to path to import the engine modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import config  # noqa: E402
from domain.game_state import GameState, Phase  # noqa: E402
from domain.random_source import UniformCellProvider  # noqa: E402
from engine import GameEngine  # noqa: E402
from game_loop import GameLoop  # noqa: E402
from inputs.autopilot import AutopilotInputSource  # noqa: E402
from renderers.text import TextRenderer  # noqa: E402

logger = logging.getLogger(__name__)


def play_games(
    games: int = 1,
    seed: Optional[int] = None,
    interval_ms: int = 1,
    max_ticks: Optional[int] = None,
    board_size: Optional[int] = None,
    quiet: bool = False,
    sleep=None,
) -> List[GameState]:
    """
    Play a number of autopilot games back to back.

    Returns:
        The final snapshot of each game
    """
    rng = random.Random(seed)
    engine = GameEngine(
        board_size=board_size or config.get_board_size(),
        cell_provider=UniformCellProvider(rng=rng),
    )
    autopilot = AutopilotInputSource(engine.get_state, rng=rng)
    renderer = None if quiet else TextRenderer()
    loop = GameLoop(engine, autopilot, renderer=renderer, interval_ms=interval_ms, sleep=sleep)

    results: List[GameState] = []
    for game_number in range(1, games + 1):
        engine.reset()
        final = loop.run(max_ticks=max_ticks, stop_when_over=True)
        results.append(final)

        length = len(final.snake)
        if final.phase == Phase.OVER:
            logger.info(
                "Game %s: score %s, length %s, %s ticks, hit %s",
                game_number, final.score, length, final.tick, final.death_reason,
            )
        else:
            logger.info(
                "Game %s: stopped after %s ticks with score %s, length %s",
                game_number, final.tick, final.score, length,
            )
    return results


def main():
    parser = argparse.ArgumentParser(
        description="Run snake games in the terminal driven by a random safe-move autopilot."
    )
    parser.add_argument("--games", type=int, default=1,
                        help="Number of games to play (default: 1)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and autopilot choices")
    parser.add_argument("--interval", type=int, default=config.get_tick_interval_ms(),
                        help="Milliseconds between ticks (default: SNAKE_TICK_INTERVAL_MS or 150)")
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="Stop a game after this many ticks")
    parser.add_argument("--board-size", type=int, default=None,
                        help="Board width and height (default: SNAKE_BOARD_SIZE or 20)")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print the board, only per-game summaries")
    args = parser.parse_args()

    logging.basicConfig(level=config.get_log_level(), format=config.LOG_FORMAT)

    if args.games < 1:
        parser.error("--games must be at least 1")

    try:
        results = play_games(
            games=args.games,
            seed=args.seed,
            interval_ms=args.interval,
            max_ticks=args.max_ticks,
            board_size=args.board_size,
            quiet=args.quiet,
        )
    except ValueError as e:
        parser.error(str(e))

    best = max(state.score for state in results)
    print(f"\nPlayed {len(results)} game(s). Best score: {best}")


if __name__ == "__main__":
    main()
