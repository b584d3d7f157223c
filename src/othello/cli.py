"""
Terminal front end for a two-player Othello game.
"""
import os
import argparse
import logging
from typing import Callable, List, Optional, Tuple

from .config import Config, get_default_config
from .engine import GameEngine
from .logger import setup_logging
from .render import TextRenderer

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ('q', 'quit', 'exit')


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """
    Parse user input of the form 'row col' (or 'row,col').

    Returns:
        (row, col) tuple, or None if the text is not two integers
    """
    parts = text.replace(',', ' ').split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def play_game(engine: GameEngine, renderer: TextRenderer,
              input_fn: Optional[Callable[[str], str]] = None) -> GameEngine:
    """
    Run the interactive game loop until the game ends or the user quits.

    Args:
        engine: The game to drive
        renderer: Observer that displays the game after every move
        input_fn: Source of user input (default: builtin input)

    Returns:
        The engine in its final state
    """
    input_fn = input_fn or input
    renderer.update(engine)

    while not engine.game_over:
        try:
            text = input_fn(f"{str(engine.current_player)} to move (row col): ").strip()
        except EOFError:
            renderer.message("Goodbye!")
            return engine

        if text.lower() in QUIT_COMMANDS:
            renderer.message("Goodbye!")
            return engine

        move = parse_move(text)
        if move is None:
            renderer.message("Please enter a move as two numbers, e.g. '2 3'.")
            continue

        result = engine.play(*move)
        if result is None:
            renderer.message(f"Invalid move: {move[0]} {move[1]}")
            continue

        renderer.update(engine)
        if result.passed:
            renderer.message(f"{str(result.player.opponent)} has no valid moves and passes.")

    return engine


def main(argv: Optional[List[str]] = None):
    """Play a game of Othello in the terminal."""
    parser = argparse.ArgumentParser(description='Play Othello in the terminal')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--no-highlight', action='store_true',
                        help='Do not mark valid moves on the board')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Override the configured log level')
    args = parser.parse_args(argv)

    # Load configuration
    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.no_highlight:
        config.display.highlight_moves = False

    setup_logging(config, args.log_level)
    logger.debug("Using configuration %s", config.to_dict())

    play_game(GameEngine(), TextRenderer(display=config.display))


if __name__ == "__main__":
    main()
