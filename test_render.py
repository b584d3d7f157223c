"""
Test script for the text renderer.
"""
import io
import sys
from pathlib import Path

import numpy as np

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello import BLACK, WHITE, GameEngine
from othello.config import DisplayConfig
from othello.render import TextRenderer, render_board, render_status


def test_render_initial_board():
    """Test the board grid of a new game."""
    lines = render_board(GameEngine()).split('\n')

    assert len(lines) == 9
    assert lines[0] == '  0 1 2 3 4 5 6 7'
    assert lines[3] == '2 . . . . . . . .'
    assert lines[4] == '3 . . . ○ ● . . .'
    assert lines[5] == '4 . . . ● ○ . . .'


def test_render_highlights_valid_moves():
    """Test that valid moves of the player to move are marked."""
    lines = render_board(GameEngine(), highlight_moves=True).split('\n')

    assert lines[3] == '2 . . . * . . . .'
    assert lines[4] == '3 . . * ○ ● . . .'
    assert lines[5] == '4 . . . ● ○ * . .'
    assert lines[6] == '5 . . . . * . . .'


def test_render_custom_symbols():
    """Test rendering with configured symbols."""
    display = DisplayConfig(empty_symbol='-', black_symbol='B', white_symbol='W')
    lines = render_board(GameEngine(), display).split('\n')

    assert lines[4] == '3 - - - W B - - -'


def test_render_status():
    """Test the status lines in progress and after the game ends."""
    game = GameEngine()
    assert render_status(game) == "Score - Black: 2, White: 2\nCurrent player: Black"

    game.make_move(2, 3)
    assert render_status(game) == "Score - Black: 4, White: 1\nCurrent player: White"

    board = np.full((8, 8), WHITE)
    board[0, 0] = BLACK
    game = GameEngine.from_board(board)
    game.check_game_over()
    assert render_status(game) == "Score - Black: 1, White: 63\nGame over! White wins!"

    board = np.full((8, 8), WHITE)
    board[:4] = BLACK
    game = GameEngine.from_board(board)
    game.check_game_over()
    assert render_status(game).endswith("Game over! It's a draw!")


def test_text_renderer_does_not_mutate():
    """Test that rendering leaves the engine untouched."""
    game = GameEngine()
    before = game.get_board_state()
    stream = io.StringIO()

    TextRenderer(stream).update(game)

    output = stream.getvalue()
    assert '3 . . * ○ ● . . .' in output
    assert 'Current player: Black' in output
    assert np.array_equal(game.board, before)
    assert str(game) == render_board(game) + '\n' + render_status(game)


if __name__ == "__main__":
    test_render_initial_board()
    test_render_status()
    print("Render tests passed!")
