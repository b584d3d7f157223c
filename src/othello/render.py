"""
Text rendering of an Othello game.
The renderer only reads engine state; the engine holds no reference to it.
"""
import sys
from typing import Optional, TextIO

from .board import DRAW, EMPTY, Player
from .config import DisplayConfig
from .engine import GameEngine


def render_board(engine: GameEngine, display: Optional[DisplayConfig] = None,
                 highlight_moves: bool = False) -> str:
    """
    Render the board as text, one line per row.

    Args:
        engine: The game to render
        display: Symbols to use (default: DisplayConfig())
        highlight_moves: Mark the current player's valid moves

    Returns:
        Multi-line string with a column header
    """
    display = display or DisplayConfig()
    symbols = display.symbols()
    hints = set()
    if highlight_moves and not engine.game_over:
        hints = set(engine.get_valid_moves(engine.current_player))

    lines = ['  ' + ' '.join(str(col) for col in range(engine.BOARD_SIZE))]
    for row in range(engine.BOARD_SIZE):
        cells = []
        for col in range(engine.BOARD_SIZE):
            cell = int(engine.board[row, col])
            if cell == EMPTY and (row, col) in hints:
                cells.append(display.hint_symbol)
            else:
                cells.append(symbols[cell])
        lines.append(f"{row} " + ' '.join(cells))
    return '\n'.join(lines)


def render_status(engine: GameEngine) -> str:
    """Render the score, the player to move and the result once over."""
    black, white = engine.get_score()
    status = [f"Score - Black: {black}, White: {white}"]

    if engine.game_over:
        winner = engine.get_winner()
        if winner == DRAW:
            status.append("Game over! It's a draw!")
        else:
            status.append(f"Game over! {str(Player(winner))} wins!")
    else:
        status.append(f"Current player: {str(engine.current_player)}")

    return '\n'.join(status)


class TextRenderer:
    """Writes the board and status to a stream after every update."""

    def __init__(self, stream: Optional[TextIO] = None, display: Optional[DisplayConfig] = None):
        self.stream = stream or sys.stdout
        self.display = display or DisplayConfig()

    def update(self, engine: GameEngine) -> None:
        board = render_board(engine, self.display, self.display.highlight_moves)
        self.stream.write(board + '\n' + render_status(engine) + '\n')

    def message(self, text: str) -> None:
        self.stream.write(text + '\n')
