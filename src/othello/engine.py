"""
Othello game engine.
Owns the board, the player to move and the game-over flag, and applies the
rules: move legality, flips, forced passes and end of game detection.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

import numpy as np

from .board import BLACK, DIRECTIONS, DRAW, EMPTY, SIZE, WHITE, Player, initial_board, validate_board

logger = logging.getLogger(__name__)

Move = Tuple[int, int]
Direction = Tuple[int, int]


@dataclass
class MoveResult:
    """Record of a move accepted by GameEngine.play()."""
    player: Player
    move: Move
    flipped: List[Move] = field(default_factory=list)
    # The opponent had no legal reply, so `player` moves again
    passed: bool = False
    game_over: bool = False


class GameEngine:
    """
    Rules engine for a single in-memory Othello game.

    The engine never renders anything; front ends read its state after
    each move through the query methods.
    """

    BOARD_SIZE = SIZE
    EMPTY = EMPTY
    BLACK = BLACK
    WHITE = WHITE

    def __init__(self):
        """Initialize a new game in the standard starting position."""
        self.board = initial_board()
        self.current_player = Player.BLACK
        self.game_over = False
        self.move_history: List[MoveResult] = []

    @classmethod
    def from_board(cls, board, current_player: int = BLACK) -> 'GameEngine':
        """
        Create an engine over an arbitrary position.

        The game-over flag starts out False; call check_game_over() to
        evaluate the position.

        Args:
            board: 8x8 grid of EMPTY, BLACK and WHITE values
            current_player: The player to move

        Raises:
            ValueError: If the grid or the player is invalid
        """
        engine = cls()
        engine.board = validate_board(board)
        engine.current_player = Player(current_player)
        return engine

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.board = initial_board()
        self.current_player = Player.BLACK
        self.game_over = False
        self.move_history = []
        logger.debug("Game reset")

    def copy(self) -> 'GameEngine':
        """Create a deep copy of the engine."""
        new_engine = GameEngine.from_board(self.board, self.current_player)
        new_engine.game_over = self.game_over
        new_engine.move_history = list(self.move_history)
        return new_engine

    @staticmethod
    def opponent(player: int) -> Player:
        return Player(player).opponent

    # State queries

    def is_valid_position(self, row: int, col: int) -> bool:
        return 0 <= row < self.BOARD_SIZE and 0 <= col < self.BOARD_SIZE

    def count_pieces(self) -> Dict[str, int]:
        """
        Count the pieces of each color. Empty cells are not counted.

        Returns:
            Dictionary with 'black' and 'white' counts
        """
        return {
            'black': int(np.sum(self.board == BLACK)),
            'white': int(np.sum(self.board == WHITE)),
        }

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        counts = self.count_pieces()
        return counts['black'], counts['white']

    def get_winner(self) -> Optional[Union[Player, str]]:
        """
        Get the winner of the game.

        Returns:
            Player.BLACK, Player.WHITE, or DRAW for equal counts; None if
            the game is not over
        """
        if not self.game_over:
            return None

        counts = self.count_pieces()
        if counts['black'] > counts['white']:
            return Player.BLACK
        if counts['white'] > counts['black']:
            return Player.WHITE
        return DRAW

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the 8x8 board
        """
        return self.board.copy()

    def get_current_player(self) -> Player:
        return self.current_player

    def is_game_over(self) -> bool:
        return self.game_over

    def get_move_history(self) -> List[MoveResult]:
        return list(self.move_history)

    # Legality

    def can_flip_in_direction(self, row: int, col: int, direction: Direction, player: int) -> bool:
        """
        Check whether a piece at (row, col) would sandwich opponent pieces
        along one direction.

        Args:
            row: Row of the placed piece (0-based)
            col: Column of the placed piece (0-based)
            direction: (row-delta, col-delta) pair
            player: The player placing the piece

        Returns:
            True if one or more opponent pieces are followed by a piece
            of `player` before an empty cell or the board edge
        """
        d_row, d_col = direction
        r, c = row + d_row, col + d_col
        found_opponent = False

        while self.is_valid_position(r, c):
            cell = self.board[r, c]
            if cell == EMPTY:
                return False
            if cell == player:
                return found_opponent
            found_opponent = True
            r += d_row
            c += d_col

        return False

    def is_valid_move(self, row: int, col: int, player: int) -> bool:
        """Check if `player` may place a piece at (row, col)."""
        if not self.is_valid_position(row, col) or self.board[row, col] != EMPTY:
            return False

        return any(self.can_flip_in_direction(row, col, direction, player)
                   for direction in DIRECTIONS)

    def get_valid_moves(self, player: int) -> List[Move]:
        """
        Get all valid moves for the given player.

        Args:
            player: The player to get valid moves for

        Returns:
            List of (row, col) tuples in row-major order
        """
        return [(row, col)
                for row in range(self.BOARD_SIZE)
                for col in range(self.BOARD_SIZE)
                if self.is_valid_move(row, col, player)]

    def get_flips(self, row: int, col: int, player: int) -> List[Move]:
        """
        Get the pieces that a move would flip, without making it.

        Returns:
            List of (row, col) tuples; empty for an illegal move
        """
        if not self.is_valid_move(row, col, player):
            return []

        flipped = []
        for d_row, d_col in DIRECTIONS:
            if not self.can_flip_in_direction(row, col, (d_row, d_col), player):
                continue
            r, c = row + d_row, col + d_col
            while self.board[r, c] != player:
                flipped.append((r, c))
                r += d_row
                c += d_col
        return flipped

    # Mutation

    def flip_in_direction(self, row: int, col: int, direction: Direction, player: int) -> List[Move]:
        """
        Flip the opponent pieces sandwiched along one direction.

        Nothing is flipped when the run of opponent pieces ends at an
        empty cell or the board edge.

        Returns:
            List of flipped (row, col) tuples
        """
        d_row, d_col = direction
        r, c = row + d_row, col + d_col
        to_flip = []

        while self.is_valid_position(r, c):
            cell = self.board[r, c]
            if cell == EMPTY:
                break
            if cell == player:
                for flip_row, flip_col in to_flip:
                    self.board[flip_row, flip_col] = player
                return to_flip
            to_flip.append((r, c))
            r += d_row
            c += d_col

        return []

    def play(self, row: int, col: int) -> Optional[MoveResult]:
        """
        Make a move for the current player.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            MoveResult describing the move, or None if the game is over or
            the move is illegal (the board is left untouched)
        """
        if self.game_over or not self.is_valid_move(row, col, self.current_player):
            logger.debug("Rejected move (%s, %s) for %s", row, col, self.current_player)
            return None

        player = self.current_player
        self.board[row, col] = player

        flipped = []
        for direction in DIRECTIONS:
            if self.can_flip_in_direction(row, col, direction, player):
                flipped.extend(self.flip_in_direction(row, col, direction, player))

        passed = self.switch_player()
        self.check_game_over()

        result = MoveResult(player=player, move=(row, col), flipped=flipped,
                            passed=passed, game_over=self.game_over)
        self.move_history.append(result)
        logger.debug("%s played (%s, %s), flipped %d", player, row, col, len(flipped))
        return result

    def make_move(self, row: int, col: int) -> bool:
        """
        Make a move for the current player.

        Returns:
            bool: True if the move was valid and made, False otherwise
        """
        return self.play(row, col) is not None

    def switch_player(self) -> bool:
        """
        Hand the turn to the opponent if they have a legal move.

        If the opponent has none the current player moves again, unless the
        current player has none either, in which case the game ends.

        Returns:
            True if the opponent was forced to pass
        """
        next_player = self.current_player.opponent

        if self.get_valid_moves(next_player):
            self.current_player = next_player
            return False

        if not self.get_valid_moves(self.current_player):
            self._end_game()
            return False

        logger.info("%s has no valid moves and passes", next_player)
        return True

    def check_game_over(self) -> bool:
        """
        Check if the game is over, ending it when neither player can move.

        Works on any board state, including positions set up with
        from_board().

        Returns:
            The game-over flag
        """
        if not self.game_over and not self.get_valid_moves(BLACK) and not self.get_valid_moves(WHITE):
            self._end_game()
        return self.game_over

    def _end_game(self) -> None:
        self.game_over = True
        black, white = self.get_score()
        logger.info("Game over - Black: %d, White: %d", black, white)

    def __str__(self) -> str:
        from .render import render_board, render_status
        return render_board(self) + "\n" + render_status(self)
