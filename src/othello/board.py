"""
Board module for Othello.
Holds the cell constants, direction vectors and board construction helpers.
"""
from enum import IntEnum
from typing import List, Tuple

import numpy as np

# Board dimensions
SIZE = 8

# Cell values
EMPTY = 0
BLACK = 1
WHITE = 2

# Returned by GameEngine.get_winner() when both colors hold the same count
DRAW = 'draw'

# All eight (row-delta, col-delta) pairs, (0, 0) excluded
DIRECTIONS: List[Tuple[int, int]] = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


class Player(IntEnum):
    """Identity of a side. Values match the cell values on the board."""
    BLACK = BLACK
    WHITE = WHITE

    @property
    def opponent(self) -> 'Player':
        return Player(3 - self.value)

    def __str__(self) -> str:
        return self.name.capitalize()


def initial_board() -> np.ndarray:
    """
    Create a board with the standard starting placement.

    Returns:
        8x8 numpy array with the center 2x2 block filled
    """
    board = np.zeros((SIZE, SIZE), dtype=np.int8)
    center = SIZE // 2
    board[center - 1, center - 1] = WHITE
    board[center - 1, center] = BLACK
    board[center, center - 1] = BLACK
    board[center, center] = WHITE
    return board


def validate_board(board) -> np.ndarray:
    """
    Convert an arbitrary grid into a board array, checking its shape and values.

    Args:
        board: Nested sequence or array of cell values

    Returns:
        A fresh 8x8 numpy array

    Raises:
        ValueError: If the grid is not 8x8 or holds a value other than
            EMPTY, BLACK or WHITE
    """
    array = np.asarray(board)
    if array.shape != (SIZE, SIZE):
        raise ValueError(f"Only {SIZE}x{SIZE} board is supported, got shape {array.shape}")
    if not np.isin(array, (EMPTY, BLACK, WHITE)).all():
        raise ValueError("Board cells must be EMPTY, BLACK or WHITE")
    return array.astype(np.int8)
