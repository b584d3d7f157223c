"""
Othello (Reversi) rules engine.
This package contains the core game logic and a thin text front end.
"""

from .board import BLACK, DRAW, EMPTY, WHITE, Player
from .engine import GameEngine, MoveResult

__all__ = ['BLACK', 'DRAW', 'EMPTY', 'WHITE', 'GameEngine', 'MoveResult', 'Player']
