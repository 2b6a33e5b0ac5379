"""
Exceptions raised by the TicTacToe game logic.
"""


class GameError(Exception):
    """Base class for all game logic errors."""


class InvalidMoveError(GameError):
    """A move was attempted out of turn or after the game ended."""


class IllegalMoveError(InvalidMoveError):
    """A move targeted an occupied cell or an index outside the board."""


class NoLegalMoveError(GameError):
    """A strategy was asked for a move on a full board."""
