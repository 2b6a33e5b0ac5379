"""
Win checker for TicTacToe.
Checks if a symbol has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass

from .game_state import Board, Symbol, Line, LINES


class OutcomeKind(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Classification of a board: ongoing, won by a symbol, or drawn.
    Derived from a board on demand, never stored.
    """
    kind: OutcomeKind
    winner: Optional[Symbol] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(OutcomeKind.IN_PROGRESS)

    @classmethod
    def win(cls, symbol: Symbol) -> "Outcome":
        return cls(OutcomeKind.WIN, symbol)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(OutcomeKind.DRAW)

    @property
    def is_over(self) -> bool:
        return self.kind != OutcomeKind.IN_PROGRESS

    def __str__(self) -> str:
        if self.kind == OutcomeKind.WIN:
            return f"Winner: {self.winner.value}"
        if self.kind == OutcomeKind.DRAW:
            return "It's a draw!"
        return "In progress"


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same symbol in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = LINES

    def check_winner(self, board: Board) -> Optional[Symbol]:
        """
        Check if there's a winner.

        Lines are scanned rows first, then columns, then diagonals;
        the first fully owned line decides.

        Returns:
            The winning Symbol, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def _check_line(self, board: Board, line: Line) -> Optional[Symbol]:
        a, b, c = line
        first = board[a]
        if first is not None and first == board[b] == board[c]:
            return first
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.check_winner(board) is not None:
            return False
        return board.is_full()

    def status(self, board: Board) -> Outcome:
        """Classify the board as in progress, won or drawn."""
        winner = self.check_winner(board)
        if winner is not None:
            return Outcome.win(winner)
        if board.is_full():
            return Outcome.draw()
        return Outcome.in_progress()

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as a triple of cell indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None


_checker = WinChecker()


def winner(board: Board) -> Optional[Symbol]:
    return _checker.check_winner(board)


def is_draw(board: Board) -> bool:
    return _checker.check_draw(board)


def status(board: Board) -> Outcome:
    return _checker.status(board)


def winning_line(board: Board) -> Optional[Line]:
    return _checker.get_winning_line(board)
