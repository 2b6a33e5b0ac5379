"""
Move validator for TicTacToe.
Validates that a submitted move follows the rules before it is applied.
"""

from typing import Optional
from dataclasses import dataclass

from .config import GameConfig
from .errors import GameError, IllegalMoveError, InvalidMoveError
from .game_state import GameSession, Symbol, CELL_COUNT, is_legal_board
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    error: Optional[GameError] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def rejected(cls, error: GameError) -> "ValidationResult":
        return cls(is_valid=False, error_message=str(error), error=error)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Board and turn must be consistent (X first, then alternating)
    2. Game must not be over
    3. Must be the mover's turn
    4. Can only place on an empty cell inside the board
    """

    def __init__(self):
        self.win_checker = WinChecker()

    def validate_session(self, session: GameSession) -> ValidationResult:
        """Check the turn-order invariant: X moves first, then turns alternate."""
        board = session.board
        if not is_legal_board(board):
            return ValidationResult.rejected(
                InvalidMoveError(
                    f"Board {board.to_string()} breaks turn order: "
                    f"{board.count(Symbol.X)} X vs {board.count(Symbol.O)} O"
                )
            )
        if session.next_to_move != board.side_to_move():
            return ValidationResult.rejected(
                InvalidMoveError(
                    f"Board {board.to_string()} has {board.side_to_move().value} to move, "
                    f"not {session.next_to_move.value}"
                )
            )
        return ValidationResult.ok()

    def validate_game_ongoing(self, session: GameSession) -> ValidationResult:
        result = self.validate_session(session)
        if not result.is_valid:
            return result

        outcome = self.win_checker.status(session.board)
        if outcome.is_over:
            return ValidationResult.rejected(
                InvalidMoveError(f"Game is already over! ({outcome})")
            )
        return ValidationResult.ok()

    def validate_move(
        self,
        session: GameSession,
        index: int,
        config: Optional[GameConfig] = None
    ) -> ValidationResult:
        """
        Validate a human move.

        Args:
            session: Current game session.
            index: Cell to place the symbol on (0-8).
            config: Mode and symbol assignment. None means two humans
                share the board, so every turn is a human turn.

        Returns:
            ValidationResult with is_valid and the error to raise.
        """
        # Check if game is over
        result = self.validate_game_ongoing(session)
        if not result.is_valid:
            return result

        # Check whose turn it is
        if config is not None and config.vs_computer and session.next_to_move != config.human_symbol:
            return ValidationResult.rejected(
                InvalidMoveError(
                    f"It's not your turn: {session.next_to_move.value} (computer) is to move"
                )
            )

        # Check if index is in range
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < CELL_COUNT:
            return ValidationResult.rejected(
                IllegalMoveError(f"Invalid position {index!r}. Must be 0-{CELL_COUNT - 1}.")
            )

        # Check if cell is empty
        occupant = session.board[index]
        if occupant is not None:
            return ValidationResult.rejected(
                IllegalMoveError(f"Cell {index} is already occupied by {occupant.value}")
            )

        # All checks passed!
        return ValidationResult.ok()
