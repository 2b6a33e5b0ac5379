"""
Turn controller for TicTacToe.

Alternates turns, asks the selected strategy for the computer's move
and applies moves. Sessions are immutable: every transition returns a
new GameSession and a rejected transition leaves the old one untouched.
Callers must serialize calls for a single session.
"""

from typing import Optional, Union

from .ai_player import StrategyKind, choose_move
from .config import Difficulty, GameConfig
from .errors import InvalidMoveError
from .game_state import GameSession, Symbol
from .move_validator import MoveValidator

_validator = MoveValidator()


def new_session() -> GameSession:
    """Empty board, X to move."""
    return GameSession()


def restart(session: GameSession) -> GameSession:
    """Start over. Valid in any state; configuration lives with the caller."""
    return new_session()


def _advance(session: GameSession, index: int) -> GameSession:
    mover = session.next_to_move
    return GameSession(
        board=session.board.apply(index, mover),
        next_to_move=mover.opposite(),
    )


def submit_move(
    session: GameSession,
    index: int,
    config: Optional[GameConfig] = None
) -> GameSession:
    """
    Apply a human move for the side to move.

    Args:
        session: Current session.
        index: Cell to play (0-8).
        config: Mode and symbol assignment. Without it, both sides are human.

    Returns:
        The session after the move.

    Raises:
        InvalidMoveError: The game is over or it is the computer's turn.
        IllegalMoveError: The cell is occupied or out of range.
    """
    result = _validator.validate_move(session, index, config)
    if not result.is_valid:
        raise result.error
    return _advance(session, index)


def computer_move(
    session: GameSession,
    strategy_kind: Union[StrategyKind, Difficulty, str],
    computer_symbol: Symbol,
    opponent_symbol: Symbol
) -> GameSession:
    """
    Let the computer play one move with the chosen strategy.

    Raises:
        InvalidMoveError: The game is over or it is not the computer's turn.
    """
    if computer_symbol == opponent_symbol:
        raise ValueError("Computer and opponent must play different symbols")

    result = _validator.validate_game_ongoing(session)
    if not result.is_valid:
        raise result.error

    if session.next_to_move != computer_symbol:
        raise InvalidMoveError(
            f"It's not the computer's turn: {session.next_to_move.value} is to move"
        )

    move = choose_move(session.board, strategy_kind, computer_symbol, opponent_symbol)
    return _advance(session, move)


def is_computer_turn(session: GameSession, config: GameConfig) -> bool:
    """True when the computer should play next in this session."""
    if not config.vs_computer:
        return False
    if not _validator.validate_game_ongoing(session).is_valid:
        return False
    return session.next_to_move == config.computer_symbol


def play_computer_turn(session: GameSession, config: GameConfig) -> GameSession:
    """
    Play the computer's move if it is the computer's turn; otherwise
    return the session unchanged.
    """
    if not is_computer_turn(session, config):
        return session
    return computer_move(
        session,
        config.difficulty,
        config.computer_symbol,
        config.human_symbol,
    )
