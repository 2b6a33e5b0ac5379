"""
Logic module for TicTacToe.
Handles the board, rules, turn order, and AI opponent.
"""

from .errors import GameError, InvalidMoveError, IllegalMoveError, NoLegalMoveError
from .game_state import (
    Board,
    GameSession,
    Symbol,
    LINES,
    apply,
    is_legal_board,
    is_occupied,
    legal_moves,
)
from .win_checker import WinChecker, Outcome, OutcomeKind, winner, is_draw, status, winning_line
from .config import GameConfig, GameMode, Difficulty, UIConfig
from .move_validator import MoveValidator, ValidationResult
from .ai_player import (
    AIPlayer,
    StrategyKind,
    RandomStrategy,
    HeuristicStrategy,
    OptimalStrategy,
    choose_move,
    get_strategy,
    minimax,
)
from .controller import (
    new_session,
    restart,
    submit_move,
    computer_move,
    is_computer_turn,
    play_computer_turn,
)

__version__ = "1.0.0"
