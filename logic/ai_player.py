"""
AI player for TicTacToe.
Three move strategies of increasing strength: random, heuristic and
optimal (minimax).
"""

import random
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from .config import Difficulty
from .errors import NoLegalMoveError
from .game_state import Board, Symbol, LINES
from .win_checker import WinChecker


class StrategyKind(Enum):
    """The available move strategies."""
    RANDOM = "random"
    HEURISTIC = "heuristic"
    OPTIMAL = "optimal"

    @classmethod
    def parse(cls, value: Union["StrategyKind", Difficulty, str]) -> "StrategyKind":
        """
        Accept a StrategyKind, a Difficulty, or either one's string value
        ("optimal", "hard", ...).
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, Difficulty):
            return DIFFICULTY_STRATEGIES[value]
        if isinstance(value, str):
            key = value.lower()
            for kind in cls:
                if kind.value == key:
                    return kind
            for difficulty in Difficulty:
                if difficulty.value == key:
                    return DIFFICULTY_STRATEGIES[difficulty]
        raise ValueError(f"Unknown strategy: {value!r}")


DIFFICULTY_STRATEGIES = {
    Difficulty.EASY: StrategyKind.RANDOM,
    Difficulty.MEDIUM: StrategyKind.HEURISTIC,
    Difficulty.HARD: StrategyKind.OPTIMAL,
}


def _available_moves(board: Board) -> List[int]:
    moves = board.legal_moves()
    if not moves:
        raise NoLegalMoveError("No moves available: the board is full")
    return moves


class MoveStrategy:
    """Base class for move strategies. Strategies never modify the board."""

    kind: StrategyKind

    def choose_move(self, board: Board, computer: Symbol, opponent: Symbol) -> int:
        raise NotImplementedError


class RandomStrategy(MoveStrategy):
    """Pick any empty cell, uniformly at random."""

    kind = StrategyKind.RANDOM

    def __init__(self, rng=None):
        # The random module itself by default; tests may pass a seeded Random
        self.rng = rng if rng is not None else random

    def choose_move(self, board: Board, computer: Symbol, opponent: Symbol) -> int:
        return self.rng.choice(_available_moves(board))


class HeuristicStrategy(MoveStrategy):
    """
    Take an immediate win, otherwise block an immediate loss,
    otherwise play randomly.

    Forks and double threats are not considered, so a careful
    opponent can still beat it.
    """

    kind = StrategyKind.HEURISTIC

    def __init__(self, rng=None):
        self.fallback = RandomStrategy(rng)

    def choose_move(self, board: Board, computer: Symbol, opponent: Symbol) -> int:
        _available_moves(board)

        # Try to win
        move = self._find_completion(board, computer)
        if move is not None:
            return move

        # Try to block
        move = self._find_completion(board, opponent)
        if move is not None:
            return move

        return self.fallback.choose_move(board, computer, opponent)

    def _find_completion(self, board: Board, symbol: Symbol) -> Optional[int]:
        """First empty cell that would give `symbol` three in a line."""
        for line in LINES:
            values = [board[i] for i in line]
            if values.count(symbol) == 2 and None in values:
                return line[values.index(None)]
        return None


# Cache: (cells, maximizing, computer, opponent) -> (score, best_move)
_MINIMAX_CACHE: Dict[tuple, Tuple[int, Optional[int]]] = {}


class OptimalStrategy(MoveStrategy):
    """
    Exhaustive minimax with no pruning and no depth limit.

    Scores from the computer's point of view: +1 win, -1 loss, 0 draw.
    Among equally scored moves the lowest index wins. This player never
    loses.
    """

    kind = StrategyKind.OPTIMAL

    def __init__(self):
        self.win_checker = WinChecker()

        # Nodes looked up by the last search, cache hits included (for debugging)
        self.moves_evaluated = 0

    def choose_move(self, board: Board, computer: Symbol, opponent: Symbol) -> int:
        _available_moves(board)
        _, move = self.minimax(board, True, computer, opponent)
        if move is None:
            # Decided board: there is nothing left to search
            raise NoLegalMoveError("No moves available: the game is already won")
        return move

    def minimax(
        self,
        board: Board,
        maximizing: bool,
        computer: Symbol,
        opponent: Symbol
    ) -> Tuple[int, Optional[int]]:
        """
        Score a position and find the best move from it.

        Args:
            board: Position to evaluate.
            maximizing: True if it is the computer's turn.
            computer: The maximizing symbol.
            opponent: The minimizing symbol.

        Returns:
            (score, move); move is None on a terminal board.
        """
        self.moves_evaluated = 0
        return self._minimax(board, maximizing, computer, opponent)

    def _minimax(
        self,
        board: Board,
        maximizing: bool,
        computer: Symbol,
        opponent: Symbol
    ) -> Tuple[int, Optional[int]]:
        self.moves_evaluated += 1

        key = (board.cells, maximizing, computer, opponent)
        if key in _MINIMAX_CACHE:
            return _MINIMAX_CACHE[key]

        winner = self.win_checker.check_winner(board)
        if winner == computer:
            result = (1, None)
        elif winner == opponent:
            result = (-1, None)
        elif board.is_full():
            result = (0, None)
        else:
            result = self._search(board, maximizing, computer, opponent)

        _MINIMAX_CACHE[key] = result
        return result

    def _search(
        self,
        board: Board,
        maximizing: bool,
        computer: Symbol,
        opponent: Symbol
    ) -> Tuple[int, Optional[int]]:
        symbol = computer if maximizing else opponent
        best_score = -2 if maximizing else 2
        best_move = None

        for move in board.legal_moves():
            score, _ = self._minimax(board.apply(move, symbol), not maximizing, computer, opponent)

            # Strict comparison: the first move found keeps ties
            if maximizing and score > best_score:
                best_score, best_move = score, move
            elif not maximizing and score < best_score:
                best_score, best_move = score, move

        return best_score, best_move


def minimax(
    board: Board,
    maximizing: bool,
    computer: Symbol,
    opponent: Symbol
) -> Tuple[int, Optional[int]]:
    """Module-level shortcut for OptimalStrategy().minimax(...)."""
    return OptimalStrategy().minimax(board, maximizing, computer, opponent)


def clear_cache():
    """Clear the minimax cache."""
    _MINIMAX_CACHE.clear()


def cache_size() -> int:
    """Return current cache size."""
    return len(_MINIMAX_CACHE)


_STRATEGIES = {
    StrategyKind.RANDOM: RandomStrategy(),
    StrategyKind.HEURISTIC: HeuristicStrategy(),
    StrategyKind.OPTIMAL: OptimalStrategy(),
}


def get_strategy(kind: Union[StrategyKind, Difficulty, str]) -> MoveStrategy:
    """Get the shared strategy instance for a kind or difficulty."""
    return _STRATEGIES[StrategyKind.parse(kind)]


def choose_move(
    board: Board,
    kind: Union[StrategyKind, Difficulty, str],
    computer: Symbol,
    opponent: Symbol
) -> int:
    """
    Choose the computer's next move.

    Raises:
        NoLegalMoveError: If the board is full.
    """
    return get_strategy(kind).choose_move(board, computer, opponent)


class AIPlayer:
    """
    An AI bound to one symbol and one difficulty level.
    """

    def __init__(self, symbol: Symbol = Symbol.O, difficulty: Difficulty = Difficulty.HARD):
        """
        Initialize the AI player.

        Args:
            symbol: Which symbol the AI plays (default: O)
            difficulty: How strong the AI plays (default: HARD)
        """
        self.symbol = symbol
        self.difficulty = difficulty
        self.strategy = get_strategy(difficulty)

    def get_best_move(self, board: Board) -> int:
        """
        Get the move this AI would play on `board`.

        Raises:
            NoLegalMoveError: If the board is full.
        """
        return self.strategy.choose_move(board, self.symbol, self.symbol.opposite())

    def suggest_move(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Returns:
            A string describing the suggested move.
        """
        try:
            move = self.get_best_move(board)
        except NoLegalMoveError:
            return "No moves available!"

        row, col = divmod(move, 3)
        return f"Place {self.symbol.value} at cell {move} (row {row}, column {col})"
