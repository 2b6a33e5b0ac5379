"""
Tests for the move strategies.

Run: pytest test_ai_player.py -v
"""

import random

import pytest

from logic import (
    AIPlayer,
    Board,
    Difficulty,
    HeuristicStrategy,
    NoLegalMoveError,
    OptimalStrategy,
    RandomStrategy,
    StrategyKind,
    Symbol,
    choose_move,
    get_strategy,
    minimax,
    status,
    winner,
)
from logic import ai_player


X, O = Symbol.X, Symbol.O

FULL_BOARD = Board.from_string("XOXXOOOXX")


class TestStrategyKind:

    @pytest.mark.parametrize("value,expected", [
        ("random", StrategyKind.RANDOM),
        ("heuristic", StrategyKind.HEURISTIC),
        ("optimal", StrategyKind.OPTIMAL),
        ("easy", StrategyKind.RANDOM),
        ("Medium", StrategyKind.HEURISTIC),
        ("hard", StrategyKind.OPTIMAL),
        (Difficulty.HARD, StrategyKind.OPTIMAL),
        (StrategyKind.RANDOM, StrategyKind.RANDOM),
    ])
    def test_parse(self, value, expected):
        assert StrategyKind.parse(value) == expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            StrategyKind.parse("impossible")

    def test_get_strategy(self):
        assert isinstance(get_strategy("easy"), RandomStrategy)
        assert isinstance(get_strategy(StrategyKind.HEURISTIC), HeuristicStrategy)
        assert isinstance(get_strategy(Difficulty.HARD), OptimalStrategy)


class TestFullBoard:

    @pytest.mark.parametrize("kind", list(StrategyKind))
    def test_every_strategy_rejects_full_board(self, kind):
        with pytest.raises(NoLegalMoveError):
            choose_move(FULL_BOARD, kind, X, O)


class TestRandomStrategy:

    def test_picks_a_legal_move(self):
        board = Board.from_string("XOX.O.X..")
        strategy = RandomStrategy()
        for _ in range(50):
            assert strategy.choose_move(board, O, X) in board.legal_moves()

    def test_single_legal_move(self):
        board = Board.from_string("XOXXOOOX.")
        assert RandomStrategy().choose_move(board, X, O) == 8

    def test_injected_rng(self):
        board = Board.empty()
        first = RandomStrategy(random.Random(7)).choose_move(board, X, O)
        second = RandomStrategy(random.Random(7)).choose_move(board, X, O)
        assert first == second

    def test_covers_every_cell(self):
        strategy = RandomStrategy(random.Random(1234))
        seen = {strategy.choose_move(Board.empty(), X, O) for _ in range(500)}
        assert seen == set(range(9))


class TestHeuristicStrategy:

    def test_takes_win(self):
        # X can complete the top row
        board = Board.from_string("XX.OO....")
        assert choose_move(board, StrategyKind.HEURISTIC, X, O) == 2

    def test_win_beats_block(self):
        # O can win on the middle row even though X threatens the top row
        board = Board.from_string("XX.OO.X..")
        assert choose_move(board, StrategyKind.HEURISTIC, O, X) == 5

    def test_blocks_loss(self):
        board = Board.from_string("XX..O....")
        assert choose_move(board, StrategyKind.HEURISTIC, O, X) == 2

    def test_blocks_column(self):
        board = Board.from_string("XO.X.....")
        assert choose_move(board, StrategyKind.HEURISTIC, O, X) == 6

    def test_blocks_first_threat_of_a_fork(self):
        # X threatens both 1 (top row) and 3 (left column); only one can be blocked
        board = Board.from_string("X.X.O.X.O")
        assert choose_move(board, StrategyKind.HEURISTIC, O, X) == 1

    def test_loses_to_fork(self):
        board = Board.from_string("X.X.O.X.O")
        after = board.apply(choose_move(board, StrategyKind.HEURISTIC, O, X), O)
        # The other threat is still open
        assert winner(after.apply(3, X)) == X

    def test_falls_back_to_random(self):
        board = Board.from_string("X...O....")
        strategy = HeuristicStrategy(random.Random(3))
        for _ in range(20):
            assert strategy.choose_move(board, X, O) in board.legal_moves()

    def test_does_not_modify_board(self):
        board = Board.from_string("XX..O....")
        choose_move(board, StrategyKind.HEURISTIC, O, X)
        assert board == Board.from_string("XX..O....")


class TestOptimalStrategy:

    def test_empty_board_scores_draw(self):
        score, move = minimax(Board.empty(), True, X, O)
        assert score == 0
        # Every opening draws, so the first cell scanned is kept
        assert move == 0

    def test_takes_win(self):
        board = Board.from_string("OO.XX.X..")
        assert choose_move(board, StrategyKind.OPTIMAL, O, X) == 2

    def test_blocks_loss(self):
        board = Board.from_string("XX..O....")
        assert choose_move(board, StrategyKind.OPTIMAL, O, X) == 2

    def test_terminal_scores(self):
        assert minimax(Board.from_string("XXXOO...."), True, X, O) == (1, None)
        assert minimax(Board.from_string("XXXOO...."), True, O, X) == (-1, None)
        assert minimax(FULL_BOARD, False, X, O) == (0, None)

    def test_won_board_has_no_move(self):
        with pytest.raises(NoLegalMoveError):
            choose_move(Board.from_string("XXXOO...."), StrategyKind.OPTIMAL, O, X)

    def test_counts_positions(self):
        strategy = OptimalStrategy()
        strategy.choose_move(Board.from_string("XX..O...."), O, X)
        assert strategy.moves_evaluated > 0

    def test_counts_cache_hits_as_lookups(self):
        board = Board.from_string("X...O....")
        strategy = OptimalStrategy()
        ai_player.clear_cache()

        strategy.minimax(board, True, X, O)
        assert strategy.moves_evaluated > 1

        # The root position is now cached
        strategy.minimax(board, True, X, O)
        assert strategy.moves_evaluated == 1

    def test_cache_does_not_change_result(self):
        board = Board.from_string("X...O....")
        ai_player.clear_cache()
        assert ai_player.cache_size() == 0

        first = minimax(board, True, X, O)
        assert ai_player.cache_size() > 0

        second = minimax(board, True, X, O)
        assert first == second

    def test_optimal_vs_optimal_draws(self):
        board = Board.empty()
        mover = X
        while not status(board).is_over:
            move = choose_move(board, StrategyKind.OPTIMAL, mover, mover.opposite())
            board = board.apply(move, mover)
            mover = mover.opposite()

        assert status(board).winner is None
        assert board.is_full()

    @pytest.mark.parametrize("computer", [X, O])
    def test_never_loses_to_any_opponent(self, computer):
        """Play every possible opponent line against the optimal player."""
        opponent = computer.opposite()
        finished = []

        def explore(board, mover):
            if status(board).is_over:
                finished.append(board)
                assert winner(board) != opponent, f"Lost with\n{board}"
                return
            if mover == computer:
                move = choose_move(board, StrategyKind.OPTIMAL, computer, opponent)
                explore(board.apply(move, computer), opponent)
            else:
                for move in board.legal_moves():
                    explore(board.apply(move, opponent), computer)

        explore(Board.empty(), X)
        assert finished


class TestAIPlayer:

    def test_get_best_move(self):
        ai = AIPlayer(O, Difficulty.HARD)
        assert ai.get_best_move(Board.from_string("XX..O....")) == 2

    def test_suggest_move(self):
        ai = AIPlayer(O, Difficulty.MEDIUM)
        suggestion = ai.suggest_move(Board.from_string("XX..O...."))
        assert "cell 2" in suggestion
        assert "row 0, column 2" in suggestion

    def test_suggest_move_full_board(self):
        assert AIPlayer(X).suggest_move(FULL_BOARD) == "No moves available!"
