"""
Main entry point for TicTacToe.

Launches the window by default; use --no-ui to play in the console.
Play against a friend (pvp) or against the computer (pvc) at one of
three difficulty levels.
"""

import time
from typing import Callable, Optional

from logic import (
    AIPlayer,
    Difficulty,
    GameConfig,
    GameError,
    UIConfig,
    new_session,
    restart,
    submit_move,
    play_computer_turn,
    is_computer_turn,
    status,
    winning_line,
)


class ConsoleGame:
    """
    Console front end.

    Game flow:
    1. Show the board and whose turn it is
    2. Read a cell number from the human, or let the computer move
    3. Repeat until someone wins or it's a draw
    4. Offer a restart
    """

    def __init__(
        self,
        config: GameConfig,
        delay_ms: int = UIConfig.COMPUTER_MOVE_DELAY_MS,
        input_func: Optional[Callable[[str], str]] = None,
        sleep_func: Optional[Callable[[float], None]] = None
    ):
        """
        Initialize the console game.

        Args:
            config: Mode, difficulty and the human's symbol.
            delay_ms: Pause before each computer move.
            input_func: Where commands are read from (default: input).
            sleep_func: Used for the pause before computer moves
                (default: time.sleep).
        """
        self.config = config
        self.delay_ms = delay_ms
        self._input = input_func if input_func is not None else input
        self._sleep = sleep_func if sleep_func is not None else time.sleep

        self.session = new_session()
        self.is_running = False
        self.games_finished = 0

    def start(self):
        """Start the game."""
        print("\n" + "="*40)
        print("   Tic Tac Toe")
        if self.config.vs_computer:
            print(f"   You play: {self.config.human_symbol.value}")
            print(f"   Computer plays: {self.config.computer_symbol.value}"
                  f" ({self.config.difficulty.value})")
        else:
            print("   Player vs Player")
        print("="*40)
        print("Enter a cell 0-8, 'h' for a hint, 'r' to restart, 'q' to quit\n")

        self.is_running = True
        try:
            self._game_loop()
        except (KeyboardInterrupt, EOFError):
            print("\n\nGame interrupted by user.")
        finally:
            self.is_running = False

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            if status(self.session.board).is_over:
                self._show_game_result()
                self.games_finished += 1
                self._ask_restart()
                continue

            if is_computer_turn(self.session, self.config):
                self._computer_move()
                continue

            self._print_board()
            command = self._input(f"{self.session.next_to_move.value} to move > ").strip().lower()
            self._handle_command(command)

    def _handle_command(self, command: str):
        if command in ("q", "quit"):
            print("\nGame quit by user.")
            self.is_running = False
        elif command in ("r", "restart"):
            self._reset_game()
        elif command in ("h", "hint"):
            # Hints always come from the strongest player
            advisor = AIPlayer(self.session.next_to_move, Difficulty.HARD)
            print(advisor.suggest_move(self.session.board))
        elif command.isdecimal():
            self._process_human_move(int(command))
        else:
            print(f"WARNING: Unknown command '{command}'")

    def _process_human_move(self, index: int):
        """
        Process a human move.

        Args:
            index: Cell the human chose.
        """
        try:
            self.session = submit_move(self.session, index, self.config)
        except GameError as e:
            print(f"WARNING: {e}")
            return

        print(f"\n>>> {self.session.next_to_move.opposite().value} played cell {index}")

    def _computer_move(self):
        """Let the computer play its move."""
        self._print_board()
        print("\n>>> Computer is thinking...")
        if self.delay_ms > 0:
            self._sleep(self.delay_ms / 1000.0)

        before = self.session.board
        self.session = play_computer_turn(self.session, self.config)

        played = [i for i in before.legal_moves() if self.session.board[i] is not None]
        if played:
            print(f">>> Computer played cell {played[0]}")

    def _print_board(self):
        print()
        print(self.session.board)
        print()

    def _show_game_result(self):
        """Show the final game result."""
        self._print_board()
        outcome = status(self.session.board)

        print("="*40)
        print("   GAME OVER!")
        if outcome.winner is not None:
            print(f"   Winning line: {winning_line(self.session.board)}")
            if not self.config.vs_computer:
                print(f"\n{outcome.winner.value} wins!")
            elif outcome.winner == self.config.human_symbol:
                print("\nCongratulations! You won!")
            else:
                print("\nComputer wins! Better luck next time!")
        else:
            print("\nIt's a draw! Good game!")
        print("="*40)

    def _ask_restart(self):
        answer = self._input("Play again? (r = restart, q = quit) > ").strip().lower()
        if answer in ("r", "restart", "y", "yes"):
            self._reset_game()
        else:
            self.is_running = False

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.session = restart(self.session)


def main(argv: Optional[list] = None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic Tac Toe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without the window (console mode)"
    )
    parser.add_argument(
        "--mode",
        choices=["pvp", "pvc"],
        default="pvc",
        help="pvp: two players, pvc: play against the computer"
    )
    parser.add_argument(
        "--difficulty",
        choices=["easy", "medium", "hard"],
        default="easy",
        help="Computer strength"
    )
    parser.add_argument(
        "--symbol",
        choices=["X", "O", "x", "o"],
        default="X",
        help="Symbol you play as (X always moves first)"
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=UIConfig.COMPUTER_MOVE_DELAY_MS,
        help="Pause before computer moves, in milliseconds"
    )

    args = parser.parse_args(argv)
    config = GameConfig.from_strings(args.mode, args.difficulty, args.symbol)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(config=config, delay_ms=args.delay)
        ui.run()
        return

    game = ConsoleGame(config, delay_ms=args.delay)
    try:
        game.start()
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
