"""
Configuration for TicTacToe.

GameConfig is chosen by whoever drives the game (console or window) and
handed to the controller on every call; the logic package never keeps it.
"""

from enum import Enum
from dataclasses import dataclass

from .game_state import Symbol


class GameMode(Enum):
    """Who is playing."""
    PVP = "pvp"   # Human vs human on one board
    PVC = "pvc"   # Human vs computer


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"        # Random moves
    MEDIUM = "medium"    # Win or block, else random
    HARD = "hard"        # Full minimax


@dataclass(frozen=True)
class GameConfig:
    """Mode, difficulty and which symbol the human controls."""

    mode: GameMode = GameMode.PVP
    difficulty: Difficulty = Difficulty.EASY
    human_symbol: Symbol = Symbol.X

    @property
    def computer_symbol(self) -> Symbol:
        return self.human_symbol.opposite()

    @property
    def vs_computer(self) -> bool:
        return self.mode == GameMode.PVC

    @classmethod
    def from_strings(
        cls,
        mode: str = "pvp",
        difficulty: str = "easy",
        symbol: str = "X"
    ) -> "GameConfig":
        """
        Build a config from plain strings (command line, form values).

        Raises:
            ValueError: If any value is not recognised.
        """
        return cls(
            mode=GameMode(mode.lower()),
            difficulty=Difficulty(difficulty.lower()),
            human_symbol=Symbol(symbol.upper()),
        )


class UIConfig:
    """
    Settings for the console and window front ends.
    Change these values to taste!
    """

    # ==================== PACING ====================
    # Pause before the computer plays, so its move is visible
    COMPUTER_MOVE_DELAY_MS = 500

    # ==================== WINDOW ====================
    WINDOW_TITLE = "Tic Tac Toe"
    CELL_FONT = ("Segoe UI", 32, "bold")
    LABEL_FONT = ("Segoe UI", 11)
    STATUS_FONT = ("Segoe UI", 12)

    # ==================== COLORS ====================
    BACKGROUND = "#1a1a2e"
    CELL_BACKGROUND = "#16213e"
    WIN_HIGHLIGHT = "#00ff88"
    STATUS_COLOR = "#ffd700"
    SYMBOL_COLORS = {
        "X": "#00d4ff",
        "O": "#fbbf24",
    }
