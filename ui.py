"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (click a cell to play)
- Game status and whose turn it is
- Mode, difficulty and symbol selection
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from logic import (
    Difficulty,
    GameConfig,
    GameError,
    GameMode,
    Symbol,
    UIConfig,
    new_session,
    restart,
    submit_move,
    play_computer_turn,
    is_computer_turn,
    status,
    winning_line,
)


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, config: Optional[GameConfig] = None, delay_ms: int = UIConfig.COMPUTER_MOVE_DELAY_MS):
        """Initialize the UI."""
        self.config = config or GameConfig()
        self.delay_ms = delay_ms
        self.session = new_session()

        # At most one computer move is scheduled at a time
        self.pending_computer_move: Optional[str] = None

        # Create UI
        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(UIConfig.WINDOW_TITLE)
        self.root.configure(bg=UIConfig.BACKGROUND)
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=UIConfig.BACKGROUND)
        style.configure('TLabel', background=UIConfig.BACKGROUND, foreground='white', font=UIConfig.LABEL_FONT)
        style.configure('Status.TLabel', font=UIConfig.STATUS_FONT, foreground=UIConfig.STATUS_COLOR)
        style.configure('TRadiobutton', background=UIConfig.BACKGROUND, foreground='white')

        # Mode section
        mode_frame = ttk.Frame(main_frame)
        mode_frame.pack(pady=(0, 10))

        self.mode_var = tk.StringVar(value=self.config.mode.value)
        for text, value in [("Player vs Player", GameMode.PVP.value), ("Player vs Computer", GameMode.PVC.value)]:
            ttk.Radiobutton(
                mode_frame,
                text=text,
                value=value,
                variable=self.mode_var,
                command=self._on_config_change
            ).pack(side=tk.LEFT, padx=5)

        # Difficulty and symbol section (only shown against the computer)
        self.options_frame = options_frame = ttk.Frame(main_frame)

        ttk.Label(options_frame, text="Difficulty:").pack(side=tk.LEFT)
        self.diff_var = tk.StringVar(value=self.config.difficulty.value)
        self.diff_box = ttk.Combobox(
            options_frame,
            textvariable=self.diff_var,
            values=[d.value for d in Difficulty],
            state='readonly',
            width=8
        )
        self.diff_box.pack(side=tk.LEFT, padx=(5, 15))
        self.diff_box.bind('<<ComboboxSelected>>', lambda _event: self._on_config_change())

        ttk.Label(options_frame, text="You play as:").pack(side=tk.LEFT)
        self.symbol_var = tk.StringVar(value=self.config.human_symbol.value)
        self.symbol_box = ttk.Combobox(
            options_frame,
            textvariable=self.symbol_var,
            values=[s.value for s in Symbol],
            state='readonly',
            width=3
        )
        self.symbol_box.pack(side=tk.LEFT, padx=5)
        self.symbol_box.bind('<<ComboboxSelected>>', lambda _event: self._on_config_change())

        # Status
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)
        self._update_options_visibility()

        # Board
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for index in range(9):
            row, col = divmod(index, 3)
            cell = tk.Button(
                board_frame,
                text="",
                font=UIConfig.CELL_FONT,
                width=3,
                height=1,
                bg=UIConfig.CELL_BACKGROUND,
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="Restart Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Quit",
            font=('Segoe UI', 11),
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_config_change(self):
        """Read the selectors into a new config and start a fresh game."""
        self.config = GameConfig.from_strings(
            self.mode_var.get(),
            self.diff_var.get(),
            self.symbol_var.get(),
        )
        print(f"Config: {self.config.mode.value}, {self.config.difficulty.value}, "
              f"human plays {self.config.human_symbol.value}")
        self._update_options_visibility()
        self._reset_game()

    def _update_options_visibility(self):
        if self.config.vs_computer:
            self.options_frame.pack(pady=(0, 10), before=self.status_label)
        else:
            self.options_frame.pack_forget()

    def _on_cell_click(self, index: int):
        """Handle a click on a board cell."""
        if self.pending_computer_move is not None:
            return

        try:
            self.session = submit_move(self.session, index, self.config)
        except GameError as e:
            # Stray clicks (occupied cell, game over) are just ignored
            print(f"Ignored click on cell {index}: {e}")
            return

        self._refresh()

    def _schedule_computer_move(self):
        if self.pending_computer_move is None and is_computer_turn(self.session, self.config):
            self.pending_computer_move = self.root.after(self.delay_ms, self._computer_move)

    def _computer_move(self):
        """Play the computer's move (runs from the Tk event loop)."""
        self.pending_computer_move = None
        self.session = play_computer_turn(self.session, self.config)
        self._refresh()

    def _refresh(self):
        """Redraw the board and status, then let the computer move if it's its turn."""
        board = self.session.board
        line = winning_line(board) or ()

        for index, cell in enumerate(self.board_cells):
            symbol = board[index]
            cell.configure(
                text=symbol.value if symbol else "",
                fg=UIConfig.SYMBOL_COLORS[symbol.value] if symbol else 'white',
                bg=UIConfig.WIN_HIGHLIGHT if index in line else UIConfig.CELL_BACKGROUND
            )

        outcome = status(board)
        if outcome.is_over:
            self.status_label.configure(text=str(outcome))
        elif is_computer_turn(self.session, self.config):
            self.status_label.configure(text=f"Computer ({self.session.next_to_move.value}) is thinking...")
        else:
            self.status_label.configure(text=f"Next player: {self.session.next_to_move.value}")

        self._schedule_computer_move()

    def _reset_game(self):
        """Reset the game."""
        if self.pending_computer_move is not None:
            self.root.after_cancel(self.pending_computer_move)
            self.pending_computer_move = None

        self.session = restart(self.session)
        self._refresh()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


if __name__ == "__main__":
    TicTacToeUI(GameConfig(mode=GameMode.PVC)).run()
