"""
Game state management for TicTacToe.
Holds the symbols, the 3x3 board and the session (board + whose turn).

Board layout (row-major indices):

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .errors import IllegalMoveError


class Symbol(Enum):
    """The two game markers."""
    X = "X"
    O = "O"

    def opposite(self) -> "Symbol":
        """Get the other symbol."""
        return Symbol.O if self == Symbol.X else Symbol.X

    def __str__(self) -> str:
        return self.value


# A cell is either empty (None) or holds a symbol
Cell = Optional[Symbol]

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Named cell indices
TOP_LEFT, TOP_CENTER, TOP_RIGHT = 0, 1, 2
MIDDLE_LEFT, CENTER, MIDDLE_RIGHT = 3, 4, 5
BOTTOM_LEFT, BOTTOM_CENTER, BOTTOM_RIGHT = 6, 7, 8

Line = Tuple[int, int, int]

# All possible winning lines, in canonical scan order
LINES: Tuple[Line, ...] = (
    # Rows
    (TOP_LEFT, TOP_CENTER, TOP_RIGHT),
    (MIDDLE_LEFT, CENTER, MIDDLE_RIGHT),
    (BOTTOM_LEFT, BOTTOM_CENTER, BOTTOM_RIGHT),
    # Columns
    (TOP_LEFT, MIDDLE_LEFT, BOTTOM_LEFT),
    (TOP_CENTER, CENTER, BOTTOM_CENTER),
    (TOP_RIGHT, MIDDLE_RIGHT, BOTTOM_RIGHT),
    # Diagonals
    (TOP_LEFT, CENTER, BOTTOM_RIGHT),
    (TOP_RIGHT, CENTER, BOTTOM_LEFT),
)

# Characters accepted as an empty cell by Board.from_string
_EMPTY_CHARS = ".-_ "


def _check_index(index: int) -> None:
    # bool is an int subclass but never a sensible cell index
    if not isinstance(index, int) or isinstance(index, bool):
        raise IllegalMoveError(f"Cell index must be an int, got {index!r}")
    if not 0 <= index < CELL_COUNT:
        raise IllegalMoveError(f"Invalid position {index}. Must be 0-{CELL_COUNT - 1}.")


@dataclass(frozen=True)
class Board:
    """
    Immutable 3x3 board.

    Every operation that "changes" the board returns a new Board;
    the cells tuple of an existing board is never modified.
    """

    cells: Tuple[Cell, ...] = field(default=(None,) * CELL_COUNT)

    def __post_init__(self):
        cells = tuple(self.cells)
        if len(cells) != CELL_COUNT:
            raise ValueError(f"A board has {CELL_COUNT} cells, got {len(cells)}")
        for cell in cells:
            if cell is not None and not isinstance(cell, Symbol):
                raise ValueError(f"Cell must be a Symbol or None, got {cell!r}")
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> "Board":
        """Create an empty board."""
        return cls()

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from a compact string such as "XX.OO....".

        Empty cells may be written as '.', '-', '_' or a space.
        """
        if len(text) != CELL_COUNT:
            raise ValueError(f"Board string must have {CELL_COUNT} characters, got {len(text)}")

        cells: List[Cell] = []
        for char in text.upper():
            if char in _EMPTY_CHARS:
                cells.append(None)
            else:
                cells.append(Symbol(char))
        return cls(tuple(cells))

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __iter__(self):
        return iter(self.cells)

    def __len__(self) -> int:
        return CELL_COUNT

    def is_occupied(self, index: int) -> bool:
        """True if the cell at `index` holds a symbol."""
        _check_index(index)
        return self.cells[index] is not None

    def legal_moves(self) -> List[int]:
        """All empty cell indices in ascending order."""
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def apply(self, index: int, symbol: Symbol) -> "Board":
        """
        Return a new board with `symbol` placed at `index`.

        Raises:
            IllegalMoveError: If the index is out of range or the cell
                is already occupied.
        """
        _check_index(index)
        if self.cells[index] is not None:
            raise IllegalMoveError(
                f"Cell {index} is already occupied by {self.cells[index].value}"
            )

        new_cells = list(self.cells)
        new_cells[index] = symbol
        return Board(tuple(new_cells))

    def count(self, symbol: Symbol) -> int:
        return sum(1 for cell in self.cells if cell == symbol)

    def side_to_move(self) -> Symbol:
        """Infer whose turn it is from the board (X always starts)."""
        return Symbol.X if self.count(Symbol.X) == self.count(Symbol.O) else Symbol.O

    def to_string(self) -> str:
        """Compact one-line form, the inverse of from_string."""
        return "".join(cell.value if cell else "." for cell in self.cells)

    def __str__(self) -> str:
        rows = []
        for row in range(BOARD_SIZE):
            start = row * BOARD_SIZE
            rows.append(" | ".join(
                cell.value if cell else str(start + col)
                for col, cell in enumerate(self.cells[start:start + BOARD_SIZE])
            ))
        return "\n---+---+---\n".join(f" {r} " for r in rows)


def is_occupied(board: Board, index: int) -> bool:
    return board.is_occupied(index)


def legal_moves(board: Board) -> List[int]:
    return board.legal_moves()


def apply(board: Board, index: int, symbol: Symbol) -> Board:
    return board.apply(index, symbol)


def is_legal_board(board: Board) -> bool:
    """Check the turn-order invariant: X count equals O count or is one more."""
    x_count = board.count(Symbol.X)
    o_count = board.count(Symbol.O)
    return x_count == o_count or x_count == o_count + 1


@dataclass(frozen=True)
class GameSession:
    """
    The state owned by the turn controller.

    A session is never modified in place; each accepted move produces
    a new session.
    """

    board: Board = field(default_factory=Board)
    next_to_move: Symbol = Symbol.X
