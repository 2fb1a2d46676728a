"""
Board basics: cell states, the 9-cell board, move application, serialization.
Notes:
- A board is a plain list of 9 cells, index i -> row i // 3, column i % 3.
- Nought is the human and always moves first; Cross is the computer.
- Boards serialize to 9 digits: 0=empty, 1=nought, 2=cross.
"""
from enum import IntEnum
from typing import List

from .errors import InvalidBoardError

BOARD_SIZE = 9


class Cell(IntEnum):
    EMPTY = 0
    NOUGHT = 1
    CROSS = 2

    @property
    def symbol(self) -> str:
        return {Cell.EMPTY: " ", Cell.NOUGHT: "O", Cell.CROSS: "X"}[self]


Board = List[Cell]


def new_board() -> Board:
    return [Cell.EMPTY] * BOARD_SIZE


def apply_move(board: Board, index: int, mark: Cell) -> bool:
    """Place ``mark`` at ``index``.

    Placing a real mark on an occupied cell is refused and returns False.
    Placing ``Cell.EMPTY`` always succeeds, which is how trial moves are undone.
    """
    if not 0 <= index < BOARD_SIZE:
        raise IndexError(f"Cell index out of range: {index}")
    if mark != Cell.EMPTY and board[index] != Cell.EMPTY:
        return False
    board[index] = mark
    return True


def available_moves(board: Board) -> List[int]:
    return [i for i, v in enumerate(board) if v == Cell.EMPTY]


def serialize_board(board: Board) -> str:
    return ''.join(str(int(cell)) for cell in board)


def parse_board(board_str: str) -> Board:
    raw = board_str.strip()
    if len(raw) != BOARD_SIZE or any(c not in "012" for c in raw):
        raise InvalidBoardError(f"Invalid board string {board_str!r}. Must be 9 chars of 0/1/2.")
    return [Cell(int(c)) for c in raw]
