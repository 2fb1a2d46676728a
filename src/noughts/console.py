"""
Console collaborators for the game loop: board rendering and move input.

Both take their streams as arguments and fall back to stdin/stdout at call time.
"""
import re
import sys
from typing import Optional, TextIO

from .board import Board
from .errors import MalformedInputError

PROMPT = "Please enter your move: "
OUT_OF_RANGE_MESSAGE = "Please enter a valid integer between 0 & 8!"
INVALID_MOVE = -1

_INTEGER = re.compile(r"[+-]?[0-9]+")
# same bounds as a signed 32-bit int
_INT_MIN, _INT_MAX = -2**31, 2**31 - 1


def format_board(board: Board) -> str:
    parts = []
    for i, cell in enumerate(board):
        parts.append(f"| {cell.symbol} |")
        if (i + 1) % 3 == 0:
            parts.append("\n")
    return "".join(parts)


def render_board(board: Board, out: Optional[TextIO] = None) -> None:
    out = out if out is not None else sys.stdout
    out.write(format_board(board))
    out.flush()


def parse_move(text: str, out: Optional[TextIO] = None) -> int:
    """Parse one line of input into a cell index.

    Text that is not a plain base-10 integer in the signed 32-bit range
    raises MalformedInputError. Integers outside [0, 8] print an advisory and return INVALID_MOVE so the caller re-prompts.
    """
    raw = text.strip()
    if not _INTEGER.fullmatch(raw):
        raise MalformedInputError(raw)
    value = int(raw)
    if not _INT_MIN <= value <= _INT_MAX:
        raise MalformedInputError(raw)
    if value < 0 or value > 8:
        out = out if out is not None else sys.stdout
        print(OUT_OF_RANGE_MESSAGE, file=out)
        return INVALID_MOVE
    return value


def read_move(inp: Optional[TextIO] = None, out: Optional[TextIO] = None) -> int:
    inp = inp if inp is not None else sys.stdin
    out = out if out is not None else sys.stdout
    out.write(PROMPT)
    out.flush()
    # readline() returns "" at end of input, which fails to parse like any other garbage
    return parse_move(inp.readline(), out)
