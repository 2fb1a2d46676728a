import itertools

import pytest

from noughts.board import Cell, new_board, parse_board
from noughts.rules import (
    WINNING_PATTERNS,
    board_mask,
    has_won,
    is_full,
    is_terminal,
    winner,
)


def _pattern_cells(pattern: int) -> tuple:
    return tuple(i for i in range(9) if pattern & (1 << (8 - i)))


LINES = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
]


def test_patterns_are_the_eight_lines():
    assert len(WINNING_PATTERNS) == 8
    assert sorted(_pattern_cells(p) for p in WINNING_PATTERNS) == sorted(LINES)
    assert all(bin(p).count("1") == 3 for p in WINNING_PATTERNS)


def test_board_mask_bit_order():
    b = parse_board("100000002")
    assert board_mask(b, Cell.NOUGHT) == 0b100000000
    assert board_mask(b, Cell.CROSS) == 0b000000001
    assert board_mask(b, Cell.EMPTY) == 0b011111110


@pytest.mark.parametrize("line", LINES)
@pytest.mark.parametrize("mark", [Cell.NOUGHT, Cell.CROSS])
def test_full_line_wins(line, mark: Cell):
    b = new_board()
    for i in line:
        b[i] = mark
    assert has_won(b, mark)
    other = Cell.CROSS if mark == Cell.NOUGHT else Cell.NOUGHT
    assert not has_won(b, other)


@pytest.mark.parametrize("line", LINES)
def test_two_of_three_never_wins(line):
    for pair in itertools.combinations(line, 2):
        b = new_board()
        for i in pair:
            b[i] = Cell.NOUGHT
        assert not has_won(b, Cell.NOUGHT)


def test_win_with_other_marks_around():
    # O on the anti-diagonal, X scattered elsewhere
    b = parse_board("221010122")
    assert has_won(b, Cell.NOUGHT)
    assert not has_won(b, Cell.CROSS)


def test_is_full():
    assert not is_full(new_board())
    assert not is_full(parse_board("121212210"))
    assert is_full(parse_board("121212212"))


def test_full_board_without_winner_is_terminal():
    b = parse_board("121121212")
    assert winner(b) is None
    assert is_full(b)
    assert is_terminal(b)


def test_winner_prefers_cross_when_both_lines_present():
    # unreachable by legal play, but not structurally prevented
    b = parse_board("111222000")
    assert winner(b) == Cell.CROSS


def test_empty_board_is_not_terminal():
    assert not is_terminal(new_board())
    assert winner(new_board()) is None
