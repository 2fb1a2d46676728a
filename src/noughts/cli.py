from __future__ import annotations

import argparse
import csv
import logging
import sys

from .board import parse_board, serialize_board
from .console import read_move, render_board
from .errors import InvalidBoardError, MalformedInputError
from .game import GameState, play_game
from .rules import is_terminal
from .settings import LOG_FORMAT, log_level
from .solver import minimax, side_to_move


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="noughts", description="Tic-tac-toe against an unbeatable computer")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    sub.add_parser("play", help="Play a game on the console (default); you are O and move first")

    p_sol = sub.add_parser(
        "solve",
        help="Evaluate a board with minimax (9 digits, 0=empty,1=O,2=X)",
    )
    p_sol.add_argument("--board", help="Board string, e.g., 100020000 (omit with --stdin)")
    p_sol.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )
    side = p_sol.add_mutually_exclusive_group()
    side.add_argument(
        "--maximizing",
        dest="maximizing",
        action="store_const",
        const=True,
        default=None,
        help="Search with O (the human) to move",
    )
    side.add_argument(
        "--minimizing",
        dest="maximizing",
        action="store_const",
        const=False,
        help="Search with X (the computer) to move",
    )

    return p


def _play() -> int:
    try:
        result = play_game(read_move, render_board)
    except MalformedInputError as e:
        logging.error("%s", e)
        return 1
    if result.state == GameState.WON:
        logging.info("winner=%s turns=%d", result.winner.symbol, result.turns)
    else:
        logging.info("draw turns=%d", result.turns)
    return 0


def _solve(ns: argparse.Namespace) -> int:
    if ns.stdin:
        w = csv.writer(sys.stdout)
        w.writerow(["board", "maximizing", "score", "best_index"])
        for line in sys.stdin:
            raw = line.strip()
            if not raw:
                continue
            try:
                board = parse_board(raw)
            except InvalidBoardError:
                continue
            maximizing = side_to_move(board) if ns.maximizing is None else ns.maximizing
            score, idx = minimax(board, maximizing)
            w.writerow([serialize_board(board), int(maximizing), score, idx])
        return 0

    try:
        board = parse_board(ns.board or "")
    except InvalidBoardError as e:
        logging.error("%s", e)
        return 2
    maximizing = side_to_move(board) if ns.maximizing is None else ns.maximizing
    score, idx = minimax(board, maximizing)
    logging.info(
        "to_move=%s score=%d best_index=%d terminal=%s",
        "O" if maximizing else "X",
        score,
        idx,
        is_terminal(board),
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=log_level(getattr(ns, "verbose", False)), format=LOG_FORMAT)

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("noughts"))
        except Exception:
            print("unknown")
        return 0

    if ns.cmd == "solve":
        return _solve(ns)

    return _play()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
