"""
Game loop: alternates the human (Nought) and the computer (Cross).

The loop only talks to the outside world through two collaborators:
``read_move() -> int`` (an index, or -1 to ask again) and ``render(board)``.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .board import Board, Cell, apply_move, new_board
from .rules import is_full, winner
from .solver import NO_MOVE, minimax


class GameState(Enum):
    HUMAN_TURN = "human_turn"
    COMPUTER_TURN = "computer_turn"
    WON = "won"
    DRAWN = "drawn"

    @property
    def is_over(self) -> bool:
        return self in (GameState.WON, GameState.DRAWN)


@dataclass
class GameResult:
    state: GameState
    winner: Optional[Cell]
    turns: int
    board: Board


class Game:
    """One game session.

    ``turn`` counts accepted moves; the board and the counter are left alone
    when the human's move is rejected.
    """

    def __init__(self, read_move: Callable[[], int], render: Callable[[Board], None]):
        self.read_move = read_move
        self.render = render
        self.board: Board = new_board()
        self.turn = 0
        self.state = GameState.HUMAN_TURN
        self.winner: Optional[Cell] = None

    def start(self) -> None:
        self.render(self.board)

    def step(self) -> GameState:
        """Advance by one transition and return the new state."""
        if self.state == GameState.HUMAN_TURN:
            index = self.read_move()
            if index == NO_MOVE:
                return self.state
            if not apply_move(self.board, index, Cell.NOUGHT):
                logging.debug("rejected occupied cell %d", index)
                return self.state
            logging.debug("turn=%d human plays %d", self.turn, index)
            self._accept(GameState.COMPUTER_TURN)
        elif self.state == GameState.COMPUTER_TURN:
            score, index = minimax(self.board, False)
            logging.debug("turn=%d computer plays %d (score=%d)", self.turn, index, score)
            apply_move(self.board, index, Cell.CROSS)
            self._accept(GameState.HUMAN_TURN)
        return self.state

    def _accept(self, next_state: GameState) -> None:
        self.turn += 1
        self.render(self.board)
        self.winner = winner(self.board)
        if self.winner is not None:
            self.state = GameState.WON
        elif is_full(self.board):
            self.state = GameState.DRAWN
        else:
            self.state = next_state

    def run(self) -> GameResult:
        self.start()
        while not self.state.is_over:
            self.step()
        return self.result()

    def result(self) -> GameResult:
        return GameResult(
            state=self.state,
            winner=self.winner,
            turns=self.turn,
            board=self.board[:],
        )


def play_game(read_move: Callable[[], int], render: Callable[[Board], None]) -> GameResult:
    return Game(read_move, render).run()
