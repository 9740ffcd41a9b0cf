"""
Win checker for TicTacToe.
Classifies a board as ongoing, won or drawn.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass

from .game_state import GameState, Mark, Board, Line


class GameStatus(Enum):
    """The three possible states of a board."""
    ONGOING = "ongoing"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.

    ``winner`` and ``line`` are only set when ``status`` is WON.
    """
    status: GameStatus
    winner: Optional[Mark] = None
    line: Optional[Line] = None

    @classmethod
    def ongoing(cls) -> "Outcome":
        return cls(GameStatus.ONGOING)

    @classmethod
    def won(cls, mark: Mark, line: Line) -> "Outcome":
        return cls(GameStatus.WON, winner=mark, line=line)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(GameStatus.DRAW)

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.ONGOING


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally).
    The checker is stateless; one instance can be shared freely.
    """

    # All possible winning lines, in the order they are checked
    WINNING_LINES = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    def evaluate(self, board: Board) -> Outcome:
        """
        Classify a board.

        The first completed line (rows, then columns, then diagonals)
        decides the winner. A full board with no completed line is a draw.

        Args:
            board: 9 cells, each None or a Mark.

        Returns:
            The Outcome for this board.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return Outcome.won(winner, line)

        if all(cell is not None for cell in board):
            return Outcome.draw()

        return Outcome.ongoing()

    def _check_line(self, board: Board, line: Line) -> Optional[Mark]:
        """Return the mark owning all three cells of the line, if any."""
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def check_winner(self, board: Board) -> Optional[Mark]:
        """The winning Mark, or None if nobody has won yet."""
        return self.evaluate(board).winner

    def check_draw(self, board: Board) -> bool:
        """True if the board is full and nobody has won."""
        return self.evaluate(board).status == GameStatus.DRAW

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """The winning line, or None."""
        return self.evaluate(board).line

    def update_game_state(self, game_state: GameState) -> Outcome:
        """
        Copy the board's outcome into the game state flags.

        Args:
            game_state: The game state to update.

        Returns:
            The outcome of the current board.
        """
        outcome = self.evaluate(game_state.board)

        if outcome.status == GameStatus.WON:
            game_state.winner = outcome.winner
            game_state.winning_line = outcome.line
            game_state.is_game_over = True
        elif outcome.status == GameStatus.DRAW:
            game_state.is_draw = True
            game_state.is_game_over = True

        return outcome


_checker = WinChecker()


def evaluate(board: Board) -> Outcome:
    """Classify a board as ongoing, won or drawn."""
    return _checker.evaluate(board)
