"""
Game state management for TicTacToe.
Tracks the board, current mark, move history and the result.
"""

import logging
from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .config import GameConfig

logger = logging.getLogger(__name__)


class Mark(Enum):
    """The two marks a player can place."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other mark."""
        return Mark.O if self == Mark.X else Mark.X


class GameMode(Enum):
    """Who is playing."""
    PVP = "pvp"   # Human vs human on the same board
    AI = "ai"     # Human vs the unbeatable computer


# A board is 9 cells in row-major order; None means empty
Board = List[Optional[Mark]]

# A winning line is three board indices
Line = Tuple[int, int, int]


def empty_board() -> Board:
    """Create an empty 3x3 board."""
    return [None] * GameConfig.BOARD_CELLS


def count_marks(board: Board) -> int:
    """Count how many cells are filled."""
    return sum(1 for cell in board if cell is not None)


def empty_cells(board: Board) -> List[int]:
    """Indices of the empty cells, in increasing order."""
    return [i for i, cell in enumerate(board) if cell is None]


def board_from_string(text: str) -> Board:
    """
    Build a board from a 9 character string such as "XO_ _X_ __O".

    Spaces are ignored, "X" and "O" are marks, anything else is empty.
    Handy for tests and for the console.
    """
    chars = [c for c in text if not c.isspace()]
    if len(chars) != GameConfig.BOARD_CELLS:
        raise ValueError(f"Board string must have {GameConfig.BOARD_CELLS} cells, got {len(chars)}")

    board = empty_board()
    for i, c in enumerate(chars):
        if c.upper() == "X":
            board[i] = Mark.X
        elif c.upper() == "O":
            board[i] = Mark.O
    return board


@dataclass
class Move:
    """
    A move in the game.
    """
    mark: Mark          # Who made the move
    index: int          # Cell index (0-8)
    move_number: int    # Which move of the game this is (0-8)


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 9-cell board
    - Whose turn it is
    - Move history
    - Game status (ongoing, won, draw)
    """

    board: Board = field(default_factory=empty_board)

    # X always starts
    current_mark: Mark = Mark.X

    moves: List[Move] = field(default_factory=list)

    # Game result (filled in by WinChecker.update_game_state)
    winner: Optional[Mark] = None
    winning_line: Optional[Line] = None
    is_draw: bool = False
    is_game_over: bool = False

    def make_move(self, index: int) -> bool:
        """
        Place the current mark at the given cell and pass the turn.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was made, False otherwise.
        """
        if self.is_game_over:
            logger.warning("Game is already over!")
            return False

        if self.board[index] is not None:
            logger.warning("Cell %d is already occupied by %s", index, self.board[index].value)
            return False

        self.board[index] = self.current_mark
        self.moves.append(Move(
            mark=self.current_mark,
            index=index,
            move_number=len(self.moves)
        ))

        # Winner check is done by WinChecker; just switch turns here
        self.current_mark = self.current_mark.opposite()

        return True

    def get_empty_cells(self) -> List[int]:
        """Get the indices of all empty cells."""
        return empty_cells(self.board)

    def marks_placed(self) -> int:
        """How many marks are on the board."""
        return count_marks(self.board)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_mark=self.current_mark,
            moves=list(self.moves),
            winner=self.winner,
            winning_line=self.winning_line,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over
        )

    def format_board(self) -> str:
        """
        Render the board as text. Empty cells show their 1-9 number
        so a console player knows what to type.
        """
        rows = []
        for row in range(GameConfig.BOARD_SIZE):
            cells = []
            for col in range(GameConfig.BOARD_SIZE):
                index = row * GameConfig.BOARD_SIZE + col
                mark = self.board[index]
                cells.append(mark.value if mark is not None else str(index + 1))
            rows.append(" " + " | ".join(cells))
        return "\n---+---+---\n".join(rows)

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.format_board())

        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.value} WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_mark.value}")
