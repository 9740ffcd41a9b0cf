"""
AI player for TicTacToe.
Uses the Minimax algorithm with alpha-beta pruning to choose the best move.
"""

import logging
from typing import NamedTuple, Optional

from .config import GameConfig
from .game_state import GameState, Mark, Board, count_marks, empty_cells
from .win_checker import WinChecker, GameStatus

logger = logging.getLogger(__name__)


class SearchResult(NamedTuple):
    """Score of a position and the move that reaches it."""
    score: float
    index: Optional[int]


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI always plays optimally - it wins if possible,
    blocks the opponent if needed, and never loses (at worst, draws).
    """

    def __init__(self, mark: Mark = Mark.O, prefer_fast_wins: bool = False):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays (default: O)
            prefer_fast_wins: Subtract the search depth from terminal scores
                so a quicker win (or a slower loss) scores better.
        """
        self.mark = mark
        self.prefer_fast_wins = prefer_fast_wins
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.nodes_evaluated = 0

    def select_move(self, board: Board) -> int:
        """
        Pick the best empty cell for the AI.

        The board must have at least one empty cell and no winner yet.
        It is never modified.

        Args:
            board: Current board, 9 cells.

        Returns:
            Index (0-8) of the chosen cell.
        """
        self.nodes_evaluated = 0

        # Opening: no need to search the biggest part of the tree
        if count_marks(board) <= GameConfig.OPENING_MAX_MARKS:
            for index in GameConfig.OPENING_ORDER:
                if board[index] is None:
                    logger.debug("AI (%s) plays opening move %d", self.mark.value, index)
                    return index

        result = self.search(board)

        logger.debug(
            "AI (%s) evaluated %d positions. Best move: %s (score: %s)",
            self.mark.value, self.nodes_evaluated, result.index, result.score
        )

        return result.index

    def search(
        self,
        board: Board,
        player: Optional[Mark] = None,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> SearchResult:
        """
        Run minimax from this board without touching the caller's list.

        Args:
            board: Board to search from.
            player: Mark to move (default: the AI's mark).
            alpha: Best score the AI is already sure of.
            beta: Best score the opponent is already sure of.

        Returns:
            SearchResult with the score and the move that reaches it.
        """
        if player is None:
            player = self.mark

        # Search works on its own buffer: place, recurse, undo
        return self._minimax(list(board), player, alpha, beta, depth=0)

    def _minimax(
        self,
        board: Board,
        player: Mark,
        alpha: float,
        beta: float,
        depth: int
    ) -> SearchResult:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            board: Search buffer (restored before returning).
            player: Mark to move at this node.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.
            depth: Plies played since the root.

        Returns:
            The score of the position and the best move found.
        """
        self.nodes_evaluated += 1

        # Check terminal states
        outcome = self.win_checker.evaluate(board)

        if outcome.status == GameStatus.WON:
            return SearchResult(self._terminal_score(outcome.winner, depth), None)
        elif outcome.status == GameStatus.DRAW:
            return SearchResult(GameConfig.DRAW_SCORE, None)

        valid_moves = empty_cells(board)
        is_maximizing = player == self.mark

        best = SearchResult(
            float('-inf') if is_maximizing else float('inf'),
            valid_moves[0]
        )

        for index in valid_moves:
            board[index] = player
            score = self._minimax(board, player.opposite(), alpha, beta, depth + 1).score
            board[index] = None

            if is_maximizing:
                if score > best.score:
                    best = SearchResult(score, index)
                alpha = max(alpha, score)
            else:
                if score < best.score:
                    best = SearchResult(score, index)
                beta = min(beta, score)

            if beta <= alpha:
                break  # Prune

        return best

    def _terminal_score(self, winner: Mark, depth: int) -> int:
        """Score a won board from the AI's point of view."""
        if winner == self.mark:
            score = GameConfig.WIN_SCORE
            return score - depth if self.prefer_fast_wins else score

        score = GameConfig.LOSS_SCORE
        return score + depth if self.prefer_fast_wins else score

    def get_best_move(self, game_state: GameState) -> Optional[int]:
        """
        Get the best move for the current game.

        Args:
            game_state: Current game state.

        Returns:
            Cell index of the best move, or None if the AI can't move.
        """
        if game_state.is_game_over:
            logger.warning("Game is over, AI has nothing to play")
            return None

        # Check if it's our turn
        if game_state.current_mark != self.mark:
            logger.warning("It's not %s's turn!", self.mark.value)
            return None

        if not game_state.get_empty_cells():
            return None

        return self.select_move(game_state.board)


def select_move(board: Board, computer_mark: Mark) -> int:
    """Return the optimal empty cell for ``computer_mark``."""
    return AIPlayer(computer_mark).select_move(board)
