"""
Game session for TicTacToe.
Holds whose turn it is and feeds each move to the win checker and the AI.
"""

import logging
from typing import Optional
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState, GameMode, Mark
from .move_validator import MoveValidator
from .win_checker import WinChecker, Outcome, GameStatus
from .ai_player import AIPlayer

logger = logging.getLogger(__name__)


@dataclass
class MoveResult:
    """What happened when a move was played."""
    accepted: bool
    index: Optional[int] = None
    mark: Optional[Mark] = None
    outcome: Optional[Outcome] = None
    error_message: Optional[str] = None


class GameSession:
    """
    One game of TicTacToe, human vs human or human vs computer.

    Game flow (AI mode):
    1. Human places a mark with play_human_move()
    2. Session checks for a winner
    3. If it's now the AI's turn, the front end calls play_ai_move()
    4. Repeat until someone wins or it's a draw

    The session never plays the AI move on its own so the front end
    can decide when (and after what delay) to show it.
    """

    def __init__(
        self,
        mode: GameMode = GameMode(GameConfig.DEFAULT_MODE),
        human_mark: Mark = Mark(GameConfig.DEFAULT_HUMAN_MARK)
    ):
        """
        Initialize a session.

        Args:
            mode: PVP or AI.
            human_mark: Mark the human plays in AI mode.
        """
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self.mode = mode
        self.human_mark = human_mark
        self.game_state = GameState()
        self.ai: Optional[AIPlayer] = None

        self.reset()

    @property
    def ai_mark(self) -> Optional[Mark]:
        """The computer's mark, or None in PVP mode."""
        return self.ai.mark if self.ai else None

    @property
    def is_over(self) -> bool:
        return self.game_state.is_game_over

    @property
    def is_ai_turn(self) -> bool:
        """True when the computer should move next."""
        return (
            self.ai is not None
            and not self.game_state.is_game_over
            and self.game_state.current_mark == self.ai.mark
        )

    def reset(self, mode: Optional[GameMode] = None, human_mark: Optional[Mark] = None):
        """
        Start a new game, optionally switching mode or the human's mark.

        X always moves first, so in AI mode with the human on O
        the AI is to move right after a reset.
        """
        if mode is not None:
            self.mode = mode
        if human_mark is not None:
            self.human_mark = human_mark

        self.game_state = GameState()

        if self.mode == GameMode.AI:
            self.ai = AIPlayer(self.human_mark.opposite())
        else:
            self.ai = None

        logger.info(
            "New game: mode=%s human=%s ai=%s",
            self.mode.value,
            self.human_mark.value,
            self.ai_mark.value if self.ai_mark else "-"
        )

    def play_human_move(self, index: int) -> MoveResult:
        """
        Play a human move at the given cell.

        Args:
            index: Cell index (0-8).

        Returns:
            MoveResult; rejected moves leave the game untouched.
        """
        if self.is_ai_turn:
            return MoveResult(accepted=False, index=index, error_message="It's the AI's turn!")

        validation = self.validator.validate_move(self.game_state, index)
        if not validation.is_valid:
            logger.debug("Rejected move at %s: %s", index, validation.error_message)
            return MoveResult(accepted=False, index=index, error_message=validation.error_message)

        return self._place(index)

    def play_ai_move(self) -> MoveResult:
        """
        Let the computer play its move.

        Returns:
            MoveResult with the chosen cell.
        """
        if not self.is_ai_turn:
            return MoveResult(accepted=False, error_message="It's not the AI's turn!")

        index = self.ai.select_move(self.game_state.board)
        return self._place(index)

    def _place(self, index: int) -> MoveResult:
        """Place the current mark, then check for a winner."""
        mark = self.game_state.current_mark
        self.game_state.make_move(index)
        outcome = self.win_checker.update_game_state(self.game_state)

        logger.debug("%s played %d -> %s", mark.value, index, outcome.status.value)

        return MoveResult(accepted=True, index=index, mark=mark, outcome=outcome)

    def outcome(self) -> Outcome:
        """Outcome of the current board."""
        return self.win_checker.evaluate(self.game_state.board)

    def status_text(self) -> str:
        """One line describing the game for the status bar."""
        outcome = self.outcome()

        if outcome.status == GameStatus.WON:
            return f"{outcome.winner.value} wins!"
        if outcome.status == GameStatus.DRAW:
            return "It's a draw."

        current = self.game_state.current_mark
        if self.mode == GameMode.PVP:
            return f"Turn: {current.value}"

        who = "Your" if current == self.human_mark else "AI"
        return f"{who} turn: {current.value}"
