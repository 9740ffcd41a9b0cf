"""
Logic module for TicTacToe.
Handles game state, rules, and the unbeatable AI opponent.
"""

from .config import GameConfig
from .game_state import GameState, GameMode, Mark, Move
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, Outcome, GameStatus, evaluate
from .ai_player import AIPlayer, SearchResult, select_move
from .session import GameSession, MoveResult
