"""
Game configuration for TicTacToe.
Constants for the board, the AI opponent, and session defaults.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Tweak these to change how the AI opens or how fast it answers.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    BOARD_CELLS = BOARD_SIZE * BOARD_SIZE  # 9 cells, row-major 0-8

    # ==================== AI SETTINGS ====================
    # Preference order for the opening move: center, corners, then edges
    OPENING_ORDER = [4, 0, 2, 6, 8, 1, 3, 5, 7]

    # Use the opening order while at most this many marks are on the board
    OPENING_MAX_MARKS = 1

    # Terminal scores from the AI's point of view
    WIN_SCORE = 10
    LOSS_SCORE = -10
    DRAW_SCORE = 0

    # ==================== SESSION SETTINGS ====================
    # Pause before the AI answers (milliseconds). Cosmetic only.
    AI_DELAY_MS = 150

    DEFAULT_MODE = "ai"        # "pvp" or "ai"
    DEFAULT_HUMAN_MARK = "X"   # X always moves first
