"""
Game configuration for console TicTacToe.
All the settings for the board, the marks, and the minimax search.
"""

from .marks import Cell


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak how the game looks and reports.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # ==================== MARK SETTINGS ====================
    # Fixed for the lifetime of a game, must be distinct
    ENGINE_MARK = Cell.MARK_A
    HUMAN_MARK = Cell.MARK_B

    # How each cell is drawn on the console
    MARK_GLYPHS = {
        Cell.MARK_A: "X",
        Cell.MARK_B: "O",
        Cell.EMPTY: " ",
    }

    # ==================== SEARCH SETTINGS ====================
    # Score of a won position at depth 0 (prefer faster wins)
    WIN_REWARD = 10

    # Seed for the max/min accumulators, larger than any reachable score
    SCORE_BOUND = 1000

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
