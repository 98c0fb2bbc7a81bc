"""
Configuration for the tic-tac-toe game.
Who plays which side, logging, and the look of the board window.
"""

from .game_state import Player


class GameConfig:
    """
    Configuration class for game settings.
    Command-line flags in main.py override some of these for one run.
    """

    # ==================== PLAYERS ====================
    # The computer plays O and answers every human move
    AI_PLAYER = Player.O

    # ==================== LOGGING ====================
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # ==================== WINDOW ====================
    WINDOW_TITLE = "Tic-Tac-Toe"
    CELL_FONT = ('Segoe UI', 28, 'bold')
    STATUS_FONT = ('Segoe UI', 12)

    BACKGROUND = '#1a1a2e'
    CELL_BG = '#16213e'
    DIM_BG = '#0f0f1a'

    # Mark colours, normal and dimmed
    MARK_COLORS = {
        Player.X: ('#f87171', '#5c2a2a'),
        Player.O: ('#10b981', '#1f4a3c'),
    }
    STATUS_COLOR = '#ffd700'
