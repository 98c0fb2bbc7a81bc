"""
Tic-tac-toe with a perfect computer opponent.
Handles game state, rules, and the minimax AI.
"""

__version__ = "1.0.0"

from .game_state import GameState, Player, InvalidMove
from .win_checker import WinChecker, GameStatus, StatusKind, WIN_LINES
from .move_validator import MoveValidator, ValidationResult
from .search import SearchResult, evaluate, minimax
from .ai_player import AIPlayer
from .controller import TurnController, try_apply_move, best_move_for, current_status
