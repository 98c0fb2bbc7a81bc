"""
AI player for tic-tac-toe.
Uses minimax with alpha-beta pruning to choose the best move.
"""

import logging
from typing import Optional

from .game_state import GameState, Player
from .search import SearchResult, SearchStats, search

logger = logging.getLogger(__name__)


class AIPlayer:
    """
    An AI that plays tic-tac-toe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(self, player: Player = Player.O):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
        """
        self.player = player

        # How much of the tree the last search visited (for debugging)
        self.last_stats = SearchStats()

    def analyse(self, game_state: GameState) -> SearchResult:
        """Score the position for the side to move, whoever that is."""
        self.last_stats = SearchStats()
        result = search(game_state, self.last_stats)

        logger.debug(
            "Evaluated %d positions (%d cutoffs). Best move: %s (score: %s)",
            self.last_stats.positions,
            self.last_stats.cutoffs,
            result.best_move,
            result.score
        )
        return result

    def get_best_move(self, game_state: GameState) -> Optional[int]:
        """
        Get the best move for the current position.

        Args:
            game_state: Current game state.

        Returns:
            Cell index of the best move, or None if the game is over
            or it is not this player's turn.
        """
        if game_state.current_player != self.player:
            logger.warning("It's not %s's turn!", self.player.symbol)
            return None

        return self.analyse(game_state).best_move
