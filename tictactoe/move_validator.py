"""
Move validator for tic-tac-toe.
Validates that moves follow the rules before they reach the board.
"""

from typing import Optional
from dataclasses import dataclass

from .game_state import GameState, Player, BOARD_CELLS


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates tic-tac-toe moves.

    Rules:
    1. Position must be a cell index 0-8
    2. Can only place on empty cells
    3. Game must not be over
    4. Players take turns, X first
    """

    def validate_move(
        self,
        game_state: GameState,
        pos: int,
        player: Player
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            pos: Cell to place the mark on (0-8).
            player: Who is moving.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not isinstance(pos, int) or not 0 <= pos < BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {pos!r}. Must be 0-8."
            )

        if game_state.board[pos] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {pos} is already occupied by {game_state.board[pos].symbol}"
            )

        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if player != game_state.current_player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's not {player.symbol}'s turn!"
            )

        return ValidationResult(is_valid=True)
