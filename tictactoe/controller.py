"""
Turn controller for tic-tac-toe.

The three module functions are everything a front end needs from the
core: apply a move, ask for the best move, and read the game status.
TurnController strings them together into a human-vs-computer game.
"""

import logging
from typing import Optional

from .ai_player import AIPlayer
from .config import GameConfig
from .game_state import GameState, InvalidMove, Player
from .move_validator import MoveValidator, ValidationResult
from .search import search
from .win_checker import GameStatus

logger = logging.getLogger(__name__)

_validator = MoveValidator()


def try_apply_move(state: GameState, position: int, player: Player) -> ValidationResult:
    """
    Validate a move and apply it if it is legal.

    Args:
        state: Game to move in.
        position: Cell index (0-8).
        player: Who is moving.

    Returns:
        ValidationResult. When it is not valid the board is unchanged.
    """
    result = _validator.validate_move(state, position, player)
    if not result.is_valid:
        logger.warning("Rejected %s at %r: %s", player.symbol, position, result.error_message)
        return result

    try:
        state.apply_move(position, player)
    except InvalidMove as e:
        logger.warning("Rejected %s at %r: %s", player.symbol, position, e)
        return ValidationResult(is_valid=False, error_message=str(e))

    logger.debug("%s plays %d", player.symbol, position)
    return result


def best_move_for(state: GameState) -> Optional[int]:
    """
    Best move for the side to move, or None if the game is over.
    The score is discarded.
    """
    return search(state).best_move


def current_status(state: GameState) -> GameStatus:
    """Status of the game; when won, its line is the one to highlight."""
    return state.status()


class TurnController:
    """
    Runs a game between a human and the computer.

    Game flow:
    1. Human places a mark
    2. If the game is not over, the computer answers at once
    3. Repeat until someone wins or it's a draw
    """

    def __init__(self, ai_player: Player = GameConfig.AI_PLAYER):
        """
        Args:
            ai_player: Which side the computer plays. If it is X the
                computer opens every game.
        """
        self.state = GameState()
        self.ai = AIPlayer(ai_player)
        self.human_player = ai_player.opposite()

        # Cell the computer last played, for front ends to report
        self.last_ai_move: Optional[int] = None

        self.new_game()

    @property
    def status(self) -> GameStatus:
        return current_status(self.state)

    @property
    def is_human_turn(self) -> bool:
        return not self.status.is_over and self.state.current_player == self.human_player

    def new_game(self):
        """Clear the board and let the computer open if it plays X."""
        self.state.reset()
        self.last_ai_move = None
        logger.info("New game. Human plays %s", self.human_player.symbol)

        if self.state.current_player == self.ai.player:
            self.play_ai_move()

    def play_human_move(self, position: int) -> ValidationResult:
        """
        Apply the human's move and, if the game goes on, the reply.

        Returns:
            ValidationResult for the human's move. On rejection nothing
            changes and the human should try again.
        """
        result = try_apply_move(self.state, position, self.human_player)
        if not result.is_valid:
            return result

        if not self.status.is_over:
            self.play_ai_move()

        return result

    def play_ai_move(self) -> Optional[int]:
        """Let the computer move. Returns the cell it played, if any."""
        move = self.ai.get_best_move(self.state)
        if move is None:
            return None

        result = try_apply_move(self.state, move, self.ai.player)
        if not result.is_valid:
            # The search only proposes empty cells on a live board
            raise InvalidMove(move, result.error_message)

        self.last_ai_move = move
        return move
