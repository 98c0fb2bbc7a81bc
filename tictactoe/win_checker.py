"""
Win checker for tic-tac-toe.
Checks if a player has completed a line or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple
from dataclasses import dataclass


# All possible winning lines as board index triples.
# The order is fixed so the reported line is deterministic.
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class StatusKind(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """
    Outcome of a position. Derived from the board, never stored.

    winner and line are only set when kind is WON; line is the
    index triple a front end should highlight.
    """
    kind: StatusKind
    winner: Optional["Player"] = None
    line: Optional[Tuple[int, int, int]] = None

    @property
    def is_over(self) -> bool:
        return self.kind != StatusKind.IN_PROGRESS


IN_PROGRESS = GameStatus(StatusKind.IN_PROGRESS)
DRAW = GameStatus(StatusKind.DRAW)


class WinChecker:
    """
    Checks for win conditions in tic-tac-toe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    @staticmethod
    def find_line(board: Sequence, player) -> Optional[Tuple[int, int, int]]:
        """
        Find the first line fully held by a player.

        Args:
            board: The 9 board cells.
            player: The player to check.

        Returns:
            The winning line, or None if the player has no line.
        """
        for line in WIN_LINES:
            a, b, c = line
            if board[a] == player and board[b] == player and board[c] == player:
                return line
        return None

    @staticmethod
    def get_status(board: Sequence, players: Sequence) -> GameStatus:
        """
        Classify a board.

        Args:
            board: The 9 board cells.
            players: Players to test for a line, in precedence order.

        Returns:
            WON if any player holds a line, DRAW if the board is full,
            IN_PROGRESS otherwise.
        """
        for player in players:
            line = WinChecker.find_line(board, player)
            if line is not None:
                return GameStatus(StatusKind.WON, winner=player, line=line)

        if all(cell is not None for cell in board):
            return DRAW

        return IN_PROGRESS
