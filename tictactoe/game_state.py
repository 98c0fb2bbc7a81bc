"""
Game state management for tic-tac-toe.
Tracks the 3x3 board and whose turn it is.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .win_checker import GameStatus, WinChecker


class Player(Enum):
    """The two players in the game. X always moves first."""
    X = "x"
    O = "o"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def symbol(self) -> str:
        return self.value.upper()


class InvalidMove(ValueError):
    """Raised when a move targets an out-of-range or wrongly occupied cell."""

    def __init__(self, position, message: str):
        super().__init__(message)
        self.position = position


BOARD_CELLS = 9

# Symbols accepted for an empty cell by GameState.from_string()
EMPTY_SYMBOLS = ".-_"


@dataclass
class GameState:
    """
    The complete state of a tic-tac-toe game.

    The board is a flat list of 9 cells laid out as

        0 1 2
        3 4 5
        6 7 8

    where None means empty and otherwise the Player holding the cell.
    The side to move is derived from the mark counts, so it always
    agrees with the board.
    """

    board: List[Optional[Player]] = field(
        default_factory=lambda: [None] * BOARD_CELLS
    )

    @classmethod
    def from_string(cls, text: str) -> "GameState":
        """
        Build a state from a board drawing such as "XO./.X./O..".

        Args:
            text: 9 cell symbols (X, O, or . _ - for empty).
                Whitespace and '/' separators are ignored.

        Returns:
            A new GameState.

        Raises:
            InvalidMove: If the drawing is malformed or the mark counts
                could not arise from alternating play.
        """
        board: List[Optional[Player]] = []
        for char in text:
            if char.isspace() or char == "/":
                continue
            if char.upper() == "X":
                board.append(Player.X)
            elif char.upper() == "O":
                board.append(Player.O)
            elif char in EMPTY_SYMBOLS:
                board.append(None)
            else:
                raise InvalidMove(None, f"Unknown cell symbol {char!r}")

        if len(board) != BOARD_CELLS:
            raise InvalidMove(None, f"Board needs {BOARD_CELLS} cells, got {len(board)}")

        x_count = board.count(Player.X)
        o_count = board.count(Player.O)
        if x_count - o_count not in (0, 1):
            raise InvalidMove(
                None,
                f"Impossible position: {x_count} X marks against {o_count} O marks"
            )

        return cls(board=board)

    @property
    def current_player(self) -> Player:
        """The side to move: X when both have the same number of marks."""
        x_count = self.board.count(Player.X)
        o_count = self.board.count(Player.O)
        return Player.X if x_count == o_count else Player.O

    @property
    def move_count(self) -> int:
        return BOARD_CELLS - self.board.count(None)

    def apply_move(self, pos: int, player: Player):
        """
        Place a player's mark on an empty cell.

        Args:
            pos: Cell index (0-8).
            player: Who is placing the mark.

        Raises:
            InvalidMove: If pos is out of range or the cell is taken.
                The board is left unchanged.
        """
        if not isinstance(pos, int) or not 0 <= pos < BOARD_CELLS:
            raise InvalidMove(pos, f"Invalid position {pos!r}. Must be 0-8.")

        if self.board[pos] is not None:
            raise InvalidMove(
                pos,
                f"Cell {pos} is already occupied by {self.board[pos].symbol}"
            )

        self.board[pos] = player

    def undo_move(self, pos: int):
        """
        Clear an occupied cell. Only the search uses this, to backtrack.

        Raises:
            InvalidMove: If pos is out of range or the cell is already empty.
        """
        if not 0 <= pos < BOARD_CELLS or self.board[pos] is None:
            raise InvalidMove(pos, f"Cell {pos} has no mark to undo")

        self.board[pos] = None

    def empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Positions of empty cells in ascending order.
        """
        return [pos for pos, cell in enumerate(self.board) if cell is None]

    def winner(self, player: Player) -> Optional[Tuple[int, int, int]]:
        """
        Get the first winning line held by a player.

        Returns:
            The line as an index triple, or None.
        """
        return WinChecker.find_line(self.board, player)

    def status(self) -> GameStatus:
        """Classify the position as in progress, won or drawn."""
        return WinChecker.get_status(self.board, (Player.O, Player.X))

    @property
    def is_game_over(self) -> bool:
        return self.status().is_over

    def reset(self):
        """Clear the board for a new game."""
        for pos in range(BOARD_CELLS):
            self.board[pos] = None

    def copy(self) -> "GameState":
        """Create an independent copy of the game state."""
        return GameState(board=list(self.board))

    def render(self) -> str:
        """
        Draw the board as text. Empty cells show their index so a
        console player knows what to type.
        """
        rows = []
        for start in range(0, BOARD_CELLS, 3):
            cells = []
            for pos in range(start, start + 3):
                cell = self.board[pos]
                cells.append(str(pos) if cell is None else cell.symbol)
            rows.append(" " + " | ".join(cells))
        return "\n---+---+---\n".join(rows)
