"""
Tic-tac-toe UI
A graphical interface for playing against the computer using Tkinter.

Shows:
- The 3x3 board; click an empty cell to move
- Game status
- On game over, every cell is dimmed except the winning line
"""

import logging
import tkinter as tk
from tkinter import ttk

from tictactoe.config import GameConfig
from tictactoe.controller import TurnController
from tictactoe.game_state import Player
from tictactoe.win_checker import StatusKind

logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class for tic-tac-toe.
    """

    def __init__(self, ai_player: Player = GameConfig.AI_PLAYER):
        """Initialize the UI."""
        self.controller = TurnController(ai_player)
        self._create_ui()
        self._update_board_display()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg=GameConfig.BACKGROUND)
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BACKGROUND)
        style.configure(
            'Status.TLabel',
            background=GameConfig.BACKGROUND,
            foreground=GameConfig.STATUS_COLOR,
            font=GameConfig.STATUS_FONT
        )

        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for pos in range(9):
            cell = tk.Button(
                board_frame,
                text="",
                font=GameConfig.CELL_FONT,
                width=3,
                height=1,
                bg=GameConfig.CELL_BG,
                activebackground=GameConfig.CELL_BG,
                relief='ridge',
                borderwidth=2,
                command=lambda p=pos: self._on_cell_click(p)
            )
            cell.grid(row=pos // 3, column=pos % 3, padx=2, pady=2)
            self.board_cells.append(cell)

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="New Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=10,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Quit",
            font=('Segoe UI', 11),
            bg='#ef4444',
            fg='white',
            width=10,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, pos: int):
        """Play the human's move; the computer answers inside the controller."""
        if not self.controller.is_human_turn:
            return

        result = self.controller.play_human_move(pos)
        if not result.is_valid:
            self.status_label.configure(text=result.error_message)
            return

        self._update_board_display()

    def _update_board_display(self):
        """Redraw marks, dimming everything but the winning line once the game ends."""
        status = self.controller.status

        highlighted = set(range(9))
        if status.kind == StatusKind.WON:
            highlighted = set(status.line)
        elif status.kind == StatusKind.DRAW:
            highlighted = set()

        for pos, cell in enumerate(self.board_cells):
            mark = self.controller.state.board[pos]
            dim = pos not in highlighted

            if mark is None:
                cell.configure(
                    text="",
                    bg=GameConfig.DIM_BG if dim else GameConfig.CELL_BG
                )
            else:
                normal, dimmed = GameConfig.MARK_COLORS[mark]
                cell.configure(
                    text=mark.symbol,
                    fg=dimmed if dim else normal,
                    disabledforeground=dimmed if dim else normal,
                    bg=GameConfig.DIM_BG if dim else GameConfig.CELL_BG
                )

            cell.configure(state='normal' if self.controller.is_human_turn and mark is None else 'disabled')

        self._update_game_info()

    def _update_game_info(self):
        """Update the status label."""
        status = self.controller.status
        human = self.controller.human_player

        if status.kind == StatusKind.WON:
            winner_name = "You win" if status.winner == human else "Computer wins"
            self.status_label.configure(text=f"{winner_name}!")
        elif status.kind == StatusKind.DRAW:
            self.status_label.configure(text="It's a draw!")
        else:
            self.status_label.configure(text=f"Your turn ({human.symbol})")

    def _reset_game(self):
        """Reset the game."""
        logger.info("Resetting game")
        self.controller.new_game()
        self._update_board_display()

    def _quit(self):
        """Quit the application."""
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic-tac-toe UI")
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the computer play X and move first"
    )

    args = parser.parse_args()

    logging.basicConfig(level=GameConfig.LOG_LEVEL, format=GameConfig.LOG_FORMAT)

    ui = TicTacToeUI(ai_player=Player.X if args.ai_first else GameConfig.AI_PLAYER)
    ui.run()


if __name__ == "__main__":
    main()
