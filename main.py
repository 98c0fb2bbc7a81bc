"""
Main entry point for tic-tac-toe against the computer.

Launches the board window by default. With --no-ui the game is
played in the console: type a cell number 0-8 to place your mark.

    0 | 1 | 2
    3 | 4 | 5
    6 | 7 | 8
"""

import logging
from typing import Callable

from tictactoe.config import GameConfig
from tictactoe.controller import TurnController
from tictactoe.game_state import Player
from tictactoe.win_checker import StatusKind


class ConsoleGame:
    """
    Plays one or more games in the terminal.

    The human is asked for a cell until they give a legal one; the
    computer answers straight after each accepted move.
    """

    def __init__(self, ai_player: Player = GameConfig.AI_PLAYER, read: Callable[[str], str] = input):
        self.controller = TurnController(ai_player)
        self.read = read

    def start(self):
        """Play games until the human declines another."""
        print("\n" + "="*40)
        print(f"   You play {self.controller.human_player.symbol}")
        print("="*40)

        while True:
            self._game_loop()
            self._show_game_result()

            again = self.read("\nPlay again? [y/N] ").strip().lower()
            if again != "y":
                break
            self.controller.new_game()

    def _game_loop(self):
        """Main game loop."""
        if self.controller.last_ai_move is not None:
            print(f"\n>>> Computer opens at {self.controller.last_ai_move}")

        while not self.controller.status.is_over:
            print("\n" + self.controller.state.render())

            text = self.read(f"\nYour move ({self.controller.human_player.symbol}), 0-8: ").strip()
            try:
                position = int(text)
            except ValueError:
                print("Please type a number 0-8.")
                continue

            previous_ai_move = self.controller.last_ai_move
            result = self.controller.play_human_move(position)
            if not result.is_valid:
                print(result.error_message)
                continue

            # A cell is never played twice in one game, so a new value means a reply
            if self.controller.last_ai_move != previous_ai_move:
                print(f">>> Computer plays {self.controller.last_ai_move}")

    def _show_game_result(self):
        """Show the final game result."""
        status = self.controller.status

        print("\n" + "="*40)
        print("   GAME OVER!")
        print("="*40)
        print("\n" + self.controller.state.render())

        if status.kind == StatusKind.WON:
            line = "-".join(str(pos) for pos in status.line)
            if status.winner == self.controller.human_player:
                print(f"\nYou won on {line}!")
            else:
                print(f"\nComputer wins on {line}!")
        else:
            print("\nIt's a draw! Good game!")


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic-tac-toe against a perfect computer player")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the console instead of the board window"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the computer play X and move first"
    )
    parser.add_argument(
        "--log-level",
        default=GameConfig.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (DEBUG shows search statistics)"
    )

    args = parser.parse_args()

    logging.basicConfig(level=args.log_level, format=GameConfig.LOG_FORMAT)

    ai_player = Player.X if args.ai_first else GameConfig.AI_PLAYER

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(ai_player=ai_player)
        ui.run()
        return

    game = ConsoleGame(ai_player)
    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
