"""
Main entry point for Tic Tac Toe.

Launches the Tkinter UI by default. With --no-ui the game is played in
the console: the computer (X) moves first, its suggested reply for you
is marked with '*', and you enter a cell number to play O.

Run this script to play Tic Tac Toe against the computer!
"""

import threading

from config import GameConfig
from game_controller import GameController, ThreadingScheduler


class ConsoleGame:
    """
    Console front end for the game controller.

    Game flow:
    1. Computer (X) moves after the configured delay
    2. Board is printed, with the hint cell shown as '*'
    3. Human (O) types a cell number
    4. Repeat until someone wins or it's a draw
    """

    def __init__(self, config: GameConfig):
        self.config = config
        self.controller = GameController(ThreadingScheduler(), config)
        self.is_running = False

        # Set by the controller after every state change
        self._changed = threading.Event()
        self.controller.add_listener(self._changed.set)

    def start(self):
        """Start the game."""
        print("\nStarting Tic Tac Toe...")
        print("Enter a cell number 0-8, 'r' to reset, 'q' to quit\n")

        self.is_running = True
        self.controller.start()
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            self._wait_for_computer()

            state = self.controller.game_state
            state.print_board()
            print(self.controller.status_message())

            if self.controller.is_game_over:
                self._show_game_result()
                if not self._ask_play_again():
                    break
                self.controller.reset_game()
                continue

            key = input("\nYour move: ").strip().lower()
            if key == "q":
                print("\nGame quit by user.")
                self.is_running = False
            elif key == "r":
                self.controller.reset_game()
            elif key.isdigit():
                self.controller.handle_click(int(key))
            else:
                print(f"Invalid input '{key}'. Enter 0-8, 'r' or 'q'.")

    def _wait_for_computer(self):
        """Block until the deferred computer move has been played."""
        if self.controller.is_computer_turn and not self.controller.is_game_over:
            print(self.controller.status_message())
        while True:
            self._changed.clear()
            if not self.controller.is_computer_turn or self.controller.is_game_over:
                break
            self._changed.wait()

    def _ask_play_again(self) -> bool:
        return input("\nPlay again? [y/N] ").strip().lower() == "y"

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        winner = self.controller.winner
        if winner is None:
            print("\nIt's a draw! Good game!")
        elif self.controller.winning_line is not None:
            cells = ", ".join(str(i) for i in self.controller.winning_line)
            print(f"\n{self.controller.status_message()} (line {cells})")

        print("\n" + "="*60)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic Tac Toe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=GameConfig.COMPUTER_MOVE_DELAY_MS,
        help="Delay before the computer moves (milliseconds)"
    )

    args = parser.parse_args()

    config = GameConfig()
    config.COMPUTER_MOVE_DELAY_MS = args.delay

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   Tic Tac Toe")
        print("="*60 + "\n")
        ui = TicTacToeUI(config)
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame(config)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
