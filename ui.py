"""
Tic Tac Toe UI
A graphical interface for playing against the computer using Tkinter.

Shows:
- The 3x3 board as clickable cells
- A green ring around the recommended cell
- Game status (winner, draw, or tip)
- A New Game button
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from config import GameConfig
from game_controller import GameController, TkScheduler
from logic.game_state import Mark


class TicTacToeUI:
    """
    Main UI class for Tic Tac Toe.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """Initialize the UI."""
        self.config = config or GameConfig()

        # Create UI first: the scheduler needs the Tk root
        self._create_ui()

        self.controller = GameController(TkScheduler(self.root), self.config)
        # The computer's move lands on a worker thread: redraw on the UI thread
        self.controller.add_listener(lambda: self.root.after(0, self._refresh))

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.config

        self.root = tk.Tk()
        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.BACKGROUND_COLOR)
        self.root.geometry(cfg.WINDOW_SIZE)
        self.root.resizable(False, False)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.BACKGROUND_COLOR)
        style.configure('TLabel', background=cfg.BACKGROUND_COLOR, foreground='white', font=cfg.STATUS_FONT)
        style.configure('Title.TLabel', font=cfg.TITLE_FONT, foreground='#00d4ff')
        style.configure('Status.TLabel', font=cfg.STATUS_FONT, foreground=cfg.STATUS_COLOR)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        ttk.Label(main_frame, text=cfg.WINDOW_TITLE, style='Title.TLabel').pack(pady=(0, 10))

        # Board grid
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.cells = []
        for index in range(9):
            row, col = divmod(index, 3)
            cell = tk.Button(
                board_frame,
                text="",
                font=cfg.CELL_FONT,
                width=3,
                height=1,
                bg=cfg.CELL_COLOR,
                fg=cfg.CELL_TEXT_COLOR,
                disabledforeground=cfg.CELL_TEXT_COLOR,
                activebackground=cfg.CELL_COLOR,
                relief='ridge',
                borderwidth=2,
                highlightthickness=3,
                highlightbackground=cfg.BACKGROUND_COLOR,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=3, pady=3)
            self.cells.append(cell)

        # Status banner
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel', wraplength=320)
        self.status_label.pack(pady=10)

        # New game button
        tk.Button(
            main_frame,
            text="New Game",
            font=cfg.BUTTON_FONT,
            bg=cfg.BUTTON_COLOR,
            fg='white',
            width=26,
            command=self._reset_game
        ).pack(pady=10)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Forward a click to the controller."""
        self.controller.handle_click(index)

    def _refresh(self):
        """Redraw the board and status from the controller's state."""
        cfg = self.config
        board = self.controller.board
        winning_line = self.controller.winning_line or ()
        locked = self.controller.is_game_over or self.controller.is_computer_turn

        for index, cell in enumerate(self.cells):
            mark = board[index]

            if mark is None:
                text, fg = "", cfg.CELL_TEXT_COLOR
            elif mark == Mark.X:
                text, fg = mark.value, cfg.COMPUTER_COLOR
            else:
                text, fg = mark.value, cfg.PLAYER_COLOR

            # Ring around the hint cell (only while it's the player's move)
            if index == self.controller.recommended_move and not locked:
                ring = cfg.HINT_COLOR
            else:
                ring = cfg.BACKGROUND_COLOR

            cell.configure(
                text=text,
                fg=fg,
                disabledforeground=fg,
                bg=cfg.WIN_LINE_COLOR if index in winning_line else cfg.CELL_COLOR,
                highlightbackground=ring,
                state='disabled' if (mark is not None or locked) else 'normal'
            )

        self.status_label.configure(text=self.controller.status_message())

    def _reset_game(self):
        """Start a new game."""
        self.controller.reset_game()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Start the game and run the UI main loop."""
        self.controller.start()
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic Tac Toe UI")
    parser.add_argument(
        "--delay",
        type=int,
        default=GameConfig.COMPUTER_MOVE_DELAY_MS,
        help="Delay before the computer moves (milliseconds)"
    )

    args = parser.parse_args()

    config = GameConfig()
    config.COMPUTER_MOVE_DELAY_MS = args.delay

    print("\n" + "="*60)
    print("   Tic Tac Toe")
    print("="*60 + "\n")

    ui = TicTacToeUI(config)
    ui.run()


if __name__ == "__main__":
    main()
