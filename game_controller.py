"""
Game controller for Tic Tac Toe.

Owns the game state for the presentation layer and ties together:
- Logic (game state, move validation, win checking, minimax AI)
- A scheduler that delays the computer's move

The controller is UI-agnostic: the Tkinter window and the console game
both drive it and redraw whenever it notifies its listeners.
"""

import threading
from typing import Callable, List, Optional, Tuple

from config import GameConfig
from logic.game_state import GameState, Mark, Board
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker, GameOutcome, get_outcome
from logic.ai_player import AIPlayer


class TkScheduler:
    """
    Runs deferred callbacks off the Tk event loop.
    The delay is a Tk timer; the callback itself runs in a background
    thread so a long search doesn't freeze the window.
    """

    def __init__(self, root):
        self.root = root

    def schedule(self, delay_ms: int, callback: Callable[[], None]):
        return self.root.after(delay_ms, lambda: self._run_in_background(callback))

    def cancel(self, handle):
        self.root.after_cancel(handle)

    def _run_in_background(self, callback: Callable[[], None]):
        threading.Thread(target=callback, daemon=True).start()


class ThreadingScheduler:
    """
    Runs deferred callbacks on a timer thread.
    Used by the console game, which waits for the callback before prompting.
    """

    def schedule(self, delay_ms: int, callback: Callable[[], None]):
        timer = threading.Timer(delay_ms / 1000.0, callback)
        timer.daemon = True
        timer.start()
        return timer

    def cancel(self, handle):
        handle.cancel()


class GameController:
    """
    Presentation-layer state machine for a game against the computer.

    Game flow:
    1. The computer (X) moves after a short delay
    2. If the game continues, the best reply for the player (O) is
       stored as a hint
    3. The player clicks an empty cell
    4. Repeat until someone wins or the board is full
    """

    def __init__(self, scheduler, config: Optional[GameConfig] = None):
        """
        Initialize the controller.

        Args:
            scheduler: Object with schedule(delay_ms, callback) and cancel(handle).
            config: Game settings (defaults to GameConfig).
        """
        self.scheduler = scheduler
        self.config = config or GameConfig()

        self.game_state = GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.computer = AIPlayer(Mark.X)
        self.advisor = AIPlayer(Mark.O)

        self._pending_move = None
        self._listeners: List[Callable[[], None]] = []

    # ==================== VIEWS ====================

    @property
    def board(self) -> Board:
        """Snapshot of the board."""
        return list(self.game_state.board)

    @property
    def is_computer_turn(self) -> bool:
        return self.game_state.is_computer_turn

    @property
    def is_game_over(self) -> bool:
        return self.game_state.is_game_over

    @property
    def winner(self) -> Optional[Mark]:
        return self.game_state.winner

    @property
    def recommended_move(self) -> Optional[int]:
        return self.game_state.recommended_move

    @property
    def outcome(self) -> GameOutcome:
        return get_outcome(self.game_state.board)

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.win_checker.get_winning_line(self.game_state)

    @property
    def has_pending_move(self) -> bool:
        return self._pending_move is not None

    def status_message(self) -> str:
        """Text for the status banner."""
        if self.is_game_over:
            if self.winner is None:
                return self.config.DRAW_MESSAGE
            name = self.config.COMPUTER_NAME if self.winner == Mark.X else self.config.PLAYER_NAME
            return self.config.WINNER_MESSAGE.format(name=name)

        if self.is_computer_turn:
            return self.config.THINKING_MESSAGE

        if self.recommended_move is not None:
            return self.config.HINT_MESSAGE

        return self.config.PLAYER_TURN_MESSAGE

    # ==================== LISTENERS ====================

    def add_listener(self, callback: Callable[[], None]):
        """Register a callback run after every state change."""
        self._listeners.append(callback)

    def _notify(self):
        for callback in self._listeners:
            callback()

    # ==================== GAME FLOW ====================

    def start(self):
        """Start the game by scheduling the computer's opening move."""
        if self.is_computer_turn and not self.is_game_over:
            self._schedule_computer_move()
        self._notify()

    def handle_click(self, index: int) -> bool:
        """
        Handle the player clicking a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was played, False if it was ignored.
        """
        result = self.validator.validate_move(self.game_state, index)
        if not result.is_valid:
            print(f"Ignoring click on cell {index}: {result.error_message}")
            return False

        self.game_state.make_move(index)
        self.game_state.recommended_move = None
        print(f">>> {self.config.PLAYER_NAME} plays cell {index}")

        self.win_checker.update_game_state(self.game_state)
        if not self.game_state.is_game_over:
            self.game_state.is_computer_turn = True
            self._schedule_computer_move()

        self._notify()
        return True

    def computer_move(self):
        """Play the computer's move, then compute the hint for the player."""
        self._pending_move = None

        # A reset may replace self.game_state while the search runs
        state = self.game_state
        if not state.is_computer_turn or state.is_game_over:
            return

        board = list(state.board)
        move = self.computer.get_best_move(board)
        if move is None:
            print("ERROR: Computer could not find a move!")
            return

        print(
            f">>> {self.config.COMPUTER_NAME} plays cell {move} "
            f"(evaluated {self.computer.positions_evaluated} positions)"
        )

        board[move] = Mark.X
        hint = None
        if get_outcome(board) == GameOutcome.ONGOING:
            hint = self.advisor.get_best_move(board)

        if state is not self.game_state:
            print("Game was reset, dropping the computer's move.")
            return

        state.make_move(move)
        self.win_checker.update_game_state(state)
        state.recommended_move = hint

        # Hand over only once the hint is ready
        state.is_computer_turn = False
        self._notify()

    def reset_game(self):
        """Reset the game and cancel any pending computer move."""
        print("Resetting game...")
        self._cancel_pending_move()
        self.game_state = GameState()
        self.start()

    def _schedule_computer_move(self):
        self._cancel_pending_move()
        self._pending_move = self.scheduler.schedule(
            self.config.COMPUTER_MOVE_DELAY_MS,
            self.computer_move
        )

    def _cancel_pending_move(self):
        if self._pending_move is not None:
            self.scheduler.cancel(self._pending_move)
            self._pending_move = None
