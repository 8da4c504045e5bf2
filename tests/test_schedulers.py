"""Tests for the real schedulers and the console front end."""

import threading
import time

import pytest

from conftest import X, O
from config import GameConfig
from game_controller import GameController, ThreadingScheduler, TkScheduler
from main import ConsoleGame


class FastConfig(GameConfig):
    COMPUTER_MOVE_DELAY_MS = 50


def wait_for_player_turn(controller, timeout=30.0):
    deadline = time.monotonic() + timeout
    while controller.is_computer_turn and not controller.is_game_over:
        assert time.monotonic() < deadline, "computer never moved"
        time.sleep(0.01)


def test_threading_scheduler_reset_leaves_single_opening():
    controller = GameController(ThreadingScheduler(), FastConfig())
    controller.start()
    controller.reset_game()

    wait_for_player_turn(controller)
    # Give a stale timer the chance to fire if it had not been cancelled
    time.sleep(0.2)

    assert controller.board.count(X) == 1
    assert controller.board[0] == X
    assert controller.recommended_move == 4


def test_threading_scheduler_cancel():
    called = threading.Event()
    scheduler = ThreadingScheduler()

    handle = scheduler.schedule(50, called.set)
    scheduler.cancel(handle)

    assert not called.wait(0.2)


def test_move_found_after_reset_is_dropped(controller):
    class ResettingAI:
        positions_evaluated = 0

        def get_best_move(self, board):
            controller.reset_game()
            return 4

    controller.start()
    old_state = controller.game_state
    controller.computer = ResettingAI()

    controller.computer_move()

    assert controller.game_state is not old_state
    assert old_state.board == [None] * 9
    assert controller.board == [None] * 9
    assert controller.is_computer_turn


@pytest.fixture
def tk_root():
    tk = pytest.importorskip("tkinter")
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    root.withdraw()
    yield root
    root.destroy()


def pump(root, until, timeout=5.0):
    deadline = time.monotonic() + timeout
    while not until() and time.monotonic() < deadline:
        root.update()
        time.sleep(0.01)


def test_tk_scheduler_runs_callback_off_ui_thread(tk_root):
    threads = []
    done = threading.Event()

    def callback():
        threads.append(threading.current_thread())
        done.set()

    TkScheduler(tk_root).schedule(10, callback)
    pump(tk_root, done.is_set)

    assert done.is_set()
    assert threads[0] is not threading.main_thread()


def test_tk_scheduler_cancel(tk_root):
    called = threading.Event()
    scheduler = TkScheduler(tk_root)

    handle = scheduler.schedule(20, called.set)
    scheduler.cancel(handle)
    pump(tk_root, called.is_set, timeout=0.2)

    assert not called.is_set()


def play_console(monkeypatch, *answers):
    keys = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(keys))
    game = ConsoleGame(FastConfig())
    game.start()
    return game


def test_console_game_plays_a_move_then_quits(monkeypatch):
    game = play_console(monkeypatch, "4", "q")

    board = game.controller.board
    assert not game.is_running
    assert board[0] == X
    assert board[4] == O
    assert board.count(X) == 2
    assert not game.controller.is_computer_turn


def test_console_game_reset_and_bad_input(monkeypatch):
    game = play_console(monkeypatch, "x", "4", "r", "q")

    assert not game.is_running
    assert game.controller.board == [X] + [None] * 8
    assert game.controller.recommended_move == 4
