"""Shared fixtures for the Tic Tac Toe tests."""

import pytest

from config import GameConfig
from game_controller import GameController
from logic.game_state import Mark


X, O = Mark.X, Mark.O


class ManualScheduler:
    """Scheduler that only runs callbacks when the test asks it to."""

    def __init__(self):
        self.pending = {}
        self.delays = []
        self._next_handle = 0

    def schedule(self, delay_ms, callback):
        self._next_handle += 1
        self.pending[self._next_handle] = callback
        self.delays.append(delay_ms)
        return self._next_handle

    def cancel(self, handle):
        self.pending.pop(handle, None)

    def run_pending(self):
        callbacks = list(self.pending.values())
        self.pending.clear()
        for callback in callbacks:
            callback()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def controller(scheduler):
    return GameController(scheduler, GameConfig())


def board_from(text):
    """Build a board from a 9-character string of 'X', 'O' and '.'."""
    marks = {"X": X, "O": O, ".": None}
    return [marks[ch] for ch in text]
