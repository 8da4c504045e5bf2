"""Tests for winner detection and the draw check."""

import pytest

from conftest import board_from, X, O
from logic.game_state import GameState, empty_board
from logic.win_checker import (
    WINNING_COMBINATIONS,
    GameOutcome,
    WinChecker,
    check_winner,
    get_outcome,
    get_winning_line,
    is_full,
)


@pytest.mark.parametrize("line", WINNING_COMBINATIONS)
@pytest.mark.parametrize("mark", [X, O])
def test_every_line_is_detected(line, mark):
    board = empty_board()
    for index in line:
        board[index] = mark

    assert check_winner(board) == mark
    assert get_winning_line(board) == line


def test_combinations_are_checked_rows_columns_then_diagonals():
    assert WINNING_COMBINATIONS == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )


def test_first_complete_line_is_reported():
    # Top row and left column both complete
    board = board_from("XXX" "X.." "X..")
    assert get_winning_line(board) == (0, 1, 2)


def test_empty_board_has_no_winner():
    board = empty_board()
    assert check_winner(board) is None
    assert not is_full(board)
    assert get_outcome(board) == GameOutcome.ONGOING


def test_full_board_without_line_is_a_draw():
    board = board_from("XOX" "XOO" "OXX")
    assert check_winner(board) is None
    assert is_full(board)
    assert get_outcome(board) == GameOutcome.DRAW


def test_win_on_last_cell_beats_draw():
    board = board_from("XOX" "OXO" "OXX")
    assert is_full(board)
    assert get_outcome(board) == GameOutcome.X_WON


def test_outcome_for_o():
    assert get_outcome(board_from("XX." "OOO" "X..")) == GameOutcome.O_WON


def test_checks_do_not_mutate_board():
    board = board_from("XO." "OX." "...")
    before = list(board)
    check_winner(board)
    is_full(board)
    get_outcome(board)
    assert board == before


def test_update_game_state_marks_winner():
    state = GameState(board=board_from("OOO" "XX." "X.."))
    WinChecker().update_game_state(state)

    assert state.is_game_over
    assert state.winner == O
    assert not state.is_draw


def test_update_game_state_marks_draw():
    state = GameState(board=board_from("XOX" "XOO" "OXX"))
    checker = WinChecker()

    assert checker.check_draw(state)
    checker.update_game_state(state)
    assert state.is_game_over
    assert state.winner is None
    assert state.is_draw


def test_update_game_state_leaves_ongoing_game_alone():
    state = GameState(board=board_from("X...O...."))
    WinChecker().update_game_state(state)
    assert not state.is_game_over
