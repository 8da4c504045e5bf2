"""
Win checker for Tic Tac Toe.
Checks if a mark has completed a line or if the board is full.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple
from .game_state import GameState, Mark


# All winning lines, in the order they are checked
WINNING_COMBINATIONS: Tuple[Tuple[int, int, int], ...] = (
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


class GameOutcome(Enum):
    """Result of a board position."""
    ONGOING = "ongoing"
    X_WON = "x_won"
    O_WON = "o_won"
    DRAW = "draw"


def get_winning_line(board: Sequence[Optional[Mark]]) -> Optional[Tuple[int, int, int]]:
    """
    Get the first complete line on the board.

    Args:
        board: The 9-cell board.

    Returns:
        The winning index triple, or None.
    """
    for line in WINNING_COMBINATIONS:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return line
    return None


def check_winner(board: Sequence[Optional[Mark]]) -> Optional[Mark]:
    """
    Check if there's a winner.

    Args:
        board: The 9-cell board.

    Returns:
        The mark owning the first complete line, or None.
    """
    line = get_winning_line(board)
    if line is None:
        return None
    return board[line[0]]


def is_full(board: Sequence[Optional[Mark]]) -> bool:
    """True iff every cell is occupied."""
    return all(cell is not None for cell in board)


def get_outcome(board: Sequence[Optional[Mark]]) -> GameOutcome:
    """Classify a board as won, drawn or still ongoing."""
    winner = check_winner(board)
    if winner == Mark.X:
        return GameOutcome.X_WON
    if winner == Mark.O:
        return GameOutcome.O_WON
    if is_full(board):
        return GameOutcome.DRAW
    return GameOutcome.ONGOING


class WinChecker:
    """
    Checks for win conditions on a GameState.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_COMBINATIONS = WINNING_COMBINATIONS

    def check_winner(self, game_state: GameState) -> Optional[Mark]:
        """Check if there's a winner on the game's board."""
        return check_winner(game_state.board)

    def check_draw(self, game_state: GameState) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled and nobody has a line.
        """
        if self.check_winner(game_state) is not None:
            return False
        return is_full(game_state.board)

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        winner = self.check_winner(game_state)

        if winner is not None:
            game_state.winner = winner
            game_state.is_game_over = True
        elif self.check_draw(game_state):
            game_state.is_game_over = True

        return game_state

    def get_winning_line(self, game_state: GameState) -> Optional[Tuple[int, int, int]]:
        """Get the winning line if there is one."""
        return get_winning_line(game_state.board)
