"""
AI player for Tic Tac Toe.
Uses the Minimax algorithm to choose the best move.
"""

import math
from typing import Optional, Sequence
from .game_state import Mark, Board, empty_cells
from .win_checker import check_winner, is_full


# Terminal scores. X is always the maximizing side.
WIN_SCORE = 10
DRAW_SCORE = 0


class AIPlayer:
    """
    An AI that plays Tic Tac Toe using the Minimax algorithm.

    The search is exhaustive: every empty cell is tried for the side to
    move until a terminal board is reached. There is no pruning, no
    caching and no depth discount, so equally scored moves are equal and
    the lowest cell index wins ties.
    """

    def __init__(self, mark: Mark = Mark.X):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI chooses moves for. X maximizes the
                score, O minimizes it.
        """
        self.mark = mark

        # How many positions the last search visited (for console output)
        self.positions_evaluated = 0

    @property
    def is_maximizing(self) -> bool:
        return self.mark == Mark.X

    def get_best_move(self, board: Sequence[Optional[Mark]]) -> Optional[int]:
        """
        Get the best move for this AI's mark.

        Args:
            board: The 9-cell board. It is not modified.

        Returns:
            Cell index of the best move, or None if the board is full.
        """
        self.positions_evaluated = 0

        # Work on a copy so the caller's board is never touched
        squares = list(board)

        best_score = -math.inf if self.is_maximizing else math.inf
        best_move = None

        for index in empty_cells(squares):
            squares[index] = self.mark
            score = self.minimax(squares, not self.is_maximizing)
            squares[index] = None

            if self.is_maximizing and score > best_score:
                best_score = score
                best_move = index
            elif not self.is_maximizing and score < best_score:
                best_score = score
                best_move = index

        return best_move

    def minimax(self, squares: Board, is_maximizing: bool) -> int:
        """
        Score a position assuming both sides play perfectly.

        Places marks in `squares` while searching and removes each one
        before returning.

        Args:
            squares: Board to evaluate.
            is_maximizing: True if X is to move.

        Returns:
            +10 if X wins, -10 if O wins, 0 for a draw.
        """
        self.positions_evaluated += 1

        winner = check_winner(squares)
        if winner == Mark.X:
            return WIN_SCORE
        if winner == Mark.O:
            return -WIN_SCORE
        if is_full(squares):
            return DRAW_SCORE

        if is_maximizing:
            best_score = -math.inf
            for index in empty_cells(squares):
                squares[index] = Mark.X
                score = self.minimax(squares, False)
                squares[index] = None
                best_score = max(score, best_score)
            return best_score
        else:
            best_score = math.inf
            for index in empty_cells(squares):
                squares[index] = Mark.O
                score = self.minimax(squares, True)
                squares[index] = None
                best_score = min(score, best_score)
            return best_score

    def get_move_suggestion(self, board: Sequence[Optional[Mark]]) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: The 9-cell board.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(board)

        if move is None:
            return "No moves available!"

        row, col = divmod(move, 3)
        return f"Place your {self.mark.value} in cell {move} (row {row}, column {col})"


def best_move(board: Sequence[Optional[Mark]], side: Mark) -> Optional[int]:
    """Best cell for `side` on `board`, or None if the board is full."""
    return AIPlayer(side).get_best_move(board)


def evaluate(board: Sequence[Optional[Mark]], side_to_move: Mark) -> int:
    """Minimax score of `board` with `side_to_move` to play next."""
    return AIPlayer(side_to_move).minimax(list(board), side_to_move == Mark.X)
