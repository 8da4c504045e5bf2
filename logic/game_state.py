"""
Game state management for Tic Tac Toe.
Tracks the board, whose turn it is, the hint and the move history.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field


class Mark(Enum):
    """The two marks a cell can hold."""
    X = "X"   # Computer (maximizing side)
    O = "O"   # Player (minimizing side)

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


# Board is a flat list of 9 cells, row-major:
#   0 | 1 | 2
#   3 | 4 | 5
#   6 | 7 | 8
BOARD_CELLS = 9

Board = List[Optional[Mark]]


def empty_board() -> Board:
    """Create a fresh board with all 9 cells empty."""
    return [None] * BOARD_CELLS


def empty_cells(board: Board) -> List[int]:
    """Indices of empty cells, in increasing order."""
    return [i for i, cell in enumerate(board) if cell is None]


@dataclass
class Move:
    """
    A move in the game.
    """
    mark: Mark              # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # Ply number in the game (0-8)


@dataclass
class GameState:
    """
    The complete state of a Tic Tac Toe game.

    Tracks:
    - The 9-cell board
    - Whose turn it is (the computer always opens)
    - The recommended move for the player, if any
    - Move history
    - Game result (winner, game over)
    """

    board: Board = field(default_factory=empty_board)

    # The computer plays first
    is_computer_turn: bool = True

    # Hint for the player, computed after every computer move
    recommended_move: Optional[int] = None

    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Mark] = None
    is_game_over: bool = False

    @property
    def current_mark(self) -> Mark:
        """The mark that moves next."""
        return Mark.X if self.is_computer_turn else Mark.O

    @property
    def is_draw(self) -> bool:
        return self.is_game_over and self.winner is None

    def make_move(self, index: int) -> bool:
        """
        Place the current mark at the given cell.

        Does not check for a winner (done by WinChecker) and does not
        switch turns: the controller decides who moves next.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the mark was placed, False otherwise.
        """
        if self.is_game_over:
            print("Game is already over!")
            return False

        if not 0 <= index < BOARD_CELLS:
            print(f"Cell {index} is off the board!")
            return False

        if self.board[index] is not None:
            print(f"Cell {index} is already occupied!")
            return False

        mark = self.current_mark
        self.board[index] = mark
        self.moves.append(Move(mark=mark, index=index, move_number=len(self.moves)))

        return True

    def get_empty_cells(self) -> List[int]:
        """Get all empty cell indices."""
        return empty_cells(self.board)

    def copy(self) -> "GameState":
        """Create a copy of the game state with its own board."""
        return GameState(
            board=list(self.board),
            is_computer_turn=self.is_computer_turn,
            recommended_move=self.recommended_move,
            moves=list(self.moves),
            winner=self.winner,
            is_game_over=self.is_game_over
        )

    def print_board(self):
        """Print the board to console, with empty cells showing their index."""
        print()
        for row in range(3):
            cells = []
            for col in range(3):
                index = row * 3 + col
                mark = self.board[index]
                if mark is not None:
                    cells.append(mark.value)
                elif index == self.recommended_move:
                    cells.append("*")
                else:
                    cells.append(str(index))
            print(" " + " | ".join(cells))
            if row < 2:
                print("---+---+---")

        if self.is_game_over:
            if self.winner:
                print(f"\nWinner: {self.winner.value}")
            else:
                print("\nDraw!")
        else:
            print(f"\nTurn: {self.current_mark.value}")
