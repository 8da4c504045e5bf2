"""
Move validator for Tic Tac Toe.
Validates that a player's click is a legal move.
"""

from typing import Optional, List
from dataclasses import dataclass
from .game_state import GameState, BOARD_CELLS


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates the player's moves.

    Rules:
    1. Game must not be over
    2. It must be the player's turn (not while the computer is thinking)
    3. Can only place on an empty cell of the board
    """

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell the player clicked (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if game_state.is_computer_turn:
            return ValidationResult(
                is_valid=False,
                error_message="Wait for the computer to move."
            )

        if not 0 <= index < BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{BOARD_CELLS - 1}."
            )

        if game_state.board[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {game_state.board[index].value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all cells the player may click right now.

        Args:
            game_state: Current game state.

        Returns:
            List of valid cell indices.
        """
        if game_state.is_game_over or game_state.is_computer_turn:
            return []

        return game_state.get_empty_cells()
