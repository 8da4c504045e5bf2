"""
Logic module for Tic Tac Toe.
Handles game state, rules, and the minimax opponent.
"""

from .game_state import GameState, Mark, Move, empty_board
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, GameOutcome, check_winner, is_full, get_outcome
from .ai_player import AIPlayer, best_move
