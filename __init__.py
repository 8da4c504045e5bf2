"""
Tic Tac Toe
===========
Play Tic Tac Toe against a computer that never loses.
The computer (X) always opens and picks its moves with an exhaustive
minimax search; after each of its moves the same search suggests the
best reply for you (O).
"""

__version__ = "1.0.0"
