"""
Game configuration for Tic Tac Toe.
All the settings for pacing, labels and the look of the window.
"""


class GameConfig:
    """
    Configuration class for game and UI settings.
    Subclass and override to change them.
    """

    # ==================== PACING ====================
    # Pause before the computer's move is applied (milliseconds)
    COMPUTER_MOVE_DELAY_MS = 500

    # ==================== PLAYERS ====================
    COMPUTER_NAME = "Computer"   # plays X, always moves first
    PLAYER_NAME = "Player"       # plays O

    # ==================== MESSAGES ====================
    DRAW_MESSAGE = "Draw!"
    WINNER_MESSAGE = "Winner: {name}"
    HINT_MESSAGE = "Tip: Place your O in the green-highlighted square"
    THINKING_MESSAGE = "Computer is thinking..."
    PLAYER_TURN_MESSAGE = "Your turn"

    # ==================== WINDOW ====================
    WINDOW_TITLE = "Tic Tac Toe"
    WINDOW_SIZE = "360x460"

    # ==================== COLORS ====================
    BACKGROUND_COLOR = "#1a1a2e"
    CELL_COLOR = "#16213e"
    CELL_TEXT_COLOR = "white"
    COMPUTER_COLOR = "#f87171"
    PLAYER_COLOR = "#10b981"
    HINT_COLOR = "#22c55e"       # Ring around the recommended cell
    WIN_LINE_COLOR = "#ffd700"
    STATUS_COLOR = "#ffd700"
    BUTTON_COLOR = "#6366f1"

    # ==================== FONTS ====================
    CELL_FONT = ("Segoe UI", 28, "bold")
    TITLE_FONT = ("Segoe UI", 16, "bold")
    STATUS_FONT = ("Segoe UI", 11)
    BUTTON_FONT = ("Segoe UI", 11, "bold")
