"""
Game configuration for TicTacToe.
Markers, default names, and AI settings.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak the game!
    """

    # ==================== MARKERS ====================
    # Player 1 always plays X, player 2 always plays O
    MARKER_X = "X"
    MARKER_O = "O"
    EMPTY = ""

    # The computer always takes the second seat
    COMPUTER_MARKER = MARKER_O

    # ==================== PLAYERS ====================
    DEFAULT_PLAYER1_NAME = "Player 1"
    DEFAULT_PLAYER2_NAME = "Player 2"
    COMPUTER_NAME = "Computer"

    # ==================== AI SETTINGS ====================
    # "heuristic" or "minimax"
    DEFAULT_STRATEGY = "minimax"

    # Pause before the computer plays (seconds), so the human can follow
    COMPUTER_MOVE_DELAY_S = 0.5

    # Minimax scores: a win is worth WIN_SCORE minus the search depth
    WIN_SCORE = 10
    DRAW_SCORE = 0

    @property
    def markers(self):
        """Both markers, in seat order."""
        return (self.MARKER_X, self.MARKER_O)

    def opponent_of(self, marker: str) -> str:
        """Get the other marker."""
        return self.MARKER_O if marker == self.MARKER_X else self.MARKER_X
