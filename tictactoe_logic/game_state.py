"""
Game state management for TicTacToe.
Tracks the board, the players, whose turn it is, and the result.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .ai_player import MoveSelector, create_ai
from .board import Board
from .config import GameConfig
from .move_validator import MoveValidator, NOT_COMPUTER_TURN, GAME_OVER
from .win_checker import WinChecker


class GameStatus(Enum):
    """Where the game is in its lifecycle."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    OVER = "over"


@dataclass(frozen=True)
class Player:
    """A player: a name and the marker they place."""
    name: str
    marker: str


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # Which move this is (0-8)


@dataclass
class MoveResult:
    """
    Outcome of a move attempt.

    On failure only `message` is meaningful. On success `game_over`
    tells whether the move ended the game and `winner` who won it
    (None for a draw or a game still running).
    """
    success: bool
    game_over: bool = False
    winner: Optional[Player] = None
    index: Optional[int] = None
    message: Optional[str] = None


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The board
    - Both players and the current player
    - Move history
    - Game status (not started, in progress, over) and winner
    """

    config: GameConfig = field(default_factory=GameConfig)

    # Picks the computer's moves in "versus computer" mode
    ai: Optional[MoveSelector] = None

    board: Board = field(init=False)
    player1: Optional[Player] = field(default=None, init=False)
    player2: Optional[Player] = field(default=None, init=False)
    current_player: Optional[Player] = field(default=None, init=False)
    vs_computer: bool = field(default=False, init=False)

    # Move history
    moves: List[Move] = field(default_factory=list, init=False)

    # Game result
    status: GameStatus = field(default=GameStatus.NOT_STARTED, init=False)
    winner: Optional[Player] = field(default=None, init=False)

    def __post_init__(self):
        self.board = Board(self.config)
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    @property
    def is_game_over(self) -> bool:
        return self.status == GameStatus.OVER

    @property
    def is_draw(self) -> bool:
        return self.is_game_over and self.winner is None

    def initialize(self, name1: str = "", name2: str = "", vs_computer: bool = False):
        """
        Start (or restart) a game.

        Args:
            name1: Name of the first player, who plays X and moves first.
            name2: Name of the second player, who plays O.
            vs_computer: If True, the second player is the computer.
        """
        name1 = (name1 or "").strip() or self.config.DEFAULT_PLAYER1_NAME
        default2 = (
            self.config.COMPUTER_NAME if vs_computer
            else self.config.DEFAULT_PLAYER2_NAME
        )
        name2 = (name2 or "").strip() or default2

        self.player1 = Player(name1, self.config.MARKER_X)
        self.player2 = Player(name2, self.config.MARKER_O)
        self.current_player = self.player1
        self.vs_computer = vs_computer

        if vs_computer and self.ai is None:
            self.ai = create_ai(self.config.DEFAULT_STRATEGY)

        self.winner = None
        self.moves = []
        self.board.reset()
        self.status = GameStatus.IN_PROGRESS

    def make_move(self, index: int) -> MoveResult:
        """
        Place the current player's marker.

        Args:
            index: Cell index (0-8).

        Returns:
            MoveResult describing what happened.
        """
        validation = self.validator.validate_move(
            self.board,
            index,
            started=self.status != GameStatus.NOT_STARTED,
            game_over=self.is_game_over
        )
        if not validation.is_valid:
            return MoveResult(success=False, index=index, message=validation.error_message)

        player = self.current_player
        self.board.set_cell(index, player.marker)
        self.moves.append(Move(player=player, index=index, move_number=len(self.moves)))

        if self.win_checker.has_won(self.board, player.marker):
            self.status = GameStatus.OVER
            self.winner = player
            return MoveResult(success=True, game_over=True, winner=player, index=index)

        if self.board.is_full():
            self.status = GameStatus.OVER
            return MoveResult(success=True, game_over=True, index=index)

        self._switch_player()
        return MoveResult(success=True, index=index)

    def _switch_player(self):
        self.current_player = (
            self.player2 if self.current_player == self.player1 else self.player1
        )

    def is_computer_turn(self) -> bool:
        """True if the computer should play next."""
        return (
            self.vs_computer
            and self.current_player is not None
            and self.current_player.marker == self.config.COMPUTER_MARKER
        )

    def make_computer_move(self) -> MoveResult:
        """
        Let the AI pick a move and play it.

        Returns:
            MoveResult describing what happened.
        """
        if self.is_game_over:
            return MoveResult(success=False, message=GAME_OVER)

        if not self.is_computer_turn():
            return MoveResult(success=False, message=NOT_COMPUTER_TURN)

        computer_marker = self.current_player.marker
        move = self.ai.choose_move(
            self.board,
            computer_marker,
            self.config.opponent_of(computer_marker)
        )
        return self.make_move(move)

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line, for highlighting.

        Returns:
            The 3 winning indices, or None if nobody has won.
        """
        if self.winner is None:
            return None
        return self.win_checker.winning_line(self.board, self.winner.marker)

    def get_empty_cells(self) -> List[int]:
        return self.validator.get_valid_moves(self.board, self.is_game_over)

    def status_text(self) -> str:
        """One line describing the game, for display."""
        if self.status == GameStatus.NOT_STARTED:
            return "Enter player names to start a game"
        if self.is_game_over:
            if self.winner:
                return f"{self.winner.name} wins!"
            return "It's a tie!"
        return f"{self.current_player.name}'s turn ({self.current_player.marker})"
