"""
Console front end for TicTacToe.

This script ties together:
- Game state (board, players, turns)
- AI opponent (heuristic or Minimax)
- Terminal input and output

Run this script to play TicTacToe in a terminal!
"""

import sys
import time
from typing import Callable, Optional

from tictactoe_logic.ai_player import create_ai
from tictactoe_logic.config import GameConfig
from tictactoe_logic.game_state import GameState


class TicTacToeConsole:
    """
    Terminal controller for a TicTacToe game.

    Game flow:
    1. The current player types a cell number (1-9)
    2. The move is applied to the game state
    3. In computer mode, the computer answers after a short pause
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        player1: str = "",
        player2: str = "",
        vs_computer: bool = False,
        strategy: Optional[str] = None,
        delay: Optional[float] = None,
        seed: Optional[int] = None,
        config: Optional[GameConfig] = None,
        input_func: Optional[Callable[[str], str]] = None
    ):
        """
        Initialize the console game.

        Args:
            player1: Name of the first player (X).
            player2: Name of the second player (O).
            vs_computer: If True, the computer plays O.
            strategy: AI strategy name ("heuristic" or "minimax").
            delay: Pause before a computer move, in seconds.
            seed: Seed for the heuristic AI's random choices.
            config: Game configuration.
            input_func: Where to read commands from.
        """
        self.config = config or GameConfig()
        self.player1 = player1
        self.player2 = player2
        self.vs_computer = vs_computer
        self.delay = self.config.COMPUTER_MOVE_DELAY_S if delay is None else delay
        self.input_func = input_func or input

        strategy = strategy or self.config.DEFAULT_STRATEGY
        self.game_state = GameState(config=self.config, ai=create_ai(strategy, seed))
        self.is_running = False

        print("\n" + "=" * 60)
        print("   TicTacToe")
        if vs_computer:
            print(f"   Computer strategy: {strategy}")
        print("=" * 60 + "\n")

    def start(self):
        """Start the game."""
        print("Type a cell number (1-9) to play, 'r' to restart, 'q' to quit.")
        self.game_state.initialize(self.player1, self.player2, self.vs_computer)
        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            self.game_state.board.print_board()
            print(self.game_state.status_text())

            if self.game_state.is_game_over:
                self._show_game_result()
                if not self._ask_play_again():
                    self.is_running = False
                continue

            if self.game_state.is_computer_turn():
                self._computer_move()
                continue

            try:
                command = self.input_func("> ").strip().lower()
            except EOFError:
                command = "q"

            if command == "q":
                print("\nGame quit by user.")
                self.is_running = False
            elif command == "r":
                self._reset_game()
            else:
                self._process_human_move(command)

    def _process_human_move(self, command: str):
        """
        Process a typed move.

        Args:
            command: The cell number as typed (1-9).
        """
        if not command.isdigit():
            print(f"Unknown command: {command!r}")
            return

        index = int(command) - 1
        result = self.game_state.make_move(index)

        if not result.success:
            print(f"Can't play there: {result.message}")

    def _computer_move(self):
        """Execute the computer's move."""
        print("\n>>> Computer is thinking...")
        if self.delay > 0:
            time.sleep(self.delay)

        result = self.game_state.make_computer_move()
        if result.success:
            print(f">>> Computer plays {result.index + 1}")
        else:
            print(f"ERROR: Computer could not move: {result.message}")
            self.is_running = False

    def _ask_play_again(self) -> bool:
        try:
            answer = self.input_func("Play again? [y/N] ").strip().lower()
        except EOFError:
            answer = ""

        if answer in ("y", "yes", "r"):
            self._reset_game()
            return True
        return False

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "=" * 60)
        print("   GAME OVER!")
        print("=" * 60)

        line = self.game_state.winning_line()
        if line:
            cells = ", ".join(str(index + 1) for index in line)
            print(f"Winning line: {cells}")

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.game_state.initialize(self.player1, self.player2, self.vs_computer)


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe in the terminal")
    parser.add_argument(
        "--vs-computer",
        action="store_true",
        help="Play against the computer (it plays O)"
    )
    parser.add_argument(
        "--strategy",
        choices=["heuristic", "minimax"],
        default=GameConfig.DEFAULT_STRATEGY,
        help="How the computer picks its moves"
    )
    parser.add_argument("--player1", default="", help="Name of the X player")
    parser.add_argument("--player2", default="", help="Name of the O player")
    parser.add_argument(
        "--delay",
        type=float,
        default=GameConfig.COMPUTER_MOVE_DELAY_S,
        help="Seconds to wait before the computer moves"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the heuristic computer"
    )
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    console = TicTacToeConsole(
        player1=args.player1,
        player2=args.player2,
        vs_computer=args.vs_computer,
        strategy=args.strategy,
        delay=args.delay,
        seed=args.seed
    )

    try:
        console.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
