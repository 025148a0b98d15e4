"""
Logic module for TicTacToe.
Handles the board, game state, rules, and AI opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .board import Board, EMPTY, INVALID, WINNING_LINES
from .win_checker import WinChecker
from .move_validator import MoveValidator, ValidationResult
from .ai_player import MoveSelector, HeuristicAI, MinimaxAI, create_ai
from .game_state import GameState, GameStatus, Player, Move, MoveResult
