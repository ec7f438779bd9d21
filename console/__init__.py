"""
Console module for terminal TicTacToe.
Handles the terminal, input prompts, and board rendering.
"""

from .config import ConsoleConfig
from .terminal import Terminal
from .prompts import ask_user_to_be_first, ask_move
from .view import view, format_board
