"""
Logic module for terminal TicTacToe.
Handles game state, rules, and the random computer opponent.
"""

from .game_state import (
    GameModel, Player, Mark, NotFinished, Draw, Settled, place_mark
)
from .messages import CellClicked, PlayerOrderChosen, NoMessage
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .computer_player import RandomCellChooser
