"""
Game state for terminal TicTacToe.
Defines the players, cell marks, game status and the immutable game model.
"""

from enum import Enum
from typing import Optional, Tuple, Union
from dataclasses import dataclass


class Player(Enum):
    """The two sides in the game."""
    USER = "user"
    COMPUTER = "computer"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.COMPUTER if self == Player.USER else Player.USER


class Mark(Enum):
    """
    Occupancy of a single cell.

    FIRST belongs to whoever moved first in this game, SECOND to the other
    side. Which player that is gets decided at player-order selection.
    """
    FIRST = "o"
    SECOND = "x"
    EMPTY = " "


BOARD_SIZE = 9

# 9 marks, row-major: indices 0-2, 3-5, 6-8
Board = Tuple[Mark, ...]

EMPTY_BOARD: Board = (Mark.EMPTY,) * BOARD_SIZE


@dataclass(frozen=True)
class NotFinished:
    """The game is still in progress."""

    def is_terminal(self) -> bool:
        return False


@dataclass(frozen=True)
class Draw:
    """The board is full and nobody completed a line."""

    def is_terminal(self) -> bool:
        return True


@dataclass(frozen=True)
class Settled:
    """Somebody completed a line."""
    winner: Player

    def is_terminal(self) -> bool:
        return True


GameStatus = Union[NotFinished, Draw, Settled]


@dataclass(frozen=True)
class GameModel:
    """
    The complete state of one game.

    A model is never changed in place. Every step builds a new one through
    the with_* constructors below, which always pass all three fields.
    """

    # Unset until the user picks who plays first
    first_player: Optional[Player]

    board: Board

    status: GameStatus

    @classmethod
    def new(cls) -> "GameModel":
        """State at program start."""
        return cls(first_player=None, board=EMPTY_BOARD, status=NotFinished())

    def with_first_player(self, first_player: Player) -> "GameModel":
        return GameModel(
            first_player=first_player,
            board=self.board,
            status=self.status
        )

    def with_board(self, board: Board) -> "GameModel":
        return GameModel(
            first_player=self.first_player,
            board=board,
            status=self.status
        )

    def with_status(self, status: GameStatus) -> "GameModel":
        return GameModel(
            first_player=self.first_player,
            board=self.board,
            status=status
        )

    def is_finished(self) -> bool:
        return self.status.is_terminal()

    def user_mark(self) -> Mark:
        """Mark placed by the user's moves."""
        return Mark.FIRST if self.first_player == Player.USER else Mark.SECOND

    def computer_mark(self) -> Mark:
        """Mark placed by the computer's moves."""
        return Mark.SECOND if self.first_player == Player.USER else Mark.FIRST


def place_mark(board: Board, index: int, mark: Mark) -> Board:
    """
    Return a copy of the board with one cell replaced.

    Args:
        board: The current board.
        index: Cell to replace (0-8).
        mark: The new mark for that cell.

    Returns:
        A new board; every other cell is unchanged.
    """
    return tuple(
        mark if i == index else cell
        for i, cell in enumerate(board)
    )


def board_from_indices(first=(), second=()) -> Board:
    """Build a board with FIRST marks at `first` and SECOND marks at `second`."""
    board = EMPTY_BOARD
    for index in first:
        board = place_mark(board, index, Mark.FIRST)
    for index in second:
        board = place_mark(board, index, Mark.SECOND)
    return board
