"""
Messages produced by the view and consumed by update.
One message per loop iteration, discarded right after it is applied.
"""

from typing import Union
from dataclasses import dataclass


@dataclass(frozen=True)
class CellClicked:
    """The user picked a cell to play (0-8)."""
    index: int


@dataclass(frozen=True)
class PlayerOrderChosen:
    """The user answered whether they want to play first."""
    user_first: bool


@dataclass(frozen=True)
class NoMessage:
    """Nothing to apply; returned by the final render."""


Message = Union[CellClicked, PlayerOrderChosen, NoMessage]
