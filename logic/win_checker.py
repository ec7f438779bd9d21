"""
Win checker for terminal TicTacToe.
Classifies a board as won, drawn or still in progress.
"""

import numpy as np
from typing import Iterable, List, Optional, Tuple

from .game_state import (
    Board, Mark, Player, GameStatus, NotFinished, Draw, Settled
)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells with the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, as board indices. The order matters for
    # get_winning_line(), which reports the first completed one.
    WINNING_LINES = np.array([
        # Rows
        [0, 1, 2],
        [3, 4, 5],
        [6, 7, 8],
        # Columns
        [0, 3, 6],
        [1, 4, 7],
        [2, 5, 8],
        # Diagonals
        [0, 4, 8],
        [2, 4, 6],
    ])

    def has_bingo(self, indices: Iterable[int]) -> bool:
        """
        Check if a set of occupied cells contains a full line.

        Args:
            indices: Cells holding one mark.

        Returns:
            True if all three cells of at least one line are in `indices`.
        """
        occupied = np.fromiter(indices, dtype=int)
        covered = np.isin(self.WINNING_LINES, occupied)
        return bool(covered.all(axis=1).any())

    def update_game_status(
        self,
        board: Board,
        first_player: Optional[Player]
    ) -> GameStatus:
        """
        Derive the game status from the board.

        FIRST is checked before SECOND. Both can't be complete after legal
        alternating play, but boards built by hand may have both.

        Args:
            board: The board to classify.
            first_player: Who owns the FIRST mark.

        Returns:
            Settled, Draw or NotFinished.
        """
        firsts = self._cells_with(board, Mark.FIRST)
        seconds = self._cells_with(board, Mark.SECOND)
        empties = self._cells_with(board, Mark.EMPTY)

        first_owner = Player.USER if first_player == Player.USER else Player.COMPUTER

        if self.has_bingo(firsts):
            return Settled(first_owner)

        if self.has_bingo(seconds):
            return Settled(first_owner.opposite())

        if len(empties) == 0:
            return Draw()

        return NotFinished()

    def get_available_cells(self, board: Board) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Ascending list of empty indices.
        """
        return self._cells_with(board, Mark.EMPTY)

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The first completed line as three indices, or None.
        """
        for mark in (Mark.FIRST, Mark.SECOND):
            cells = self._cells_with(board, mark)
            for line in self.WINNING_LINES:
                if np.isin(line, cells).all():
                    a, b, c = line.tolist()
                    return (a, b, c)
        return None

    def _cells_with(self, board: Board, mark: Mark) -> List[int]:
        return [i for i, cell in enumerate(board) if cell == mark]


# Quick test
if __name__ == "__main__":
    from .game_state import board_from_indices

    print("Testing WinChecker...")

    checker = WinChecker()

    # Row of FIRST marks, user moved first
    board = board_from_indices(first=[0, 1, 2], second=[3, 4])
    status = checker.update_game_status(board, Player.USER)
    print(f"Row win: {status}")
    assert status == Settled(Player.USER)

    # Full board, no line
    board = board_from_indices(first=[0, 1, 5, 6, 8], second=[2, 3, 4, 7])
    status = checker.update_game_status(board, Player.USER)
    print(f"Draw: {status}")
    assert status == Draw()

    print("\nWinChecker test done!")
