"""
Computer player for terminal TicTacToe.
Picks uniformly at random among the available cells.
"""

import logging
import numpy as np
from typing import Callable, Optional, Sequence

logger = logging.getLogger(__name__)

# Picks one index out of a non-empty list of available cells
CellChooser = Callable[[Sequence[int]], int]


class RandomCellChooser:
    """
    A memoryless opponent.

    Every call picks one of the available cells with equal probability.
    Nothing about earlier moves is remembered.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize the chooser.

        Args:
            seed: Seed for the random generator. None draws fresh entropy.
        """
        self.rng = np.random.default_rng(seed)

    def __call__(self, available: Sequence[int]) -> int:
        """
        Choose a cell.

        Args:
            available: Empty cell indices. Must not be empty.

        Returns:
            One of the given indices.
        """
        if len(available) == 0:
            raise ValueError("No available cells to choose from")

        choice = int(self.rng.choice(np.asarray(available)))
        logger.debug("Computer chose cell %d out of %s", choice, list(available))
        return choice


# Quick test
if __name__ == "__main__":
    print("Testing RandomCellChooser...")

    chooser = RandomCellChooser(seed=7)
    picks = [chooser([1, 4, 6]) for _ in range(20)]
    print(f"Picks: {picks}")
    assert set(picks) <= {1, 4, 6}

    print("\nRandomCellChooser test done!")
