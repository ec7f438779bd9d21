"""
Input prompts for terminal TicTacToe.

Both prompts keep asking until they get a usable answer. Bad input, end of
input and read errors never escape from here; they only cause another read.
"""

import logging
from typing import Optional, Sequence

from logic.move_validator import MoveValidator
from .config import ConsoleConfig
from .terminal import Terminal

logger = logging.getLogger(__name__)


def ask_user_to_be_first(
    terminal: Terminal,
    config: Optional[ConsoleConfig] = None
) -> bool:
    """
    Ask whether the user wants to move first.

    Only the first character of the answer counts: 'y' or 'n'.

    Args:
        terminal: Where to read and write.
        config: Prompt texts. Uses defaults if not provided.

    Returns:
        True if the user plays first.
    """
    config = config or ConsoleConfig()
    terminal.write(config.PLAY_FIRST_PROMPT)

    while True:
        answer = terminal.read_line()
        if answer is None:
            continue

        first_letter = answer[:1]
        if first_letter == "y":
            return True
        if first_letter == "n":
            return False

        logger.debug("Rejected answer %r", answer)
        terminal.write(config.PLAY_FIRST_RETRY)


def ask_move(
    terminal: Terminal,
    available: Sequence[int],
    config: Optional[ConsoleConfig] = None,
    validator: Optional[MoveValidator] = None
) -> int:
    """
    Ask the user which cell to play.

    Args:
        terminal: Where to read and write.
        available: Cells that are still empty.
        config: Prompt texts. Uses defaults if not provided.
        validator: Move validator. Uses a fresh one if not provided.

    Returns:
        One of the available cell indices.
    """
    config = config or ConsoleConfig()
    validator = validator or MoveValidator()
    terminal.write(config.MOVE_PROMPT)

    while True:
        answer = terminal.read_line()
        index = validator.parse_cell(answer)

        if index is not None:
            result = validator.validate_cell(index, available)
            if result.is_valid:
                return index
            terminal.write(result.error_message)

        logger.debug("Rejected move %r (available: %s)", answer, list(available))
        terminal.write(config.MOVE_RETRY)
