"""
Terminal wrapper for TicTacToe.
Reads lines from the player and writes text back.
"""

import sys
import logging
from typing import Optional, TextIO

logger = logging.getLogger(__name__)


class Terminal:
    """
    Simple line-based terminal.
    Streams default to stdin/stdout but can be swapped for tests.
    """

    def __init__(
        self,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None
    ):
        """
        Initialize the terminal.

        Args:
            input_stream: Where lines are read from (default: sys.stdin).
            output_stream: Where text is written (default: sys.stdout).
        """
        self.input_stream = input_stream or sys.stdin
        self.output_stream = output_stream or sys.stdout

    def read_line(self) -> Optional[str]:
        """
        Read one line of input.

        Returns:
            The line including its newline, or None at end of input or if
            the stream failed.
        """
        try:
            line = self.input_stream.readline()
        except (EOFError, OSError) as e:
            logger.debug("Read failed: %s", e)
            return None

        if line == "":
            return None
        return line

    def write(self, text: str):
        """Write a line of text."""
        self.output_stream.write(text + "\n")
        self.output_stream.flush()
