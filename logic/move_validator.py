"""
Move validator for terminal TicTacToe.
Checks a cell typed by the user against the cells still open.
"""

from typing import Optional, Sequence
from dataclasses import dataclass


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates the user's cell choice.

    Rules:
    1. The input must start with a digit 0-8
    2. The cell must still be empty
    """

    def parse_cell(self, line: Optional[str]) -> Optional[int]:
        """
        Read a cell index from the first character of a line.

        Args:
            line: Raw input line, or None if the read failed.

        Returns:
            The digit as an int, or None if the line doesn't start with one.
        """
        if not line:
            return None

        first = line[0]
        # isdigit() also accepts things like superscripts
        if first not in "0123456789":
            return None
        return int(first)

    def validate_cell(
        self,
        index: int,
        available: Sequence[int]
    ) -> ValidationResult:
        """
        Validate a parsed cell index.

        Args:
            index: The cell the user asked for.
            available: Cells that are still empty.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if index not in available:
            return ValidationResult(
                is_valid=False,
                error_message=f"The cell {index} is not available"
            )

        return ValidationResult(is_valid=True)
