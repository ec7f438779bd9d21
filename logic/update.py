"""
Game rules for terminal TicTacToe.
Turns a (model, message) pair into the next model without doing any I/O.
"""

import logging
from typing import Optional

from .game_state import GameModel, Player, Mark, place_mark
from .messages import Message, CellClicked, PlayerOrderChosen, NoMessage
from .win_checker import WinChecker
from .computer_player import CellChooser, RandomCellChooser

logger = logging.getLogger(__name__)

_win_checker = WinChecker()
_default_chooser: Optional[RandomCellChooser] = None


def _get_default_chooser() -> RandomCellChooser:
    global _default_chooser
    if _default_chooser is None:
        _default_chooser = RandomCellChooser()
    return _default_chooser


def update(
    model: GameModel,
    message: Message,
    choose_cell: Optional[CellChooser] = None
) -> GameModel:
    """
    Apply one message to the model.

    Args:
        model: Current game state.
        message: What the view returned.
        choose_cell: Picks the computer's cell. Defaults to a uniform
            random choice.

    Returns:
        The next game state. A finished game is returned unchanged.
    """
    if choose_cell is None:
        choose_cell = _get_default_chooser()

    # Draw and Settled are absorbing
    if model.is_finished():
        return model

    if isinstance(message, NoMessage):
        return model
    if isinstance(message, PlayerOrderChosen):
        return update_player_selection(model, message.user_first, choose_cell)
    if isinstance(message, CellClicked):
        return update_board(model, message.index, choose_cell)

    raise TypeError(f"Unknown message: {message!r}")


def update_player_selection(
    model: GameModel,
    user_first: bool,
    choose_cell: CellChooser
) -> GameModel:
    """Fix the player order; the computer moves at once if it goes first."""
    first_player = Player.USER if user_first else Player.COMPUTER
    logger.debug("First player: %s", first_player.value)

    new_model = model.with_first_player(first_player)
    if user_first:
        return new_model
    return play_computer_move(new_model, choose_cell)


def update_board(
    model: GameModel,
    selected_cell: int,
    choose_cell: CellChooser
) -> GameModel:
    """User move, then a computer reply unless the user's move ended the game."""
    new_model = play_user_move(model, selected_cell)
    if new_model.is_finished():
        return new_model
    return play_computer_move(new_model, choose_cell)


def play_user_move(model: GameModel, selected_cell: int) -> GameModel:
    """
    Place the user's mark and refresh the status.

    The cell is assumed to be available; the prompt already checked it.
    """
    logger.debug("User plays cell %d", selected_cell)
    return _apply_move(model, selected_cell, model.user_mark())


def play_computer_move(model: GameModel, choose_cell: CellChooser) -> GameModel:
    """Place the computer's mark on a randomly chosen empty cell."""
    available = _win_checker.get_available_cells(model.board)
    if not available:
        return refresh_status(model)

    selected_cell = choose_cell(available)
    logger.debug("Computer plays cell %d", selected_cell)
    return _apply_move(model, selected_cell, model.computer_mark())


def refresh_status(model: GameModel) -> GameModel:
    """Recompute the status from the board."""
    status = _win_checker.update_game_status(model.board, model.first_player)
    if status.is_terminal():
        logger.debug(
            "Game over: %s (line %s)",
            status, _win_checker.get_winning_line(model.board)
        )
    return model.with_status(status)


def _apply_move(model: GameModel, index: int, mark: Mark) -> GameModel:
    new_board = place_mark(model.board, index, mark)
    return refresh_status(model.with_board(new_board))
