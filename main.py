"""
Main loop for terminal TicTacToe.

Play against a computer that picks its moves at random:
view the game, apply what the user did, repeat until someone wins or the
board fills up.
"""

import logging
from typing import Optional

from logic.game_state import GameModel
from logic.computer_player import CellChooser, RandomCellChooser
from logic.update import update
from console.config import ConsoleConfig
from console.terminal import Terminal
from console.view import view

logger = logging.getLogger(__name__)


def run_game(
    terminal: Optional[Terminal] = None,
    choose_cell: Optional[CellChooser] = None,
    config: Optional[ConsoleConfig] = None
) -> GameModel:
    """
    Play one full game.

    Args:
        terminal: Where to read and write. Uses stdin/stdout if not provided.
        choose_cell: Picks the computer's cells. Random if not provided.
        config: Console configuration. Uses defaults if not provided.

    Returns:
        The finished game.
    """
    config = config or ConsoleConfig()
    terminal = terminal or Terminal()
    choose_cell = choose_cell or RandomCellChooser(config.RANDOM_SEED)

    model = GameModel.new()
    while not model.is_finished():
        message = view(model, terminal, config)
        model = update(model, message, choose_cell)

    # One last render for the result banner
    view(model, terminal, config)
    logger.info("Game finished: %s", model.status)
    return model


def main():
    """Main entry point."""
    config = ConsoleConfig()
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    run_game(config=config)


if __name__ == "__main__":
    main()
