"""
Console configuration for terminal TicTacToe.
All the texts shown to the player, plus logging and randomness settings.
"""

import logging


class ConsoleConfig:
    """
    Configuration class for the console game.
    Change these values to tweak the wording or turn on debug output.
    """

    # ==================== PROMPTS ====================
    PLAY_FIRST_PROMPT = "Do you want to play first? [y/n]: "
    PLAY_FIRST_RETRY = "Please input 'y' or 'n' :"

    MOVE_PROMPT = "What's your move? [0-8]: "
    MOVE_RETRY = "Please input [0-8] :"

    # ==================== BOARD ====================
    # Left half of each rendered row shows the cell numbers
    ROW_INDEX_LABELS = ["0|1|2", "3|4|5", "6|7|8"]

    # Characters for each mark (keyed by Mark.value)
    MARK_CHARS = {
        "o": "o",   # first player
        "x": "x",   # second player
        " ": " ",   # empty
    }

    # ==================== RESULT BANNERS ====================
    BANNER_TEMPLATE = "======== {} ======="
    DRAW_TEXT = "Draw!"
    WIN_TEXT = "You win, nice!"
    LOSE_TEXT = "You lose, too bad! Try again!"

    # ==================== COMPUTER PLAYER ====================
    # None gives a different game every run
    RANDOM_SEED = None

    # ==================== LOGGING ====================
    # Logs go to stderr so they never mix with the board
    LOG_LEVEL = logging.WARNING
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
