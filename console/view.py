"""
View for terminal TicTacToe.
Shows the current game and asks the user for the next message.
"""

from typing import Optional

from logic.game_state import GameModel, Board, Player, Draw, Settled, NotFinished
from logic.messages import Message, CellClicked, PlayerOrderChosen, NoMessage
from logic.win_checker import WinChecker
from .config import ConsoleConfig
from .terminal import Terminal
from .prompts import ask_user_to_be_first, ask_move


def view(
    model: GameModel,
    terminal: Terminal,
    config: Optional[ConsoleConfig] = None
) -> Message:
    """
    Render the model and collect the user's next action.

    The model is only read, never changed.

    Args:
        model: Current game state.
        terminal: Where to read and write.
        config: Display texts. Uses defaults if not provided.

    Returns:
        PlayerOrderChosen before the order is picked, CellClicked during
        play, NoMessage once the game is over.
    """
    config = config or ConsoleConfig()
    status = model.status

    if isinstance(status, Draw):
        print_board(model.board, terminal, config)
        terminal.write(config.BANNER_TEMPLATE.format(config.DRAW_TEXT))
        return NoMessage()

    if isinstance(status, Settled):
        if status.winner == Player.USER:
            text = config.WIN_TEXT
        else:
            text = config.LOSE_TEXT
        print_board(model.board, terminal, config)
        terminal.write(config.BANNER_TEMPLATE.format(text))
        return NoMessage()

    if isinstance(status, NotFinished):
        if model.first_player is None:
            return PlayerOrderChosen(ask_user_to_be_first(terminal, config))

        print_board(model.board, terminal, config)
        available = WinChecker().get_available_cells(model.board)
        return CellClicked(ask_move(terminal, available, config))

    raise TypeError(f"Unknown game status: {status!r}")


def format_board(board: Board, config: Optional[ConsoleConfig] = None) -> str:
    """
    Lay out the board next to the cell numbers.

        0|1|2  o| |x
        3|4|5   |o|
        6|7|8  x| |
    """
    config = config or ConsoleConfig()
    rows = []
    for row, label in enumerate(config.ROW_INDEX_LABELS):
        cells = board[row * 3:row * 3 + 3]
        chars = "|".join(config.MARK_CHARS[cell.value] for cell in cells)
        rows.append(f"{label}  {chars}")
    return "\n".join(rows)


def print_board(
    board: Board,
    terminal: Terminal,
    config: Optional[ConsoleConfig] = None
):
    """Write the board to the terminal."""
    terminal.write(format_board(board, config))
