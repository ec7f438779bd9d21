"""
Tests for the console module.
Covers the terminal wrapper, input prompts and board rendering.

Usage:
    pytest test_console.py
"""

import io

import pytest

from logic.game_state import GameModel, Player, NotFinished, Draw, Settled, board_from_indices
from logic.messages import CellClicked, PlayerOrderChosen, NoMessage
from console.config import ConsoleConfig
from console.terminal import Terminal
from console.prompts import ask_user_to_be_first, ask_move
from console.view import view, format_board


class ScriptedStream:
    """Input stream that replays lines and raises any exception it is given."""

    def __init__(self, *items):
        self.items = list(items)

    def readline(self):
        item = self.items.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def make_terminal(text):
    return Terminal(io.StringIO(text), io.StringIO())


def output_lines(terminal):
    return terminal.output_stream.getvalue().splitlines()


# ==================== TERMINAL ====================

def test_read_line_returns_line():
    terminal = make_terminal("y\nn\n")
    assert terminal.read_line() == "y\n"
    assert terminal.read_line() == "n\n"


def test_read_line_at_end_of_input():
    assert make_terminal("").read_line() is None


def test_read_line_on_stream_error():
    terminal = Terminal(ScriptedStream(OSError("broken"), EOFError()), io.StringIO())
    assert terminal.read_line() is None
    assert terminal.read_line() is None


def test_write_appends_newline():
    terminal = make_terminal("")
    terminal.write("hello")
    assert terminal.output_stream.getvalue() == "hello\n"


# ==================== YES/NO PROMPT ====================

def test_yes_no_skips_invalid_line():
    terminal = make_terminal("z\nn\n")
    assert ask_user_to_be_first(terminal) is False
    assert output_lines(terminal) == [
        ConsoleConfig.PLAY_FIRST_PROMPT,
        ConsoleConfig.PLAY_FIRST_RETRY,
    ]


@pytest.mark.parametrize("answer, expected", [
    ("y\n", True),
    ("yes please\n", True),
    ("n\n", False),
    ("no\n", False),
])
def test_yes_no_uses_first_character(answer, expected):
    assert ask_user_to_be_first(make_terminal(answer)) is expected


def test_yes_no_is_case_sensitive():
    terminal = make_terminal("Y\n\ny\n")
    assert ask_user_to_be_first(terminal) is True
    assert output_lines(terminal).count(ConsoleConfig.PLAY_FIRST_RETRY) == 2


def test_yes_no_retries_after_read_failure():
    stream = ScriptedStream(OSError("broken"), "", "y\n")
    terminal = Terminal(stream, io.StringIO())
    assert ask_user_to_be_first(terminal) is True
    assert stream.items == []


# ==================== MOVE PROMPT ====================

def test_move_accepts_available_cell():
    terminal = make_terminal("3\n")
    assert ask_move(terminal, [1, 3, 5]) == 3
    assert output_lines(terminal) == [ConsoleConfig.MOVE_PROMPT]


def test_move_rejects_taken_and_garbage():
    terminal = make_terminal("a\n4\n0\n")
    assert ask_move(terminal, [0, 1, 2]) == 0
    assert output_lines(terminal) == [
        ConsoleConfig.MOVE_PROMPT,
        ConsoleConfig.MOVE_RETRY,
        "The cell 4 is not available",
        ConsoleConfig.MOVE_RETRY,
    ]


def test_move_rejects_nine():
    terminal = make_terminal("9\n8\n")
    assert ask_move(terminal, [8]) == 8
    assert "The cell 9 is not available" in output_lines(terminal)


def test_move_retries_after_read_failure():
    stream = ScriptedStream(OSError("broken"), "", "5\n")
    terminal = Terminal(stream, io.StringIO())
    assert ask_move(terminal, [5]) == 5
    assert output_lines(terminal).count(ConsoleConfig.MOVE_RETRY) == 2


# ==================== BOARD RENDERING ====================

def test_format_empty_board():
    assert format_board(GameModel.new().board) == (
        "0|1|2   | | \n"
        "3|4|5   | | \n"
        "6|7|8   | | "
    )


def test_format_board_with_marks():
    board = board_from_indices(first=[0, 4], second=[2, 8])
    assert format_board(board) == (
        "0|1|2  o| |x\n"
        "3|4|5   |o| \n"
        "6|7|8   | |x"
    )


# ==================== VIEW ====================

def test_view_asks_player_order_first():
    terminal = make_terminal("n\n")
    model = GameModel.new()

    message = view(model, terminal)

    assert message == PlayerOrderChosen(user_first=False)
    # No board before the order is chosen
    assert output_lines(terminal) == [ConsoleConfig.PLAY_FIRST_PROMPT]
    assert model == GameModel.new()


def test_view_renders_board_and_asks_move():
    terminal = make_terminal("0\n4\n")
    board = board_from_indices(first=[0], second=[8])
    model = GameModel(first_player=Player.USER, board=board, status=NotFinished())

    message = view(model, terminal)

    assert message == CellClicked(4)
    lines = output_lines(terminal)
    assert lines[:3] == format_board(board).splitlines()
    assert lines[3] == ConsoleConfig.MOVE_PROMPT
    assert "The cell 0 is not available" in lines


def test_view_draw():
    terminal = make_terminal("")
    board = board_from_indices(first=[0, 1, 5, 6, 8], second=[2, 3, 4, 7])
    model = GameModel(first_player=Player.USER, board=board, status=Draw())

    assert view(model, terminal) == NoMessage()
    lines = output_lines(terminal)
    assert lines[:3] == format_board(board).splitlines()
    assert lines[3] == "======== Draw! ======="


@pytest.mark.parametrize("winner, banner", [
    (Player.USER, "======== You win, nice! ======="),
    (Player.COMPUTER, "======== You lose, too bad! Try again! ======="),
])
def test_view_settled(winner, banner):
    terminal = make_terminal("")
    board = board_from_indices(first=[0, 1, 2], second=[3, 4])
    model = GameModel(first_player=Player.USER, board=board, status=Settled(winner))

    assert view(model, terminal) == NoMessage()
    assert output_lines(terminal)[-1] == banner


def test_view_uses_custom_config():
    class QuietConfig(ConsoleConfig):
        DRAW_TEXT = "Tie"

    terminal = make_terminal("")
    board = board_from_indices(first=[0, 1, 5, 6, 8], second=[2, 3, 4, 7])
    model = GameModel(first_player=Player.USER, board=board, status=Draw())

    view(model, terminal, QuietConfig())
    assert output_lines(terminal)[-1] == "======== Tie ======="
