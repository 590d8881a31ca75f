from tictactoe.core.models import HistoryEntry, Mark, Move
from tictactoe.core.prompt_formatters import create_prompt_formatter
from tictactoe.session.controller import GameController
from tictactoe.utils.visualization import SimpleBoardFormatter, describe_history_entry, format_move_history

from .doubles import board


def test_describe_history_entry():
    snapshot = board("---", "---", "---")
    assert describe_history_entry(0, HistoryEntry(snapshot)) == "Game start"
    entry = HistoryEntry(board("---", "---", "--O"), Move(2, 2), Mark.O)
    assert describe_history_entry(2, entry) == "#2: Player O at (3,3)"


def test_format_move_history_marks_current_step():
    game = GameController()
    game.apply_human_move(0, 0)
    game.apply_human_move(1, 2)
    game.jump_to(1)

    lines = format_move_history(game.history, game.current_index).splitlines()
    assert lines == [
        "  Game start",
        "> #1: Player X at (1,1)",
        "  #2: Player O at (2,3)",
    ]


def test_board_highlights_winning_cells():
    formatter = SimpleBoardFormatter()
    text = formatter.format_board_with_highlights(board("XXX", "-O-", "O--"), [(0, 0), (0, 1), (0, 2)])
    assert text.splitlines()[1] == "1 [X][X][X]"
    assert text.splitlines()[2] == "2  .  O  . "


def test_board_without_highlights():
    text = SimpleBoardFormatter().format_board(board("X--", "---", "---"))
    assert "[" not in text
    assert text.splitlines()[0] == "   1  2  3 "


def test_dash_prompt_formatter():
    formatter = create_prompt_formatter("dash")
    assert formatter.format_board(board("X-O", "---", "-X-")) == "X-O\n---\n-X-"


def test_json_prompt_formatter():
    formatter = create_prompt_formatter("json")
    assert formatter.format_board(board("X--", "---", "---")) == (
        '{"board": [["X", null, null], [null, null, null], [null, null, null]], "move_count": 1}'
    )


def test_standard_prompt_formatter():
    formatter = create_prompt_formatter("standard")
    assert formatter.format_board(board("X--", "-O-", "---")).splitlines() == [
        "   0  1  2 ",
        "0  X  .  . ",
        "1  .  O  . ",
        "2  .  .  . ",
    ]
    assert formatter.empty_legend == "'.'=empty"
