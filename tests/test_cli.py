import io
import random

import pytest

from minesweep.cli import main, parse_command
from minesweep.game import Game

SEED = 7


def _run(monkeypatch, capsys, text, argv=None):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(argv if argv is not None else ["--seed", str(SEED)])
    return code, capsys.readouterr().out


def _seeded_game():
    game = Game(8, 8, 10, random.Random(SEED))
    game.reveal_cell(0, 0)
    return game


def test_parse_command_swaps_column_and_row():
    assert parse_command("r 1 2") == ("r", 2, 1)


def test_parse_command_flag():
    assert parse_command("f 0 3") == ("f", 3, 0)


def test_parse_command_ignores_extra_whitespace_and_trailing_text():
    assert parse_command("   r   4   5 extra") == ("r", 5, 4)


def test_parse_command_accepts_any_command_letter():
    assert parse_command("z 1 1") == ("z", 1, 1)


@pytest.mark.parametrize("line", ["", "r", "r 1", "r a b", "r 1 x", "r12"])
def test_parse_command_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        parse_command(line)


def test_invalid_difficulty_inputs(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "abc\n5\n")
    assert code == 0
    assert "Invalid input. Please enter a number." in out
    assert "Invalid input. Please enter a number between 1-3." in out
    assert out.rstrip().endswith("Thanks for playing!")


def test_invalid_command_format(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "1\nhello\n")
    assert "Invalid command format. Please try again, e.g. r 1 2 or f 0 3" in out


def test_out_of_bounds_position(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "1\nr 8 0\n")
    assert "Invalid position. Coordinates out of bounds." in out


def test_unknown_command(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "1\nz 1 1\n")
    assert "Unknown command. Please use 'r' to reveal or 'f' to flag." in out


def test_flag_updates_counter(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "1\nf 0 0\n")
    assert "Flags: 0/10" in out
    assert "Flags: 1/10" in out


def test_medium_board_header(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "2\n")
    assert "Flags: 0/20" in out
    assert "11" in out.split("Flags: 0/20")[1].splitlines()[2]


def test_winning_game(monkeypatch, capsys):
    game = _seeded_game()
    safe = [
        (x, y)
        for x in range(game.height)
        for y in range(game.width)
        if not game.cell(x, y).mine
    ]
    commands = "".join(f"r {y} {x}\n" for x, y in [(0, 0), *safe])
    _, out = _run(monkeypatch, capsys, "1\n" + commands + "n\n")
    assert "Congratulations! You win!" in out
    assert "Game Over" not in out
    assert f"Your Score: {len(safe) * 10} points" in out
    assert out.rstrip().endswith("Thanks for playing!")


def test_losing_game(monkeypatch, capsys):
    game = _seeded_game()
    mine_x, mine_y = next(
        (x, y)
        for x in range(game.height)
        for y in range(game.width)
        if game.cell(x, y).mine
    )
    text = f"1\nr 0 0\nr {mine_y} {mine_x}\nn\n"
    _, out = _run(monkeypatch, capsys, text)
    assert "You hit a mine! Game Over!" in out
    assert " B" in out
    assert "Congratulations" not in out


def test_play_again_shows_menu_twice(monkeypatch, capsys):
    game = _seeded_game()
    mine_x, mine_y = next(
        (x, y)
        for x in range(game.height)
        for y in range(game.width)
        if game.cell(x, y).mine
    )
    round_text = f"1\nr 0 0\nr {mine_y} {mine_x}\n"
    _, out = _run(monkeypatch, capsys, round_text + "y\n" + round_text + "n\n")
    assert out.count("==== MINESWEEPER ====") == 2
    assert out.count("You hit a mine! Game Over!") == 2
    assert out.count("Thanks for playing!") == 1


def test_seeded_runs_are_identical(monkeypatch, capsys):
    text = "1\nr 3 3\nr 0 0\n"
    _, first = _run(monkeypatch, capsys, text)
    _, second = _run(monkeypatch, capsys, text)
    assert first == second