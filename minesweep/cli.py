"""Interactive terminal front end for the minesweeper game."""

from __future__ import annotations

import argparse
import random
import re
from collections.abc import Sequence

from .game import Game, RED, RESET

GREEN = "\033[32m"

DIFFICULTIES: dict[int, tuple[int, int, int]] = {
    1: (8, 8, 10),
    2: (12, 12, 20),
    3: (16, 16, 40),
}

MENU = (
    "==== MINESWEEPER ====\n"
    "Select difficulty:\n"
    "1. Easy (8x8, 10 mines)\n"
    "2. Medium (12x12, 20 mines)\n"
    "3. Hard (16x16, 40 mines)"
)

_COMMAND = re.compile(r"\s*(\S)\s*([+-]?\d+)(?!\d)\s*([+-]?\d+)")
_NUMBER = re.compile(r"\s*([+-]?\d+)")


class _Quit(Exception):
    """Raised when input runs out."""


def _error(message: str) -> None:
    print(f"{RED}{message}{RESET}")


def _read(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError as exc:
        raise _Quit from exc


def parse_command(line: str) -> tuple[str, int, int]:
    """Parse ``<cmd> <column> <row>`` into ``(cmd, row, column)``.

    Raises ValueError when the line does not hold a command and two numbers.
    """
    match = _COMMAND.match(line)
    if match is None:
        raise ValueError(f"invalid command: {line!r}")
    action, column, row = match.groups()
    return action, int(row), int(column)


def _choose_difficulty() -> tuple[int, int, int]:
    print(MENU)
    while True:
        line = _read("Choice: ")
        if not line.strip():
            continue
        match = _NUMBER.match(line)
        if match is None:
            _error("Invalid input. Please enter a number.")
            continue
        choice = int(match.group(1))
        if choice in DIFFICULTIES:
            return DIFFICULTIES[choice]
        _error("Invalid input. Please enter a number between 1-3.")


def _read_command() -> str:
    while True:
        line = _read("Enter command (r x y = reveal, f x y = flag): ")
        if line.strip():
            return line


def _play_round(seed: int | None) -> None:
    width, height, mines = _choose_difficulty()
    rng = random.Random(seed) if seed is not None else None
    game = Game(width, height, mines, rng)

    while not game.game_over and not game.is_win():
        game.print_board()
        line = _read_command()
        try:
            action, x, y = parse_command(line)
        except ValueError:
            _error(
                "Invalid command format. Please try again, e.g. r 1 2 or f 0 3"
            )
            continue
        if not game.is_valid(x, y):
            _error("Invalid position. Coordinates out of bounds.")
            continue
        if action == "r":
            game.reveal_cell(x, y)
        elif action == "f":
            game.toggle_flag(x, y)
        else:
            _error("Unknown command. Please use 'r' to reveal or 'f' to flag.")

    game.print_board(True)
    if game.game_over:
        print(f"{RED}You hit a mine! Game Over!\n{RESET}", end="")
    else:
        print(f"{GREEN}Congratulations! You win!\n{RESET}", end="")
    print(f"Your Score: {game.score} points")


def _wants_another() -> bool:
    answer = _read("\nPlay again? (y/n): ").strip()
    return answer[:1] in ("y", "Y")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game loop until the player declines another round."""
    parser = argparse.ArgumentParser(prog="minesweep", description="Play minesweeper.")
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for mine placement"
    )
    args = parser.parse_args(argv)

    try:
        while True:
            _play_round(args.seed)
            if not _wants_another():
                break
    except _Quit:
        print()
    print("Thanks for playing!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())