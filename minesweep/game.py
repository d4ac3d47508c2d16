"""Minesweeper game state: board, mine placement, flood reveal and scoring."""

from __future__ import annotations

import random
from collections.abc import Iterator

from .cells import Cell, MineCell

RED = "\033[31m"
YELLOW = "\033[33m"
RESET = "\033[0m"

_FLOOD_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))

REVEAL_POINTS = 10
CORRECT_FLAG_POINTS = 5
WRONG_FLAG_PENALTY = 2


class Game:
    """A board of ``height`` rows by ``width`` columns; ``x`` is the row, ``y`` the column."""

    def __init__(
        self,
        width: int,
        height: int,
        mines: int,
        rng: random.Random | None = None,
    ) -> None:
        self._width = width
        self._height = height
        self._mines = mines
        self._rng = rng if rng is not None else random.Random()
        self._flags_used = 0
        self._score = 0
        self._game_over = False
        self._first_click = True
        self._exploded_cell: tuple[int, int] | None = None
        self._board: list[list[Cell]] = [
            [Cell() for _ in range(width)] for _ in range(height)
        ]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def mines(self) -> int:
        return self._mines

    @property
    def flags_used(self) -> int:
        return self._flags_used

    @property
    def score(self) -> int:
        return self._score

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def exploded_cell(self) -> tuple[int, int] | None:
        return self._exploded_cell

    def is_valid(self, x: int, y: int) -> bool:
        """Whether (x, y) lies on the board."""
        return 0 <= x < self._height and 0 <= y < self._width

    def cell(self, x: int, y: int) -> Cell:
        """The cell at row ``x``, column ``y``."""
        if not self.is_valid(x, y):
            raise IndexError(f"position ({x}, {y}) is off the board")
        return self._board[x][y]

    def _positions(self) -> Iterator[tuple[int, int]]:
        for x in range(self._height):
            for y in range(self._width):
                yield x, y

    def _neighbours(self, x: int, y: int) -> Iterator[tuple[int, int]]:
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if self.is_valid(x + dx, y + dy):
                    yield x + dx, y + dy

    def _place_mines(self, safe_x: int, safe_y: int) -> None:
        candidates = [
            (x, y)
            for x, y in self._positions()
            if not (abs(x - safe_x) <= 1 and abs(y - safe_y) <= 1)
        ]
        if self._mines > len(candidates):
            raise ValueError(
                f"cannot place {self._mines} mines: only {len(candidates)} free cells"
            )
        self._rng.shuffle(candidates)
        for x, y in candidates[: self._mines]:
            self._board[x][y] = MineCell()

    def _calculate_adjacency(self) -> None:
        for x, y in self._positions():
            cell = self._board[x][y]
            if not cell.mine:
                cell.adjacent_mines = sum(
                    self._board[nx][ny].mine for nx, ny in self._neighbours(x, y)
                )

    def _reveal_empty(self, x: int, y: int) -> int:
        """Open the region of safe cells reachable orthogonally from (x, y)."""
        revealed = 0
        seen = {(x, y)}
        pending = [(x, y)]
        while pending:
            cx, cy = pending.pop()
            for dx, dy in _FLOOD_DIRECTIONS:
                nx, ny = cx + dx, cy + dy
                if not self.is_valid(nx, ny) or (nx, ny) in seen:
                    continue
                cell = self._board[nx][ny]
                if cell.revealed or cell.mine:
                    continue
                seen.add((nx, ny))
                cell.reveal()
                revealed += 1
                if cell.adjacent_mines == 0:
                    pending.append((nx, ny))
        return revealed

    def reveal_cell(self, x: int, y: int) -> bool:
        """Open the cell at (x, y); return True if it held a mine."""
        if not self.is_valid(x, y):
            return False
        target = self._board[x][y]
        if target.revealed or target.flagged:
            return False

        if self._first_click:
            self._place_mines(x, y)
            self._calculate_adjacency()
            self._first_click = False
            target = self._board[x][y]

        hit_mine = target.reveal()
        if hit_mine:
            self._exploded_cell = (x, y)
            self._game_over = True
        else:
            revealed = 1
            if target.adjacent_mines == 0:
                revealed += self._reveal_empty(x, y)
            self._score += revealed * REVEAL_POINTS
        return hit_mine

    def toggle_flag(self, x: int, y: int) -> None:
        """Place or remove a flag at (x, y), adjusting the flag count and score."""
        if not self.is_valid(x, y):
            return
        cell = self._board[x][y]
        was_flagged = cell.flagged
        cell.toggle_flag()
        if not was_flagged and cell.flagged:
            self._flags_used += 1
            if cell.mine:
                self._score += CORRECT_FLAG_POINTS
            else:
                self._score = max(0, self._score - WRONG_FLAG_PENALTY)
        elif was_flagged and not cell.flagged:
            self._flags_used -= 1

    def is_win(self) -> bool:
        """True when every cell without a mine has been opened."""
        return all(
            cell.revealed or cell.mine for row in self._board for cell in row
        )

    def _mine_symbol(self, x: int, y: int) -> str:
        letter = "B" if self._exploded_cell == (x, y) else "M"
        return f"{RED} {letter}{RESET}"

    def render(self, reveal_all: bool = False) -> str:
        """The board as text; with ``reveal_all`` every mine is shown."""
        parts = [f"\nFlags: {self._flags_used}/{self._mines}\n\n   "]
        parts.extend(f"{y:2d}" for y in range(self._width))
        parts.append("\n")
        for x, row in enumerate(self._board):
            parts.append(f"{x:2d} ")
            for y, cell in enumerate(row):
                if cell.revealed:
                    if cell.mine:
                        parts.append(self._mine_symbol(x, y))
                    else:
                        parts.append(f" {cell.adjacent_mines}")
                elif reveal_all and cell.mine:
                    parts.append(self._mine_symbol(x, y))
                elif cell.flagged:
                    parts.append(f"{YELLOW} F{RESET}")
                else:
                    parts.append(" .")
            parts.append("\n")
        parts.append("\n")
        return "".join(parts)

    def print_board(self, reveal_all: bool = False) -> None:
        """Write the board to standard output."""
        print(self.render(reveal_all), end="")