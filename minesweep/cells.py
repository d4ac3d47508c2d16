"""Board cells: plain cells and cells that hold a mine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Cell:
    """One square of the board."""

    mine: bool = False
    adjacent_mines: int = 0
    revealed: bool = False
    flagged: bool = False

    def reveal(self) -> bool:
        """Open the cell unless it is flagged; return whether it holds a mine."""
        if not self.flagged:
            self.revealed = True
        return self.mine

    def toggle_flag(self) -> None:
        """Place or remove a flag, provided the cell is still closed."""
        if not self.revealed:
            self.flagged = not self.flagged


@dataclass
class MineCell(Cell):
    """A cell that always holds a mine."""

    mine: bool = True

    def reveal(self) -> bool:
        """Open the cell, flag or not, and report the mine."""
        self.revealed = True
        return True