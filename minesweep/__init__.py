"""Terminal Minesweeper game: cells, game state and an interactive command."""

__version__ = "1.0.0"