# minesweep

Minesweeper in your terminal. Your first reveal never hits a mine, because
mines are placed only after it and never in the 3x3 block around it. Revealing
a blank cell also opens the blank area connected to it. Your score goes up as
you play.

## Installing

```
pip install .
```

## Playing

```
minesweep
```

To get the same mine layout every time, pass a seed:

```
minesweep --seed 42
```

First pick a difficulty:

| Choice | Board  | Mines |
|--------|--------|-------|
| 1      | 8x8    | 10    |
| 2      | 12x12  | 20    |
| 3      | 16x16  | 40    |

Then enter commands in the form `<command> <column> <row>`:

- `r 3 5` reveals the cell in column 3, row 5
- `f 0 2` places or removes a flag on the cell in column 0, row 2

A malformed line, a position off the board, or a command other than `r` or
`f` prints an error and asks again. A flagged cell cannot be revealed until
its flag is removed, and a revealed cell cannot be flagged.

In the grid, `.` is a hidden cell and `F` is a flag. A digit is a revealed
cell and shows how many mines touch it. When the game ends, every mine is shown
as `M`, and the one you set off is shown as `B`. The header shows the number of
flags placed against the number of mines.

### Scoring

- 10 points for each cell revealed, including the cells a blank area opens
- 5 points for flagging a mine
- 2 points off for flagging a safe cell (your score never drops below zero)

After each game you are asked whether you want to play again; any answer
starting with `y` or `Y` starts a new round. Ending the input (Ctrl-D) quits.

## Using it as a library

```python
import random
from minesweep.game import Game

game = Game(8, 8, 10, random.Random(42))   # width, height, mines, rng
game.reveal_cell(3, 3)        # row, column; returns True on a mine
game.toggle_flag(0, 0)
print(game.render(False))     # board as text; game.print_board() writes it out
print(game.is_win(), game.game_over, game.score, game.flags_used)
cell = game.cell(3, 3)        # a minesweep.cells.Cell; IndexError off the board
print(cell.revealed, cell.adjacent_mines)
```

`Game` also exposes `width`, `height`, `mines`, `exploded_cell` and
`is_valid(x, y)`. If there are more mines than cells outside the safe block
around the first reveal, that first `reveal_cell` raises `ValueError`.

`minesweep.cells` holds `Cell`, a dataclass with `mine`, `adjacent_mines`,
`revealed` and `flagged`, and `MineCell`, a cell that always holds a mine and
opens even when flagged.

`minesweep.cli.parse_command(line)` turns `"r 3 5"` into `("r", 5, 3)`
(command, row, column) and raises `ValueError` for a malformed line.