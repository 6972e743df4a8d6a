# solong

Loading and checking maps for a small grid puzzle game. The player `P`
must be able to reach every collectible `C` and the exit `E`.

## Map format

A map is a text file of equal-length rows. Each character is one tile:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `O`  | open cell (the capital letter O) |
| `C`  | collectible  |
| `E`  | exit         |
| `P`  | player start |

A map is valid when:

- every row has the same length (a trailing newline is not counted);
- the first and last rows are all walls, and every other row starts and
  ends with a wall and holds only the characters above;
- there is exactly one player and exactly one exit;
- every collectible and the exit can be reached from the player's start
  by moving up, down, left or right without crossing walls.

Example:

```
1111111
1POCOE1
1111111
```

## Installation

```
pip install .
```

## Command line

```
solong path/to/map.ber
```

The command reads the map, checks it and prints a blank line followed by
a status:

| Status | Meaning                                      |
|--------|----------------------------------------------|
| `0`    | the map is valid                             |
| `-1`   | the file is empty                            |
| `1`    | the map is invalid or the file can't be read |

The command exits with 0 after printing, and with 1 (printing nothing)
when it is not given exactly one argument.

## Library use

```python
from solong.cli import load_map
from solong.mapcheck import MapError

try:
    game_map = load_map("levels/first.ber")
except MapError as error:
    print(f"invalid map: {error}")
else:
    print(game_map.width, game_map.height, game_map.info.collectible_total)
```

- `solong.mapcheck.validate_map(lines)` takes the map's rows directly and
  returns a `GameMap` (its `grid`, `width`, `height` and a `MapInfo` with
  element counts and the player's `start`), or raises `MapError`, a
  subclass of `ValueError`. The lower-level steps `check_shape`,
  `scan_row` and `flood_fill` are available too.
- `solong.cli.load_map(path)` reads and validates a file; it raises
  `OSError` when the file cannot be read. `read_map_status(path)` returns
  the status numbers shown above instead of raising.
- `solong.lines` reads text streams line by line, newlines kept:
  `LineReader(stream, buffer_size)` with `next_line()` and iteration,
  plus `read_lines(stream)` and `count_lines(stream)`.
- `solong.textutil`, `solong.chars` and `solong.numfmt` hold small string,
  ASCII character and integer parsing/formatting helpers.

## What this package does not do

It only loads and checks maps. It opens no window, draws nothing, and has
no way to play a map: there is no player movement, move counting or
win detection beyond the reachability check.

## Running the tests

```
pip install .[test]
pytest
```