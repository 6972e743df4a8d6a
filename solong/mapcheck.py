"""Validation of game maps: shape, walls, element counts and reachability."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from solong.textutil import differs_from, line_length

WALL = "1"
EMPTY = "O"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"

Position = Tuple[int, int]


class MapError(ValueError):
    """Raised when a map breaks one of the map rules."""


@dataclass
class MapInfo:
    """Counts gathered while checking a map, and the player's start."""

    player: int = 0
    collectible_total: int = 0
    cell: int = 0
    exit: int = 0
    wall: int = 0
    collectible_found: int = 0
    exit_found: int = 0
    start: Optional[Position] = None


@dataclass(frozen=True)
class GameMap:
    """A map that passed every check, rows held without their newlines."""

    grid: Tuple[str, ...]
    info: MapInfo = field(compare=False)

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0


def _strip(row: str) -> str:
    return row[: line_length(row)]


def scan_row(row: str, index: int, info: MapInfo) -> None:
    """Check an inner row and add its elements to info.

    The row must start and end with a wall and hold only known elements.
    A player found here becomes the start position.
    """
    row = _strip(row)
    if not row or row[0] != WALL or row[-1] != WALL:
        raise MapError(f"row {index} is not closed by walls")
    for column, char in enumerate(row[1:], start=1):
        if char == PLAYER:
            info.start = (index, column)
            info.player += 1
        elif char == COLLECTIBLE:
            info.collectible_total += 1
        elif char == EXIT:
            info.exit += 1
        elif char == EMPTY:
            info.cell += 1
        elif char == WALL:
            info.wall += 1
        else:
            raise MapError(f"unknown element {char!r} at row {index}, column {column}")


def check_shape(grid: Sequence[str]) -> MapInfo:
    """Check that the grid is a rectangle closed by walls and count its elements."""
    rows = [_strip(row) for row in grid]
    if not rows:
        raise MapError("map is empty")
    width = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != width:
            raise MapError(f"row {index} has length {len(row)}, expected {width}")
    info = MapInfo()
    last = len(rows) - 1
    for index, row in enumerate(rows):
        if index in (0, last):
            if differs_from(row, WALL):
                raise MapError(f"border row {index} is not made of walls")
        else:
            scan_row(row, index, info)
    return info


def flood_fill(grid: Sequence[str], start: Position, info: MapInfo) -> bool:
    """Explore every cell reachable from start without crossing walls.

    Collectibles and exits reached are added to info. Returns True when
    every collectible and every exit of info was reached. The grid is not
    changed.
    """
    rows = [_strip(row) for row in grid]
    visited: Set[Position] = set()
    pending: List[Position] = [start]
    while pending:
        x, y = pending.pop()
        if (x, y) in visited:
            continue
        if not (0 <= x < len(rows) and 0 <= y < len(rows[x])):
            continue
        char = rows[x][y]
        if char == WALL:
            continue
        visited.add((x, y))
        if char == COLLECTIBLE:
            info.collectible_found += 1
        elif char == EXIT:
            info.exit_found += 1
        pending.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return (
        info.collectible_found == info.collectible_total
        and info.exit_found == info.exit
    )


def validate_map(lines: Iterable[str]) -> GameMap:
    """Check map lines and return the map, or raise MapError."""
    grid = tuple(_strip(line) for line in lines)
    if not grid:
        raise MapError("map is empty")
    info = check_shape(grid)
    if info.exit != 1:
        raise MapError(f"map needs exactly one exit, found {info.exit}")
    if info.player != 1:
        raise MapError(f"map needs exactly one player, found {info.player}")
    assert info.start is not None
    if not flood_fill(grid, info.start, info):
        raise MapError("not every collectible and exit can be reached")
    return GameMap(grid=grid, info=info)