"""Command line entry point: load a map file and report its status."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional, Union

from solong.lines import read_lines
from solong.mapcheck import GameMap, MapError, validate_map

PathLike = Union[str, Path]

STATUS_VALID = 0
STATUS_INVALID = 1
STATUS_EMPTY = -1


def _read(path: PathLike) -> List[str]:
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as stream:
        return read_lines(stream)


def load_map(path: PathLike) -> GameMap:
    """Read and validate the map file at path.

    Raises OSError when the file cannot be read and MapError when the map
    is not valid.
    """
    return validate_map(_read(path))


def read_map_status(path: PathLike) -> int:
    """Return 0 for a valid map, -1 for an empty file and 1 otherwise."""
    try:
        lines = _read(path)
    except OSError:
        return STATUS_INVALID
    if not lines:
        return STATUS_EMPTY
    try:
        validate_map(lines)
    except MapError:
        return STATUS_INVALID
    return STATUS_VALID


def main(argv: Optional[List[str]] = None) -> int:
    """Check the map named on the command line and print its status."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        return 1
    status = read_map_status(args[0])
    print(f"\n{status}")
    return 0


if __name__ == "__main__":
    sys.exit(main())