"""Loading of the tile map: a grid of single-digit tile indices."""

from __future__ import annotations

from pathlib import Path

from .components import COL, ROW


class MapError(Exception):
    """Raised when a tile map cannot be read or is malformed."""


def parse_map(text: str) -> list:
    """Parse ROW lines of COL digits into a ROW x COL list of ints.

    Characters past COL on a line and lines past ROW are ignored.
    """
    lines = text.splitlines()
    if len(lines) < ROW:
        raise MapError(f"map needs {ROW} rows, got {len(lines)}")
    grid = []
    for row_number, line in enumerate(lines[:ROW]):
        cells = line[:COL]
        if len(cells) < COL:
            raise MapError(
                f"row {row_number} needs {COL} tiles, got {len(cells)}"
            )
        if not all(char in "0123456789" for char in cells):
            raise MapError(f"row {row_number} holds a non-digit tile: {cells!r}")
        grid.append([int(char) for char in cells])
    return grid


def load_map(path) -> list:
    """Read and parse the tile map stored at path."""
    try:
        text = Path(path).read_text(encoding="ascii")
    except (OSError, UnicodeDecodeError) as error:
        raise MapError(f"cannot read map {path}: {error}") from error
    return parse_map(text)