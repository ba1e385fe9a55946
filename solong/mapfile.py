"""Validation and loading of ``.ber`` map files."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from solong.reader import read_map_lines

EXTENSION = ".ber"
WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
VALID_TILES = frozenset(WALL + FLOOR + PLAYER + EXIT + COLLECTIBLE)

# Tiles the flood fill may enter; the exit blocks the way like a wall.
_WALKABLE = frozenset(FLOOR + COLLECTIBLE + PLAYER)


class MapError(Exception):
    """Raised when a map file or its contents are not acceptable."""


@dataclass(frozen=True)
class GameMap:
    """A validated, rectangular map: one string per row, newlines removed."""

    rows: tuple[str, ...]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def collectibles(self) -> int:
        return sum(row.count(COLLECTIBLE) for row in self.rows)

    def tile(self, row: int, col: int) -> str:
        """Return the tile at ``row``, ``col``."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"tile ({row}, {col}) is outside the map")
        return self.rows[row][col]


def check_extension(path: str | os.PathLike[str]) -> None:
    """Raise :class:`MapError` unless the last dot of ``path`` starts ``.ber``."""
    name = os.fspath(path)
    dot = name.rfind(".")
    if dot < 0 or name[dot:] != EXTENSION:
        raise MapError(f"map file must have the {EXTENSION} extension: {name!r}")


def _strip_rows(lines: Sequence[str]) -> list[str]:
    if not lines:
        raise MapError("map is empty")
    if lines[-1].endswith("\n"):
        raise MapError("map must not end with a newline")
    return [line[:-1] if line.endswith("\n") else line for line in lines]


def _check_shape(rows: list[str]) -> None:
    width = len(rows[-1])
    if any(len(row) != width for row in rows):
        raise MapError("map rows differ in length")
    if len(rows) == width:
        raise MapError("map must be rectangular, not square")


def _check_walls(rows: list[str]) -> None:
    for edge in (rows[0], rows[-1]):
        if set(edge) != {WALL}:
            raise MapError("map must be closed by walls")
    for row in rows[1:-1]:
        if row[0] != WALL or row[-1] != WALL:
            raise MapError("map must be closed by walls")


def _check_tiles(rows: list[str]) -> None:
    for row in rows:
        bad = set(row) - VALID_TILES
        if bad:
            raise MapError(f"map holds invalid characters: {''.join(sorted(bad))!r}")
    players = sum(row.count(PLAYER) for row in rows)
    exits = sum(row.count(EXIT) for row in rows)
    collectibles = sum(row.count(COLLECTIBLE) for row in rows)
    if players != 1:
        raise MapError(f"map needs exactly one player, found {players}")
    if exits != 1:
        raise MapError(f"map needs exactly one exit, found {exits}")
    if collectibles == 0:
        raise MapError("map needs at least one collectible")


def _reachable(rows: list[str], start: tuple[int, int]) -> set[tuple[int, int]]:
    height, width = len(rows), len(rows[0])
    seen: set[tuple[int, int]] = set()
    stack = [start]
    while stack:
        row, col = stack.pop()
        if (row, col) in seen or not (0 <= row < height and 0 <= col < width):
            continue
        if rows[row][col] not in _WALKABLE:
            continue
        seen.add((row, col))
        stack.extend(((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)))
    return seen


def _check_collectibles_reachable(rows: list[str]) -> None:
    start = next(
        (r, c) for r, row in enumerate(rows) for c, tile in enumerate(row) if tile == PLAYER
    )
    reached = _reachable(rows, start)
    for r, row in enumerate(rows):
        for c, tile in enumerate(row):
            if tile == COLLECTIBLE and (r, c) not in reached:
                raise MapError("a collectible cannot be reached by the player")


def parse_map(lines: Iterable[str]) -> GameMap:
    """Validate the lines of a map file and return the map they describe."""
    rows = _strip_rows(list(lines))
    _check_shape(rows)
    _check_walls(rows)
    _check_tiles(rows)
    _check_collectibles_reachable(rows)
    return GameMap(tuple(rows))


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Check the name of ``path``, read it and validate the map it holds."""
    check_extension(path)
    try:
        lines = read_map_lines(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise MapError(f"cannot read map file {os.fspath(path)!r}: {exc}") from exc
    return parse_map(lines)