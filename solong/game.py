"""Game state: the player's position, moves and collected items."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import Enum
from typing import TextIO

from solong.mapfile import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap


class Direction(Enum):
    """A step on the map as a (row, column) offset."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


def find_player(rows: Sequence[str]) -> tuple[int, int]:
    """Return the (row, column) of the player's start tile."""
    for r, row in enumerate(rows):
        col = row.find(PLAYER)
        if col >= 0:
            return r, col
    raise ValueError("map has no player")


class Game:
    """A running game on a validated map.

    The player's start tile counts as floor once play begins. A step onto
    the exit counts as a move but leaves the player where they are; it wins
    the game once every collectible has been picked up.
    """

    def __init__(self, game_map: GameMap, output: TextIO | None = None) -> None:
        self.player = find_player(game_map.rows)
        self._grid = [list(row.replace(PLAYER, FLOOR)) for row in game_map.rows]
        self.remaining = game_map.collectibles
        self.moves = 0
        self.won = False
        self._output = output

    @property
    def height(self) -> int:
        return len(self._grid)

    @property
    def width(self) -> int:
        return len(self._grid[0]) if self._grid else 0

    def tile(self, row: int, col: int) -> str:
        """Return the current tile at ``row``, ``col``."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"tile ({row}, {col}) is outside the map")
        return self._grid[row][col]

    def move(self, direction: Direction) -> bool:
        """Try one step; return whether it counted as a move."""
        if self.won:
            return False
        d_row, d_col = direction.value
        row, col = self.player[0] + d_row, self.player[1] + d_col
        target = self.tile(row, col)
        if target == WALL:
            return False
        if target != EXIT:
            self.player = (row, col)
            if target == COLLECTIBLE:
                self.remaining -= 1
                self._grid[row][col] = FLOOR
        self.moves += 1
        print(self.moves, file=self._output if self._output is not None else sys.stdout)
        if target == EXIT and self.remaining == 0:
            self.won = True
        return True