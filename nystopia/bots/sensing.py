"""Sensing — how a bot spots the nearest food around it.

A bot looks at every tile inside a square window of radius ``sight``
centred on itself, keeps the edible ones whose floored Euclidean distance
is within ``sight`` and remembers the closest.  Ties are settled by a
coin flip at the moment of comparison, so among three or more equally
close tiles the later ones are favoured.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from numpy.random import Generator

    from nystopia.world.food_grid import FoodGrid


class Direction(Enum):
    """The five moves a bot can make, as ``(d_row, d_col)`` offsets."""

    STAY = (0, 0)
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def d_row(self) -> int:
        return self.value[0]

    @property
    def d_col(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class FoodSighting:
    """The nearest edible tile a bot can see.

    Attributes:
        row: Row of the food tile.
        col: Column of the food tile.
        distance: Floored Euclidean distance from the bot.
    """

    row: int
    col: int
    distance: int


def tile_distance(d_row: int, d_col: int) -> int:
    """Return ``floor(sqrt(d_row**2 + d_col**2))`` without float error."""
    return math.isqrt(d_row * d_row + d_col * d_col)


def sight_window(
    grid: FoodGrid,
    row: int,
    col: int,
    sight: int,
) -> tuple[range, range]:
    """Return the row and column ranges a bot at ``(row, col)`` can see.

    The window spans ``sight`` tiles in each direction, inclusive, clipped
    to the grid.
    """
    rows = range(max(0, row - sight), min(grid.height, row + sight + 1))
    cols = range(max(0, col - sight), min(grid.width, col + sight + 1))
    return rows, cols


def nearest_food(
    grid: FoodGrid,
    row: int,
    col: int,
    sight: int,
    rng: Generator,
) -> FoodSighting | None:
    """Find the closest edible tile within ``sight`` of ``(row, col)``.

    Args:
        grid: The food grid to search.
        row: Row of the searching bot.
        col: Column of the searching bot.
        sight: Search radius in tiles.
        rng: Random source for tie-break coin flips.

    Returns:
        The nearest sighting, or None if no food is in sight.
    """
    rows, cols = sight_window(grid, row, col, sight)
    best: FoodSighting | None = None
    for r in rows:
        for c in cols:
            if not grid.has_food(r, c):
                continue
            dist = tile_distance(r - row, c - col)
            if dist > sight:
                continue
            if best is None or dist < best.distance:
                best = FoodSighting(row=r, col=c, distance=dist)
            elif dist == best.distance and int(rng.integers(0, 2)) == 1:
                best = FoodSighting(row=r, col=c, distance=dist)
    return best


def best_direction(row: int, col: int, food: FoodSighting) -> Direction | None:
    """Return the single axis move that best closes in on ``food``.

    The vertical move is chosen only when the column gap is strictly
    smaller than the row gap; otherwise the horizontal move wins.

    Returns:
        UP, DOWN, LEFT or RIGHT, or None when the food is underfoot.
    """
    d_row = food.row - row
    d_col = food.col - col
    if d_row == 0 and d_col == 0:
        return None
    if abs(d_col) < abs(d_row):
        return Direction.UP if d_row < 0 else Direction.DOWN
    return Direction.LEFT if d_col < 0 else Direction.RIGHT
