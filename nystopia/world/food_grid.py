"""FoodGrid — the spatial container bots forage on.

The grid owns every tile, answers bounded ``(row, col)`` queries and
advances regrowth once per tick.  It knows nothing about bots: they read
it through ``tile_at`` and change it only through ``consume``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

if TYPE_CHECKING:
    from numpy.random import Generator

from nystopia.world.tile import Tile, TileView


@dataclass
class FoodGrid:
    """A ``width x height`` grid of food tiles.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        regrowth_ticks: Ticks an eaten food tile waits before regrowing.
        tiles: 2D list of Tile objects indexed as ``tiles[row][col]``.
    """

    width: int
    height: int
    regrowth_ticks: int = 1
    tiles: list[list[Tile]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Initialise the grid with foodless tiles."""
        if self.width <= 0 or self.height <= 0:
            msg = f"grid must be at least 1x1, got {self.width}x{self.height}"
            raise ValueError(msg)
        # A zero countdown would leave an eaten tile stuck forever
        self.regrowth_ticks = max(1, self.regrowth_ticks)
        self.tiles = [
            [Tile() for _ in range(self.width)] for _ in range(self.height)
        ]

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        food_probability: float,
        regrowth_ticks: int,
        rng: Generator,
    ) -> FoodGrid:
        """Scatter food-capable tiles at random.

        Every cell independently becomes a food tile with probability
        ``food_probability`` percent.

        Args:
            width: Number of columns.
            height: Number of rows.
            food_probability: Chance, in percent, that a cell grows food.
                Clamped to ``[0, 100]``.
            regrowth_ticks: Ticks a food tile needs to regrow once eaten.
            rng: Random generator used for the scatter.

        Returns:
            A fully initialised FoodGrid.
        """
        chance = min(100.0, max(0.0, float(food_probability)))
        mask = rng.random((height, width)) < chance / 100.0
        return cls.from_mask(mask, regrowth_ticks)

    @classmethod
    def from_mask(cls, mask: ArrayLike, regrowth_ticks: int) -> FoodGrid:
        """Build a grid from an explicit boolean layout.

        Args:
            mask: 2D array-like, truthy where the tile can grow food.
                Shape is ``(height, width)``.
            regrowth_ticks: Ticks a food tile needs to regrow once eaten.

        Raises:
            ValueError: If ``mask`` is not two-dimensional.
        """
        layout = np.asarray(mask, dtype=bool)
        if layout.ndim != 2:
            msg = f"food mask must be 2D, got shape {layout.shape}"
            raise ValueError(msg)
        height, width = layout.shape
        grid = cls(width=width, height=height, regrowth_ticks=regrowth_ticks)
        for row, col in zip(*np.nonzero(layout), strict=True):
            tile = grid.tiles[row][col]
            tile.can_grow_food = True
            tile.regrowth_ticks = grid.regrowth_ticks
        return grid

    def in_bounds(self, row: int, col: int) -> bool:
        """Return True if ``(row, col)`` lies on the grid."""
        return 0 <= row < self.height and 0 <= col < self.width

    def tile_at(self, row: int, col: int) -> TileView | None:
        """Return a read-only view of the tile at ``(row, col)``.

        Returns:
            The tile view, or None when the coordinates are off the grid.
        """
        if not self.in_bounds(row, col):
            return None
        tile = self.tiles[row][col]
        return TileView(
            row=row,
            col=col,
            can_grow_food=tile.can_grow_food,
            is_currently_eaten=tile.is_currently_eaten,
            regrowth_remaining=tile.regrowth_remaining,
        )

    def has_food(self, row: int, col: int) -> bool:
        """Return True if ``(row, col)`` is on the grid and edible now."""
        return self.in_bounds(row, col) and self.tiles[row][col].has_food_now

    def consume(self, row: int, col: int) -> bool:
        """Eat the food at ``(row, col)`` if there is any.

        A tile can be eaten at most once until it has regrown.

        Returns:
            True if food was eaten, False otherwise (nothing changes).
        """
        if not self.has_food(row, col):
            return False
        tile = self.tiles[row][col]
        tile.is_currently_eaten = True
        tile.regrowth_remaining = tile.regrowth_ticks
        return True

    def advance(self) -> None:
        """Count every eaten tile one tick closer to regrowth.

        Must run exactly once per tick, before any bot acts.  A tile eaten
        and then advanced ``regrowth_ticks`` times is edible again.
        """
        for row in self.tiles:
            for tile in row:
                if not (tile.can_grow_food and tile.is_currently_eaten):
                    continue
                if tile.regrowth_remaining <= 1:
                    tile.is_currently_eaten = False
                    tile.regrowth_remaining = 0
                else:
                    tile.regrowth_remaining -= 1

    def food_mask(self) -> NDArray[np.bool_]:
        """Return a ``(height, width)`` boolean array of edible tiles."""
        return np.array(
            [[tile.has_food_now for tile in row] for row in self.tiles],
            dtype=bool,
        )

    def food_count(self) -> int:
        """Return how many tiles are edible right now."""
        return int(self.food_mask().sum())
