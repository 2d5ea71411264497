"""Tile — a single cell of the food grid.

A tile either can grow food or never will; that is decided once when the
grid is created.  Food-capable tiles cycle between *edible* and *eaten*,
counting down a fixed number of ticks before the food grows back.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Tile:
    """Mutable tile state owned by ``FoodGrid``.

    Attributes:
        can_grow_food: Whether this tile ever produces food.
        regrowth_ticks: Ticks an eaten tile waits before food returns.
        is_currently_eaten: True between a successful consume and regrowth.
        regrowth_remaining: Ticks left until the food returns (> 0 only
            while eaten).
    """

    can_grow_food: bool = False
    regrowth_ticks: int = 0
    is_currently_eaten: bool = False
    regrowth_remaining: int = 0

    @property
    def has_food_now(self) -> bool:
        """Return True if the tile can be eaten right now."""
        return self.can_grow_food and not self.is_currently_eaten


@dataclass(frozen=True)
class TileView:
    """Read-only snapshot of a tile handed out by ``FoodGrid.tile_at``.

    Attributes:
        row: Row index of the tile.
        col: Column index of the tile.
        can_grow_food: Whether the tile ever produces food.
        is_currently_eaten: Whether the food is currently gone.
        regrowth_remaining: Ticks left until the food returns.
    """

    row: int
    col: int
    can_grow_food: bool
    is_currently_eaten: bool
    regrowth_remaining: int

    @property
    def has_food_now(self) -> bool:
        """Return True if a bot standing here could eat."""
        return self.can_grow_food and not self.is_currently_eaten
