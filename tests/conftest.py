"""Shared fixtures for the Nystopia test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import numpy as np
import pytest
from numpy.random import Generator

from nystopia.bots.traits import Traits
from nystopia.simulation.config import SimulationConfig
from nystopia.world.food_grid import FoodGrid


class ScriptedRng:
    """Stand-in generator that replays a fixed list of ``integers`` draws."""

    def __init__(self, draws: Iterable[int]) -> None:
        self._draws = list(draws)
        self.calls: list[tuple[int, int]] = []

    def integers(self, low: int, high: int | None = None) -> int:
        if high is None:
            low, high = 0, low
        self.calls.append((low, high))
        value = self._draws.pop(0)
        assert low <= value < high, f"scripted draw {value} not in [{low}, {high})"
        return value


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRng]:
    """Factory for generators that return the given draws in order."""

    def make(*draws: int) -> ScriptedRng:
        return ScriptedRng(draws)

    return make


@pytest.fixture
def empty_grid() -> FoodGrid:
    """An 8x8 grid without any food."""
    return FoodGrid(width=8, height=8, regrowth_ticks=3)


@pytest.fixture
def traits() -> Traits:
    """Decision parameters with round numbers for score arithmetic."""
    return Traits(
        sight=4,
        hunger_threshold=50,
        base_move_score=10,
        food_sighted_score=100,
        meal_energy=20,
    )


@pytest.fixture
def default_config() -> SimulationConfig:
    """Default simulation config (no YAML file needed)."""
    return SimulationConfig(seed=42)


@pytest.fixture
def make_grid() -> Callable[..., FoodGrid]:
    """Factory for grids with food only at the given ``(row, col)`` cells."""

    def make(
        height: int,
        width: int,
        food: Iterable[tuple[int, int]] = (),
        regrowth_ticks: int = 3,
    ) -> FoodGrid:
        mask = np.zeros((height, width), dtype=bool)
        for row, col in food:
            mask[row, col] = True
        return FoodGrid.from_mask(mask, regrowth_ticks)

    return make
