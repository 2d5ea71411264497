"""Tests for nystopia.bots.sensing and nystopia.bots.selection."""

from collections import Counter
from collections.abc import Callable

import pytest
from numpy.random import Generator

from nystopia.bots.selection import weighted_choice
from nystopia.bots.sensing import (
    Direction,
    FoodSighting,
    best_direction,
    nearest_food,
    sight_window,
    tile_distance,
)
from nystopia.world.food_grid import FoodGrid


class TestDistance:
    """Tests for the floored Euclidean tile distance."""

    @pytest.mark.parametrize(
        ("d_row", "d_col", "expected"),
        [(0, 0, 0), (0, 3, 3), (-2, 0, 2), (1, 1, 1), (2, 2, 2), (3, 3, 4), (3, -4, 5)],
    )
    def test_floored(self, d_row: int, d_col: int, expected: int) -> None:
        assert tile_distance(d_row, d_col) == expected


class TestSightWindow:
    """Tests for the clipped sight window."""

    def test_centre(self, empty_grid: FoodGrid) -> None:
        rows, cols = sight_window(empty_grid, 4, 4, 2)
        assert list(rows) == [2, 3, 4, 5, 6]
        assert list(cols) == [2, 3, 4, 5, 6]

    def test_clipped_at_corner(self, empty_grid: FoodGrid) -> None:
        rows, cols = sight_window(empty_grid, 0, 7, 3)
        assert list(rows) == [0, 1, 2, 3]
        assert list(cols) == [4, 5, 6, 7]

    def test_zero_sight_is_own_cell(self, empty_grid: FoodGrid) -> None:
        rows, cols = sight_window(empty_grid, 5, 2, 0)
        assert list(rows) == [5]
        assert list(cols) == [2]


class TestNearestFood:
    """Tests for the nearest-food search."""

    def test_no_food(self, empty_grid: FoodGrid, rng: Generator) -> None:
        assert nearest_food(empty_grid, 4, 4, 3, rng) is None

    def test_finds_single_food(
        self,
        make_grid: Callable[..., FoodGrid],
        rng: Generator,
    ) -> None:
        grid = make_grid(9, 9, food=[(2, 5)])
        assert nearest_food(grid, 4, 4, 4, rng) == FoodSighting(row=2, col=5, distance=2)

    def test_prefers_closest(
        self,
        make_grid: Callable[..., FoodGrid],
        rng: Generator,
    ) -> None:
        grid = make_grid(9, 9, food=[(0, 0), (4, 6), (5, 4)])
        sighting = nearest_food(grid, 4, 4, 4, rng)
        assert sighting == FoodSighting(row=5, col=4, distance=1)

    def test_corner_of_window_beyond_sight(
        self,
        make_grid: Callable[..., FoodGrid],
        rng: Generator,
    ) -> None:
        # (3, 3) away is inside the square window but floor(sqrt(18)) = 4 > 3
        grid = make_grid(9, 9, food=[(7, 7)])
        assert nearest_food(grid, 4, 4, 3, rng) is None

    def test_outside_window(
        self,
        make_grid: Callable[..., FoodGrid],
        rng: Generator,
    ) -> None:
        grid = make_grid(9, 9, food=[(4, 0)])
        assert nearest_food(grid, 4, 4, 3, rng) is None

    def test_eaten_food_is_invisible(
        self,
        make_grid: Callable[..., FoodGrid],
        rng: Generator,
    ) -> None:
        grid = make_grid(9, 9, food=[(4, 5)])
        grid.consume(4, 5)
        assert nearest_food(grid, 4, 4, 3, rng) is None

    def test_tie_kept_on_tails(
        self,
        make_grid: Callable[..., FoodGrid],
        scripted_rng: Callable[..., object],
    ) -> None:
        grid = make_grid(5, 5, food=[(2, 1), (2, 3)])
        coin = scripted_rng(0)
        sighting = nearest_food(grid, 2, 2, 2, coin)  # type: ignore[arg-type]
        assert sighting == FoodSighting(row=2, col=1, distance=1)

    def test_tie_replaced_on_heads(
        self,
        make_grid: Callable[..., FoodGrid],
        scripted_rng: Callable[..., object],
    ) -> None:
        grid = make_grid(5, 5, food=[(2, 1), (2, 3)])
        coin = scripted_rng(1)
        sighting = nearest_food(grid, 2, 2, 2, coin)  # type: ignore[arg-type]
        assert sighting == FoodSighting(row=2, col=3, distance=1)

    def test_coin_flipped_once_per_tie(
        self,
        make_grid: Callable[..., FoodGrid],
        scripted_rng: Callable[..., object],
    ) -> None:
        # Three tiles at distance 1: two comparisons against the current best
        grid = make_grid(5, 5, food=[(1, 2), (2, 1), (2, 3)])
        coin = scripted_rng(1, 0)
        sighting = nearest_food(grid, 2, 2, 2, coin)  # type: ignore[arg-type]
        assert sighting == FoodSighting(row=2, col=1, distance=1)
        assert coin.calls == [(0, 2), (0, 2)]  # type: ignore[attr-defined]

    def test_zero_sight_sees_only_own_cell(
        self,
        make_grid: Callable[..., FoodGrid],
        rng: Generator,
    ) -> None:
        grid = make_grid(3, 3, food=[(1, 2)])
        assert nearest_food(grid, 1, 1, 0, rng) is None
        grid = make_grid(3, 3, food=[(1, 1), (1, 2)])
        assert nearest_food(grid, 1, 1, 0, rng) == FoodSighting(1, 1, 0)


class TestBestDirection:
    """Tests for choosing the single move toward food."""

    @pytest.mark.parametrize(
        ("food", "expected"),
        [
            ((0, 4), Direction.UP),
            ((8, 4), Direction.DOWN),
            ((4, 0), Direction.LEFT),
            ((4, 8), Direction.RIGHT),
            ((1, 3), Direction.UP),  # column gap strictly smaller
            ((7, 5), Direction.DOWN),
            ((3, 1), Direction.LEFT),  # row gap smaller
            ((5, 7), Direction.RIGHT),
            ((2, 2), Direction.LEFT),  # equal gaps go horizontal
            ((6, 6), Direction.RIGHT),
        ],
    )
    def test_direction(self, food: tuple[int, int], expected: Direction) -> None:
        row, col = food
        sighting = FoodSighting(row=row, col=col, distance=0)
        assert best_direction(4, 4, sighting) is expected

    def test_food_underfoot_has_no_direction(self) -> None:
        assert best_direction(4, 4, FoodSighting(row=4, col=4, distance=0)) is None


class TestWeightedChoice:
    """Tests for cumulative-weight selection."""

    def test_walks_in_order(self, scripted_rng: Callable[..., object]) -> None:
        scored = [("a", 10), ("b", 0), ("c", 5)]
        picks = [
            weighted_choice(scored, scripted_rng(draw))  # type: ignore[arg-type]
            for draw in (0, 9, 10, 14)
        ]
        assert picks == ["a", "a", "c", "c"]

    def test_draw_range_is_total(self, scripted_rng: Callable[..., object]) -> None:
        rng = scripted_rng(0)
        weighted_choice([("a", 3), ("b", 4)], rng)  # type: ignore[arg-type]
        assert rng.calls == [(0, 7)]  # type: ignore[attr-defined]

    def test_empty_raises(self, rng: Generator) -> None:
        with pytest.raises(ValueError):
            weighted_choice([], rng)

    def test_zero_total_raises(self, rng: Generator) -> None:
        with pytest.raises(ValueError):
            weighted_choice([("a", 0), ("b", 0)], rng)

    def test_equal_weights_are_uniform(self, rng: Generator) -> None:
        trials = 50_000
        scored = [(direction, 10) for direction in Direction]
        counts = Counter(weighted_choice(scored, rng) for _ in range(trials))
        for direction in Direction:
            assert counts[direction] / trials == pytest.approx(0.2, abs=0.01)

    def test_weights_are_proportional(self, rng: Generator) -> None:
        trials = 40_000
        counts = Counter(
            weighted_choice([("x", 30), ("y", 10)], rng) for _ in range(trials)
        )
        assert counts["x"] / trials == pytest.approx(0.75, abs=0.015)
