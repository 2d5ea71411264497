"""Config — load simulation parameters from YAML files.

Grid size, population, bot decision weights and timing all live in YAML
and are parsed into a typed dataclass here.  Command-line flags are
layered on top with ``with_overrides``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from nystopia.bots.traits import Traits


@dataclass(frozen=True)
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        seed: RNG seed; None draws fresh entropy every run.
        width: Number of grid columns.
        height: Number of grid rows.
        bots: Number of bots to create.
        tick_delay_ms: Real-time delay between ticks when rendering.
        sight: How many tiles away a bot can see food.
        regrow_time: Ticks an eaten food tile takes to grow back.
        food_prob: Chance, in percent, that a tile grows food.
        hunger_threshold: Energy below which bots forage.
        base_move_score: Default weight of every move.
        food_sighted_score: Extra weight toward sighted food.
        meal_energy: Energy gained per meal.
        initial_energy: Inclusive ``(low, high)`` range of starting energy.
    """

    seed: int | None = None
    width: int = 80
    height: int = 40
    bots: int = 10
    tick_delay_ms: int = 250

    # Food
    sight: int = 10
    regrow_time: int = 100
    food_prob: float = 5.0

    # Bot decisions
    hunger_threshold: int = 80
    base_move_score: int = 10
    food_sighted_score: int = 100
    meal_energy: int = 20
    initial_energy: tuple[int, int] = (80, 120)

    def __post_init__(self) -> None:
        """Validate values that would leave the simulation unrunnable."""
        if self.width <= 0 or self.height <= 0:
            msg = f"grid must be at least 1x1, got {self.width}x{self.height}"
            raise ValueError(msg)
        if self.bots < 0:
            msg = f"bots must not be negative, got {self.bots}"
            raise ValueError(msg)
        if self.tick_delay_ms <= 0:
            msg = f"tick_delay_ms must be positive, got {self.tick_delay_ms}"
            raise ValueError(msg)
        lo, hi = self.initial_energy
        if lo > hi:
            msg = f"initial_energy range is inverted: ({lo}, {hi})"
            raise ValueError(msg)
        # Traits validate the decision parameters
        self.traits()

    @property
    def ticks_per_second(self) -> float:
        return 1000.0 / self.tick_delay_ms

    def traits(self) -> Traits:
        """Build the decision parameters shared by every bot."""
        return Traits(
            sight=self.sight,
            hunger_threshold=self.hunger_threshold,
            base_move_score=self.base_move_score,
            food_sighted_score=self.food_sighted_score,
            meal_energy=self.meal_energy,
        )

    def with_overrides(self, **overrides: Any) -> SimulationConfig:
        """Return a copy with every non-None override applied.

        Raises:
            TypeError: If an override names an unknown field.
        """
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Keys missing from the file keep their defaults; unknown keys are
        ignored.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If a value is out of range.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        known = {item.name for item in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        if "initial_energy" in values:
            values["initial_energy"] = tuple(values["initial_energy"])
        return cls(**values)
