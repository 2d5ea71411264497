"""SimulationEngine — the main tick loop.

Owns the food grid, the bots and the random generator, and advances them
in the canonical tick order:

1. Regrow food on the grid
2. Step every bot once, in a fixed order, against the shared grid

Regrowth must finish before any bot senses or eats, so bots never see a
tile that should already have grown back.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field

import numpy as np
from numpy.random import Generator

from nystopia.bots.bot import Bot, BotState
from nystopia.bots.labels import label_for
from nystopia.simulation.config import SimulationConfig
from nystopia.world.food_grid import FoodGrid

logger = logging.getLogger(__name__)


@dataclass
class SimulationEngine:
    """Drives the simulation forward tick by tick.

    Attributes:
        config: Loaded simulation configuration.
        grid: The shared food grid.
        bots: All bots, in the order they act each tick.
        rng: Master random generator.
        tick: Current tick count.
    """

    config: SimulationConfig
    grid: FoodGrid = field(init=False)
    bots: list[Bot] = field(init=False, default_factory=list)
    rng: Generator = field(init=False)
    tick: int = 0

    def __post_init__(self) -> None:
        """Build the grid and spawn the starting population."""
        self.rng = np.random.default_rng(self.config.seed)
        self.grid = FoodGrid.create(
            width=self.config.width,
            height=self.config.height,
            food_probability=self.config.food_prob,
            regrowth_ticks=self.config.regrow_time,
            rng=self.rng,
        )
        traits = self.config.traits()
        for index in range(self.config.bots):
            self.bots.append(
                Bot.spawn(
                    label_for(index),
                    self.grid,
                    traits,
                    self.rng,
                    energy_range=self.config.initial_energy,
                ),
            )
        logger.info(
            "created %dx%d grid with %d food tiles and %d bots",
            self.grid.width,
            self.grid.height,
            self.grid.food_count(),
            len(self.bots),
        )

    @property
    def all_dead(self) -> bool:
        """Return True once no bot is left alive."""
        return not any(bot.is_alive for bot in self.bots)

    def step(self) -> None:
        """Advance the simulation by one tick."""
        self.grid.advance()

        for bot in self.bots:
            was_alive = bot.is_alive
            bot.step(self.grid, self.rng)
            if was_alive and not bot.is_alive:
                logger.info(
                    "bot %s died at (%d, %d) on tick %d",
                    bot.label,
                    bot.row,
                    bot.col,
                    self.tick,
                )

        self.tick += 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("tick %d: %s", self.tick, self._census_line())

    def run(self, ticks: int) -> None:
        """Run the simulation for a fixed number of ticks.

        Args:
            ticks: Number of ticks to advance.
        """
        for _ in range(ticks):
            self.step()

    def state_counts(self) -> dict[BotState, int]:
        """Return how many bots are in each state (every state listed)."""
        counts = Counter(bot.state for bot in self.bots)
        return {state: counts.get(state, 0) for state in BotState}

    def _census_line(self) -> str:
        counts = self.state_counts()
        parts = [f"{state.name.lower()}={n}" for state, n in counts.items()]
        parts.append(f"food={self.grid.food_count()}")
        return " ".join(parts)
