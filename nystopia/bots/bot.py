"""Bot -- a foraging agent with an energy budget.

Each tick a living bot runs the same loop:

- **Score**: rate the five moves (stay, up, down, left, right).  A
  well-fed bot rates them all the same and random-walks.  A hungry bot
  looks for the nearest food in sight and boosts the one move that
  closes in on it, more strongly the closer the food is.  Standing on
  food boosts staying put.
- **Select**: draw one move at random, weighted by the scores, and take
  it.  Moves past the grid edge leave that axis unchanged.
- **Eat**: a hungry bot eats whatever is under it after moving.
- **Burn**: one unit of energy is spent, and the state is re-derived
  from what is left.  A bot at zero energy is dead for good.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from nystopia.bots.sensing import Direction, FoodSighting, best_direction, nearest_food
from nystopia.bots.selection import weighted_choice
from nystopia.bots.traits import Traits

if TYPE_CHECKING:
    from numpy.random import Generator

    from nystopia.world.food_grid import FoodGrid

# -- Constants ---------------------------------------------------------------

MAX_ENERGY = 255
_METABOLIC_COST = 1


class BotState(Enum):
    """Behavioural state, derived from energy after every tick."""

    WANDERING = auto()
    FORAGING = auto()
    DEAD = auto()


@dataclass
class Bot:
    """A single foraging bot.

    Energy and state are read-only from outside: they only change
    through ``step``.

    Attributes:
        label: Single-character name shown by the renderer.
        row: Current row on the grid.
        col: Current column on the grid.
        traits: Decision parameters.
        initial_energy: Starting energy, clamped to ``[0, MAX_ENERGY]``.
    """

    label: str
    row: int
    col: int
    traits: Traits = field(default_factory=Traits)
    initial_energy: InitVar[int] = 100
    _energy: int = field(init=False, repr=False)
    _state: BotState = field(init=False, repr=False)

    def __post_init__(self, initial_energy: int) -> None:
        """Clamp starting energy and derive the initial state."""
        self._energy = min(MAX_ENERGY, max(0, int(initial_energy)))
        self._state = BotState.DEAD if self._energy == 0 else self._hunger_state()

    @property
    def energy(self) -> int:
        """Current energy (0-255)."""
        return self._energy

    @property
    def state(self) -> BotState:
        """Current behavioural state."""
        return self._state

    @property
    def is_alive(self) -> bool:
        return self._state is not BotState.DEAD

    @property
    def is_hungry(self) -> bool:
        """Return True while the bot forages and eats."""
        return self._state is BotState.FORAGING

    @classmethod
    def spawn(
        cls,
        label: str,
        grid: FoodGrid,
        traits: Traits,
        rng: Generator,
        energy_range: tuple[int, int] = (80, 120),
    ) -> Bot:
        """Create a bot at a random position with random starting energy.

        Args:
            label: Display label.
            grid: Grid the bot will live on (for bounds).
            traits: Shared decision parameters.
            rng: Seeded random generator.
            energy_range: Inclusive ``(low, high)`` starting energy.

        Returns:
            A new living or, if drawn at zero energy, dead Bot.
        """
        lo, hi = energy_range
        return cls(
            label=label,
            row=int(rng.integers(0, grid.height)),
            col=int(rng.integers(0, grid.width)),
            traits=traits,
            initial_energy=int(rng.integers(lo, hi + 1)),
        )

    def step(self, grid: FoodGrid, rng: Generator) -> Direction | None:
        """Run one tick: score, select, move, eat, burn energy.

        Args:
            grid: Shared food grid, already advanced for this tick.
            rng: Random source for tie-breaks and the weighted draw.

        Returns:
            The move taken, or None if the bot is dead.
        """
        if self._state is BotState.DEAD:
            return None

        hungry = self.is_hungry
        direction = weighted_choice(self.score_moves(grid, rng), rng)
        self._move(direction, grid)

        if hungry and grid.consume(self.row, self.col):
            self._energy = min(MAX_ENERGY, self._energy + self.traits.meal_energy)

        self._energy = max(0, self._energy - _METABOLIC_COST)
        self._state = BotState.DEAD if self._energy == 0 else self._hunger_state()
        return direction

    def score_moves(
        self,
        grid: FoodGrid,
        rng: Generator,
    ) -> list[tuple[Direction, int]]:
        """Return the ordered ``(direction, score)`` pairs for this tick.

        A bot that is not hungry scores every move at ``base_move_score``.
        A hungry bot searches for food once and scores every move against
        that single sighting.
        """
        base = self.traits.base_move_score
        if not self.is_hungry:
            return [(direction, base) for direction in Direction]

        sighting = nearest_food(grid, self.row, self.col, self.traits.sight, rng)
        return [
            (direction, self._score(direction, grid, sighting))
            for direction in Direction
        ]

    # -- Private behaviour methods --

    def _score(
        self,
        direction: Direction,
        grid: FoodGrid,
        sighting: FoodSighting | None,
    ) -> int:
        """Score one move for a hungry bot."""
        traits = self.traits
        if direction is Direction.STAY:
            if grid.has_food(self.row, self.col):
                return traits.food_sighted_score
            return traits.base_move_score

        if sighting is None:
            return traits.base_move_score
        if direction is not best_direction(self.row, self.col, sighting):
            return traits.base_move_score

        # Linear falloff from full reward underfoot to none at the sight edge;
        # sight is > 0 here because a direction was preferred
        closeness = traits.food_sighted_score * (traits.sight - sighting.distance)
        return int(closeness / traits.sight + 0.5) + traits.base_move_score

    def _move(self, direction: Direction, grid: FoodGrid) -> None:
        """Shift by ``direction``, staying inside the grid."""
        self.row = min(grid.height - 1, max(0, self.row + direction.d_row))
        self.col = min(grid.width - 1, max(0, self.col + direction.d_col))

    def _hunger_state(self) -> BotState:
        if self._energy < self.traits.hunger_threshold:
            return BotState.FORAGING
        return BotState.WANDERING
