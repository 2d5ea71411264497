"""Traits — fixed decision parameters shared by a population of bots.

Traits are supplied once at construction time and never change while a
bot is alive.  They control how far a bot sees, when it gets hungry, and
how strongly food pulls on its otherwise random walk.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Traits:
    """Decision parameters for a bot.

    Attributes:
        sight: Radius, in tiles, within which a bot notices food.
        hunger_threshold: Energy below which the bot forages and eats.
        base_move_score: Weight every move gets by default.  Must be
            positive so a move can always be drawn.
        food_sighted_score: Extra weight for the move that closes in on
            the nearest food.  Must be positive.
        meal_energy: Energy gained per successful meal.
    """

    sight: int = 10
    hunger_threshold: int = 80
    base_move_score: int = 10
    food_sighted_score: int = 100
    meal_energy: int = 20

    def __post_init__(self) -> None:
        """Reject parameter sets the decision engine cannot work with."""
        if self.base_move_score <= 0:
            msg = f"base_move_score must be positive, got {self.base_move_score}"
            raise ValueError(msg)
        if self.sight < 0:
            msg = f"sight must not be negative, got {self.sight}"
            raise ValueError(msg)
        if self.food_sighted_score <= 0:
            msg = f"food_sighted_score must be positive, got {self.food_sighted_score}"
            raise ValueError(msg)
        if self.meal_energy < 0:
            msg = f"meal_energy must not be negative, got {self.meal_energy}"
            raise ValueError(msg)
