"""Weighted random choice over scored moves."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from numpy.random import Generator

T = TypeVar("T")


def weighted_choice(scored: Sequence[tuple[T, int]], rng: Generator) -> T:
    """Pick one option with probability proportional to its score.

    Draws an integer uniformly from ``[0, total)`` and walks the options
    in order, subtracting each score until the draw falls below the
    current one.

    Args:
        scored: Ordered ``(option, score)`` pairs; scores must be >= 0.
        rng: Random source.

    Returns:
        The selected option.

    Raises:
        ValueError: If there are no options or the scores sum to zero.
    """
    total = sum(score for _, score in scored)
    if total <= 0:
        msg = f"cannot choose from total weight {total}"
        raise ValueError(msg)

    draw = int(rng.integers(0, total))
    for option, score in scored:
        if draw < score:
            return option
        draw -= score
    # Unreachable while every score is non-negative
    msg = "negative score in weighted choice"
    raise ValueError(msg)
