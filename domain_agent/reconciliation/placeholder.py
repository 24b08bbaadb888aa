"""Placeholder verdicts for degraded mode."""

import random
from typing import Protocol, runtime_checkable


@runtime_checkable
class PlaceholderPolicy(Protocol):
    """Supplies stand-in availability and score when verification is down."""

    def placeholder(self, domain: str) -> tuple[bool, int]:
        """Return (available, score) for one domain."""
        ...


class RandomPlaceholderPolicy:
    """Random availability and an integer score in [score_min, score_max).

    The values carry no information; they only keep one row per candidate
    on screen. Pass `seed` for reproducible output.
    """

    def __init__(
        self,
        score_min: int = 0,
        score_max: int = 100,
        seed: int | None = None,
    ) -> None:
        if score_max <= score_min:
            raise ValueError("score_max must be greater than score_min")
        self.score_min = score_min
        self.score_max = score_max
        self._rng = random.Random(seed)

    def placeholder(self, domain: str) -> tuple[bool, int]:  # noqa: ARG002
        available = self._rng.random() > 0.5
        return available, self._rng.randrange(self.score_min, self.score_max)
