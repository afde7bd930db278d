"""Adaptive weighted selection of drill characters."""

import logging
import random

from .config import (
    DEFAULT_WEIGHT, CORRECT_WEIGHT_FACTOR, WRONG_WEIGHT_FACTOR,
    MIN_WEIGHT, MAX_WEIGHT
)

logger = logging.getLogger(__name__)


class EmptyPoolError(Exception):
    """Raised when a character has to be selected from an empty pool."""


class CharacterWeight:
    """Sampling weight of a single drillable character."""

    def __init__(self, key: str, weight: float = DEFAULT_WEIGHT):
        self.key = key
        self.weight = weight
        self.seen = False

    def to_dict(self) -> dict:
        return {'weight': self.weight, 'seen': self.seen}


class AdaptiveSelector:
    """Picks characters with probability proportional to their weight.

    Wrong answers raise a character's weight and correct answers lower it,
    so the drill keeps coming back to the characters the learner struggles
    with. Weights are bounded by MIN_WEIGHT and MAX_WEIGHT.

    Not thread-safe: callers sharing a selector across threads must
    serialize access themselves.
    """

    def __init__(self, rng: random.Random = None):
        self.rng = rng or random.Random()
        self._weights: dict[str, CharacterWeight] = {}

    def get_weight(self, key: str) -> float:
        """Current weight of a character (DEFAULT_WEIGHT if never touched)."""
        entry = self._weights.get(key)
        return entry.weight if entry else DEFAULT_WEIGHT

    def is_seen(self, key: str) -> bool:
        entry = self._weights.get(key)
        return entry.seen if entry else False

    def _entry(self, key: str) -> CharacterWeight:
        if key not in self._weights:
            self._weights[key] = CharacterWeight(key)
        return self._weights[key]

    def select_weighted_character(self, pool: list[str], exclude: str = None) -> str:
        """Select one character from pool, weighted by its current weight.

        exclude is skipped unless it is the pool's only member.
        Raises EmptyPoolError for an empty pool.
        """
        if not pool:
            raise EmptyPoolError("Cannot select a character from an empty pool")
        if len(pool) == 1:
            return pool[0]

        candidates = [key for key in pool if key != exclude]
        if not candidates:
            # Pool only holds copies of the excluded key
            candidates = list(pool)

        weights = [self.get_weight(key) for key in candidates]
        total = sum(weights)
        draw = self.rng.random() * total

        cumulative = 0.0
        for key, weight in zip(candidates, weights):
            cumulative += weight
            if draw < cumulative:
                logger.debug(f"Selected {key!r} (weight {weight:.3f} of {total:.3f})")
                return key
        return candidates[-1]

    def mark_character_seen(self, key: str) -> None:
        """Register a character as presented. Idempotent."""
        self._entry(key).seen = True

    def update_character_weight(self, key: str, was_correct: bool) -> float:
        """Lower the weight after a correct answer, raise it after a wrong one.

        Returns the new weight.
        """
        entry = self._entry(key)
        old = entry.weight
        if was_correct:
            entry.weight = max(old * CORRECT_WEIGHT_FACTOR, MIN_WEIGHT)
        else:
            entry.weight = min(old * WRONG_WEIGHT_FACTOR, MAX_WEIGHT)
        logger.debug(f"Weight of {key!r}: {old:.3f} -> {entry.weight:.3f} (correct={was_correct})")
        return entry.weight

    def reset(self) -> None:
        """Forget all weights."""
        self._weights = {}

    def to_dict(self) -> dict:
        return {key: entry.to_dict() for key, entry in self._weights.items()}
