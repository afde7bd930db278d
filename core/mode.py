"""Smart reverse mode: decides the quiz direction of the next question."""

import logging
import random
from enum import Enum

from .config import (
    MODE_SWITCH_MIN_STREAK, MODE_SWITCH_BASE_PROBABILITY,
    MODE_SWITCH_PROBABILITY_STEP, MODE_SWITCH_MAX_PROBABILITY
)

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    FORWARD = 'forward'  # character -> label
    REVERSE = 'reverse'  # label -> character


class SmartReverseMode:
    """Per-session state machine switching between forward and reverse quizzing.

    A streak of correct answers makes a switch more and more likely, but the
    switch itself is random so the learner cannot predict the direction.
    A wrong answer only resets the streak: the current question keeps its
    direction.
    """

    def __init__(self, rng: random.Random = None, initial_mode: Mode = Mode.FORWARD):
        self.rng = rng or random.Random()
        self.initial_mode = Mode(initial_mode)
        self.mode = self.initial_mode
        self.consecutive_correct = 0

    @property
    def is_reverse(self) -> bool:
        return self.mode == Mode.REVERSE

    def switch_probability(self) -> float:
        """Chance of switching for the current streak."""
        if self.consecutive_correct < MODE_SWITCH_MIN_STREAK:
            return 0.0
        extra = self.consecutive_correct - MODE_SWITCH_MIN_STREAK
        return min(MODE_SWITCH_BASE_PROBABILITY + extra * MODE_SWITCH_PROBABILITY_STEP,
                   MODE_SWITCH_MAX_PROBABILITY)

    def decide_next_mode(self) -> Mode:
        """Call after a correct answer. Returns the mode of the next question."""
        self.consecutive_correct += 1
        probability = self.switch_probability()
        if probability > 0 and self.rng.random() < probability:
            self.mode = Mode.REVERSE if self.mode == Mode.FORWARD else Mode.FORWARD
            logger.debug(f"Switching to {self.mode.value} after {self.consecutive_correct} correct")
            self.consecutive_correct = 0
        return self.mode

    def record_wrong_answer(self) -> None:
        """Call after a wrong answer. Resets the streak, never the mode."""
        self.consecutive_correct = 0

    def reset(self) -> None:
        self.mode = self.initial_mode
        self.consecutive_correct = 0

    def to_dict(self) -> dict:
        return {
            'mode': self.mode.value,
            'consecutive_correct': self.consecutive_correct
        }
