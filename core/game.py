"""Pick game: one prompt, three options, adaptive scheduling."""

import logging
import random

from .config import DISTRACTOR_COUNT
from .interfaces import StatsSink
from .mode import Mode, SmartReverseMode
from .selector import AdaptiveSelector, EmptyPoolError
from .stats import SessionStats
from .utils import unique_in_order, shuffled

logger = logging.getLogger(__name__)


class PickRound:
    """A single pick question."""

    def __init__(self, key: str, prompt: str, answer: str, options: list[str],
                 mode: Mode, accepted: set[str]):
        self.key = key  # Scheduler key: kana in forward mode, romaji in reverse
        self.prompt = prompt
        self.answer = answer
        self.options = options
        self.mode = mode
        self.accepted = accepted  # Every value that counts as correct
        self.wrong_selected = []

    def is_correct(self, choice: str) -> bool:
        return choice in self.accepted

    def to_dict(self) -> dict:
        # No answer here; clients only see it in the feedback
        return {
            'key': self.key,
            'prompt': self.prompt,
            'options': list(self.options),
            'mode': self.mode.value,
            'wrong_selected': list(self.wrong_selected)
        }


class PickSession:
    """Drill loop over a fixed set of (kana, romaji) pairs.

    The selector, mode machine and stats sink are owned by the caller and
    passed in; anything not given is created fresh for this session.
    """

    def __init__(self, pairs: list[tuple[str, str]], selector: AdaptiveSelector = None,
                 mode: SmartReverseMode = None, stats: StatsSink = None,
                 rng: random.Random = None):
        if not pairs:
            raise EmptyPoolError("No characters selected for this session")
        self.rng = rng or random.Random()
        self.selector = selector or AdaptiveSelector(self.rng)
        self.mode = mode or SmartReverseMode(self.rng)
        self.stats = stats or SessionStats()

        self.kana_pool = unique_in_order([kana for kana, _ in pairs])
        self.romaji_pool = unique_in_order([romaji for _, romaji in pairs])
        self.kana_to_romaji = {}
        self.romaji_to_kana = {}
        for kana, romaji in pairs:
            self.kana_to_romaji.setdefault(kana, romaji)
            self.romaji_to_kana.setdefault(romaji, [])
            if kana not in self.romaji_to_kana[romaji]:
                self.romaji_to_kana[romaji].append(kana)

        self.current_round = self._next_round()

    def pool_for(self, mode: Mode) -> list[str]:
        """Scheduler keys used in a given mode."""
        return self.romaji_pool if mode == Mode.REVERSE else self.kana_pool

    def _next_round(self, exclude: set[str] = frozenset()) -> PickRound:
        pool = self.pool_for(self.mode.mode)
        # Fall back to the full pool when every key is excluded
        candidates = [key for key in pool if key not in exclude] or pool
        key = self.selector.select_weighted_character(candidates)
        self.selector.mark_character_seen(key)
        return self.build_round(key)

    def keys_for(self, current: PickRound, mode: Mode) -> set[str]:
        """Keys of the character asked in current, expressed in mode's key space."""
        if mode == current.mode:
            return {current.key}
        if mode == Mode.FORWARD:
            # Every kana sharing the label, not just the one offered
            return set(self.romaji_to_kana[current.key])
        return {current.answer}

    def build_round(self, key: str) -> PickRound:
        """Build the question for a scheduler key in the current mode."""
        mode = self.mode.mode
        if mode == Mode.REVERSE:
            accepted = set(self.romaji_to_kana[key])
            answer = self.rng.choice(self.romaji_to_kana[key])
            candidates = [kana for kana in self.kana_pool if kana not in accepted]
        else:
            answer = self.kana_to_romaji[key]
            accepted = {answer}
            candidates = [romaji for romaji in self.romaji_pool if romaji != answer]

        distractors = self.rng.sample(candidates, min(DISTRACTOR_COUNT, len(candidates)))
        options = shuffled([answer] + distractors, self.rng)
        logger.debug(f"New {mode.value} round: {key!r} with options {options}")
        return PickRound(key, key, answer, options, mode, accepted)

    def submit_answer(self, choice: str, answer_seconds: float = None) -> dict:
        """Check a choice against the current round and schedule what comes next.

        A correct answer moves on to a new round, a wrong one keeps the
        question and disables the chosen option.
        Raises ValueError for a choice that is not a selectable option.
        """
        current = self.current_round
        if choice not in current.options:
            raise ValueError(f"{choice!r} is not one of the options")
        if choice in current.wrong_selected:
            raise ValueError(f"{choice!r} was already tried")

        if current.is_correct(choice):
            feedback = f"{current.prompt} = {current.answer}"
            self.stats.record_correct(current.key, answer_seconds)
            self.selector.update_character_weight(current.key, True)
            next_mode = self.mode.decide_next_mode()
            self.current_round = self._next_round(self.keys_for(current, next_mode))
            correct = True
        else:
            feedback = f"{current.prompt} ≠ {choice}"
            self.stats.record_wrong(current.key)
            self.selector.update_character_weight(current.key, False)
            self.mode.record_wrong_answer()
            current.wrong_selected.append(choice)
            correct = False

        return {
            'correct': correct,
            'feedback': feedback,
            'score': self.stats.to_dict()['score'],
            'mode': self.mode.mode.value,
            'round': self.current_round.to_dict()
        }

    def to_dict(self) -> dict:
        return {
            'round': self.current_round.to_dict(),
            'mode': self.mode.to_dict(),
            'stats': self.stats.to_dict()
        }
