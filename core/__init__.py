from .selector import AdaptiveSelector, CharacterWeight, EmptyPoolError
from .mode import Mode, SmartReverseMode
from .game import PickRound, PickSession
from .interfaces import StatsSink
from .stats import SessionStats
from .kana import KANA_GROUPS, get_all_groups, get_group_pairs
from .utils import unique_in_order, shuffled
from .config import (
    DEFAULT_WEIGHT, CORRECT_WEIGHT_FACTOR, WRONG_WEIGHT_FACTOR,
    MIN_WEIGHT, MAX_WEIGHT,
    MODE_SWITCH_MIN_STREAK, MODE_SWITCH_BASE_PROBABILITY,
    MODE_SWITCH_PROBABILITY_STEP, MODE_SWITCH_MAX_PROBABILITY,
    DISTRACTOR_COUNT
)

__all__ = [
    'AdaptiveSelector', 'CharacterWeight', 'EmptyPoolError',
    'Mode', 'SmartReverseMode',
    'PickRound', 'PickSession',
    'StatsSink', 'SessionStats',
    'KANA_GROUPS', 'get_all_groups', 'get_group_pairs',
    'unique_in_order', 'shuffled',
    'DEFAULT_WEIGHT', 'CORRECT_WEIGHT_FACTOR', 'WRONG_WEIGHT_FACTOR',
    'MIN_WEIGHT', 'MAX_WEIGHT',
    'MODE_SWITCH_MIN_STREAK', 'MODE_SWITCH_BASE_PROBABILITY',
    'MODE_SWITCH_PROBABILITY_STEP', 'MODE_SWITCH_MAX_PROBABILITY',
    'DISTRACTOR_COUNT'
]
