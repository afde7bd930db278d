"""Configuration constants for kanadrill."""

# Weighted selection
DEFAULT_WEIGHT = 1.0          # Weight of an item that has never been updated
CORRECT_WEIGHT_FACTOR = 0.7   # Multiplier applied after a correct answer
WRONG_WEIGHT_FACTOR = 1.5     # Multiplier applied after a wrong answer
MIN_WEIGHT = 0.1              # Floor, mastered items stay selectable
MAX_WEIGHT = 20.0             # Cap, 20x the default weight

# Mode switching (forward <-> reverse)
MODE_SWITCH_MIN_STREAK = 3          # Correct answers in a row before a switch is possible
MODE_SWITCH_BASE_PROBABILITY = 0.3  # Switch chance once the streak reaches the minimum
MODE_SWITCH_PROBABILITY_STEP = 0.15 # Added per extra correct answer beyond the minimum
MODE_SWITCH_MAX_PROBABILITY = 0.9   # Never fully predictable

# Pick game
DISTRACTOR_COUNT = 2          # Incorrect options shown next to the correct one
