"""Utility functions for kanadrill."""

import random


def unique_in_order(items: list) -> list:
    """Drop duplicates, keeping the first occurrence of each item."""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def shuffled(items: list, rng: random.Random) -> list:
    """Return a shuffled copy of items."""
    result = list(items)
    rng.shuffle(result)
    return result
