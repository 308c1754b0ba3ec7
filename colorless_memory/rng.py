"""Random number helpers."""

import random


def random_int(low, high):
    """Return a random integer in [low, high]; the bounds may be given in either order."""
    if low > high:
        low, high = high, low
    return random.randint(low, high)


def random_float(low, high):
    """Return a random float between low and high; the bounds may be given in either order."""
    if low > high:
        low, high = high, low
    return random.uniform(low, high)


def shuffle(items):
    """Shuffle a list in place."""
    random.shuffle(items)