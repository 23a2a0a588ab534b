"""
Letter scrambling driven by a difficulty profile.

Easy words keep their first and last letters and get a handful of swaps in
the middle; harder profiles get repeated full shuffles and extra swaps on
top. Whatever the profile, a word longer than one letter never comes back
unchanged unless all of its letters are identical.
"""

import math
import random
import logging
from typing import List, Optional

from .config import DifficultyProfile

logger = logging.getLogger(__name__)

EXTRA_SWAP_RATIO = 0.7

_rng = random.Random()


def _swap(letters: List[str], i: int, j: int) -> None:
    letters[i], letters[j] = letters[j], letters[i]


def _swap_middle(letters: List[str], swaps: int, rng: random.Random) -> None:
    last = len(letters) - 2
    for _ in range(swaps):
        _swap(letters, rng.randint(1, last), rng.randint(1, last))


def _shuffle_passes(letters: List[str], passes: int, rng: random.Random) -> None:
    # random.shuffle is a Fisher-Yates shuffle
    for _ in range(passes):
        rng.shuffle(letters)


def _extra_swaps(letters: List[str], rng: random.Random) -> None:
    n = len(letters)
    for _ in range(math.floor(n * EXTRA_SWAP_RATIO)):
        _swap(letters, rng.randrange(n), rng.randrange(n))


def _force_swap(letters: List[str], rng: random.Random, keep_ends: bool) -> bool:
    """Swap two differing letters in place. Returns False if no such pair exists."""
    n = len(letters)
    positions = range(1, n - 1) if keep_ends else range(n)
    pairs = [(i, j) for i in positions for j in positions if i < j and letters[i] != letters[j]]
    if not pairs and keep_ends:
        pairs = [(i, j) for i in range(n) for j in range(i + 1, n) if letters[i] != letters[j]]
    if not pairs:
        return False
    i, j = pairs[rng.randrange(len(pairs))]
    _swap(letters, i, j)
    return True


def scramble(word: str, profile: DifficultyProfile, rng: Optional[random.Random] = None) -> List[str]:
    """Return a permutation of ``word``'s letters according to ``profile``."""
    rng = rng or _rng
    original = list(word)
    letters = list(word)
    n = len(letters)
    if n <= 1:
        return letters

    keep_ends = profile.preserve_first_last and n > 3
    if keep_ends:
        _swap_middle(letters, math.ceil((n - 2) * profile.scramble_complexity), rng)
    else:
        _shuffle_passes(letters, math.ceil(n * profile.scramble_complexity), rng)

    if profile.extra_scrambling:
        _extra_swaps(letters, rng)

    if letters == original:
        if not _force_swap(letters, rng, keep_ends):
            logger.debug(f"'{word}' has no two differing letters; returning it unscrambled")

    return letters
