import random
import logging
from typing import List, Optional, Sequence

from .config import POOL_SIZE
from .models import WordEntry

logger = logging.getLogger(__name__)


class WordSampler:
    """Draws a uniform random subset of distinct entries from a pool."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def sample(self, pool: Sequence[WordEntry], count: int = POOL_SIZE) -> List[WordEntry]:
        if not pool:
            return []
        count = max(0, min(count, len(pool)))
        indices = self.rng.sample(range(len(pool)), count)
        logger.debug(f"Sampled {count} of {len(pool)} words")
        return [pool[i] for i in indices]

    def choose(self, pool: Sequence[WordEntry]) -> Optional[WordEntry]:
        """Pick one entry uniformly at random, or None for an empty pool."""
        if not pool:
            return None
        return pool[self.rng.randrange(len(pool))]
