from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, List, Optional, Union

logger = logging.getLogger(__name__)


@dataclass
class RandomSource:
    """
    A thin wrapper around random.Random to:
    - give each maze its own random stream
    - support optional deterministic seeding so equal seeds reproduce equal mazes
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.seed is not None:
            self._rng = random.Random(self.seed)
            logger.debug("Initialized RandomSource with deterministic seed=%s", self.seed)
        else:
            self._rng = random.Random()
            logger.debug("Initialized RandomSource with non-deterministic seed")

    def randrange(self, stop: int) -> int:
        if stop < 1:
            raise ValueError(f"RandomSource.randrange() requires stop >= 1, got {stop}")
        return self._rng.randrange(stop)

    def shuffle(self, items: List[Any]) -> None:
        """Uniformly permute `items` in place."""
        self._rng.shuffle(items)


RandomLike = Union[RandomSource, random.Random, int, None]


def as_random_source(rng: RandomLike) -> Union[RandomSource, random.Random]:
    """Accept a seed, an existing random stream, or None for a fresh unseeded source."""
    if rng is None or (isinstance(rng, int) and not isinstance(rng, bool)):
        return RandomSource(rng)
    if isinstance(rng, (RandomSource, random.Random)):
        return rng
    raise TypeError("Unsupported random source type: %r" % (type(rng),))


__all__ = ["RandomSource", "RandomLike", "as_random_source"]
