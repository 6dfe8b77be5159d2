"""Character-level text generation from bigram frequencies."""

import logging
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple, Union

from freqtext.data.frequencies import BigramRecord, read_bigram_file
from freqtext.models.sampler import (
    EmptyDistributionError,
    RandomSource,
    WeightedSampler,
    make_random_source,
)


logger = logging.getLogger(__name__)


class BigramTextGenerator:
    """First-order Markov walk over characters.

    Each character after the first is drawn from the successors recorded for
    the current character. A character that never starts a bigram has no
    successors; the walk then draws again from the initial distribution.
    """

    def __init__(
        self,
        records: Iterable[Union[BigramRecord, Tuple[str, str, int]]],
        random: Optional[RandomSource] = None,
    ):
        """
        Args:
            records: (first, second, frequency) bigram records
            random: Source of uniform draws shared by every table

        Raises:
            EmptyDistributionError: if no record has a positive frequency
        """
        self.random = random if random is not None else make_random_source()

        initial_counts: Dict[str, int] = {}
        successors: Dict[str, List[Tuple[str, int]]] = {}
        for first, second, frequency in records:
            initial_counts[first] = initial_counts.get(first, 0) + frequency
            successors.setdefault(first, []).append((second, frequency))

        self._initial_counts = initial_counts
        self.initial = WeightedSampler(initial_counts.items(), self.random)

        self.transitions: Dict[str, WeightedSampler[str]] = {}
        for symbol, items in successors.items():
            try:
                self.transitions[symbol] = WeightedSampler(items, self.random)
            except EmptyDistributionError:
                # all successors weigh 0: leave it a dead end rather than fail the build
                logger.debug(f"No weighted successors for {symbol!r}")

        logger.info(
            f"Built bigram tables: {len(self.initial)} initial characters, "
            f"{len(self.transitions)} transition states"
        )

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        random: Optional[RandomSource] = None,
        encoding: str = 'utf-8-sig',
    ) -> 'BigramTextGenerator':
        """Build a generator from a tab-separated bigram frequency file."""
        return cls(read_bigram_file(path, encoding=encoding), random)

    @property
    def initial_weights(self) -> Dict[str, int]:
        """Summed frequency of every first character, in file order."""
        return dict(self._initial_counts)

    @property
    def states(self) -> FrozenSet[str]:
        return frozenset(self.transitions)

    def next_char(self, current: str) -> str:
        sampler = self.transitions.get(current)
        if sampler is None:
            return self.initial.next()
        return sampler.next()

    def generate(self, length: int) -> str:
        """Generate exactly ``length`` characters (empty for length <= 0)."""
        if length <= 0:
            return ''

        current = self.initial.next()
        chars = [current]
        for _ in range(1, length):
            current = self.next_char(current)
            chars.append(current)
        return ''.join(chars)
