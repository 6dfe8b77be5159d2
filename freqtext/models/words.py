"""Word-level text generation from independent frequency-weighted draws."""

import logging
import math
from pathlib import Path
from typing import Dict, Iterable, Optional, Sequence, Tuple, Union

from freqtext.data.frequencies import WordRecord, read_word_file
from freqtext.models.sampler import RandomSource, WeightedSampler, make_random_source


logger = logging.getLogger(__name__)

SEPARATOR = ' '


def parse_frequency(text: str) -> float:
    """Parse a frequency column, accepting a decimal comma.

    Unparsable and non-finite values count as 0.
    """
    try:
        value = float(text.strip().replace(',', '.'))
    except ValueError:
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


def aggregate_weights(
    records: Iterable[Union[WordRecord, Tuple[str, Sequence[str]]]],
) -> Dict[str, int]:
    """Sum each record's columns, round, and accumulate per word.

    Records whose rounded weight is not positive are dropped.
    """
    weights: Dict[str, int] = {}
    for word, columns in records:
        weight = round(sum(parse_frequency(c) for c in columns))
        if weight > 0:
            weights[word] = weights.get(word, 0) + weight
    return weights


class WordFrequencyTextGenerator:
    """Zeroth-order word model: every word is drawn independently."""

    def __init__(
        self,
        records: Iterable[Union[WordRecord, Tuple[str, Sequence[str]]]],
        random: Optional[RandomSource] = None,
    ):
        """
        Args:
            records: (word, frequency columns) records
            random: Source of uniform draws

        Raises:
            EmptyDistributionError: if no word has a positive rounded weight
        """
        self.random = random if random is not None else make_random_source()
        self._weights = aggregate_weights(records)
        self.sampler = WeightedSampler(self._weights.items(), self.random)
        logger.info(f"Built word table: {len(self.sampler)} words")

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        random: Optional[RandomSource] = None,
        encoding: str = 'utf-8-sig',
    ) -> 'WordFrequencyTextGenerator':
        """Build a generator from a tab-separated word frequency file."""
        return cls(read_word_file(path, encoding=encoding), random)

    @property
    def word_weights(self) -> Dict[str, int]:
        return dict(self._weights)

    def generate(self, count: int) -> str:
        """Generate ``count`` space-separated words (empty for count <= 0)."""
        if count <= 0:
            return ''
        return SEPARATOR.join(self.sampler.sample(count))
