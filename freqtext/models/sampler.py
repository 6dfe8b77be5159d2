"""Weighted discrete sampling shared by the text generators."""

from typing import Dict, Generic, Iterable, List, Optional, Protocol, Tuple, TypeVar

import torch

T = TypeVar('T')


class EmptyDistributionError(ValueError):
    """Raised when a distribution has no item with a positive weight."""


class RandomSource(Protocol):
    """Anything that returns uniform floats in [0, 1)."""

    def uniform(self) -> float:
        ...


class TorchRandomSource:
    """Uniform random numbers drawn from a private torch generator."""

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: Seed for reproducible draws (default: non-deterministic)
        """
        self.generator = torch.Generator()
        if seed is None:
            self.generator.seed()
        else:
            self.generator.manual_seed(seed)

    def uniform(self) -> float:
        return torch.rand(1, generator=self.generator, dtype=torch.float64).item()


def make_random_source(seed: Optional[int] = None) -> RandomSource:
    """Create the default random source, optionally seeded."""
    return TorchRandomSource(seed)


class WeightedSampler(Generic[T]):
    """Draws values with probability proportional to their weight.

    The cumulative table is kept in input order and never re-sorted, so a
    given sequence of uniform draws always maps to the same values.
    """

    def __init__(
        self,
        items: Iterable[Tuple[T, float]],
        random: Optional[RandomSource] = None,
    ):
        """
        Args:
            items: (value, weight) pairs; pairs with weight <= 0 are dropped
            random: Source of uniform draws (default: unseeded torch source)

        Raises:
            EmptyDistributionError: if no pair has a positive weight
        """
        self.random = random if random is not None else make_random_source()

        filtered = [(value, weight) for value, weight in items if weight > 0]
        if not filtered:
            raise EmptyDistributionError(
                'WeightedSampler: no items with a positive weight'
            )

        total = sum(weight for _, weight in filtered)
        table: List[Tuple[T, float]] = []
        cumulative = 0
        for value, weight in filtered:
            cumulative += weight
            table.append((value, cumulative / total))
        self._table = tuple(table)
        self._weights = tuple(weight / total for _, weight in filtered)

    def __len__(self) -> int:
        return len(self._table)

    @property
    def values(self) -> Tuple[T, ...]:
        return tuple(value for value, _ in self._table)

    @property
    def cumulative(self) -> Tuple[Tuple[T, float], ...]:
        """The (value, cumulative probability) table, last entry 1.0."""
        return self._table

    @property
    def probabilities(self) -> Dict[T, float]:
        """Probability of each distinct value (repeated values are summed)."""
        probs: Dict[T, float] = {}
        for (value, _), p in zip(self._table, self._weights):
            probs[value] = probs.get(value, 0.0) + p
        return probs

    def next(self) -> T:
        """Draw one value, consuming exactly one uniform number."""
        u = self.random.uniform()
        for value, cumulative in self._table:
            if cumulative >= u:
                return value
        # rounding left u above every entry
        return self._table[-1][0]

    def sample(self, count: int) -> List[T]:
        """Draw ``count`` independent values."""
        return [self.next() for _ in range(max(0, count))]
