"""Expected vs actual frequency comparison for generated text."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Hashable, Iterable, List, Mapping, Union

from matplotlib.figure import Figure


logger = logging.getLogger(__name__)

BAR_WIDTH = 0.3
BAR_OFFSET = 0.35


@dataclass
class FrequencyComparison:
    """Relative frequencies of the top labels, expected and observed."""
    labels: List[str]
    expected: List[float] = field(default_factory=list)
    actual: List[float] = field(default_factory=list)
    title: str = ''


def compare_frequencies(
    weights: Mapping[Hashable, float],
    observed: Iterable[Hashable],
    top: int = 20,
    title: str = '',
) -> FrequencyComparison:
    """Compare source weights against what a generator actually produced.

    Args:
        weights: Source weight of every label
        observed: Generated labels (characters of a text, or its words)
        top: Number of heaviest labels to keep
        title: Chart title

    Returns:
        Expected shares are relative to the total weight of all labels,
        actual shares relative to the number of observed labels.
    """
    # sorted() is stable, so equal weights keep source order
    ranked = sorted(weights, key=lambda label: weights[label], reverse=True)[:max(0, top)]
    total_weight = sum(weights.values())

    counts = Counter(observed)
    total_observed = sum(counts.values())

    expected = [weights[label] / total_weight if total_weight else 0.0 for label in ranked]
    actual = [counts[label] / total_observed if total_observed else 0.0 for label in ranked]
    return FrequencyComparison([str(label) for label in ranked], expected, actual, title)


def plot_comparison(comparison: FrequencyComparison, path: Union[str, Path]) -> Path:
    """Save a paired bar chart of expected (blue) vs actual (red) shares."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    positions = list(range(len(comparison.labels)))
    shifted = [x + BAR_OFFSET for x in positions]

    # no pyplot, so the caller's backend is left alone
    fig = Figure(figsize=(10, 6), dpi=100)
    ax = fig.subplots()
    ax.bar(positions, comparison.expected, width=BAR_WIDTH, color='blue', label='Expected')
    ax.bar(shifted, comparison.actual, width=BAR_WIDTH, color='red', label='Actual')
    ax.set_xticks(shifted)
    ax.set_xticklabels(comparison.labels)
    ax.set_title(comparison.title)
    ax.legend()
    fig.savefig(path)

    logger.info(f"Saved comparison chart to {path}")
    return path
