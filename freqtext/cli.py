"""Command-line interface for frequency-based text generation."""

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from freqtext.models.bigram import BigramTextGenerator
from freqtext.models.sampler import EmptyDistributionError, RandomSource, make_random_source
from freqtext.models.words import WordFrequencyTextGenerator
from freqtext.utils.report import compare_frequencies, plot_comparison


logger = logging.getLogger(__name__)

BIGRAMS_PATH = Path('bigrams_frequency.txt')
WORDS_PATH = Path('words_frequency.txt')
RESULTS_DIR = Path('Results')


@dataclass
class RunConfig:
    """Resolved settings for one generation run."""
    bigrams: Path = BIGRAMS_PATH
    words: Path = WORDS_PATH
    results_dir: Path = RESULTS_DIR
    length: int = 1000
    count: int = 1000
    top: int = 20
    plot: bool = True
    seed: Optional[int] = None


def setup_logging(level=logging.INFO):
    """Configure logging."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def write_text(path: Path, text: str) -> None:
    """Write generated text as UTF-8."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)
    logger.info(f"Saved generated text to {path}")


def run_bigrams(config: RunConfig, random: RandomSource) -> str:
    """Generate characters from the bigram table into gen-1.txt."""
    generator = BigramTextGenerator.from_file(config.bigrams, random)
    text = generator.generate(config.length)
    write_text(config.results_dir / 'gen-1.txt', text)

    if config.plot:
        comparison = compare_frequencies(
            generator.initial_weights,
            text,
            top=config.top,
            title='Gen-1 Character Distribution'
        )
        plot_comparison(comparison, config.results_dir / 'gen-1.png')
    return text


def run_words(config: RunConfig, random: RandomSource) -> str:
    """Generate words from the word table into gen-2.txt."""
    generator = WordFrequencyTextGenerator.from_file(config.words, random)
    text = generator.generate(config.count)
    write_text(config.results_dir / 'gen-2.txt', text)

    if config.plot:
        comparison = compare_frequencies(
            generator.word_weights,
            text.split(),
            top=config.top,
            title='Gen-2 Word Distribution'
        )
        plot_comparison(comparison, config.results_dir / 'gen-2.png')
    return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Generate text from bigram and word frequency tables'
    )
    parser.add_argument(
        '--bigrams',
        type=Path,
        default=BIGRAMS_PATH,
        help='Bigram frequency file (<bigram>\\t<frequency>)'
    )
    parser.add_argument(
        '--words',
        type=Path,
        default=WORDS_PATH,
        help='Word frequency file (<index>\\t<word>\\t<lemma>\\t<pos>\\t<freq>...)'
    )
    parser.add_argument(
        '--results-dir',
        type=Path,
        default=RESULTS_DIR,
        help='Directory for generated texts and charts'
    )
    parser.add_argument('--seed', type=int, help='Seed for reproducible output')
    parser.add_argument('--top', type=int, default=20, help='Symbols shown per chart')
    parser.add_argument('--no-plot', action='store_true', help='Skip the comparison charts')
    parser.add_argument('--verbose', action='store_true')

    subparsers = parser.add_subparsers(dest='command', required=True)

    bigrams_parser = subparsers.add_parser('bigrams', help='Character text from bigrams')
    bigrams_parser.add_argument('--length', type=int, default=1000)

    words_parser = subparsers.add_parser('words', help='Word text from word frequencies')
    words_parser.add_argument('--count', type=int, default=1000)

    all_parser = subparsers.add_parser('all', help='Both texts with one random source')
    all_parser.add_argument('--length', type=int, default=1000)
    all_parser.add_argument('--count', type=int, default=1000)

    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    config = RunConfig(
        bigrams=args.bigrams,
        words=args.words,
        results_dir=args.results_dir,
        length=getattr(args, 'length', 1000),
        count=getattr(args, 'count', 1000),
        top=args.top,
        plot=not args.no_plot,
        seed=args.seed,
    )

    needed = {
        'bigrams': [config.bigrams],
        'words': [config.words],
        'all': [config.bigrams, config.words],
    }[args.command]
    missing = [str(p) for p in needed if not p.is_file()]
    if missing:
        logger.error(f"Frequency file not found: {', '.join(missing)}")
        raise SystemExit(1)

    random = make_random_source(config.seed)
    try:
        if args.command in ('bigrams', 'all'):
            run_bigrams(config, random)
        if args.command in ('words', 'all'):
            run_words(config, random)
    except EmptyDistributionError as e:
        logger.error(f"Cannot generate text: {e}")
        raise SystemExit(1)

    logger.info(f"Generation complete, see {config.results_dir}")


if __name__ == '__main__':
    main()
