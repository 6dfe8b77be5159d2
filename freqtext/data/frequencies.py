"""Readers for the tab-separated bigram and word frequency files."""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple, Union


logger = logging.getLogger(__name__)


class BigramRecord(NamedTuple):
    """One bigram line: two adjacent characters and how often they occur."""
    first: str
    second: str
    frequency: int


class WordRecord(NamedTuple):
    """One word line with its raw frequency columns."""
    word: str
    columns: Tuple[str, ...]


# index, word, lemma, part of speech, then one or more frequency columns
WORD_FIELDS_MIN = 5
WORD_COLUMN_START = 4


def parse_bigram_line(line: str) -> Optional[BigramRecord]:
    """Parse ``<bigram>\\t<frequency>``; return None for malformed lines."""
    parts = line.rstrip('\r\n').split('\t')
    if len(parts) < 2:
        return None

    bigram = parts[0]
    if len(bigram) != 2:
        return None

    try:
        frequency = int(parts[1])
    except ValueError:
        return None
    if frequency < 0:
        return None

    return BigramRecord(bigram[0], bigram[1], frequency)


def parse_word_line(line: str) -> Optional[WordRecord]:
    """Parse ``<index>\\t<word>\\t<lemma>\\t<pos>\\t<freq>...``."""
    parts = [p for p in line.rstrip('\r\n').split('\t') if p]
    if len(parts) < WORD_FIELDS_MIN:
        return None
    return WordRecord(parts[1], tuple(parts[WORD_COLUMN_START:]))


def read_bigrams(lines: Iterable[str]) -> Iterator[BigramRecord]:
    """Yield bigram records, silently skipping malformed lines."""
    skipped = 0
    for line in lines:
        record = parse_bigram_line(line)
        if record is None:
            skipped += 1
            continue
        yield record
    if skipped:
        logger.debug(f"Skipped {skipped} malformed bigram lines")


def read_words(lines: Iterable[str]) -> Iterator[WordRecord]:
    """Yield word records, silently skipping malformed lines."""
    skipped = 0
    for line in lines:
        record = parse_word_line(line)
        if record is None:
            skipped += 1
            continue
        yield record
    if skipped:
        logger.debug(f"Skipped {skipped} malformed word lines")


def read_bigram_file(path: Union[str, Path], encoding: str = 'utf-8-sig') -> List[BigramRecord]:
    """Read all bigram records from a file."""
    with open(path, 'r', encoding=encoding) as f:
        return list(read_bigrams(f))


def read_word_file(path: Union[str, Path], encoding: str = 'utf-8-sig') -> List[WordRecord]:
    """Read all word records from a file."""
    with open(path, 'r', encoding=encoding) as f:
        return list(read_words(f))
