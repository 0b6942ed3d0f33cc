"""Rating records and loading them from whitespace-separated text files."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice

MAX_RATINGS = 100_000

_FIELDS_PER_RATING = 5


@dataclass(frozen=True)
class Rating:
    """One user's rating of one item."""

    user_id: int
    item_id: int
    category_id: int
    rating: float
    timestamp: int


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _parse_record(fields: list[str]) -> Rating | None:
    try:
        return Rating(
            user_id=int(fields[0]),
            item_id=int(fields[1]),
            category_id=int(fields[2]),
            rating=float(fields[3]),
            timestamp=int(fields[4]),
        )
    except ValueError:
        return None


def parse_ratings(lines: Iterable[str], max_ratings: int = MAX_RATINGS) -> list[Rating]:
    """Parse ratings from text lines.

    Each rating is five whitespace-separated fields:
    ``user_id item_id category_id rating timestamp``. Line breaks are treated
    like any other whitespace. Parsing stops at the first malformed or
    incomplete record, or once ``max_ratings`` records have been read.
    """
    ratings: list[Rating] = []
    tokens = _tokens(lines)
    while len(ratings) < max_ratings:
        fields = list(islice(tokens, _FIELDS_PER_RATING))
        if len(fields) < _FIELDS_PER_RATING:
            break
        record = _parse_record(fields)
        if record is None:
            break
        ratings.append(record)
    return ratings


def load_ratings(
    path: str | os.PathLike[str], max_ratings: int = MAX_RATINGS
) -> list[Rating]:
    """Load ratings from a file; raises ``OSError`` if it cannot be opened."""
    with open(path, encoding="utf-8") as handle:
        return parse_ratings(handle, max_ratings)