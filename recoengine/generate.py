"""Generating a random ratings file for experiments."""

from __future__ import annotations

import argparse
import os
import random
import sys
from collections.abc import Iterable

from recoengine.data import Rating

DEFAULT_COUNT = 1000
MAX_USERS = 100
MAX_ITEMS = 200
MAX_CATEGORIES = 10
EPOCH_2000 = 946_684_800
TWENTY_YEARS = 20 * 365 * 24 * 3600
DEFAULT_OUTPUT = os.path.join("data", "ratings.txt")


def generate_ratings(count: int = DEFAULT_COUNT, rng: random.Random | None = None) -> list[Rating]:
    """Create ``count`` random ratings.

    Users range over 1..100, items over 1..200, categories over 1..10,
    ratings over 1.0..5.9 in steps of 0.1 and timestamps over 2000..2020.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng if rng is not None else random.Random()
    return [
        Rating(
            user_id=rng.randrange(MAX_USERS) + 1,
            item_id=rng.randrange(MAX_ITEMS) + 1,
            category_id=rng.randrange(MAX_CATEGORIES) + 1,
            rating=rng.randrange(5) + 1 + rng.randrange(10) / 10,
            timestamp=rng.randrange(TWENTY_YEARS) + EPOCH_2000,
        )
        for _ in range(count)
    ]


def format_rating(rating: Rating) -> str:
    """Render a rating as one line of a ratings file, without the newline."""
    return (
        f"{rating.user_id} {rating.item_id} {rating.category_id} "
        f"{rating.rating:.1f} {rating.timestamp}"
    )


def write_ratings(path: str | os.PathLike[str], ratings: Iterable[Rating]) -> int:
    """Write ratings to ``path``, one per line; return how many were written."""
    written = 0
    with open(path, "w", encoding="utf-8") as handle:
        for rating in ratings:
            handle.write(format_rating(rating) + "\n")
            written += 1
    return written


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a random ratings file.")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="file to write")
    parser.add_argument("-n", "--count", type=int, default=DEFAULT_COUNT, help="number of ratings")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    try:
        ratings = generate_ratings(args.count, random.Random(args.seed))
        written = write_ratings(args.output, ratings)
    except (OSError, ValueError) as exc:
        print(f"Erreur ouverture fichier: {exc}", file=sys.stderr)
        return 1

    print(f"Fichier {os.path.basename(args.output)} généré avec {written} lignes.")
    return 0


if __name__ == "__main__":
    sys.exit(main())