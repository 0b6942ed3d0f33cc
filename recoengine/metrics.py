"""Accuracy metrics for rating prediction and top-N recommendation."""

from __future__ import annotations

import math
from collections.abc import Sequence


def _paired(true_ratings: Sequence[float], predicted: Sequence[float]) -> list[tuple[float, float]]:
    if len(true_ratings) != len(predicted):
        raise ValueError("true and predicted ratings differ in length")
    if not true_ratings:
        raise ValueError("no ratings to evaluate")
    return list(zip(true_ratings, predicted))


def compute_rmse(true_ratings: Sequence[float], predicted: Sequence[float]) -> float:
    """Root mean squared error between true and predicted ratings."""
    pairs = _paired(true_ratings, predicted)
    return math.sqrt(sum((p - t) ** 2 for t, p in pairs) / len(pairs))


def compute_mae(true_ratings: Sequence[float], predicted: Sequence[float]) -> float:
    """Mean absolute error between true and predicted ratings."""
    pairs = _paired(true_ratings, predicted)
    return sum(abs(p - t) for t, p in pairs) / len(pairs)


def _top(recommended: Sequence[int], top_n: int | None) -> tuple[Sequence[int], int]:
    n = len(recommended) if top_n is None else top_n
    if n < 0:
        raise ValueError("top_n must not be negative")
    return recommended[:n], n


def compute_map(
    relevant_items: Sequence[int], recommended: Sequence[int], top_n: int | None = None
) -> float:
    """Average precision of the first ``top_n`` recommendations."""
    relevant = set(relevant_items)
    head, _ = _top(recommended, top_n)
    hits = 0
    sum_precisions = 0.0
    for rank, item in enumerate(head, start=1):
        if item in relevant:
            hits += 1
            sum_precisions += hits / rank
    if not relevant_items:
        return 0.0
    return sum_precisions / len(relevant_items)


def compute_ndcg(
    relevant_items: Sequence[int], recommended: Sequence[int], top_n: int | None = None
) -> float:
    """Normalised discounted cumulative gain with binary relevance."""
    relevant = set(relevant_items)
    head, n = _top(recommended, top_n)
    dcg = sum(
        1.0 / math.log2(rank + 1)
        for rank, item in enumerate(head, start=1)
        if item in relevant
    )
    ideal_ranks = min(n, len(relevant_items))
    idcg = sum(1.0 / math.log2(rank + 1) for rank in range(1, ideal_ranks + 1))
    if idcg == 0:
        return 0.0
    return dcg / idcg


def compute_hit_ratio(
    relevant_items: Sequence[int], recommended: Sequence[int], top_n: int | None = None
) -> int:
    """1 if any of the first ``top_n`` recommendations is relevant, else 0."""
    relevant = set(relevant_items)
    head, _ = _top(recommended, top_n)
    return int(any(item in relevant for item in head))