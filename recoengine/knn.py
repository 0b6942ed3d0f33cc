"""User-based k-nearest-neighbour recommendation with Pearson similarity."""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Iterable, Sequence

from recoengine.data import Rating

MAX_USER_ID = 100
MAX_ITEM_ID = 200
DEFAULT_K = 5

_Index = dict[int, dict[int, list[float]]]


def _index(ratings: Iterable[Rating]) -> _Index:
    """Map user -> item -> ratings given, in file order."""
    index: _Index = defaultdict(lambda: defaultdict(list))
    for r in ratings:
        index[r.user_id][r.item_id].append(r.rating)
    return index


def _pearson(index: _Index, u1: int, u2: int) -> float:
    items1 = index.get(u1, {})
    items2 = index.get(u2, {})
    sum_x = sum_y = sum_xy = sum_x2 = sum_y2 = 0.0
    n = 0
    for item, xs in items1.items():
        ys = items2.get(item)
        if not ys:
            continue
        for x in xs:
            for y in ys:
                sum_x += x
                sum_y += y
                sum_xy += x * y
                sum_x2 += x * x
                sum_y2 += y * y
                n += 1
    if n == 0:
        return 0.0
    numerator = n * sum_xy - sum_x * sum_y
    spread = (n * sum_x2 - sum_x * sum_x) * (n * sum_y2 - sum_y * sum_y)
    if spread <= 0:
        return 0.0
    return numerator / math.sqrt(spread)


def pearson_similarity(ratings: Sequence[Rating], u1: int, u2: int) -> float:
    """Pearson correlation of two users over the items both have rated.

    Returns 0.0 when they share no item or either user's ratings do not vary.
    """
    return _pearson(_index(ratings), u1, u2)


def _neighbours(index: _Index, user_id: int) -> list[tuple[int, float]]:
    """Users 1..MAX_USER_ID, other than ``user_id``, with positive similarity."""
    neighbours = []
    for other in range(1, MAX_USER_ID + 1):
        if other == user_id:
            continue
        sim = _pearson(index, user_id, other)
        if sim > 0:
            neighbours.append((other, sim))
    return neighbours


def _predict(index: _Index, neighbours: list[tuple[int, float]], item_id: int, k: int) -> float:
    votes = [
        (sim, index[other][item_id][0])
        for other, sim in neighbours
        if index.get(other, {}).get(item_id)
    ]
    if not votes:
        return 0.0
    votes.sort(key=lambda vote: vote[0], reverse=True)
    top = votes[: max(k, 0)]
    sum_sim = sum(sim for sim, _ in top)
    if sum_sim == 0:
        return 0.0
    return sum(sim * value for sim, value in top) / sum_sim


def predict_rating(
    ratings: Sequence[Rating], user_id: int, item_id: int, k: int = DEFAULT_K
) -> float:
    """Predict a user's rating of an item from the ``k`` most similar users.

    Only positively correlated users who rated the item take part; the result
    is their similarity-weighted mean rating, or 0.0 if there are none.
    """
    index = _index(ratings)
    return _predict(index, _neighbours(index, user_id), item_id, k)


def recommend_items(
    ratings: Sequence[Rating], user_id: int, k: int = DEFAULT_K, top_n: int = 10
) -> list[tuple[int, float]]:
    """Best ``top_n`` items (1..MAX_ITEM_ID) the user has not rated yet.

    Items with no positive predicted score are never recommended. Ties go to
    the lower item id.
    """
    index = _index(ratings)
    neighbours = _neighbours(index, user_id)
    rated = index.get(user_id, {})
    scored = []
    for item in range(1, MAX_ITEM_ID + 1):
        if rated.get(item):
            continue
        score = _predict(index, neighbours, item, k)
        if score > 0:
            scored.append((item, score))
    scored.sort(key=lambda entry: (-entry[1], entry[0]))
    return scored[: max(top_n, 0)]


def format_report(user_id: int, top_n: int, recommendations: Iterable[tuple[int, float]]) -> str:
    """Render KNN recommendations as text."""
    lines = [f"Top {top_n} recommandations pour l'utilisateur {user_id} :"]
    lines.extend(f"Item {item} avec score {score:.2f}" for item, score in recommendations)
    return "\n".join(lines) + "\n"