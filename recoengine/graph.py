"""Personalised PageRank over the bipartite user-item rating graph."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from recoengine.data import Rating

MAX_USERS = 1000
MAX_ITEMS = 1000
ALPHA = 0.85
ITERATIONS = 50


class RatingGraph:
    """Users and items as nodes, ratings as undirected edges.

    User ``u`` is node ``u``; item ``i`` is node ``nb_users + i``. Rows of the
    adjacency matrix are normalised into transition probabilities.
    """

    def __init__(
        self, ratings: Iterable[Rating], nb_users: int = MAX_USERS, nb_items: int = MAX_ITEMS
    ) -> None:
        if nb_users <= 0 or nb_items <= 0:
            raise ValueError("graph dimensions must be positive")
        self.nb_users = nb_users
        self.nb_items = nb_items
        self.node_count = nb_users + nb_items
        adjacency = np.zeros((self.node_count, self.node_count))
        for r in ratings:
            self._check_user(r.user_id)
            if not 0 <= r.item_id < nb_items:
                raise ValueError(f"item id {r.item_id} out of range 0..{nb_items - 1}")
            item_node = nb_users + r.item_id
            adjacency[r.user_id, item_node] = 1.0
            adjacency[item_node, r.user_id] = 1.0
        sums = adjacency.sum(axis=1)
        linked = sums > 0
        adjacency[linked] /= sums[linked, None]
        self.adjacency = adjacency

    def _check_user(self, user_id: int) -> None:
        if not 0 <= user_id < self.nb_users:
            raise ValueError(f"user id {user_id} out of range 0..{self.nb_users - 1}")

    def pagerank(
        self, user_id: int, iterations: int = ITERATIONS, alpha: float = ALPHA
    ) -> np.ndarray:
        """Random walk with restart at ``user_id``; returns a score per node."""
        self._check_user(user_id)
        restart = np.zeros(self.node_count)
        restart[user_id] = 1.0
        scores = restart.copy()
        transposed = self.adjacency.T
        for _ in range(iterations):
            scores = (1 - alpha) * restart + alpha * (transposed @ scores)
        return scores

    def recommend(
        self, user_id: int, nb_items: int | None = None, top_n: int = 10
    ) -> list[tuple[int, float]]:
        """Top ``top_n`` items among the first ``nb_items`` by PageRank score.

        Each pick takes the highest remaining score, lowest id first on ties,
        then zeroes it. Items the user rated are not excluded.
        """
        count = self.nb_items if nb_items is None else nb_items
        if not 0 < count <= self.nb_items:
            raise ValueError(f"nb_items must be in 1..{self.nb_items}")
        scores = self.pagerank(user_id)[self.nb_users : self.nb_users + count].copy()
        picks: list[tuple[int, float]] = []
        for _ in range(max(top_n, 0)):
            best = int(np.argmax(scores))
            picks.append((best, float(scores[best])))
            scores[best] = 0.0
        return picks


def format_report(user_id: int, top_n: int, recommendations: Iterable[tuple[int, float]]) -> str:
    """Render graph recommendations as text."""
    lines = [f"Top {top_n} articles recommandés pour l’utilisateur {user_id} (Graph):"]
    lines.extend(f"Article {item} avec score {score:.4f}" for item, score in recommendations)
    return "\n".join(lines) + "\n"