"""Matrix factorisation with biases, trained by stochastic gradient descent."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

from recoengine.data import Rating

LATENT_FACTORS = 10
MAX_USERS = 1000
MAX_ITEMS = 1000
INIT_SCALE = 0.1


class MatrixFactorization:
    """Biased latent-factor model: mean + user bias + item bias + U·V."""

    def __init__(
        self,
        n_users: int = MAX_USERS,
        n_items: int = MAX_ITEMS,
        factors: int = LATENT_FACTORS,
        rng: np.random.Generator | int | None = None,
    ) -> None:
        if n_users <= 0 or n_items <= 0 or factors <= 0:
            raise ValueError("dimensions must be positive")
        self.n_users = n_users
        self.n_items = n_items
        self.factors = factors
        self.rng = np.random.default_rng(rng)
        self.user_factors = np.zeros((n_users, factors))
        self.item_factors = np.zeros((n_items, factors))
        self.user_bias = np.zeros(n_users)
        self.item_bias = np.zeros(n_items)
        self.global_mean = 0.0

    def _check_user(self, user_id: int) -> None:
        if not 0 <= user_id < self.n_users:
            raise ValueError(f"user id {user_id} out of range 0..{self.n_users - 1}")

    def _check_item(self, item_id: int) -> None:
        if not 0 <= item_id < self.n_items:
            raise ValueError(f"item id {item_id} out of range 0..{self.n_items - 1}")

    def train(
        self,
        ratings: Sequence[Rating],
        num_epochs: int = 20,
        lr: float = 0.01,
        reg: float = 0.1,
    ) -> None:
        """Reinitialise the model randomly and fit it to ``ratings``."""
        if not ratings:
            raise ValueError("no ratings to train on")
        for r in ratings:
            self._check_user(r.user_id)
            self._check_item(r.item_id)

        self.user_factors = self.rng.random((self.n_users, self.factors)) * INIT_SCALE
        self.item_factors = self.rng.random((self.n_items, self.factors)) * INIT_SCALE
        self.user_bias = np.zeros(self.n_users)
        self.item_bias = np.zeros(self.n_items)
        self.global_mean = sum(r.rating for r in ratings) / len(ratings)

        for _ in range(num_epochs):
            for r in ratings:
                u, j = r.user_id, r.item_id
                error = r.rating - self.predict(u, j)
                self.user_bias[u] += lr * (error - reg * self.user_bias[u])
                self.item_bias[j] += lr * (error - reg * self.item_bias[j])
                uf = self.user_factors[u].copy()
                vf = self.item_factors[j].copy()
                self.user_factors[u] += lr * (error * vf - reg * uf)
                self.item_factors[j] += lr * (error * uf - reg * vf)

    def predict(self, user_id: int, item_id: int) -> float:
        """Predicted rating of ``item_id`` by ``user_id``."""
        self._check_user(user_id)
        self._check_item(item_id)
        dot = float(self.user_factors[user_id] @ self.item_factors[item_id])
        return float(self.global_mean + self.user_bias[user_id] + self.item_bias[item_id] + dot)

    def recommend(
        self, ratings: Iterable[Rating], user_id: int, top_n: int = 10
    ) -> list[tuple[int, float]]:
        """Top ``top_n`` items (ids 1..n_items-1) by predicted rating.

        Items the user already rated score 0. Each pick takes the highest
        remaining score, lowest id first on ties, then zeroes it.
        """
        self._check_user(user_id)
        predictions = (
            self.global_mean
            + self.user_bias[user_id]
            + self.item_bias
            + self.item_factors @ self.user_factors[user_id]
        )
        rated = [
            r.item_id
            for r in ratings
            if r.user_id == user_id and 0 <= r.item_id < self.n_items
        ]
        predictions[rated] = 0.0
        candidates = predictions[1:].copy()

        picks: list[tuple[int, float]] = []
        if candidates.size == 0:
            return picks
        for _ in range(max(top_n, 0)):
            idx = int(np.argmax(candidates))
            score = float(candidates[idx])
            if score <= -1:
                continue
            picks.append((idx + 1, score))
            candidates[idx] = 0.0
        return picks


def format_report(user_id: int, top_n: int, recommendations: Iterable[tuple[int, float]]) -> str:
    """Render matrix-factorisation recommendations as text."""
    lines = [f"Top {top_n} recommandations MF pour l’utilisateur {user_id} :"]
    lines.extend(f"Item {item} avec score {score:.2f}" for item, score in recommendations)
    return "\n".join(lines) + "\n"