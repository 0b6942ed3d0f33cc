"""Appending recommendation lists to a results file."""

from __future__ import annotations

import os
from collections.abc import Iterable

DEFAULT_RESULTS_PATH = "resultats.txt"


def format_saved_recommendations(
    algo: str, user_id: int, recommendations: Iterable[tuple[int, float]]
) -> str:
    """Render one block of recommendations as stored in the results file."""
    entries = list(recommendations)
    lines = [f"Algo: {algo} | User: {user_id} | Top {len(entries)} recommandations:"]
    lines.extend(f"Item {item} - Score: {score:.4f}" for item, score in entries)
    return "\n".join(lines) + "\n\n"


def save_recommendations(
    algo: str,
    user_id: int,
    recommendations: Iterable[tuple[int, float]],
    path: str | os.PathLike[str] = DEFAULT_RESULTS_PATH,
) -> None:
    """Append a block of recommendations to ``path``."""
    block = format_saved_recommendations(algo, user_id, recommendations)
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(block)