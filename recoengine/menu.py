"""Interactive text menu for loading ratings, recommending and evaluating."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from recoengine import graph, knn, mf
from recoengine.data import MAX_RATINGS, Rating, load_ratings
from recoengine.metrics import (
    compute_hit_ratio,
    compute_mae,
    compute_map,
    compute_ndcg,
    compute_rmse,
)
from recoengine.results import DEFAULT_RESULTS_PATH, save_recommendations

DEFAULT_RATINGS_PATH = os.path.join("data", "ratings.txt")
KNN_NEIGHBOURS = 5

MENU = (
    "\n==== SYSTÈME DE RECOMMANDATION ====\n"
    "1. Charger les données\n"
    "2. Recommandation par KNN\n"
    "3. Recommandation par MF\n"
    "4. Recommandation par Graphe (PageRank)\n"
    "5. Évaluer avec RMSE/MAE\n"
    "0. Quitter\n"
    "> Choix : "
)

_SAMPLE_TRUE = (4.0, 3.0, 5.0, 2.0)
_SAMPLE_PREDICTED = (3.9, 3.1, 4.9, 2.2)
_SAMPLE_RELEVANT = (10, 20, 30)
_SAMPLE_RECOMMENDED = (20, 40, 30, 50, 10)


def evaluation_report() -> str:
    """Metrics computed on a fixed sample, as the menu shows them."""
    top_n = len(_SAMPLE_RECOMMENDED)
    lines = [
        f"RMSE = {compute_rmse(_SAMPLE_TRUE, _SAMPLE_PREDICTED):.4f}",
        f"MAE  = {compute_mae(_SAMPLE_TRUE, _SAMPLE_PREDICTED):.4f}",
        f"MAP  = {compute_map(_SAMPLE_RELEVANT, _SAMPLE_RECOMMENDED, top_n):.4f}",
        f"NDCG = {compute_ndcg(_SAMPLE_RELEVANT, _SAMPLE_RECOMMENDED, top_n):.4f}",
        f"HR   = {compute_hit_ratio(_SAMPLE_RELEVANT, _SAMPLE_RECOMMENDED, top_n)}",
    ]
    return "\n".join(lines) + "\n"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in iter(stream.readline, ""):
        yield from line.split()


def _as_int(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


def _recommend(
    choice: int,
    ratings: Sequence[Rating],
    user_id: int,
    nb: int,
    results_path: str | os.PathLike[str],
) -> str:
    if choice == 2:
        return knn.format_report(
            user_id, nb, knn.recommend_items(ratings, user_id, KNN_NEIGHBOURS, nb)
        )
    if choice == 3:
        model = mf.MatrixFactorization()
        model.train(ratings, 20, 0.01, 0.1)
        recommendations = model.recommend(ratings, user_id, nb)
        save_recommendations("MF", user_id, recommendations, results_path)
        return mf.format_report(user_id, nb, recommendations)
    rating_graph = graph.RatingGraph(ratings, graph.MAX_USERS, graph.MAX_ITEMS)
    return graph.format_report(
        user_id, nb, rating_graph.recommend(user_id, graph.MAX_ITEMS, nb)
    )


def run_menu(
    ratings_path: str | os.PathLike[str] = DEFAULT_RATINGS_PATH,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    results_path: str | os.PathLike[str] = DEFAULT_RESULTS_PATH,
) -> None:
    """Run the menu until the user picks 0 or input runs out."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    tokens = _tokens(stdin)
    ratings: list[Rating] = []

    def write(text: str) -> None:
        stdout.write(text)
        stdout.flush()

    def ask(prompt: str) -> str | None:
        write(prompt)
        return next(tokens, None)

    while True:
        token = ask(MENU)
        if token is None:
            return
        choice = _as_int(token)

        if choice == 0:
            write("Au revoir !\n")
            return

        if choice == 1:
            try:
                ratings = load_ratings(ratings_path, MAX_RATINGS)
            except OSError as exc:
                write(f"Erreur ouverture fichier: {exc}\n")
                ratings = []
            if ratings:
                write(f"Données chargées : {len(ratings)} ratings.\n")
            else:
                write("Échec du chargement.\n")

        elif choice in (2, 3, 4):
            user_token = ask("ID utilisateur : ")
            if user_token is None:
                return
            nb_token = ask("Nombre de recommandations : ")
            if nb_token is None:
                return
            user_id, nb = _as_int(user_token), _as_int(nb_token)
            if user_id is None or nb is None:
                write("Entrée invalide.\n")
                continue
            try:
                write(_recommend(choice, ratings, user_id, nb, results_path))
            except ValueError as exc:
                write(f"Erreur : {exc}\n")

        elif choice == 5:
            write(evaluation_report())

        else:
            write("Choix invalide !\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive recommendation menu.")
    parser.add_argument("--ratings", default=DEFAULT_RATINGS_PATH, help="ratings file")
    parser.add_argument("--results", default=DEFAULT_RESULTS_PATH, help="results file")
    args = parser.parse_args(argv)
    run_menu(args.ratings, sys.stdin, sys.stdout, args.results)
    return 0


if __name__ == "__main__":
    sys.exit(main())