"""TCP recommendation server answering ``user_id=..;algo=..;nb=..;`` requests."""

from __future__ import annotations

import argparse
import os
import re
import socketserver
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from recoengine import graph, knn, mf
from recoengine.data import Rating, load_ratings
from recoengine.results import DEFAULT_RESULTS_PATH, save_recommendations

PORT = 8080
BUFFER_SIZE = 2048
KNN_NEIGHBOURS = 5
MF_EPOCHS = 20
MF_LEARNING_RATE = 0.01
MF_REGULARISATION = 0.1
DEFAULT_RATINGS_PATH = os.path.join("data", "ratings.txt")

_REQUEST_PATTERN = re.compile(
    r"\s*user_id=\s*([+-]?\d+);algo=([^;]+);nb=\s*([+-]?\d+);?"
)


@dataclass(frozen=True)
class Request:
    """A client's request for ``nb`` recommendations from one algorithm."""

    user_id: int
    algo: str
    nb: int


def parse_request(text: str) -> Request:
    """Parse ``user_id=<int>;algo=<name>;nb=<int>;``; raises ``ValueError``."""
    match = _REQUEST_PATTERN.match(text)
    if match is None:
        raise ValueError(f"malformed request: {text!r}")
    return Request(user_id=int(match[1]), algo=match[2], nb=int(match[3]))


def handle_request(
    text: str,
    ratings: Sequence[Rating],
    results_path: str | os.PathLike[str] = DEFAULT_RESULTS_PATH,
) -> str:
    """Answer one request with the chosen algorithm's report.

    ``MF`` results are also appended to ``results_path``. An unknown
    algorithm yields an error message rather than an exception; a malformed
    request or an out-of-range id raises ``ValueError``.
    """
    request = parse_request(text)
    user_id, nb = request.user_id, request.nb

    if request.algo == "KNN":
        recommendations = knn.recommend_items(ratings, user_id, KNN_NEIGHBOURS, nb)
        return knn.format_report(user_id, nb, recommendations)

    if request.algo == "MF":
        model = mf.MatrixFactorization()
        model.train(ratings, MF_EPOCHS, MF_LEARNING_RATE, MF_REGULARISATION)
        recommendations = model.recommend(ratings, user_id, nb)
        save_recommendations("MF", user_id, recommendations, results_path)
        return mf.format_report(user_id, nb, recommendations)

    if request.algo == "GRAPH":
        rating_graph = graph.RatingGraph(ratings, graph.MAX_USERS, graph.MAX_ITEMS)
        recommendations = rating_graph.recommend(user_id, graph.MAX_ITEMS, nb)
        return graph.format_report(user_id, nb, recommendations)

    return f"Algorithme non reconnu : {request.algo}"


class _RequestHandler(socketserver.BaseRequestHandler):
    server: _RecommendationServer

    def handle(self) -> None:
        text = self.request.recv(BUFFER_SIZE).decode("utf-8", errors="replace")
        print(f"Requête reçue : {text}", flush=True)
        try:
            response = handle_request(text, self.server.ratings, self.server.results_path)
        except ValueError as exc:
            response = f"Requête invalide : {exc}"
        self.request.sendall(response.encode("utf-8")[:BUFFER_SIZE])


class _RecommendationServer(socketserver.ThreadingTCPServer):
    daemon_threads = True
    allow_reuse_address = True

    def __init__(
        self,
        address: tuple[str, int],
        ratings: Sequence[Rating],
        results_path: str | os.PathLike[str] = DEFAULT_RESULTS_PATH,
    ) -> None:
        self.ratings = tuple(ratings)
        self.results_path = results_path
        super().__init__(address, _RequestHandler)


def serve(ratings: Sequence[Rating], host: str = "", port: int = PORT) -> None:
    """Serve requests forever, one thread per client."""
    with _RecommendationServer((host, port), ratings) as server:
        print(f"Serveur prêt sur le port {server.server_address[1]}", flush=True)
        server.serve_forever()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the recommendation server.")
    parser.add_argument("--ratings", default=DEFAULT_RATINGS_PATH, help="ratings file")
    parser.add_argument("--host", default="", help="address to listen on")
    parser.add_argument("--port", type=int, default=PORT, help="port to listen on")
    args = parser.parse_args(argv)

    try:
        ratings = load_ratings(args.ratings)
    except OSError as exc:
        print(f"Erreur ouverture fichier: {exc}", file=sys.stderr)
        return 1

    try:
        serve(ratings, args.host, args.port)
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"Erreur serveur: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())