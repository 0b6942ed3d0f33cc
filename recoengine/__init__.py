"""Recommendation engine with KNN, matrix factorization and graph-based recommenders, metrics, a menu, a server and a client."""

__version__ = "0.1.0"
__all__ = ["data", "metrics", "results", "generate", "knn", "mf", "graph", "server", "client", "menu"]