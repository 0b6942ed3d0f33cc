"""Interactive client asking the recommendation server for a user's top items."""

from __future__ import annotations

import argparse
import socket
import sys

DEFAULT_HOST = "127.0.0.1"
PORT = 8080
BUFFER_SIZE = 2048


def build_request(user_id: int, algo: str, nb: int) -> str:
    """Encode a request in the server's ``key=value;`` wire format."""
    if not algo or any(ch in algo for ch in ";=") or any(ch.isspace() for ch in algo):
        raise ValueError(f"invalid algorithm name: {algo!r}")
    return f"user_id={int(user_id)};algo={algo};nb={int(nb)};"


def send_request(request: str, host: str = DEFAULT_HOST, port: int = PORT) -> str:
    """Send ``request`` and return the server's reply once it closes the connection."""
    with socket.create_connection((host, port)) as sock:
        sock.sendall(request.encode("utf-8"))
        chunks = []
        while chunk := sock.recv(BUFFER_SIZE):
            chunks.append(chunk)
    return b"".join(chunks).decode("utf-8", errors="replace")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Ask the recommendation server.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="server address")
    parser.add_argument("--port", type=int, default=PORT, help="server port")
    args = parser.parse_args(argv)

    try:
        user_id = int(input("Entrez l'ID utilisateur : "))
        algo = input("Choisissez l’algorithme (KNN ou MF ou GRAPH) : ").strip()
        nb = int(input("Nombre de recommandations : "))
        request = build_request(user_id, algo, nb)
    except (ValueError, EOFError) as exc:
        print(f"Entrée invalide : {exc}", file=sys.stderr)
        return 1

    try:
        response = send_request(request, args.host, args.port)
    except OSError as exc:
        print(f"Erreur de connexion : {exc}", file=sys.stderr)
        return 1

    print(f"Réponse du serveur :\n{response}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())