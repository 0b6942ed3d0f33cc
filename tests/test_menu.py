import io

import pytest

from recoengine import graph, knn
from recoengine.data import load_ratings
from recoengine.menu import MENU, evaluation_report, main, run_menu
from recoengine.metrics import compute_mae, compute_map, compute_ndcg, compute_rmse

RATINGS_TEXT = """\
1 1 1 5.0 946684800
1 2 1 3.0 946684800
1 3 1 1.0 946684800
2 1 1 4.0 946684800
2 2 1 3.0 946684800
2 3 1 2.0 946684800
2 4 1 5.0 946684800
3 1 1 5.0 946684800
3 2 1 2.0 946684800
3 3 1 1.0 946684800
3 5 1 4.0 946684800
4 1 1 1.0 946684800
4 2 1 3.0 946684800
4 3 1 5.0 946684800
4 6 1 5.0 946684800
"""


@pytest.fixture
def ratings_file(tmp_path):
    path = tmp_path / "ratings.txt"
    path.write_text(RATINGS_TEXT, encoding="utf-8")
    return path


def _run(ratings_path, commands, results_path):
    out = io.StringIO()
    run_menu(ratings_path, io.StringIO(commands), out, results_path)
    return out.getvalue()


def test_evaluation_report_uses_sample_values():
    report = evaluation_report()
    lines = report.splitlines()
    assert lines[0] == f"RMSE = {compute_rmse([4, 3, 5, 2], [3.9, 3.1, 4.9, 2.2]):.4f}"
    assert lines[1] == f"MAE  = {compute_mae([4, 3, 5, 2], [3.9, 3.1, 4.9, 2.2]):.4f}"
    assert lines[2] == f"MAP  = {compute_map([10, 20, 30], [20, 40, 30, 50, 10], 5):.4f}"
    assert lines[3] == f"NDCG = {compute_ndcg([10, 20, 30], [20, 40, 30, 50, 10], 5):.4f}"
    assert lines[4] == "HR   = 1"


def test_load_and_quit(ratings_file, tmp_path):
    output = _run(ratings_file, "1\n0\n", tmp_path / "r.txt")
    assert "Données chargées : 15 ratings." in output
    assert output.endswith("Au revoir !\n")
    assert output.count(MENU) == 2


def test_missing_file_fails_to_load(tmp_path):
    output = _run(tmp_path / "missing.txt", "1\n0\n", tmp_path / "r.txt")
    assert "Échec du chargement." in output


def test_invalid_choice(ratings_file, tmp_path):
    output = _run(ratings_file, "9\nabc\n0\n", tmp_path / "r.txt")
    assert output.count("Choix invalide !") == 2


def test_end_of_input_stops_menu(ratings_file, tmp_path):
    output = _run(ratings_file, "", tmp_path / "r.txt")
    assert output == MENU


def test_evaluation_option(ratings_file, tmp_path):
    output = _run(ratings_file, "5\n0\n", tmp_path / "r.txt")
    assert evaluation_report() in output


def test_knn_option(ratings_file, tmp_path):
    output = _run(ratings_file, "1\n2\n1\n3\n0\n", tmp_path / "r.txt")
    ratings = load_ratings(ratings_file)
    assert knn.format_report(1, 3, knn.recommend_items(ratings, 1, 5, 3)) in output


def test_graph_option(ratings_file, tmp_path):
    output = _run(ratings_file, "1\n4\n1\n2\n0\n", tmp_path / "r.txt")
    ratings = load_ratings(ratings_file)
    rating_graph = graph.RatingGraph(ratings, graph.MAX_USERS, graph.MAX_ITEMS)
    expected = graph.format_report(1, 2, rating_graph.recommend(1, graph.MAX_ITEMS, 2))
    assert expected in output


def test_mf_option_saves_results(ratings_file, tmp_path):
    results = tmp_path / "r.txt"
    output = _run(ratings_file, "1\n3\n1\n2\n0\n", results)
    assert "Top 2 recommandations MF pour l’utilisateur 1 :" in output
    assert results.read_text(encoding="utf-8").startswith(
        "Algo: MF | User: 1 | Top 2 recommandations:"
    )


def test_mf_without_data_reports_error(tmp_path):
    results = tmp_path / "r.txt"
    output = _run(tmp_path / "missing.txt", "3\n1\n2\n0\n", results)
    assert "Erreur : " in output
    assert not results.exists()


def test_non_numeric_user_id(ratings_file, tmp_path):
    output = _run(ratings_file, "2\nbob\n3\n0\n", tmp_path / "r.txt")
    assert "Entrée invalide." in output


def test_main_runs_menu(ratings_file, tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n0\n"))
    code = main(["--ratings", str(ratings_file), "--results", str(tmp_path / "r.txt")])
    assert code == 0
    out = capsys.readouterr().out
    assert "Données chargées : 15 ratings." in out
    assert "Au revoir !" in out