import pytest

from recoengine.metrics import (
    compute_hit_ratio,
    compute_mae,
    compute_map,
    compute_ndcg,
    compute_rmse,
)

RELEVANT = [10, 20, 30]
RECOMMENDED = [20, 40, 30, 50, 10]


def test_rmse_source_case():
    assert compute_rmse([4, 3, 5, 2], [3.8, 3.2, 5.0, 2.5]) == pytest.approx(0.2872, abs=1e-4)


def test_mae_source_case():
    assert compute_mae([4, 3, 5, 2], [3.8, 3.2, 5.0, 2.5]) == pytest.approx(0.2250, abs=1e-4)


def test_rmse_menu_case():
    assert compute_rmse([4, 3, 5, 2], [3.9, 3.1, 4.9, 2.2]) == pytest.approx(0.1323, abs=1e-4)


def test_mae_menu_case():
    assert compute_mae([4, 3, 5, 2], [3.9, 3.1, 4.9, 2.2]) == pytest.approx(0.1250, abs=1e-4)


def test_perfect_prediction_has_zero_error():
    assert compute_rmse([1, 2, 3], [1, 2, 3]) == 0.0
    assert compute_mae([1, 2, 3], [1, 2, 3]) == 0.0


def test_rmse_at_least_mae():
    true = [1.0, 4.0, 2.5, 5.0]
    pred = [2.0, 3.0, 2.5, 1.0]
    assert compute_rmse(true, pred) >= compute_mae(true, pred)


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        compute_rmse([1, 2], [1])
    with pytest.raises(ValueError):
        compute_mae([1], [1, 2])


def test_empty_ratings_raise():
    with pytest.raises(ValueError):
        compute_rmse([], [])


def test_map_source_case():
    assert compute_map(RELEVANT, RECOMMENDED, 5) == pytest.approx(0.7556, abs=1e-4)


def test_ndcg_source_case():
    assert compute_ndcg(RELEVANT, RECOMMENDED, 5) == pytest.approx(0.8855, abs=1e-4)


def test_hit_ratio_source_case():
    assert compute_hit_ratio(RELEVANT, RECOMMENDED, 5) == 1


def test_top_n_defaults_to_whole_list():
    assert compute_map(RELEVANT, RECOMMENDED) == compute_map(RELEVANT, RECOMMENDED, 5)
    assert compute_ndcg(RELEVANT, RECOMMENDED) == compute_ndcg(RELEVANT, RECOMMENDED, 5)


def test_no_relevant_items_scores_zero():
    assert compute_map([], RECOMMENDED, 5) == 0.0
    assert compute_ndcg([], RECOMMENDED, 5) == 0.0
    assert compute_hit_ratio([], RECOMMENDED, 5) == 0


def test_no_hits_in_cutoff():
    assert compute_hit_ratio(RELEVANT, [40, 50, 10], 2) == 0
    assert compute_map(RELEVANT, [40, 50, 10], 2) == 0.0
    assert compute_ndcg(RELEVANT, [40, 50, 10], 2) == 0.0


def test_perfect_ranking_has_ndcg_one():
    assert compute_ndcg(RELEVANT, [10, 20, 30, 40], 4) == pytest.approx(1.0)
    assert compute_map(RELEVANT, [10, 20, 30], 3) == pytest.approx(1.0)


def test_negative_top_n_raises():
    with pytest.raises(ValueError):
        compute_map(RELEVANT, RECOMMENDED, -1)