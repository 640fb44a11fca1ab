import pytest

from netcentral.clustering.features import build_features, normalize_features


def test_build_features_defaults_missing_scores_to_zero():
    features = build_features([1, 2], {1: 3, 2: 1}, {1: 0.5}, {})
    assert features == {1: (3.0, 0.5, 0.0), 2: (1.0, 0.0, 0.0)}


def test_varying_dimension_spans_zero_to_one():
    features = {1: (2.0, 4.0, 8.0), 2: (1.0, 2.0, 6.0), 3: (1.5, 3.0, 7.0)}
    norm = normalize_features(features)

    assert norm[2] == (0.0, 0.0, 0.0)
    assert norm[1] == (1.0, 1.0, 1.0)
    assert norm[3] == pytest.approx((0.5, 0.5, 0.5))


def test_constant_dimension_becomes_zero():
    features = {1: (5.0, 0.3, 1.0), 2: (5.0, 0.7, 2.0), 3: (5.0, 0.5, 4.0)}
    norm = normalize_features(features)

    assert [norm[n][0] for n in features] == [0.0, 0.0, 0.0]
    assert norm[1][1] == 0.0
    assert norm[2][1] == 1.0
    assert norm[1][2] == 0.0
    assert norm[3][2] == 1.0


def test_single_node_is_all_zero():
    assert normalize_features({7: (3.0, 0.2, 9.0)}) == {7: (0.0, 0.0, 0.0)}


def test_preserves_keys_and_does_not_mutate_input():
    features = {4: (1.0, 2.0, 3.0), 9: (2.0, 4.0, 6.0)}
    snapshot = dict(features)
    norm = normalize_features(features)

    assert set(norm) == {4, 9}
    assert features == snapshot
    assert norm is not features


def test_empty_features():
    assert normalize_features({}) == {}
