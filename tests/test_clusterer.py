"""
Test the DBSCANClusterer front end
"""

import logging

import numpy as np
import pytest

from dbscan_clusterer import (DBSCANClusterer, Clusterer, InvalidInput, NOISE,
                              euclidean_2d_distance)

DATA = [[0, 10], [0, 11], [0, 12],
        [20, 33], [21, 32],
        [59, 77], [58, 79], [58, 76],
        [300, 70],
        [500, 300], [500, 302]]


def test_base_clusterer_is_abstract():
    with pytest.raises(NotImplementedError):
        Clusterer().cluster(DATA)
    with pytest.raises(NotImplementedError):
        Clusterer().fit_predict(DATA)


def test_cluster_groups_points():
    clusterer = DBSCANClusterer(4, 1)
    groups = clusterer.cluster(DATA)

    assert clusterer.n_clusters_ == 4
    assert sorted(groups) == [NOISE, 0, 1, 2, 3]
    assert groups[NOISE] == [[300.0, 70.0]]
    assert groups[3] == [[500.0, 300.0], [500.0, 302.0]]
    assert sum(len(g) for g in groups.values()) == len(DATA)


def test_fit_predict():
    labels = DBSCANClusterer(4, 1).fit_predict(np.array(DATA))

    assert labels.dtype == np.int64
    assert labels.tolist() == [0, 0, 0, 1, 1, 2, 2, 2, NOISE, 3, 3]


def test_n_clusters_unset_before_run():
    assert DBSCANClusterer(1, 1).n_clusters_ is None


def test_empty_data():
    clusterer = DBSCANClusterer(1, 1)

    assert clusterer.cluster([]) == {}
    assert clusterer.n_clusters_ == 0


@pytest.mark.parametrize("metric", ['euclidean', 'euclidean_2d', 'approximate',
                                    euclidean_2d_distance])
def test_metrics_agree_on_well_separated_data(metric):
    labels = DBSCANClusterer(4, 1, metric=metric).fit_predict(DATA)

    assert labels.tolist() == [0, 0, 0, 1, 1, 2, 2, 2, NOISE, 3, 3]


def test_custom_metric():
    # only the first coordinate matters
    def x_only(a, b):
        return abs(a.coords[0] - b.coords[0])

    labels = DBSCANClusterer(0.5, 1, metric=x_only).fit_predict(
        [[0, 0], [0, 100], [5, 0]])

    assert labels.tolist() == [0, 0, NOISE]


def test_does_not_keep_state_between_runs():
    clusterer = DBSCANClusterer(4, 1)

    first = clusterer.fit_predict(DATA)
    second = clusterer.fit_predict(DATA)

    assert first.tolist() == second.tolist()


@pytest.mark.parametrize("kwargs", [
    dict(eps=-1, min_pts=1),
    dict(eps=float('nan'), min_pts=1),
    dict(eps=float('inf'), min_pts=1),
    dict(eps='1', min_pts=1),
    dict(eps=True, min_pts=1),
    dict(eps=10**400, min_pts=1),
    dict(eps=1, min_pts=-1),
    dict(eps=1, min_pts=1.5),
    dict(eps=1, min_pts=False),
    dict(eps=1, min_pts=1, metric='hamming'),
    dict(eps=1, min_pts=1, max_dims=0),
    dict(eps=1, min_pts=1, max_dims=9),
])
def test_rejects_bad_parameters(kwargs):
    with pytest.raises(InvalidInput):
        DBSCANClusterer(**kwargs)


def test_accepts_numpy_parameters():
    clusterer = DBSCANClusterer(np.float32(4), np.int64(1))

    assert clusterer.eps == 4.0
    assert clusterer.min_pts == 1


def test_rejects_mismatched_dimensions():
    with pytest.raises(InvalidInput):
        DBSCANClusterer(1, 1).cluster([[0, 0], [1, 1, 1]])


def test_rejects_too_many_dimensions():
    with pytest.raises(InvalidInput):
        DBSCANClusterer(1, 1, max_dims=2).cluster([[0, 0, 0]])


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        DBSCANClusterer(1, 1).cluster([[]])


def test_logs_summary(caplog):
    with caplog.at_level(logging.INFO, logger='dbscan'):
        DBSCANClusterer(4, 1).cluster(DATA)

    assert "11 points, 4 clusters, 1 noise" in caplog.text


def test_large_integer_eps():
    assert DBSCANClusterer(10**300, 1).eps == 1e300
