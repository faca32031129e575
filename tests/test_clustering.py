# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""Tests for seeded k-means."""

import numpy as np
import pytest

from legibly.measure.clustering import kmeans


def _two_blobs():
    rng = np.random.RandomState(3)
    a = rng.normal(0.0, 0.05, size=(20, 3))
    b = rng.normal(5.0, 0.05, size=(20, 3))
    return np.vstack([a, b])


class TestKMeans:

    def test_separates_blobs(self):
        data = _two_blobs()
        centroids, labels = kmeans(data, data[[0, 20]])
        assert set(labels[:20]) == {0}
        assert set(labels[20:]) == {1}
        np.testing.assert_allclose(centroids[0], data[:20].mean(axis=0))
        np.testing.assert_allclose(centroids[1], data[20:].mean(axis=0))

    def test_deterministic(self):
        data = _two_blobs()
        c1, l1 = kmeans(data, data[[0, 20]])
        c2, l2 = kmeans(data, data[[0, 20]])
        np.testing.assert_array_equal(c1, c2)
        np.testing.assert_array_equal(l1, l2)

    def test_empty_cluster_keeps_centroid(self):
        data = _two_blobs()
        far = np.array([100.0, 100.0, 100.0])
        centroids, labels = kmeans(data, np.vstack([data[0], data[20], far]))
        assert 2 not in labels
        np.testing.assert_array_equal(centroids[2], far)

    def test_does_not_modify_seeds(self):
        data = _two_blobs()
        seeds = data[[0, 20]].copy()
        kmeans(data, seeds)
        np.testing.assert_array_equal(seeds, data[[0, 20]])

    def test_ties_go_to_lower_index(self):
        data = np.array([[0.0, 0.0]])
        _, labels = kmeans(data, np.array([[1.0, 0.0], [-1.0, 0.0]]), max_iter=1)
        assert labels[0] == 0

    def test_shape_mismatch(self):
        with pytest.raises(ValueError):
            kmeans(np.zeros((4, 3)), np.zeros((2, 2)))

    def test_no_centroids(self):
        with pytest.raises(ValueError):
            kmeans(np.zeros((4, 3)), np.zeros((0, 3)))
