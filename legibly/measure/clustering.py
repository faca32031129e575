# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Deterministic k-means for picking diverse representatives.

Unlike random-restart k-means, centroids are seeded by the caller (the
suggestion engine seeds them from its best-scoring candidates), so the
same candidates always produce the same clusters.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


def kmeans(
    data: ArrayLike,
    initial_centroids: ArrayLike,
    max_iter: int = 10,
) -> tuple[NDArray[np.float64], NDArray[np.int64]]:
    """
    Vectorized k-means with fixed initial centroids.

    Assignment uses squared Euclidean distance; ties go to the lower
    cluster index. A cluster that loses all its members keeps its previous
    centroid.

    Args:
        data: Array of shape (N, D)
        initial_centroids: Array of shape (k, D)
        max_iter: Maximum assignment/update rounds

    Returns:
        (centroids, labels) where:
        - centroids: (k, D) array of cluster centers
        - labels: (N,) array of cluster assignments from the last round
    """
    data = np.asarray(data, dtype=np.float64)
    centroids = np.array(initial_centroids, dtype=np.float64)
    if data.ndim != 2 or centroids.ndim != 2 or data.shape[1] != centroids.shape[1]:
        raise ValueError(
            f"Expected (N, D) data and (k, D) centroids, got {data.shape} and {centroids.shape}"
        )
    if len(centroids) == 0:
        raise ValueError("Need at least one centroid")

    k = len(centroids)
    labels = np.full(len(data), -1, dtype=np.int64)

    for _ in range(max_iter):
        old_labels = labels

        # (N, k) squared distances via broadcasting
        dists = np.sum(
            (data[:, np.newaxis, :] - centroids[np.newaxis, :, :]) ** 2,
            axis=2,
        )
        labels = np.argmin(dists, axis=1)

        if np.array_equal(labels, old_labels):
            break

        for j in range(k):
            mask = labels == j
            if np.any(mask):
                centroids[j] = data[mask].mean(axis=0)

    return centroids, labels
