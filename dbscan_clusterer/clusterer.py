# Licensed to the Apache Software Foundation (ASF) under one
# or more contributor license agreements.  See the NOTICE file
# distributed with this work for additional information
# regarding copyright ownership.  The ASF licenses this file
# to you under the Apache License, Version 2.0 (the
# "License"); you may not use this file except in compliance
# with the License.  You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing,
# software distributed under the License is distributed on an
# "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
# KIND, either express or implied.  See the License for the
# specific language governing permissions and limitations
# under the License.
# pylint: disable=invalid-name,abstract-method
"""Clusterers that group raw coordinate data

A clusterer turns plain coordinate sequences into Points, runs the engine on
them and hands the grouping back in plain Python types.
"""
import logging
import math
import numbers

import numpy as np

from .clustering.dbscan import dbscan, group_by_label
from .clustering.distance import get_metric
from .clustering.point import make_points, MAX_DIMS
from .error import InvalidInput

logger = logging.getLogger('dbscan')


class Clusterer(object):
    """Base class for clusterers

    A clusterer partitions a set of points into groups and reports the
    grouping by label.
    """

    def cluster(self, data):
        """Group a set of points

        Parameters
        ----------
        data: Array of Array of float
            coordinates, one sequence per point

        Returns
        -------
        dict mapping each label to the coordinates of its points
        """
        raise NotImplementedError()

    def fit_predict(self, data):
        """Label each point

        Returns
        -------
        numpy array with one integer label per input point
        """
        raise NotImplementedError()


class DBSCANClusterer(Clusterer):
    """Clusterer that uses DBSCAN

    Parameters
    ----------
    eps: float
        neighborhood radius, two points are neighbors if their distance is <= eps
    min_pts: int
        number of other points within eps that makes a point a core point
    metric: str or callable
        name of a built-in metric or a callable (Point, Point) -> float
    max_dims: int
        largest dimensionality accepted for the input points
    """

    def __init__(self, eps, min_pts, metric='euclidean', max_dims=MAX_DIMS):
        if isinstance(eps, bool) or not isinstance(eps, numbers.Real):
            raise InvalidInput("eps must be a real number, got %r" % (eps,))
        try:
            eps_value = float(eps)
        except OverflowError:
            raise InvalidInput("eps is too large, got %r" % (eps,))
        if not math.isfinite(eps_value) or eps_value < 0:
            raise InvalidInput("eps must be finite and >= 0, got %r" % (eps,))
        if isinstance(min_pts, bool) or not isinstance(min_pts, numbers.Integral) \
                or min_pts < 0:
            raise InvalidInput("min_pts must be a non-negative integer, got %r" % (min_pts,))
        if isinstance(max_dims, bool) or not isinstance(max_dims, numbers.Integral) \
                or not 0 < max_dims <= MAX_DIMS:
            raise InvalidInput("max_dims must be between 1 and %d, got %r"
                               % (MAX_DIMS, max_dims))

        self.eps = eps_value
        self.min_pts = int(min_pts)
        self.metric = get_metric(metric)
        self.max_dims = int(max_dims)
        self.n_clusters_ = None

    def _run(self, data):
        points = make_points(data)

        if points:
            dims = points[0].dims
            for i, point in enumerate(points):
                if point.dims != dims:
                    raise InvalidInput("point %d has %d coordinates, expected %d"
                                       % (i, point.dims, dims))
            if dims > self.max_dims:
                raise InvalidInput("points have %d coordinates, at most %d allowed"
                                   % (dims, self.max_dims))

        logger.debug("clustering %d points with eps=%g min_pts=%d metric=%s",
                     len(points), self.eps, self.min_pts, self.metric.__name__)
        self.n_clusters_ = dbscan(points, self.eps, self.min_pts, self.metric)
        return points

    def cluster(self, data):
        return group_by_label(self._run(data))

    def fit_predict(self, data):
        points = self._run(data)
        return np.array([p.label for p in points], dtype=np.int64)
