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
# pylint: disable=invalid-name
"""Distance metrics for dbscan

Every metric takes two Points and returns a non-negative float. Metrics are
pure: the result depends only on the two points passed in.
"""
import numpy as np

from ..error import InvalidInput


def euclidean_distance(p0, p1):
    """Euclidean distance over the coordinates present in both points"""
    n = min(p0.dims, p1.dims)
    return float(np.sqrt(np.sum((p0.coords[:n] - p1.coords[:n])**2)))


def _y(p):
    # 1-D points lie on the x axis
    return p.coords[1] if p.dims > 1 else 0.0


def _delta_2d(p0, p1):
    return abs(p0.coords[0] - p1.coords[0]), abs(_y(p0) - _y(p1))


def euclidean_2d_distance(p0, p1):
    """Euclidean distance on the first two coordinates only"""
    dx, dy = _delta_2d(p0, p1)
    return float(np.hypot(dx, dy))


def approximate_distance(p0, p1):
    """cheap approximation of the 2-D euclidean distance

    Weighted blend of the Manhattan and Chebyshev distances on the first two
    coordinates, within a few percent of the true euclidean distance.
    """
    dx, dy = _delta_2d(p0, p1)
    return float(0.394 * (dx + dy) + 0.554 * max(dx, dy))


METRICS = {
    'euclidean': euclidean_distance,
    'euclidean_2d': euclidean_2d_distance,
    'approximate': approximate_distance,
}


def get_metric(metric):
    """Resolve a metric selector into a callable

    Parameters
    ----------
    metric: str or callable
        name of a built-in metric (a key of METRICS), or any callable taking
        two Points and returning a number

    Returns
    -------
    callable (Point, Point) -> float
    """
    if isinstance(metric, str):
        if metric not in METRICS:
            raise InvalidInput("unknown metric '%s', expected one of %s"
                               % (metric, sorted(METRICS)))
        return METRICS[metric]

    if metric in METRICS.values():
        return metric

    if not callable(metric):
        raise InvalidInput("metric must be a name or a callable, got %r" % (metric,))

    def custom_distance(p0, p1):
        return float(metric(p0, p1))

    custom_distance.__name__ = getattr(metric, '__name__', 'custom_distance')
    return custom_distance
