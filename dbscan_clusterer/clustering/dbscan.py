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
"""
dbscan.py: density based clustering of Points

* brute force neighbor scan, O(n^2) distance evaluations in the worst case
* labels are written in place on the Points; coordinates are never touched
"""
import logging

from .distance import euclidean_distance
from .point import UNCLASSIFIED, NOISE
from ..error import ResourceExhausted

logger = logging.getLogger('dbscan')


def region_query(points, index, epsilon, metric):
    """Find the eps-neighborhood of one point

    Parameters
    ----------
    points: list of Point
        the whole data set
    index: int
        index of the pivot point
    epsilon: float
        neighborhood radius, inclusive
    metric: callable
        (Point, Point) -> float

    Returns
    -------
    indexes of all other points within epsilon of the pivot, ascending
    """
    pivot = points[index]

    try:
        neighbors = []
        for i in range(0, len(points)):
            if i == index:
                continue
            if metric(pivot, points[i]) <= epsilon:
                neighbors.append(i)
    except MemoryError:
        raise ResourceExhausted("out of memory while collecting neighbors of point %d"
                                % index)

    logger.debug("point %d has %d neighbors", index, len(neighbors))
    return neighbors


def grow_cluster(points, seeds, cluster_id, epsilon, min_points, metric):
    """Spread a cluster from its seed queue

    The queue is drained to exhaustion while it grows: every seed that turns
    out to be a core point pushes its unclassified neighbors to the back.
    Noise reached by a core point becomes a border point of this cluster but
    is never expanded itself.
    """
    i = 0
    while i < len(seeds):
        neighbors = region_query(points, seeds[i], epsilon, metric)

        if len(neighbors) >= min_points:
            for n in neighbors:
                point = points[n]
                if point.label == UNCLASSIFIED:
                    try:
                        seeds.append(n)
                    except MemoryError:
                        raise ResourceExhausted("out of memory while growing cluster %d"
                                                % cluster_id)
                    point.label = cluster_id
                elif point.label == NOISE:
                    point.label = cluster_id

        i += 1


def expand(points, index, cluster_id, epsilon, min_points, metric):
    """Classify one unvisited point and grow a cluster from it if it is core

    Returns
    -------
    True if the point was a core point and cluster_id is now in use,
    False if it was marked as noise
    """
    seeds = region_query(points, index, epsilon, metric)

    if len(seeds) < min_points:
        points[index].label = NOISE
        return False

    points[index].label = cluster_id
    for n in seeds:
        points[n].label = cluster_id

    logger.debug("cluster %d started at point %d with %d seeds",
                 cluster_id, index, len(seeds))
    grow_cluster(points, seeds, cluster_id, epsilon, min_points, metric)
    return True


def dbscan(points, epsilon, min_points, metric=euclidean_distance):
    """Label every point with a cluster ordinal or NOISE

    Clusters are numbered 0, 1, 2, ... in the order they are discovered.
    If the run fails, all labels are reset to UNCLASSIFIED before the error
    is re-raised.

    Parameters
    ----------
    points: list of Point
        data set, labels are updated in place
    epsilon: float
        neighborhood radius
    min_points: int
        neighbors (the point itself excluded) needed to make a core point
    metric: callable
        (Point, Point) -> float

    Returns
    -------
    number of clusters found
    """
    crnt_cluster = 0

    try:
        for index in range(0, len(points)):
            if points[index].label != UNCLASSIFIED:
                continue

            if expand(points, index, crnt_cluster, epsilon, min_points, metric):
                crnt_cluster += 1
    except Exception:
        for point in points:
            point.label = UNCLASSIFIED
        raise

    logger.info("dbscan: %d points, %d clusters, %d noise",
                len(points), crnt_cluster, sum(1 for p in points if p.is_noise))
    return crnt_cluster


def group_by_label(points):
    """Group point coordinates by label

    Returns
    -------
    dict mapping each label (cluster ordinal or NOISE) to the coordinates of
    its points, in their original order
    """
    groups = {}
    for point in points:
        groups.setdefault(point.label, []).append(point.to_list())
    return groups
