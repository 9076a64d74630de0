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
"""Point type and cluster labels used by the dbscan engine"""
import numpy as np

from ..error import InvalidInput

# upper bound on the dimensionality of a single point
MAX_DIMS = 8

UNCLASSIFIED = -1
NOISE = -2


class Point(object):
    """A point in feature space together with its cluster label

    Parameters
    ----------
    coords: Array of float
        coordinates of the point, at most MAX_DIMS of them
    label: int
        UNCLASSIFIED, NOISE or a cluster ordinal >= 0
    """

    __slots__ = ('coords', 'label')

    def __init__(self, coords, label=UNCLASSIFIED):
        try:
            raw = np.asarray(coords)
        except (TypeError, ValueError) as err:
            raise InvalidInput("coordinates must be real numbers: %s" % err)
        # numeric strings would cast silently
        if raw.dtype.kind not in 'biuf':
            raise InvalidInput("coordinates must be real numbers, got %r" % (coords,))
        coords = raw.astype(np.float64)

        if coords.ndim != 1:
            raise InvalidInput("a point must be a flat sequence of coordinates, "
                               "got shape %s" % (coords.shape,))
        if not 0 < len(coords) <= MAX_DIMS:
            raise InvalidInput("a point needs between 1 and %d coordinates, got %d"
                               % (MAX_DIMS, len(coords)))
        if not np.all(np.isfinite(coords)):
            raise InvalidInput("coordinates must be finite, got %s" % coords.tolist())

        self.coords = coords
        self.label = label

    @property
    def dims(self):
        return len(self.coords)

    @property
    def is_noise(self):
        return self.label == NOISE

    @property
    def is_classified(self):
        return self.label >= 0

    def to_list(self):
        return [float(c) for c in self.coords]

    def __repr__(self):
        return 'Point(%s, label=%d)' % (self.to_list(), self.label)


def make_points(data):
    """Build fresh unclassified points from raw coordinates

    Parameters
    ----------
    data: Array of Array of float
        one coordinate sequence per point, or a 2-D numpy array

    Returns
    -------
    list of Point, in input order
    """
    return [Point(coords) for coords in data]
