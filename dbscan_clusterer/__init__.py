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
"""Density based clustering (DBSCAN) of points in feature space"""
from .error import DBSCANError, ResourceExhausted, InvalidInput
from .clusterer import Clusterer, DBSCANClusterer
from .clustering import (Point, make_points, MAX_DIMS, UNCLASSIFIED, NOISE,
                         euclidean_distance, euclidean_2d_distance,
                         approximate_distance, get_metric, METRICS,
                         region_query, expand, grow_cluster, dbscan,
                         group_by_label)

__version__ = '0.1.0'
