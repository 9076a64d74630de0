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
"""Command line front end: cluster a JSON array of points"""
import argparse
import json
import logging
import sys

from .clusterer import DBSCANClusterer
from .clustering.distance import METRICS
from .error import InvalidInput, ResourceExhausted


def build_parser():
    parser = argparse.ArgumentParser(
        prog='dbscan-clusterer',
        description='Cluster points with DBSCAN. Reads a JSON array of '
                    'coordinate arrays and writes the points grouped by label.')
    parser.add_argument('input', nargs='?', default='-',
                        help='JSON file with the points (default: stdin)')
    parser.add_argument('--eps', type=float, required=True,
                        help='neighborhood radius')
    parser.add_argument('--min-pts', type=int, required=True,
                        help='neighbors needed for a core point')
    parser.add_argument('--metric', choices=sorted(METRICS), default='euclidean',
                        help='distance metric (default: euclidean)')
    parser.add_argument('--labels', action='store_true',
                        help='print one label per point instead of the grouping')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='log every neighborhood query')
    return parser


def load_points(path):
    if path == '-':
        return json.load(sys.stdin)
    with open(path) as f:
        return json.load(f)


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    try:
        data = load_points(args.input)
        if not isinstance(data, list):
            raise InvalidInput("expected a JSON array of points")
        clusterer = DBSCANClusterer(args.eps, args.min_pts, metric=args.metric)
        if args.labels:
            result = clusterer.fit_predict(data).tolist()
        else:
            result = {str(label): pts for label, pts in clusterer.cluster(data).items()}
    except (InvalidInput, ValueError, OSError) as err:
        print('error: %s' % err, file=sys.stderr)
        return 2
    except ResourceExhausted as err:
        print('error: %s' % err, file=sys.stderr)
        return 1

    json.dump(result, sys.stdout)
    sys.stdout.write('\n')
    return 0


if __name__ == '__main__':
    sys.exit(main())
