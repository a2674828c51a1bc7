# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Datum transformation and National Grid projection

This module provides the conversion pipeline from GNSS positions to
Ordnance Survey National Grid references:

- Geodetic <-> Cartesian conversion on any ellipsoid
- 7-parameter Helmert datum shift (WGS84 <-> OSGB36)
- Transverse Mercator projection onto the National Grid and its inverse
- Lettered grid reference formatting and parsing
- Batch conversion of pandas tables
"""

# Pipeline
from .batch import convert_dataframe

# Lettered grid references
from .grid import GridReferenceError, format_grid_reference, grid_square, parse_grid_reference

# Datum shift
from .helmert import helmert_transform, osgb36_to_wgs84, transform_cartesian, wgs84_to_osgb36
from .osgb_transformer import (
    OSGBTransformer,
    convert,
    from_grid_reference,
    gps_to_grid_ref,
    to_grid_reference,
)

# Projection
from .projection import grid_to_latlon, meridional_arc, project_to_grid

# Geodetic <-> Cartesian
from .transforms import (
    TransformError,
    cartesian2geodetic,
    cartesian_to_geographic,
    geodetic2cartesian,
    geographic_to_cartesian,
)
