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

"""Core constants and value types.

This module provides the fixed coordinate-system definition used by the
conversion pipeline:

- **Constants**: WGS84 and Airy 1830 ellipsoids, the WGS84 -> OSGB36 Helmert
  parameter set, National Grid projection origin and extent, solver limits
- **Data Structures**: immutable value types for geographic, Cartesian and
  grid positions together with the named ellipsoid and Helmert instances

Example Usage:
    >>> from pyosgb.core import *
    >>>
    >>> fix = GeographicCoordinate(52.6575, 1.7177, 0.0)
    >>> AIRY1830.semi_minor
    6356256.91
"""

from .constants import *
from .data_structures import *
