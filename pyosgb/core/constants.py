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

"""Datum, ellipsoid and National Grid constants"""

import numpy as np

# Unit conversions
R2D = 180.0 / np.pi            # radians to degrees
D2R = np.pi / 180.0            # degrees to radians
ARCSEC2RAD = D2R / 3600.0      # arcseconds to radians

# Earth Parameters (WGS84)
RE_WGS84 = 6378137.0               # earth semimajor axis (m)
E2_WGS84 = 0.00669438037928458     # eccentricity squared

# Airy 1830 ellipsoid (OSGB36)
RE_AIRY = 6377563.396              # semimajor axis (m)
RP_AIRY = 6356256.91               # semiminor axis (m)
E2_AIRY = 0.0066705397616          # eccentricity squared

# Helmert parameters WGS84 -> OSGB36
HELMERT_TX = -446.448              # translation x (m)
HELMERT_TY = 125.157               # translation y (m)
HELMERT_TZ = -542.06               # translation z (m)
HELMERT_RX = -0.1502               # rotation x (arcsec)
HELMERT_RY = -0.247                # rotation y (arcsec)
HELMERT_RZ = -0.8421               # rotation z (arcsec)
HELMERT_S = 20.4894                # scale (ppm)

# National Grid Transverse Mercator projection
F0_OSGB = 0.9996012717             # scale factor on central meridian
E0_OSGB = 400000.0                 # easting of false origin (m)
N0_OSGB = -100000.0                # northing of false origin (m)
LAT0_OSGB = 49.0                   # latitude of true origin (deg)
LON0_OSGB = -2.0                   # longitude of true origin (deg)

# National Grid extent and lettered squares
GRID_MAX_EASTING = 700000.0        # exclusive (m)
GRID_MAX_NORTHING = 1300000.0      # exclusive (m)
GRID_SQUARE_500KM = 500000.0
GRID_SQUARE_100KM = 100000.0
GRID_DIGITS = (2, 4, 6, 8, 10)     # allowed numeric precisions

# Solver limits
LAT_TOLERANCE = 1e-3               # latitude refinement bound (rad)
MAX_LAT_ITERATIONS = 20
ARC_TOLERANCE = 1e-5               # meridional arc residual (m)
MAX_ARC_ITERATIONS = 100
