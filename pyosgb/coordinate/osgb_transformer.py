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

"""WGS84 -> OSGB36 National Grid conversion pipeline"""

import logging
from typing import Optional, Union

import numpy as np

from ..core.constants import D2R, LAT_TOLERANCE, MAX_LAT_ITERATIONS, R2D
from ..core.data_structures import (
    AIRY1830,
    WGS84,
    WGS84_TO_OSGB36,
    EllipsoidParameters,
    GeographicCoordinate,
    GridReference,
    HelmertParameters,
)
from ..io.nmea import parse_nmea
from .grid import format_grid_reference, parse_grid_reference
from .helmert import helmert_transform
from .projection import grid_to_latlon, project_to_grid
from .transforms import TransformError, as_operands, cartesian2geodetic, geodetic2cartesian

logger = logging.getLogger(__name__)

_INVALID = float("nan")


class OSGBTransformer:
    """Converts GNSS positions to Ordnance Survey National Grid references

    Holds only the datum definition. Calls keep no state between them.

    Stages:

    1. geodetic -> Cartesian on the source ellipsoid
    2. Helmert shift to the target datum
    3. Cartesian -> geodetic on the target ellipsoid (iterative latitude)
    4. Transverse Mercator projection to easting/northing
    5. lettered grid reference
    """

    def __init__(self, helmert: HelmertParameters = WGS84_TO_OSGB36,
                 source: EllipsoidParameters = WGS84,
                 target: EllipsoidParameters = AIRY1830,
                 tol: float = LAT_TOLERANCE,
                 max_iter: int = MAX_LAT_ITERATIONS):
        """Initialize transformer

        Parameters:
        -----------
        helmert : HelmertParameters
            Datum shift from ``source`` to ``target``
        source : EllipsoidParameters
            Ellipsoid of the input positions (WGS84)
        target : EllipsoidParameters
            Ellipsoid of the National Grid (Airy 1830)
        tol : float
            Latitude convergence bound for the back conversion (rad)
        max_iter : int
            Maximum latitude refinement passes
        """
        self._helmert = helmert
        self._source = source
        self._target = target
        self._tol = tol
        self._max_iter = max_iter

    @property
    def helmert(self) -> HelmertParameters:
        return self._helmert

    @property
    def source(self) -> EllipsoidParameters:
        return self._source

    @property
    def target(self) -> EllipsoidParameters:
        return self._target

    def to_osgb36(self, lat, lon, height=0.0):
        """Shift WGS84 positions onto the OSGB36 datum

        Parameters:
        -----------
        lat, lon : float or np.ndarray
            WGS84 latitude and longitude in degrees
        height : float or np.ndarray
            Height above the WGS84 ellipsoid in meters

        Returns:
        --------
        tuple
            (lat, lon, height) on OSGB36, angles in degrees

        Raises:
        -------
        TransformError
            If the back conversion does not produce a finite latitude
        """
        lat, lon, height = as_operands(lat, lon, height)
        x, y, z = geodetic2cartesian(lat * D2R, lon * D2R, height, self._source)
        x, y, z = helmert_transform(x, y, z, self._helmert)
        lat2, lon2, h2 = cartesian2geodetic(x, y, z, self._target, self._tol, self._max_iter)
        return lat2 * R2D, lon2 * R2D, h2

    def project(self, lat, lon, height=0.0):
        """Convert WGS84 positions to National Grid easting/northing

        Returns:
        --------
        tuple
            (easting, northing) rounded to whole meters
        """
        lat2, lon2, _ = self.to_osgb36(lat, lon, height)
        return project_to_grid(lat2, lon2, round_result=True, ellipsoid=self._target)

    def to_grid_reference(self, lat: float, lon: float, height: float = 0.0,
                          digits: int = 10) -> GridReference:
        """Convert a WGS84 position to a National Grid reference

        Parameters:
        -----------
        lat, lon : float
            WGS84 latitude and longitude in decimal degrees
        height : float
            Height above the WGS84 ellipsoid in meters
        digits : int
            Numeric precision of the lettered code

        Returns:
        --------
        GridReference
            ``valid`` is False when the position cannot be expressed as a
            grid reference (out of range, non-finite or outside the grid)
        """
        if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0 and np.isfinite(height)):
            logger.warning(f"Rejected position lat={lat}, lon={lon}, height={height}")
            return GridReference(_INVALID, _INVALID, "")

        try:
            easting, northing = self.project(lat, lon, height)
        except TransformError as exc:
            logger.warning(f"Conversion failed for lat={lat}, lon={lon}: {exc}")
            return GridReference(_INVALID, _INVALID, "")

        code = format_grid_reference(easting, northing, digits)
        if not code:
            logger.warning(f"Position lat={lat}, lon={lon} maps to E={easting}, N={northing}, "
                           f"outside the National Grid")
        return GridReference(easting, northing, code)

    def convert(self, lat_text: str, lon_text: str, height: float = 0.0,
                digits: int = 10) -> GridReference:
        """Parse degree/minute strings and convert them to a grid reference

        Raises:
        -------
        NMEAParseError
            If either string is malformed
        """
        fix = parse_nmea(lat_text, lon_text, height)
        return self.to_grid_reference(fix.latitude, fix.longitude, fix.height, digits)

    def from_grid_reference(self, grid: Union[str, float], northing: Optional[float] = None,
                            height: float = 0.0) -> GeographicCoordinate:
        """Convert a grid reference back to a WGS84 position

        Parameters:
        -----------
        grid : str or float
            Lettered grid reference, or an easting when ``northing`` is given
        northing : float, optional
            Northing in meters
        height : float
            Height above the OSGB36 ellipsoid in meters

        Returns:
        --------
        GeographicCoordinate
            WGS84 position of the grid point (south-west corner of the
            square for a lettered reference)

        Raises:
        -------
        GridReferenceError
            If a lettered reference is malformed
        TransformError
            If the inverse conversion fails
        """
        if northing is None:
            easting, northing = parse_grid_reference(grid)
        else:
            easting = float(grid)

        lat, lon = grid_to_latlon(easting, northing, ellipsoid=self._target)
        x, y, z = geodetic2cartesian(lat * D2R, lon * D2R, height, self._target)
        x, y, z = helmert_transform(x, y, z, self._helmert.inverse())
        lat2, lon2, h2 = cartesian2geodetic(x, y, z, self._source, self._tol, self._max_iter)
        return GeographicCoordinate(lat2 * R2D, lon2 * R2D, h2)


_default_transformer = OSGBTransformer()


def to_grid_reference(lat: float, lon: float, height: float = 0.0, digits: int = 10) -> GridReference:
    """Convert a WGS84 position to a National Grid reference"""
    return _default_transformer.to_grid_reference(lat, lon, height, digits)


def convert(lat_text: str, lon_text: str, height: float = 0.0, digits: int = 10) -> GridReference:
    """Convert degree/minute position strings to a National Grid reference

    Examples
    --------
    >>> convert('52°39.4500"N', '001°43.0620"E').code
    'TG 51524 13130'
    """
    return _default_transformer.convert(lat_text, lon_text, height, digits)


def from_grid_reference(grid: Union[str, float], northing: Optional[float] = None,
                        height: float = 0.0) -> GeographicCoordinate:
    """Convert a grid reference back to a WGS84 position"""
    return _default_transformer.from_grid_reference(grid, northing, height)


def gps_to_grid_ref(latitude: float, longitude: float) -> str:
    """Grid reference string for a GPS fix, empty when it cannot be converted"""
    return to_grid_reference(latitude, longitude, 0.0).code
