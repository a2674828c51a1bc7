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

"""Geodetic <-> Cartesian conversion on an arbitrary ellipsoid"""

import logging

import numpy as np
from numba import njit

from ..core.constants import D2R, LAT_TOLERANCE, MAX_LAT_ITERATIONS, R2D
from ..core.data_structures import (
    AIRY1830,
    WGS84,
    CartesianCoordinate,
    EllipsoidParameters,
    GeographicCoordinate,
)

logger = logging.getLogger(__name__)


class TransformError(ValueError):
    """Raised when a conversion stage cannot produce a finite result"""


def as_operands(*values):
    """Prepare numeric inputs for the conversion kernels.

    Scalars come back as Python floats. If any input is array-like, all
    inputs are broadcast against each other and returned as float64 arrays.
    """
    if all(np.ndim(v) == 0 for v in values):
        return tuple(float(v) for v in values)
    arrays = np.broadcast_arrays(*[np.asarray(v, dtype=np.float64) for v in values])
    return tuple(np.array(a, dtype=np.float64) for a in arrays)


def _scalar_or_array(value):
    return float(value) if np.ndim(value) == 0 else value


@njit(cache=True)
def _geodetic2cartesian_kernel(lat, lon, h, a, e2):
    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    v = a / np.sqrt(1.0 - e2 * sin_lat * sin_lat)
    x = (v + h) * cos_lat * np.cos(lon)
    y = (v + h) * cos_lat * np.sin(lon)
    z = ((1.0 - e2) * v + h) * sin_lat
    return x, y, z


def geodetic2cartesian(lat, lon, h=0.0, ellipsoid: EllipsoidParameters = WGS84):
    """Convert geodetic coordinates to Earth-centred Cartesian coordinates

    Parameters
    ----------
    lat, lon : float or np.ndarray
        Latitude and longitude in radians
    h : float or np.ndarray
        Height above the ellipsoid in meters
    ellipsoid : EllipsoidParameters
        Reference ellipsoid, WGS84 by default

    Returns
    -------
    tuple
        (x, y, z) in meters

    Notes
    -----
    Closed form, no iteration. NaN inputs propagate to the outputs.

    Examples
    --------
    >>> x, y, z = geodetic2cartesian(0.0, 0.0, 0.0)
    >>> x
    6378137.0
    """
    lat, lon, h = as_operands(lat, lon, h)
    return _geodetic2cartesian_kernel(lat, lon, h,
                                      ellipsoid.semi_major_axis,
                                      ellipsoid.eccentricity_squared)


def cartesian2geodetic(x, y, z, ellipsoid: EllipsoidParameters = AIRY1830,
                       tol: float = LAT_TOLERANCE, max_iter: int = MAX_LAT_ITERATIONS):
    """Convert Earth-centred Cartesian coordinates to geodetic coordinates

    Longitude is closed form. Latitude is found by fixed-point iteration
    seeded with ``atan(z / (p (1 - e2)))``; every pass recomputes the prime
    vertical radius from the current estimate and refines
    ``lat = atan((z + e2 v sin(lat)) / p)`` until the change is at most
    ``tol``.

    Parameters
    ----------
    x, y, z : float or np.ndarray
        Cartesian coordinates in meters
    ellipsoid : EllipsoidParameters
        Reference ellipsoid, Airy 1830 by default
    tol : float
        Latitude convergence bound (rad)
    max_iter : int
        Maximum number of refinement passes

    Returns
    -------
    tuple
        (lat, lon, h): latitude and longitude in radians, ellipsoidal
        height in meters

    Raises
    ------
    TransformError
        If any input is NaN or infinite, or the latitude does not converge
        within ``max_iter`` passes
    """
    x, y, z = as_operands(x, y, z)
    if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y)) and np.all(np.isfinite(z))):
        raise TransformError("Non-finite Cartesian coordinate")

    a = ellipsoid.semi_major_axis
    e2 = ellipsoid.eccentricity_squared

    # atan2 keeps the quadrant for longitudes beyond +-90 deg
    lon = np.arctan2(y, x)

    p = np.sqrt(x * x + y * y)
    lat = np.arctan2(z, p * (1.0 - e2))

    for iteration in range(1, max_iter + 1):
        v = a / np.sqrt(1.0 - e2 * np.sin(lat)**2)
        lat_next = np.arctan2(z + e2 * v * np.sin(lat), p)
        delta = np.max(np.abs(lat_next - lat))
        lat = lat_next
        if delta <= tol:
            logger.debug(f"Latitude converged after {iteration} iteration(s), delta={delta:.3e} rad")
            break
    else:
        raise TransformError(f"Latitude did not converge within {max_iter} iterations")

    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    v = a / np.sqrt(1.0 - e2 * sin_lat**2)
    with np.errstate(divide="ignore", invalid="ignore"):
        # near the poles cos(lat) vanishes, use the z component instead
        h = np.where(np.abs(cos_lat) > 1e-10,
                     p / cos_lat - v,
                     np.abs(z) - v * (1.0 - e2))

    return _scalar_or_array(lat), _scalar_or_array(lon), _scalar_or_array(h)


def geographic_to_cartesian(coord: GeographicCoordinate,
                            ellipsoid: EllipsoidParameters = WGS84) -> CartesianCoordinate:
    """Convert a geographic coordinate (degrees) to Cartesian on ``ellipsoid``"""
    x, y, z = geodetic2cartesian(coord.latitude * D2R, coord.longitude * D2R,
                                 coord.height, ellipsoid)
    return CartesianCoordinate(x, y, z)


def cartesian_to_geographic(cart: CartesianCoordinate,
                            ellipsoid: EllipsoidParameters = AIRY1830,
                            tol: float = LAT_TOLERANCE,
                            max_iter: int = MAX_LAT_ITERATIONS) -> GeographicCoordinate:
    """Convert a Cartesian coordinate on ``ellipsoid`` to degrees"""
    lat, lon, h = cartesian2geodetic(cart.x, cart.y, cart.z, ellipsoid, tol, max_iter)
    return GeographicCoordinate(lat * R2D, lon * R2D, h)
