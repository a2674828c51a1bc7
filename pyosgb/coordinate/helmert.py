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

"""Seven parameter Helmert datum transformation"""

from numba import njit

from ..core.constants import ARCSEC2RAD, LAT_TOLERANCE, MAX_LAT_ITERATIONS
from ..core.data_structures import (
    AIRY1830,
    OSGB36_TO_WGS84,
    WGS84,
    WGS84_TO_OSGB36,
    CartesianCoordinate,
    GeographicCoordinate,
    HelmertParameters,
)
from .transforms import as_operands, cartesian_to_geographic, geographic_to_cartesian


@njit(cache=True)
def _helmert_kernel(x, y, z, tx, ty, tz, xrot, yrot, zrot, sf):
    hx = x + x * sf - y * zrot + z * yrot + tx
    hy = x * zrot + y + y * sf - z * xrot + ty
    hz = -x * yrot + y * xrot + z + z * sf + tz
    return hx, hy, hz


def helmert_transform(x, y, z, params: HelmertParameters = WGS84_TO_OSGB36):
    """Apply a linearised 7-parameter Helmert transformation

    Uses the small-angle form::

        x' = x (1 + s) - y rz + z ry + tx
        y' = x rz + y (1 + s) - z rx + ty
        z' = -x ry + y rx + z (1 + s) + tz

    Parameters
    ----------
    x, y, z : float or np.ndarray
        Cartesian coordinates in the source datum (m)
    params : HelmertParameters
        Rotations in arcseconds, scale in ppm. WGS84 -> OSGB36 by default.

    Returns
    -------
    tuple
        (x, y, z) in the target datum (m)
    """
    x, y, z = as_operands(x, y, z)
    return _helmert_kernel(x, y, z,
                           params.tx, params.ty, params.tz,
                           params.rx * ARCSEC2RAD,
                           params.ry * ARCSEC2RAD,
                           params.rz * ARCSEC2RAD,
                           params.s * 1e-6)


def transform_cartesian(cart: CartesianCoordinate,
                        params: HelmertParameters = WGS84_TO_OSGB36) -> CartesianCoordinate:
    """Shift a Cartesian coordinate between datums"""
    return CartesianCoordinate(*helmert_transform(cart.x, cart.y, cart.z, params))


def wgs84_to_osgb36(coord: GeographicCoordinate, tol: float = LAT_TOLERANCE,
                    max_iter: int = MAX_LAT_ITERATIONS) -> GeographicCoordinate:
    """Convert a WGS84 position to OSGB36 latitude, longitude and height"""
    cart = transform_cartesian(geographic_to_cartesian(coord, WGS84), WGS84_TO_OSGB36)
    return cartesian_to_geographic(cart, AIRY1830, tol, max_iter)


def osgb36_to_wgs84(coord: GeographicCoordinate, tol: float = LAT_TOLERANCE,
                    max_iter: int = MAX_LAT_ITERATIONS) -> GeographicCoordinate:
    """Convert an OSGB36 position to WGS84 latitude, longitude and height"""
    cart = transform_cartesian(geographic_to_cartesian(coord, AIRY1830), OSGB36_TO_WGS84)
    return cartesian_to_geographic(cart, WGS84, tol, max_iter)
