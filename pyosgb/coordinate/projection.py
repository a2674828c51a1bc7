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

"""National Grid Transverse Mercator projection

Forward and inverse projection between OSGB36 latitude/longitude on the
Airy 1830 ellipsoid and National Grid easting/northing, following the
series given in the Ordnance Survey guide to coordinate systems.
"""

import numpy as np
from numba import njit

from ..core.constants import (
    ARC_TOLERANCE,
    D2R,
    E0_OSGB,
    F0_OSGB,
    LAT0_OSGB,
    LON0_OSGB,
    MAX_ARC_ITERATIONS,
    N0_OSGB,
    R2D,
)
from ..core.data_structures import AIRY1830, EllipsoidParameters
from .transforms import TransformError, _scalar_or_array, as_operands

PHI0 = LAT0_OSGB * D2R
LAM0 = LON0_OSGB * D2R


@njit(cache=True)
def meridional_arc(bf0, n, phi0, phi):
    """Meridional arc length from ``phi0`` to ``phi``

    Parameters
    ----------
    bf0 : float
        Semi-minor axis multiplied by the central scale factor (m)
    n : float
        Third flattening (a - b) / (a + b)
    phi0, phi : float or np.ndarray
        Latitudes in radians

    Returns
    -------
    float or np.ndarray
        Arc length in meters
    """
    n2 = n * n
    n3 = n2 * n
    dphi = phi - phi0
    sphi = phi + phi0

    ma = (1.0 + n + 1.25 * n2 + 1.25 * n3) * dphi
    mb = (3.0 * n + 3.0 * n2 + 2.625 * n3) * np.sin(dphi) * np.cos(sphi)
    mc = (1.875 * n2 + 1.875 * n3) * np.sin(2.0 * dphi) * np.cos(2.0 * sphi)
    md = (35.0 / 24.0) * n3 * np.sin(3.0 * dphi) * np.cos(3.0 * sphi)

    return bf0 * (ma - mb + mc - md)


def project_to_grid(lat, lon, round_result: bool = True,
                    ellipsoid: EllipsoidParameters = AIRY1830):
    """Project OSGB36 latitude/longitude onto the National Grid

    Parameters
    ----------
    lat, lon : float or np.ndarray
        OSGB36 latitude and longitude in degrees
    round_result : bool
        Round easting and northing to the nearest metre
    ellipsoid : EllipsoidParameters
        Airy 1830 by default

    Returns
    -------
    tuple
        (easting, northing) in meters

    Examples
    --------
    >>> e, n = project_to_grid(52.65757030, 1.71792158, round_result=False)
    >>> round(e, 3), round(n, 3)
    (651409.903, 313177.27)
    """
    lat, lon = as_operands(lat, lon)
    phi = lat * D2R
    lam = lon * D2R

    e2 = ellipsoid.eccentricity_squared
    af0 = ellipsoid.semi_major_axis * F0_OSGB
    bf0 = ellipsoid.semi_minor * F0_OSGB
    n = ellipsoid.third_flattening

    sin_phi = np.sin(phi)
    cos_phi = np.cos(phi)
    tan2 = np.tan(phi)**2
    tan4 = tan2 * tan2

    nu = af0 / np.sqrt(1.0 - e2 * sin_phi**2)
    rho = nu * (1.0 - e2) / (1.0 - e2 * sin_phi**2)
    eta2 = nu / rho - 1.0
    p = lam - LAM0

    # easting
    IV = nu * cos_phi
    V = nu / 6.0 * cos_phi**3 * (nu / rho - tan2)
    VI = nu / 120.0 * cos_phi**5 * (5.0 - 18.0 * tan2 + tan4 + 14.0 * eta2 - 58.0 * tan2 * eta2)
    easting = E0_OSGB + p * IV + p**3 * V + p**5 * VI

    # northing
    I = meridional_arc(bf0, n, PHI0, phi) + N0_OSGB
    II = nu / 2.0 * sin_phi * cos_phi
    III = nu / 24.0 * sin_phi * cos_phi**3 * (5.0 - tan2 + 9.0 * eta2)
    IIIA = nu / 720.0 * sin_phi * cos_phi**5 * (61.0 - 58.0 * tan2 + tan4)
    northing = I + p**2 * II + p**4 * III + p**6 * IIIA

    if round_result:
        easting = np.round(easting)
        northing = np.round(northing)

    return _scalar_or_array(easting), _scalar_or_array(northing)


def grid_to_latlon(easting, northing, ellipsoid: EllipsoidParameters = AIRY1830,
                   tol: float = ARC_TOLERANCE, max_iter: int = MAX_ARC_ITERATIONS):
    """Inverse projection from the National Grid to OSGB36 latitude/longitude

    Parameters
    ----------
    easting, northing : float or np.ndarray
        Grid coordinates in meters
    ellipsoid : EllipsoidParameters
        Airy 1830 by default
    tol : float
        Residual bound on the meridional arc (m)
    max_iter : int
        Maximum number of latitude refinement passes

    Returns
    -------
    tuple
        (lat, lon) OSGB36 in degrees

    Raises
    ------
    TransformError
        If an input is not finite or the latitude does not converge
    """
    easting, northing = as_operands(easting, northing)
    if not (np.all(np.isfinite(easting)) and np.all(np.isfinite(northing))):
        raise TransformError("Non-finite grid coordinate")

    e2 = ellipsoid.eccentricity_squared
    af0 = ellipsoid.semi_major_axis * F0_OSGB
    bf0 = ellipsoid.semi_minor * F0_OSGB
    n = ellipsoid.third_flattening

    phi = PHI0
    m = 0.0
    for _ in range(max_iter):
        phi = (northing - N0_OSGB - m) / af0 + phi
        m = meridional_arc(bf0, n, PHI0, phi)
        if np.max(np.abs(northing - N0_OSGB - m)) < tol:
            break
    else:
        raise TransformError(f"Inverse projection did not converge within {max_iter} iterations")

    sin_phi = np.sin(phi)
    cos_phi = np.cos(phi)
    tan_phi = np.tan(phi)
    tan2 = tan_phi**2
    tan4 = tan2 * tan2
    tan6 = tan4 * tan2

    nu = af0 / np.sqrt(1.0 - e2 * sin_phi**2)
    rho = af0 * (1.0 - e2) / (1.0 - e2 * sin_phi**2)**1.5
    eta2 = nu / rho - 1.0
    de = easting - E0_OSGB

    VII = tan_phi / (2.0 * rho * nu)
    VIII = tan_phi / (24.0 * rho * nu**3) * (5.0 + 3.0 * tan2 + eta2 - 9.0 * tan2 * eta2)
    IX = tan_phi / (720.0 * rho * nu**5) * (61.0 + 90.0 * tan2 + 45.0 * tan4)
    X = 1.0 / (cos_phi * nu)
    XI = 1.0 / (6.0 * cos_phi * nu**3) * (nu / rho + 2.0 * tan2)
    XII = 1.0 / (120.0 * cos_phi * nu**5) * (5.0 + 28.0 * tan2 + 24.0 * tan4)
    XIIA = 1.0 / (5040.0 * cos_phi * nu**7) * (61.0 + 662.0 * tan2 + 1320.0 * tan4 + 720.0 * tan6)

    lat = phi - VII * de**2 + VIII * de**4 - IX * de**6
    lon = LAM0 + X * de - XI * de**3 + XII * de**5 - XIIA * de**7

    return _scalar_or_array(lat * R2D), _scalar_or_array(lon * R2D)
