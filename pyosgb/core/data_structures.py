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

"""Core value types for datum and grid conversions"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .constants import *


@dataclass(frozen=True)
class EllipsoidParameters:
    """Reference ellipsoid definition.

    Attributes
    ----------
    semi_major_axis : float
        Equatorial radius in meters
    eccentricity_squared : float
        First eccentricity squared
    semi_minor_axis : float, optional
        Polar radius in meters. Derived from the other two values when omitted.
    name : str
        Human readable name
    """
    semi_major_axis: float
    eccentricity_squared: float
    semi_minor_axis: Optional[float] = None
    name: str = ""

    @property
    def semi_minor(self) -> float:
        """Polar radius in meters"""
        if self.semi_minor_axis is not None:
            return self.semi_minor_axis
        return self.semi_major_axis * np.sqrt(1.0 - self.eccentricity_squared)

    @property
    def third_flattening(self) -> float:
        """n = (a - b) / (a + b), used by the meridional arc series"""
        a, b = self.semi_major_axis, self.semi_minor
        return (a - b) / (a + b)


@dataclass(frozen=True)
class HelmertParameters:
    """Seven parameter similarity transformation between two datums.

    Attributes
    ----------
    tx, ty, tz : float
        Translations in meters
    rx, ry, rz : float
        Rotations in arcseconds
    s : float
        Scale change in parts per million
    """
    tx: float
    ty: float
    tz: float
    rx: float
    ry: float
    rz: float
    s: float

    def inverse(self) -> "HelmertParameters":
        """Return the parameter set for the reverse direction.

        Negating every parameter inverts the linearised transform to within
        a few millimetres, which is well below the accuracy of the
        transformation itself.
        """
        return HelmertParameters(-self.tx, -self.ty, -self.tz,
                                 -self.rx, -self.ry, -self.rz, -self.s)


@dataclass(frozen=True)
class GeographicCoordinate:
    """Geodetic position in decimal degrees.

    Attributes
    ----------
    latitude : float
        Latitude in degrees, positive north, within [-90, 90]
    longitude : float
        Longitude in degrees, positive east, within [-180, 180]
    height : float
        Height above the ellipsoid in meters
    """
    latitude: float
    longitude: float
    height: float = 0.0

    def __post_init__(self):
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude out of range: {self.longitude}")

    @property
    def llh(self) -> np.ndarray:
        """[lat, lon, height] with angles in radians"""
        return np.array([self.latitude * D2R, self.longitude * D2R, self.height])


@dataclass(frozen=True)
class CartesianCoordinate:
    """Earth-centred Cartesian position in meters.

    The ellipsoid the coordinates refer to is implied by the caller.
    """
    x: float
    y: float
    z: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])


@dataclass(frozen=True)
class GridReference:
    """Ordnance Survey National Grid position.

    Attributes
    ----------
    easting : float
        Easting in meters from the false origin
    northing : float
        Northing in meters from the false origin
    code : str
        Lettered grid reference, e.g. ``"TG 51524 13130"``. Empty when the
        position could not be converted to a plausible grid square.
    """
    easting: float
    northing: float
    code: str

    @property
    def valid(self) -> bool:
        """True when the conversion produced a grid reference"""
        return bool(self.code)

    def to_string(self, digits: int = 10) -> str:
        """Format the grid reference at another precision.

        Parameters
        ----------
        digits : int
            Total numeric digits (2, 4, 6, 8 or 10)

        Returns
        -------
        str
            Lettered grid reference, or an empty string if invalid
        """
        from ..coordinate.grid import format_grid_reference
        if not self.valid:
            return ""
        return format_grid_reference(self.easting, self.northing, digits)


# Ellipsoids
WGS84 = EllipsoidParameters(RE_WGS84, E2_WGS84, name="WGS84")
AIRY1830 = EllipsoidParameters(RE_AIRY, E2_AIRY, RP_AIRY, name="Airy1830")

# Datum shift used by the National Grid conversion
WGS84_TO_OSGB36 = HelmertParameters(
    HELMERT_TX, HELMERT_TY, HELMERT_TZ,
    HELMERT_RX, HELMERT_RY, HELMERT_RZ,
    HELMERT_S,
)
OSGB36_TO_WGS84 = WGS84_TO_OSGB36.inverse()
