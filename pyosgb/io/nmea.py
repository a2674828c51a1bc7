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

"""Parsing of GNSS receiver position strings.

Receivers and recorder metadata report positions in a handful of textual
forms. This module turns them into signed decimal degrees:

- degree/minute strings as shown by receiver displays, ``52°09.1461"N``
- raw sentence fields, ``5209.1461`` with a separate hemisphere letter
- ``WGS84,51.74607,N,0.26183,W[,alt]`` location blocks embedded in
  recording metadata

South and west hemispheres are negative.
"""

import math
import re
from typing import Optional

from ..core.data_structures import GeographicCoordinate

DEGREE_SIGN = "°"
MINUTE_SIGN = '"'

LATITUDE = "latitude"
LONGITUDE = "longitude"

# hemisphere letter -> (axis, sign)
_HEMISPHERES = {
    "N": (LATITUDE, 1.0),
    "S": (LATITUDE, -1.0),
    "E": (LONGITUDE, 1.0),
    "W": (LONGITUDE, -1.0),
}
_AXIS_LIMITS = {LATITUDE: 90.0, LONGITUDE: 180.0}

_WGS84_PATTERN = re.compile(
    r"WGS84,\s*(-?\d+(?:\.\d*)?)\s*(?:,\s*([NS]))?\s*,"
    r"\s*(-?\d+(?:\.\d*)?)\s*(?:,\s*([EW]))?"
    r"(?:\s*,\s*(-?\d+(?:\.\d*)?))?"
)


class NMEAParseError(ValueError):
    """Raised when a position string is malformed"""


def _to_float(token: str, what: str, text: str) -> float:
    try:
        value = float(token)
    except ValueError as exc:
        raise NMEAParseError(f"Non-numeric {what} field in {text!r}") from exc
    if not math.isfinite(value) or value < 0:
        raise NMEAParseError(f"Invalid {what} field in {text!r}")
    return value


def _apply_hemisphere(magnitude: float, hemisphere: str, axis: Optional[str], text: str) -> float:
    try:
        hemi_axis, sign = _HEMISPHERES[hemisphere]
    except KeyError:
        raise NMEAParseError(f"Unknown hemisphere {hemisphere!r} in {text!r}") from None

    if axis is not None and hemi_axis != axis:
        raise NMEAParseError(f"Hemisphere {hemisphere!r} is not valid for {axis} in {text!r}")
    if magnitude > _AXIS_LIMITS[hemi_axis]:
        raise NMEAParseError(f"{hemi_axis.capitalize()} out of range in {text!r}")

    return sign * magnitude


def parse_nmea_coordinate(text: str, axis: Optional[str] = None) -> float:
    """Parse a degree/minute/hemisphere string into decimal degrees.

    Parameters
    ----------
    text : str
        Coordinate of the form ``DD°MM.MMMM"H``, e.g. ``002°33.3717"W``
    axis : str, optional
        ``"latitude"`` or ``"longitude"``; when given the hemisphere letter
        must belong to that axis

    Returns
    -------
    float
        Signed decimal degrees, negative for S and W

    Raises
    ------
    NMEAParseError
        If a delimiter is missing, a field is not numeric, the minutes are
        60 or more, or the hemisphere letter is not N/S/E/W

    Examples
    --------
    >>> parse_nmea_coordinate('51°30.0000"N')
    51.5
    """
    if DEGREE_SIGN not in text:
        raise NMEAParseError(f"Missing degree sign in {text!r}")
    degrees_part, remainder = text.strip().split(DEGREE_SIGN, 1)
    if MINUTE_SIGN not in remainder:
        raise NMEAParseError(f"Missing minute delimiter in {text!r}")
    minutes_part, hemisphere = remainder.split(MINUTE_SIGN, 1)

    degrees = _to_float(degrees_part.strip(), "degree", text)
    minutes = _to_float(minutes_part.strip(), "minute", text)
    if minutes >= 60.0:
        raise NMEAParseError(f"Minutes must be below 60 in {text!r}")

    return _apply_hemisphere(degrees + minutes / 60.0, hemisphere.strip().upper(), axis, text)


def parse_nmea(lat_text: str, lon_text: str, height: float = 0.0) -> GeographicCoordinate:
    """Parse a latitude/longitude string pair into a geographic coordinate.

    Parameters
    ----------
    lat_text : str
        Latitude, e.g. ``52°09.1461"N``
    lon_text : str
        Longitude, e.g. ``002°33.3717"W``
    height : float
        Height above the WGS84 ellipsoid in meters

    Returns
    -------
    GeographicCoordinate
        WGS84 position in decimal degrees
    """
    lat = parse_nmea_coordinate(lat_text, LATITUDE)
    lon = parse_nmea_coordinate(lon_text, LONGITUDE)
    return GeographicCoordinate(lat, lon, float(height))


def parse_nmea_field(value: str, hemisphere: str) -> float:
    """Parse a raw sentence field (``DDMM.MMMM`` or ``DDDMM.MMMM``).

    Parameters
    ----------
    value : str
        Field as it appears in a GGA/RMC sentence, e.g. ``"5209.1461"``
    hemisphere : str
        The following hemisphere field, ``N``/``S``/``E``/``W``

    Returns
    -------
    float
        Signed decimal degrees
    """
    text = f"{value},{hemisphere}"
    raw = _to_float(value.strip(), "coordinate", text)
    degrees = math.floor(raw / 100.0)
    minutes = raw - degrees * 100.0
    if minutes >= 60.0:
        raise NMEAParseError(f"Minutes must be below 60 in {text!r}")
    return _apply_hemisphere(degrees + minutes / 60.0, hemisphere.strip().upper(), None, text)


def parse_wgs84_ascii(text: str) -> Optional[GeographicCoordinate]:
    """Extract a location block from recording metadata.

    Recognises ``WGS84,<lat>[,N|S],<lon>[,E|W][,<alt>]``, e.g.
    ``"WGS84,51.74607,N,0.26183,W"``.

    Returns
    -------
    GeographicCoordinate or None
        The position, or None when the text holds no usable location
    """
    match = _WGS84_PATTERN.search(text)
    if match is None:
        return None

    lat = float(match.group(1))
    lon = float(match.group(3))
    if match.group(2) == "S":
        lat = -abs(lat)
    if match.group(4) == "W":
        lon = -abs(lon)
    height = float(match.group(5)) if match.group(5) else 0.0

    if abs(lat) > 90.0 or abs(lon) > 180.0:
        return None
    return GeographicCoordinate(lat, lon, height)
