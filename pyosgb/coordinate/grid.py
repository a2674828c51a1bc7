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

"""Lettered National Grid references

The grid is divided into 500 km squares (first letter) and each of those
into 25 squares of 100 km (second letter). Both letters come from a 5x5
alphabet without ``I``, numbered from the north-west corner::

    A B C D E
    F G H J K
    L M N O P
    Q R S T U
    V W X Y Z

The false origin lies at the south-west corner of square ``SV``.
"""

import math
from typing import Tuple

from ..core.constants import (
    GRID_DIGITS,
    GRID_MAX_EASTING,
    GRID_MAX_NORTHING,
    GRID_SQUARE_100KM,
)

_SKIPPED_LETTER = ord("I") - ord("A")


class GridReferenceError(ValueError):
    """Raised when a grid reference string cannot be decoded"""


def _in_grid(easting: float, northing: float) -> bool:
    if not (math.isfinite(easting) and math.isfinite(northing)):
        return False
    return 0.0 <= easting < GRID_MAX_EASTING and 0.0 <= northing < GRID_MAX_NORTHING


def grid_square(easting: float, northing: float) -> str:
    """Two-letter 100 km square containing a grid position

    Parameters
    ----------
    easting, northing : float
        National Grid coordinates in meters

    Returns
    -------
    str
        Square letters such as ``"TG"``, or an empty string when the
        position lies outside the National Grid
    """
    easting, northing = float(easting), float(northing)
    if not _in_grid(easting, northing):
        return ""

    e100 = int(easting // GRID_SQUARE_100KM)
    n100 = int(northing // GRID_SQUARE_100KM)

    # 500 km square, S (17 before skipping I) holds the false origin
    first = e100 // 5 - 5 * (n100 // 5) + 17
    # 100 km square within it
    second = 20 - 5 * (n100 % 5) + e100 % 5

    if first >= _SKIPPED_LETTER:
        first += 1
    if second >= _SKIPPED_LETTER:
        second += 1

    return chr(first + ord("A")) + chr(second + ord("A"))


def format_grid_reference(easting: float, northing: float, digits: int = 10) -> str:
    """Format a grid position as a lettered grid reference

    Parameters
    ----------
    easting, northing : float
        National Grid coordinates in meters
    digits : int
        Total numeric digits: 10 (1 m), 8 (10 m), 6 (100 m), 4 (1 km)
        or 2 (10 km). Values are truncated, not rounded.

    Returns
    -------
    str
        e.g. ``"TG 51524 13130"``; empty string outside the grid

    Raises
    ------
    ValueError
        If ``digits`` is not one of 2, 4, 6, 8, 10
    """
    if digits not in GRID_DIGITS:
        raise ValueError(f"digits must be one of {GRID_DIGITS}, got {digits}")

    letters = grid_square(easting, northing)
    if not letters:
        return ""

    half = digits // 2
    scale = 10 ** (5 - half)
    e_in = int(math.floor(easting)) % 100000 // scale
    n_in = int(math.floor(northing)) % 100000 // scale

    return f"{letters} {e_in:0{half}d} {n_in:0{half}d}"


def parse_grid_reference(text: str) -> Tuple[float, float]:
    """Decode a lettered grid reference

    Accepts ``"TG 51524 13130"``, ``"TG5152413130"``, ``"tg 515 131"`` or
    a bare square such as ``"TG"``.

    Returns
    -------
    tuple
        (easting, northing) of the south-west corner of the referenced
        square, in meters

    Raises
    ------
    GridReferenceError
        If the letters or digits are malformed or the square lies outside
        the National Grid
    """
    cleaned = text.strip().upper()
    if len(cleaned) < 2 or not cleaned[:2].isalpha():
        raise GridReferenceError(f"Missing grid letters in {text!r}")

    parts = cleaned[2:].split()
    if len(parts) == 0:
        e_digits, n_digits = "", ""
    elif len(parts) == 1:
        if len(parts[0]) % 2:
            raise GridReferenceError(f"Odd number of digits in {text!r}")
        half = len(parts[0]) // 2
        e_digits, n_digits = parts[0][:half], parts[0][half:]
    elif len(parts) == 2:
        e_digits, n_digits = parts
    else:
        raise GridReferenceError(f"Too many fields in {text!r}")

    if len(e_digits) != len(n_digits) or len(e_digits) > 5:
        raise GridReferenceError(f"Easting and northing must have 1-5 matching digits in {text!r}")
    if e_digits and not (e_digits.isdigit() and n_digits.isdigit()):
        raise GridReferenceError(f"Non-numeric digits in {text!r}")

    indices = []
    for letter in cleaned[:2]:
        index = ord(letter) - ord("A")
        if not 0 <= index < 26 or index == _SKIPPED_LETTER:
            raise GridReferenceError(f"Invalid grid letter {letter!r} in {text!r}")
        indices.append(index - 1 if index > _SKIPPED_LETTER else index)
    l1, l2 = indices

    e100 = ((l1 - 2) % 5) * 5 + l2 % 5
    n100 = (19 - (l1 // 5) * 5) - l2 // 5

    easting = e100 * GRID_SQUARE_100KM + float(e_digits.ljust(5, "0"))
    northing = n100 * GRID_SQUARE_100KM + float(n_digits.ljust(5, "0"))

    if not _in_grid(easting, northing):
        raise GridReferenceError(f"Grid square {cleaned[:2]} is outside the National Grid")

    return easting, northing
