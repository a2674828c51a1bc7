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

"""Vectorised grid reference conversion for tables of fixes"""

import logging
from typing import Optional

import numpy as np
import pandas as pd

from .grid import format_grid_reference
from .osgb_transformer import OSGBTransformer
from .transforms import TransformError

logger = logging.getLogger(__name__)


def convert_dataframe(df: pd.DataFrame, lat_col: str = 'latitude', lon_col: str = 'longitude',
                      height_col: Optional[str] = None, digits: int = 10,
                      transformer: Optional[OSGBTransformer] = None) -> pd.DataFrame:
    """Add National Grid columns to a table of WGS84 fixes

    Parameters
    ----------
    df : pd.DataFrame
        Table with latitude/longitude columns in decimal degrees
    lat_col, lon_col : str
        Names of the latitude and longitude columns
    height_col : str, optional
        Name of an ellipsoidal height column; zero height when omitted
    digits : int
        Numeric precision of the lettered codes
    transformer : OSGBTransformer, optional
        Conversion to use, the default WGS84 -> OSGB36 transformer otherwise

    Returns
    -------
    pd.DataFrame
        Copy of ``df`` with ``easting``, ``northing`` and ``grid_ref``
        columns. Rows that cannot be converted get NaN and an empty string.
    """
    for col in (lat_col, lon_col) + ((height_col,) if height_col else ()):
        if col not in df.columns:
            raise KeyError(f"Column not found: {col}")

    transformer = transformer or OSGBTransformer()
    out = df.copy()

    lat = pd.to_numeric(df[lat_col], errors='coerce').to_numpy(dtype=np.float64)
    lon = pd.to_numeric(df[lon_col], errors='coerce').to_numpy(dtype=np.float64)
    if height_col:
        height = pd.to_numeric(df[height_col], errors='coerce').to_numpy(dtype=np.float64)
    else:
        height = np.zeros(len(df))

    easting = np.full(len(df), np.nan)
    northing = np.full(len(df), np.nan)

    with np.errstate(invalid='ignore'):
        mask = (np.isfinite(lat) & np.isfinite(lon) & np.isfinite(height)
                & (np.abs(lat) <= 90.0) & (np.abs(lon) <= 180.0))

    if mask.any():
        try:
            easting[mask], northing[mask] = transformer.project(lat[mask], lon[mask], height[mask])
        except TransformError as exc:
            logger.warning(f"Batch conversion failed: {exc}")
            easting[:] = np.nan
            northing[:] = np.nan

    codes = [format_grid_reference(e, n, digits) for e, n in zip(easting, northing)]
    skipped = sum(1 for code in codes if not code)
    if skipped:
        logger.warning(f"{skipped} of {len(df)} rows could not be converted to grid references")

    out['easting'] = easting
    out['northing'] = northing
    out['grid_ref'] = codes
    return out
