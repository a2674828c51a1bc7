#!/usr/bin/env python3
"""
Batch National Grid conversion of a CSV track using PyOSGB

Reads a CSV with latitude/longitude columns (decimal degrees, WGS84) and
writes it back with easting, northing and grid_ref columns.
"""

import argparse
import logging
from pathlib import Path

import numpy as np
import pandas as pd

from pyosgb.coordinate.batch import convert_dataframe


def setup_logging():
    """Setup logging configuration"""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    return logging.getLogger(__name__)


def demo_track():
    """Short straight track heading north-east out of Westminster"""
    n = 10
    return pd.DataFrame({
        'time': np.arange(n, dtype=float),
        'latitude': 51.5 + 0.001 * np.arange(n),
        'longitude': -7.0 / 60.0 + 0.0015 * np.arange(n),
        'height': np.full(n, 45.0),
    })


def main():
    """Main function"""
    parser = argparse.ArgumentParser(description='Add National Grid references to a CSV track')
    parser.add_argument('--input', type=str, help='Input CSV file')
    parser.add_argument('--output', type=str, help='Output CSV file')
    parser.add_argument('--lat-col', type=str, default='latitude')
    parser.add_argument('--lon-col', type=str, default='longitude')
    parser.add_argument('--height-col', type=str, default=None)
    parser.add_argument('--digits', type=int, default=10)

    args = parser.parse_args()
    logger = setup_logging()

    if args.input:
        if not Path(args.input).exists():
            print(f"Error: Input file not found: {args.input}")
            return
        df = pd.read_csv(args.input)
        logger.info(f"Loaded {len(df)} rows from {args.input}")
    else:
        print("[Demo Mode] Converting a synthetic track")
        df = demo_track()
        args.height_col = 'height'

    out = convert_dataframe(df, args.lat_col, args.lon_col, args.height_col, args.digits)

    if args.output:
        out.to_csv(args.output, index=False)
        logger.info(f"Saved {len(out)} rows to {args.output}")
    else:
        print(out.to_string(index=False))


if __name__ == '__main__':
    main()
