#!/usr/bin/env python3
"""
National Grid conversion of single GNSS fixes using PyOSGB

This example demonstrates:
1. Parsing receiver degree/minute strings
2. Shifting a WGS84 fix onto OSGB36 and projecting it
3. Formatting grid references at several precisions
4. Converting a grid reference back to WGS84
"""

import argparse
import logging

from pyosgb.coordinate.osgb_transformer import OSGBTransformer
from pyosgb.io.nmea import NMEAParseError, parse_wgs84_ascii


def setup_logging():
    """Setup logging configuration"""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    return logging.getLogger(__name__)


def demo_mode(transformer):
    """Convert a handful of well known places"""
    places = [
        ("Norwich", '52°39.4500"N', '001°43.0620"E', 0.0),
        ("Westminster", '51°30.0000"N', '000°07.0000"W', 0.0),
        ("Ben Nevis", '56°47.8135"N', '005°00.2205"W', 1345.0),
    ]

    for name, lat_text, lon_text, height in places:
        ref = transformer.convert(lat_text, lon_text, height)
        print(f"\n{name}: {lat_text} {lon_text}")
        print(f"  E/N        : {ref.easting:.0f} {ref.northing:.0f}")
        for digits in (10, 6, 4):
            print(f"  {digits:2d} digits  : {ref.to_string(digits)}")

        fix = transformer.from_grid_reference(ref.easting, ref.northing)
        print(f"  back to WGS84: {fix.latitude:.6f}°, {fix.longitude:.6f}°")

    fix = parse_wgs84_ascii("WGS84,51.74607,N,0.26183,W")
    ref = transformer.to_grid_reference(fix.latitude, fix.longitude)
    print(f"\nRecorder metadata fix -> {ref.code}")


def main():
    """Main function"""
    print("PyOSGB Grid Reference Example")
    print("="*60)

    parser = argparse.ArgumentParser(description='Convert a GNSS fix to an OS National Grid reference')
    parser.add_argument('--lat', type=str, help='Latitude, e.g. 52°39.4500"N')
    parser.add_argument('--lon', type=str, help='Longitude, e.g. 001°43.0620"E')
    parser.add_argument('--height', type=float, default=0.0, help='Ellipsoidal height (m)')
    parser.add_argument('--digits', type=int, default=10, help='Grid reference digits')

    args = parser.parse_args()
    logger = setup_logging()
    transformer = OSGBTransformer()

    if not args.lat or not args.lon:
        print("\n[Demo Mode] Converting sample positions")
        demo_mode(transformer)
        print("\n\nTo convert your own fix, use:")
        print('  python convert_fix.py --lat \'52°39.4500"N\' --lon \'001°43.0620"E\'')
        return

    try:
        ref = transformer.convert(args.lat, args.lon, args.height, args.digits)
    except NMEAParseError as exc:
        logger.error(f"Could not parse position: {exc}")
        return

    if ref.valid:
        print(f"\nGrid reference: {ref.code}")
        print(f"Easting/Northing: {ref.easting:.0f} {ref.northing:.0f}")
    else:
        print("\nPosition is outside the National Grid")


if __name__ == '__main__':
    main()
