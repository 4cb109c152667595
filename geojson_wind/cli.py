#!/usr/bin/env python3
"""
geojson-wind - Make GeoJSON (Multi)Polygons d3-geo-compatible, and vice-versa

d3-geo expects Polygon exteriors to wind clockwise and holes counter-clockwise,
the opposite of RFC 7946. This tool rewinds every Polygon ring in a GeoJSON
file to one convention or the other.

Usage:
    geojson-wind input.geojson > d3.geojson
    geojson-wind --reverse d3.geojson > rfc7946.geojson
    geojson-wind --stats-only --no-parallel input.geojson
"""

import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from tqdm import tqdm

from . import __version__
from .config import get_config
from .exceptions import GeoJSONWindError
from .geojson_io import dumps, open_and_parse
from .walker import WindingWalker
from .winding import Convention

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="geojson-wind",
        description="Make GeoJSON (Multi)Polygons d3-geo-compatible, and vice-versa",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Wind for d3-geo (exteriors clockwise)
  %(prog)s countries.geojson > countries_d3.geojson

  # Back to RFC 7946 (exteriors counter-clockwise), pretty-printed
  %(prog)s -r -p countries_d3.geojson > countries.geojson
        """
    )
    parser.add_argument(
        'geojson',
        metavar='GEOJSON',
        type=Path,
        help='GeoJSON containing (Multi)Polygons you wish to process using d3-geo'
    )
    parser.add_argument(
        '-p', '--pretty',
        action='store_true',
        help='Pretty-print GeoJSON output'
    )
    parser.add_argument(
        '-s', '--stats-only',
        action='store_true',
        help='Process polygons, but only print stats'
    )
    parser.add_argument(
        '-r', '--reverse',
        action='store_true',
        help='Make d3-geo-compatible Polygons RFC 7946-compatible'
    )
    parser.add_argument(
        '--no-parallel',
        action='store_true',
        help='Process features one at a time on the main thread'
    )
    parser.add_argument(
        '--workers',
        type=int,
        help='Number of worker threads (default: GEOJSON_WIND_MAX_WORKERS)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    return parser


def polygon_summary(count):
    return f"Processing complete. Processed {count} {'Polygon' if count == 1 else 'Polygons'}"


def run(args, config, stdout=None, stderr=None):
    """Parse, wind and print one file. Returns the process exit status."""
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr
    attended = stderr.isatty()

    try:
        with tqdm(total=1, desc="Parsing GeoJSON", unit="file", file=stderr, disable=not attended) as bar:
            doc = open_and_parse(args.geojson)
            bar.update(1)
    except GeoJSONWindError as e:
        logger.debug(f"Failed to load {args.geojson}: {e!r}")
        print(e, file=stderr)
        return 1

    convention = Convention.from_reverse(args.reverse)
    features = doc.get("features") if doc.get("type") == "FeatureCollection" else None
    total = len(features) if features is not None else None

    with tqdm(total=total, desc="Processing", unit="feature", file=stderr, disable=not attended) as bar:
        walker = WindingWalker(convention, progress=bar.update)
        if config["processing"]["parallel"]:
            with ThreadPoolExecutor(max_workers=config["processing"]["max_workers"]) as executor:
                walker.executor = executor
                walker.process_document(doc)
        else:
            walker.process_document(doc)

    count = walker.counter.value
    logger.info(f"Wound {count} polygons in {args.geojson} to {convention.value} convention")

    if attended:
        print(polygon_summary(count) + "\n", file=stderr)
    if not config["output"]["stats_only"]:
        print(dumps(doc, pretty=config["output"]["pretty"]), file=stdout)
    return 0


def main(argv=None):
    """Main entry point for command line usage"""
    args = build_parser().parse_args(argv)

    config = get_config()
    if args.no_parallel:
        config["processing"]["parallel"] = False
    if args.workers is not None:
        if args.workers < 1:
            build_parser().error("--workers must be at least 1")
        config["processing"]["max_workers"] = args.workers
    config["output"]["pretty"] = args.pretty
    config["output"]["stats_only"] = args.stats_only
    if args.verbose:
        config["logging"]["level"] = "DEBUG"

    logging.basicConfig(
        level=config["logging"]["level"],
        format=config["logging"]["format"],
        datefmt=config["logging"]["datefmt"],
    )

    return run(args, config)


if __name__ == "__main__":
    sys.exit(main())
