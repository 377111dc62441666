"""Command line entry point for spherical mercator conversions."""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from domain.models import ProjectorSettings
from domain.profiles import load_settings
from geo.errors import ProjectionError
from geo.projection import parse_projection
from geo.spherical_mercator import SphericalMercator
from shared.constants import Projection

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2


def setup_logging(verbose: bool = False) -> None:
    """Configure logging to stderr; stdout is reserved for results."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='spherical-mercator',
        description='Convert between lon/lat, pixels, tiles and Web Mercator',
    )
    parser.add_argument('--size', type=float, default=None, help='Tile size in pixels (default 256)')
    parser.add_argument('--config', default=None, help='TOML settings file')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('px', help='lon/lat -> pixel')
    p.add_argument('lon', type=float)
    p.add_argument('lat', type=float)
    p.add_argument('zoom', type=int)

    p = sub.add_parser('ll', help='pixel -> lon/lat')
    p.add_argument('x', type=float)
    p.add_argument('y', type=float)
    p.add_argument('zoom', type=int)

    p = sub.add_parser('bbox', help='tile -> bounding box')
    p.add_argument('x', type=int)
    p.add_argument('y', type=int)
    p.add_argument('zoom', type=int)
    p.add_argument('--tms', action=argparse.BooleanOptionalAction, default=None, help='TMS row numbering')
    p.add_argument('--srs', default=None, help='Output projection (wgs84, 900913)')

    p = sub.add_parser('xyz', help='bounding box -> tile range')
    p.add_argument('west', type=float)
    p.add_argument('south', type=float)
    p.add_argument('east', type=float)
    p.add_argument('north', type=float)
    p.add_argument('zoom', type=int)
    p.add_argument('--tms', action=argparse.BooleanOptionalAction, default=None, help='TMS row numbering')
    p.add_argument('--srs', default=None, help='Input projection (wgs84, 900913)')

    p = sub.add_parser('convert', help='reproject a bounding box')
    p.add_argument('west', type=float)
    p.add_argument('south', type=float)
    p.add_argument('east', type=float)
    p.add_argument('north', type=float)
    p.add_argument('--to', default=Projection.WGS84.value, help='Target projection')

    p = sub.add_parser('forward', help='lon/lat -> mercator meters')
    p.add_argument('lon', type=float)
    p.add_argument('lat', type=float)

    p = sub.add_parser('inverse', help='mercator meters -> lon/lat')
    p.add_argument('x', type=float)
    p.add_argument('y', type=float)

    return parser


def _resolve_settings(args: argparse.Namespace) -> ProjectorSettings:
    settings = load_settings(args.config) if args.config else ProjectorSettings()
    if args.size is not None:
        settings = ProjectorSettings(
            tile_size=args.size,
            default_srs=settings.default_srs,
            tms_style=settings.tms_style,
        )
    return settings


def run(args: argparse.Namespace) -> object:
    settings = _resolve_settings(args)
    merc = SphericalMercator.from_settings(settings)
    logger.debug('Using %r for command %s', merc, args.command)

    tms = getattr(args, 'tms', None)
    tms_style = settings.tms_style if tms is None else tms
    srs_arg = getattr(args, 'srs', None)
    srs = settings.default_srs if srs_arg is None else parse_projection(srs_arg)

    if args.command == 'px':
        return list(merc.px((args.lon, args.lat), args.zoom))
    if args.command == 'll':
        return list(merc.ll((args.x, args.y), args.zoom))
    if args.command == 'bbox':
        return merc.bbox(args.x, args.y, args.zoom, tms_style=tms_style, srs=srs)
    if args.command == 'xyz':
        bbox = [args.west, args.south, args.east, args.north]
        return merc.xyz(bbox, args.zoom, tms_style=tms_style, srs=srs).to_dict()
    if args.command == 'convert':
        bbox = [args.west, args.south, args.east, args.north]
        return merc.convert(bbox, parse_projection(args.to))
    if args.command == 'forward':
        return list(merc.forward((args.lon, args.lat)))
    if args.command == 'inverse':
        return list(merc.inverse((args.x, args.y)))
    msg = f'Unknown command: {args.command}'
    raise ValueError(msg)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        result = run(args)
    except (ProjectionError, ValidationError, FileNotFoundError) as e:
        logger.error(f'{args.command} failed: {e}')
        return EXIT_USAGE
    print(json.dumps(result))
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
