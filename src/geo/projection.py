"""WGS84 <-> spherical (Web) Mercator conversions."""

from __future__ import annotations

import math
from collections.abc import Sequence

from geo.errors import InvalidBBoxLengthError, UnknownProjectionError
from shared.constants import (
    BBOX_LENGTH,
    D2R,
    EARTH_RADIUS_M,
    MAXEXTENT,
    R2D,
    Projection,
)

_PROJECTION_ALIASES = {
    'wgs84': Projection.WGS84,
    '4326': Projection.WGS84,
    'epsg:4326': Projection.WGS84,
    '900913': Projection.WEB_MERCATOR,
    'web_mercator': Projection.WEB_MERCATOR,
    '3857': Projection.WEB_MERCATOR,
    'epsg:3857': Projection.WEB_MERCATOR,
    'epsg:900913': Projection.WEB_MERCATOR,
}


def parse_projection(value: Projection | str) -> Projection:
    """Resolve a Projection from a member, its value, its name or an EPSG alias."""
    if isinstance(value, Projection):
        return value
    key = str(value).strip().lower()
    try:
        return _PROJECTION_ALIASES[key]
    except KeyError:
        msg = f'Unknown projection: {value!r}'
        raise UnknownProjectionError(msg) from None


def validate_bbox(bbox: Sequence[float]) -> tuple[float, float, float, float]:
    try:
        n = len(bbox)
    except TypeError:
        raise InvalidBBoxLengthError(bbox, BBOX_LENGTH) from None
    if n != BBOX_LENGTH:
        raise InvalidBBoxLengthError(bbox, BBOX_LENGTH)
    w, s, e, north = bbox
    return w, s, e, north


def _clamp_extent(v: float) -> float:
    return min(max(v, -MAXEXTENT), MAXEXTENT)


def forward(lon: float, lat: float) -> tuple[float, float]:
    """Lon/lat degrees -> spherical mercator meters, clamped to ±MAXEXTENT."""
    x = EARTH_RADIUS_M * lon * D2R
    t = math.tan(math.pi * 0.25 + 0.5 * lat * D2R)
    # tan() hits 0 at the south pole
    y = EARTH_RADIUS_M * math.log(t) if t > 0 else -math.inf
    return _clamp_extent(x), _clamp_extent(y)


def inverse(x: float, y: float) -> tuple[float, float]:
    """Spherical mercator meters -> lon/lat degrees."""
    lon = x * R2D / EARTH_RADIUS_M
    lat = (math.pi * 0.5 - 2.0 * math.atan(math.exp(-y / EARTH_RADIUS_M))) * R2D
    return lon, lat


def convert_bbox(
    bbox: Sequence[float],
    to: Projection | str = Projection.WGS84,
) -> list[float]:
    """
    Reproject [w, s, e, n] into `to`; the input is assumed to be in the other projection.

    Corners are converted independently, the result is not reordered.
    """
    w, s, e, n = validate_bbox(bbox)
    if parse_projection(to) is Projection.WEB_MERCATOR:
        return [*forward(w, s), *forward(e, n)]
    return [*inverse(w, s), *inverse(e, n)]
