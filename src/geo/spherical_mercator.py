"""Spherical mercator projector: pixels, tiles and bounding boxes."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from domain.models import TileRange
from geo.projection import convert_bbox, forward, inverse, parse_projection, validate_bbox
from geo.zoom_constants import ZoomConstants, get_zoom_constants, validate_zoom
from shared.constants import D2R, MERCATOR_MAX_SIN, R2D, TILE_SIZE, Projection

if TYPE_CHECKING:
    from domain.models import ProjectorSettings


def _round_half_away(v: float) -> float:
    """Round to nearest, ties away from zero (builtin round() ties to even)."""
    a = abs(v)
    r = math.floor(a)
    # a - r is exact; a + 0.5 is not
    if a - r >= 0.5:
        r += 1
    return math.copysign(r, v)


class SphericalMercator:
    """
    Conversions between lon/lat, pixel, tile and mercator coordinates.

    The per-zoom constants table is shared between all instances with the
    same tile size. Instances are immutable.

    Zoom levels are integers in [0, 29]; anything else raises
    InvalidZoomLevelError. Bounding boxes are [w, s, e, n] sequences.
    """

    __slots__ = ('_constants', '_size')

    def __init__(self, size: float = TILE_SIZE):
        self._constants = get_zoom_constants(size)
        self._size = self._constants.tile_size

    @classmethod
    def from_settings(cls, settings: ProjectorSettings) -> SphericalMercator:
        return cls(size=settings.tile_size)

    @property
    def size(self) -> float:
        return self._size

    @property
    def constants(self) -> ZoomConstants:
        return self._constants

    def __repr__(self) -> str:
        return f'{type(self).__name__}(size={self._size!r})'

    def px(self, ll: Sequence[float], zoom: int) -> tuple[float, float]:
        """
        Convert [lon, lat] to screen pixel [x, y] at zoom.

        Latitude is limited through its sine so the poles stay finite. Only
        the upper bound (world size) is clamped.
        """
        lvl = self._constants.level(zoom)
        lon, lat = ll
        d = lvl.origin_offset
        f = min(max(math.sin(D2R * lat), -MERCATOR_MAX_SIN), MERCATOR_MAX_SIN)
        x = _round_half_away(d + lon * lvl.pixels_per_degree)
        y = _round_half_away(
            d + 0.5 * math.log((1 + f) / (1 - f)) * (-lvl.pixels_per_radian)
        )
        x = min(x, lvl.world_size)
        y = min(y, lvl.world_size)
        return x, y

    def ll(self, px: Sequence[float], zoom: int) -> tuple[float, float]:
        """Convert screen pixel [x, y] at zoom to [lon, lat]."""
        lvl = self._constants.level(zoom)
        x, y = px
        g = (y - lvl.origin_offset) / (-lvl.pixels_per_radian)
        lon = (x - lvl.origin_offset) / lvl.pixels_per_degree
        lat = R2D * (2 * math.atan(math.exp(g)) - 0.5 * math.pi)
        return lon, lat

    def bbox(
        self,
        x: float,
        y: float,
        zoom: int,
        tms_style: bool = False,
        srs: Projection | str = Projection.WGS84,
    ) -> list[float]:
        """Bounding box [w, s, e, n] of tile (x, y, zoom) in srs."""
        zoom = validate_zoom(zoom)
        if tms_style:
            y = (2**zoom - 1) - y
        lower_left = (x * self._size, (y + 1) * self._size)
        upper_right = ((x + 1) * self._size, y * self._size)
        bbox = [*self.ll(lower_left, zoom), *self.ll(upper_right, zoom)]
        if parse_projection(srs) is Projection.WEB_MERCATOR:
            return self.convert(bbox, Projection.WEB_MERCATOR)
        return bbox

    def xyz(
        self,
        bbox: Sequence[float],
        zoom: int,
        tms_style: bool = False,
        srs: Projection | str = Projection.WGS84,
    ) -> TileRange:
        """Range of tiles at zoom covering bbox [w, s, e, n] given in srs."""
        zoom = validate_zoom(zoom)
        if parse_projection(srs) is Projection.WEB_MERCATOR:
            bbox = self.convert(bbox, Projection.WGS84)
        w, s, e, n = validate_bbox(bbox)
        px_ll = self.px((w, s), zoom)
        px_ur = self.px((e, n), zoom)
        # Tile y = 0 is the top row, so minY comes from the upper right corner
        xs = (
            math.floor(px_ll[0] / self._size),
            math.floor((px_ur[0] - 1) / self._size),
        )
        ys = (
            math.floor(px_ur[1] / self._size),
            math.floor((px_ll[1] - 1) / self._size),
        )
        min_x = max(min(xs), 0)
        min_y = max(min(ys), 0)
        max_x = max(xs)
        max_y = max(max(ys), 0)
        if tms_style:
            last_row = 2**zoom - 1
            min_y, max_y = last_row - max_y, last_row - min_y
        return TileRange(min_x=min_x, min_y=min_y, max_x=max_x, max_y=max_y)

    def convert(
        self,
        bbox: Sequence[float],
        to: Projection | str = Projection.WGS84,
    ) -> list[float]:
        return convert_bbox(bbox, to)

    def forward(self, ll: Sequence[float]) -> tuple[float, float]:
        lon, lat = ll
        return forward(lon, lat)

    def inverse(self, xy: Sequence[float]) -> tuple[float, float]:
        x, y = xy
        return inverse(x, y)


Projector = SphericalMercator
