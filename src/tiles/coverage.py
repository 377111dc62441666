from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from shared.constants import Projection

if TYPE_CHECKING:
    from domain.models import TileRange
    from geo.spherical_mercator import SphericalMercator


def iter_tiles(tile_range: TileRange) -> Iterator[tuple[int, int]]:
    """Yield every (x, y) tile index in tile_range, row by row."""
    for y in range(tile_range.min_y, tile_range.max_y + 1):
        for x in range(tile_range.min_x, tile_range.max_x + 1):
            yield x, y


def tiles_for_bbox(
    projector: SphericalMercator,
    bbox: Sequence[float],
    zoom: int,
    *,
    tms_style: bool = False,
    srs: Projection | str = Projection.WGS84,
) -> list[tuple[int, int]]:
    """
    List the tiles at zoom that cover bbox [w, s, e, n].

    Thin wrapper over SphericalMercator.xyz; tile rows follow tms_style.
    """
    tile_range = projector.xyz(bbox, zoom, tms_style=tms_style, srs=srs)
    return list(iter_tiles(tile_range))
