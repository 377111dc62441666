"""Tile index helpers built on top of the spherical mercator projector."""

from tiles.coverage import iter_tiles, tiles_for_bbox

__all__ = [
    'iter_tiles',
    'tiles_for_bbox',
]
