"""Per-zoom scale constants for the spherical mercator pixel grid.

One table of ZOOM_LEVELS entries is built per distinct tile size and shared
by every projector that uses that size. Tables are immutable once built.
"""

from __future__ import annotations

import logging
import math
import numbers
import operator
import threading
from dataclasses import dataclass
from typing import NamedTuple

from geo.errors import InvalidTileSizeError, InvalidZoomLevelError
from shared.constants import MAX_ZOOM, MIN_ZOOM, ZOOM_LEVELS

logger = logging.getLogger(__name__)


class ZoomLevel(NamedTuple):
    """Scale constants for a single zoom level."""

    pixels_per_degree: float  # Bc
    pixels_per_radian: float  # Cc
    origin_offset: float  # zc
    world_size: float  # Ac


def validate_zoom(zoom) -> int:
    """Return zoom as int or raise InvalidZoomLevelError."""
    try:
        z = operator.index(zoom)
    except TypeError:
        raise InvalidZoomLevelError(zoom, MAX_ZOOM) from None
    if not (MIN_ZOOM <= z <= MAX_ZOOM):
        raise InvalidZoomLevelError(zoom, MAX_ZOOM)
    return z


def validate_tile_size(size) -> float:
    if isinstance(size, bool) or not isinstance(size, numbers.Real):
        raise InvalidTileSizeError(size)
    value = float(size)
    if not math.isfinite(value) or value <= 0:
        raise InvalidTileSizeError(size)
    return value


@dataclass(frozen=True)
class ZoomConstants:
    tile_size: float
    levels: tuple[ZoomLevel, ...]

    def level(self, zoom: int) -> ZoomLevel:
        return self.levels[validate_zoom(zoom)]

    @property
    def pixels_per_degree(self) -> tuple[float, ...]:
        return tuple(lvl.pixels_per_degree for lvl in self.levels)

    @property
    def pixels_per_radian(self) -> tuple[float, ...]:
        return tuple(lvl.pixels_per_radian for lvl in self.levels)

    @property
    def origin_offset(self) -> tuple[float, ...]:
        return tuple(lvl.origin_offset for lvl in self.levels)

    @property
    def world_size(self) -> tuple[float, ...]:
        return tuple(lvl.world_size for lvl in self.levels)


def build_zoom_constants(tile_size: float) -> ZoomConstants:
    """
    Build the constants table for tile_size.

    The world size doubles from one level to the next, so level i is level 0
    scaled by 2**i.
    """
    size = tile_size
    levels = []
    for _ in range(ZOOM_LEVELS):
        levels.append(
            ZoomLevel(
                pixels_per_degree=size / 360.0,
                pixels_per_radian=size / (2.0 * math.pi),
                origin_offset=size / 2.0,
                world_size=size,
            )
        )
        size *= 2
    return ZoomConstants(tile_size=tile_size, levels=tuple(levels))


# Keyed by the exact tile size value: 256 and 256.0 share an entry,
# 256.0000001 builds a new one.
_cache: dict[float, ZoomConstants] = {}
_cache_lock = threading.Lock()


def get_zoom_constants(tile_size: float) -> ZoomConstants:
    """Return the shared constants table for tile_size, building it on first use."""
    size = validate_tile_size(tile_size)
    constants = _cache.get(size)
    if constants is not None:
        return constants
    with _cache_lock:
        constants = _cache.get(size)
        if constants is None:
            constants = build_zoom_constants(size)
            _cache[size] = constants
            logger.debug('Built zoom constants for tile size %s', size)
    return constants

