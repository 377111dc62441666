"""Geo module - spherical mercator projection and tile math."""

from .errors import (
    InvalidBBoxLengthError,
    InvalidTileSizeError,
    InvalidZoomLevelError,
    ProjectionError,
    UnknownProjectionError,
)
from .projection import convert_bbox, forward, inverse, parse_projection
from .zoom_constants import ZoomConstants, ZoomLevel, get_zoom_constants

__all__ = [
    'InvalidBBoxLengthError',
    'InvalidTileSizeError',
    'InvalidZoomLevelError',
    'ProjectionError',
    'UnknownProjectionError',
    'ZoomConstants',
    'ZoomLevel',
    'convert_bbox',
    'forward',
    'get_zoom_constants',
    'inverse',
    'parse_projection',
]
