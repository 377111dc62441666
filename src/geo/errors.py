"""Errors raised by the projection and tiling functions."""

from __future__ import annotations


class ProjectionError(ValueError):
    """Base class for invalid projector input."""


class InvalidZoomLevelError(ProjectionError):
    def __init__(self, zoom: object, max_zoom: int):
        self.zoom = zoom
        self.max_zoom = max_zoom
        super().__init__(f'Zoom level must be an integer in [0, {max_zoom}], got {zoom!r}')


class InvalidBBoxLengthError(ProjectionError):
    def __init__(self, bbox: object, expected: int = 4):
        self.bbox = bbox
        super().__init__(
            f'Bounding box must have {expected} items (west, south, east, north), '
            f'got {bbox!r}'
        )


class InvalidTileSizeError(ProjectionError):
    def __init__(self, size: object):
        self.size = size
        super().__init__(f'Tile size must be a positive finite number, got {size!r}')


class UnknownProjectionError(ProjectionError):
    pass
