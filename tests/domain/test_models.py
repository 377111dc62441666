"""Tests for domain.models module."""

import pytest
from pydantic import ValidationError

from domain.models import ProjectorSettings, TileRange
from shared.constants import Projection


class TestTileRange:
    """Tests for TileRange model."""

    def test_dimensions(self):
        r = TileRange(min_x=2, min_y=3, max_x=5, max_y=3)
        assert r.width == 4
        assert r.height == 1
        assert r.count == 4

    def test_empty_range_count(self):
        """maxX below minX (possible west of the antimeridian) has no tiles."""
        r = TileRange(min_x=0, min_y=0, max_x=-1, max_y=0)
        assert r.count == 0

    def test_contains(self):
        r = TileRange(min_x=2, min_y=3, max_x=5, max_y=6)
        assert r.contains(2, 3)
        assert r.contains(5, 6)
        assert not r.contains(6, 3)
        assert not r.contains(2, 2)

    def test_to_dict(self):
        r = TileRange(min_x=1, min_y=2, max_x=3, max_y=4)
        assert r.to_dict() == {'minX': 1, 'minY': 2, 'maxX': 3, 'maxY': 4}

    def test_frozen(self):
        r = TileRange(min_x=1, min_y=2, max_x=3, max_y=4)
        with pytest.raises(ValidationError):
            r.min_x = 0

    def test_equality(self):
        assert TileRange(min_x=1, min_y=2, max_x=3, max_y=4) == TileRange(
            min_x=1, min_y=2, max_x=3, max_y=4
        )


class TestProjectorSettings:
    """Tests for ProjectorSettings validators."""

    def test_defaults(self):
        settings = ProjectorSettings()
        assert settings.tile_size == 256
        assert settings.default_srs is Projection.WGS84
        assert settings.tms_style is False

    def test_tile_size_int_accepted(self):
        assert ProjectorSettings(tile_size=512).tile_size == 512.0

    @pytest.mark.parametrize('size', ['512', ' 512.0 ', '5.12e2'])
    def test_tile_size_numeric_string_accepted(self, size):
        assert ProjectorSettings(tile_size=size).tile_size == 512.0

    @pytest.mark.parametrize('size', [0, -1, float('inf'), 'big', '', '-512', 'nan'])
    def test_tile_size_invalid(self, size):
        with pytest.raises(ValueError):
            ProjectorSettings(tile_size=size)

    @pytest.mark.parametrize('srs', ['900913', 'EPSG:3857', '3857', Projection.WEB_MERCATOR])
    def test_default_srs_aliases(self, srs):
        assert ProjectorSettings(default_srs=srs).default_srs is Projection.WEB_MERCATOR

    def test_default_srs_invalid(self):
        with pytest.raises(ValidationError):
            ProjectorSettings(default_srs='mars')

    def test_extra_fields_ignored(self):
        settings = ProjectorSettings.model_validate({'tile_size': 512, 'legacy_option': 1})
        assert settings.tile_size == 512
        assert not hasattr(settings, 'legacy_option')
