"""Pytest configuration and fixtures for spherical mercator tests."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))


@pytest.fixture
def merc():
    from geo.spherical_mercator import SphericalMercator

    return SphericalMercator()
