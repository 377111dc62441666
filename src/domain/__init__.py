"""Domain layer - result models and settings profiles."""
from domain.models import ProjectorSettings, TileRange
from domain.profiles import load_settings, save_settings

__all__ = [
    'ProjectorSettings',
    'TileRange',
    'load_settings',
    'save_settings',
]
