"""TOML settings profiles for the projector."""

from __future__ import annotations

import logging
from pathlib import Path

import tomlkit

from domain.models import ProjectorSettings

logger = logging.getLogger(__name__)


def load_settings(path: str | Path) -> ProjectorSettings:
    """
    Load and validate a TOML profile into ProjectorSettings.

    Unknown keys are ignored; invalid values raise pydantic.ValidationError.
    """
    p = Path(path)
    if not p.exists():
        msg = f'Settings file not found: {p}'
        raise FileNotFoundError(msg)
    data = tomlkit.parse(p.read_text(encoding='utf-8')).unwrap()
    settings = ProjectorSettings.model_validate(data)
    logger.info(
        'Loaded projector settings from %s: tile_size=%s default_srs=%s tms_style=%s',
        p,
        settings.tile_size,
        settings.default_srs.value,
        settings.tms_style,
    )
    return settings


def save_settings(path: str | Path, settings: ProjectorSettings) -> Path:
    """Write settings to a TOML file, creating parent directories."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    text = tomlkit.dumps(settings.model_dump(mode='json'))
    p.write_text(text, encoding='utf-8')
    return p
