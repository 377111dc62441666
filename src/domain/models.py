from pydantic import BaseModel, field_validator

from geo.errors import InvalidTileSizeError
from geo.projection import parse_projection
from geo.zoom_constants import validate_tile_size
from shared.constants import TILE_SIZE, Projection, default_projection


class TileRange(BaseModel):
    """Inclusive range of tile indices at one zoom level."""

    model_config = {'frozen': True}

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    @property
    def count(self) -> int:
        return max(self.width, 0) * max(self.height, 0)

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def to_dict(self) -> dict[str, int]:
        """Bounds keyed the way XYZ tooling names them (minX, minY, maxX, maxY)."""
        return {
            'minX': self.min_x,
            'minY': self.min_y,
            'maxX': self.max_x,
            'maxY': self.max_y,
        }


class ProjectorSettings(BaseModel):
    """Settings for building a projector, loadable from a TOML profile."""

    model_config = {
        'extra': 'ignore',
    }

    # Размер тайла (px)
    tile_size: float = TILE_SIZE
    # Проекция bbox по умолчанию для bbox/xyz
    default_srs: Projection = default_projection()
    # Нумерация строк TMS (начало снизу слева)
    tms_style: bool = False

    @field_validator('tile_size', mode='before')
    @classmethod
    def validate_tile_size(cls, v):
        # В TOML-профиле число может быть записано строкой
        if isinstance(v, str):
            try:
                v = float(v.strip())
            except ValueError:
                raise InvalidTileSizeError(v) from None
        return validate_tile_size(v)

    @field_validator('default_srs', mode='before')
    @classmethod
    def validate_default_srs(cls, v):
        return parse_projection(v)
