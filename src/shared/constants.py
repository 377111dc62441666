import math
from enum import Enum

# Радиус Земли для Web Mercator (метры)
EARTH_RADIUS_M = 6378137.0

# Градусы <-> радианы
D2R = math.pi / 180.0
R2D = 180.0 / math.pi

# Не используется в формулах, оставлен для совместимости
EPSLN = 1.0e-10

# Максимальная координата Web Mercator (метры), соответствует ±180° / ~±85.0511°
MAXEXTENT = 20037508.342789244

# Ограничение синуса широты, чтобы не уйти в бесконечность у полюсов
MERCATOR_MAX_SIN = 0.9999

# Базовый размер тайла Web Mercator (пикселей)
TILE_SIZE = 256

# Количество уровней приближения в таблице констант
ZOOM_LEVELS = 30
MIN_ZOOM = 0
MAX_ZOOM = ZOOM_LEVELS - 1

# Длина bbox: (west, south, east, north)
BBOX_LENGTH = 4

# EPSG-коды систем координат
WGS84_CODE = 4326
WEB_MERCATOR_CODE = 3857


class Projection(str, Enum):
    WGS84 = 'wgs84'
    WEB_MERCATOR = '900913'


def default_projection() -> Projection:
    return Projection.WGS84

