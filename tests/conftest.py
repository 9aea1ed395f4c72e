"""공용 테스트 픽스처: 합성용 단색 래스터와 순수 파이썬 래스터."""

import pytest
from PIL import Image

from renderer.raster import Color, ImageRaster, OutOfBounds


class GridRaster:
    """Pillow 없이 규약만 구현한 래스터 (좌표 딕셔너리)."""

    def __init__(self, width, height, color=(0, 0, 0, 255)):
        self._w = width
        self._h = height
        self._pixels = {(x, y): Color.of(color) for x in range(width) for y in range(height)}

    @property
    def width(self):
        return self._w

    @property
    def height(self):
        return self._h

    def color_at(self, x, y):
        if (x, y) not in self._pixels:
            raise OutOfBounds(x, y, self._w, self._h)
        return self._pixels[(x, y)]

    def put(self, x, y, color):
        self._pixels[(x, y)] = Color.of(color)


def solid(width, height, color):
    """단색 RGBA 래스터."""
    return ImageRaster(Image.new("RGBA", (width, height), tuple(Color.of(color))))


@pytest.fixture
def make_solid():
    return solid


@pytest.fixture
def make_plain():
    return GridRaster
