"""래스터 추상화 모듈: 색상 타입, 읽기/쓰기 래스터 규약, Pillow 어댑터.

합성 로직은 이 모듈의 규약(width, height, color_at, set_color)만 사용한다.
"""

from typing import NamedTuple, Protocol, runtime_checkable

from PIL import Image


class Color(NamedTuple):
    """8비트 RGBA 색상. 알파 0 = 완전 투명, 255 = 불투명."""
    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def of(cls, value) -> "Color":
        """튜플/리스트를 Color로 정규화한다 (3채널이면 알파 255)."""
        if isinstance(value, Color):
            return value
        channels = tuple(int(c) for c in value)
        if len(channels) == 3:
            return cls(*channels, 255)
        if len(channels) == 4:
            return cls(*channels)
        raise ValueError(f"RGB 또는 RGBA 색상이 필요합니다: {value!r}")


TRANSPARENT = Color(0, 0, 0, 0)
BLACK = Color(0, 0, 0, 255)
WHITE = Color(255, 255, 255, 255)


class OutOfBounds(IndexError):
    """래스터 범위를 벗어난 좌표 접근."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"({x}, {y}) 좌표가 {width}x{height} 래스터 범위를 벗어났습니다")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


@runtime_checkable
class Raster(Protocol):
    """읽기 전용 래스터 규약."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def color_at(self, x: int, y: int) -> Color: ...


@runtime_checkable
class MutableRaster(Raster, Protocol):
    """픽셀 쓰기가 가능한 래스터 규약."""

    def set_color(self, x: int, y: int, color: Color) -> None: ...


def check_bounds(raster: Raster, x: int, y: int) -> None:
    """좌표가 범위 밖이면 OutOfBounds를 던진다."""
    if not (0 <= x < raster.width and 0 <= y < raster.height):
        raise OutOfBounds(x, y, raster.width, raster.height)


def pixel_access(image: Image.Image):
    """픽셀 접근 객체를 반환한다. 0 크기 이미지는 None."""
    if image.width == 0 or image.height == 0:
        return None
    return image.load()


class ImageRaster:
    """Pillow 이미지를 감싸는 읽기 전용 래스터."""

    def __init__(self, image: Image.Image):
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        self._image = image
        self._pixels = pixel_access(image)

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    def color_at(self, x: int, y: int) -> Color:
        check_bounds(self, x, y)
        return Color(*self._pixels[x, y])

    def __repr__(self) -> str:
        return f"ImageRaster({self.width}x{self.height})"


def to_image(raster: Raster) -> Image.Image:
    """임의의 래스터를 Pillow RGBA 이미지로 변환한다.

    Pillow 이미지를 가진 래스터는 그 이미지를 그대로 돌려준다 (복사하지 않음).
    """
    image = getattr(raster, "image", None)
    if isinstance(image, Image.Image):
        return image if image.mode == "RGBA" else image.convert("RGBA")

    result = Image.new("RGBA", (raster.width, raster.height))
    if raster.width == 0 or raster.height == 0:
        return result
    result.putdata([
        tuple(raster.color_at(x, y))
        for y in range(raster.height)
        for x in range(raster.width)
    ])
    return result
