"""Pillow 캔버스 관리 모듈: 합성 결과를 담는 가변 RGBA 래스터."""

from PIL import Image

from .raster import Color, Raster, check_bounds, pixel_access


class Canvas:
    """임의 크기의 RGBA 캔버스.

    background가 None이면 채우기를 하지 않으며, 픽셀은 Pillow 기본값인
    완전 투명 (0, 0, 0, 0) 상태로 남는다.
    """

    def __init__(self, width: int, height: int, background: Color | tuple | None = None):
        self._image = Image.new("RGBA", (width, height))
        self._pixels = pixel_access(self._image)
        if background is not None:
            self.clear(background)

    @classmethod
    def from_raster(cls, source: Raster) -> "Canvas":
        """원본 래스터와 같은 크기·픽셀을 가진 새 캔버스를 만든다."""
        canvas = cls(source.width, source.height)
        canvas.paste(source)
        return canvas

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def size(self) -> tuple[int, int]:
        return self._image.size

    def color_at(self, x: int, y: int) -> Color:
        check_bounds(self, x, y)
        return Color(*self._pixels[x, y])

    def set_color(self, x: int, y: int, color: Color | tuple) -> None:
        check_bounds(self, x, y)
        self._pixels[x, y] = tuple(Color.of(color))

    def clear(self, color: Color | tuple) -> None:
        """캔버스 전체를 지정 색상으로 채운다."""
        if self._pixels is None:
            return
        self._image.paste(tuple(Color.of(color)), (0, 0, self.width, self.height))

    def paste(self, source: Raster, position: tuple[int, int] = (0, 0)) -> None:
        """래스터를 지정 위치에 불투명 복사한다 (알파 포함 덮어쓰기, 블렌딩 없음).

        캔버스 밖으로 나가는 부분은 잘린다.
        """
        x0, y0 = position
        if source.width == 0 or source.height == 0 or self._pixels is None:
            return
        image = getattr(source, "image", None)
        if isinstance(image, Image.Image):
            if image.mode != "RGBA":
                image = image.convert("RGBA")
            # 마스크 없는 paste는 알파 채널까지 그대로 덮어쓴다
            self._image.paste(image, (x0, y0))
            return

        for sy in range(source.height):
            y = y0 + sy
            if not 0 <= y < self.height:
                continue
            for sx in range(source.width):
                x = x0 + sx
                if 0 <= x < self.width:
                    self._pixels[x, y] = tuple(source.color_at(sx, sy))

    def __repr__(self) -> str:
        return f"Canvas({self.width}x{self.height})"
