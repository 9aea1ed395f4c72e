"""레이어 합성 모듈: 기본 이미지 위에 오버레이를 불투명도와 함께 합성."""

from .blend import blend
from .canvas import Canvas
from .raster import Raster


def _apply(canvas: Canvas, layer: Raster, x: int, y: int, opacity: float) -> None:
    """레이어 픽셀을 캔버스에 블렌딩한다. 범위 밖 픽셀은 건너뛴다."""
    for oy in range(layer.height):
        dy = y + oy
        if not 0 <= dy < canvas.height:
            continue
        for ox in range(layer.width):
            dx = x + ox
            if not 0 <= dx < canvas.width:
                continue
            blended = blend(canvas.color_at(dx, dy), layer.color_at(ox, oy), opacity)
            canvas.set_color(dx, dy, blended)


def overlay(base: Raster, layer: Raster, x: int, y: int, opacity: float = 1.0) -> Canvas:
    """base의 복사본 위 (x, y)에 layer를 블렌딩한 새 캔버스를 반환한다.

    base 밖으로 나가는 부분은 오류 없이 무시된다.
    """
    canvas = Canvas.from_raster(base)
    _apply(canvas, layer, x, y, opacity)
    return canvas


class LayerCompositor:
    """기본 이미지와 여러 오버레이 레이어를 합성하여 최종 이미지를 만든다."""

    def compose(
        self,
        base: Raster,
        overlays: list[tuple] | None = None,
    ) -> Canvas:
        """기본 이미지 위에 오버레이들을 순서대로 합성한다.

        Args:
            base: 기본 이미지 (변경되지 않음)
            overlays: [(래스터, (x, y))] 또는 [(래스터, (x, y), 불투명도)] 리스트

        Returns:
            합성된 새 캔버스
        """
        canvas = Canvas.from_raster(base)

        for entry in overlays or []:
            if len(entry) == 3:
                layer, (x, y), opacity = entry
            else:
                layer, (x, y) = entry
                opacity = 1.0
            _apply(canvas, layer, x, y, opacity)

        return canvas
