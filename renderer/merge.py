"""이미지 병합 모듈: 가로/세로 이어 붙이기와 그리드 배치."""

import logging
from dataclasses import dataclass

from .canvas import Canvas
from .layout import Alignment, Direction, grid_layout, linear_layout
from .raster import TRANSPARENT, Color, Raster

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MergeOptions:
    """병합 설정."""
    direction: Direction = Direction.HORIZONTAL
    alignment: Alignment = Alignment.CENTER
    gap: int = 0                        # 이미지 사이 간격 (px)
    background: Color | None = None     # None이면 채우지 않음 (투명)

    def __post_init__(self):
        if self.gap < 0:
            raise ValueError(f"gap은 0 이상이어야 합니다: {self.gap}")
        if self.background is not None:
            object.__setattr__(self, "background", Color.of(self.background))

    @classmethod
    def from_config(cls, section: dict) -> "MergeOptions":
        """설정 딕셔너리의 merge 섹션으로 옵션을 만든다."""
        background = section.get("background")
        return cls(
            direction=Direction(section.get("direction", Direction.HORIZONTAL.value)),
            alignment=Alignment(section.get("alignment", Alignment.CENTER.value)),
            gap=int(section.get("gap", 0)),
            background=Color.of(background) if background is not None else None,
        )


def default_options() -> MergeOptions:
    """가로 방향, 중앙 정렬, 간격 0, 투명 배경."""
    return MergeOptions(
        direction=Direction.HORIZONTAL,
        alignment=Alignment.CENTER,
        gap=0,
        background=TRANSPARENT,
    )


def merge(images: list[Raster], opts: MergeOptions | None = None) -> Canvas:
    """여러 이미지를 한 축으로 이어 붙인 새 캔버스를 반환한다.

    빈 목록이면 0x0 캔버스, 한 장이면 그 이미지의 복사본을 반환한다.
    각 이미지는 블렌딩 없이 불투명 복사된다.
    """
    if opts is None:
        opts = default_options()
    if not images:
        return Canvas(0, 0)
    if len(images) == 1:
        return Canvas.from_raster(images[0])

    sizes = [(img.width, img.height) for img in images]
    (width, height), positions = linear_layout(sizes, opts.direction, opts.alignment, opts.gap)
    logger.debug("병합 출력 크기: %dx%d (%d개, %s)", width, height, len(images), opts.direction.value)

    canvas = Canvas(width, height, opts.background)
    for img, position in zip(images, positions):
        canvas.paste(img, position)
    return canvas


def grid(
    images: list[Raster],
    columns: int,
    gap: int = 0,
    background: Color | tuple | None = None,
) -> Canvas:
    """이미지를 균일 셀 그리드로 배치한 새 캔버스를 반환한다.

    마지막 행의 빈 셀은 배경색(또는 투명)으로 남는다.
    """
    if gap < 0:
        raise ValueError(f"gap은 0 이상이어야 합니다: {gap}")
    if not images or columns <= 0:
        return Canvas(0, 0)

    sizes = [(img.width, img.height) for img in images]
    (width, height), positions = grid_layout(sizes, columns, gap)
    logger.debug("그리드 출력 크기: %dx%d (%d개, %d열)", width, height, len(images), columns)

    canvas = Canvas(width, height, background)
    for img, position in zip(images, positions):
        canvas.paste(img, position)
    return canvas
