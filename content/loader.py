"""이미지 파일 로드 모듈: 파일 경로를 래스터로 디코딩한다."""

import logging
from pathlib import Path

from PIL import Image

from renderer.canvas import Canvas
from renderer.merge import MergeOptions, merge
from renderer.raster import ImageRaster

logger = logging.getLogger(__name__)


def _to_8bit(img: Image.Image) -> Image.Image:
    """16비트 정수 모드(I;16, I)를 상위 8비트만 남긴 L 모드로 줄인다.

    convert("RGBA")는 이 값을 255로 잘라내므로 먼저 256으로 나눈다.
    """
    if img.mode.startswith("I;16") or img.mode == "I":
        return img.convert("I").point(lambda v: v / 256).convert("L")
    return img


def load_image(path: str | Path) -> ImageRaster:
    """이미지 파일 하나를 RGBA 래스터로 로드한다.

    포맷은 확장자가 아니라 파일 내용으로 판별한다. 열기/디코딩 오류
    (OSError, UnidentifiedImageError)는 그대로 전달된다.
    """
    with Image.open(path) as img:
        img.load()
        raster = ImageRaster(_to_8bit(img).convert("RGBA"))
    logger.info("이미지 로드: %s (%dx%d)", Path(path).name, raster.width, raster.height)
    return raster


def load_images(paths: list[str | Path]) -> list[ImageRaster]:
    """경로 순서대로 이미지를 로드한다. 첫 실패에서 중단한다."""
    return [load_image(path) for path in paths]


def merge_files(paths: list[str | Path], opts: MergeOptions | None = None) -> Canvas:
    """파일들을 로드하여 병합한다."""
    return merge(load_images(paths), opts)
