"""이미지 저장 모듈: 합성 결과를 JPEG/PNG로 인코딩한다."""

import logging

from renderer.raster import Raster, to_image

logger = logging.getLogger(__name__)

DEFAULT_JPEG_QUALITY = 85


def save_jpeg(raster: Raster, sink, quality: int = DEFAULT_JPEG_QUALITY) -> None:
    """래스터를 JPEG로 저장한다.

    quality가 1~100 밖이면 기본값 85를 쓴다. JPEG는 알파가 없으므로
    RGB로 변환한다. sink는 바이너리 파일 객체 또는 경로.
    """
    if quality <= 0 or quality > 100:
        quality = DEFAULT_JPEG_QUALITY
    logger.debug("JPEG 저장 (%dx%d, quality=%d)", raster.width, raster.height, quality)
    to_image(raster).convert("RGB").save(sink, format="JPEG", quality=quality)


def save_png(raster: Raster, sink) -> None:
    """래스터를 무손실 RGBA PNG로 저장한다."""
    logger.debug("PNG 저장 (%dx%d)", raster.width, raster.height)
    to_image(raster).save(sink, format="PNG")
