"""색상 블렌딩 모듈."""

from .raster import Color

MAX_ALPHA = 255


def blend(base: Color, overlay: Color, opacity: float) -> Color:
    """오버레이 색을 불투명도에 맞춰 기본 색 위에 섞는다.

    유효 알파 = (오버레이 알파 / 255) × opacity. opacity는 [0, 1]로 제한한다.
    각 RGB 채널은 실수로 계산한 뒤 소수점 이하를 버린다 (반올림 아님).
    결과 알파는 기본 색의 알파를 그대로 유지한다.
    """
    if overlay[3] == 0:
        return base

    opacity = min(1.0, max(0.0, opacity))
    alpha = overlay[3] / MAX_ALPHA * opacity

    r = int(base[0] * (1 - alpha) + overlay[0] * alpha)
    g = int(base[1] * (1 - alpha) + overlay[1] * alpha)
    b = int(base[2] * (1 - alpha) + overlay[2] * alpha)

    return Color(r, g, b, base[3])
