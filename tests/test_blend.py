from renderer.blend import blend
from renderer.raster import BLACK, TRANSPARENT, WHITE, Color


def test_half_opacity_truncates():
    assert blend(BLACK, WHITE, 0.5) == Color(127, 127, 127, 255)


def test_transparent_overlay_returns_base():
    base = Color(12, 34, 56, 78)
    assert blend(base, TRANSPARENT, 0.7) is base
    assert blend(base, Color(255, 255, 255, 0), 1.0) is base


def test_overlay_alpha_multiplies_opacity():
    # 유효 알파 = 51/255 * 0.5 = 0.1
    result = blend(Color(100, 100, 100, 255), Color(200, 0, 100, 51), 0.5)
    assert result == Color(110, 90, 100, 255)


def test_base_alpha_is_kept():
    assert blend(Color(0, 0, 0, 40), WHITE, 1.0) == Color(255, 255, 255, 40)


def test_opacity_is_clamped():
    assert blend(BLACK, WHITE, 2.0) == blend(BLACK, WHITE, 1.0)
    assert blend(BLACK, WHITE, -1.0) == BLACK


def test_zero_opacity_keeps_base_color():
    assert blend(Color(9, 8, 7, 255), WHITE, 0.0) == Color(9, 8, 7, 255)
