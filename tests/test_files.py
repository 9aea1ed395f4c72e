import io

import pytest
from PIL import Image, UnidentifiedImageError

from content.export import save_jpeg, save_png
from content.loader import load_image, load_images, merge_files
from renderer.canvas import Canvas
from renderer.layout import Direction
from renderer.merge import MergeOptions
from renderer.raster import Color


@pytest.fixture
def image_files(tmp_path):
    red = tmp_path / "red.png"
    Image.new("RGB", (4, 2), (255, 0, 0)).save(red)
    blue = tmp_path / "blue.data"  # 확장자와 무관하게 내용으로 판별
    Image.new("RGBA", (3, 5), (0, 0, 255, 255)).save(blue, format="PNG")
    return [red, blue]


def test_load_image_sniffs_content(image_files):
    raster = load_image(image_files[1])
    assert (raster.width, raster.height) == (3, 5)
    assert raster.color_at(0, 0) == Color(0, 0, 255, 255)


def test_sixteen_bit_grayscale_keeps_high_byte(tmp_path):
    path = tmp_path / "gray16.png"
    Image.new("I;16", (2, 2), 32768).save(path)
    raster = load_image(path)
    assert raster.color_at(1, 1) == Color(128, 128, 128, 255)


def test_merge_files(image_files):
    out = merge_files(image_files, MergeOptions(direction=Direction.VERTICAL))
    assert out.size == (4, 7)
    assert out.color_at(0, 0) == Color(255, 0, 0, 255)


def test_missing_file_stops_loading(image_files, tmp_path):
    missing = tmp_path / "missing.png"
    with pytest.raises(FileNotFoundError) as exc:
        load_images([image_files[0], missing, image_files[1]])
    assert exc.value.filename == str(missing)


def test_corrupt_file_raises(tmp_path):
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"not an image")
    with pytest.raises(UnidentifiedImageError):
        load_image(bad)


def test_save_png_is_lossless(image_files):
    raster = load_image(image_files[1])
    sink = io.BytesIO()
    save_png(raster, sink)
    sink.seek(0)
    with Image.open(sink) as img:
        assert img.format == "PNG"
        assert img.mode == "RGBA"
        assert img.getpixel((2, 4)) == (0, 0, 255, 255)


@pytest.mark.parametrize("quality", [0, 101, -5, 50])
def test_save_jpeg_quality(image_files, quality):
    sink = io.BytesIO()
    save_jpeg(load_image(image_files[0]), sink, quality)
    sink.seek(0)
    with Image.open(sink) as img:
        assert img.format == "JPEG"
        assert img.size == (4, 2)


def test_save_plain_raster(make_plain):
    sink = io.BytesIO()
    save_png(make_plain(2, 2, (9, 9, 9, 9)), sink)
    sink.seek(0)
    with Image.open(sink) as img:
        assert img.getpixel((1, 1)) == (9, 9, 9, 9)


def test_sink_error_propagates(image_files):
    class BrokenSink(io.RawIOBase):
        def writable(self):
            return True

        def write(self, data):
            raise OSError("disk full")

    with pytest.raises(OSError, match="disk full"):
        save_png(load_image(image_files[0]), BrokenSink())


def test_save_jpeg_flattens_canvas_alpha():
    sink = io.BytesIO()
    save_jpeg(Canvas(3, 3, (0, 0, 0, 0)), sink)
    sink.seek(0)
    with Image.open(sink) as img:
        assert img.mode == "RGB"
        assert img.size == (3, 3)
