from PIL import Image

from tools.image_codec import PillowCodec, contain_box

PURPLE = (143, 44, 235)
RED = (255, 0, 0)


def test_contain_box_scales_down_and_up():
    assert contain_box((400, 200), (100, 100)) == (100, 50)
    assert contain_box((10, 10), (40, 20)) == (20, 20)
    assert contain_box((300, 400), (300, 400)) == (300, 400)


def test_contain_box_never_zero():
    assert contain_box((1000, 1), (10, 10)) == (10, 1)


def test_resize_letterboxes_wide_image():
    codec = PillowCodec()
    src = Image.new("RGB", (100, 50), RED)
    out = codec.resize(src, (200, 200), PURPLE + (255,))

    assert out.size == (200, 200)
    assert out.mode == "RGB"
    # bands above and below
    assert out.getpixel((0, 0)) == PURPLE
    assert out.getpixel((199, 199)) == PURPLE
    assert out.getpixel((100, 10)) == PURPLE
    # content fills the full width, centred vertically
    assert out.getpixel((100, 100)) == RED
    assert out.getpixel((2, 100)) == RED
    assert out.getpixel((197, 100)) == RED


def test_resize_pillarboxes_and_upscales():
    codec = PillowCodec()
    src = Image.new("RGB", (10, 10), RED)
    out = codec.resize(src, (40, 20), PURPLE + (255,))

    assert out.size == (40, 20)
    assert out.getpixel((5, 10)) == PURPLE
    assert out.getpixel((35, 10)) == PURPLE
    assert out.getpixel((20, 10)) == RED


def test_resize_keeps_alpha_with_opaque_background():
    codec = PillowCodec()
    src = Image.new("RGBA", (50, 100), (0, 0, 255, 128))
    out = codec.resize(src, (100, 100), PURPLE + (255,))

    assert out.mode == "RGBA"
    assert out.getpixel((5, 50)) == PURPLE + (255,)
    assert out.getpixel((50, 50)) == (0, 0, 255, 128)


def test_resize_palette_image():
    codec = PillowCodec()
    src = Image.new("P", (20, 20), 0)
    out = codec.resize(src, (40, 20), PURPLE + (255,))
    assert out.mode == "RGB"
    assert out.size == (40, 20)


def test_probe_is_lazy_and_reads_size(tmp_path):
    path = tmp_path / "a.png"
    Image.new("RGB", (30, 20), RED).save(path)

    with PillowCodec().probe(path) as img:
        assert img.size == (30, 20)
        assert img.format == "PNG"


def test_encode_by_extension(tmp_path):
    codec = PillowCodec()
    img = Image.new("RGBA", (8, 8), PURPLE + (255,))
    for name, fmt in [("a.png", "PNG"), ("a.jpg", "JPEG"), ("a.JPEG", "JPEG"),
                      ("a.tiff", "TIFF"), ("a.bmp", "BMP")]:
        codec.encode(img, tmp_path / name)
        with Image.open(tmp_path / name) as saved:
            assert saved.format == fmt
            assert saved.size == (8, 8)


def test_encode_overwrites(tmp_path):
    codec = PillowCodec()
    path = tmp_path / "a.png"
    codec.encode(Image.new("RGB", (4, 4), RED), path)
    codec.encode(Image.new("RGB", (6, 6), RED), path)
    with Image.open(path) as saved:
        assert saved.size == (6, 6)
