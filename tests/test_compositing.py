from PIL import Image

from textmark.compositing import composite_clipped, flatten, round_half_up, same_rgb


def _gradient(size=(64, 48)):
    r = Image.linear_gradient("L").resize(size)
    g = r.transpose(Image.FLIP_LEFT_RIGHT)
    b = r.transpose(Image.FLIP_TOP_BOTTOM)
    return Image.merge("RGB", (r, g, b))


def test_round_half_up():
    assert [round_half_up(v) for v in (0.5, 1.5, 2.5, 2.49, 127.5)] == [1, 2, 3, 2, 128]


def test_flatten_opaque_image_is_identity():
    img = _gradient()
    flat = flatten(img, (10, 200, 30))
    assert flat.mode == "RGB"
    assert flat.tobytes() == img.tobytes()
    assert flatten(flat, (0, 0, 0)).tobytes() == flat.tobytes()


def test_flatten_uses_background_for_transparent_pixels():
    img = Image.new("RGBA", (4, 4), (0, 0, 0, 0))
    assert flatten(img, (255, 0, 0)).getpixel((1, 1)) == (255, 0, 0)
    assert flatten(img, (1, 2, 3, 0)).getpixel((1, 1)) == (1, 2, 3)


def test_flatten_blends_translucent_pixels():
    img = Image.new("RGBA", (2, 2), (255, 0, 0, 128))
    r, g, b = flatten(img, (255, 255, 255)).getpixel((0, 0))
    assert r == 255
    assert abs(g - 127) <= 1 and abs(b - 127) <= 1


def test_flatten_output_is_fully_opaque():
    img = Image.new("RGBA", (8, 8), (40, 50, 60, 10))
    assert flatten(img, (0, 0, 0)).convert("RGBA").getchannel("A").getextrema() == (255, 255)


def test_composite_clipped_negative_offset():
    base = Image.new("RGBA", (10, 10), (0, 0, 0, 0))
    composite_clipped(base, Image.new("RGBA", (4, 4), (255, 0, 0, 255)), -2, -2)
    assert base.getpixel((0, 0)) == (255, 0, 0, 255)
    assert base.getpixel((1, 1)) == (255, 0, 0, 255)
    assert base.getpixel((2, 2)) == (0, 0, 0, 0)


def test_composite_clipped_past_the_far_edge():
    base = Image.new("RGBA", (10, 10), (0, 0, 0, 0))
    composite_clipped(base, Image.new("RGBA", (4, 4), (0, 255, 0, 255)), 8, 9)
    assert base.getpixel((9, 9)) == (0, 255, 0, 255)
    assert base.getpixel((7, 9)) == (0, 0, 0, 0)


def test_composite_clipped_fully_outside_is_a_no_op():
    base = Image.new("RGBA", (10, 10), (1, 1, 1, 255))
    composite_clipped(base, Image.new("RGBA", (4, 4), (255, 0, 0, 255)), 20, -20)
    assert base.getextrema() == ((1, 1), (1, 1), (1, 1), (255, 255))


def test_same_rgb_ignores_alpha():
    a = Image.new("RGBA", (3, 3), (5, 6, 7, 255))
    b = Image.new("RGBA", (3, 3), (5, 6, 7, 10))
    assert same_rgb(a, b)
    b.putpixel((1, 1), (5, 6, 8, 10))
    assert not same_rgb(a, b)
    assert not same_rgb(a, Image.new("RGBA", (3, 4), (5, 6, 7, 255)))
