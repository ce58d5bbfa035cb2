import random
from collections import Counter

import pytest

from imgsort.image import PixelBuffer
from imgsort.transform import ALGORITHMS, brightness, is_column_sorted, sort_columns

from conftest import make_buffer


def _random_buffer(width, height, seed=0):
    rng = random.Random(seed)
    return PixelBuffer(width, height, bytearray(rng.randrange(256) for _ in range(3 * width * height)))


def test_brightness_truncates():
    assert brightness((0, 0, 0)) == 0
    assert brightness((255, 255, 255)) == 255
    assert brightness((1, 1, 2)) == 1
    assert brightness((100, 0, 0)) == 33


def test_two_by_two_scenario():
    white, black = (255, 255, 255), (0, 0, 0)
    buf = make_buffer([[white, black], [black, white]])
    result = sort_columns(buf)
    assert result.column(0) == [black, white]
    assert result.column(1) == [black, white]


@pytest.mark.parametrize("algorithm", sorted(ALGORITHMS))
def test_columns_ascending(algorithm):
    buf = _random_buffer(6, 9, seed=3)
    result = sort_columns(buf, algorithm)
    assert is_column_sorted(result)
    assert result.size == buf.size


@pytest.mark.parametrize("algorithm", sorted(ALGORITHMS))
def test_columns_keep_their_pixels(algorithm):
    buf = _random_buffer(5, 8, seed=7)
    result = sort_columns(buf, algorithm)
    for x in range(buf.width):
        assert Counter(result.column(x)) == Counter(buf.column(x))


def test_algorithms_agree_on_brightness():
    buf = _random_buffer(4, 10, seed=11)
    first = sort_columns(buf, "builtin")
    second = sort_columns(buf, "selection")
    for x in range(buf.width):
        assert [brightness(p) for p in first.column(x)] == [brightness(p) for p in second.column(x)]


def test_input_left_untouched():
    buf = _random_buffer(3, 4, seed=5)
    before = bytes(buf.pixels)
    sort_columns(buf)
    assert bytes(buf.pixels) == before


@pytest.mark.parametrize("width,height", [(0, 0), (0, 5), (4, 0), (4, 1)])
def test_no_op_shapes(width, height):
    buf = _random_buffer(width, height, seed=1)
    result = sort_columns(buf)
    assert bytes(result.pixels) == bytes(buf.pixels)


def test_is_column_sorted_detects_order():
    dark, light = (10, 10, 10), (200, 200, 200)
    assert is_column_sorted(make_buffer([[dark], [light]]))
    assert not is_column_sorted(make_buffer([[light], [dark]]))


def test_unknown_algorithm():
    with pytest.raises(ValueError):
        sort_columns(PixelBuffer(1, 1), "bogo")
