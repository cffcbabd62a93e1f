import math
import random

import pytest

from dipkit.image import (
    HSV,
    RGB,
    RGBDouble,
    Image,
    absolute,
    all_of,
    check_height_same,
    check_size_same,
    check_width_same,
    count,
    difference,
    divides,
    is_height_same,
    is_size_same,
    is_width_same,
    manhattan_distance,
    modulus,
    multiplies,
    negate,
    normal_distribution_1d,
    normal_distribution_2d,
    ones,
    pixel_max,
    pixel_min,
    pixel_minmax,
    pixel_sum,
    pixelwise_multiplies,
    pixelwise_operation,
    plus,
    power,
    rand,
    subtract,
    unique_value,
    zeros,
)


def ramp(width, height):
    return Image.from_data(range(width * height), width, height)


@pytest.mark.parametrize("size", [10, 0])
def test_elementwise_add(size):
    test = Image(size, size, 10) + Image(size, size, 1)
    assert test == Image(size, size, 10 + 1)


@pytest.mark.parametrize("size", [10, 0])
def test_elementwise_minus(size):
    test = Image(size, size, 10) - Image(size, size, 1)
    assert test == Image(size, size, 10 - 1)


@pytest.mark.parametrize("size", [10, 0])
def test_elementwise_multiplies(size):
    test = Image(size, size, 10) * Image(size, size, 2)
    assert test == Image(size, size, 10 * 2)


@pytest.mark.parametrize("size", [10, 0])
def test_elementwise_divides(size):
    test = Image(size, size, 10) / Image(size, size, 2)
    assert test == Image(size, size, 10 / 2)


def test_operator_size_mismatch_raises():
    with pytest.raises(ValueError, match="Size mismatched!"):
        Image(2, 3) + Image(3, 2)


def test_indexing_and_bounds():
    image = ramp(3, 2)
    assert image[2, 1] == 5
    image[0, 1] = 42
    assert image[0, 1] == 42
    with pytest.raises(IndexError):
        image[3, 0]
    with pytest.raises(IndexError):
        image[-1, 0]


def test_put_ignores_out_of_bounds():
    image = zeros(2, 2)
    assert image.put(1, 1, 7) is True
    assert image.put(5, 0, 7) is False
    assert image.put(-1, 0, 7) is False
    assert list(image) == [0, 0, 0, 7]


def test_from_data_rejects_wrong_length():
    with pytest.raises(ValueError):
        Image.from_data([1, 2, 3], 2, 2)


def test_negative_dimension_rejected():
    with pytest.raises(ValueError):
        Image(-1, 2)


def test_rows_and_len():
    image = ramp(3, 2)
    assert list(image.rows()) == [[0, 1, 2], [3, 4, 5]]
    assert len(image) == 6
    assert image.size == (3, 2)


def test_copy_is_independent():
    image = ramp(2, 2)
    other = image.copy()
    other[0, 0] = 99
    assert image[0, 0] == 0
    assert other != image


def test_set_all_value_and_cast():
    image = zeros(2, 3)
    image.set_all_value(4)
    assert all_of(image, lambda p: p == 4)
    assert image.cast(float) == Image(2, 3, 4.0)


def test_size_predicates():
    a, b, c = Image(2, 3), Image(2, 4), Image(2, 3)
    assert is_width_same(a, b, c)
    assert not is_height_same(a, b)
    assert is_height_same(a, c)
    assert is_size_same(a, c)
    assert not is_size_same(a, b, c)


def test_check_functions_raise():
    with pytest.raises(ValueError, match="Width mismatched!"):
        check_width_same(Image(1, 1), Image(2, 1))
    with pytest.raises(ValueError, match="Height mismatched!"):
        check_height_same(Image(1, 1), Image(1, 2))
    with pytest.raises(ValueError, match="Size mismatched!"):
        check_size_same(Image(1, 1), Image(1, 2))


def test_zeros_and_ones():
    assert list(zeros(2, 2)) == [0, 0, 0, 0]
    assert all_of(ones(3, 2), lambda p: p == 1)
    assert ones(3, 2).size == (3, 2)


def test_rand_is_reproducible_and_in_range():
    first = rand(4, 3, random.Random(5))
    second = rand(4, 3, random.Random(5))
    assert first == second
    assert all_of(first, lambda p: 0.0 <= p < 1.0)


def test_rand_single_size_is_square():
    assert rand(5, rng=random.Random(1)).size == (5, 5)


def test_pixelwise_operation():
    a, b = ramp(2, 2), ones(2, 2)
    result = pixelwise_operation(lambda p, q: p * 10 + q, a, b)
    assert list(result) == [p * 10 + 1 for p in a]
    with pytest.raises(ValueError):
        pixelwise_operation(lambda p, q: p, a, ones(3, 3))


def test_plus_many_and_lists():
    a = ramp(2, 2)
    assert plus(a) == a
    assert plus(a, a, a) == a * 3
    result = plus([a, a], [a, a])
    assert result == [a + a, a + a]


def test_subtract_round_trip():
    a, b = ramp(3, 3), ones(3, 3)
    assert plus(subtract(a, b), b) == a
    with pytest.raises(ValueError, match="Size mismatched!"):
        subtract(a, ones(2, 2))


def test_subtract_rgb_clamps_at_zero():
    a = Image(2, 1, RGB(10, 10, 10))
    b = Image(2, 1, RGB(20, 20, 20))
    assert subtract(a, b) == Image(2, 1, RGB(0, 0, 0))
    assert subtract(b, b) == Image(2, 1, RGB(0, 0, 0))


def test_subtract_hsv_is_channelwise():
    a = Image(1, 1, HSV(3.0, 0.5, 1.0))
    assert subtract(a, a) == Image(1, 1, HSV(0.0, 0.0, 0.0))


def test_pixelwise_multiplies():
    a = ramp(2, 2)
    assert pixelwise_multiplies(a, ones(2, 2), a) == a * a
    with pytest.raises(ValueError):
        pixelwise_multiplies(a, ones(1, 1))


def test_multiplies_scalar_either_order():
    a = ramp(2, 2)
    assert multiplies(a, 3) == a * 3
    assert multiplies(3, a) == multiplies(a, 3)


def test_multiplies_rgb_clamps():
    image = Image(1, 1, RGB(200, 0, 100))
    result = multiplies(image, 2)
    assert result[0, 0].r == 255
    assert result[0, 0].g == 0


def test_divides_scalar_and_lists():
    a = ramp(2, 2)
    assert multiplies(divides(a, 4.0), 4.0) == a.cast(float)
    assert divides([a], [ones(2, 2)]) == [a / ones(2, 2)]


def test_modulus_negate_absolute():
    a = ramp(2, 2)
    assert modulus(a, a + 1) == a
    assert negate(negate(a)) == a
    assert absolute(negate(a)) == a


def test_difference_symmetric_and_manhattan():
    a, b = ramp(3, 2), ones(3, 2) * 2
    assert difference(a, b) == difference(b, a)
    assert manhattan_distance(a, a) == 0
    assert manhattan_distance(a, b) == pixel_sum(difference(a, b))
    with pytest.raises(ValueError, match="Size mismatched!"):
        manhattan_distance(a, ones(1, 1))


def test_difference_colour_channels():
    a = Image(1, 1, RGBDouble(1.0, 2.0, 3.0))
    b = Image(1, 1, RGBDouble(3.0, 2.0, 1.0))
    assert difference(a, b) == difference(b, a)
    assert difference(a, a) == Image(1, 1, RGBDouble(0.0, 0.0, 0.0))


def test_power_round_trip():
    a = ramp(2, 2).cast(float)
    restored = power(power(a, 2.0), 0.5)
    assert all(math.isclose(p, q) for p, q in zip(restored, a))


def test_sum_min_max_count():
    a = ramp(2, 3)
    assert pixel_sum(a) == sum(range(6))
    assert pixel_sum(ones(2, 2), lambda p, q: p + q) == len(ones(2, 2))
    assert pixel_min(a) == 0
    assert pixel_max(a) == 5
    assert pixel_minmax(a) == (pixel_min(a), pixel_max(a))
    assert count(ones(3, 3), 1) == 9
    assert unique_value(a, 4)
    assert not unique_value(ones(2, 2), 1)


def test_min_of_empty_image_raises():
    with pytest.raises(ValueError):
        pixel_min(zeros(0, 0))


def test_normal_distributions():
    assert normal_distribution_1d(0.0, 2.0) == 1.0
    assert normal_distribution_1d(1.5, 2.0) == normal_distribution_1d(-1.5, 2.0)
    assert math.isclose(normal_distribution_2d(0.0, 0.0, 1.0), 1 / (2 * math.pi))
    assert normal_distribution_2d(1.0, 0.0, 1.0) < normal_distribution_2d(0.0, 0.0, 1.0)