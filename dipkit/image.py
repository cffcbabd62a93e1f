"""Two-dimensional image container, pixel types and element-wise operations."""

from __future__ import annotations

import math
import operator
import random
from collections.abc import Callable, Iterable, Iterator, Sequence
from functools import reduce
from typing import Any, NamedTuple


class RGB(NamedTuple):
    """An 8-bit red, green, blue pixel."""

    r: int = 0
    g: int = 0
    b: int = 0


class RGBDouble(NamedTuple):
    """A floating point red, green, blue pixel."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0


class HSV(NamedTuple):
    """A hue, saturation, value pixel."""

    h: float = 0.0
    s: float = 0.0
    v: float = 0.0


_PIXEL_TYPES = (RGB, RGBDouble, HSV)


def _channelwise(op: Callable[..., Any], *values: Any) -> Any:
    """Apply ``op`` to scalars directly, or to each channel of multi-channel pixels."""
    first = values[0]
    if isinstance(first, _PIXEL_TYPES):
        columns = zip(
            *(v if isinstance(v, _PIXEL_TYPES) else (v,) * len(first) for v in values)
        )
        return type(first)(*(op(*column) for column in columns))
    return op(*values)


def _dimension(value: Any, name: str) -> int:
    size = operator.index(value)
    if size < 0:
        raise ValueError(f"{name} must not be negative")
    return size


class Image:
    """A width-by-height grid of pixels stored row by row."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, width: int, height: int, fill: Any = 0) -> None:
        self._width = _dimension(width, "width")
        self._height = _dimension(height, "height")
        self._data = [fill] * (self._width * self._height)

    @classmethod
    def from_data(cls, data: Iterable[Any], width: int, height: int) -> Image:
        """Build an image from pixels listed row by row."""
        image = cls(width, height)
        values = list(data)
        if len(values) != image._width * image._height:
            raise ValueError("Data size does not match image size!")
        image._data = values
        return image

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        return (self._width, self._height)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self._width}x{self._height} image")
        return y * self._width + x

    def __getitem__(self, key: tuple[int, int]) -> Any:
        x, y = key
        return self._data[self._offset(x, y)]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        x, y = key
        self._data[self._offset(x, y)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return self.size == other.size and self._data == other._data

    def __repr__(self) -> str:
        return f"Image(width={self._width}, height={self._height})"

    def _binary(self, other: Any, op: Callable[[Any, Any], Any]) -> Image:
        if isinstance(other, Image):
            check_size_same(self, other)
            data = [_channelwise(op, a, b) for a, b in zip(self._data, other._data)]
        else:
            data = [_channelwise(op, a, other) for a in self._data]
        return Image.from_data(data, self._width, self._height)

    def __add__(self, other: Any) -> Image:
        return self._binary(other, operator.add)

    def __sub__(self, other: Any) -> Image:
        return self._binary(other, operator.sub)

    def __mul__(self, other: Any) -> Image:
        return self._binary(other, operator.mul)

    def __truediv__(self, other: Any) -> Image:
        return self._binary(other, operator.truediv)

    def put(self, x: int, y: int, value: Any) -> bool:
        """Set a pixel if it lies inside the image; report whether it did."""
        if 0 <= x < self._width and 0 <= y < self._height:
            self._data[y * self._width + x] = value
            return True
        return False

    def set_all_value(self, value: Any) -> None:
        """Set every pixel to ``value``."""
        self._data = [value] * len(self._data)

    def cast(self, func: Callable[[Any], Any]) -> Image:
        """Return a new image with ``func`` applied to each pixel."""
        return Image.from_data(map(func, self._data), self._width, self._height)

    def copy(self) -> Image:
        return Image.from_data(self._data, self._width, self._height)

    def rows(self) -> Iterator[list[Any]]:
        """Yield the image one row at a time, top to bottom."""
        for start in range(0, len(self._data), self._width or 1):
            yield self._data[start:start + self._width]


def _pairwise(check: Callable[[Image, Image], bool], images: Sequence[Image]) -> bool:
    return all(check(a, b) for a, b in zip(images, images[1:]))


def is_width_same(*args: Image) -> bool:
    return _pairwise(lambda a, b: a.width == b.width, args)


def is_height_same(*args: Image) -> bool:
    return _pairwise(lambda a, b: a.height == b.height, args)


def is_size_same(*args: Image) -> bool:
    return _pairwise(lambda a, b: a.size == b.size, args)


def check_width_same(x: Image, y: Image) -> None:
    if not is_width_same(x, y):
        raise ValueError("Width mismatched!")


def check_height_same(x: Image, y: Image) -> None:
    if not is_height_same(x, y):
        raise ValueError("Height mismatched!")


def check_size_same(x: Image, y: Image) -> None:
    if not is_size_same(x, y):
        raise ValueError("Size mismatched!")


def zeros(width: int, height: int) -> Image:
    return Image(width, height, 0)


def ones(width: int, height: int) -> Image:
    return Image(width, height, 1)


def rand(width: int, height: int | None = None, rng: random.Random | None = None) -> Image:
    """Image of uniform values in [0, 1); a single size gives a square image."""
    if height is None:
        height = width
    generator = rng if rng is not None else random.Random()
    image = Image(width, height)
    return image.cast(lambda _: generator.random())


def pixelwise_operation(op: Callable[..., Any], *args: Image) -> Image:
    """Combine same-sized images pixel by pixel with ``op``."""
    if not args:
        raise ValueError("At least one image is required!")
    first = args[0]
    for other in args[1:]:
        check_size_same(first, other)
    data = [op(*pixels) for pixels in zip(*args)]
    return Image.from_data(data, first.width, first.height)


def _is_image_list(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _each_list(func: Callable[..., Any], lists: Sequence[Sequence[Image]]) -> list[Any]:
    if any(len(items) != len(lists[0]) for items in lists):
        raise ValueError("Size mismatched!")
    return [func(*items) for items in zip(*lists)]


def plus(*args: Any) -> Any:
    """Add images pixel by pixel, or lists of images item by item."""
    if not args:
        raise ValueError("At least one image is required!")
    if _is_image_list(args[0]):
        return _each_list(plus, args)
    if len(args) == 1:
        return args[0]
    first, rest = args[0], plus(*args[1:])
    check_size_same(first, rest)
    return pixelwise_operation(lambda a, b: _channelwise(operator.add, a, b), first, rest)


def _subtract_pixel(a: Any, b: Any) -> Any:
    if isinstance(a, RGB):
        return RGB(*(min(max(p - q, 0), 255) for p, q in zip(a, b)))
    return _channelwise(operator.sub, a, b)


def subtract(x: Any, y: Any) -> Any:
    """Subtract pixel by pixel; RGB channels are clamped to 0..255."""
    if _is_image_list(x):
        return _each_list(subtract, (x, y))
    check_size_same(x, y)
    return pixelwise_operation(_subtract_pixel, x, y)


def pixelwise_multiplies(*args: Any) -> Any:
    """Multiply images pixel by pixel, or lists of images item by item."""
    if not args:
        raise ValueError("At least one image is required!")
    if _is_image_list(args[0]):
        return _each_list(pixelwise_multiplies, args)
    if len(args) == 1:
        return args[0]
    first, rest = args[0], pixelwise_multiplies(*args[1:])
    check_size_same(first, rest)
    return pixelwise_operation(lambda a, b: _channelwise(operator.mul, a, b), first, rest)


def multiplies(image: Any, times: Any) -> Image:
    """Multiply every pixel by a scalar; either argument order is accepted."""
    if not isinstance(image, Image):
        image, times = times, image

    def scale(pixel: Any) -> Any:
        if isinstance(pixel, RGB):
            return RGB(*(min(max(int(c * times), 0), 255) for c in pixel))
        return _channelwise(lambda c: c * times, pixel)

    return image.cast(scale)


def divides(image: Any, divisor: Any) -> Any:
    """Divide by another image, a scalar, or item by item over lists of images."""
    if _is_image_list(image):
        return _each_list(divides, (image, divisor))
    return image / divisor


def modulus(x: Image, y: Image) -> Image:
    return pixelwise_operation(lambda a, b: _channelwise(operator.mod, a, b), x, y)


def negate(image: Image) -> Image:
    return image.cast(lambda p: _channelwise(operator.neg, p))


def absolute(image: Image) -> Image:
    return image.cast(lambda p: _channelwise(abs, p))


def difference(x: Image, y: Image) -> Image:
    """Absolute difference pixel by pixel, per channel for colour pixels."""
    return pixelwise_operation(
        lambda a, b: _channelwise(lambda p, q: abs(p - q), a, b), x, y
    )


def manhattan_distance(x: Image, y: Image) -> Any:
    check_size_same(x, y)
    return sum(difference(x, y))


def power(image: Image, exponent: float) -> Image:
    return image.cast(lambda p: _channelwise(lambda c: math.pow(c, exponent), p))


def pixel_sum(image: Image, op: Callable[[Any, Any], Any] | None = None) -> Any:
    """Fold all pixels together, starting from zero, with ``op`` (addition by default)."""
    return reduce(op or operator.add, image, 0)


def pixel_min(image: Image) -> Any:
    return min(image)


def pixel_max(image: Image) -> Any:
    return max(image)


def pixel_minmax(image: Image) -> tuple[Any, Any]:
    return (min(image), max(image))


def count(image: Image, target: Any) -> int:
    return sum(1 for pixel in image if pixel == target)


def unique_value(image: Image, target: Any) -> bool:
    return count(image, target) == 1


def all_of(image: Image, predicate: Callable[[Any], bool]) -> bool:
    return all(predicate(pixel) for pixel in image)


def normal_distribution_1d(x: float, standard_deviation: float) -> float:
    """Unnormalised Gaussian: exp(-x^2 / (2 sd^2))."""
    return math.exp(-x * x / (2 * standard_deviation * standard_deviation))


def normal_distribution_2d(x: float, y: float, standard_deviation: float) -> float:
    """Normalised isotropic 2-D Gaussian density."""
    variance = standard_deviation * standard_deviation
    return math.exp(-(x * x + y * y) / (2 * variance)) / (2 * math.pi * variance)