"""Cropping, tiling, flipping, pasting, bicubic resizing and drawing on images."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any

from dipkit.color import apply_each
from dipkit.image import (
    HSV,
    RGB,
    Image,
    RGBDouble,
    check_height_same,
    check_width_same,
)


def _zero_like(image: Image) -> Any:
    """The default-constructed value of the image's pixel type."""
    first = next(iter(image), None)
    return 0 if first is None else type(first)()


def subimage(
    image: Image,
    width: int,
    height: int,
    xcenter: float,
    ycenter: float,
    default: Any = None,
) -> Image:
    """Crop a ``width`` x ``height`` window centred on (xcenter, ycenter).

    Pixels of the window that fall outside ``image`` take ``default``.
    """
    if default is None:
        default = _zero_like(image)
    corner_x = int(xcenter) - width // 2
    corner_y = int(ycenter) - height // 2
    data = []
    for y in range(height):
        source_y = corner_y + y
        for x in range(width):
            source_x = corner_x + x
            if 0 <= source_x < image.width and 0 <= source_y < image.height:
                data.append(image[source_x, source_y])
            else:
                data.append(default)
    return Image.from_data(data, width, height)


def subimage2(image: Image, startx: int, endx: int, starty: int, endy: int) -> Image:
    """Crop the inclusive rectangle [startx, endx] x [starty, endy]."""
    if startx > endx or starty > endy:
        raise ValueError("Start must not exceed end!")
    data = [
        image[x, y]
        for y in range(starty, endy + 1)
        for x in range(startx, endx + 1)
    ]
    return Image.from_data(data, endx - startx + 1, endy - starty + 1)


def highlight_region(
    image: Image,
    startx: int,
    endx: int,
    starty: int,
    endy: int,
    width: int = 5,
    value_r: int = 223,
    value_g: int = 0,
    value_b: int = 34,
) -> Image:
    """Draw a rectangular frame of thickness ``width`` on an RGB image."""
    if startx > endx or starty > endy:
        raise ValueError("Start must not exceed end!")
    output = image.copy()
    colour = RGB(value_r, value_g, value_b)
    half = width // 2
    y_low, x_low = starty - half, startx - half
    # A frame reaching past the top or left edge draws nothing at all.
    ys = range(y_low, endy + half) if y_low >= 0 else range(0)
    xs = range(x_low, endx + half) if x_low >= 0 else range(0)
    for y in ys:
        for x in xs:
            if (
                abs(x - startx) < width
                or abs(x - endx) < width
                or abs(y - starty) < width
                or abs(y - endy) < width
            ):
                output[x, y] = colour
    return output


def split(image: Image, xsegments: int, ysegments: int) -> list[list[Image]]:
    """Cut the image into ``ysegments`` rows of ``xsegments`` equal blocks."""
    block_x = image.width // xsegments
    block_y = image.height // ysegments
    return [
        [
            subimage2(
                image,
                x * block_x,
                (x + 1) * block_x - 1,
                y * block_y,
                (y + 1) * block_y - 1,
            )
            for x in range(xsegments)
        ]
        for y in range(ysegments)
    ]


def _concat_pair_horizontal(left: Image, right: Image) -> Image:
    check_height_same(left, right)
    data = [
        pixel
        for row_left, row_right in zip(left.rows(), right.rows())
        for pixel in row_left + row_right
    ]
    return Image.from_data(data, left.width + right.width, left.height)


def _concat_pair_vertical(top: Image, bottom: Image) -> Image:
    check_width_same(top, bottom)
    return Image.from_data(
        list(top) + list(bottom), top.width, top.height + bottom.height
    )


def concat_horizontal(images: Sequence[Image]) -> Image:
    """Join images left to right; all must share one height."""
    if not images:
        raise ValueError("At least one image is required!")
    output = images[0]
    for image in images[1:]:
        output = _concat_pair_horizontal(output, image)
    return output


def concat_vertical(images: Sequence[Image]) -> Image:
    """Stack images top to bottom; all must share one width."""
    if not images:
        raise ValueError("At least one image is required!")
    output = images[0]
    for image in images[1:]:
        output = _concat_pair_vertical(output, image)
    return output


def concat(blocks: Sequence[Sequence[Image]]) -> Image:
    """Reassemble a grid of blocks, as produced by :func:`split`."""
    return concat_vertical([concat_horizontal(row) for row in blocks])


def paste2d(
    background: Image,
    target: Image,
    x_location: int,
    y_location: int,
    default_value: Any = None,
) -> Image:
    """Paste ``target`` onto ``background`` with its corner at (x_location, y_location).

    The canvas grows as needed; new area is filled with ``default_value``.
    """
    if default_value is None:
        default_value = _zero_like(background)
    width = max(background.width, target.width + x_location)
    height = max(background.height, target.height + y_location)
    if (width, height) == background.size:
        output = background.copy()
    else:
        output = Image(width, height, default_value)
        for y, row in enumerate(background.rows()):
            for x, pixel in enumerate(row):
                output[x, y] = pixel
    for y, row in enumerate(target.rows()):
        for x, pixel in enumerate(row):
            output[x_location + x, y_location + y] = pixel
    return output


def transpose(image: Image) -> Image:
    """Swap rows and columns."""
    output = Image(image.height, image.width)
    for y, row in enumerate(image.rows()):
        for x, pixel in enumerate(row):
            output[y, x] = pixel
    return output


def flip_horizontal(image: Image) -> Image:
    """Mirror left to right."""
    data = [pixel for row in image.rows() for pixel in reversed(row)]
    return Image.from_data(data, image.width, image.height)


def flip_vertical(image: Image) -> Image:
    """Mirror top to bottom."""
    data = [pixel for row in reversed(list(image.rows())) for pixel in row]
    return Image.from_data(data, image.width, image.height)


def flip_horizontal_vertical(image: Image) -> Image:
    """Mirror in both directions (a half turn)."""
    return Image.from_data(list(reversed(list(image))), image.width, image.height)


def cubic_polate(v0: Any, v1: Any, v2: Any, v3: Any, frac: float) -> Any:
    """Cubic interpolation between ``v1`` (frac 0) and ``v2`` (frac 1)."""
    a = (v3 - v2) - (v0 - v1)
    b = (v0 - v1) - a
    c = v2 - v0
    d = v1
    return d + frac * (c + frac * (b + frac * a))


def bicubic_polate(
    ndata: Sequence[Any],
    fracx: float,
    fracy: float,
    low: float | None = None,
    high: float | None = None,
) -> float:
    """Interpolate a 4x4 neighbourhood listed row by row, clamped to [low, high]."""
    if len(ndata) != 16:
        raise ValueError("A 4x4 neighbourhood of 16 values is required!")
    columns = [
        cubic_polate(*ndata[row * 4:row * 4 + 4], fracx) for row in range(4)
    ]
    value = float(cubic_polate(*columns, fracy))
    if low is not None:
        value = max(value, low)
    if high is not None:
        value = min(value, high)
    return value


def copy_resize_bicubic(image: Image, width: int, height: int) -> Image:
    """Resize with bicubic interpolation; colour images are resized per channel."""
    first = next(iter(image), None)
    if isinstance(first, (RGB, RGBDouble)):
        return apply_each(image, copy_resize_bicubic, width, height)
    if isinstance(first, HSV):
        raise TypeError("Bicubic resizing supports RGB and RGBDouble colour images")
    integral = isinstance(first, int)
    low, high = (0, 255) if integral else (None, None)
    ratio_x = image.width / width
    ratio_y = image.height / height
    max_x, max_y = image.width - 1, image.height - 1
    data = []
    for y in range(height):
        origin_y = y * ratio_y
        floor_y = math.floor(origin_y)
        frac_y = origin_y - floor_y
        for x in range(width):
            origin_x = x * ratio_x
            floor_x = math.floor(origin_x)
            frac_x = origin_x - floor_x
            ndata = [
                image[
                    min(max(floor_x + dx, 0), max_x),
                    min(max(floor_y + dy, 0), max_y),
                ]
                for dy in range(-1, 3)
                for dx in range(-1, 3)
            ]
            value = bicubic_polate(ndata, frac_x, frac_y, low, high)
            data.append(int(value) if integral else value)
    return Image.from_data(data, width, height)


def draw_point(
    image: Image,
    point: tuple[int, int],
    draw_value: Any = None,
    radius: int = 3,
) -> Image:
    """Fill a disc of ``radius`` around ``point`` with ``draw_value``."""
    if draw_value is None:
        draw_value = _zero_like(image)
    point_x, point_y = point
    output = image.copy()
    for y in range(point_y - radius, point_y + radius + 1):
        for x in range(point_x - radius, point_x + radius + 1):
            if (x - point_x) ** 2 + (y - point_y) ** 2 < radius ** 2:
                output.put(x, y, draw_value)
    return output


def draw_points(
    image: Image,
    points: Iterable[tuple[int, int]],
    draw_value: Any = None,
    radius: int = 3,
) -> Image:
    """Draw a disc at each of ``points``."""
    output = image
    for point in points:
        output = draw_point(output, point, draw_value, radius)
    return output.copy() if output is image else output


def draw_circle(
    image: Image,
    central_point: tuple[int, int],
    radius: int = 2,
    draw_value: Any = None,
) -> Image:
    """Draw a circle outline with the midpoint algorithm; off-image points are skipped."""
    if draw_value is None:
        draw_value = _zero_like(image)
    point_x, point_y = central_point
    output = image.copy()
    if radius <= 0:
        return output
    x, y = 0, radius
    while x <= y:
        y -= 1
        if x * x + y * y < radius * radius:
            y += 1
        for dx, dy in (
            (x, y), (-x, y), (x, -y), (-x, -y),
            (y, x), (-y, x), (y, -x), (-y, -x),
        ):
            output.put(point_x + dx, point_y + dy, draw_value)
        x += 1
    return output