"""Colour-space conversions, channel planes and colour image helpers."""

from __future__ import annotations

import math
import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

from dipkit.image import HSV, RGB, Image, RGBDouble, check_size_same

_PIXEL_TYPES = (RGB, RGBDouble, HSV)


def _to_uint8(value: float) -> int:
    """Truncate towards zero and keep the result inside 0..255."""
    return min(max(int(value), 0), 255)


def _rgb2hsv_pixel(pixel: RGB) -> HSV:
    red, green, blue = (int(c) for c in pixel)
    low, high = min(red, green, blue), max(red, green, blue)
    if high == low:
        hue = 0.0
    else:
        numerator = 0.5 * ((red - green) + (red - blue))
        denominator = math.sqrt((red - green) ** 2 + (red - blue) * (green - blue))
        ratio = min(max(numerator / denominator, -1.0), 1.0)
        h1 = math.acos(ratio) * (180.0 / math.pi)
        hue = h1 if blue <= green else 360.0 - h1
    saturation = 0.0 if high == 0 else 1.0 - low / high
    return HSV(hue, saturation, float(high))


def _hsv2rgb_pixel(pixel: HSV) -> RGB:
    hue, saturation, high = (float(c) for c in pixel)
    hi = int(math.floor(hue / 60.0))
    f = hue / 60.0 - hi
    low = high * (1.0 - saturation)
    q = high * (1.0 - f * saturation)
    t = high * (1.0 - (1.0 - f) * saturation)
    sectors = {
        0: (high, t, low),
        1: (q, high, low),
        2: (low, high, t),
        3: (low, q, high),
        4: (t, low, high),
        5: (high, low, q),
    }
    channels = sectors.get(hi)
    if channels is None:
        return RGB()
    return RGB(*(_to_uint8(c) for c in channels))


def rgb2hsv(value: Any) -> Any:
    """Convert an RGB or RGBDouble pixel, or an image of them, to HSV."""
    if isinstance(value, Image):
        return value.cast(rgb2hsv)
    if isinstance(value, RGBDouble):
        return _rgb2hsv_pixel(RGB(*(_to_uint8(c) for c in value)))
    if isinstance(value, RGB):
        return _rgb2hsv_pixel(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to HSV")


def hsv2rgb(value: Any) -> Any:
    """Convert an HSV pixel, or an image of them, to 8-bit RGB."""
    if isinstance(value, Image):
        return value.cast(hsv2rgb)
    if isinstance(value, HSV):
        return _hsv2rgb_pixel(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to RGB")


def grayscale2rgb(value: Any) -> Any:
    """Map a grey level (or a grey image) onto the hue scale as RGB."""
    if isinstance(value, Image):
        return value.cast(grayscale2rgb)
    return _hsv2rgb_pixel(HSV(float(value) / 256.0 * 360, 1.0, 255.0))


def _construct(
    pixel_type: type, convert: Callable[[Any], Any], a: Image, b: Image, c: Image
) -> Image:
    check_size_same(a, b)
    check_size_same(b, c)
    data = [pixel_type(convert(p), convert(q), convert(r)) for p, q, r in zip(a, b, c)]
    return Image.from_data(data, a.width, a.height)


def construct_rgb(r: Image, g: Image, b: Image) -> Image:
    """Combine three grey planes into an RGB image."""
    return _construct(RGB, _to_uint8, r, g, b)


def construct_rgb_double(r: Image, g: Image, b: Image) -> Image:
    """Combine three floating point planes into an RGBDouble image."""
    return _construct(RGBDouble, float, r, g, b)


def construct_hsv(h: Image, s: Image, v: Image) -> Image:
    """Combine hue, saturation and value planes into an HSV image."""
    return _construct(HSV, float, h, s, v)


def convert_image(image: Image, target: type) -> Image:
    """Convert every three-channel pixel of ``image`` to the pixel type ``target``."""
    if target not in _PIXEL_TYPES:
        raise TypeError(f"Unsupported target pixel type {target!r}")
    convert = _to_uint8 if target is RGB else float

    def change(pixel: Any) -> Any:
        return target(*(convert(float(c)) for c in pixel))

    return image.cast(change)


def _pixel_type(image: Image) -> type:
    first = next(iter(image), None)
    if not isinstance(first, _PIXEL_TYPES):
        raise TypeError("Image does not hold RGB, RGBDouble or HSV pixels")
    return type(first)


def get_plane(image: Image, index: int) -> Image:
    """Extract channel ``index`` (0, 1 or 2) as a single-channel image."""
    if index not in (0, 1, 2):
        raise IndexError(f"Channel index {index} is out of range")
    return image.cast(lambda pixel: pixel[index])


def _require(image: Image, *allowed: type) -> None:
    if _pixel_type(image) not in allowed:
        raise TypeError("Unsupported pixel type for this plane")


def get_r_plane(image: Image) -> Image:
    _require(image, RGB, RGBDouble)
    return get_plane(image, 0)


def get_g_plane(image: Image) -> Image:
    _require(image, RGB, RGBDouble)
    return get_plane(image, 1)


def get_b_plane(image: Image) -> Image:
    _require(image, RGB, RGBDouble)
    return get_plane(image, 2)


def get_h_plane(image: Image) -> Image:
    _require(image, HSV)
    return get_plane(image, 0)


def get_s_plane(image: Image) -> Image:
    _require(image, HSV)
    return get_plane(image, 1)


def get_v_plane(image: Image) -> Image:
    _require(image, HSV)
    return get_plane(image, 2)


_CONSTRUCTORS = {RGB: construct_rgb, RGBDouble: construct_rgb_double, HSV: construct_hsv}


def apply_each(image: Image, operation: Callable[..., Image], *args: Any) -> Image:
    """Run ``operation`` on each channel plane and rebuild an image of the same kind."""
    pixel_type = _pixel_type(image)
    planes = (operation(get_plane(image, index), *args) for index in range(3))
    return _CONSTRUCTORS[pixel_type](*planes)


def im2double(image: Image) -> Image:
    """RGB images become RGBDouble; grey images become floating point."""
    first = next(iter(image), None)
    if isinstance(first, RGB):
        return convert_image(image, RGBDouble)
    return image.cast(float)


def im2uint8(image: Image) -> Image:
    """RGBDouble images become RGB; floating point images become 8-bit grey."""
    first = next(iter(image), None)
    if isinstance(first, RGBDouble):
        return convert_image(image, RGB)
    return image.cast(_to_uint8)


def _latex_lines(image: Image) -> Iterator[str]:
    yield "\\begin{tikzpicture}[x=1cm,y=0.4cm]\n"
    for y, row in enumerate(image.rows()):
        for x, pixel in enumerate(row):
            red, green, blue = (int(c) for c in pixel)
            yield (
                f"\\draw ({x},{y}) node[anchor=south,"
                f"fill={{rgb:red,{red};green,{green};blue,{blue}}}] {{}};\n"
            )
    yield "\\end{tikzpicture}\n"


def print_with_latex(image: Image, file: TextIO | None = None) -> None:
    """Write the image as a TikZ picture of coloured nodes."""
    stream = file if file is not None else sys.stdout
    stream.writelines(_latex_lines(image))


def print_with_latex_to_file(image: Image, filename: str) -> None:
    """Write the TikZ picture of ``image`` to ``filename``."""
    with open(filename, "w", encoding="utf-8") as handle:
        print_with_latex(image, handle)