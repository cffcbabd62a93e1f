# dipkit

A small digital image processing toolkit written in plain Python. It has no
third-party dependencies. An image is a two-dimensional grid that holds either
numbers or colour pixels (`RGB`, `RGBDouble`, `HSV`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `dipkit.image`

- `Image(width, height, fill=0)` is the container. `Image.from_data(data, width, height)` builds an image from pixels listed row by row.
- Pixels are read and written as `image[x, y]`, where `x` is the column and `y` the row. Coordinates outside the image raise `IndexError`. `put(x, y, value)` is the quiet form: it skips points outside the image and returns whether it wrote the pixel.
- Attributes and methods: `width`, `height`, `size`, `rows()`, `copy()`, `cast(func)` and `set_all_value(value)`.
- Iterating over an image yields its pixels row by row. `len()` gives the pixel count.
- The operators `+`, `-`, `*` and `/` work with another image of the same size or with a scalar. Colour pixels are handled channel by channel.
- Pixelwise functions: `pixelwise_operation`, `plus`, `subtract`, `pixelwise_multiplies`, `multiplies`, `divides`, `modulus`, `negate`, `absolute`, `difference` and `power`. In `subtract`, RGB channels are clamped to 0..255. `plus`, `subtract`, `pixelwise_multiplies` and `divides` also accept lists of images and work on them item by item.
- Reductions: `pixel_sum`, `pixel_min`, `pixel_max`, `pixel_minmax`, `count`, `unique_value`, `all_of` and `manhattan_distance`.
- Size checks: `is_width_same`, `is_height_same`, `is_size_same` and `check_width_same` / `check_height_same` / `check_size_same`. The `check_*` functions raise `ValueError` on a mismatch.
- Constructors: `zeros`, `ones` and `rand`. `rand` gives uniform values in [0, 1), and when you pass a single size it makes a square image.
- Gaussian helpers: `normal_distribution_1d` and `normal_distribution_2d`.

### `dipkit.color`

- Colour-space conversion for single pixels or whole images: `rgb2hsv`, `hsv2rgb` and `grayscale2rgb`. `grayscale2rgb` maps a grey level onto the hue scale.
- Splitting an image into channel planes: `get_plane`, `get_r_plane`, `get_g_plane`, `get_b_plane`, `get_h_plane`, `get_s_plane` and `get_v_plane`.
- Building an image from planes: `construct_rgb`, `construct_rgb_double` and `construct_hsv`.
- `apply_each(image, operation, *args)` runs an operation on each plane and rebuilds an image of the same kind.
- Type conversion: `convert_image`, `im2double` and `im2uint8`.
- `print_with_latex(image, file=None)` and `print_with_latex_to_file(image, filename)` write an RGB image as a TikZ picture of coloured nodes.

### `dipkit.geometry`

- Cropping: `subimage` takes a centred window, and window pixels outside the image take a default value. `subimage2` takes an inclusive rectangle.
- Tiling: `split` cuts an image into a grid of equal blocks. `concat_horizontal`, `concat_vertical` and `concat` join blocks back together.
- `paste2d` places one image onto another. The canvas grows when needed, and the new area is filled with a default value.
- Flips: `transpose`, `flip_horizontal`, `flip_vertical` and `flip_horizontal_vertical`.
- Bicubic interpolation: `cubic_polate`, `bicubic_polate` and `copy_resize_bicubic`. `copy_resize_bicubic` handles grey images, and it resizes RGB and RGBDouble images plane by plane. Integer grey values are clamped to 0..255.
- Drawing: `draw_point`, `draw_points`, `draw_circle` and `highlight_region`. `draw_circle` uses the midpoint algorithm. `highlight_region` draws a frame on an RGB image.

## Example

```python
from dipkit.image import RGB, Image
from dipkit.color import get_v_plane, rgb2hsv
from dipkit.geometry import copy_resize_bicubic, flip_horizontal

img = Image(4, 4, RGB(200, 50, 50))
img[1, 2] = RGB(0, 0, 255)

value = get_v_plane(rgb2hsv(img))
print(value[1, 2])          # 255.0

bigger = copy_resize_bicubic(img, 8, 8)
print(bigger.size)          # (8, 8)

mirrored = flip_horizontal(img)
print(mirrored[2, 2])       # RGB(r=0, g=0, b=255)
```

Operations return new images and leave their inputs unchanged. A size
mismatch raises `ValueError`.

## What it does not do

- dipkit does not read or write image files. Images are built in memory, for
  example from pixel lists with `Image.from_data`, and the only output to a file
  is the TikZ text from `print_with_latex_to_file`.
- It offers no frequency-domain transforms, rotation, convolution filters or
  keypoint detection.
- It works on two-dimensional images only.