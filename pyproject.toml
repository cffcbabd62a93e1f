[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dipkit"
version = "0.1.0"
description = "A small pure-Python digital image processing toolkit: pixelwise arithmetic, colour spaces, cropping, tiling, flips, bicubic resizing and drawing."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "image processing",
    "hsv",
    "rgb",
    "bicubic",
    "resize",
    "pixelwise",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dipkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
