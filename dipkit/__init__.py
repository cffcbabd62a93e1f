"""Pure-Python digital image processing: images and pixelwise arithmetic, colour spaces, and geometry."""

__version__ = "0.1.0"
__all__ = ["image", "color", "geometry"]