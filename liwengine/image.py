"""Images loaded from disk into pixel arrays."""

from __future__ import annotations

import os
from enum import IntEnum

import numpy as np
from PIL import Image as _PILImage

__all__ = ["ImageFormat", "channel_count", "Image"]


class ImageFormat(IntEnum):
    """Pixel formats; those below LOADABLE_MAX are 8-bit and loadable."""

    R8 = 0
    RG8 = 1
    RGB8 = 2
    RGBA8 = 3
    LOADABLE_MAX = 4
    R16U = 5
    RG16U = 6
    RGB16U = 7
    RGBA16U = 8
    R32F = 9
    RG32F = 10
    RGB32F = 11
    RGBA32F = 12
    R32I = 13
    RG32I = 14
    RGB32I = 15
    RGBA32I = 16
    R32U = 17
    RG32U = 18
    RGB32U = 19
    RGBA32U = 20
    MAX = 21


_PIL_MODES: dict[ImageFormat, str] = {
    ImageFormat.R8: "L",
    ImageFormat.RG8: "LA",
    ImageFormat.RGB8: "RGB",
    ImageFormat.RGBA8: "RGBA",
}


def _channels_by_name(fmt: ImageFormat) -> int:
    prefix = fmt.name.rstrip("0123456789FIU")
    return len(prefix)


_CHANNELS: dict[ImageFormat, int] = {
    fmt: _channels_by_name(fmt)
    for fmt in ImageFormat
    if fmt not in (ImageFormat.LOADABLE_MAX, ImageFormat.MAX)
}


def channel_count(image_format: ImageFormat) -> int:
    """Number of colour channels of a format; KeyError for the markers."""
    fmt = ImageFormat(image_format)
    try:
        return _CHANNELS[fmt]
    except KeyError:
        raise KeyError(f"format has no channel count: {fmt.name}") from None


class Image:
    """Pixels of an image file, stored as a height x width x channels array."""

    def __init__(self) -> None:
        self.data: np.ndarray | None = None
        self.width = -1
        self.height = -1
        self.format = ImageFormat.MAX

    def is_valid(self) -> bool:
        """Whether pixel data is loaded."""
        return self.data is not None

    def load(self, path: str | os.PathLike, image_format: ImageFormat) -> None:
        """Load an image file, converting it to ``image_format``."""
        if self.is_valid():
            raise RuntimeError("image already loaded.")
        fmt = ImageFormat(image_format)
        if fmt >= ImageFormat.LOADABLE_MAX:
            raise ValueError("image format not loadable.")
        try:
            with _PILImage.open(path) as source:
                pixels = np.array(source.convert(_PIL_MODES[fmt]), dtype=np.uint8)
        except OSError as exc:
            raise RuntimeError("failed to load image.") from exc
        height, width = pixels.shape[:2]
        self.data = pixels.reshape(height, width, channel_count(fmt))
        self.width = width
        self.height = height
        self.format = fmt

    def unload(self) -> None:
        """Drop the pixel data."""
        if not self.is_valid():
            raise RuntimeError("image not loaded.")
        self.data = None
        self.width = self.height = -1
        self.format = ImageFormat.MAX