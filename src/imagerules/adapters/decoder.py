from __future__ import annotations

import logging
import os
from typing import Protocol, Union

from PIL import Image, UnidentifiedImageError

from imagerules.core.errors import DecodeError
from imagerules.core.models import ImageDimensions

_LOGGER = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class ImageDecoder(Protocol):
    def decode(self, path: PathLike) -> ImageDimensions:
        """Return the pixel size of the image at `path`, or raise DecodeError."""
        ...


class PillowDecoder:
    """
    Reads width/height from the image header via Pillow.

    Pixel data is never loaded and EXIF orientation is ignored: the reported size is
    the stored one, not the displayed one.
    """

    def decode(self, path: PathLike) -> ImageDimensions:
        try:
            with Image.open(path) as img:
                w, h = img.size
        except FileNotFoundError as e:
            raise DecodeError(f"Image not found: {path}") from e
        except Image.DecompressionBombError as e:
            raise DecodeError(f"Image {path} has too many pixels to open: {e}") from e
        except (UnidentifiedImageError, OSError, ValueError) as e:
            raise DecodeError(f"Cannot read image {path}: {e}") from e
        _LOGGER.debug("Decoded %s: %dx%d", path, w, h)
        return ImageDimensions(width=int(w), height=int(h))
