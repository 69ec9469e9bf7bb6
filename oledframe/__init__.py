"""
oledframe - RGB image to SSD1306 OLED frame conversion

Turns arbitrary-sized RGB rasters into the 1024-byte monochrome frame a
128x64 SSD1306-class display controller consumes.

Core modules:
- frame: Source image container and fixed display constants
- converter: Nearest-neighbour resize, thresholding and bit packing
- config: Environment-driven defaults for the command line tool
- cli: ``oledframe-convert`` entry point (file in, raw frame out)
"""

from oledframe.converter import (
    convert,
    iter_pages,
    oled_byte_array_to_image,
    to_oled_byte_array,
)
from oledframe.frame import (
    OLED_FRAME_SIZE,
    OLED_HEIGHT,
    OLED_WIDTH,
    FrameBuffer,
    InvalidImageDimensions,
)

__version__ = "0.1.0"

__all__ = [
    "OLED_FRAME_SIZE",
    "OLED_HEIGHT",
    "OLED_WIDTH",
    "FrameBuffer",
    "InvalidImageDimensions",
    "convert",
    "iter_pages",
    "oled_byte_array_to_image",
    "to_oled_byte_array",
]
