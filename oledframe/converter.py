"""
RGB frame to SSD1306 byte array conversion

The conversion runs in three steps:
- Resize: nearest-neighbour resample of the source to 128x64
- Threshold: a pixel is lit when its channel average is strictly above the threshold
- Pack: pixels in raster order, eight per byte, first pixel in bit 7

Every call works on call-local buffers only, so converting from several
threads at once needs no locking.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from PIL import Image

from oledframe.frame import CHANNELS, OLED_FRAME_SIZE, OLED_HEIGHT, OLED_WIDTH, FrameBuffer
from oledframe.utils import chunk_bytes

LOGGER = logging.getLogger(__name__)

OLED_PAGE_SIZE = OLED_WIDTH


def resize_nearest(frame: FrameBuffer, width: int = OLED_WIDTH, height: int = OLED_HEIGHT) -> bytes:
    """Resample ``frame`` to ``width`` x ``height`` RGB bytes without interpolation."""
    image = frame.to_image()
    if image.size != (width, height):
        image = image.resize((width, height), Image.Resampling.NEAREST)
    return image.tobytes()


def pixel_brightness(red: int, green: int, blue: int) -> int:
    """Average of the three channels.

    The sum is taken on Python ints, so a white pixel (765) averages to 255
    instead of wrapping around like an 8-bit accumulator would.
    """
    return (red + green + blue) // 3


def _check_threshold(threshold: int) -> int:
    if isinstance(threshold, bool) or not isinstance(threshold, int):
        raise ValueError(f"Threshold must be an integer, got {threshold!r}")
    if not 0 <= threshold <= 255:
        raise ValueError(f"Threshold must be within 0..255, got {threshold}")
    return threshold


def pack_monochrome(rgb: bytes, row_width: int, threshold: int) -> bytes:
    """Threshold raster-ordered RGB bytes and pack them MSB first.

    A byte is flushed once it holds eight bits, at the end of every row of
    ``row_width`` pixels and after the final pixel. Bits left unfilled in a
    flushed byte stay zero.
    """
    if row_width <= 0:
        raise ValueError("Row width must be positive")
    threshold = _check_threshold(threshold)
    pixel_count = len(rgb) // CHANNELS
    packed = bytearray()
    current = 0
    bit_index = 7
    for index in range(pixel_count):
        offset = index * CHANNELS
        if pixel_brightness(rgb[offset], rgb[offset + 1], rgb[offset + 2]) > threshold:
            current |= 1 << bit_index
        bit_index -= 1

        # Never taken at 128 columns; kept so narrower rows stay byte-aligned.
        if (index + 1) % row_width == 0 or index == pixel_count - 1:
            bit_index = -1

        if bit_index < 0:
            packed.append(current)
            current = 0
            bit_index = 7
    return bytes(packed)


def to_oled_byte_array(frame: FrameBuffer, threshold: int) -> bytes:
    """Convert ``frame`` to the 1024-byte monochrome buffer of a 128x64 SSD1306."""
    threshold = _check_threshold(threshold)
    resized = resize_nearest(frame)
    packed = pack_monochrome(resized, OLED_WIDTH, threshold)
    if LOGGER.isEnabledFor(logging.DEBUG):
        lit = sum(byte.bit_count() for byte in packed)
        LOGGER.debug(
            "Converted %dx%d frame at threshold %d: %d of %d pixels lit",
            frame.width,
            frame.height,
            threshold,
            lit,
            OLED_WIDTH * OLED_HEIGHT,
        )
    return packed


convert = to_oled_byte_array


def _check_frame_length(buffer: bytes) -> None:
    if len(buffer) != OLED_FRAME_SIZE:
        raise ValueError(f"OLED frame must be {OLED_FRAME_SIZE} bytes, got {len(buffer)}")


def iter_pages(buffer: bytes) -> Iterator[bytes]:
    """Yield the eight 128-byte pages of an OLED frame in display order."""
    _check_frame_length(buffer)
    yield from chunk_bytes(bytes(buffer), OLED_PAGE_SIZE)


def oled_byte_array_to_image(buffer: bytes) -> Image.Image:
    """Unpack an OLED frame into a 128x64 mode "1" image for previewing."""
    _check_frame_length(buffer)
    # Mode "1" raw data is row-major, MSB first, which matches the packed layout.
    return Image.frombytes("1", (OLED_WIDTH, OLED_HEIGHT), bytes(buffer))
