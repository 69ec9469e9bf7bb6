"""Source image container and fixed SSD1306 frame geometry."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from PIL import Image

OLED_WIDTH = 128
OLED_HEIGHT = 64
OLED_PAGE_HEIGHT = 8
OLED_FRAME_SIZE = OLED_WIDTH * OLED_HEIGHT // 8

CHANNELS = 3


class InvalidImageDimensions(ValueError):
    """Raised when a pixel buffer does not match its declared width and height."""


@dataclass(frozen=True, slots=True)
class FrameBuffer:
    """Row-major RGB pixels, three bytes per pixel, no row padding."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise InvalidImageDimensions(f"Image must be at least 1x1, got {self.width}x{self.height}")
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))
        expected = self.width * self.height * CHANNELS
        if len(self.data) != expected:
            raise InvalidImageDimensions(
                f"Pixel buffer holds {len(self.data)} bytes, expected {expected} for {self.width}x{self.height} RGB"
            )

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @classmethod
    def from_image(cls, image: Image.Image) -> FrameBuffer:
        """Build a frame from any Pillow image, converting it to RGB first."""
        if image.mode != "RGB":
            image = image.convert("RGB")
        width, height = image.size
        return cls(width=width, height=height, data=image.tobytes())

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[tuple[int, int, int]]]) -> FrameBuffer:
        """Build a frame from nested rows of ``(r, g, b)`` tuples."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        data = bytearray()
        for row in rows:
            if len(row) != width:
                raise InvalidImageDimensions("All rows must have the same number of pixels")
            for pixel in row:
                data.extend(pixel)
        return cls(width=width, height=height, data=bytes(data))

    def to_image(self) -> Image.Image:
        return Image.frombytes("RGB", self.size, self.data)
