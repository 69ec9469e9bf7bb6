"""Shared test fixtures for the oledframe test suite.

This module provides reusable fixtures for common test scenarios including:
- Uniform and patterned source frames
- Environment isolation for config parsing
"""

from __future__ import annotations

from collections.abc import Iterable
from unittest.mock import patch

import pytest
from oledframe.frame import OLED_HEIGHT, OLED_WIDTH, FrameBuffer

# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture
def clean_env():
    """Run a test with no OLEDFRAME_* variables leaking in from the host."""
    with patch.dict("os.environ", {}, clear=True):
        yield


# ============================================================================
# Frame Factories
# ============================================================================


@pytest.fixture
def make_uniform_frame():
    """Factory fixture for frames filled with a single colour.

    Usage:
        frame = make_uniform_frame(2, 2, (30, 30, 30))
    """

    def _create_frame(width: int, height: int, rgb: tuple[int, int, int]) -> FrameBuffer:
        return FrameBuffer(width=width, height=height, data=bytes(rgb) * (width * height))

    return _create_frame


@pytest.fixture
def make_display_frame():
    """Factory fixture for native 128x64 frames with chosen pixels lit white.

    Frames at display resolution skip resampling, so each source pixel maps
    to exactly one output bit.

    Usage:
        frame = make_display_frame([(0, 0), (7, 0)])
    """

    def _create_frame(lit: Iterable[tuple[int, int]]) -> FrameBuffer:
        data = bytearray(OLED_WIDTH * OLED_HEIGHT * 3)
        for x, y in lit:
            offset = (y * OLED_WIDTH + x) * 3
            data[offset : offset + 3] = b"\xff\xff\xff"
        return FrameBuffer(width=OLED_WIDTH, height=OLED_HEIGHT, data=bytes(data))

    return _create_frame
