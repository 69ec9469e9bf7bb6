"""Configuration helpers for the oledframe command line tool."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from oledframe.utils import clamp_byte, parse_bool, parse_int

DEFAULT_THRESHOLD = 127
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _normalize_log_level(value: str | None) -> str:
    if not value:
        return DEFAULT_LOG_LEVEL
    candidate = value.strip().upper()
    return candidate if candidate in LOG_LEVELS else DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class ConverterConfig:
    threshold: int
    log_level: str
    write_preview: bool

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)

    @staticmethod
    def from_env(env: dict[str, str] | None = None) -> ConverterConfig:
        source = env if env is not None else os.environ
        return ConverterConfig(
            threshold=clamp_byte(parse_int(source.get("OLEDFRAME_THRESHOLD"), DEFAULT_THRESHOLD)),
            log_level=_normalize_log_level(source.get("OLEDFRAME_LOG_LEVEL")),
            write_preview=parse_bool(source.get("OLEDFRAME_WRITE_PREVIEW")),
        )
