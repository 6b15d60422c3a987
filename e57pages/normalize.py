"""Normalization of intensity and color values into the range 0..1."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from typing import Optional


def _to_float32(value: float) -> float:
    """Round a float to single precision, saturating to infinity on overflow."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


@dataclass(frozen=True)
class ValueRange:
    """A closed range of values used to map raw values onto 0..1."""

    minimum: float
    maximum: float
    _inverse: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        span = self.maximum - self.minimum
        if span < 0.0:
            raise ValueError(
                f"Found invalid range: min={self.minimum}, max={self.maximum}"
            )
        inverse = math.inf if span == 0.0 else 1.0 / span
        object.__setattr__(self, "_inverse", inverse)

    def normalize(self, value: float) -> float:
        """Clamp ``value`` into the range and scale it to 0..1 in single precision."""
        if value < self.minimum:
            clamped = self.minimum
        elif value > self.maximum:
            clamped = self.maximum
        else:
            clamped = value
        return _to_float32((clamped - self.minimum) * self._inverse)


def normalize_value(
    enabled: bool, value: float, value_range: Optional[ValueRange]
) -> float:
    """Normalize ``value`` with ``value_range`` when enabled.

    Without a range the result is zero; when disabled the value is returned
    unchanged apart from rounding to single precision.
    """
    if not enabled:
        return _to_float32(value)
    if value_range is None:
        return 0.0
    return value_range.normalize(value)