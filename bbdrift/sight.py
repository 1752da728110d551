"""
Sight state and reticle placement

The display layer draws the aim point at the screen centre shifted by the
user's zero offsets and by the drift computed for the selected range.
"""
import dataclasses
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .calculator import BBDrift, Number
from .physics import from_int, pi

_ZERO_LIMITS = np.iinfo(np.int16)
_BYTE_LIMITS = np.iinfo(np.uint8)


@dataclass(frozen=True)
class Sight:
    """Settings the user dials in through the menu"""
    x_zero: int = 0          # px, right of centre
    y_zero: int = 0          # px, below centre
    battery_power: int = 100  # %
    range: int = 10          # m

    def __post_init__(self):
        for name in ("x_zero", "y_zero"):
            value = getattr(self, name)
            if not _ZERO_LIMITS.min <= value <= _ZERO_LIMITS.max:
                raise ValueError(f"{name} out of range: {value}")
        if not 0 <= self.battery_power <= 100:
            raise ValueError(f"battery_power must be 0-100, got {self.battery_power}")
        if not _BYTE_LIMITS.min <= self.range <= _BYTE_LIMITS.max:
            raise ValueError(f"range must fit in a byte, got {self.range}")

    @classmethod
    def default(cls) -> "Sight":
        return cls()

    def with_range(self, range_m: int) -> "Sight":
        return dataclasses.replace(self, range=range_m)

    def with_zero(self, x_zero: int, y_zero: int) -> "Sight":
        return dataclasses.replace(self, x_zero=x_zero, y_zero=y_zero)


def pixel_offset(drift: Number, range_m: Number, axis_size_px: int) -> Number:
    """
    Screen offset of a drift seen at ``range_m``.

    The axis spans a quarter of pi * range at the target. Ranges <= 0 give
    no offset.
    """
    if range_m <= 0:
        return from_int(drift, 0)
    return drift * axis_size_px / (pi(drift) * range_m / 4)


def reticle_position(sight: Sight, drift: BBDrift, width_px: int, height_px: int) -> Tuple[int, int]:
    """Pixel position of the aim point; screen y grows downward"""
    offset_x = pixel_offset(drift.drift_x, sight.range, width_px)
    offset_y = pixel_offset(drift.drift_y, sight.range, height_px)
    x = width_px // 2 + sight.x_zero + int(offset_x)
    y = height_px // 2 + sight.y_zero - int(offset_y)
    return x, y
