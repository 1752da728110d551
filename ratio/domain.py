"""
Bounded signed-integer domains

Every operation clamps to the domain bounds instead of wrapping:
- add / sub / mul saturate at min and max
- negating min gives max
- division truncates toward zero
"""
import math
from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class IntDomain:
    """Signed integer range of a fixed-width machine type"""
    name: str
    min: int
    max: int
    sqrt_max: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.min >= 0 or self.max <= 0:
            raise ValueError(f"{self.name} is not a signed integer domain")
        # floor(sqrt(max)), so the square root search never has to reach max
        object.__setattr__(self, "sqrt_max", math.isqrt(self.max))

    @classmethod
    def from_dtype(cls, dtype) -> "IntDomain":
        """Build the domain of a numpy integer dtype (np.int16, "int32", ...)"""
        info = np.iinfo(dtype)
        return cls(name=np.dtype(dtype).name, min=int(info.min), max=int(info.max))

    @property
    def bits(self) -> int:
        return self.max.bit_length() + 1

    def clamp(self, value: int) -> int:
        if value > self.max:
            return self.max
        if value < self.min:
            return self.min
        return value

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    def add(self, a: int, b: int) -> int:
        return self.clamp(a + b)

    def sub(self, a: int, b: int) -> int:
        return self.clamp(a - b)

    def mul(self, a: int, b: int) -> int:
        return self.clamp(a * b)

    def neg(self, a: int) -> int:
        """Negation where -min clamps to max"""
        return self.clamp(-a)

    def abs(self, a: int) -> int:
        return self.neg(a) if a < 0 else a

    def div(self, a: int, b: int) -> int:
        """Integer quotient truncated toward zero (min // -1 clamps to max)"""
        quotient = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            quotient = -quotient
        return self.clamp(quotient)

    def __str__(self) -> str:
        return self.name


INT8 = IntDomain.from_dtype(np.int8)
INT16 = IntDomain.from_dtype(np.int16)
INT32 = IntDomain.from_dtype(np.int32)
INT64 = IntDomain.from_dtype(np.int64)
