# Bounded rational arithmetic
import numpy as np

from .domain import IntDomain, INT8, INT16, INT32, INT64
from .fraction import Fraction, NonPositiveDivisorError, fraction_type

Fraction16 = fraction_type(np.int16)
Fraction32 = fraction_type(np.int32)
Fraction64 = fraction_type(np.int64)

__all__ = [
    "IntDomain", "INT8", "INT16", "INT32", "INT64",
    "Fraction", "Fraction16", "Fraction32", "Fraction64",
    "NonPositiveDivisorError", "fraction_type",
]
