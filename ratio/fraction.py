"""
Exact fractions over a bounded integer domain

A fraction keeps numerator and denominator inside a fixed-width signed
integer range (see domain.py). Arithmetic never overflows: every
intermediate product or sum saturates at the domain bounds, and each result
is reduced to lowest terms with a positive denominator.

Use a concrete class per domain:

    >>> from ratio import Fraction32
    >>> Fraction32(1, 2) + Fraction32(1, 3)
    Fraction32(5, 6)
"""
import math
import numbers
import operator
from fractions import Fraction as ExactFraction
from typing import Dict, Optional, Tuple

from .domain import IntDomain


class NonPositiveDivisorError(ZeroDivisionError):
    """Division or reciprocal of a fraction whose numerator is <= 0.

    Always a broken constant or a configuration bug: do not catch and retry.
    """


class Fraction:
    """
    Ratio of two integers from ``domain``.

    Values are compared by cross-multiplication, so 1/2 == 2/4 even before
    normalization. Construction clamps integers into the domain and does
    no other validation; a zero denominator may exist transiently.
    """

    __slots__ = ("numerator", "denominator")

    domain: Optional[IntDomain] = None

    def __init__(self, numerator=0, denominator=1):
        if self.domain is None:
            raise TypeError("Fraction has no integer domain, use fraction_type(dtype)")
        clamp = self.domain.clamp
        self.numerator = clamp(operator.index(numerator))
        self.denominator = clamp(operator.index(denominator))

    @classmethod
    def new(cls, numerator, denominator) -> "Fraction":
        return cls(numerator, denominator)

    @classmethod
    def zero(cls) -> "Fraction":
        return cls(0, 1)

    @classmethod
    def from_float(cls, value: float) -> "Fraction":
        """Closest fraction whose denominator fits the domain"""
        exact = ExactFraction(value).limit_denominator(cls.domain.max)
        return cls(exact.numerator, exact.denominator)

    # ------------------------------------------------------------------
    # Unary operations
    # ------------------------------------------------------------------

    def value(self) -> int:
        """Integer quotient, truncated toward zero"""
        return self.domain.div(self.numerator, self.denominator)

    def reciprocal(self) -> "Fraction":
        if self.numerator <= 0:
            raise NonPositiveDivisorError("Cannot take reciprocal of zero.")
        return type(self)(self.denominator, self.numerator)

    def abs(self) -> "Fraction":
        domain = self.domain
        return type(self)(domain.abs(self.numerator), domain.abs(self.denominator))

    def normalized(self) -> "Fraction":
        """Lowest terms, sign carried by the numerator"""
        domain = self.domain
        numerator, denominator = self.numerator, self.denominator
        if denominator < 0:
            numerator = domain.neg(numerator)
            denominator = domain.neg(denominator)
        divisor = math.gcd(numerator, denominator)
        if divisor > 1:
            numerator //= divisor
            denominator //= divisor
        return type(self)(numerator, denominator)

    def sqrt(self) -> "Fraction":
        """
        Floor square root of numerator and denominator taken separately.

        Exact only when both are perfect squares: sqrt(1/2) is 1/1.
        """
        if self.denominator == 0:
            return self.zero()
        return type(self)(self._floor_sqrt(self.numerator), self._floor_sqrt(self.denominator))

    @classmethod
    def _floor_sqrt(cls, value: int) -> int:
        # Largest x with x * x <= value; -1 for negative input
        if value < 0:
            return -1
        if value == cls.domain.max:
            return cls.domain.sqrt_max
        return math.isqrt(value)

    def __neg__(self) -> "Fraction":
        return type(self)(self.domain.neg(self.numerator), self.denominator)

    def __pos__(self) -> "Fraction":
        return self

    def __abs__(self) -> "Fraction":
        return self.abs()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _coerce(self, other):
        if isinstance(other, Fraction):
            if other.domain != self.domain:
                raise TypeError(
                    f"Cannot mix {type(self).__name__} and {type(other).__name__}"
                )
            return other
        if isinstance(other, numbers.Integral):
            return type(self)(int(other), 1)
        return NotImplemented

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        d = self.domain
        numerator = d.add(
            d.mul(self.numerator, other.denominator),
            d.mul(other.numerator, self.denominator),
        )
        denominator = d.mul(self.denominator, other.denominator)
        return type(self)(numerator, denominator).normalized()

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        d = self.domain
        numerator = d.sub(
            d.mul(self.numerator, other.denominator),
            d.mul(other.numerator, self.denominator),
        )
        denominator = d.mul(self.denominator, other.denominator)
        return type(self)(numerator, denominator).normalized()

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other - self

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        d = self.domain
        return type(self)(
            d.mul(self.numerator, other.numerator),
            d.mul(self.denominator, other.denominator),
        ).normalized()

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        if other.numerator <= 0:
            raise NonPositiveDivisorError("Cannot divide by zero.")
        d = self.domain
        return type(self)(
            d.mul(self.numerator, other.denominator),
            d.mul(self.denominator, other.numerator),
        ).normalized()

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other / self

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def _cross(self, other) -> Tuple[int, int]:
        d = self.domain
        return (
            d.mul(self.numerator, other.denominator),
            d.mul(other.numerator, self.denominator),
        )

    def __eq__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        lhs, rhs = self._cross(other)
        return lhs == rhs

    def __lt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        lhs, rhs = self._cross(other)
        return lhs < rhs

    def __le__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        lhs, rhs = self._cross(other)
        return lhs <= rhs

    def __gt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        lhs, rhs = self._cross(other)
        return lhs > rhs

    def __ge__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        lhs, rhs = self._cross(other)
        return lhs >= rhs

    def __hash__(self):
        """
        Hash of the normalized form.

        Matches equality while the cross products fit the domain. Fractions
        that only compare equal because both cross products saturated
        (200/150 and 300/200 in int16) may hash differently.
        """
        reduced = self.normalized()
        if reduced.denominator == 1:
            return hash(reduced.numerator)
        return hash((reduced.numerator, reduced.denominator))

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def __bool__(self) -> bool:
        return self.numerator != 0

    def __int__(self) -> int:
        return self.value()

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.numerator}, {self.denominator})"

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


_FRACTION_TYPES: Dict[IntDomain, type] = {}


def fraction_type(dtype) -> type:
    """
    Concrete Fraction class for a numpy integer dtype or an IntDomain.

    The same domain always maps to the same class.
    """
    domain = dtype if isinstance(dtype, IntDomain) else IntDomain.from_dtype(dtype)
    cls = _FRACTION_TYPES.get(domain)
    if cls is None:
        cls = type(
            f"Fraction{domain.bits}",
            (Fraction,),
            {"__slots__": (), "domain": domain, "__module__": __name__},
        )
        _FRACTION_TYPES[domain] = cls
    return cls
