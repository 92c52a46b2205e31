"""Exact rational arithmetic over unbounded Python ints.

Scalar type for the whole reconstruction. Every value is kept in lowest
terms with a strictly positive denominator, so two rationals are equal
exactly when their (num, den) pairs are equal.
"""

from functools import total_ordering

from exactpoly.errors import InvalidRational, DivisionByZero


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm.

    Iterative so that huge operands never grow the call stack.
    Result is non-negative; gcd(0, 0) is 1 so zero reduces to 0/1.
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a or 1


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@total_ordering
class Rational:
    """Immutable reduced fraction num/den with den > 0."""

    __slots__ = ('num', 'den')

    def __init__(self, numerator: int, denominator: int = 1):
        if not (_is_int(numerator) and _is_int(denominator)):
            raise InvalidRational(
                f"Rational parts must be int, got "
                f"{type(numerator).__name__}/{type(denominator).__name__}"
            )
        if denominator == 0:
            raise InvalidRational(f"Zero denominator for numerator {numerator}")

        g = gcd(numerator, denominator)
        num = numerator // g
        den = denominator // g
        if den < 0:
            num, den = -num, -den
        object.__setattr__(self, 'num', num)
        object.__setattr__(self, 'den', den)

    def __setattr__(self, name, value):
        raise AttributeError(f"Rational is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Rational is immutable, cannot delete {name!r}")

    @classmethod
    def coerce(cls, value) -> 'Rational':
        """Promote an int to a Rational; pass Rationals through."""
        if isinstance(value, cls):
            return value
        if _is_int(value):
            return cls(value)
        raise TypeError(f"Cannot use {type(value).__name__} as a Rational")

    # Field operations

    def add(self, other: 'Rational') -> 'Rational':
        return Rational(self.num * other.den + other.num * self.den,
                        self.den * other.den)

    def sub(self, other: 'Rational') -> 'Rational':
        return Rational(self.num * other.den - other.num * self.den,
                        self.den * other.den)

    def mul(self, other: 'Rational') -> 'Rational':
        return Rational(self.num * other.num, self.den * other.den)

    def div(self, other: 'Rational') -> 'Rational':
        """self / other. Raises DivisionByZero when other is zero."""
        if other.num == 0:
            raise DivisionByZero(f"Cannot divide {self} by zero")
        return Rational(self.num * other.den, self.den * other.num)

    def neg(self) -> 'Rational':
        return Rational(-self.num, self.den)

    # Operator sugar; ints are promoted, anything else is NotImplemented.

    def __add__(self, other):
        try:
            return self.add(Rational.coerce(other))
        except TypeError:
            return NotImplemented

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        try:
            return self.sub(Rational.coerce(other))
        except TypeError:
            return NotImplemented

    def __rsub__(self, other):
        try:
            return Rational.coerce(other).sub(self)
        except TypeError:
            return NotImplemented

    def __mul__(self, other):
        try:
            return self.mul(Rational.coerce(other))
        except TypeError:
            return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        try:
            other = Rational.coerce(other)
        except TypeError:
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other):
        try:
            other = Rational.coerce(other)
        except TypeError:
            return NotImplemented
        return other.div(self)

    def __neg__(self):
        return self.neg()

    def __abs__(self):
        return Rational(abs(self.num), self.den)

    # Predicates and comparison

    def is_zero(self) -> bool:
        return self.num == 0

    def is_integer(self) -> bool:
        return self.den == 1

    def __eq__(self, other):
        if isinstance(other, Rational):
            return self.num == other.num and self.den == other.den
        if _is_int(other):
            return self.den == 1 and self.num == other
        return NotImplemented

    def __hash__(self):
        if self.den == 1:
            return hash(self.num)
        return hash((self.num, self.den))

    def __lt__(self, other):
        try:
            other = Rational.coerce(other)
        except TypeError:
            return NotImplemented
        return self.num * other.den < other.num * self.den

    def __bool__(self):
        return self.num != 0

    def __str__(self):
        if self.den == 1:
            return str(self.num)
        return f"{self.num}/{self.den}"

    def __repr__(self):
        return f"Rational({self.num}, {self.den})"

    def __reduce__(self):
        return (Rational, (self.num, self.den))


ZERO = Rational(0)
ONE = Rational(1)
