# ecc.py

from dataclasses import dataclass
from enum import Enum

from ecc_errors import (
    InvalidOperationError,
    MismatchedCurveError,
    MismatchedFieldError,
    NotOnCurveError,
    RangeError,
)


class FieldElement:
    def __init__(self, num, prime):
        if num >= prime or num < 0:
            raise RangeError(num, prime)
        self.num = num
        self.prime = prime

    def __eq__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.num == other.num and self.prime == other.prime

    def __hash__(self):
        return hash((self.num, self.prime))

    def __add__(self, other):
        self._check_field(other)
        return FieldElement((self.num + other.num) % self.prime, self.prime)

    def __sub__(self, other):
        self._check_field(other)
        # % on ints is floored, so a negative difference lands back in [0, prime)
        return FieldElement((self.num - other.num) % self.prime, self.prime)

    def __mul__(self, other):
        if isinstance(other, int):
            return FieldElement((self.num * other) % self.prime, self.prime)
        self._check_field(other)
        return FieldElement((self.num * other.num) % self.prime, self.prime)

    def __rmul__(self, coef):
        if not isinstance(coef, int):
            return NotImplemented
        return self * coef

    def __pow__(self, exponent):
        if exponent < 0:
            if self.num == 0:
                raise ZeroDivisionError("No inverse for 0")
            # a^(prime-1) == 1, so the exponent only matters mod prime-1
            exponent %= self.prime - 1
        return FieldElement(pow(self.num, exponent, self.prime), self.prime)

    def __truediv__(self, other):
        self._check_field(other)
        return self * other.inv()

    def __neg__(self):
        return FieldElement(-self.num % self.prime, self.prime)

    def inv(self):
        """Multiplicative inverse by Fermat's little theorem: num^(prime-2)."""
        if self.num == 0:
            raise ZeroDivisionError("No inverse for 0")
        return FieldElement(pow(self.num, self.prime - 2, self.prime), self.prime)

    def _check_field(self, other):
        if not isinstance(other, FieldElement):
            raise TypeError(f"Expected a FieldElement, got {type(other).__name__}")
        if self.prime != other.prime:
            raise MismatchedFieldError(self, other)

    def __repr__(self):
        return f"FieldElement({self.num}, {self.prime})"


@dataclass(frozen=True)
class Curve:
    """Short Weierstrass curve y^2 = x^3 + a*x + b.

    The coefficients are plain integers; they are reduced into whichever
    prime field the coordinates of a point live in.
    """

    a: int
    b: int

    def coefficients(self, prime):
        return FieldElement(self.a % prime, prime), FieldElement(self.b % prime, prime)

    def contains(self, x, y):
        if x.prime != y.prime:
            raise MismatchedFieldError(x, y)
        a, b = self.coefficients(x.prime)
        return y ** 2 == x ** 3 + a * x + b

    def point(self, x, y, prime):
        return Point(FieldElement(x, prime), FieldElement(y, prime), self)

    def infinity(self):
        return Point.infinity(self)

    def __str__(self):
        return f"y^2 = x^3 + {self.a}x + {self.b}"


class AdditionCase(Enum):
    """Rows of the group law, in the order they are tried."""

    IDENTITY = "one operand is the point at infinity"
    VERTICAL = "same x, different y"
    VERTICAL_TANGENT = "same x, y is zero"
    DOUBLING = "same point"
    CHORD = "different x"


class Point:
    def __init__(self, x, y, curve):
        self.curve = curve

        if x is None and y is None:
            self.x = self.y = None  # Point at infinity
            return
        if x is None or y is None:
            raise ValueError("Set both coordinates, or neither for the point at infinity")
        if not curve.contains(x, y):
            raise NotOnCurveError(x, y, curve)
        self.x = x
        self.y = y

    @classmethod
    def infinity(cls, curve):
        return cls(None, None, curve)

    @property
    def is_infinity(self):
        return self.x is None

    @property
    def prime(self):
        return None if self.x is None else self.x.prime

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return (
            self.x == other.x and
            self.y == other.y and
            self.curve == other.curve
        )

    def __hash__(self):
        return hash((self.x, self.y, self.curve))

    def addition_case(self, other):
        """Return the AdditionCase that governs ``self + other``, or None.

        Both points must be on the same curve. The checks run in a fixed
        order: the identity first, then the two vertical cases, and only then
        doubling and the generic chord.
        """
        if self.x is None or other.x is None:
            return AdditionCase.IDENTITY
        if self.x == other.x and self.y != other.y:
            return AdditionCase.VERTICAL
        if self.x == other.x and (self.y.num == 0 or other.y.num == 0):
            return AdditionCase.VERTICAL_TANGENT
        if self.x == other.x and self.y == other.y:
            return AdditionCase.DOUBLING
        if self.x != other.x:
            return AdditionCase.CHORD
        return None

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        if self.curve != other.curve:
            raise MismatchedCurveError(self, other)

        case = self.addition_case(other)
        if case is AdditionCase.IDENTITY:
            return other if self.x is None else self
        if case in (AdditionCase.VERTICAL, AdditionCase.VERTICAL_TANGENT):
            return self.__class__.infinity(self.curve)
        if case is AdditionCase.DOUBLING:
            return self._double()
        if case is AdditionCase.CHORD:
            return self._chord(other)
        raise InvalidOperationError(f"No addition rule covers {self} + {other}")

    def _double(self):
        a, _ = self.curve.coefficients(self.prime)
        try:
            s = (3 * self.x ** 2 + a) / (2 * self.y)
            x3 = s ** 2 - 2 * self.x
            y3 = s * (self.x - x3) - self.y
            return self.__class__(x3, y3, self.curve)
        except (ZeroDivisionError, NotOnCurveError) as exc:
            raise InvalidOperationError(f"Doubling {self} failed: {exc}") from exc

    def _chord(self, other):
        try:
            s = (other.y - self.y) / (other.x - self.x)
            x3 = s ** 2 - self.x - other.x
            y3 = s * (self.x - x3) - self.y
            return self.__class__(x3, y3, self.curve)
        except (ZeroDivisionError, NotOnCurveError) as exc:
            raise InvalidOperationError(f"Adding {self} and {other} failed: {exc}") from exc

    def __neg__(self):
        if self.x is None:
            return self
        return self.__class__(self.x, -self.y, self.curve)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self + (-other)

    def __rmul__(self, coef):
        if not isinstance(coef, int):
            return NotImplemented
        if coef < 0:
            return (-coef) * (-self)

        # double-and-add; same result as adding the point to itself coef-1 times
        result = self.__class__.infinity(self.curve)
        addend = self
        while coef:
            if coef & 1:
                result += addend
            coef >>= 1
            if coef:
                addend += addend

        return result

    def __mul__(self, coef):
        return self.__rmul__(coef)

    def __repr__(self):
        if self.x is None:
            return "Point(infinity)"
        return f"Point({self.x.num}, {self.y.num})_{self.curve.a}_{self.curve.b}"
