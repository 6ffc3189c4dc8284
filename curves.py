from dataclasses import dataclass
from typing import Optional

from sympy import isprime
from sympy.ntheory import sqrt_mod

from ecc import Curve, FieldElement, Point


@dataclass(frozen=True)
class CurveSetup:
    name: str
    """The name of the elliptic curve."""
    prime: int
    """The modulus of the prime field the curve is defined over."""
    a: int
    """Coefficient of x in y^2 = x^3 + a*x + b."""
    b: int
    """Constant term in y^2 = x^3 + a*x + b."""
    gx: int
    """x-coordinate of the base point."""
    gy: int
    """y-coordinate of the base point."""
    order: Optional[int] = None
    """The order of the base point, when known."""

    @property
    def curve(self):
        return Curve(self.a, self.b)

    def point(self, x, y):
        return self.curve.point(x, y, self.prime)

    def generator(self):
        return self.point(self.gx, self.gy)

    def infinity(self):
        return self.curve.infinity()

    @staticmethod
    def supported_curves():
        return list(_SETUPS)


_SETUPS = {
    "toy-223": CurveSetup(
        name="toy-223",
        prime=223,
        a=0,
        b=7,
        gx=47,
        gy=71,
        order=21,
    ),
    "secp256k1": CurveSetup(
        name="secp256k1",
        prime=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
        a=0,
        b=7,
        gx=0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
        gy=0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
        order=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
    ),
    "P-256": CurveSetup(
        name="P-256",
        prime=0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF,
        a=-3,
        b=0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B,
        gx=0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296,
        gy=0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5,
        order=0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
    ),
}


def get_curve_setup(name):
    if name not in _SETUPS:
        raise ValueError("{} is not one of the specified curves. "
                         "Please choose one of the following curves: {}".format(
                             name, CurveSetup.supported_curves()))
    return _SETUPS[name]


def enumerate_points(curve, prime):
    """All affine points of ``curve`` over F_prime, sorted by (x, y).

    Walks every x in the field, so only use it on small primes.
    """
    if not isprime(prime):
        raise ValueError(f"Modulus {prime} is not a prime")

    points = []
    for x in range(prime):
        rhs = (x ** 3 + curve.a * x + curve.b) % prime
        for y in sorted(sqrt_mod(rhs, prime, all_roots=True) or []):
            points.append(Point(FieldElement(x, prime), FieldElement(y, prime), curve))
    return points
