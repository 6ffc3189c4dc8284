import pathlib
import sys
import unittest

from Crypto.PublicKey import ECC

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))
from curves import CurveSetup, enumerate_points, get_curve_setup
from ecc import Curve


class CurveSetupTests(unittest.TestCase):
    def test_supported_curves(self):
        self.assertEqual(CurveSetup.supported_curves(), ["toy-223", "secp256k1", "P-256"])

    def test_unknown_curve(self):
        with self.assertRaises(ValueError):
            get_curve_setup("P-192")

    def test_generators_have_their_order(self):
        for name in CurveSetup.supported_curves():
            setup = get_curve_setup(name)
            G = setup.generator()
            self.assertEqual(G.curve, Curve(setup.a, setup.b))
            self.assertEqual(setup.order * G, setup.infinity())
            self.assertEqual((setup.order - 1) * G, -G)
            self.assertEqual((setup.order + 1) * G, G)

    def test_point(self):
        setup = get_curve_setup("toy-223")
        self.assertEqual(setup.point(192, 105) + setup.point(17, 56), setup.point(170, 142))


class P256ReferenceTests(unittest.TestCase):
    """Cross-check P-256 arithmetic against pycryptodome's EccPoint."""

    @classmethod
    def setUpClass(cls):
        cls.setup = get_curve_setup("P-256")
        cls.G = cls.setup.generator()
        cls.G_ref = ECC.EccPoint(cls.setup.gx, cls.setup.gy, curve="P-256")

    def assertSamePoint(self, ours, ref):
        self.assertEqual((ours.x.num, ours.y.num), (int(ref.x), int(ref.y)))

    def test_scalar_multiplication(self):
        for k in (1, 2, 3, 7, 0xDEADBEEF, 2 ** 200 + 12345, self.setup.order - 2):
            self.assertSamePoint(k * self.G, self.G_ref * k)

    def test_addition(self):
        P, Q = 11 * self.G, 29 * self.G
        P_ref, Q_ref = self.G_ref * 11, self.G_ref * 29
        self.assertSamePoint(P + Q, P_ref + Q_ref)
        self.assertSamePoint(P + P, P_ref + P_ref)
        self.assertSamePoint(P - Q, P_ref + (-Q_ref))


class EnumeratePointsTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.curve = Curve(0, 7)
        cls.points = enumerate_points(cls.curve, 223)

    def test_group_size(self):
        # 21 | #E from (47, 71), and x^3 = -7 has three roots, so 84 | #E;
        # Hasse leaves 252 as the only candidate
        self.assertEqual(len(self.points) + 1, 252)

    def test_points_are_on_curve_and_sorted(self):
        coords = [(p.x.num, p.y.num) for p in self.points]
        self.assertEqual(coords, sorted(coords))
        self.assertEqual(len(set(coords)), len(coords))
        for p in self.points:
            self.assertTrue(self.curve.contains(p.x, p.y))

    def test_known_points_present(self):
        coords = {(p.x.num, p.y.num) for p in self.points}
        for xy in [(192, 105), (17, 56), (47, 71), (47, 152), (6, 0)]:
            self.assertIn(xy, coords)

    def test_points_pair_up(self):
        points = set(self.points)
        for p in self.points:
            self.assertIn(-p, points)

    def test_composite_modulus(self):
        with self.assertRaises(ValueError):
            enumerate_points(self.curve, 221)


if __name__ == "__main__":
    unittest.main()
