import argparse
import math

from curves import CurveSetup, get_curve_setup
from ecc import Point

# find_order walks the whole group, keep it to toy curves
MAX_ORDER_PRIME = 10 ** 6


# === Helper Functions ===
def find_order(G: Point):
    """Find the order of point G on the curve."""
    if G.x is None:
        return 1
    # Hasse: the group has at most p + 1 + 2*sqrt(p) points
    limit = G.prime + 2 + math.isqrt(4 * G.prime)
    point = G
    for i in range(1, limit + 1):
        if point.x is None:  # Point at infinity
            return i
        point += G
    return None


# === Main Demo ===
def main(argv=None):
    parser = argparse.ArgumentParser(description="Elliptic Curve Arithmetic Demo")
    parser.add_argument("-c", "--curve", choices=CurveSetup.supported_curves(), default="toy-223", help="Named curve to use (default: toy-223)")
    parser.add_argument("-k", "--multiples", type=int, default=5, help="Number of multiples of the generator to print (default: 5)")
    parser.add_argument("--order", action="store_true", help="Also find the order of the generator by repeated addition (toy curves only)")
    args = parser.parse_args(argv)

    if args.multiples < 1:
        parser.error("Multiples must be at least 1.")

    setup = get_curve_setup(args.curve)
    if args.order and setup.prime > MAX_ORDER_PRIME:
        parser.error(f"--order needs a field of at most {MAX_ORDER_PRIME} elements, {setup.name} is too large.")

    G = setup.generator()

    print(f"=== {setup.name} Curve Demo ===")
    print(f"Curve: {setup.curve} over F_{setup.prime}")
    print(f"Generator (G): {G}\n")

    for k in range(1, args.multiples + 1):
        print(f"{k} * G = {k * G}")

    if args.order:
        print(f"\nOrder of G: {find_order(G)}")


if __name__ == "__main__":
    main()
