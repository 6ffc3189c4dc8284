class RangeError(ValueError):
    def __init__(self, num, prime):
        self.num = num
        self.prime = prime
        self.message = f"Num {num} not in field range 0 to {prime - 1}"
        super().__init__(self.message)


class MismatchedFieldError(TypeError):
    def __init__(self, left, right):
        self.left = left
        self.right = right
        self.message = f"Cannot operate on elements of different fields: {left} and {right}"
        super().__init__(self.message)


class MismatchedCurveError(TypeError):
    def __init__(self, left, right):
        self.left = left
        self.right = right
        self.message = f"Points are not on the same curve: {left} and {right}"
        super().__init__(self.message)


class NotOnCurveError(ValueError):
    def __init__(self, x, y, curve):
        self.x = x
        self.y = y
        self.curve = curve
        self.message = f"Point ({x}, {y}) is not on the curve {curve}"
        super().__init__(self.message)


class InvalidOperationError(ArithmeticError):
    """Raised when the group law hits an input it does not cover.

    This never happens for points on a curve over a prime field; seeing it
    means a logic defect or a degenerate setup such as a composite modulus.
    """

    def __init__(self, message):
        self.message = f"Invalid point operation. {message}"
        super().__init__(self.message)
