"""Circle group C(F_p) = {(x, y) : x^2 + y^2 = 1}.

The group law is (x0, y0) * (x1, y1) = (x0*x1 - y0*y1, x0*y1 + y0*x1), the
identity is (1, 0) and the inverse of (x, y) is (x, -y). For p = 3 (mod 4)
the group is cyclic of order p + 1.

Scalar points are CirclePoint values. Batches of points are handled as pairs
of galois arrays (xs, ys) with compose_coordinates / square_coordinates.
"""

from typing import List, Tuple

from .errors import FieldMismatchError, InvalidPointError
from .field import FieldElement, PrimeField


class CirclePoint:
    """Immutable point on x^2 + y^2 = 1 over a PrimeField."""

    __slots__ = ("field", "_x", "_y", "_key")

    def __init__(self, field: PrimeField, x, y) -> None:
        """Build a point from ints or field elements.

        Raises:
            InvalidPointError: If x^2 + y^2 != 1
        """
        xe = field.element(x)
        ye = field.element(y)
        if int(xe * xe + ye * ye) != 1:
            raise InvalidPointError(
                f"({int(xe)}, {int(ye)}) is not on x^2 + y^2 = 1 over GF({field.p})"
            )
        self._init(field, xe, ye)

    def _init(self, field: PrimeField, xe: FieldElement, ye: FieldElement) -> None:
        object.__setattr__(self, "field", field)
        object.__setattr__(self, "_x", xe)
        object.__setattr__(self, "_y", ye)
        object.__setattr__(self, "_key", (int(xe), int(ye)))

    @classmethod
    def _unchecked(cls, field: PrimeField, xe: FieldElement, ye: FieldElement) -> "CirclePoint":
        """Wrap coordinates already known to lie on the curve."""
        point = cls.__new__(cls)
        point._init(field, xe, ye)
        return point

    @classmethod
    def identity(cls, field: PrimeField) -> "CirclePoint":
        return cls._unchecked(field, field.one(), field.zero())

    @classmethod
    def from_x(cls, field: PrimeField, x) -> Tuple["CirclePoint", ...]:
        """All points with the given x coordinate, smaller y first.

        Returns an empty tuple when 1 - x^2 is a non-residue and a single
        point when y = 0.
        """
        xe = field.element(x)
        y = field.sqrt(field.one() - xe * xe)
        if y is None:
            return ()
        if int(y) == 0:
            return (cls._unchecked(field, xe, y),)
        return (cls._unchecked(field, xe, y), cls._unchecked(field, field.element(x), -y))

    @classmethod
    def points(cls, field: PrimeField) -> List["CirclePoint"]:
        """Enumerate the whole curve. O(p): small moduli only."""
        result: List[CirclePoint] = []
        for x in range(field.p):
            result.extend(cls.from_x(field, x))
        return result

    def __setattr__(self, name, value):
        raise AttributeError("CirclePoint is immutable")

    # --- Coordinates ---

    @property
    def x(self) -> FieldElement:
        return self._x.copy()

    @property
    def y(self) -> FieldElement:
        return self._y.copy()

    def as_tuple(self) -> Tuple[int, int]:
        return self._key

    def is_identity(self) -> bool:
        return self._key == (1, 0)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CirclePoint):
            return NotImplemented
        return self.field.p == other.field.p and self._key == other._key

    def __hash__(self) -> int:
        return hash((self.field.p,) + self._key)

    def __repr__(self) -> str:
        return f"CirclePoint({self._key[0]}, {self._key[1]}, p={self.field.p})"

    # --- Group Law ---

    def _check_field(self, other: "CirclePoint") -> None:
        if self.field.p != other.field.p:
            raise FieldMismatchError(
                f"cannot combine points over GF({self.field.p}) and GF({other.field.p})"
            )

    def compose(self, other: "CirclePoint") -> "CirclePoint":
        """Group law: (x0*x1 - y0*y1, x0*y1 + y0*x1)."""
        self._check_field(other)
        x, y = compose_coordinates(self._x, self._y, other._x, other._y)
        return CirclePoint._unchecked(self.field, x, y)

    def __mul__(self, other: "CirclePoint") -> "CirclePoint":
        if not isinstance(other, CirclePoint):
            return NotImplemented
        return self.compose(other)

    def inverse(self) -> "CirclePoint":
        """Involution J(x, y) = (x, -y), which is also the group inverse."""
        return CirclePoint._unchecked(self.field, self._x, -self._y)

    def antipode(self) -> "CirclePoint":
        """(-x, -y), i.e. the point composed with (-1, 0)."""
        return CirclePoint._unchecked(self.field, -self._x, -self._y)

    def square(self) -> "CirclePoint":
        """Squaring map pi(x, y) = (2x^2 - 1, 2xy), a group endomorphism."""
        x, y = square_coordinates(self._x, self._y)
        return CirclePoint._unchecked(self.field, x, y)

    def pow(self, k: int) -> "CirclePoint":
        """P^k by square-and-multiply. Negative k uses the inverse."""
        if k < 0:
            return self.inverse().pow(-k)
        k %= self.field.circle_order
        result = CirclePoint.identity(self.field)
        base = self
        while k:
            if k & 1:
                result = result.compose(base)
            base = base.square()
            k >>= 1
        return result

    def __pow__(self, k: int) -> "CirclePoint":
        return self.pow(k)

    def order(self) -> int:
        """Least k > 0 with P^k = identity.

        Starts from the group order p + 1 and strips each prime factor q
        while P^(order/q) is still the identity.
        """
        order = self.field.circle_order
        for q in self.field.circle_order_primes:
            while order % q == 0 and self.pow(order // q).is_identity():
                order //= q
        return order

    def pow2_is_identity(self, k: int) -> bool:
        """True iff P^(2^k) is the identity, i.e. P lies in G_k."""
        # P^(2^k) = 1 for some k iff it holds at k = v2(p + 1)
        order = self.field.circle_order
        two_adicity = (order & -order).bit_length() - 1
        point = self
        for _ in range(min(k, two_adicity)):
            if point.is_identity():
                return True
            point = point.square()
        return point.is_identity()


# --- Vectorised Coordinates ---

def compose_coordinates(x0, y0, x1, y1):
    """Group law on galois arrays (broadcasts 0-d against 1-d)."""
    return x0 * x1 - y0 * y1, x0 * y1 + y0 * x1


def square_coordinates(xs, ys):
    """Squaring map pi on galois arrays.

    On the curve 2x^2 - 1 = x^2 - y^2, so this is compose(P, P).
    """
    xy = xs * ys
    return xs * xs - ys * ys, xy + xy
