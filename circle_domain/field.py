"""Prime field GF(p) for the circle group.

Uses galois library for all field arithmetic. A PrimeField wraps the galois
class for one modulus and is passed explicitly to every point and domain
constructor, so several moduli can be used side by side.

Only primes with p = 3 (mod 4) are accepted: -1 is then a non-residue, so
x^2 + y^2 = 1 has no points at infinity and the circle group has order p + 1.
"""

import functools
from typing import Iterable, Optional

import galois

from .errors import DivisionByZeroError, UnsupportedModulusError

# Mersenne prime: p = 2^31 - 1, so p + 1 = 2^31
M31_PRIME = (1 << 31) - 1

FieldElement = galois.FieldArray
"""0-d galois array holding one value in [0, p)."""


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def log2(size: int) -> int:
    """Compute log2 of size (must be power of 2)."""
    assert is_power_of_two(size), f"{size} is not a power of two"
    return size.bit_length() - 1


class PrimeField:
    """Field configuration for one modulus p.

    Attributes:
        p: The prime modulus
        GF: galois field class GF(p)
        circle_order: Order of the circle group, p + 1
        circle_order_primes: Distinct prime factors of p + 1
        log_circle_order: m with p + 1 = 2^m, or None when p + 1 is not a
            power of two (only possible with require_power_of_two=False)
    """

    def __init__(self, p: int, require_power_of_two: bool = True) -> None:
        """Validate p and build the galois field.

        Args:
            p: Prime modulus, p = 3 (mod 4)
            require_power_of_two: Reject p unless p + 1 is a power of two.
                Subgroup chains and cosets need this; the relaxed mode only
                serves point arithmetic over general circle groups.

        Raises:
            UnsupportedModulusError: If p fails any of the checks above
        """
        if p < 3 or not galois.is_prime(p):
            raise UnsupportedModulusError(f"modulus {p} is not an odd prime")
        if p % 4 != 3:
            raise UnsupportedModulusError(f"modulus {p} is not 3 mod 4")
        if require_power_of_two and not is_power_of_two(p + 1):
            raise UnsupportedModulusError(f"p + 1 = {p + 1} is not a power of two")

        self.p = p
        self.GF = galois.GF(p)
        self.circle_order = p + 1
        primes, _ = galois.factors(p + 1)
        self.circle_order_primes = tuple(int(q) for q in primes)
        self.log_circle_order: Optional[int] = (
            log2(p + 1) if is_power_of_two(p + 1) else None
        )

    def __repr__(self) -> str:
        return f"PrimeField({self.p})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, PrimeField):
            return NotImplemented
        return self.p == other.p

    def __hash__(self) -> int:
        return hash(("PrimeField", self.p))

    # --- Element Construction ---

    def element(self, value) -> FieldElement:
        """Return value mod p as a field element (accepts negative ints)."""
        return self.GF(int(value) % self.p)

    def elements(self, values: Iterable) -> FieldElement:
        """Return a 1-d galois array of values mod p."""
        return self.GF([int(v) % self.p for v in values])

    def zero(self) -> FieldElement:
        return self.GF(0)

    def one(self) -> FieldElement:
        return self.GF(1)

    # --- Arithmetic ---

    def add(self, a: FieldElement, b: FieldElement) -> FieldElement:
        return a + b

    def sub(self, a: FieldElement, b: FieldElement) -> FieldElement:
        return a - b

    def mul(self, a: FieldElement, b: FieldElement) -> FieldElement:
        return a * b

    def neg(self, a: FieldElement) -> FieldElement:
        return -a

    def eq(self, a: FieldElement, b: FieldElement) -> bool:
        return int(a) == int(b)

    def inv(self, a: FieldElement) -> FieldElement:
        """Modular inverse using Fermat's little theorem: a^(p-2).

        Agrees with galois' own inverse (a ** -1) for every non-zero a.

        Raises:
            DivisionByZeroError: If a is zero
        """
        if int(a) == 0:
            raise DivisionByZeroError(f"zero has no inverse in GF({self.p})")
        return a ** (self.p - 2)

    def sqrt(self, a: FieldElement) -> Optional[FieldElement]:
        """Square root via a^((p+1)/4), valid since p = 3 (mod 4).

        Returns the smaller of the two roots, or None if a is a non-residue.
        """
        root = a ** ((self.p + 1) // 4)
        if int(root * root) != int(a):
            return None
        other = -root
        return root if int(root) <= int(other) else other

    def is_square(self, a: FieldElement) -> bool:
        return self.sqrt(a) is not None


@functools.lru_cache(maxsize=None)
def get_field(p: int) -> PrimeField:
    """Return the shared PrimeField for p (p + 1 must be a power of two)."""
    return PrimeField(p)
