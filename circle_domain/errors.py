"""Exceptions raised by the circle domain library.

Every failure is a synchronous validation error. None of them is retryable:
they signal either a caller bug or an unsupported field choice, and a domain
built past one of them would yield an unsound proof.
"""


class CircleDomainError(ValueError):
    """Base class for all circle domain errors."""


class UnsupportedModulusError(CircleDomainError):
    """Modulus is not prime, not 3 mod 4, or p + 1 is not a power of two."""


class InvalidPointError(CircleDomainError):
    """Coordinates do not satisfy x^2 + y^2 = 1."""


class DivisionByZeroError(CircleDomainError, ZeroDivisionError):
    """Inverse of the additive identity requested."""


class OrderMismatchError(CircleDomainError):
    """Base point does not have the order the construction requires."""


class DegenerateCosetError(CircleDomainError):
    """Twin-coset halves intersect or a member is fixed by (x, y) -> (x, -y)."""


class OutOfRangeError(CircleDomainError):
    """Requested subgroup, coset, split or halve size is out of range."""


class FieldMismatchError(CircleDomainError):
    """Operands are defined over different moduli."""
