"""Halving a twin-coset with the squaring map pi.

pi(P) = P^2 maps G_{n-1} two-to-one onto G_{n-2}, so a twin-coset
Q*G_{n-1} u Q^-1*G_{n-1} of size 2^n maps onto the twin-coset
pi(Q)*G_{n-2} u pi(Q)^-1*G_{n-2} of size 2^(n-1). If order(Q) = 2^(n+1)
then order(pi(Q)) = 2^n, so standard position is preserved.
"""

from .circle import square_coordinates
from .coset import CosetBuilder, CosetDescriptor
from .errors import OutOfRangeError


class DomainHalver:
    """Applies pi to coset descriptors."""

    @staticmethod
    def halve(domain: CosetDescriptor) -> CosetDescriptor:
        """Return the descriptor (pi(Q), n - 1), computed from the base only.

        Raises:
            OutOfRangeError: If domain has log size below 2
        """
        if domain.log_size < 2:
            raise OutOfRangeError(f"cannot halve coset of log size {domain.log_size}")
        return CosetBuilder.twin_coset(
            domain.base.square(), domain.log_size - 1, domain.chain, exact_order=False
        )

    @staticmethod
    def halve_points(domain: CosetDescriptor):
        """Apply pi pointwise to every member of domain.

        Returns coordinate arrays (xs, ys) of length domain.size; every point
        of the halved coset appears exactly twice.
        """
        xs, ys = domain.coordinates()
        return square_coordinates(xs, ys)
