"""Decomposition of a coset into smaller twin-cosets.

For a standard-position coset D = Q*G_m and 1 <= n <= m:

    D = U_{k=0}^{2^(m-n)-1} ( Q^(4k+1)*G_{n-1} u Q^-(4k+1)*G_{n-1} )

Q^4 generates G_{m-1}, so the bases Q*h^k, with h a generator of G_{m-1}, run
over coset representatives of G_{m-1}/G_{n-1}. Using h in place of Q^4
extends the same partition to twin-cosets that are not in standard position.
"""

import logging
from typing import List

from .coset import CosetBuilder, CosetDescriptor
from .errors import OutOfRangeError

_logger = logging.getLogger(__name__)


class DomainSplitter:
    """Splits a coset descriptor into disjoint twin-coset descriptors."""

    @staticmethod
    def split(domain: CosetDescriptor, n: int) -> List[CosetDescriptor]:
        """Partition domain (log size m) into 2^(m-n) twin-cosets of size 2^n.

        Args:
            domain: Twin-coset or standard-position coset of log size m
            n: Log size of each piece, 1 <= n <= m

        Returns:
            Pieces in order k = 0, 1, ..., with bases Q^(4k+1) when domain
            is in standard position. split(domain, m) returns [domain].

        Raises:
            OutOfRangeError: If n is outside [1, m]
        """
        m = domain.log_size
        if n < 1 or n > m:
            raise OutOfRangeError(f"split log size {n} not in [1, {m}]")
        if n == m:
            return [domain]

        if domain.is_standard_position:
            step = domain.base.pow(4)
        else:
            step = domain.chain.subgroup(m - 1).generator

        pieces = []
        base = domain.base
        for _ in range(1 << (m - n)):
            pieces.append(CosetBuilder.twin_coset(base, n, domain.chain, exact_order=False))
            base = base.compose(step)

        _logger.debug("split coset of log size %d into %d pieces of log size %d",
                      m, len(pieces), n)
        return pieces
