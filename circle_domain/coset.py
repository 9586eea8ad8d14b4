"""Twin-cosets and standard-position cosets of the circle group.

A twin-coset of size 2^n is Q*G_{n-1} u Q^-1*G_{n-1}. It is usable as an
evaluation domain when the two halves are disjoint (Q^2 not in G_{n-1}) and no
member is fixed by J(x, y) = (x, -y), i.e. no member has y = 0.

A standard-position coset of size 2^n is Q*G_n with order(Q) = 2^(n+1). For
such Q it is the same set as the twin-coset above, so both constructors
return the same CosetDescriptor and iterate the two halves.
"""

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Iterator

import numpy as np

from .circle import CirclePoint, compose_coordinates
from .errors import (
    DegenerateCosetError,
    FieldMismatchError,
    OrderMismatchError,
    OutOfRangeError,
)
from .subgroup import Subgroup, SubgroupChain

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CosetDescriptor:
    """Twin-coset (Q, n) over G_{n-1}, of size 2^n.

    Iteration yields the Q half (Q*g for g in G_{n-1}) and then the Q^-1
    half, lazily. Descriptors are never mutated; transforms return new ones.

    Direct construction checks the field, the range of n and the degeneracy
    invariants. Use CosetBuilder to also pin the order of the base.

    Raises:
        FieldMismatchError: If base and chain use different moduli
        OutOfRangeError: If n is not in [1, m]
        DegenerateCosetError: If a member has y = 0 or the halves intersect
    """

    base: CirclePoint
    log_size: int
    chain: SubgroupChain = field(compare=False, repr=False)

    def __post_init__(self) -> None:
        _check_inputs(self.base, self.log_size, self.chain)
        _check_degeneracy(self.base, self.log_size)

    @property
    def size(self) -> int:
        return 1 << self.log_size

    @property
    def half_subgroup(self) -> Subgroup:
        """G_{n-1}, the subgroup each half is a coset of."""
        return self.chain.subgroup(self.log_size - 1)

    @property
    def is_standard_position(self) -> bool:
        """True iff the set is also the single coset base*G_n."""
        return self.base.order() == 1 << (self.log_size + 1)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[CirclePoint]:
        half = self.half_subgroup
        for g in half:
            yield self.base.compose(g)
        base_inv = self.base.inverse()
        for g in half:
            yield base_inv.compose(g)

    def __contains__(self, point) -> bool:
        if not isinstance(point, CirclePoint) or point.field.p != self.base.field.p:
            return False
        half = self.half_subgroup
        return (
            self.base.inverse().compose(point) in half
            or self.base.compose(point) in half
        )

    def at(self, index: int) -> CirclePoint:
        """Point at position index in iteration order."""
        if index < 0 or index >= self.size:
            raise IndexError(f"index {index} out of range for coset of size {self.size}")
        half_size = self.size // 2
        half = self.half_subgroup
        if index < half_size:
            return self.base.compose(half.at(index))
        return self.base.inverse().compose(half.at(index - half_size))

    def points(self) -> FrozenSet[CirclePoint]:
        """Materialise the coset as a set."""
        return frozenset(self)

    def coordinates(self):
        """All points as galois arrays (xs, ys), in iteration order."""
        hx, hy = self.half_subgroup.coordinates()
        base_inv = self.base.inverse()
        ax, ay = compose_coordinates(self.base.x, self.base.y, hx, hy)
        bx, by = compose_coordinates(base_inv.x, base_inv.y, hx, hy)
        return np.concatenate((ax, bx)), np.concatenate((ay, by))


class CosetBuilder:
    """Constructors for validated coset descriptors."""

    @staticmethod
    def twin_coset(
        q: CirclePoint, n: int, chain: SubgroupChain, exact_order: bool = True
    ) -> CosetDescriptor:
        """Twin-coset q*G_{n-1} u q^-1*G_{n-1} of size 2^n.

        Args:
            q: Base point
            n: Log size, n >= 1
            chain: Subgroup chain of q's field
            exact_order: Require order(q) = 2^(n+1). With False any q giving
                a non-degenerate twin-coset is accepted (used when splitting
                and halving).

        Raises:
            OutOfRangeError: If n < 1 or n > m
            OrderMismatchError: If exact_order and order(q) != 2^(n+1)
            DegenerateCosetError: If a member has y = 0 or the halves intersect
        """
        _check_inputs(q, n, chain)
        if exact_order:
            _require_order(q, n)
        domain = CosetDescriptor(q, n, chain)

        _logger.debug("twin-coset base=%s n=%d p=%d", q.as_tuple(), n, chain.field.p)
        return domain

    @staticmethod
    def standard_position_coset(q: CirclePoint, n: int, chain: SubgroupChain) -> CosetDescriptor:
        """Standard-position coset q*G_n, order(q) = 2^(n+1).

        Built from the two halves q*G_{n-1} and q^-1*G_{n-1}, so the result
        is identical to twin_coset(q, n, chain).
        """
        _check_inputs(q, n, chain)
        _require_order(q, n)
        return CosetBuilder.twin_coset(q, n, chain)

    @staticmethod
    def canonical_coset(n: int, chain: SubgroupChain) -> CosetDescriptor:
        """Standard-position coset of size 2^n based at the generator of G_{n+1}."""
        if n < 1 or n + 1 > chain.log_order:
            raise OutOfRangeError(
                f"canonical coset log size {n} not in [1, {chain.log_order - 1}]"
            )
        return CosetBuilder.standard_position_coset(chain.subgroup(n + 1).generator, n, chain)


def _check_inputs(q: CirclePoint, n: int, chain: SubgroupChain) -> None:
    if q.field.p != chain.field.p:
        raise FieldMismatchError(f"point over GF({q.field.p}), chain over GF({chain.field.p})")
    if n < 1 or n > chain.log_order:
        raise OutOfRangeError(
            f"coset log size {n} not in [1, {chain.log_order}]"
        )


def _check_degeneracy(q: CirclePoint, n: int) -> None:
    # y = 0 members are G_1 = {(1, 0), (-1, 0)}; q*g in G_1 iff q in G_1*G_{n-1}
    if q.pow2_is_identity(max(1, n - 1)):
        raise DegenerateCosetError(
            f"twin-coset of {q.as_tuple()} with n={n} contains a point with y = 0"
        )
    # halves intersect iff q^2 in G_{n-1} iff q^(2^n) = 1
    if q.pow2_is_identity(n):
        raise DegenerateCosetError(
            f"twin-coset halves of {q.as_tuple()} with n={n} intersect"
        )


def _require_order(q: CirclePoint, n: int) -> None:
    expected = 1 << (n + 1)
    order = q.order()
    if order != expected:
        raise OrderMismatchError(
            f"base point {q.as_tuple()} has order {order}, expected {expected}"
        )
