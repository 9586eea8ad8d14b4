"""Power-of-two subgroup chain of the circle group.

For p + 1 = 2^m the circle group is cyclic of order 2^m, so for every
0 <= k <= m it has exactly one subgroup G_k of order 2^k, and
G_0 < G_1 < ... < G_m. Each G_k is described by a generator and k; points
are produced lazily since 2^k can be far too large to materialise.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Union

from .circle import CirclePoint, compose_coordinates
from .errors import (
    FieldMismatchError,
    OrderMismatchError,
    OutOfRangeError,
    UnsupportedModulusError,
)
from .field import PrimeField

_logger = logging.getLogger(__name__)

# generate_subgroup() returns an explicit list up to this log order
MAX_EXPLICIT_LOG_ORDER = 16

# One chain per modulus, built at most once
_CHAIN_CACHE: Dict[int, "SubgroupChain"] = {}
_CHAIN_LOCK = threading.Lock()


@dataclass(frozen=True)
class Subgroup:
    """Descriptor of G_k: a generator of order 2^k plus k."""

    generator: CirclePoint
    log_order: int

    @property
    def field(self) -> PrimeField:
        return self.generator.field

    @property
    def order(self) -> int:
        return 1 << self.log_order

    def __len__(self) -> int:
        return self.order

    def __iter__(self) -> Iterator[CirclePoint]:
        """Yield g^0, g^1, ..., g^(2^k - 1)."""
        point = CirclePoint.identity(self.field)
        for _ in range(self.order):
            yield point
            point = point.compose(self.generator)

    def __contains__(self, point) -> bool:
        if not isinstance(point, CirclePoint) or point.field.p != self.field.p:
            return False
        return point.pow2_is_identity(self.log_order)

    def at(self, index: int) -> CirclePoint:
        """Return g^index without walking the subgroup."""
        return self.generator.pow(index % self.order)

    def coordinates(self):
        """All points as galois arrays (xs, ys), in the same order as iteration.

        Built by doubling: the block [s, 2s) is the block [0, s) composed with
        g^s, so each step is one vectorised group-law evaluation.
        """
        GF = self.field.GF
        xs = GF.Zeros(self.order)
        ys = GF.Zeros(self.order)
        xs[0] = GF(1)

        step = self.generator
        size = 1
        while size < self.order:
            block_x, block_y = compose_coordinates(xs[:size], ys[:size], step.x, step.y)
            xs[size:2 * size] = block_x
            ys[size:2 * size] = block_y
            step = step.square()
            size *= 2
        return xs, ys


class SubgroupChain:
    """Generator of the full circle group and the derived G_k descriptors.

    Use SubgroupChain.build() rather than the constructor; it validates the
    modulus and the generator and shares one chain per modulus.
    """

    def __init__(self, field: PrimeField, generator: CirclePoint) -> None:
        self.field = field
        self.generator = generator
        self.log_order = field.log_circle_order

        # generators[k] = g^(2^(m-k)) has order 2^k
        generators = [generator]
        for _ in range(self.log_order):
            generators.append(generators[-1].square())
        generators.reverse()
        self._subgroups = tuple(Subgroup(g, k) for k, g in enumerate(generators))

    def __repr__(self) -> str:
        x, y = self.generator.as_tuple()
        return f"SubgroupChain(p={self.field.p}, m={self.log_order}, g=({x}, {y}))"

    @classmethod
    def build(
        cls, field: PrimeField, candidate: Optional[CirclePoint] = None
    ) -> "SubgroupChain":
        """Build the chain for field.

        Args:
            field: Field with p + 1 = 2^m
            candidate: Optional generator to use instead of searching. Chains
                built from a candidate are not cached.

        Raises:
            UnsupportedModulusError: If p + 1 is not a power of two
            OrderMismatchError: If candidate does not have order p + 1
        """
        if field.log_circle_order is None:
            raise UnsupportedModulusError(
                f"p + 1 = {field.circle_order} is not a power of two"
            )

        if candidate is not None:
            if candidate.field.p != field.p:
                raise FieldMismatchError(
                    f"candidate is over GF({candidate.field.p}), chain over GF({field.p})"
                )
            order = candidate.order()
            if order != field.circle_order:
                raise OrderMismatchError(
                    f"candidate {candidate.as_tuple()} has order {order}, "
                    f"expected {field.circle_order}"
                )
            return cls(field, candidate)

        chain = _CHAIN_CACHE.get(field.p)
        if chain is not None:
            return chain
        with _CHAIN_LOCK:
            chain = _CHAIN_CACHE.get(field.p)
            if chain is None:
                _logger.debug("building subgroup chain for p=%d", field.p)
                chain = cls(field, find_generator(field))
                _CHAIN_CACHE[field.p] = chain
        return chain

    def subgroup(self, k: int) -> Subgroup:
        """Return the descriptor of G_k, 0 <= k <= m."""
        if k < 0 or k > self.log_order:
            raise OutOfRangeError(f"subgroup log order {k} not in [0, {self.log_order}]")
        return self._subgroups[k]

    def generate_subgroup(self, k: int) -> Union[List[CirclePoint], Iterator[CirclePoint]]:
        """Points of G_k: a list for small k, a lazy iterator otherwise."""
        subgroup = self.subgroup(k)
        if k <= MAX_EXPLICIT_LOG_ORDER:
            return list(subgroup)
        return iter(subgroup)


def find_generator(field: PrimeField) -> CirclePoint:
    """Deterministic search for a point of order p + 1.

    Tries x = 0, 1, 2, ... and for each x the lift with the smaller y first;
    returns the first candidate whose order() is the full group order.
    """
    for x in range(field.p):
        for candidate in CirclePoint.from_x(field, x):
            if candidate.order() == field.circle_order:
                _logger.debug("generator for p=%d: %s", field.p, candidate.as_tuple())
                return candidate
    raise UnsupportedModulusError(f"no generator of order {field.circle_order} found")


def clear_chain_cache() -> None:
    """Drop all cached chains."""
    with _CHAIN_LOCK:
        _CHAIN_CACHE.clear()
