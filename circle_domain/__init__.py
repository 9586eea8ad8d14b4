"""
Circle-STARK evaluation domains

Evaluation domains over the circle group x^2 + y^2 = 1 of a prime field with
p + 1 a power of two, as used by Circle-STARK provers.

This package provides:
- Prime field arithmetic (via galois)
- Circle group law, squaring map and point orders
- The power-of-two subgroup chain G_0 < G_1 < ... < G_m
- Twin-cosets and standard-position cosets
- Splitting a coset into smaller twin-cosets
- Halving a twin-coset with the squaring map

Usage:
    from circle_domain import CosetBuilder, DomainHalver, SubgroupChain, get_field

    field = get_field(31)
    chain = SubgroupChain.build(field)
    domain = CosetBuilder.canonical_coset(3, chain)
    half = DomainHalver.halve(domain)
"""

# Errors
from .errors import (
    CircleDomainError,
    DegenerateCosetError,
    DivisionByZeroError,
    FieldMismatchError,
    InvalidPointError,
    OrderMismatchError,
    OutOfRangeError,
    UnsupportedModulusError,
)

# Field arithmetic (via galois)
from .field import (
    M31_PRIME,
    FieldElement,
    PrimeField,
    get_field,
)

# Circle group
from .circle import (
    CirclePoint,
    compose_coordinates,
    square_coordinates,
)

# Subgroups
from .subgroup import (
    Subgroup,
    SubgroupChain,
    clear_chain_cache,
    find_generator,
)

# Domains
from .coset import CosetBuilder, CosetDescriptor
from .splitter import DomainSplitter
from .halver import DomainHalver
from .config import DomainConfig

__version__ = "0.1.0"
__all__ = [
    # Errors
    "CircleDomainError",
    "DegenerateCosetError",
    "DivisionByZeroError",
    "FieldMismatchError",
    "InvalidPointError",
    "OrderMismatchError",
    "OutOfRangeError",
    "UnsupportedModulusError",
    # Field
    "M31_PRIME",
    "FieldElement",
    "PrimeField",
    "get_field",
    # Circle
    "CirclePoint",
    "compose_coordinates",
    "square_coordinates",
    # Subgroups
    "Subgroup",
    "SubgroupChain",
    "clear_chain_cache",
    "find_generator",
    # Domains
    "CosetBuilder",
    "CosetDescriptor",
    "DomainSplitter",
    "DomainHalver",
    "DomainConfig",
]
