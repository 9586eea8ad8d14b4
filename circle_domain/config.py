"""Domain configuration for a Circle-STARK instance."""

from dataclasses import dataclass

from .coset import CosetBuilder, CosetDescriptor
from .errors import OutOfRangeError
from .field import M31_PRIME, PrimeField, get_field
from .subgroup import SubgroupChain


@dataclass
class DomainConfig:
    """
    Evaluation domain configuration.

    The trace domain is the canonical coset of size 2^log_trace_size and the
    evaluation domain the canonical coset of size
    2^(log_trace_size + log_blowup). Both are standard-position cosets.
    """
    modulus: int = M31_PRIME  # p, with p + 1 a power of two
    log_trace_size: int = 4  # Trace domain bits
    log_blowup: int = 1  # Low-degree extension bits

    def __post_init__(self) -> None:
        max_log_size = self.field().log_circle_order - 1
        if self.log_trace_size < 1:
            raise OutOfRangeError(f"log_trace_size must be >= 1, got {self.log_trace_size}")
        if self.log_blowup < 0:
            raise OutOfRangeError(f"log_blowup must be >= 0, got {self.log_blowup}")
        if self.log_evaluation_size > max_log_size:
            raise OutOfRangeError(
                f"evaluation domain log size {self.log_evaluation_size} exceeds "
                f"{max_log_size} for p = {self.modulus}"
            )

    @property
    def log_evaluation_size(self) -> int:
        return self.log_trace_size + self.log_blowup

    def field(self) -> PrimeField:
        return get_field(self.modulus)

    def chain(self) -> SubgroupChain:
        return SubgroupChain.build(self.field())

    def trace_domain(self) -> CosetDescriptor:
        return CosetBuilder.canonical_coset(self.log_trace_size, self.chain())

    def evaluation_domain(self) -> CosetDescriptor:
        return CosetBuilder.canonical_coset(self.log_evaluation_size, self.chain())
