"""
Tolerance tiers for numerical checks.

Used by the Quade engine's degeneracy check and by the test suite when
comparing against published reference values.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Published tables report 4 decimals
REFERENCE_4DP = ToleranceTier(
    rtol=1e-4,
    atol=5e-5,
    name='reference_4dp',
    description='Values quoted to 4 decimal places in published examples',
)

# T4 below this fraction of sum(rij^2) is round-off residue of an exact zero.
DEGENERATE_T4_RTOL = 1e-12
