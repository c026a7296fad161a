"""
Tolerance tiers for approximate matrix comparison.

Exact equality (==) is the contract of the matrix type. These tiers are
for callers, and the test suite, comparing results of floating-point
arithmetic where rounding makes exact comparison meaningless:
- EXACT: no tolerance, same as ==
- FP64: machine-precision agreement for short accumulation chains
- LOOSE: four decimal places, for hand-computed reference values
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Bitwise value equality',
)

FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, a few ulps of accumulated rounding',
)

# Reference values quoted to four decimals
LOOSE = ToleranceTier(
    rtol=0.0,
    atol=1e-4,
    name='loose',
    description='Absolute agreement to four decimal places',
)

DEFAULT_TOLERANCE = LOOSE
